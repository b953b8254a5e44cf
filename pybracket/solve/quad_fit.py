"""
Quadratic Fit Search (:mod:`pybracket.solve.quad_fit`)
======================================================

.. currentmodule:: pybracket.solve.quad_fit

Refinement of a three-point bracket of a minimum by repeatedly jumping
to the minimum of the quadratic through the points.
"""
import operator
from collections.abc import Callable

import numpy as np

from pybracket.solve.exception import SolverError
from pybracket.solve.results import SearchInfo
from pybracket.util import disp_enter, disp_exit, disp_print

# Written by Eric J. Whitney, April 2024.


# ======================================================================

def quad_fit_min(a: float, b: float, c: float,
                 ya: float, yb: float, yc: float) -> float:
    r"""
    Returns the stationary point of the quadratic passing through
    `(a, ya)`, `(b, yb)` and `(c, yc)`:

    .. math::

        x^* = \frac{1}{2} \frac{y_a(b^2 - c^2) + y_b(c^2 - a^2) +
              y_c(a^2 - b^2)}{y_a(b - c) + y_b(c - a) + y_c(a - b)}

    This is a minimum when the quadratic is convex, which is always
    true for a valley triple ``a < b < c`` with ``yb < ya`` and
    ``yb < yc``.

    Parameters
    ----------
    a, b, c : float
        Pairwise distinct `x`-values, in any order.
    ya, yb, yc : float
        Function values corresponding to `a`, `b`, `c`.

    Returns
    -------
    float
        `x`-value of the stationary point.

    Raises
    ------
    ValueError
        If `a`, `b`, `c` are not pairwise distinct.
    SolverError
        With ``flag=3`` if the points are collinear, so that no unique
        stationary point exists.

    Examples
    --------
    >>> quad_fit_min(0.0, 1.0, 3.0, 4.0, 1.0, 1.0)
    2.0
    """
    if a == b or b == c or a == c:
        raise ValueError("a, b, c must be pairwise distinct.")

    num = ya * (b**2 - c**2) + yb * (c**2 - a**2) + yc * (a**2 - b**2)
    den = ya * (b - c) + yb * (c - a) + yc * (a - b)
    if den == 0:
        raise SolverError("quad_fit_min() failed:", flag=3,
                          details="Degenerate fit, points are collinear.",
                          a=a, b=b, c=c, ya=ya, yb=yb, yc=yc)

    x = 0.5 * num / den
    if not np.isfinite(x):
        raise SolverError("quad_fit_min() failed:", flag=3,
                          details="Degenerate fit, points are nearly "
                                  "collinear.",
                          a=a, b=b, c=c, ya=ya, yb=yb, yc=yc)

    return x


# ----------------------------------------------------------------------

def quad_fit_coeffs(a: float, b: float, c: float, ya: float, yb: float,
                    yc: float) -> tuple[float, float, float]:
    r"""
    Coefficients `(p1, p2, p3)` of the quadratic :math:`q(x) = p_1 +
    p_2 x + p_3 x^2` passing through `(a, ya)`, `(b, yb)` and `(c, yc)`,
    found by directly solving the linear system:

    .. math::

        \begin{bmatrix} 1 & a & a^2 \\ 1 & b & b^2 \\ 1 & c & c^2
        \end{bmatrix}
        \begin{bmatrix} p_1 \\ p_2 \\ p_3 \end{bmatrix} =
        \begin{bmatrix} y_a \\ y_b \\ y_c \end{bmatrix}

    The stationary point is then at :math:`x = -p_2 / 2 p_3`, which is
    an alternative to ``quad_fit_min(...)``.

    Raises
    ------
    ValueError
        If `a`, `b`, `c` are not pairwise distinct.

    Examples
    --------
    >>> p1, p2, p3 = quad_fit_coeffs(0.0, 1.0, 3.0, 4.0, 1.0, 1.0)
    >>> round(-p2 / (2 * p3), 12)
    2.0
    """
    x = np.array([a, b, c], dtype=float)
    if np.unique(x).size != 3:
        raise ValueError("a, b, c must be pairwise distinct.")

    p = np.linalg.solve(np.vander(x, 3, increasing=True),
                        np.array([ya, yb, yc], dtype=float))
    return float(p[0]), float(p[1]), float(p[2])


# ----------------------------------------------------------------------

def quadratic_fit_search(f: Callable[..., float], a: float, b: float,
                         c: float, n: int, *, f_args=(),
                         full_output: bool = False,
                         disp: int | bool = None):
    """
    Refine a valley triple ``a < b < c`` (with ``f(a) > f(b)`` and
    ``f(c) > f(b)``) bracketing a minimum of `f` by quadratic fit
    search.

    On each of `n` iterations the minimum `x` of the quadratic through
    the three points is found (see ``quad_fit_min(...)``) and `f(x)` is
    evaluated.  If `x` lies in ``[a, b]`` the new triple is ``(a, x,
    b)``, otherwise ``(b, x, c)``.  Should `f(x)` fail to improve on
    `f(b)`, `b` is kept as the middle point and `x` replaces the outer
    point on its own side instead.  `f(b)` is then never above the outer
    values, but a tie ``f(x) == f(b)`` leaves a non-strict valley where
    the new outer point has the same value as `b`.

    Parameters
    ----------
    f : Callable[[float, ...], float]
        Scalar function to minimise.
    a, b, c : float
        Starting triple with ``a < b < c``.
    n : int
        Number of iterations, ``n >= 0``.  There is no convergence test;
        exactly `n` iterations are done unless the fit stops moving
        (``x == b``), in which case further iterations would make no
        change and are skipped.
    f_args : optional
        Extra arguments passed to be passed to `f`.
    full_output : bool, default = False
        If `True`, also return a `SearchInfo` object.
    disp : int or bool, optional
        Display progress (see ``pybracket.util.disp_enter``).

    Returns
    -------
    a, b, c : float, float, float
        Refined valley triple.
    info : SearchInfo
        Only returned if ``full_output=True``.

    Raises
    ------
    ValueError
        Illegal starting conditions (not ordered or not a valley).

    SolverError
        Raised if the fit degenerates, including the following
        attributes:

        - `a`, `b`, `c`: Most recent triple.
        - `ya`, `yb`, `yc`: Function values corresponding to `a`, `b`,
          `c`.
        - `flag` and `detail`:
            - 3: Degenerate fit (points collinear).
            - 4: Fitted minimum `x` outside of ``(a, c)``.
        - 'its': Number of completed iterations.
        - 'fevals': Number of function evaluations.

    Examples
    --------
    For a quadratic function the fit is exact and the minimum is found
    on the first iteration:

    >>> quadratic_fit_search(lambda x: (x - 2.0)**2, 0.0, 1.0, 5.0, 3)
    (1.0, 2.0, 5.0)
    """
    if not (a < b < c):
        raise ValueError("Requires a < b < c.")

    n = operator.index(n)
    if n < 0:
        raise ValueError("Requires n >= 0.")

    ya, yb, yc = f(a, *f_args), f(b, *f_args), f(c, *f_args)
    if not (ya > yb and yc > yb):
        raise ValueError("Requires f(a) > f(b) and f(c) > f(b).")

    disp_enter(disp)
    try:
        disp_print("Quadratic Fit Search:")
        its, fevals = 0, 3
        details = "Completed iterations."

        for its in range(n):
            try:
                x = quad_fit_min(a, b, c, ya, yb, yc)
            except SolverError as e:
                raise SolverError("quadratic_fit_search() failed:",
                                  flag=e.flag, details=e.details,
                                  a=a, b=b, c=c, ya=ya, yb=yb, yc=yc,
                                  its=its, fevals=fevals) from e

            if not (a < x < c):
                raise SolverError("quadratic_fit_search() failed:",
                                  flag=4, details="Fitted minimum outside "
                                                  "bracket.",
                                  x=x, a=a, b=b, c=c, ya=ya, yb=yb,
                                  yc=yc, its=its, fevals=fevals)

            if x == b:
                details = "Fit stationary."
                break

            yx = f(x, *f_args)
            fevals += 1

            if x < b:
                if yx < yb:
                    b, c, yb, yc = x, b, yx, yb
                else:
                    a, ya = x, yx
            else:
                if yx < yb:
                    a, b, ya, yb = b, x, yb, yx
                else:
                    c, yc = x, yx

            disp_print(f"... Iteration {its + 1}: x = [{a:+.6g}, "
                       f"{b:+.6g}, {c:+.6g}], f = [{ya:+.6g}, {yb:+.6g}, "
                       f"{yc:+.6g}]")

        else:
            its = n

        disp_print(f"... {details}")

    finally:
        disp_exit()

    if full_output:
        return (a, b, c), SearchInfo(its=its, fevals=fevals,
                                     details=details)

    return a, b, c
