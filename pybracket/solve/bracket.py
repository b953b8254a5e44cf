from collections.abc import Callable

import numpy as np

from pybracket.solve.exception import SolverError
from pybracket.solve.results import SearchInfo
from pybracket.util import disp_enter, disp_exit, disp_print


# Written by Eric J. Whitney, January 2023.


# ======================================================================

def bracket_minimum(f: Callable[..., float], x0: float = 0.0,
                    s: float = 1e-2, k: float = 2.0, *, f_args=(),
                    max_steps: int = 50, full_output: bool = False,
                    disp: int | bool = None):
    """
    Find an interval (`a`, `b`) bracketing a local minimum of a unimodal
    function `f` by stepping downhill from `x0` with an expanding step
    size.

    The first step is taken from `x0` to ``x0 + s``.  If this goes
    uphill the search direction is reversed.  Steps then continue in the
    downhill direction, growing by a factor `k` each time, until the
    function increases again.  The last three points visited then
    bracket the minimum.

    Parameters
    ----------
    f : Callable[[float, ...], float]
        Scalar function to bracket the minimum of.
    x0 : float, default = 0.0
        Starting point.
    s : float, default = 1e-2
        Initial step size.  May be negative.
    k : float, default = 2.0
        Step growth factor applied after each downhill step.
    f_args : optional
        Extra arguments passed to be passed to `f`.
    max_steps : int, default = 50
        Stops once this number of steps has been completed.
    full_output : bool, default = False
        If `True`, also return a `SearchInfo` object.
    disp : int or bool, optional
        Display progress (see ``pybracket.util.disp_enter``).

    Returns
    -------
    a, b : (float, float)
        `x`-values bracketing the minimum, with ``a < b``.
    info : SearchInfo
        Only returned if ``full_output=True``.

    Raises
    ------
    ValueError
        Illegal starting conditions.

    SolverError
        Failure to converge raises a `SolverError` exception including
        the following attributes:

        - `a`, `b`, `c`: Most recent three points visited.
        - `ya`, `yb`, `yc`: Function values corresponding to `a`, `b`,
          `c`.
        - `flag` and `detail`:
            - 1: Reached max_steps.
        - 'steps': Number of steps taken.
        - 'fevals': Number of function evaluations.

    Notes
    -----
    A strictly monotonic function never turns uphill, so the search can
    only finish by reaching `max_steps`.

    Examples
    --------
    >>> a, b = bracket_minimum(lambda x: (x - 1.0) ** 2, x0=-1.0, s=0.5)
    >>> bool(a < 1.0 < b)
    True
    """
    if s == 0:
        raise ValueError("Requires s != 0.")

    if k < 1:
        raise ValueError("Requires k >= 1.")

    if max_steps < 1:
        raise ValueError("Requires max_steps >= 1.")

    disp_enter(disp)
    try:
        disp_print("Bracketing Minimum:")
        a, b = x0, x0 + s
        ya, yb = f(a, *f_args), f(b, *f_args)
        steps, fevals = 0, 2

        # Make sure we are heading downhill.
        if yb > ya:
            a, ya, b, yb = b, yb, a, ya
            s = -s

        # Main loop.
        while True:
            c = b + s
            yc = f(c, *f_args)
            steps += 1
            fevals += 1

            disp_print(f"... Step {steps}: x = [{a:+.6g}, {b:+.6g}, "
                       f"{c:+.6g}], f = [{ya:+.6g}, {yb:+.6g}, "
                       f"{yc:+.6g}]")

            if yc > yb:
                break  # Turned uphill.

            if steps >= max_steps:
                raise SolverError("bracket_minimum() failed to converge:",
                                  flag=1, details="Reached max_steps.",
                                  a=a, b=b, c=c, ya=ya, yb=yb, yc=yc,
                                  steps=steps, fevals=fevals)

            # Advance the window and grow the step.
            a, ya, b, yb = b, yb, c, yc
            s *= k

        disp_print("... Bracketed.")

    finally:
        disp_exit()

    bracket = (min(a, c), max(a, c))
    if full_output:
        return bracket, SearchInfo(its=steps, fevals=fevals)

    return bracket


# ----------------------------------------------------------------------

def bracket_sign_change(f: Callable[..., float], a: float, b: float,
                        k: float = 2.0, *, f_args=(),
                        max_steps: int = 50, full_output: bool = False,
                        disp: int | bool = None):
    """
    Given an initial guessed range `a` to `b`, the range is expanded
    symmetrically about its centre until `f(x)` changes sign across it.
    This is typically applied to the derivative of an objective, giving
    a starting interval for `bisection`.

    Parameters
    ----------
    f : Callable[[float, ...], float]
        Scalar function taking a float as the first argument.
    a, b : float
        Starting interval, in any order.
    k : float, default = 2.0
        The half-width of the interval is multiplied by `k` on each
        step.  Requires ``k > 1``.
    f_args : optional
        Extra arguments passed to be passed to `f()`.
    max_steps : int, default = 50
        Stops once this number of steps has been completed.
    full_output : bool, default = False
        If `True`, also return a `SearchInfo` object.
    disp : int or bool, optional
        Display progress (see ``pybracket.util.disp_enter``).

    Returns
    -------
    a, b : float, float
        `x`-values bracketing the sign change, with ``a < b``.
    info : SearchInfo
        Only returned if ``full_output=True``.

    Raises
    ------
    ValueError
        Illegal starting conditions.

    SolverError
        Failure to converge raises a `SolverError` exception including
        the following attributes:

        - `a`, `b`: Most recent bracket values used.
        - `fa`, `fb`: Function values corresponding to `a`, `b`.
        - `flag` and `detail`:
            - 1: Reached max_steps.
            - 5: `f(a)` or `f(b)` was not finite.
        - 'steps': Number of steps taken.
        - 'fevals': Number of function evaluations.

    Notes
    -----
    A bracket is also accepted if either `f(a)` or `f(b)` is exactly
    zero.

    Examples
    --------
    Equation :math:`y = x^2 - 3x + 2` has roots at `x` = 1 and `x` = 2.
    >>> bracket_sign_change(lambda x: x**2 - 3 * x + 2, 2.5, 3.0)
    (1.75, 3.75)
    """
    if a == b:
        raise ValueError("a, b must have different values.")

    if k <= 1:
        raise ValueError("Requires k > 1.")

    if a > b:
        a, b = b, a

    disp_enter(disp)
    try:
        disp_print("Bracketing Sign Change:")
        centre, half_width = 0.5 * (a + b), 0.5 * (b - a)
        fa, fb = f(a, *f_args), f(b, *f_args)
        steps, fevals = 0, 2

        while True:
            if not (np.isfinite(fa) and np.isfinite(fb)):
                raise SolverError("bracket_sign_change() failed to "
                                  "converge:", flag=5,
                                  details="Non-finite function value.",
                                  a=a, b=b, fa=fa, fb=fb, steps=steps,
                                  fevals=fevals)

            if np.sign(fa) * np.sign(fb) <= 0:
                break  # Bracketed.

            if steps >= max_steps:
                raise SolverError("bracket_sign_change() failed to "
                                  "converge:", flag=1,
                                  details="Reached max_steps.",
                                  a=a, b=b, fa=fa, fb=fb, steps=steps,
                                  fevals=fevals)

            half_width *= k
            a, b = centre - half_width, centre + half_width
            fa, fb = f(a, *f_args), f(b, *f_args)
            steps += 1
            fevals += 2

            disp_print(f"... Step {steps}: x = [{a:+.6g}, {b:+.6g}], "
                       f"f = [{fa:+.6g}, {fb:+.6g}]")

        disp_print("... Bracketed.")

    finally:
        disp_exit()

    if full_output:
        return (a, b), SearchInfo(its=steps, fevals=fevals)

    return a, b


# ----------------------------------------------------------------------
