"""
Bisection applied to the derivative of an objective, narrowing an
interval about a stationary point.
"""
from collections.abc import Callable

import numpy as np

from pybracket.solve.exception import SolverError
from pybracket.solve.results import SearchInfo
from pybracket.util import disp_enter, disp_exit, disp_print


# Written by Eric J. Whitney, January 2022.


# ----------------------------------------------------------------------

def bisection(g: Callable[..., float], a: float, b: float, eps: float, *,
              g_args=(), max_its: int = 200, full_output: bool = False,
              disp: int | bool = None):
    r"""
    Narrow the interval :math:`[a, b]` containing a zero of :math:`g(x)`
    by the bisection method until its width is no more than `eps`.  For
    bisection to work :math:`g(x)` must change sign across the interval,
    i.e. ``g(a)`` and ``g(b)`` must return values of opposite sign.

    When minimising an objective :math:`f(x)`, `g` is usually the
    derivative :math:`f'(x)` and the result brackets a stationary point.

    The number of iterations is fixed by the starting width, being
    :math:`\lceil \log_2((b - a) / \epsilon) \rceil` unless an exact
    zero is hit along the way.

    Examples
    --------
    Derivative of :math:`f(x) = x^2 - x - 1`, with a minimum at
    :math:`x = 0.5`:

    >>> bisection(lambda x: 2 * x - 1, 0.0, 2.0, 0.25)
    (0.5, 0.5)
    >>> bisection(lambda x: 2 * x - 1, 0.0, 1.5, 0.25)
    (0.375, 0.5625)

    Parameters
    ----------
    g : Callable[[float, ...], float]
        Function which we are searching for a zero of.
    a, b : float
        Each end of the search interval, with ``a < b``.
    eps : float
        Stop when ``b - a <= eps``.  Requires ``eps > 0``.
    g_args : optional
        Extra arguments passed to be passed to `g`.
    max_its : int, default = 200
        Maximum number of iterations.
    full_output : bool, default = False
        If `True`, also return a `SearchInfo` object.
    disp : int or bool, optional
        Display progress (see ``pybracket.util.disp_enter``).

    Returns
    -------
    a, b : float, float
        Final interval with ``b - a <= eps``.  If an exact zero `x` is
        found, both values are `x`.
    info : SearchInfo
        Only returned if ``full_output=True``.

    Raises
    ------
    ValueError
        If ``a >= b``, ``eps <= 0``, ``g(a)`` or ``g(b)`` is not finite,
        or ``g(a)`` and ``g(b)`` have the same sign.

    SolverError
        Failure to converge raises a `SolverError` exception including
        the following attributes:

        - `a`, `b`: Most recent interval.
        - `ga`: Function value corresponding to `a`.
        - `flag` and `detail`:
            - 1: Reached max_its.
            - 2: `eps` is below floating point resolution.
            - 5: `g(x)` was not finite at a midpoint `x`.
        - 'its': Number of iterations.
        - 'fevals': Number of function evaluations.
    """
    if a >= b:
        raise ValueError("Requires a < b.")

    if eps <= 0:
        raise ValueError("Requires eps > 0.")

    ga, gb = g(a, *g_args), g(b, *g_args)
    if ga == 0:
        return _bisect_result((a, a), 0, 2, full_output)
    if gb == 0:
        return _bisect_result((b, b), 0, 2, full_output)

    if not (np.isfinite(ga) and np.isfinite(gb)):
        raise ValueError("g(a) and g(b) must be finite.")

    if np.sign(ga) * np.sign(gb) >= 0:
        raise ValueError("g(a) and g(b) must have opposite sign.")

    disp_enter(disp)
    try:
        disp_print("Bisection:")
        its, fevals = 0, 2
        while b - a > eps:
            if its >= max_its:
                raise SolverError("bisection() failed to converge:",
                                  flag=1, details="Reached max_its.",
                                  a=a, b=b, ga=ga, its=its, fevals=fevals)

            x = (a + b) / 2
            if not (a < x < b):
                raise SolverError("bisection() failed to converge:",
                                  flag=2, details="Interval cannot be "
                                  "divided further, eps too small.",
                                  a=a, b=b, ga=ga, its=its, fevals=fevals)

            gx = g(x, *g_args)
            its += 1
            fevals += 1

            if not np.isfinite(gx):
                raise SolverError("bisection() failed to converge:",
                                  flag=5, details="Non-finite function "
                                  "value.", x=x, gx=gx, a=a, b=b, ga=ga,
                                  its=its, fevals=fevals)

            disp_print(f"... Iteration {its}: x = [{a:+.6g}, {x:+.6g}, "
                       f"{b:+.6g}], g(x) = {gx:+.6g}")

            # Narrow interval on the side holding the sign change.
            if gx == 0:
                a = b = x
            elif np.sign(gx) == np.sign(ga):
                a, ga = x, gx
            else:
                b = x

        disp_print("... Converged.")

    finally:
        disp_exit()

    return _bisect_result((a, b), its, fevals, full_output)


# ----------------------------------------------------------------------

def _bisect_result(bracket: tuple[float, float], its: int, fevals: int,
                   full_output: bool):
    if full_output:
        return bracket, SearchInfo(its=its, fevals=fevals)
    return bracket
