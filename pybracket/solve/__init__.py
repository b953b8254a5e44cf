"""
=======================================
Solvers (:mod:`pybracket.solve`)
=======================================

.. currentmodule:: pybracket.solve

One-dimensional bracketing methods for locating the minimum of a scalar
function.  A typical sequence is to find an initial interval with
`bracket_minimum`, then narrow it with either `bisection` (applied to
the derivative) or `quadratic_fit_search`.

Functions
---------

.. autosummary::
    :toctree:

    bisection
    bracket_minimum
    bracket_sign_change
    quad_fit_coeffs
    quad_fit_min
    quadratic_fit_search

Classes
-------

.. autosummary::
    :toctree:

    SearchInfo

Exceptions
----------

.. autosummary::
    :toctree:

    SolverError

"""

from .bisection import bisection
from .bracket import bracket_minimum, bracket_sign_change
from .exception import SolverError
from .quad_fit import quad_fit_coeffs, quad_fit_min, quadratic_fit_search
from .results import SearchInfo
