"""
.. This module acts as the top-level API documentation.

.. module: pybracket

Bracketing methods for one-dimensional minimisation:

    - ``pybracket.solve``: Bracket expansion, bisection and quadratic
      fit search.
    - ``pybracket.util``: Nested progress display.
"""

__version__ = "0.1.0"

import sys

# Written by Eric J. Whitney, November 2019.

# ======================================================================

assert sys.version_info >= (3, 10)

from .solve import (SearchInfo, SolverError, bisection, bracket_minimum,
                    bracket_sign_change, quad_fit_coeffs, quad_fit_min,
                    quadratic_fit_search)
