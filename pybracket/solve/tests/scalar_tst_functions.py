import numpy as np


# ======================================================================

# Define test functions, along with first derivatives and exact minima.
# For use on scalars or element-wise on arrays.

def f(x):
    return x ** 2 - x - 1


def df_dx(x):
    return 2 * x - 1


def f_xmin(x):
    return 0.5 * np.ones_like(x)


# ----------------------------------------------------------------------

# Convex with a flat-ish bottom, so quadratic fits are inexact.

def g(x):
    return x ** 4 - 3 * x + 2


def dg_dx(x):
    return 4 * x ** 3 - 3


def g_xmin(x):
    return 0.75 ** (1 / 3) * np.ones_like(x)


# ----------------------------------------------------------------------

# Quartic used in the closed-form vs. linear-solve quadratic fit check.

def h(x):
    return 0.003 * x ** 4 + 8 * x ** 3 - 3 * x - 8


# ----------------------------------------------------------------------

class CountCalls:
    """Wraps a function, counting how many times it is called."""

    def __init__(self, func):
        self.func, self.calls = func, 0

    def __call__(self, x, *args):
        self.calls += 1
        return self.func(x, *args)
