#!/usr/bin/env python3
"""
Example of bisection applied to the derivative of an objective.  The
initial interval comes from expanding about a guess until the
derivative changes sign.
"""
import matplotlib.pyplot as plt
import numpy as np

from pybracket.solve import bisection, bracket_sign_change


# ======================================================================

def func(x):
    return x ** 4 - 3 * x + 2


def dfunc_dx(x):
    return 4 * x ** 3 - 3


a0, b0 = bracket_sign_change(dfunc_dx, 2.0, 3.0, disp=True)
(a, b), info = bisection(dfunc_dx, a0, b0, 1e-6, full_output=True,
                         disp=True)
print(f"\nBisection [{a0:+.3f}, {b0:+.3f}] -> [{a:+.8f}, {b:+.8f}] "
      f"in {info.its} iterations.")
print(f"Exact minimum at x = {0.75 ** (1 / 3):+.8f}")

x_plot = np.linspace(a0, b0, num=400)

fig, (ax1, ax2) = plt.subplots(2, 1, sharex=True)
ax1.plot(x_plot, func(x_plot), '-k')
ax1.axvline(0.5 * (a + b), color='b', linestyle='--')
ax1.set_ylabel("$f(x)$")
ax1.grid(axis='both')

ax2.plot(x_plot, dfunc_dx(x_plot), '-r')
ax2.axhline(0.0, color='k', linewidth=0.5)
ax2.axvline(0.5 * (a + b), color='b', linestyle='--')
ax2.set_xlabel("$x$")
ax2.set_ylabel("$f'(x)$")
ax2.grid(axis='both')

fig.suptitle("Bisection on $f'(x)$")
plt.show()
