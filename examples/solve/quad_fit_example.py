#!/usr/bin/env python3
"""
Example of quadratic fit search, showing the fitted quadratic through
the starting valley triple and the refined triple after several
iterations.
"""
import matplotlib.pyplot as plt
import numpy as np

from pybracket.solve import quad_fit_coeffs, quadratic_fit_search


# ======================================================================

def func(x):
    return 0.003 * x ** 4 + 8 * x ** 3 - 3 * x - 8


# Valley triple around the local minimum near x = 0.35.
a0, b0, c0 = -0.5, 0.2, 1.0
(a, b, c), info = quadratic_fit_search(func, a0, b0, c0, 8,
                                       full_output=True, disp=True)
print(f"\n{info.details} [{a0}, {b0}, {c0}] -> [{a:+.6f}, {b:+.6f}, "
      f"{c:+.6f}] using {info.fevals} function evaluations.")

x_plot = np.linspace(-0.75, 1.25, num=400)
p1, p2, p3 = quad_fit_coeffs(a0, b0, c0, func(a0), func(b0), func(c0))

plt.figure()
plt.plot(x_plot, func(x_plot), '-k', label="$f(x)$")
plt.plot(x_plot, p1 + p2 * x_plot + p3 * x_plot ** 2, '--b',
         label="Initial quadratic fit")
plt.plot([a0, b0, c0], func(np.array([a0, b0, c0])), 'sb',
         label="Initial triple")
plt.plot([a, b, c], func(np.array([a, b, c])), '^r',
         label="Final triple")
plt.grid(axis='both')
plt.legend()
plt.xlabel("$x$")
plt.ylabel("$f(x)$")
plt.title("Quadratic Fit Search")
plt.show()
