#!/usr/bin/env python3
"""
Example of expanding a bracket around the minimum of a unimodal
function, starting from points on either side of the minimum.
"""
import matplotlib.pyplot as plt
import numpy as np

from pybracket.solve import bracket_minimum


# ======================================================================

def func(x):
    return 0.5 * x ** 2 - np.sin(3 * x) + 1.5


x_plot = np.linspace(-6, 6, num=400)

plt.figure()
plt.plot(x_plot, func(x_plot), '-k', label="$f(x)$")

for x0, style in ((-5.0, 'b'), (4.0, 'r')):
    a, b = bracket_minimum(func, x0, s=0.1, k=2.0, disp=True)
    print(f"Starting from x0 = {x0:+.2f} -> bracket [{a:+.5f}, "
          f"{b:+.5f}]\n")

    plt.plot([x0], [func(x0)], 'o' + style)
    plt.axvspan(a, b, color=style, alpha=0.15,
                label=f"$x_0$ = {x0:+.1f}: [{a:+.2f}, {b:+.2f}]")

plt.grid(axis='both')
plt.legend()
plt.xlabel("$x$")
plt.ylabel("$f(x)$")
plt.title("Bracket Minimum")
plt.show()
