"""
================================
Utilities (:mod:`pybracket.util`)
================================

.. currentmodule:: pybracket.util

Small helpers shared by the solvers.

Display
-------

.. autosummary::
    :toctree:

    disp_active
    disp_enter
    disp_exit
    disp_print

"""

from .display import disp_active, disp_enter, disp_exit, disp_print
