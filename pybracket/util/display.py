"""
Nested progress display used by the solvers in place of a logging
framework.  Each displaying function brackets its work with
``disp_enter(...)`` / ``disp_exit()`` and prints with
``disp_print(...)``; output is indented or suppressed depending on the
current nesting depth.
"""
from __future__ import annotations

# Written by Eric J. Whitney, November 2019.


# ======================================================================

_DISP_CURRENT_LEVEL = 1
_DISP_MAX_LEVEL: int | None = None  # Disabled = None, Enabled = 1, 2, ...
_DISP_SAVED: list[tuple[int, int | None]] = []


def disp_enter(disp: int | bool = None):
    """
    Called when entering a function scope where nested display is
    desired.  See ``disp_print(...)`` for examples.

    Parameters
    ----------
    disp : int or bool, optional
        - `None` (default): The current nested function level is
          automatically updated.
        - `int`: Sets the maximum function depth to print.  Values >= 1
          mean information will be printed.  For example, if ``disp=3``
          then ``disp_print(...)`` will be active for this function and
          the next two nested levels (where applicable).
        - `bool`: Converted to `int`, `True` = 1 and `False` = 0.
    """
    global _DISP_CURRENT_LEVEL, _DISP_MAX_LEVEL

    _DISP_SAVED.append((_DISP_CURRENT_LEVEL, _DISP_MAX_LEVEL))

    if disp is not None:
        # New max level declared; start at level one.  Values <= 0 or
        # False will disable display.
        _DISP_MAX_LEVEL = max(int(disp), 0) or None
        _DISP_CURRENT_LEVEL = 1

    else:
        # Move up a display level.
        _DISP_CURRENT_LEVEL += 1


# ----------------------------------------------------------------------

def disp_exit():
    """
    Called when exiting a function scope that uses nested display.  The
    display state in effect before the matching ``disp_enter(...)`` is
    restored.
    """
    global _DISP_CURRENT_LEVEL, _DISP_MAX_LEVEL

    if _DISP_SAVED:
        _DISP_CURRENT_LEVEL, _DISP_MAX_LEVEL = _DISP_SAVED.pop()
    else:
        # Unbalanced call; display is terminated.
        _DISP_CURRENT_LEVEL, _DISP_MAX_LEVEL = 1, None


# ----------------------------------------------------------------------

def disp_print(s: str, *args, **kwargs):
    """
    ``disp_print(...)`` is used to print information from multi-level
    nested functions and works in conjunction with ``disp_enter(...)``
    and ``disp_exit()``. Depending on the current level / function
    depth the output message is either indented or supressed.  `*args`
    and `**kwargs` are identical to the ``print(...)`` statement.

    Examples
    --------
    First define an 'inner' working function:

    >>> def inner_func(disp: int = None):
    ...     disp_enter(disp)  # Setup output at this level.
    ...     disp_print("In inner_func()...")
    ...     disp_exit()  # Upon leaving this scope.

    Then a top-level function that calls the 'inner' function.  The
    default of `None` is used to enable automatic nesting, otherwise a
    display level can be assigned:

    >>> def top_level(disp: int | bool = None):
    ...     disp_enter(disp)
    ...     disp_print("In top_level()...")
    ...     inner_func()  # Default 'disp' argument automatically indents.
    ...     disp_exit()

    Running `top_level` with default arguments produces no output:

    >>> top_level()

    Running the top level function with ``disp=True`` (equivalent to
    ``disp=1``):

    >>> top_level(disp=True)
    In top_level()...

    Running the top level function with ``disp=2`` produces indented
    output:

    >>> top_level(disp=2) # doctest: +NORMALIZE_WHITESPACE
    In top_level()...
        In inner_func()...
    """
    if disp_active():
        print('\t' * (_DISP_CURRENT_LEVEL - 1) + s, *args, **kwargs)


def disp_active() -> bool:
    """Returns ``True`` if ``disp_print(...)`` would currently print."""
    return (_DISP_MAX_LEVEL is not None and
            _DISP_CURRENT_LEVEL <= _DISP_MAX_LEVEL)
