from dataclasses import dataclass


# ======================================================================

@dataclass(frozen=True)
class SearchInfo:
    """
    Convergence information returned alongside the result when a
    solver is called with ``full_output=True``.

    Attributes
    ----------
    its : int
        Number of main loop iterations (or steps) performed.
    fevals : int
        Number of function evaluations.
    flag : int, default = 0
        Status code.  Always zero here; a failed search raises
        `SolverError` carrying a non-zero `flag` instead.
    details : str, default = 'Converged.'
        Short description of how the search ended.
    """
    its: int
    fevals: int
    flag: int = 0
    details: str = "Converged."
