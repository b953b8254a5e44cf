

# Written by Eric J. Whitney, April 2023.


# ======================================================================

class SolverError(RuntimeError):
    """
    This exception is raised when a bracketing or search algorithm runs
    but fails to produce a result, e.g. a step limit is reached or the
    numerics become degenerate.  Additional information (optional) is
    included to allow the reason for the failure to be determined.

    Illegal starting conditions are not reported this way; these raise
    `ValueError` before any iteration takes place.

    Notes
    -----
    `SolverError` may also have additional attributes not listed here
    depending on the specific solver being used.  Standard values of
    `flag` are:

        - 1: Reached iteration / step limit.
        - 2: Tolerance below floating point resolution.
        - 3: Degenerate quadratic fit (collinear points).
        - 4: Fitted minimum outside bracket.
        - 5: Non-finite function value.
    """

    def __init__(self, *args, flag: int = None, details: str = None,
                 **kwargs):
        """
        Parameters
        ----------
        flag : int, default = None
            One of the standard values listed above.  Never zero, as
            ``flag == 0`` means success in `SearchInfo`.
        details : str, default = None
            Short description appended to the failure notice.
        kwargs :
            Most recent solver state, added as attributes.
        """
        super().__init__(*args)
        self.flag, self.details = flag, details
        for k, v in kwargs.items():
            setattr(self, k, v)

    def __str__(self):
        """
        Append `details` to the main failure notice, then list the
        remaining attributes (`flag` first) one per line.
        """
        error_str = super().__str__()
        if self.details:
            error_str += f" {self.details}"

        for k, v in self.__dict__.items():
            if k != 'details' and v is not None:
                error_str += f"\n{k} -> {v}"
        return error_str
