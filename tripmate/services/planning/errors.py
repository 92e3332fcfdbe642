"""
Error taxonomy for the best-date search.

These are raised inside the planning package and converted to values at the
finder boundary (see SearchResult).
"""


class PlanningError(Exception):
    code = "planning_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InputError(PlanningError):
    """Missing group, malformed or missing dates, non-positive duration."""
    code = "invalid_input"


class NoDataError(PlanningError):
    """The selected group has no members."""
    code = "no_data"


class NoValidRangeError(PlanningError):
    """The requested duration does not fit inside the search window."""
    code = "no_valid_range"


class UpstreamError(PlanningError):
    """Member or schedule lookup failed or returned malformed rows."""
    code = "upstream_error"
