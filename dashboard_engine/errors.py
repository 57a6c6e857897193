"""Exception types raised by the dashboard engine and the AI client."""


class DashboardError(Exception):
    """Base class for dashboard errors."""


class InputError(DashboardError):
    """Raised when none of the pasted tables produced any data."""

    MESSAGE = (
        "No data provided or data is in an incorrect format. "
        "Please paste tab-separated data and try again."
    )

    def __init__(self, message: str = MESSAGE):
        super().__init__(message)


class RemoteCallError(DashboardError):
    """A generative-API call failed or returned an unexpected body."""
