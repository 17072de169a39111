"""Interface layer errors."""


class InterfaceError(Exception):
    """Base interface error."""

    pass


class ApiError(InterfaceError):
    """Request rejected at the HTTP boundary.

    Rendered by the app's error handlers as a fail/error envelope.
    """

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(message)
