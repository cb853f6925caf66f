class DataUnavailable(RuntimeError):
    """The listings fixture is missing or malformed. Fatal at startup."""


class InternalError(Exception):
    """Unexpected failure while serving a request; rendered as a 500."""

    def __init__(self, error: str, message: str = "") -> None:
        super().__init__(message or error)
        self.error = error
        self.message = message
