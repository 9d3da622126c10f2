"""Source loading error types."""


class SourceError(Exception):
    """Raised when page markup cannot be read from a file or URL."""

    def __init__(self, message: str, location: str | None = None):
        self.location = location
        super().__init__(message)
