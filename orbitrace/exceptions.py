from typing import List, Optional


class OrbitraceError(Exception):
    """Base exception for all Orbitrace errors."""
    pass


class ConfigError(OrbitraceError):
    """Raised when configuration fields are missing, empty or of the wrong type."""

    def __init__(self, missing_fields: List[str], message: Optional[str] = None):
        self.missing_fields = list(missing_fields)
        super().__init__(
            message
            or f"Missing required configuration fields: {', '.join(self.missing_fields)}"
        )


class DispatchError(OrbitraceError):
    """Raised when an event could not be delivered to the collection endpoint."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_text: Optional[str] = None,
    ):
        self.status_code = status_code
        self.response_text = response_text
        super().__init__(message)
