"""Protocol definitions for dependency injection and testability."""

from typing import Any, Dict, Optional, Protocol


class HTTPResponseProtocol(Protocol):
    """Protocol for the parts of an HTTP response the uploader reads."""

    status_code: int

    @property
    def ok(self) -> bool:
        """Whether the status code is below 400."""
        ...

    def json(self) -> Any:
        """Decode the body as JSON."""
        ...


class HTTPSessionProtocol(Protocol):
    """Protocol for HTTP session operations."""

    def post(
        self,
        url: str,
        data: Optional[Dict[str, Any]] = None,
        files: Optional[Dict[str, Any]] = None,
        timeout: Optional[float] = None,
    ) -> HTTPResponseProtocol:
        """Send a POST request."""
        ...


class LoggerProtocol(Protocol):
    """Protocol for logging operations."""

    def debug(self, message: str, **kwargs: Any) -> None:
        """Log debug message."""
        ...

    def info(self, message: str, **kwargs: Any) -> None:
        """Log info message."""
        ...

    def warning(self, message: str, **kwargs: Any) -> None:
        """Log warning message."""
        ...

    def error(self, message: str, **kwargs: Any) -> None:
        """Log error message."""
        ...
