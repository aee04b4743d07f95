"""Custom exceptions and error handling utilities for blog-images."""

from __future__ import annotations

from functools import wraps
from typing import Any, Callable, Optional, TypeVar

import requests

from .logging_config import get_logger


class BlogImagesError(Exception):
    """Base exception for all blog-images errors."""


class ConfigurationError(BlogImagesError):
    """Error raised for invalid configuration options."""


class UnknownVariantError(BlogImagesError, KeyError):
    """Error raised when a display variant name has no preset."""

    def __str__(self) -> str:
        return Exception.__str__(self)


class UploadError(BlogImagesError):
    """Error raised when the upload endpoint rejects or fails a request."""

    def __init__(self, message: str = "Upload failed", status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


F = TypeVar("F", bound=Callable[..., Any])


def with_error_handling(func: F) -> F:
    """Wrap an upload operation with standardized error handling."""

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:  # type: ignore[override]
        logger = get_logger("upload")
        try:
            return func(*args, **kwargs)
        except BlogImagesError:
            logger.debug(f"Error raised in {func.__name__}", exc_info=True)
            raise
        except requests.RequestException as exc:
            logger.debug(f"Request failed in {func.__name__}: {exc}", exc_info=True)
            raise UploadError(str(exc)) from exc
        except Exception as exc:  # noqa: BLE001
            logger.debug(f"Unhandled error in {func.__name__}: {exc}", exc_info=True)
            raise UploadError(str(exc)) from exc

    return wrapper  # type: ignore[return-value]

