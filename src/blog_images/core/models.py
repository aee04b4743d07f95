"""Shared data models for blog-images."""

import os
from typing import Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    NonNegativeInt,
    PositiveInt,
)
from pydantic.alias_generators import to_camel

from .exceptions import ConfigurationError

DEFAULT_UPLOAD_URL = "http://localhost:3000/api/imagekit/upload"
DEFAULT_UPLOAD_TIMEOUT = 30.0


class TransformationDescriptor(BaseModel):
    """One requested visual modification of a CDN image.

    Accepts both snake_case names and the camelCase names used by the blog
    front end (``cropMode``, ``overlayText``, ...). Setting ``overlay_text``
    turns the descriptor into a text overlay layer.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        extra="ignore",
    )

    width: Optional[PositiveInt] = None
    height: Optional[PositiveInt] = None
    focus: Optional[str] = None
    crop_mode: Optional[str] = None
    effect: Optional[str] = None
    background: Optional[str] = None
    overlay_text: Optional[str] = None
    overlay_text_font_size: Optional[PositiveInt] = None
    overlay_text_color: Optional[str] = None
    overlay_text_padding: Optional[NonNegativeInt] = None
    overlay_background: Optional[str] = None
    gravity: Optional[str] = None

    @property
    def is_overlay(self) -> bool:
        """Whether this descriptor encodes as a text overlay layer."""
        return bool(self.overlay_text)


class UploadConfig(BaseModel):
    """Configuration for the server-side upload endpoint."""

    endpoint_url: str = DEFAULT_UPLOAD_URL
    timeout: float = DEFAULT_UPLOAD_TIMEOUT

    @classmethod
    def from_env(cls) -> "UploadConfig":
        """Build a config from BLOG_IMAGES_UPLOAD_URL / BLOG_IMAGES_UPLOAD_TIMEOUT."""
        endpoint_url = os.getenv("BLOG_IMAGES_UPLOAD_URL", DEFAULT_UPLOAD_URL)
        raw_timeout = os.getenv("BLOG_IMAGES_UPLOAD_TIMEOUT")
        if raw_timeout is None:
            return cls(endpoint_url=endpoint_url)
        try:
            timeout = float(raw_timeout)
        except ValueError as exc:
            raise ConfigurationError(
                f"BLOG_IMAGES_UPLOAD_TIMEOUT must be a number, got {raw_timeout!r}"
            ) from exc
        if timeout <= 0:
            raise ConfigurationError("BLOG_IMAGES_UPLOAD_TIMEOUT must be positive")
        return cls(endpoint_url=endpoint_url, timeout=timeout)


class UploadedFile(BaseModel):
    """Metadata returned by the upload endpoint for a stored image."""

    model_config = ConfigDict(populate_by_name=True)

    file_id: str = Field(alias="fileId")
    name: str
    url: str
    width: Optional[int] = None
    height: Optional[int] = None
    size: Optional[int] = None


class UploadResult(BaseModel):
    """Outcome of a single upload attempt."""

    success: bool = False
    data: Optional[UploadedFile] = None
    error: str = ""
