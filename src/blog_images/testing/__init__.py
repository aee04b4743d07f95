"""Testing utilities and fakes for blog-images."""

from .fakes import (
    FAKE_CDN_BASE,
    FakeLogger,
    FakeResponse,
    FakeUploadSession,
    RecordedUpload,
    create_test_image,
)

__all__ = [
    "FAKE_CDN_BASE",
    "FakeLogger",
    "FakeResponse",
    "FakeUploadSession",
    "RecordedUpload",
    "create_test_image",
]
