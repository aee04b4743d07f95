"""Core utilities and shared components for blog-images."""

from .composer import build_transformation_url
from .encoder import encode_transformation, encode_transformations
from .gravity import GRAVITY_MAP, resolve_gravity
from .logging_config import get_logger, setup_logger
from .exceptions import (
    BlogImagesError,
    ConfigurationError,
    UnknownVariantError,
    UploadError,
    with_error_handling,
)
from .models import (
    TransformationDescriptor,
    UploadConfig,
    UploadedFile,
    UploadResult,
)
from .upload import upload_image
from .variants import VARIANT_PRESETS, build_variants, get_variant

__all__ = [
    "TransformationDescriptor",
    "UploadConfig",
    "UploadedFile",
    "UploadResult",
    "GRAVITY_MAP",
    "resolve_gravity",
    "encode_transformation",
    "encode_transformations",
    "build_transformation_url",
    "VARIANT_PRESETS",
    "build_variants",
    "get_variant",
    "upload_image",
    "setup_logger",
    "get_logger",
    "BlogImagesError",
    "ConfigurationError",
    "UnknownVariantError",
    "UploadError",
    "with_error_handling",
]
