"""Encoding of transformation descriptors into ImageKit parameter tokens."""

from typing import Any, Iterable, List, Mapping, Optional, Union
from urllib.parse import quote

from pydantic import ValidationError

from .gravity import resolve_gravity
from .logging_config import get_logger
from .models import TransformationDescriptor

DescriptorLike = Union[TransformationDescriptor, Mapping[str, Any]]

# Characters left alone by JavaScript's encodeURIComponent
_TEXT_SAFE_CHARS = "-_.!~*'()"

# Text layers are anchored at a fixed offset from the top-left corner
_LAYER_OFFSET = ("lx-20", "ly-20")


def _is_set(value: Optional[Any]) -> bool:
    return value is not None and value != ""


logger = get_logger("encoder")


def _field_keys(key: str) -> set:
    """Both spellings (name and alias) of the descriptor field behind ``key``."""
    for name, info in TransformationDescriptor.model_fields.items():
        if key in (name, info.alias):
            return {name, info.alias}
    return {key}


def as_descriptor(transformation: DescriptorLike) -> TransformationDescriptor:
    """
    Coerce a mapping into a ``TransformationDescriptor``.

    Fields whose values fail validation (a zero width, a numeric effect,
    ``"300px"``) are dropped and treated as unset, and anything that is not
    a mapping becomes an empty descriptor. Building a descriptor directly
    stays strict; only this lenient path is used by the composer.
    """
    if isinstance(transformation, TransformationDescriptor):
        return transformation
    if not isinstance(transformation, Mapping):
        logger.warning(
            f"Ignoring transformation of type {type(transformation).__name__}"
        )
        return TransformationDescriptor()

    fields = {k: v for k, v in transformation.items() if isinstance(k, str)}
    while True:
        try:
            return TransformationDescriptor.model_validate(fields)
        except ValidationError as exc:
            failed = {e["loc"][0] for e in exc.errors() if e["loc"]}
            invalid = {key for key in fields if _field_keys(key) & failed}
            if not invalid:
                logger.warning(f"Ignoring invalid transformation {fields!r}")
                return TransformationDescriptor()
            logger.warning(f"Ignoring invalid transformation fields: {sorted(invalid)}")
            fields = {k: v for k, v in fields.items() if k not in invalid}


def encode_overlay_text(text: str) -> str:
    """Percent-encode overlay text so it cannot break the token grammar."""
    # Lone surrogates are encoded as their raw UTF-8 bytes instead of raising.
    return quote(text, safe=_TEXT_SAFE_CHARS, errors="surrogatepass")


def _encode_overlay(descriptor: TransformationDescriptor) -> str:
    params = [
        "l-text",
        f"i-{encode_overlay_text(descriptor.overlay_text or '')}",
        "tg-bold",
        *_LAYER_OFFSET,
    ]

    if _is_set(descriptor.overlay_text_font_size):
        params.append(f"fs-{descriptor.overlay_text_font_size}")
    if _is_set(descriptor.overlay_text_color):
        params.append(f"co-{descriptor.overlay_text_color}")
    if _is_set(descriptor.gravity):
        params.append(f"lfo-{resolve_gravity(descriptor.gravity)}")
    # Zero padding is the CDN default, so it is not emitted.
    if descriptor.overlay_text_padding:
        params.append(f"pa-{descriptor.overlay_text_padding}")
    if _is_set(descriptor.overlay_background):
        params.append(f"bg-{descriptor.overlay_background}")

    params.append("l-end")
    return ",".join(params)


def _encode_basic(descriptor: TransformationDescriptor) -> str:
    fields = (
        ("w", descriptor.width),
        ("h", descriptor.height),
        ("fo", descriptor.focus),
        ("cm", descriptor.crop_mode),
        ("e", descriptor.effect),
        ("bg", descriptor.background),
    )
    return ",".join(f"{prefix}-{value}" for prefix, value in fields if _is_set(value))


def encode_transformation(transformation: DescriptorLike) -> str:
    """
    Encode one transformation descriptor as an ImageKit token.

    Overlay descriptors become a ``l-text,...,l-end`` layer and every
    non-overlay field on them is ignored. Other descriptors become the
    comma-joined ``w,h,fo,cm,e,bg`` parameters that are present. A
    descriptor with nothing set encodes to an empty string.

    Args:
        transformation: Descriptor, or a mapping of descriptor fields

    Returns:
        The token, possibly empty
    """
    descriptor = as_descriptor(transformation)
    if descriptor.is_overlay:
        return _encode_overlay(descriptor)
    return _encode_basic(descriptor)


def encode_transformations(transformations: Iterable[DescriptorLike]) -> str:
    """Encode descriptors in order, drop empty tokens and join them with colons."""
    tokens: List[str] = [encode_transformation(t) for t in transformations]
    return ":".join(token for token in tokens if token)
