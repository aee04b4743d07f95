"""Composition of ImageKit transformation URLs."""

from typing import Sequence

from .encoder import DescriptorLike, encode_transformations
from .logging_config import get_logger

TRANSFORMATION_PREFIX = "tr:"
TRANSFORMATION_MARKER = "/" + TRANSFORMATION_PREFIX

logger = get_logger("composer")


def _has_bare_marker(url: str) -> bool:
    """Whether the first marker segment carries no parameters at all."""
    start = url.index(TRANSFORMATION_MARKER) + len(TRANSFORMATION_MARKER)
    return start == len(url) or url[start] == "/"


def build_transformation_url(
    url: str, transformations: Sequence[DescriptorLike]
) -> str:
    """
    Build an ImageKit URL that applies ``transformations`` to ``url``.

    When ``url`` already has a ``tr:`` segment the new parameters are
    prepended to it, so repeated calls keep a single transformation segment.
    Otherwise a new ``tr:`` segment is inserted before the file name. The
    URL is never validated and this function does not raise on odd input.

    Args:
        url: Base image URL, possibly already transformed
        transformations: Ordered descriptors (or mappings of their fields)

    Returns:
        The transformed URL, or ``url`` unchanged when nothing encodes
    """
    if not transformations:
        return url

    params = encode_transformations(transformations)
    if not params:
        return url

    if TRANSFORMATION_MARKER in url:
        if _has_bare_marker(url):
            logger.warning(
                f"Transformation segment in {url!r} has no parameters; "
                "merging anyway"
            )
        result = url.replace(
            TRANSFORMATION_MARKER, f"{TRANSFORMATION_MARKER}{params}:", 1
        )
    else:
        parts = url.split("/")
        parts.insert(len(parts) - 1, f"{TRANSFORMATION_PREFIX}{params}")
        result = "/".join(parts)

    logger.debug(f"Composed transformation URL: {result}")
    return result
