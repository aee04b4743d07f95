"""Named display variants derived from a stored post image URL."""

from typing import Dict, List, Mapping, Optional, Sequence

from .composer import build_transformation_url
from .exceptions import UnknownVariantError
from .models import TransformationDescriptor

VARIANT_PRESETS: Dict[str, List[TransformationDescriptor]] = {
    "thumbnail": [TransformationDescriptor(width=400, height=300, focus="auto")],
    "card": [
        TransformationDescriptor(
            width=800, height=450, focus="auto", crop_mode="maintain_ratio"
        )
    ],
    "featured": [TransformationDescriptor(width=1200, height=630, focus="auto")],
    "preview": [TransformationDescriptor(width=400, effect="grayscale")],
}


def get_variant(
    url: str,
    name: str,
    presets: Optional[Mapping[str, Sequence[TransformationDescriptor]]] = None,
) -> str:
    """Return ``url`` transformed with the preset called ``name``."""
    presets = VARIANT_PRESETS if presets is None else presets
    if name not in presets:
        raise UnknownVariantError(
            f"Unknown variant {name!r}; expected one of {', '.join(presets)}"
        )
    return build_transformation_url(url, presets[name])


def build_variants(
    url: str,
    presets: Optional[Mapping[str, Sequence[TransformationDescriptor]]] = None,
) -> Dict[str, str]:
    """Compose every preset onto ``url``, keyed by preset name."""
    presets = VARIANT_PRESETS if presets is None else presets
    return {name: get_variant(url, name, presets) for name in presets}
