"""Library wide defaults.

Mixins that depend on a tunable value take an optional `options` mapping that
is merged over `DEFAULTS`. Nothing here is mutated at runtime.
"""

from __future__ import annotations
from collections.abc import Mapping
from typing import TypedDict

__all__ = [
    "Options",
    "OptionalOptions",
    "DEFAULTS",
    "default_options",
    "OFFSETS",
    "PLACEHOLDER_SELECTORS",
]

class Options(TypedDict):
    rem_base: int | float
    media: str
    pixel_ratio: int | float
    pixel_ratio_fraction: str
    resolution_dpi: int
    precision: int
    inline_block_gap: str

class OptionalOptions(TypedDict, total=False):
    rem_base: int | float
    media: str
    pixel_ratio: int | float
    pixel_ratio_fraction: str
    resolution_dpi: int
    precision: int
    inline_block_gap: str

DEFAULTS: Options = {
    # Pixel values are divided by this to get rem, assumes `html { font-size: 62.5% }`
    "rem_base": 10,
    "media": "all",
    "pixel_ratio": 1.5,
    # Opera only accepts the ratio as a fraction
    "pixel_ratio_fraction": "3/2",
    "resolution_dpi": 144,
    "precision": 5,
    "inline_block_gap": "4px",
}

OFFSETS = ("top", "right", "bottom", "left")

PLACEHOLDER_SELECTORS = (
    "&::-webkit-input-placeholder",
    "&:-moz-placeholder",
    "&::-moz-placeholder",
    "&:-ms-input-placeholder",
)

def default_options(origin: OptionalOptions | Mapping | None = None) -> Options:
    """Return a new options dict with every missing key filled from `DEFAULTS`."""
    options = dict(origin or {})
    unknown = set(options) - set(DEFAULTS)
    if len(unknown) > 0:
        raise KeyError(f"Unknown option(s): {', '.join(sorted(unknown))}")
    for key, value in DEFAULTS.items():
        options[key] = options.get(key, value)
    return options  # type: ignore[return-value]
