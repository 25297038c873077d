"""Media query wrappers."""

from __future__ import annotations

from stylemix.config import OptionalOptions, default_options
from stylemix.css.parser import Content, normalize
from stylemix.css.rules import AtRule, Block
from stylemix.values import format_number

__all__ = ["retina", "retina_query"]

def retina_query(media: str | None = None, *, options: OptionalOptions | None = None) -> str:
    """The `@media` prelude matching high density displays on every engine.

    Any one of the alternatives matching is enough.
    """
    options = default_options(options)
    media = media or options["media"]
    ratio = format_number(options["pixel_ratio"])
    features = (
        f"(-webkit-min-device-pixel-ratio: {ratio})",
        f"(min--moz-device-pixel-ratio: {ratio})",
        f"(-o-min-device-pixel-ratio: {options['pixel_ratio_fraction']})",
        f"(min-device-pixel-ratio: {ratio})",
        f"(min-resolution: {options['resolution_dpi']}dpi)",
        f"(min-resolution: {ratio}dppx)",
    )
    return ", ".join(f"only {media} and {feature}" for feature in features)

def retina(content: Content, media: str | None = None, *, options: OptionalOptions | None = None) -> Block:
    """Wrap `content` in a high density display media query, `media` defaults to "all"."""
    return Block(AtRule("media", retina_query(media, options=options), normalize(content)))
