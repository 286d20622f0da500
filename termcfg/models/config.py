"""Config model."""

from __future__ import annotations

from typing import Optional

from pydantic import Field, StrictBool, StrictFloat, StrictStr

from ..platform_defaults import default_font_bundle
from .base import TermBaseModel


class Dpi(TermBaseModel):
    """Pixels per inch.

    Only used by rasterizers without DPI autodetection (FreeType).
    """

    x: StrictFloat = Field(..., description="Horizontal dpi")
    y: StrictFloat = Field(..., description="Vertical dpi")


class FontOffset(TermBaseModel):
    """Modifications to font spacing.

    Cell sizes computed from font metrics are not ideal for every font; these
    let the user tweak them.
    """

    x: StrictFloat = Field(..., description="Extra horizontal spacing between letters")
    y: StrictFloat = Field(..., description="Extra vertical spacing between lines")


class Font(TermBaseModel):
    """Font config.

    Defaults exist for the whole section per platform, not per field. A
    partially specified section fails validation.
    """

    family: StrictStr = Field(..., description="Font family")
    style: StrictStr = Field(..., description="Font style")
    size: StrictFloat = Field(..., description="Font size in points")
    offset: FontOffset = Field(..., description="Extra spacing per character")


def default_font(platform: Optional[str] = None) -> Font:
    """Return the default ``Font`` for ``platform`` (current platform if None)."""
    return Font.model_validate(default_font_bundle(platform))


def default_dpi() -> Dpi:
    return Dpi(x=96.0, y=96.0)


class Config(TermBaseModel):
    dpi: Dpi = Field(default_factory=default_dpi, description="Pixels per inch")
    font: Font = Field(default_factory=lambda: default_font(), description="Font configuration")
    render_timer: StrictBool = Field(False, description="Show the render timer")
