"""Per-platform default font bundles."""

from __future__ import annotations

import copy
import sys
from typing import Any, Dict, Optional

FONT_DEFAULTS: Dict[str, Dict[str, Any]] = {
    "macos": {
        "family": "Menlo",
        "style": "Regular",
        "size": 11.0,
        "offset": {"x": 0.0, "y": 0.0},
    },
    "linux": {
        "family": "DejaVu Sans Mono",
        "style": "Book",
        "size": 11.0,
        # FreeType cell metrics come out too tight for DejaVu; these offsets
        # compensate until the metrics themselves are fixed.
        "offset": {"x": 2.0, "y": -7.0},
    },
}


def platform_key(sys_platform: str) -> str:
    """Map a ``sys.platform`` value to a ``FONT_DEFAULTS`` key.

    Everything that is not macOS rasterizes through FreeType and shares the
    linux bundle.
    """
    if sys_platform == "darwin":
        return "macos"
    return "linux"


PLATFORM = platform_key(sys.platform)


def default_font_bundle(platform: Optional[str] = None) -> Dict[str, Any]:
    """Return a copy of the default font bundle for ``platform``.

    Raises:
        KeyError: if ``platform`` is not a known bundle name.
    """
    key = platform or PLATFORM
    if key not in FONT_DEFAULTS:
        raise KeyError(f"No default font bundle for platform: {key}")
    return copy.deepcopy(FONT_DEFAULTS[key])
