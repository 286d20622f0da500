"""Pydantic models for the terminal rendering configuration."""

from .base import TermBaseModel
from .config import Config, Dpi, Font, FontOffset, default_dpi, default_font

__all__ = [
    "Config",
    "Dpi",
    "Font",
    "FontOffset",
    "TermBaseModel",
    "default_dpi",
    "default_font",
]
