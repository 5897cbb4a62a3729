"""Pydantic value objects for the color engine."""

from palette_core.schemas.base import BaseSchema, ErrorDetail
from palette_core.schemas.color import (
    HSL,
    RGB,
    ColorHarmony,
    ColorInfo,
    ColorVariation,
    ColorVariations,
    ContrastReport,
    HarmonyType,
)

__all__ = [
    # Base
    "BaseSchema",
    "ErrorDetail",
    # Color
    "RGB",
    "HSL",
    "ColorInfo",
    "ColorVariation",
    "ColorVariations",
    # Harmony
    "HarmonyType",
    "ColorHarmony",
    # Accessibility
    "ContrastReport",
]
