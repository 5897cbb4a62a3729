"""Palette Core - Color Conversion and Harmony Engine.

Exact conversions between hex, RGB and HSL, lightness/saturation
variations, color-wheel harmonies and WCAG contrast metrics, as pure
functions over immutable value objects.
"""

import logging

from palette_core.core.exceptions import (
    InvalidCountError,
    InvalidHarmonyError,
    InvalidHexError,
    PaletteException,
)
from palette_core.core.logging import configure_logging
from palette_core.schemas import (
    HSL,
    RGB,
    ColorHarmony,
    ColorInfo,
    ColorVariation,
    ColorVariations,
    ContrastReport,
    HarmonyType,
)
from palette_core.services import (
    create_color_info,
    enrich_colors,
    evaluate_contrast,
    generate_color_harmony,
    generate_color_variations,
    get_analogous_colors,
    get_complementary_color,
    get_contrast_ratio,
    get_monochromatic_palette,
    get_relative_luminance,
    get_triadic_colors,
    hex_to_hsl,
    hex_to_rgb,
    hsl_to_hex,
    hsl_to_rgb,
    is_valid_hex,
    meets_contrast_level,
    normalize_hex,
    rgb_to_hex,
    rgb_to_hsl,
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Errors
    "PaletteException",
    "InvalidHexError",
    "InvalidCountError",
    "InvalidHarmonyError",
    # Value objects
    "RGB",
    "HSL",
    "ColorInfo",
    "ColorVariation",
    "ColorVariations",
    "ColorHarmony",
    "ContrastReport",
    "HarmonyType",
    # Codec
    "is_valid_hex",
    "normalize_hex",
    "hex_to_rgb",
    "rgb_to_hex",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "hex_to_hsl",
    "hsl_to_hex",
    "create_color_info",
    "enrich_colors",
    # Variations and harmonies
    "generate_color_variations",
    "get_complementary_color",
    "get_analogous_colors",
    "get_triadic_colors",
    "get_monochromatic_palette",
    "generate_color_harmony",
    # Accessibility
    "get_relative_luminance",
    "get_contrast_ratio",
    "meets_contrast_level",
    "evaluate_contrast",
    # Logging
    "configure_logging",
    "__version__",
]
