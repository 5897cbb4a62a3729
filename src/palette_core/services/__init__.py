"""Service layer for the color engine."""

from palette_core.services.accessibility import (
    evaluate_contrast,
    get_contrast_ratio,
    get_relative_luminance,
    meets_contrast_level,
)
from palette_core.services.codec import (
    create_color_info,
    enrich_colors,
    hex_to_hsl,
    hex_to_rgb,
    hsl_to_hex,
    hsl_to_rgb,
    is_valid_hex,
    normalize_hex,
    rgb_to_hex,
    rgb_to_hsl,
)
from palette_core.services.harmony import (
    generate_color_harmony,
    get_analogous_colors,
    get_complementary_color,
    get_monochromatic_palette,
    get_triadic_colors,
)
from palette_core.services.variations import generate_color_variations

__all__ = [
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
    # Variations
    "generate_color_variations",
    # Harmony
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
]
