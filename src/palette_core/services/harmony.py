"""Color-wheel harmonies built from a single base color."""

import logging

from palette_core.core.exceptions import InvalidCountError, InvalidHarmonyError
from palette_core.core.logging import engine_logger
from palette_core.schemas.color import HSL, ColorHarmony, ColorInfo, HarmonyType
from palette_core.services.codec import (
    create_color_info,
    hex_to_hsl,
    hsl_to_hex,
    normalize_hex,
    round_half_away,
)

logger = logging.getLogger(__name__)

# Lightness range spanned by a monochromatic palette, in percent
MONOCHROMATIC_MIN_LIGHTNESS = 20
MONOCHROMATIC_MAX_LIGHTNESS = 80
MONOCHROMATIC_DEFAULT_COUNT = 5


def _rotate(hsl: HSL, degrees: int) -> ColorInfo:
    # +360 keeps negative offsets inside [0, 360) before the modulo
    hue = (hsl.h + degrees + 360) % 360
    return create_color_info(hsl_to_hex(HSL(h=hue, s=hsl.s, l=hsl.l)))


def get_complementary_color(value: str) -> ColorInfo:
    """Color opposite the base on the wheel (hue + 180)."""
    return _rotate(hex_to_hsl(value), 180)


def get_analogous_colors(value: str) -> list[ColorInfo]:
    """Neighbours 30 degrees either side: [hue - 30, base, hue + 30]."""
    hsl = hex_to_hsl(value)
    return [_rotate(hsl, -30), create_color_info(value), _rotate(hsl, 30)]


def get_triadic_colors(value: str) -> list[ColorInfo]:
    """Base plus the two colors 120 and 240 degrees around the wheel."""
    hsl = hex_to_hsl(value)
    return [create_color_info(value), _rotate(hsl, 120), _rotate(hsl, 240)]


def get_monochromatic_palette(value: str, count: int = MONOCHROMATIC_DEFAULT_COUNT) -> list[ColorInfo]:
    """
    Same hue and saturation, lightness evenly spaced from 20 to 80.

    Raises InvalidCountError for fewer than two colors, where the lightness
    step would be undefined.
    """
    if isinstance(count, bool) or not isinstance(count, int) or count < 2:
        logger.debug(f"Rejected monochromatic count: {count!r}")
        raise InvalidCountError(count)

    hsl = hex_to_hsl(value)
    step = (MONOCHROMATIC_MAX_LIGHTNESS - MONOCHROMATIC_MIN_LIGHTNESS) / (count - 1)

    colors: list[ColorInfo] = []
    for i in range(count):
        lightness = round_half_away(MONOCHROMATIC_MIN_LIGHTNESS + step * i)
        colors.append(create_color_info(hsl_to_hex(HSL(h=hsl.h, s=hsl.s, l=lightness))))
    return colors


def generate_color_harmony(
    value: str,
    harmony: HarmonyType | str,
    count: int = MONOCHROMATIC_DEFAULT_COUNT,
) -> ColorHarmony:
    """Dispatch on a harmony keyword. ``count`` only applies to monochromatic."""
    try:
        harmony_type = HarmonyType(harmony)
    except ValueError:
        logger.debug(f"Rejected harmony keyword: {harmony!r}")
        raise InvalidHarmonyError(harmony, [item.value for item in HarmonyType]) from None

    if harmony_type is HarmonyType.COMPLEMENTARY:
        colors = [create_color_info(value), get_complementary_color(value)]
    elif harmony_type is HarmonyType.ANALOGOUS:
        colors = get_analogous_colors(value)
    elif harmony_type is HarmonyType.TRIADIC:
        colors = get_triadic_colors(value)
    else:
        colors = get_monochromatic_palette(value, count)

    result = ColorHarmony(harmony=harmony_type, colors=tuple(colors))
    engine_logger.log_harmony(harmony_type.value, normalize_hex(value), result.hexes)
    return result
