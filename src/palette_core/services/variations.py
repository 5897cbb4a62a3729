"""Lighter, darker, saturated and desaturated siblings of a color."""

import time

from palette_core.core.logging import EventType, engine_logger
from palette_core.schemas.color import HSL, ColorInfo, ColorVariation, ColorVariations
from palette_core.services.codec import create_color_info, hsl_to_hex

# Percentage points added to or removed from one HSL axis
VARIATION_STEP = 20


def _clamp_percent(value: int) -> int:
    return max(0, min(100, value))


def _variation(name: str, hsl: HSL) -> ColorVariation:
    # Round trip through hex so every sibling carries a canonical hex
    return ColorVariation.from_info(name, create_color_info(hsl_to_hex(hsl)))


def generate_color_variations(value: str) -> ColorVariations:
    """Build the four named variations of a base color. Hue is never changed."""
    start_time = time.time()

    base: ColorInfo = create_color_info(value)
    h, s, lightness = base.hsl.as_tuple()

    variations = ColorVariations(
        base=base,
        lighter=_variation("Lighter", HSL(h=h, s=s, l=_clamp_percent(lightness + VARIATION_STEP))),
        darker=_variation("Darker", HSL(h=h, s=s, l=_clamp_percent(lightness - VARIATION_STEP))),
        saturated=_variation(
            "More Saturated", HSL(h=h, s=_clamp_percent(s + VARIATION_STEP), l=lightness)
        ),
        desaturated=_variation(
            "Less Saturated", HSL(h=h, s=_clamp_percent(s - VARIATION_STEP), l=lightness)
        ),
    )

    engine_logger.log(
        event_type=EventType.VARIATIONS_GENERATE,
        event_data={
            "base": base.hex,
            "lighter": variations.lighter.hex,
            "darker": variations.darker.hex,
            "saturated": variations.saturated.hex,
            "desaturated": variations.desaturated.hex,
        },
        duration_ms=int((time.time() - start_time) * 1000),
    )
    return variations
