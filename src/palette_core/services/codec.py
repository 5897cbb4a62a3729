"""Hex, RGB and HSL conversions.

Every other service materializes colors through :func:`create_color_info`.
Integer outputs use round-half-away-from-zero, never Python's banker's
``round``, so results match the usual web color tools channel for channel.
"""

import logging
import math
import re
from collections.abc import Iterable, Sequence

from palette_core.core.exceptions import InvalidHexError
from palette_core.core.logging import EventType, engine_logger
from palette_core.schemas.color import HSL, RGB, ColorInfo

logger = logging.getLogger(__name__)

_HEX_DIGITS = re.compile(r"[0-9A-Fa-f]{3}|[0-9A-Fa-f]{6}")


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero."""
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)


def _strip_hash(value: str) -> str:
    return value[1:] if value.startswith("#") else value


def _expand(digits: str) -> str:
    if len(digits) == 3:
        return "".join(char * 2 for char in digits)
    return digits


def _require_hex(value: object) -> str:
    """Return the bare 6-digit form of a valid hex string or raise."""
    if not is_valid_hex(value):
        logger.debug(f"Rejected hex color input: {value!r}")
        raise InvalidHexError(value)
    return _expand(_strip_hash(value))  # type: ignore[arg-type]


def is_valid_hex(value: object) -> bool:
    """True for 3 or 6 hex digits with an optional leading ``#``."""
    if not isinstance(value, str):
        return False
    return _HEX_DIGITS.fullmatch(_strip_hash(value)) is not None


def normalize_hex(value: str) -> str:
    """Canonical ``#RRGGBB`` form: uppercase, 3-digit input expanded."""
    return f"#{_require_hex(value).upper()}"


def hex_to_rgb(value: str) -> RGB:
    digits = _require_hex(value)
    return RGB(
        r=int(digits[0:2], 16),
        g=int(digits[2:4], 16),
        b=int(digits[4:6], 16),
    )


def rgb_to_hex(rgb: RGB | Sequence[float]) -> str:
    """Encode channels as ``#RRGGBB``, clamping each to [0, 255] first."""
    channels = rgb.as_tuple() if isinstance(rgb, RGB) else tuple(rgb)
    if len(channels) != 3:
        raise ValueError(f"Expected 3 channels, got {len(channels)}")

    def to_hex(channel: float) -> str:
        return f"{round_half_away(max(0, min(255, channel))):02X}"

    return "#" + "".join(to_hex(channel) for channel in channels)


def rgb_to_hsl(rgb: RGB) -> HSL:
    r = rgb.r / 255
    g = rgb.g / 255
    b = rgb.b / 255

    high = max(r, g, b)
    low = min(r, g, b)
    delta = high - low

    h = 0.0
    s = 0.0
    lightness = (high + low) / 2

    if delta != 0:
        s = delta / (2 - high - low) if lightness > 0.5 else delta / (high + low)

        if high == r:
            h = ((g - b) / delta + (6 if g < b else 0)) / 6
        elif high == g:
            h = ((b - r) / delta + 2) / 6
        else:
            h = ((r - g) / delta + 4) / 6

    # A hue just under a full turn rounds up to 360, which is 0 again
    return HSL(
        h=round_half_away(h * 360) % 360,
        s=round_half_away(s * 100),
        l=round_half_away(lightness * 100),
    )


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(hsl: HSL) -> RGB:
    h = hsl.h / 360
    s = hsl.s / 100
    lightness = hsl.l / 100

    if s == 0:
        r = g = b = lightness
    else:
        q = lightness * (1 + s) if lightness < 0.5 else lightness + s - lightness * s
        p = 2 * lightness - q

        r = _hue_to_channel(p, q, h + 1 / 3)
        g = _hue_to_channel(p, q, h)
        b = _hue_to_channel(p, q, h - 1 / 3)

    return RGB(
        r=round_half_away(r * 255),
        g=round_half_away(g * 255),
        b=round_half_away(b * 255),
    )


def hex_to_hsl(value: str) -> HSL:
    return rgb_to_hsl(hex_to_rgb(value))


def hsl_to_hex(hsl: HSL) -> str:
    return rgb_to_hex(hsl_to_rgb(hsl))


def create_color_info(value: str) -> ColorInfo:
    """Materialize a hex string as a consistent hex/RGB/HSL triple."""
    normalized = normalize_hex(value)
    rgb = hex_to_rgb(normalized)
    return ColorInfo(hex=normalized, rgb=rgb, hsl=rgb_to_hsl(rgb))


def enrich_colors(candidates: Iterable[str]) -> list[ColorInfo]:
    """Turn externally proposed hex strings into ColorInfo, keeping order.

    The first invalid candidate raises :class:`InvalidHexError`; nothing is
    returned for a partially valid palette.
    """
    colors = [create_color_info(candidate) for candidate in candidates]
    engine_logger.log(
        event_type=EventType.PALETTE_ENRICH,
        event_data={"colors": [color.hex for color in colors]},
    )
    return colors
