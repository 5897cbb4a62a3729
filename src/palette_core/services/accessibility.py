"""Relative luminance and WCAG 2 contrast."""

import logging

from palette_core.core.exceptions import PaletteException
from palette_core.core.logging import engine_logger
from palette_core.schemas.color import ContrastReport
from palette_core.services.codec import hex_to_rgb

logger = logging.getLogger(__name__)

LUMINANCE_WEIGHTS = (0.2126, 0.7152, 0.0722)

# Minimum ratios per (level, large_text)
WCAG_THRESHOLDS = {
    ("AA", False): 4.5,
    ("AA", True): 3.0,
    ("AAA", False): 7.0,
    ("AAA", True): 4.5,
}


def _linearize(channel: int) -> float:
    c = channel / 255
    if c <= 0.03928:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def get_relative_luminance(value: str) -> float:
    """Perceptual brightness in [0, 1] from gamma-corrected sRGB channels."""
    rgb = hex_to_rgb(value)
    wr, wg, wb = LUMINANCE_WEIGHTS
    return wr * _linearize(rgb.r) + wg * _linearize(rgb.g) + wb * _linearize(rgb.b)


def get_contrast_ratio(first: str, second: str) -> float:
    """WCAG contrast ratio, symmetric, from 1 (none) to 21 (black on white)."""
    lum_first = get_relative_luminance(first)
    lum_second = get_relative_luminance(second)

    lighter = max(lum_first, lum_second)
    darker = min(lum_first, lum_second)

    return (lighter + 0.05) / (darker + 0.05)


def meets_contrast_level(ratio: float, level: str = "AA", large_text: bool = False) -> bool:
    """Whether a contrast ratio satisfies a WCAG conformance level."""
    if not isinstance(level, str) or (level.upper(), bool(large_text)) not in WCAG_THRESHOLDS:
        raise PaletteException(
            f"Unknown WCAG level: {level!r}. Must be one of: AA, AAA",
            "VALIDATION_ERROR",
            {"field": "level"},
        )
    if ratio < 1:
        raise PaletteException(
            f"Contrast ratio must be >= 1, got {ratio}",
            "VALIDATION_ERROR",
            {"field": "ratio"},
        )
    return ratio >= WCAG_THRESHOLDS[(level.upper(), bool(large_text))]


def evaluate_contrast(first: str, second: str) -> ContrastReport:
    """Contrast ratio between two colors with the four WCAG verdicts."""
    ratio = get_contrast_ratio(first, second)
    engine_logger.log_contrast(first, second, ratio)

    return ContrastReport(
        ratio=ratio,
        aa_normal=meets_contrast_level(ratio, "AA"),
        aa_large=meets_contrast_level(ratio, "AA", large_text=True),
        aaa_normal=meets_contrast_level(ratio, "AAA"),
        aaa_large=meets_contrast_level(ratio, "AAA", large_text=True),
    )
