import json

import pytest

from palette_core.core.exceptions import InvalidHexError
from palette_core.schemas import ColorVariation, ColorVariations
from palette_core.services.codec import create_color_info
from palette_core.services.variations import VARIATION_STEP, generate_color_variations


def test_gray_variations():
    variations = generate_color_variations("#808080")

    assert isinstance(variations, ColorVariations)
    assert variations.base == create_color_info("#808080")
    assert variations.lighter.hex == "#B3B3B3"
    assert variations.lighter.hsl.l == 70
    assert variations.darker.hex == "#4D4D4D"
    assert variations.darker.hsl.l == 30
    assert variations.saturated.hex == "#996666"
    assert variations.saturated.hsl.as_tuple() == (0, 20, 50)
    # Saturation cannot go below zero
    assert variations.desaturated.hex == "#808080"


def test_red_variations():
    variations = generate_color_variations("f00")

    assert variations.base.hex == "#FF0000"
    assert variations.lighter.hex == "#FF6666"
    assert variations.darker.hex == "#990000"
    # Already fully saturated
    assert variations.saturated.hex == "#FF0000"
    assert variations.desaturated.hsl.as_tuple() == (0, 80, 50)


def test_variation_names():
    variations = generate_color_variations("#3399CC")
    assert [
        variations.lighter.name,
        variations.darker.name,
        variations.saturated.name,
        variations.desaturated.name,
    ] == ["Lighter", "Darker", "More Saturated", "Less Saturated"]


@pytest.mark.parametrize("value", ["#FFFFFF", "#000000"])
def test_lightness_is_clamped(value):
    variations = generate_color_variations(value)
    if value == "#FFFFFF":
        assert variations.lighter.hex == "#FFFFFF"
        assert variations.darker.hsl.l == 100 - VARIATION_STEP
    else:
        assert variations.darker.hex == "#000000"
        assert variations.lighter.hsl.l == VARIATION_STEP


def test_variations_keep_hue():
    for value in ["#3399CC", "#FF0000", "#00FF00", "#0000FF"]:
        variations = generate_color_variations(value)
        hue = variations.base.hsl.h
        for sibling in (variations.lighter, variations.darker, variations.saturated):
            assert sibling.hsl.h == hue


def test_variation_carries_canonical_info():
    variations = generate_color_variations("#3399CC")
    lighter = variations.lighter
    assert isinstance(lighter, ColorVariation)
    assert lighter.info == create_color_info(lighter.hex)


def test_variations_reject_invalid_hex():
    with pytest.raises(InvalidHexError):
        generate_color_variations("#GGGGGG")


def test_variations_emit_event(engine_events):
    generate_color_variations("#808080")

    records = [r for r in engine_events.records if r.name == "palette_core.events"]
    assert len(records) == 1
    payload = json.loads(records[0].getMessage())
    assert payload["event_type"] == "color.variations.generate"
    assert payload["event_data"]["base"] == "#808080"
    assert payload["event_data"]["lighter"] == "#B3B3B3"
