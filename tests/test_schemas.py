import pytest
from pydantic import ValidationError

from palette_core.schemas import HSL, RGB, ColorHarmony, ColorInfo, ColorVariation, HarmonyType


def _red() -> ColorInfo:
    return ColorInfo(hex="#FF0000", rgb=RGB(r=255, g=0, b=0), hsl=HSL(h=0, s=100, l=50))


def test_value_objects_are_frozen():
    rgb = RGB(r=1, g=2, b=3)
    with pytest.raises(ValidationError):
        rgb.r = 10

    info = _red()
    with pytest.raises(ValidationError):
        info.hex = "#00FF00"


def test_structural_equality_and_hashing():
    assert _red() == _red()
    assert _red() is not _red()
    assert len({_red(), _red()}) == 1


@pytest.mark.parametrize(
    "channels",
    [
        {"r": 256, "g": 0, "b": 0},
        {"r": -1, "g": 0, "b": 0},
    ],
)
def test_rgb_range(channels):
    with pytest.raises(ValidationError):
        RGB(**channels)


@pytest.mark.parametrize(
    "values",
    [
        {"h": 360, "s": 0, "l": 0},
        {"h": -1, "s": 0, "l": 0},
        {"h": 0, "s": 101, "l": 0},
        {"h": 0, "s": 0, "l": 101},
    ],
)
def test_hsl_range(values):
    with pytest.raises(ValidationError):
        HSL(**values)


@pytest.mark.parametrize("value", ["#ff0000", "FF0000", "#F00", "#FF00001"])
def test_color_info_requires_canonical_hex(value):
    with pytest.raises(ValidationError):
        ColorInfo(hex=value, rgb=RGB(r=255, g=0, b=0), hsl=HSL(h=0, s=100, l=50))


def test_color_variation_round_trips_info():
    variation = ColorVariation.from_info("Lighter", _red())
    assert variation.name == "Lighter"
    assert variation.info == _red()
    assert variation.model_dump() == {
        "name": "Lighter",
        "hex": "#FF0000",
        "rgb": {"r": 255, "g": 0, "b": 0},
        "hsl": {"h": 0, "s": 100, "l": 50},
    }


def test_color_harmony_serializes_keyword():
    harmony = ColorHarmony(harmony=HarmonyType.COMPLEMENTARY, colors=(_red(),))
    assert harmony.model_dump()["harmony"] == "complementary"
    assert harmony.hexes == ["#FF0000"]
