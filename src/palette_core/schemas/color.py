"""Color value objects."""

from enum import Enum

from pydantic import Field

from palette_core.schemas.base import BaseSchema

HEX_PATTERN = r"^#[0-9A-F]{6}$"


class HarmonyType(str, Enum):
    """Supported color-wheel harmonies."""

    COMPLEMENTARY = "complementary"
    ANALOGOUS = "analogous"
    TRIADIC = "triadic"
    MONOCHROMATIC = "monochromatic"


class RGB(BaseSchema):
    """Additive sRGB color, one byte per channel."""

    r: int = Field(..., ge=0, le=255)
    g: int = Field(..., ge=0, le=255)
    b: int = Field(..., ge=0, le=255)

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)


class HSL(BaseSchema):
    """Hue in whole degrees, saturation and lightness in whole percent."""

    h: int = Field(..., ge=0, lt=360)
    s: int = Field(..., ge=0, le=100)
    l: int = Field(..., ge=0, le=100)  # noqa: E741

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.h, self.s, self.l)


class ColorInfo(BaseSchema):
    """One color in canonical hex, RGB and HSL at once."""

    hex: str = Field(..., pattern=HEX_PATTERN)
    rgb: RGB
    hsl: HSL


class ColorVariation(BaseSchema):
    """A ColorInfo tagged with a display name."""

    name: str
    hex: str = Field(..., pattern=HEX_PATTERN)
    rgb: RGB
    hsl: HSL

    @classmethod
    def from_info(cls, name: str, info: ColorInfo) -> "ColorVariation":
        return cls(name=name, hex=info.hex, rgb=info.rgb, hsl=info.hsl)

    @property
    def info(self) -> ColorInfo:
        return ColorInfo(hex=self.hex, rgb=self.rgb, hsl=self.hsl)


class ColorVariations(BaseSchema):
    """Base color plus its four lightness/saturation siblings."""

    base: ColorInfo
    lighter: ColorVariation
    darker: ColorVariation
    saturated: ColorVariation
    desaturated: ColorVariation


class ColorHarmony(BaseSchema):
    """Colors produced by one harmony rule, in rule order."""

    harmony: HarmonyType
    colors: tuple[ColorInfo, ...]

    @property
    def hexes(self) -> list[str]:
        return [color.hex for color in self.colors]


class ContrastReport(BaseSchema):
    """WCAG 2 contrast ratio with pass/fail per conformance level."""

    ratio: float = Field(..., ge=1.0)
    aa_normal: bool
    aa_large: bool
    aaa_normal: bool
    aaa_large: bool
