"""Color format conversion, luminance and WCAG contrast.

Supported text forms:
- hex: #rgb, #rgba, #rrggbb, #rrggbbaa (alpha is ignored)
- rgb: rgb(50, 100, 200), rgb(50 100 200), rgba(...), percent channels
- oklch: oklch(60% 0.15 240), oklch(0.6 0.15 240deg), hue may be "none"
- cmyk: cmyk(75%, 50%, 0%, 22%)

OKLCH is the working space for palette math; hex and rgb are the display
and storage formats. Conversions go sRGB <-> linear sRGB <-> OKLab <-> OKLCH
using Bjorn Ottosson's matrices. Output is clipped to the sRGB gamut.

parse_color is strict and raises ColorParseError. Every other public
function here degrades instead of raising: unparseable input gives the
documented fallback so one bad swatch cannot break a render loop.
"""

import math
import re

from design_token_engine.design_system.tokens import WCAG_THRESHOLDS
from design_token_engine.domain.colors import (
    AccessibilityReport,
    Cmyk,
    ColorValues,
    Oklch,
    Rgb,
)
from design_token_engine.domain.value_objects import ColorFormat
from design_token_engine.exceptions import ColorParseError
from design_token_engine.logging_config import get_logger

logger = get_logger(__name__)

ParsedColor = Rgb | Oklch | Cmyk

WHITE = "#ffffff"
BLACK = "#000000"
FALLBACK_VALUES = ColorValues(hex=BLACK, rgb="rgb(0, 0, 0)", oklch="oklch(0% 0 0)")
FALLBACK_LUMINANCE = 0.5

WCAG_AA_LARGE = WCAG_THRESHOLDS["aa_large"]
WCAG_AA_NORMAL = WCAG_THRESHOLDS["aa_normal"]
WCAG_AAA = WCAG_THRESHOLDS["aaa"]

# Below this chroma the hue is numerically meaningless.
ACHROMATIC_CHROMA = 1e-4
# 100% chroma in CSS oklch() notation.
OKLCH_CHROMA_PERCENT_REF = 0.4

_HEX_RE = re.compile(r"^#(?:[0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$", re.I)
_FUNC_RE = re.compile(r"^(rgba?|oklch|cmyk)\(\s*(.*?)\s*\)$", re.I)
_NUMBER_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?$", re.I)


# =============================================================================
# Parsing
# =============================================================================


def _number(token: str, color: str) -> float:
    if not _NUMBER_RE.match(token):
        raise ColorParseError(color, f"invalid number {token!r}")
    value = float(token)
    if not math.isfinite(value):
        raise ColorParseError(color, f"number out of range {token!r}")
    return value


def _component(token: str, color: str, percent_ref: float) -> float:
    """Parse a number or percentage; percentages scale to percent_ref."""
    if token.endswith("%"):
        return _number(token[:-1], color) / 100.0 * percent_ref
    return _number(token, color)


def _split_args(args: str) -> list[str]:
    # Drop a trailing "/ alpha" and accept commas or whitespace as separators.
    args = args.split("/", 1)[0]
    return [token for token in re.split(r"[\s,]+", args.strip()) if token]


def _parse_hex(color: str) -> Rgb:
    digits = color[1:]
    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits[:3])
    r, g, b = (int(digits[i : i + 2], 16) / 255.0 for i in (0, 2, 4))
    return Rgb(r, g, b)


def _parse_rgb(args: list[str], color: str) -> Rgb:
    if len(args) not in (3, 4):
        raise ColorParseError(color, "rgb() needs three channels")
    channels = []
    for token in args[:3]:
        if token.endswith("%"):
            channels.append(_number(token[:-1], color) / 100.0)
        else:
            channels.append(_number(token, color) / 255.0)
    return Rgb(*channels)


def _parse_oklch(args: list[str], color: str) -> Oklch:
    if not 1 <= len(args) <= 3:
        raise ColorParseError(color, "oklch() needs lightness, chroma and hue")
    tokens = args + ["none"] * (3 - len(args))

    def _maybe(token: str) -> str | None:
        return None if token.lower() == "none" else token

    raw_l, raw_c, raw_h = (_maybe(token) for token in tokens)
    lightness = _component(raw_l, color, 1.0) if raw_l is not None else None
    chroma = (
        _component(raw_c, color, OKLCH_CHROMA_PERCENT_REF) if raw_c is not None else None
    )
    hue = None
    if raw_h is not None:
        hue = _number(raw_h[:-3] if raw_h.lower().endswith("deg") else raw_h, color) % 360
    if chroma is not None and chroma < 0:
        chroma = 0.0
    return Oklch(lightness, chroma, hue)


def _parse_cmyk(args: list[str], color: str) -> Cmyk:
    if len(args) != 4:
        raise ColorParseError(color, "cmyk() needs four components")
    return Cmyk(*(_component(token, color, 1.0) for token in args))


def parse_color(color: str) -> ParsedColor:
    """Parse a hex, rgb(), oklch() or cmyk() string.

    Raises:
        ColorParseError: the string is empty or not a supported form.
    """
    if not isinstance(color, str) or not color.strip():
        raise ColorParseError(color, "empty color")
    text = color.strip()
    if text.startswith("#"):
        if not _HEX_RE.match(text):
            raise ColorParseError(color, "invalid hex")
        return _parse_hex(text)

    match = _FUNC_RE.match(text)
    if match is None:
        raise ColorParseError(color)
    name = match.group(1).lower()
    args = _split_args(match.group(2))
    if name in ("rgb", "rgba"):
        return _parse_rgb(args, color)
    if name == "oklch":
        return _parse_oklch(args, color)
    return _parse_cmyk(args, color)


def try_parse_color(color: str) -> ParsedColor | None:
    try:
        return parse_color(color)
    except ColorParseError as exc:
        logger.debug("color_parse_failed", color=str(color), reason=exc.context["reason"])
        return None


# =============================================================================
# Color space math
# =============================================================================


def srgb_to_linear(channel: float) -> float:
    sign = -1.0 if channel < 0 else 1.0
    value = abs(channel)
    if value <= 0.04045:
        return channel / 12.92
    return sign * ((value + 0.055) / 1.055) ** 2.4


def linear_to_srgb(channel: float) -> float:
    sign = -1.0 if channel < 0 else 1.0
    value = abs(channel)
    if value <= 0.0031308:
        return channel * 12.92
    return sign * (1.055 * value ** (1 / 2.4) - 0.055)


def rgb_to_oklch(color: Rgb) -> Oklch:
    r, g, b = (srgb_to_linear(channel) for channel in (color.r, color.g, color.b))

    l_ = math.cbrt(0.4122214708 * r + 0.5363325363 * g + 0.0514459929 * b)
    m_ = math.cbrt(0.2119034982 * r + 0.6806995451 * g + 0.1073969566 * b)
    s_ = math.cbrt(0.0883024619 * r + 0.2817188376 * g + 0.6299787005 * b)

    lightness = 0.2104542553 * l_ + 0.7936177850 * m_ - 0.0040720468 * s_
    a = 1.9779984951 * l_ - 2.4285922050 * m_ + 0.4505937099 * s_
    b_ = 0.0259040371 * l_ + 0.7827717662 * m_ - 0.8086757660 * s_

    chroma = math.hypot(a, b_)
    hue = None
    if chroma >= ACHROMATIC_CHROMA:
        hue = math.degrees(math.atan2(b_, a)) % 360
    return Oklch(lightness, chroma, hue)


def oklch_to_rgb(color: Oklch) -> Rgb:
    """Convert to unclipped sRGB; unset components count as zero."""
    lightness = color.l or 0.0
    chroma = color.c or 0.0
    hue = math.radians(color.h or 0.0)
    a = chroma * math.cos(hue)
    b = chroma * math.sin(hue)

    l_ = lightness + 0.3963377774 * a + 0.2158037573 * b
    m_ = lightness - 0.1055613458 * a - 0.0638541728 * b
    s_ = lightness - 0.0894841775 * a - 1.2914855480 * b
    l, m, s = l_**3, m_**3, s_**3

    r = 4.0767416621 * l - 3.3077115913 * m + 0.2309699292 * s
    g = -1.2684380046 * l + 2.6097574011 * m - 0.3413193965 * s
    b_ = -0.0041960863 * l - 0.7034186147 * m + 1.7076147010 * s
    return Rgb(linear_to_srgb(r), linear_to_srgb(g), linear_to_srgb(b_))


def rgb_to_cmyk(color: Rgb) -> Cmyk:
    clipped = color.clipped()
    r, g, b = clipped.r, clipped.g, clipped.b
    k = 1 - max(r, g, b)
    if k >= 1:
        return Cmyk(0.0, 0.0, 0.0, 1.0)
    return Cmyk(
        c=(1 - r - k) / (1 - k),
        m=(1 - g - k) / (1 - k),
        y=(1 - b - k) / (1 - k),
        k=k,
    )


def cmyk_to_rgb(color: Cmyk) -> Rgb:
    return Rgb(
        (1 - color.c) * (1 - color.k),
        (1 - color.m) * (1 - color.k),
        (1 - color.y) * (1 - color.k),
    )


def to_rgb(color: ParsedColor) -> Rgb:
    if isinstance(color, Rgb):
        return color
    if isinstance(color, Oklch):
        return oklch_to_rgb(color)
    return cmyk_to_rgb(color)


def to_oklch(color: ParsedColor) -> Oklch:
    if isinstance(color, Oklch):
        return color
    return rgb_to_oklch(to_rgb(color))


# =============================================================================
# Serialization
# =============================================================================


def _fmt(value: float, places: int) -> str:
    text = f"{value:.{places}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def _to_byte(channel: float) -> int:
    return int(math.floor(min(1.0, max(0.0, channel)) * 255 + 0.5))


def format_hex(color: Rgb) -> str:
    return "#" + "".join(f"{_to_byte(ch):02x}" for ch in (color.r, color.g, color.b))


def format_rgb(color: Rgb) -> str:
    r, g, b = (_to_byte(ch) for ch in (color.r, color.g, color.b))
    return f"rgb({r}, {g}, {b})"


def format_oklch(color: Oklch) -> str:
    lightness = (color.l or 0.0) * 100
    chroma = color.c or 0.0
    hue_text = _fmt(color.h, 1) if color.h is not None else "0"
    if hue_text == "360":
        hue_text = "0"
    return f"oklch({_fmt(lightness, 1)}% {_fmt(chroma, 3)} {hue_text})"


def format_cmyk(color: Cmyk) -> str:
    parts = ", ".join(
        f"{int(math.floor(v * 100 + 0.5))}%" for v in (color.c, color.m, color.y, color.k)
    )
    return f"cmyk({parts})"


def color_values(color: ParsedColor, include_cmyk: bool = False) -> ColorValues:
    """Serialize one parsed color into every format at once."""
    rgb = to_rgb(color)
    oklch = to_oklch(color)
    return ColorValues(
        hex=format_hex(rgb),
        rgb=format_rgb(rgb),
        oklch=format_oklch(oklch),
        cmyk=format_cmyk(rgb_to_cmyk(rgb)) if include_cmyk else None,
    )


# =============================================================================
# Public conversion API
# =============================================================================


def _coerce_format(value: ColorFormat | str) -> ColorFormat | None:
    if isinstance(value, ColorFormat):
        return value
    try:
        return ColorFormat(str(value).lower())
    except ValueError:
        return None


def convert_color(
    color: str, from_format: ColorFormat | str, to_format: ColorFormat | str
) -> str:
    """Re-serialize a color string in another format.

    Pantone, unknown formats and unparseable input are returned unchanged.
    """
    source = _coerce_format(from_format)
    target = _coerce_format(to_format)
    if source is None or target is None:
        return color
    if ColorFormat.PANTONE in (source, target):
        return color

    parsed = try_parse_color(color)
    if parsed is None:
        return color

    if target == ColorFormat.HEX:
        return format_hex(to_rgb(parsed))
    if target == ColorFormat.RGB:
        return format_rgb(to_rgb(parsed))
    if target == ColorFormat.OKLCH:
        return format_oklch(to_oklch(parsed))
    return format_cmyk(rgb_to_cmyk(to_rgb(parsed)))


def convert_to_all_formats(color: str, include_cmyk: bool = False) -> ColorValues:
    """Return hex, rgb and oklch (and optionally cmyk) for any supported input.

    Unparseable input gives black rather than an error.
    """
    parsed = try_parse_color(color)
    if parsed is None:
        if include_cmyk:
            return ColorValues(
                hex=FALLBACK_VALUES.hex,
                rgb=FALLBACK_VALUES.rgb,
                oklch=FALLBACK_VALUES.oklch,
                cmyk="cmyk(0%, 0%, 0%, 100%)",
            )
        return FALLBACK_VALUES
    return color_values(parsed, include_cmyk=include_cmyk)


# =============================================================================
# Luminance and contrast
# =============================================================================


def _luminance_channel(channel: float) -> float:
    if channel <= 0.03928:
        return channel / 12.92
    return ((channel + 0.055) / 1.055) ** 2.4


def relative_luminance(color: Rgb) -> float:
    rgb = color.clipped()
    return (
        0.2126 * _luminance_channel(rgb.r)
        + 0.7152 * _luminance_channel(rgb.g)
        + 0.0722 * _luminance_channel(rgb.b)
    )


def get_luminance(color: str) -> float:
    """WCAG relative luminance in [0, 1]; 0.5 when color is unparseable."""
    parsed = try_parse_color(color)
    if parsed is None:
        return FALLBACK_LUMINANCE
    return relative_luminance(to_rgb(parsed))


def contrast_ratio(luminance_a: float, luminance_b: float) -> float:
    lighter = max(luminance_a, luminance_b)
    darker = min(luminance_a, luminance_b)
    return (lighter + 0.05) / (darker + 0.05)


def calculate_contrast(color_a: str, color_b: str) -> float:
    """WCAG contrast ratio between two colors, from 1 to 21."""
    return contrast_ratio(get_luminance(color_a), get_luminance(color_b))


def accessibility_for_luminance(luminance: float) -> AccessibilityReport:
    with_white = contrast_ratio(luminance, 1.0)
    with_black = contrast_ratio(luminance, 0.0)
    best = max(with_white, with_black)
    return AccessibilityReport(
        contrast_with_white=with_white,
        contrast_with_black=with_black,
        wcag_aa_normal=best >= WCAG_AA_NORMAL,
        wcag_aa_large=best >= WCAG_AA_LARGE,
        wcag_aaa=best >= WCAG_AAA,
    )


def check_accessibility(color: str) -> AccessibilityReport:
    """Contrast of a color against white and black with WCAG pass flags.

    Empty input reports no contrast and fails every level. Any other
    unparseable color is scored at the fallback luminance, the same value
    calculate_contrast uses.
    """
    if not isinstance(color, str) or not color.strip():
        return AccessibilityReport.no_contrast()
    return accessibility_for_luminance(get_luminance(color))


def meets_contrast(
    foreground: str,
    background: str,
    *,
    large_text: bool = False,
    min_contrast_body: float = WCAG_AA_NORMAL,
    min_contrast_large: float = WCAG_AA_LARGE,
) -> bool:
    """Whether a text/background pair reaches the platform's contrast target."""
    threshold = min_contrast_large if large_text else min_contrast_body
    return calculate_contrast(foreground, background) >= threshold
