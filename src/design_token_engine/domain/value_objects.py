from enum import Enum


class Unit(str, Enum):
    PX = "px"
    REM = "rem"
    EM = "em"
    PT = "pt"


class ScaleMethod(str, Enum):
    MODULAR = "modular"
    DISTANCE = "distance"
    AI = "ai"


class TextType(str, Enum):
    CONTINUOUS = "continuous"
    ISOLATED = "isolated"


class Lighting(str, Enum):
    GOOD = "good"
    MODERATE = "moderate"
    POOR = "poor"


class ColorFormat(str, Enum):
    HEX = "hex"
    RGB = "rgb"
    OKLCH = "oklch"
    CMYK = "cmyk"
    PANTONE = "pantone"


class LightnessPreset(str, Enum):
    LINEAR = "linear"
    CURVED = "curved"
    EASE_IN = "easeIn"
    EASE_OUT = "easeOut"
    CUSTOM = "custom"


class ChromaPreset(str, Enum):
    CONSTANT = "constant"
    DECREASE = "decrease"
    INCREASE = "increase"
    CUSTOM = "custom"
