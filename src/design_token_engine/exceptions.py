"""Exception hierarchy for the Design Token Engine.

All engine exceptions inherit from DesignTokenError so callers can catch
every engine failure with a single base class while keeping the specific
types for the cases they want to handle.

Only two families ever escape the public API:
- PaletteGenerationError, when a palette cannot be anchored to its base color
- InvalidScaleConfigError, when scale inputs break their invariants

ColorParseError is raised by the strict parser only; the single-color
operations catch it and degrade to documented fallbacks.
"""

from typing import Any


class DesignTokenError(Exception):
    """Base exception for all Design Token Engine errors.

    Includes an error_code for collaborators that serialize failures and an
    optional context dict with the offending inputs.
    """

    error_code: str = "DTE_ERROR"

    def __init__(
        self,
        message: str,
        *,
        error_code: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        if error_code:
            self.error_code = error_code
        self.context = context or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a plain dictionary."""
        return {
            "error": self.error_code,
            "message": self.message,
            "context": self.context,
        }


# =============================================================================
# Color Errors
# =============================================================================


class ColorError(DesignTokenError):
    """Base exception for color-related errors."""

    error_code = "COLOR_ERROR"


class ColorParseError(ColorError, ValueError):
    """Raised when a color string cannot be parsed."""

    error_code = "COLOR_PARSE_ERROR"

    def __init__(self, color: object, reason: str = "unrecognized color") -> None:
        super().__init__(
            f"Cannot parse color {color!r}: {reason}",
            context={"color": str(color), "reason": reason},
        )


class PaletteGenerationError(ColorError):
    """Raised when a palette cannot be generated as a coherent unit."""

    error_code = "PALETTE_GENERATION_ERROR"

    def __init__(self, message: str, *, base_color: object = None) -> None:
        context: dict[str, Any] = {}
        if base_color is not None:
            context["base_color"] = str(base_color)
        super().__init__(message, context=context)


# =============================================================================
# Scale Errors
# =============================================================================


class ScaleError(DesignTokenError):
    """Base exception for type scale errors."""

    error_code = "SCALE_ERROR"


class InvalidScaleConfigError(ScaleError, ValueError):
    """Raised when scale or distance-model parameters are out of range."""

    error_code = "INVALID_SCALE_CONFIG"

    def __init__(self, field: str, value: object, requirement: str) -> None:
        super().__init__(
            f"Invalid {field}: {value!r} ({requirement})",
            context={"field": field, "value": str(value), "requirement": requirement},
        )
        self.field = field
