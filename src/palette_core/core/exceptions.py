"""Custom exceptions for the color engine."""

from typing import Any

from palette_core.schemas.base import ErrorDetail


class PaletteException(Exception):
    """Base exception for the color engine."""

    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(message)

    def to_error_detail(self) -> ErrorDetail:
        """Serializable view for an API error envelope."""
        return ErrorDetail(code=self.code, message=self.message)


class InvalidHexError(PaletteException):
    """Input is not a 3- or 6-digit hex color."""

    def __init__(self, value: Any) -> None:
        super().__init__(
            f"Invalid hex color: {value!r}",
            "INVALID_HEX",
            {"value": value if isinstance(value, str) else repr(value)},
        )


class InvalidCountError(PaletteException):
    """Palette size outside the supported range."""

    def __init__(self, count: Any, minimum: int = 2) -> None:
        super().__init__(
            f"count must be an integer >= {minimum}, got {count!r}",
            "INVALID_COUNT",
            {"count": count if isinstance(count, int) else repr(count), "minimum": minimum},
        )


class InvalidHarmonyError(PaletteException):
    """Unknown harmony keyword."""

    def __init__(self, value: Any, choices: list[str] | None = None) -> None:
        details: dict[str, Any] = {"value": value if isinstance(value, str) else repr(value)}
        message = f"Invalid harmony: {value!r}"
        if choices:
            details["choices"] = choices
            message = f"{message}. Must be one of: {', '.join(choices)}"
        super().__init__(message, "INVALID_HARMONY", details)
