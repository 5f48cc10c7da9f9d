"""Exceptions raised while turning an uploaded document into text."""

from typing import Any


class ExtractionError(Exception):
    """Base exception for document extraction failures."""

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        self.cause = cause
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for logging/response."""
        result = {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }
        if self.cause:
            result["cause"] = str(self.cause)
        return result


class UnsupportedFormat(ExtractionError):
    """Raised when a format tag is not one of the supported document formats."""

    def __init__(self, format_tag: Any, **kwargs: Any) -> None:
        self.format_tag = format_tag
        details = kwargs.pop("details", {})
        details["format"] = str(format_tag)
        super().__init__(
            f"Unsupported document format: {format_tag!r}",
            error_code="UNSUPPORTED_FORMAT",
            details=details,
            **kwargs,
        )


class FormatDecodeError(ExtractionError):
    """Raised when a payload cannot be decoded as its declared format."""

    def __init__(self, variant: str, cause: Exception, **kwargs: Any) -> None:
        self.variant = variant
        details = kwargs.pop("details", {})
        details["variant"] = variant
        super().__init__(
            f"{variant.upper()} extraction failed: {cause}",
            error_code="FORMAT_DECODE_ERROR",
            details=details,
            cause=cause,
            **kwargs,
        )
