"""Error hierarchy for the helloharness pipeline."""

from __future__ import annotations

from typing import Any

__all__ = [
    "HarnessError",
    "InputLoadError",
    "ParseError",
    "SerializeError",
    "ConfigNotFoundError",
    "ConfigError",
    "ErrorCodes",
]


class HarnessError(Exception):
    """Base error for all helloharness errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class InputLoadError(HarnessError):
    """Raised when the request file is missing, unreadable, or not UTF-8."""

    def __init__(self, path: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="INPUT_LOAD_ERROR",
            message=f"Cannot read request file '{path}': {reason}",
            details={"path": path, "reason": reason},
            **kwargs,
        )


class ParseError(HarnessError):
    """Raised when request text is not a JSON object with a string ``input``."""

    def __init__(
        self,
        message: str,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            code="PARSE_ERROR",
            message=message,
            details={"errors": errors or []},
            **kwargs,
        )

    @property
    def errors(self) -> list[dict[str, Any]]:
        """Per-field error dicts with 'field', 'code', 'message' keys."""
        return self.details["errors"]


class SerializeError(HarnessError):
    """Raised when a response cannot be encoded as JSON text."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="SERIALIZE_ERROR", message=message, **kwargs)


class ConfigNotFoundError(HarnessError):
    """Raised when a configuration file cannot be found."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Configuration file not found: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )


class ConfigError(HarnessError):
    """Raised when configuration is invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="CONFIG_INVALID", message=message, **kwargs)


class ErrorCodes:
    """All harness error codes as constants.

    Example:
        if error.code == ErrorCodes.PARSE_ERROR:
            handle_bad_request()
    """

    INPUT_LOAD_ERROR = "INPUT_LOAD_ERROR"
    PARSE_ERROR = "PARSE_ERROR"
    SERIALIZE_ERROR = "SERIALIZE_ERROR"
    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_INVALID = "CONFIG_INVALID"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
