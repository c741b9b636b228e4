"""Shared error types and helpers for turning exceptions into responses."""

UNKNOWN_ERROR = "Unknown error"


class ConfigurationError(RuntimeError):
    """Raised when a required setting or secret is missing at request time."""


def describe_exception(exc: BaseException | None) -> str:
    """Return the exception's message, or a fixed fallback when it has none."""
    if exc is None:
        return UNKNOWN_ERROR
    message = str(exc).strip()
    return message or UNKNOWN_ERROR


__all__ = ["ConfigurationError", "UNKNOWN_ERROR", "describe_exception"]
