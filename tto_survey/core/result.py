"""
Result type for calls that must never raise to their caller.

Fire-and-forget helpers (e.g. notification dispatch) return a ``Result``
instead of raising, so callers can branch on the outcome without wrapping
every call in ``try``/``except``.

Example:
    result = await notify_interview_completed(session_id, code, interviewer_id)
    match result:
        case Success(data):
            print(f"Delivered: {data}")
        case Failure(error):
            print(f"Not delivered: {error}")
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    """Represents a successful operation result."""

    value: T

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def unwrap(self) -> T:
        """Extract the success value."""
        return self.value

    def unwrap_or(self, _default: T) -> T:
        return self.value

    def as_dict(self) -> dict[str, Any]:
        """Tagged mapping form: ``{"success": True, "data": value}``."""
        return {"success": True, "data": self.value}

    def __repr__(self) -> str:
        return f"Success({self.value!r})"


@dataclass(frozen=True, slots=True)
class Failure(Generic[E]):
    """Represents a failed operation result."""

    error: E

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def unwrap(self) -> Any:
        """Raises the error when trying to extract value."""
        if isinstance(self.error, BaseException):
            raise self.error
        raise RuntimeError(f"Operation failed: {self.error}")

    def unwrap_or(self, default: T) -> T:
        return default

    def as_dict(self) -> dict[str, Any]:
        """Tagged mapping form: ``{"success": False, "error": error}``."""
        return {"success": False, "error": self.error}

    def __repr__(self) -> str:
        return f"Failure({self.error!r})"


Result = Union[Success[T], Failure[E]]


def success(value: T) -> Success[T]:
    return Success(value)


def failure(error: E) -> Failure[E]:
    return Failure(error)


__all__ = ["Failure", "Result", "Success", "failure", "success"]
