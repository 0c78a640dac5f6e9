"""Error types of the proxy and the error bodies it sends."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any, ClassVar

from .piefed_models import _WireModel


class ErrorCode(str, Enum):
    UNKNOWN = "unknown"
    INCORRECT_LOGIN = "incorrect_login"


class ValidationError(Exception):
    """A request payload failed validation.

    ``errors`` holds the individual violations, ``source`` what was validated.
    """

    def __init__(self, errors: Iterable[Any], source: Any = None) -> None:
        self.errors = list(errors)
        self.source = source
        super().__init__(str(self))

    def __str__(self) -> str:
        return "; ".join(
            str(error.get("msg", error)) if isinstance(error, Mapping) else str(error)
            for error in self.errors
        )


class PiefedError(Exception):
    """An error answer from the PieFed API."""

    def __init__(self, error_code: str, status_code: int = 0) -> None:
        super().__init__(error_code)
        self.error_code = error_code
        self.status_code = status_code

    def __str__(self) -> str:
        return self.error_code


class ErrorResponse(_WireModel):
    _omit_empty: ClassVar[frozenset[str]] = frozenset({"message"})

    error: ErrorCode
    message: str = ""


def convert_piefed_error(error: PiefedError) -> ErrorResponse:
    """Map a PieFed error onto the Lemmy error body."""
    if error.error_code == "incorrect_login":
        return ErrorResponse(error=ErrorCode.INCORRECT_LOGIN)
    return ErrorResponse(
        error=ErrorCode.UNKNOWN, message="Piefed error: " + error.error_code
    )