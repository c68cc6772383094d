"""Error types raised by the userscript build pipeline."""

from __future__ import annotations


class UserscriptifyError(Exception):
    """Base error for all userscriptify errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class MissingRequiredFieldError(UserscriptifyError):
    """The metadata record lacks a directive every userscript must declare."""

    def __init__(self, field: str, message: str | None = None) -> None:
        self.field = field
        super().__init__(
            message or f"Userscript metadata information must contain a {field}."
        )
