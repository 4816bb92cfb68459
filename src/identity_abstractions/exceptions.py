"""Library-specific exceptions."""

from __future__ import annotations

from typing import Mapping


class IdentityAbstractionsError(Exception):
    """Base exception for all identity abstraction failures."""

    def __init__(
        self,
        message: str,
        *,
        option_name: str | None = None,
        section: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.option_name = option_name
        self.section = section
        self.cause = cause

    def __str__(self) -> str:  # pragma: no cover - simple formatting
        if self.option_name is None:
            return str(self.args[0])
        return f"{self.option_name}: {self.args[0]}"


class InvalidOptionError(IdentityAbstractionsError, ValueError):
    """Raised when an option is assigned a disallowed value."""


class ConfigurationBindingError(IdentityAbstractionsError):
    """Raised when a configuration section cannot be bound to options."""

    def __init__(
        self,
        message: str,
        *,
        section: str | None = None,
        errors: list[Mapping[str, object]] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, section=section, cause=cause)
        self.errors = list(errors) if errors is not None else []
