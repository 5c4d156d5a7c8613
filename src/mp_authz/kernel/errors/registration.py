"""Registration errors — malformed rules and misused fluent chains."""

from __future__ import annotations

from typing import Any

from mp_authz.kernel.errors.base import BaseError


class RegistrationError(BaseError):
    """Raised when a rule cannot be registered as requested."""

    default_code = "registration_error"


class InvalidArgumentError(RegistrationError, TypeError):
    """A predicate, condition or action argument has the wrong type."""

    default_code = "invalid_argument"

    def __init__(
        self,
        argument: str,
        expected: str,
        value: Any,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            f"Expected {argument} to be {expected}, got {type(value).__name__}",
            **kwargs,
        )
        self.argument = argument
        self.expected = expected
        self.value = value


class InvalidStateError(RegistrationError, RuntimeError):
    """A fluent builder step was called out of order or repeated."""

    default_code = "invalid_state"

    def __init__(self, message: str, *, step: str | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.step = step


__all__ = ["InvalidArgumentError", "InvalidStateError", "RegistrationError"]
