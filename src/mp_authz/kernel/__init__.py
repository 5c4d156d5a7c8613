"""Kernel – framework-agnostic rule engine and error hierarchy."""

from mp_authz.kernel.errors import (
    ApplicationError,
    AuthorizationError,
    BaseError,
    InvalidArgumentError,
    InvalidStateError,
    RegistrationError,
)

__all__ = [
    "ApplicationError",
    "AuthorizationError",
    "BaseError",
    "InvalidArgumentError",
    "InvalidStateError",
    "RegistrationError",
]
