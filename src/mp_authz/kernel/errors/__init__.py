"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── RegistrationError        (registration.py)
    │   ├── InvalidArgumentError
    │   └── InvalidStateError
    └── ApplicationError         (application.py)
        └── AuthorizationError
"""

from mp_authz.kernel.errors.application import ApplicationError, AuthorizationError
from mp_authz.kernel.errors.base import BaseError
from mp_authz.kernel.errors.registration import (
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
