"""Application-layer errors — raised at use-case level by ``authorize``."""

from __future__ import annotations

from typing import Any, Sequence

from mp_authz.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class AuthorizationError(ApplicationError):
    """The actor is not permitted to perform the actions on the target.

    ``actor``, ``actions`` and ``target`` are the exact values passed to
    :meth:`~mp_authz.kernel.security.ability.Ability.authorize`.
    """

    default_code = "authorization_error"

    def __init__(
        self,
        actor: Any,
        actions: str | Sequence[str],
        target: Any,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        names = [actions] if isinstance(actions, str) else list(actions)
        kwargs.setdefault("detail", {"actions": names})
        super().__init__(message or f"Actions {', '.join(names)} not permitted", **kwargs)
        self.actor = actor
        self.actions = actions
        self.target = target


__all__ = ["ApplicationError", "AuthorizationError"]
