"""Kernel security – Ability, the allow/deny rule engine.

Rules are registered with :meth:`Ability.allow` (grant) and
:meth:`Ability.deny` (revoke) and evaluated with :meth:`Ability.can`.

Evaluation order for an action is: the rules registered under that exact
action name, in registration order, then the rules registered under
``"manage"``.  A matching deny is sticky: no rule after it is consulted.
A grant, on the other hand, is downgraded by any later matching deny.

Example::

    ability = Ability()
    ability.allow(is_user, "manage", is_product)
    ability.deny(is_user, "read", is_published)

    ability.can(user, "read", draft)       # True
    ability.can(user, "read", published)   # False
    ability.can(user, "delete", published) # True
"""

from __future__ import annotations

import functools
from typing import Any, Iterable, Sequence

from mp_authz.config.settings.authz import AuthzSettings
from mp_authz.config.settings.loaders import EnvSettingsLoader
from mp_authz.kernel.errors import AuthorizationError, InvalidArgumentError
from mp_authz.kernel.security.builder import FluentRule
from mp_authz.kernel.security.rule import ActorTest, Effect, Rule, TargetTest, Verdict, always
from mp_authz.kernel.security.table import AbilityTable, fold
from mp_authz.observability.logging import AuditLogger, AuditOutcome, get_logger

logger = get_logger(__name__)


def _normalize_actions(actions: str | Iterable[str]) -> list[str]:
    if isinstance(actions, str):
        return [actions]
    try:
        names = list(actions)
    except TypeError:
        raise InvalidArgumentError("actions", "a string or a sequence of strings", actions) from None
    for name in names:
        if not isinstance(name, str):
            raise InvalidArgumentError("action", "a string", name)
    return names


def combine(*abilities: "Ability") -> "Ability":
    """Return a new :class:`Ability` holding the rules of every input.

    For each action name the rule lists are concatenated in the order the
    abilities are given.  Inputs are left untouched, and the result is a plain
    :class:`Ability`: overridden hooks of the inputs are not carried over.
    """
    combined = Ability()
    for ability in abilities:
        combined.table.extend(ability.table)
    logger.debug("ability.combined", sources=len(abilities), rules=len(combined.table))
    return combined


class Ability:
    """Table of allow/deny rules plus the ``can``/``authorize`` facade.

    Parameters
    ----------
    settings:
        Runtime options.  Defaults to :class:`AuthzSettings` with its
        defaults; use :meth:`from_env` to read ``AUTHZ_*`` variables.
    audit_logger:
        Sink for denials raised by :meth:`authorize`.  Defaults to an
        :class:`AuditLogger` tagged with ``settings.service_name``.
    """

    combine = staticmethod(combine)

    def __init__(
        self,
        settings: AuthzSettings | None = None,
        *,
        audit_logger: AuditLogger | None = None,
    ) -> None:
        self.settings = settings or AuthzSettings()
        self.table = AbilityTable()
        self._audit = audit_logger or AuditLogger(
            service=self.settings.service_name,
            logger=get_logger("mp_authz.audit"),
        )

    @classmethod
    def from_env(cls, **kwargs: Any) -> "Ability":
        """Build an ability configured from ``AUTHZ_*`` environment variables."""
        return cls(EnvSettingsLoader().load(AuthzSettings), **kwargs)

    # Registration -----------------------------------------------------

    def allow(
        self,
        predicate: ActorTest,
        actions: str | Iterable[str] | None = None,
        condition: TargetTest | None = None,
    ) -> "Ability | FluentRule":
        """Grant *actions* to actors matching *predicate* on targets matching *condition*.

        With only *predicate*, returns a :class:`FluentRule`::

            ability.allow(is_user).to("edit").on(is_product)
        """
        return self._add(Effect.GRANT, predicate, actions, condition)

    def deny(
        self,
        predicate: ActorTest,
        actions: str | Iterable[str] | None = None,
        condition: TargetTest | None = None,
    ) -> "Ability | FluentRule":
        """Revoke *actions*; same signature as :meth:`allow`."""
        return self._add(Effect.REVOKE, predicate, actions, condition)

    def _add(
        self,
        effect: Effect,
        predicate: ActorTest,
        actions: str | Iterable[str] | None,
        condition: TargetTest | None,
    ) -> "Ability | FluentRule":
        if not callable(predicate):
            raise InvalidArgumentError("predicate", "callable", predicate)
        if actions is None:
            if condition is not None:
                raise InvalidArgumentError("actions", "given together with condition", actions)
            return FluentRule(predicate, functools.partial(self._add, effect))
        if condition is None:
            condition = always
        elif not callable(condition):
            raise InvalidArgumentError("condition", "callable", condition)

        names = _normalize_actions(actions)
        self.table.append(names, Rule(predicate, condition, effect))
        return self

    # Evaluation -------------------------------------------------------

    def verdict(self, actor: Any, action: str, target: Any) -> Verdict:
        """Return the raw fold result for a single *action*."""
        return fold(self.table.candidates(action), actor, target)

    def can(self, actor: Any, actions: str | Iterable[str], target: Any) -> bool:
        """Return ``True`` if *actor* may perform every one of *actions* on *target*."""
        return all(
            self.verdict(actor, action, target) is Verdict.GRANTED
            for action in _normalize_actions(actions)
        )

    def cannot(self, actor: Any, actions: str | Iterable[str], target: Any) -> bool:
        return not self.can(actor, actions, target)

    def authorize(self, actor: Any, actions: str | Iterable[str], target: Any) -> None:
        """Raise :meth:`create_authorization_error` unless :meth:`can` holds."""
        names = _normalize_actions(actions)
        if self.can(actor, names, target):
            return
        if not isinstance(actions, (str, Sequence)):
            actions = names
        error = self.create_authorization_error(actor, actions, target)
        logger.info("ability.denied", actions=names, target_type=type(target).__name__)
        if self.settings.audit_denials:
            self._audit.log_access(
                actor,
                resource=type(target).__name__,
                action=",".join(names),
                outcome=AuditOutcome.DENIED,
            )
        raise error

    def create_authorization_error(
        self, actor: Any, actions: str | Iterable[str], target: Any
    ) -> BaseException:
        """Build the exception raised by :meth:`authorize`.

        Override in a subclass to raise an application-specific error.
        """
        return AuthorizationError(actor, actions, target)

    def __repr__(self) -> str:
        return f"Ability(rules={len(self.table)}, actions={list(self.table.actions)!r})"


__all__ = ["Ability", "combine"]
