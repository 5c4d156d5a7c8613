"""Kernel security – Effect, Verdict, Rule."""

from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any, Callable

ActorTest = Callable[[Any], Any]
TargetTest = Callable[[Any, Any], Any]


def always(*_args: Any) -> bool:
    """Condition that matches any target."""
    return True


class Effect(str, Enum):
    """What a matching rule does to the verdict."""

    GRANT = "grant"
    REVOKE = "revoke"


class Verdict(Enum):
    """Evaluation state threaded through the rule fold.

    ``REVOKED`` is sticky: once reached, no later rule is consulted.
    """

    UNMATCHED = "unmatched"
    GRANTED = "granted"
    REVOKED = "revoked"


@dataclasses.dataclass(frozen=True)
class Rule:
    """An immutable (actor test, target test, effect) triple.

    Example::

        rule = Rule(lambda u: u.is_admin, lambda doc, u: doc.owner == u, Effect.GRANT)
        rule.outcome(user, doc)  # Verdict.GRANTED or Verdict.UNMATCHED
    """

    actor_test: ActorTest
    target_test: TargetTest = always
    effect: Effect = Effect.GRANT

    def matches(self, actor: Any, target: Any) -> bool:
        return bool(self.actor_test(actor)) and bool(self.target_test(target, actor))

    def outcome(self, actor: Any, target: Any) -> Verdict:
        if not self.matches(actor, target):
            return Verdict.UNMATCHED
        return Verdict.GRANTED if self.effect is Effect.GRANT else Verdict.REVOKED


__all__ = ["ActorTest", "Effect", "Rule", "TargetTest", "Verdict", "always"]
