"""Kernel security – AbilityTable and the rule fold.

The table maps an action name to the rules registered for it, in
registration order.  Evaluation of an action always consults the rules
registered under that exact name first, then the rules registered under the
wildcard :data:`MANAGE`.
"""

from __future__ import annotations

import threading
from typing import Any, Iterable

from mp_authz.kernel.security.rule import Rule, Verdict

MANAGE = "manage"


def fold(rules: Iterable[Rule], actor: Any, target: Any) -> Verdict:
    """Fold *rules* left-to-right into a single :class:`Verdict`.

    * ``REVOKED`` locks the result; remaining rules are not evaluated.
    * ``GRANTED`` is kept unless a later rule matches, in which case its
      outcome (``GRANTED`` or ``REVOKED``) replaces it.
    * ``UNMATCHED`` is replaced by whatever the next rule yields.
    """
    state = Verdict.UNMATCHED
    for rule in rules:
        if state is Verdict.REVOKED:
            break
        outcome = rule.outcome(actor, target)
        if state is Verdict.GRANTED:
            if outcome is not Verdict.UNMATCHED:
                state = outcome
        else:
            state = outcome
    return state


class AbilityTable:
    """Append-only, order-preserving storage of rules per action name.

    Mutation and snapshot reads are serialised with a :class:`threading.Lock`,
    so rules may be registered from several threads onto one table while
    other threads evaluate against it.
    """

    def __init__(self) -> None:
        self._rules: dict[str, list[Rule]] = {}
        self._lock = threading.Lock()

    def append(self, actions: Iterable[str], rule: Rule) -> None:
        """Push *rule* onto the list of every action in *actions*."""
        with self._lock:
            for action in actions:
                self._rules.setdefault(action, []).append(rule)

    def extend(self, other: "AbilityTable") -> None:
        """Append all of *other*'s rules, action by action, keeping order."""
        snapshot = other.snapshot()
        with self._lock:
            for action, rules in snapshot.items():
                self._rules.setdefault(action, []).extend(rules)

    def rules_for(self, action: str) -> tuple[Rule, ...]:
        """Return the rules registered under exactly *action*."""
        with self._lock:
            return tuple(self._rules.get(action, ()))

    def candidates(self, action: str) -> tuple[Rule, ...]:
        """Return the rules evaluated for *action*: specific, then wildcard."""
        with self._lock:
            specific = self._rules.get(action, [])
            wildcard = self._rules.get(MANAGE, [])
            return (*specific, *wildcard)

    def snapshot(self) -> dict[str, tuple[Rule, ...]]:
        with self._lock:
            return {action: tuple(rules) for action, rules in self._rules.items()}

    @property
    def actions(self) -> tuple[str, ...]:
        """Registered action names in first-registration order."""
        with self._lock:
            return tuple(self._rules)

    def __len__(self) -> int:
        with self._lock:
            return sum(len(rules) for rules in self._rules.values())

    def __repr__(self) -> str:
        return f"AbilityTable(actions={list(self.actions)!r})"


__all__ = ["MANAGE", "AbilityTable", "fold"]
