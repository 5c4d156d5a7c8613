"""Kernel security – FluentRule, the ``allow(pred).to(...).on(...)`` chain."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Iterable

from mp_authz.kernel.errors import InvalidArgumentError, InvalidStateError
from mp_authz.kernel.security.rule import ActorTest, TargetTest, always

if TYPE_CHECKING:
    from mp_authz.kernel.security.ability import Ability

Register = Callable[[ActorTest, list[str], TargetTest], "Ability"]


class BuilderState(str, Enum):
    FRESH = "fresh"
    ACTIONS_CHOSEN = "actions_chosen"
    FINISHED = "finished"


def flatten_actions(actions: Iterable[Any]) -> list[str]:
    """Flatten names and sequences of names one level into a list of names."""
    names: list[str] = []
    for item in actions:
        if isinstance(item, str):
            names.append(item)
            continue
        try:
            nested = list(item)
        except TypeError:
            raise InvalidArgumentError("action", "a string or a sequence of strings", item) from None
        for name in nested:
            if not isinstance(name, str):
                raise InvalidArgumentError("action", "a string", name)
            names.append(name)
    return names


class FluentRule:
    """Single-use builder returned by ``allow(predicate)`` / ``deny(predicate)``.

    The chain is ``to(*actions)`` followed by exactly one of ``on(condition)``
    or ``anything()``; the rule is registered only when the chain completes.

    Example::

        ability.allow(is_user).to("read", "comment").on(is_published)
        ability.deny(is_guest).to("manage").anything()
    """

    def __init__(self, predicate: ActorTest, register: Register) -> None:
        self._predicate = predicate
        self._register = register
        self._actions: list[str] = []
        self.state = BuilderState.FRESH

    def to(self, *actions: str | Iterable[str]) -> "FluentRule":
        if self.state is not BuilderState.FRESH:
            raise InvalidStateError("Cannot call `to` more than once", step="to")
        self._actions = flatten_actions(actions)
        self.state = BuilderState.ACTIONS_CHOSEN
        return self

    def on(self, condition: TargetTest) -> "Ability":
        self._finish("on")
        if not callable(condition):
            raise InvalidArgumentError("condition", "callable", condition)
        return self._register(self._predicate, self._actions, condition)

    def anything(self) -> "Ability":
        self._finish("anything")
        return self._register(self._predicate, self._actions, always)

    def _finish(self, step: str) -> None:
        if self.state is BuilderState.FRESH:
            raise InvalidStateError(f"Cannot call `{step}` before `to`", step=step)
        if self.state is BuilderState.FINISHED:
            raise InvalidStateError(f"Cannot call `{step}` more than once", step=step)
        self.state = BuilderState.FINISHED

    def __repr__(self) -> str:
        return f"FluentRule(state={self.state.value!r}, actions={self._actions!r})"


__all__ = ["BuilderState", "FluentRule", "flatten_actions"]
