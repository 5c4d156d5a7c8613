"""Unit tests for the fluent ``allow(predicate).to(...).on(...)`` chain."""

from __future__ import annotations

from typing import Any

import pytest

from mp_authz import Ability
from mp_authz.kernel.errors import InvalidArgumentError, InvalidStateError
from mp_authz.kernel.security import BuilderState, FluentRule
from mp_authz.kernel.security.builder import flatten_actions


def is_admin(actor: Any) -> bool:
    return actor == "admin"


def is_doc(target: Any, actor: Any) -> bool:
    return target == "doc"


@pytest.fixture()
def ability() -> Ability:
    return Ability()


class TestChain:
    def test_on_registers_and_returns_ability(self, ability: Ability) -> None:
        result = ability.allow(is_admin).to("read").on(is_doc)
        assert result is ability
        assert ability.can("admin", "read", "doc")
        assert ability.cannot("admin", "read", "img")

    def test_anything_matches_every_target(self, ability: Ability) -> None:
        result = ability.allow(is_admin).to("read").anything()
        assert result is ability
        assert ability.can("admin", "read", "img")
        assert ability.cannot("guest", "read", "img")

    def test_deny_chain_registers_revoke(self, ability: Ability) -> None:
        ability.allow(is_admin).to("manage").anything()
        ability.deny(is_admin).to("delete").on(is_doc)
        assert ability.cannot("admin", "delete", "doc")
        assert ability.can("admin", "delete", "img")

    def test_to_accepts_several_names(self, ability: Ability) -> None:
        ability.allow(is_admin).to("read", "write").anything()
        assert ability.can("admin", ["read", "write"], None)

    def test_to_flattens_sequences(self, ability: Ability) -> None:
        ability.allow(is_admin).to(["read", "write"], "delete").anything()
        assert ability.table.actions == ("read", "write", "delete")

    def test_nothing_registered_until_chain_completes(self, ability: Ability) -> None:
        builder = ability.allow(is_admin).to("read")
        assert len(ability.table) == 0
        builder.anything()
        assert len(ability.table) == 1

    def test_state_transitions(self, ability: Ability) -> None:
        builder = ability.allow(is_admin)
        assert isinstance(builder, FluentRule)
        assert builder.state is BuilderState.FRESH
        builder.to("read")
        assert builder.state is BuilderState.ACTIONS_CHOSEN
        builder.on(is_doc)
        assert builder.state is BuilderState.FINISHED

    def test_to_without_names_registers_nothing(self, ability: Ability) -> None:
        ability.allow(is_admin).to().anything()
        assert len(ability.table) == 0


class TestStateErrors:
    def test_to_twice(self, ability: Ability) -> None:
        builder = ability.allow(is_admin).to("read")
        with pytest.raises(InvalidStateError, match="`to` more than once"):
            builder.to("write")

    def test_on_after_anything(self, ability: Ability) -> None:
        builder = ability.allow(is_admin).to("read")
        builder.anything()
        with pytest.raises(InvalidStateError) as exc_info:
            builder.on(is_doc)
        assert exc_info.value.step == "on"
        assert exc_info.value.code == "invalid_state"
        assert len(ability.table) == 1

    def test_anything_after_on(self, ability: Ability) -> None:
        builder = ability.deny(is_admin).to("read")
        builder.on(is_doc)
        with pytest.raises(InvalidStateError):
            builder.anything()

    def test_anything_twice(self, ability: Ability) -> None:
        builder = ability.allow(is_admin).to("read")
        builder.anything()
        with pytest.raises(InvalidStateError, match="`anything` more than once"):
            builder.anything()

    def test_on_before_to(self, ability: Ability) -> None:
        builder = ability.allow(is_admin)
        with pytest.raises(InvalidStateError, match="before `to`"):
            builder.on(is_doc)

    def test_anything_before_to(self, ability: Ability) -> None:
        with pytest.raises(InvalidStateError):
            ability.allow(is_admin).anything()

    def test_to_after_finished(self, ability: Ability) -> None:
        builder = ability.allow(is_admin).to("read")
        builder.anything()
        with pytest.raises(InvalidStateError):
            builder.to("write")

    def test_invalid_state_is_runtime_error(self, ability: Ability) -> None:
        with pytest.raises(RuntimeError):
            ability.allow(is_admin).on(is_doc)


class TestArgumentErrors:
    def test_on_with_non_callable(self, ability: Ability) -> None:
        builder = ability.allow(is_admin).to("read")
        with pytest.raises(InvalidArgumentError, match="condition"):
            builder.on("doc")  # type: ignore[arg-type]
        assert len(ability.table) == 0

    def test_to_with_non_string(self, ability: Ability) -> None:
        with pytest.raises(InvalidArgumentError):
            ability.allow(is_admin).to(42)  # type: ignore[arg-type]


class TestFlattenActions:
    def test_mixed(self) -> None:
        assert flatten_actions(["a", ("b", "c"), ["d"]]) == ["a", "b", "c", "d"]

    def test_nested_non_string(self) -> None:
        with pytest.raises(InvalidArgumentError):
            flatten_actions([["a", ["b"]]])
