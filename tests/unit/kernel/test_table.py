"""Unit tests for Rule, AbilityTable and the rule fold."""

from __future__ import annotations

import threading
from typing import Any

import pytest

from mp_authz.kernel.security import MANAGE, AbilityTable, Effect, Rule, Verdict, always, fold


def yes(*_args: Any) -> bool:
    return True


def no(*_args: Any) -> bool:
    return False


GRANT = Rule(yes, always, Effect.GRANT)
REVOKE = Rule(yes, always, Effect.REVOKE)
MISS_GRANT = Rule(no, always, Effect.GRANT)
MISS_REVOKE = Rule(yes, no, Effect.REVOKE)


# ---------------------------------------------------------------------------
# Rule
# ---------------------------------------------------------------------------


class TestRule:
    def test_frozen(self) -> None:
        with pytest.raises((AttributeError, TypeError)):
            GRANT.effect = Effect.REVOKE  # type: ignore[misc]

    def test_defaults(self) -> None:
        rule = Rule(yes)
        assert rule.target_test is always
        assert rule.effect is Effect.GRANT

    def test_outcomes(self) -> None:
        assert GRANT.outcome("a", "t") is Verdict.GRANTED
        assert REVOKE.outcome("a", "t") is Verdict.REVOKED
        assert MISS_GRANT.outcome("a", "t") is Verdict.UNMATCHED
        assert MISS_REVOKE.outcome("a", "t") is Verdict.UNMATCHED

    def test_target_test_gets_target_then_actor(self) -> None:
        seen: list[tuple[Any, Any]] = []
        rule = Rule(yes, lambda target, actor: seen.append((target, actor)) or True)
        assert rule.matches("actor", "target")
        assert seen == [("target", "actor")]

    def test_effect_string_values(self) -> None:
        assert Effect.GRANT == "grant"
        assert Effect.REVOKE == "revoke"


# ---------------------------------------------------------------------------
# fold
# ---------------------------------------------------------------------------


class TestFold:
    @pytest.mark.parametrize(
        ("rules", "expected"),
        [
            ((), Verdict.UNMATCHED),
            ((MISS_GRANT,), Verdict.UNMATCHED),
            ((GRANT,), Verdict.GRANTED),
            ((REVOKE,), Verdict.REVOKED),
            ((GRANT, REVOKE), Verdict.REVOKED),
            ((REVOKE, GRANT), Verdict.REVOKED),
            ((GRANT, MISS_GRANT), Verdict.GRANTED),
            ((GRANT, MISS_REVOKE), Verdict.GRANTED),
            ((MISS_REVOKE, GRANT), Verdict.GRANTED),
            ((GRANT, GRANT, REVOKE, GRANT), Verdict.REVOKED),
        ],
    )
    def test_transitions(self, rules: tuple[Rule, ...], expected: Verdict) -> None:
        assert fold(rules, "actor", "target") is expected

    def test_stops_at_revoke(self) -> None:
        def boom(_actor: Any) -> bool:
            raise AssertionError("evaluated after revoke")

        assert fold([REVOKE, Rule(boom)], "a", "t") is Verdict.REVOKED

    def test_grant_state_still_evaluates_following_rules(self) -> None:
        calls: list[str] = []
        rule = Rule(lambda actor: calls.append(actor) or False)
        assert fold([GRANT, rule], "a", "t") is Verdict.GRANTED
        assert calls == ["a"]


# ---------------------------------------------------------------------------
# AbilityTable
# ---------------------------------------------------------------------------


class TestAbilityTable:
    def test_empty(self) -> None:
        table = AbilityTable()
        assert table.rules_for("read") == ()
        assert table.candidates("read") == ()
        assert len(table) == 0
        assert table.actions == ()

    def test_append_to_many_actions(self) -> None:
        table = AbilityTable()
        table.append(["read", "write"], GRANT)
        assert table.rules_for("read") == (GRANT,)
        assert table.rules_for("write") == (GRANT,)
        assert len(table) == 2

    def test_order_preserved_without_dedup(self) -> None:
        table = AbilityTable()
        table.append(["read"], GRANT)
        table.append(["read"], REVOKE)
        table.append(["read"], GRANT)
        assert table.rules_for("read") == (GRANT, REVOKE, GRANT)

    def test_candidates_specific_before_wildcard(self) -> None:
        table = AbilityTable()
        table.append([MANAGE], GRANT)
        table.append(["read"], REVOKE)
        assert table.candidates("read") == (REVOKE, GRANT)
        assert table.candidates("write") == (GRANT,)

    def test_actions_in_first_registration_order(self) -> None:
        table = AbilityTable()
        table.append(["write"], GRANT)
        table.append(["read", "write"], GRANT)
        assert table.actions == ("write", "read")

    def test_extend_concatenates(self) -> None:
        left, right = AbilityTable(), AbilityTable()
        left.append(["read"], GRANT)
        right.append(["read"], REVOKE)
        right.append(["write"], GRANT)
        left.extend(right)
        assert left.rules_for("read") == (GRANT, REVOKE)
        assert left.rules_for("write") == (GRANT,)
        assert right.rules_for("read") == (REVOKE,)

    def test_snapshot_is_detached(self) -> None:
        table = AbilityTable()
        table.append(["read"], GRANT)
        snapshot = table.snapshot()
        table.append(["read"], REVOKE)
        assert snapshot == {"read": (GRANT,)}

    def test_concurrent_appends(self) -> None:
        table = AbilityTable()
        per_thread = 500

        def register() -> None:
            for _ in range(per_thread):
                table.append(["read", MANAGE], GRANT)

        threads = [threading.Thread(target=register) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(table.rules_for("read")) == 8 * per_thread
        assert len(table) == 2 * 8 * per_thread
