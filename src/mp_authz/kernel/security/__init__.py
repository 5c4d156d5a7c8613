"""Kernel security – Rule, AbilityTable, FluentRule, Ability."""
from mp_authz.kernel.security.rule import Effect, Rule, Verdict, always
from mp_authz.kernel.security.table import MANAGE, AbilityTable, fold
from mp_authz.kernel.security.builder import BuilderState, FluentRule
from mp_authz.kernel.security.ability import Ability, combine

__all__ = [
    "Ability",
    "AbilityTable",
    "BuilderState",
    "Effect",
    "FluentRule",
    "MANAGE",
    "Rule",
    "Verdict",
    "always",
    "combine",
    "fold",
]
