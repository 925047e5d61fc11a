"""
调度策略模块
"""
from scheduler_extender.policies.base import (
    Predicate, Scorer, Binder, PolicyError, PolicyUnsupportedError, PolicyContractError
)
from scheduler_extender.policies.registry import PolicyRegistry
from scheduler_extender.policies.res_pack import ResourcePackScorer
from scheduler_extender.policies.unsupported import UnsupportedPredicate, UnsupportedBinder

__all__ = [
    'Predicate', 'Scorer', 'Binder',
    'PolicyError', 'PolicyUnsupportedError', 'PolicyContractError',
    'PolicyRegistry',
    'ResourcePackScorer', 'UnsupportedPredicate', 'UnsupportedBinder',
]
