"""State/action keys used to index episode values.

A :class:`Policy` is the decision to take ``action`` while in ``state``.  It
holds the two objects it was built from, so they stay alive for as long as the
policy is reachable; treat them like dictionary keys and do not mutate them
afterwards.

:class:`PolicyHash` and :class:`PolicyEqual` are the hashing and equality
functors for containers that accept them explicitly.  ``Policy.__hash__`` and
``Policy.__eq__`` route through the same logic, so the plain ``dict`` used by
:class:`~relearn.core.episode.Episode` sees identical semantics.
"""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from .hashing import Hasher, hash_combine

__all__ = ["Policy", "PolicyEqual", "PolicyHash"]

S = TypeVar("S", bound=Hashable)
A = TypeVar("A", bound=Hashable)


@dataclass(frozen=True, slots=True, eq=False)
class Policy(Generic[S, A]):
    """Take ``action`` while in ``state``."""

    state: S
    action: A

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Policy):
            return NotImplemented
        return self.state == other.state and self.action == other.action

    def __hash__(self) -> int:
        # Reduce through hash() so the builtin and the functor always agree.
        return hash(_POLICY_HASH(self))


class PolicyHash:
    """Hash functor: the state hash combined with the action hash, in that order.

    Pass ``hasher=stable_hash`` for a combined hash that is reproducible across
    interpreter runs even for ``str`` states and actions.
    """

    __slots__ = ("hasher",)

    def __init__(self, hasher: Hasher = hash) -> None:
        self.hasher = hasher

    def __call__(self, policy: Policy[Any, Any]) -> int:
        seed = hash_combine(0, policy.state, self.hasher)
        return hash_combine(seed, policy.action, self.hasher)


class PolicyEqual:
    __slots__ = ()

    def __call__(self, lhs: Policy[Any, Any], rhs: Policy[Any, Any]) -> bool:
        return lhs == rhs


_POLICY_HASH = PolicyHash()
