"""Episode container: one root state plus the value of every policy seen.

The tree of states reachable from the root is not stored as explicit links.
It is implied by the recorded policies, and the helpers :meth:`Episode.states`,
:meth:`Episode.actions` and :meth:`Episode.outgoing` rebuild the pieces of it
that callers need on demand from the flat ``Policy -> float`` mapping.
"""

from __future__ import annotations

import copy
import logging
import math
from collections.abc import Hashable, ItemsView, Iterator, KeysView, ValuesView
from typing import Any, Generic, TypeVar, overload

from .errors import InvalidValueError, MissingRootError, RootAlreadyEstablishedError, UnknownPolicyError
from .policy import Policy, PolicyEqual, PolicyHash

__all__ = ["Episode"]

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=Hashable)
A = TypeVar("A", bound=Hashable)
T = TypeVar("T")

_NO_ROOT: Any = object()
_RAISE: Any = object()


def _coerce_value(value: Any, owner: object) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidValueError(f"{_describe(owner)} must be a real number, got {value!r}") from exc
    if not math.isfinite(number):
        raise InvalidValueError(f"{_describe(owner)} must be finite, got {number!r}")
    return number


def _describe(owner: object) -> str:
    return owner if isinstance(owner, str) else f"value for {owner!r}"


class Episode(Generic[S, A]):
    """Root state plus the mapping from policies to their current value.

    The episode keeps its own deep copy of the root state, so later changes to
    the object handed in (or to the one :attr:`root` returns) cannot reach it;
    the root is fixed once set.  Values are inserted or overwritten through
    :meth:`update` and read back through :meth:`value`; iterating an episode
    yields ``(policy, value)`` pairs in the mapping's internal order.

    :meth:`value` raises :class:`UnknownPolicyError` for a policy that was
    never recorded.  Passing ``missing=0.0`` (or any finite number) makes that
    value the answer instead; each such fallback is logged at debug level.
    """

    key_equal = PolicyEqual()
    key_hash = PolicyHash()

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, root: S = _NO_ROOT, *, missing: float = _RAISE) -> None:
        self._root: S = root if root is _NO_ROOT else copy.deepcopy(root)
        self._missing = missing if missing is _RAISE else _coerce_value(missing, "missing-value default")
        self._policies: dict[Policy[S, A], float] = {}

    @property
    def has_root(self) -> bool:
        return self._root is not _NO_ROOT

    @property
    def root(self) -> S:
        if self._root is _NO_ROOT:
            raise MissingRootError("episode has no root state")
        return copy.deepcopy(self._root)

    def establish_root(self, state: S) -> None:
        """Give an episode created without a root its root state."""

        if self._root is not _NO_ROOT:
            raise RootAlreadyEstablishedError(f"episode root already set to {self._root!r}")
        self._root = copy.deepcopy(state)

    def update(self, policy: Policy[S, A], value: float) -> None:
        """Record ``value`` for ``policy``, overwriting any previous value."""

        self._policies[policy] = _coerce_value(value, policy)

    def value(self, policy: Policy[S, A]) -> float:
        try:
            return self._policies[policy]
        except KeyError:
            if self._missing is not _RAISE:
                logger.debug("No value recorded for %r; defaulting to %s", policy, self._missing)
                return self._missing
            raise UnknownPolicyError(f"policy {policy!r} not found in episode") from None

    @overload
    def get(self, policy: Policy[S, A]) -> float | None: ...

    @overload
    def get(self, policy: Policy[S, A], default: T) -> float | T: ...

    def get(self, policy, default=None):
        return self._policies.get(policy, default)

    def __contains__(self, policy: object) -> bool:
        return policy in self._policies

    def __len__(self) -> int:
        return len(self._policies)

    def __iter__(self) -> Iterator[tuple[Policy[S, A], float]]:
        return iter(self._policies.items())

    def items(self) -> ItemsView[Policy[S, A], float]:
        return self._policies.items()

    def policies(self) -> KeysView[Policy[S, A]]:
        return self._policies.keys()

    def values(self) -> ValuesView[float]:
        return self._policies.values()

    def states(self) -> set[S]:
        """States that appear in at least one recorded policy."""

        return {policy.state for policy in self._policies}

    def actions(self, state: S) -> list[A]:
        """Actions recorded from ``state``; empty when none were taken."""

        return [policy.action for policy in self._policies if policy.state == state]

    def outgoing(self, state: S) -> list[tuple[Policy[S, A], float]]:
        return [(policy, value) for policy, value in self._policies.items() if policy.state == state]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Episode):
            return NotImplemented
        if self.has_root != other.has_root:
            return False
        if self.has_root and self._root != other._root:
            return False
        return self._policies == other._policies

    def __repr__(self) -> str:
        root = repr(self._root) if self.has_root else "<none>"
        return f"Episode(root={root}, policies={len(self._policies)})"
