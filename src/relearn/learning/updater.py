"""Drive caller-supplied value update rules over an episode.

relearn does not ship a learning rule.  Q-learning, R-learning or anything
else plugs in as an :class:`UpdateRule`: a callable receiving the current
value of a policy, the reward observed for it and the values recorded from
the state it led to, and returning the new value.

Typical loop::

    episode = Episode(start)
    for transition in observed:
        record(episode, transition)
    apply_rule(episode, observed, my_rule)
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar

from ..core.episode import Episode
from ..core.policy import Policy

__all__ = ["Transition", "UpdateRule", "apply_rule", "record", "successor_values", "sweep"]

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=Hashable)
A = TypeVar("A", bound=Hashable)


class UpdateRule(Protocol):
    def __call__(self, current: float, reward: float, successors: Sequence[float]) -> float: ...


@dataclass(frozen=True, slots=True)
class Transition(Generic[S, A]):
    """One observed step: ``action`` taken in ``state`` yielding ``reward``.

    ``next_state`` is ``None`` when the step ended the interaction.
    """

    state: S
    action: A
    reward: float = 0.0
    next_state: S | None = None

    @property
    def policy(self) -> Policy[S, A]:
        return Policy(self.state, self.action)


def record(episode: Episode[S, A], transition: Transition[S, A], value: float = 0.0) -> Policy[S, A]:
    """Make sure ``transition`` has a value in ``episode``; existing values are kept."""

    policy = transition.policy
    if policy not in episode:
        episode.update(policy, value)
    return policy


def successor_values(episode: Episode[S, A], state: S | None) -> list[float]:
    if state is None:
        return []
    return [value for _, value in episode.outgoing(state)]


def apply_rule(
    episode: Episode[S, A],
    transitions: Iterable[Transition[S, A]],
    rule: UpdateRule,
    *,
    initial: float = 0.0,
) -> int:
    """Apply ``rule`` once per transition, in order, writing results back.

    Policies without a value start from ``initial``.  Returns the number of
    updates performed.
    """

    applied = 0
    for transition in transitions:
        policy = transition.policy
        current = episode.get(policy, initial)
        successors = successor_values(episode, transition.next_state)
        episode.update(policy, rule(current, float(transition.reward), successors))
        applied += 1
    logger.debug("Applied update rule to %d transitions", applied)
    return applied


def sweep(
    episode: Episode[S, A],
    rule: UpdateRule,
    rewards: Mapping[Policy[S, A], float] | None = None,
) -> int:
    """Rewrite every recorded value with ``rule``.

    Walks a snapshot of the entries so the writes do not invalidate the
    iteration.  Rewards default to ``0.0``; no successor information is
    available, so the rule receives an empty sequence.
    """

    rewards = rewards or {}
    snapshot: list[tuple[Policy[Any, Any], float]] = list(episode)
    for policy, current in snapshot:
        episode.update(policy, rule(current, float(rewards.get(policy, 0.0)), ()))
    return len(snapshot)
