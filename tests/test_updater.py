from __future__ import annotations

import math
from collections.abc import Sequence

import pytest

from relearn.core.episode import Episode
from relearn.core.errors import InvalidValueError
from relearn.core.policy import Policy
from relearn.learning.updater import Transition, apply_rule, record, successor_values, sweep


def _backup(current: float, reward: float, successors: Sequence[float]) -> float:
    del current
    return reward + max(successors, default=0.0)


def _chain() -> list[Transition[str, str]]:
    return [
        Transition("S0", "right", reward=0.5, next_state="S1"),
        Transition("S1", "right", reward=1.0, next_state=None),
    ]


def test_transition_policy_pairs_state_and_action() -> None:
    transition = Transition("S0", "left", reward=1.0, next_state="S1")

    assert transition.policy == Policy("S0", "left")


def test_record_keeps_existing_values() -> None:
    episode: Episode[str, str] = Episode("S0")
    transition = Transition("S0", "left")

    policy = record(episode, transition, value=2.0)
    record(episode, transition, value=9.0)

    assert policy == Policy("S0", "left")
    assert episode.value(policy) == 2.0
    assert len(episode) == 1


def test_successor_values_for_terminal_and_missing_states() -> None:
    episode: Episode[str, str] = Episode("S0")
    episode.update(Policy("S1", "up"), 1.0)
    episode.update(Policy("S1", "down"), -1.0)

    assert successor_values(episode, None) == []
    assert successor_values(episode, "S7") == []
    assert sorted(successor_values(episode, "S1")) == [-1.0, 1.0]


def test_apply_rule_passes_successor_values() -> None:
    episode: Episode[str, str] = Episode("S0")
    transitions = _chain()
    for transition in transitions:
        record(episode, transition)

    applied = apply_rule(episode, list(reversed(transitions)), _backup)

    assert applied == 2
    assert episode.value(Policy("S1", "right")) == pytest.approx(1.0)
    assert episode.value(Policy("S0", "right")) == pytest.approx(1.5)


def test_apply_rule_starts_unknown_policies_from_initial() -> None:
    episode: Episode[str, str] = Episode("S0")
    seen: list[float] = []

    def rule(current: float, reward: float, successors: Sequence[float]) -> float:
        seen.append(current)
        return current + reward

    apply_rule(episode, [Transition("S0", "left", reward=2.0)], rule, initial=10.0)

    assert seen == [10.0]
    assert episode.value(Policy("S0", "left")) == 12.0


def test_apply_rule_rejects_non_finite_results() -> None:
    episode: Episode[str, str] = Episode("S0")

    with pytest.raises(InvalidValueError):
        apply_rule(episode, [Transition("S0", "left")], lambda *_: math.nan)


def test_sweep_rewrites_every_value() -> None:
    episode: Episode[str, str] = Episode("S0")
    episode.update(Policy("S0", "left"), 1.0)
    episode.update(Policy("S0", "right"), 2.0)
    calls: list[tuple[float, float, tuple[float, ...]]] = []

    def rule(current: float, reward: float, successors: Sequence[float]) -> float:
        calls.append((current, reward, tuple(successors)))
        return current * 2 + reward

    count = sweep(episode, rule, {Policy("S0", "right"): 1.0})

    assert count == 2
    assert episode.value(Policy("S0", "left")) == 2.0
    assert episode.value(Policy("S0", "right")) == 5.0
    assert all(successors == () for _, _, successors in calls)


def test_sweep_on_empty_episode() -> None:
    assert sweep(Episode("S0"), _backup) == 0
