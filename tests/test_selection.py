from __future__ import annotations

import random

import pytest

from relearn.core.episode import Episode
from relearn.core.policy import Policy
from relearn.learning.selection import SelectionConfig, action_values, select_action


def _episode() -> Episode[str, str]:
    episode: Episode[str, str] = Episode("S0")
    episode.update(Policy("S0", "left"), 1.0)
    episode.update(Policy("S0", "right"), 2.0)
    episode.update(Policy("S1", "left"), 50.0)
    return episode


def test_greedy_selection_picks_highest_value() -> None:
    assert select_action(_episode(), "S0", ["left", "right"]) == "right"


def test_ties_go_to_first_action() -> None:
    episode: Episode[str, str] = Episode("S0")
    episode.update(Policy("S0", "a"), 1.0)
    episode.update(Policy("S0", "b"), 1.0)

    assert select_action(episode, "S0", ["b", "a"]) == "b"


def test_unseen_actions_use_configured_value() -> None:
    config = SelectionConfig(unseen_value=10.0)

    assert select_action(_episode(), "S0", ["left", "right", "jump"], config=config) == "jump"
    assert select_action(_episode(), "S0", ["left", "right", "jump"]) == "right"


def test_action_values_follow_action_order() -> None:
    values = action_values(_episode(), "S0", ["right", "left", "jump"], unseen_value=-1.0)

    assert values.tolist() == [2.0, 1.0, -1.0]


def test_full_exploration_samples_every_action() -> None:
    config = SelectionConfig(epsilon=1.0)
    rng = random.Random(7)
    actions = ["left", "right", "jump"]

    picked = {select_action(_episode(), "S0", actions, config=config, rng=rng) for _ in range(200)}

    assert picked == set(actions)


def test_empty_actions_rejected() -> None:
    with pytest.raises(ValueError):
        select_action(_episode(), "S0", [])


@pytest.mark.parametrize("epsilon", [-0.1, 1.5])
def test_epsilon_must_be_probability(epsilon: float) -> None:
    with pytest.raises(ValueError):
        SelectionConfig(epsilon=epsilon)
