from __future__ import annotations

import logging
import random
from collections.abc import Hashable, Sequence
from dataclasses import dataclass
from typing import TypeVar

import numpy as np

from ..core.episode import Episode
from ..core.policy import Policy

__all__ = ["SelectionConfig", "action_values", "select_action"]

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=Hashable)
A = TypeVar("A", bound=Hashable)


@dataclass(frozen=True, slots=True)
class SelectionConfig:
    """Exploration settings for value-driven action selection."""

    epsilon: float = 0.0
    # Value assumed for actions that have no recorded policy yet.
    unseen_value: float = 0.0

    def __post_init__(self) -> None:
        if not 0.0 <= self.epsilon <= 1.0:
            raise ValueError("epsilon must be within [0, 1]")


def action_values(episode: Episode[S, A], state: S, actions: Sequence[A], unseen_value: float = 0.0) -> np.ndarray:
    return np.array(
        [episode.get(Policy(state, action), unseen_value) for action in actions],
        dtype=float,
    )


def select_action(
    episode: Episode[S, A],
    state: S,
    actions: Sequence[A],
    *,
    config: SelectionConfig | None = None,
    rng: random.Random | None = None,
) -> A:
    """Pick the highest-valued action from ``state``, exploring with ``epsilon``.

    Ties go to the earliest action in ``actions``.
    """

    if not actions:
        raise ValueError("actions list cannot be empty")
    config = config or SelectionConfig()
    rng = rng or random.Random()
    if config.epsilon > 0.0 and rng.random() < config.epsilon:
        choice = actions[rng.randrange(len(actions))]
        logger.debug("Exploring from %r: picked %r at random", state, choice)
        return choice
    values = action_values(episode, state, actions, config.unseen_value)
    return actions[int(np.argmax(values))]
