from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np

from ..core.episode import Episode

__all__ = ["EpisodeSummary", "summarize"]


@dataclass(frozen=True)
class EpisodeSummary:
    policies: int
    states: int
    total: float
    mean: float
    minimum: float
    maximum: float


def summarize(episode: Episode[Any, Any]) -> EpisodeSummary:
    """Aggregate the recorded values; an empty episode summarises to zeros."""

    values = np.fromiter(episode.values(), dtype=float, count=len(episode))
    if not values.size:
        return EpisodeSummary(policies=0, states=0, total=0.0, mean=0.0, minimum=0.0, maximum=0.0)
    return EpisodeSummary(
        policies=int(values.size),
        states=len(episode.states()),
        total=float(np.sum(values)),
        mean=float(np.mean(values)),
        minimum=float(np.min(values)),
        maximum=float(np.max(values)),
    )
