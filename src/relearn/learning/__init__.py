"""Seams for learning rules, action selection and value summaries."""

from .selection import SelectionConfig, action_values, select_action
from .summary import EpisodeSummary, summarize
from .updater import Transition, UpdateRule, apply_rule, record, successor_values, sweep

__all__ = [
    "EpisodeSummary",
    "SelectionConfig",
    "Transition",
    "UpdateRule",
    "action_values",
    "apply_rule",
    "record",
    "select_action",
    "successor_values",
    "summarize",
    "sweep",
]
