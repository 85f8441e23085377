"""Data structures for reinforcement-learning episodes.

A :class:`Policy` pairs a state with an action; an :class:`Episode` owns a root
state and the value of every policy recorded while interacting from it.
"""

from __future__ import annotations

from .core import (
    Episode,
    InvalidValueError,
    MissingRootError,
    Policy,
    PolicyEqual,
    PolicyHash,
    RelearnError,
    RootAlreadyEstablishedError,
    UnknownPolicyError,
    hash_combine,
)

__version__ = "0.1.0"

__all__ = [
    "Episode",
    "InvalidValueError",
    "MissingRootError",
    "Policy",
    "PolicyEqual",
    "PolicyHash",
    "RelearnError",
    "RootAlreadyEstablishedError",
    "UnknownPolicyError",
    "hash_combine",
]
