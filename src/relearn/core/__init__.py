"""Policy keys and the episode value store."""

from .episode import Episode
from .errors import (
    InvalidValueError,
    MissingRootError,
    RelearnError,
    RootAlreadyEstablishedError,
    UnknownPolicyError,
)
from .hashing import combine_hashes, hash_combine, stable_hash
from .policy import Policy, PolicyEqual, PolicyHash

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
    "combine_hashes",
    "hash_combine",
    "stable_hash",
]
