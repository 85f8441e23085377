"""Hash combination helpers for composite keys.

A policy is keyed on two sub-objects, so its hash has to fold two hashes into
one without making ``(state, action)`` collide with ``(action, state)``.  The
mixing step follows the familiar ``hash_combine`` recipe (golden ratio
constant plus shifted seed) and is truncated to 64 bits so the result does not
grow with every fold.
"""

from __future__ import annotations

import hashlib
from collections.abc import Callable, Hashable
from typing import Final

__all__ = ["GOLDEN_RATIO", "Hasher", "combine_hashes", "hash_combine", "stable_hash"]

GOLDEN_RATIO: Final = 0x9E3779B9
_MASK64: Final = (1 << 64) - 1

Hasher = Callable[[Hashable], int]


def hash_combine(seed: int, value: Hashable, hasher: Hasher = hash) -> int:
    """Return ``seed`` with the hash of ``value`` mixed in.

    Ints are immutable, so the updated seed is returned rather than written
    back; callers rebind (``seed = hash_combine(seed, x)``).
    """

    seed &= _MASK64
    digest = hasher(value) & _MASK64
    seed ^= (digest + GOLDEN_RATIO + ((seed << 6) & _MASK64) + (seed >> 2)) & _MASK64
    return seed


def combine_hashes(*values: Hashable, seed: int = 0, hasher: Hasher = hash) -> int:
    """Fold ``values`` into ``seed`` left to right."""

    for value in values:
        seed = hash_combine(seed, value, hasher)
    return seed


def stable_hash(value: Hashable) -> int:
    """Hash that does not change between interpreter runs.

    ``hash()`` on ``str`` and ``bytes`` is salted per process unless
    ``PYTHONHASHSEED`` is fixed.  This helper digests those with blake2b and
    recurses into tuples, so it can be passed as ``hasher`` when a combined
    hash has to be reproducible across runs.  Other types, numbers included,
    fall back to ``hash()``, which is unsalted for them and keeps ``-1`` and
    ``-1.0`` hashing alike.
    """

    if isinstance(value, str):
        value = value.encode("utf-8")
    if isinstance(value, bytes):
        return int.from_bytes(hashlib.blake2b(value, digest_size=8).digest(), "little")
    if isinstance(value, tuple):
        return combine_hashes(*value, seed=len(value), hasher=stable_hash)
    return hash(value) & _MASK64
