from __future__ import annotations

__all__ = [
    "InvalidValueError",
    "MissingRootError",
    "RelearnError",
    "RootAlreadyEstablishedError",
    "UnknownPolicyError",
]


class RelearnError(Exception):
    """Base class for errors raised by relearn."""


class MissingRootError(RelearnError, LookupError):
    """Raised when the root of an episode that never received one is read."""


class RootAlreadyEstablishedError(RelearnError, ValueError):
    """Raised when a root is assigned to an episode that already has one."""


class UnknownPolicyError(RelearnError, KeyError):
    """Raised when the value of a policy that was never recorded is read."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return str(self.args[0]) if self.args else ""


class InvalidValueError(RelearnError, ValueError):
    """Raised when a policy value is not a finite real number."""
