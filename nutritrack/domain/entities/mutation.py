"""Outcome of an idempotent mutation."""

from enum import Enum, auto


class MutationResult(Enum):
    """Whether a mutation changed anything.

    ``NOOP`` covers targets that are absent, owned by someone else, or already
    in the requested state (already read, already archived, ...).
    """

    APPLIED = auto()
    NOOP = auto()


__all__ = ["MutationResult"]
