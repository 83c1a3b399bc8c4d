# MIT License (see LICENSE)
"""
Exceptions raised by the collision check.

Only caller contract violations surface as errors. Degenerate geometry
(short trajectories, zero-length or parallel segments) always resolves to a
number or a verdict.
"""
from __future__ import annotations


class CollisionCheckError(Exception):
    """Base class for all errors raised by collision_check."""


class InvalidInputError(CollisionCheckError, ValueError):
    """A trajectory, radius or scene member violates the input contract."""


class CheckCancelled(CollisionCheckError):
    """The caller's cancel event was set before a verdict was reached."""
