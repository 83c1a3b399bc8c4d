# MIT License (see LICENSE)
"""
Numeric constants and environment variable names used by the collision check.
"""
from __future__ import annotations

# Threshold on |dA.y*dB.x - dA.x*dB.y| below which two segments are treated
# as parallel (or degenerate) and the line-intersection solve is skipped.
# Absolute, in squared length units of the input coordinates.
PARALLEL_EPS: float = 1e-4

# Squared segment length below which a segment is treated as a single point.
DEGENERATE_EPS: float = 1e-24

ENV_METRIC = "COLLISION_CHECK_METRIC"
ENV_PAIRING = "COLLISION_CHECK_PAIRING"
ENV_PARALLEL_EPS = "COLLISION_CHECK_PARALLEL_EPS"
ENV_WORKERS = "COLLISION_CHECK_WORKERS"
ENV_BROADPHASE = "COLLISION_CHECK_BROADPHASE"
