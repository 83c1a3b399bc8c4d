# MIT License (see LICENSE)
"""
Evaluation settings for the collision check.

Settings are passed explicitly to the evaluator; CheckConfig.from_env()
builds them from COLLISION_CHECK_* environment variables for callers that
prefer process-level configuration.
"""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from typing import Mapping

from .constants import (
    PARALLEL_EPS,
    ENV_METRIC,
    ENV_PAIRING,
    ENV_PARALLEL_EPS,
    ENV_WORKERS,
    ENV_BROADPHASE,
)
from .geometry.distance import SEGMENT_METRICS

logger = logging.getLogger(__name__)

# "all": every ego segment against every agent segment (swept-path overlap).
# "time_aligned": segment i of the ego only against segment i of the agent.
PAIRINGS = ("all", "time_aligned")


@dataclass(frozen=True)
class CheckConfig:
    """
    Options controlling how segment pairs are formed and measured.

    Attributes:
        metric: Segment distance metric, one of SEGMENT_METRICS.
                "clamped" (default) is the parametric clamp with an exact
                parallel fallback, "reference" keeps the endpoint-length
                parallel fallback, "exact" is the true minimum distance.
        pairing: Segment pairing mode, one of PAIRINGS.
        parallel_eps: Denominator threshold for the parallel fallback.
        workers: Thread count for scene checks. 1 evaluates serially.
        broadphase: Skip agents whose bounding boxes are provably too far
                    apart. Ignored for the "reference" metric.
    """
    metric: str = "clamped"
    pairing: str = "all"
    parallel_eps: float = PARALLEL_EPS
    workers: int = 1
    broadphase: bool = True

    def __post_init__(self) -> None:
        if self.metric not in SEGMENT_METRICS:
            raise ValueError(f"Unknown segment metric: {self.metric}")
        if self.pairing not in PAIRINGS:
            raise ValueError(f"Unknown pairing mode: {self.pairing}")
        if not self.parallel_eps > 0:
            raise ValueError(f"parallel_eps must be positive, got {self.parallel_eps}")
        if isinstance(self.workers, bool) or not isinstance(self.workers, int):
            raise TypeError(f"workers must be an int, got {type(self.workers).__name__}")
        if self.workers < 1:
            raise ValueError(f"workers must be at least 1, got {self.workers}")

    @property
    def use_broadphase(self) -> bool:
        """Whether bounding-box culling is sound for this configuration."""
        return self.broadphase and self.metric != "reference"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "CheckConfig":
        """
        Build a config from COLLISION_CHECK_* variables.

        Unset variables keep their defaults.

        Args:
            environ: Mapping to read instead of os.environ.

        Raises:
            ValueError: If a variable holds an unparsable or invalid value.
        """
        env = os.environ if environ is None else environ
        kwargs: dict[str, object] = {}

        if ENV_METRIC in env:
            kwargs["metric"] = env[ENV_METRIC].strip().lower()
        if ENV_PAIRING in env:
            kwargs["pairing"] = env[ENV_PAIRING].strip().lower()
        if ENV_PARALLEL_EPS in env:
            kwargs["parallel_eps"] = float(env[ENV_PARALLEL_EPS])
        if ENV_WORKERS in env:
            kwargs["workers"] = int(env[ENV_WORKERS])
        if ENV_BROADPHASE in env:
            flag = env[ENV_BROADPHASE].strip()
            if flag not in ("0", "1"):
                raise ValueError(f"{ENV_BROADPHASE} must be '0' or '1', got {flag!r}")
            kwargs["broadphase"] = flag == "1"

        config = cls(**kwargs)
        logger.debug("Loaded %s from environment", config)
        return config
