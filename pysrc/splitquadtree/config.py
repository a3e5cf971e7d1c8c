# config.py
"""Splitting thresholds for a QuadTree."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from .errors import InvalidConfigError

DEFAULT_MIN_PER_QUAD = 50
DEFAULT_MAX_PER_CELL = 100

ENV_MIN_PER_QUAD = "SPLITQUADTREE_MIN_PER_QUAD"
ENV_MAX_PER_CELL = "SPLITQUADTREE_MAX_PER_CELL"


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _int(name: str, default: int, *, env: Mapping[str, str] | None = None) -> int:
    raw = _raw(name, env=env)
    if raw is None:
        return int(default)
    try:
        return int(raw.strip())
    except ValueError:
        return int(default)


@dataclass(frozen=True, slots=True)
class QuadTreeConfig:
    """
    Thresholds controlling when leaves are split.

    Attributes:
        min_per_quad: Reserved for a merge-on-shrink policy that is not
            implemented. Only its ordering against max_per_cell is checked.
        max_per_cell: A leaf holding more points than this is split, unless
            all of its points share the same coordinates.

    Raises:
        InvalidConfigError: If min_per_quad >= max_per_cell.
    """

    min_per_quad: int
    max_per_cell: int

    def __post_init__(self) -> None:
        if self.min_per_quad >= self.max_per_cell:
            raise InvalidConfigError(
                f"min_per_quad ({self.min_per_quad}) must be less than "
                f"max_per_cell ({self.max_per_cell})"
            )

    @classmethod
    def default(cls) -> QuadTreeConfig:
        return cls(DEFAULT_MIN_PER_QUAD, DEFAULT_MAX_PER_CELL)

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> QuadTreeConfig:
        """
        Build a config from environment variables.

        Missing or unparsable values fall back to the defaults. The result is
        validated like any other config.

        Args:
            env: Mapping to read instead of ``os.environ``.
        """
        return cls(
            _int(ENV_MIN_PER_QUAD, DEFAULT_MIN_PER_QUAD, env=env),
            _int(ENV_MAX_PER_CELL, DEFAULT_MAX_PER_CELL, env=env),
        )
