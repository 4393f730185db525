"""Process-wide TextRank settings.

The default configuration is a frozen dataclass. ``configure`` swaps in a new
object rather than mutating the current one, so a call in progress keeps the
settings it started with.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable

from .datatypes import TaggedTerm
from .preprocessing import default_candidate_filter

CandidateFilter = Callable[[TaggedTerm], bool]


@dataclass(frozen=True)
class TextRankConfig:
    """Settings for graph construction and rank propagation."""

    damping_factor: float = 0.85
    max_iterations: int = 200
    min_diff: float = 0.001
    window_size: int = 5
    candidate_filter: CandidateFilter = default_candidate_filter

    def __post_init__(self) -> None:
        if not 0.0 <= self.damping_factor <= 1.0:
            raise ValueError(f"damping_factor must be in [0, 1], got {self.damping_factor}")
        if self.max_iterations < 0:
            raise ValueError(f"max_iterations must be >= 0, got {self.max_iterations}")
        if self.min_diff < 0:
            raise ValueError(f"min_diff must be >= 0, got {self.min_diff}")
        if self.window_size < 1:
            raise ValueError(f"window_size must be >= 1, got {self.window_size}")


_default_config = TextRankConfig()


def get_default_config() -> TextRankConfig:
    return _default_config


def configure(**overrides) -> TextRankConfig:
    """Install a new default built from the current one plus ``overrides``."""
    global _default_config
    _default_config = replace(_default_config, **overrides)
    return _default_config


def reset_default_config() -> TextRankConfig:
    global _default_config
    _default_config = TextRankConfig()
    return _default_config
