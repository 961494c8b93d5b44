"""
Configuration for the relevance scorer.
"""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

from dotenv import load_dotenv

from .tokenizer import DEFAULT_MIN_TERM_LENGTH

# Load .env file if it exists
project_root = Path(__file__).resolve().parents[2]
env_file = project_root / ".env"
if env_file.exists():
    load_dotenv(env_file)


@dataclass
class ScorerConfig:
    """Settings for ranking and sizing word-cloud terms."""

    top_k: int = 100
    output_range: Tuple[float, float] = (14.0, 60.0)
    min_term_length: int = DEFAULT_MIN_TERM_LENGTH
    workers: int = 1

    def __post_init__(self) -> None:
        self.output_range = tuple(float(v) for v in self.output_range)
        if len(self.output_range) != 2:
            raise ValueError("output_range must be a (min, max) pair")
        if not all(math.isfinite(v) for v in self.output_range):
            raise ValueError(f"output_range bounds must be finite, got {self.output_range}")
        lo, hi = self.output_range
        if lo < 0 or lo > hi:
            raise ValueError(f"output_range must satisfy 0 <= min <= max, got {self.output_range}")
        if self.top_k < 1:
            raise ValueError("top_k must be at least 1")
        if self.min_term_length < 1:
            raise ValueError("min_term_length must be at least 1")
        if self.workers < 1:
            raise ValueError("workers must be at least 1")

    @classmethod
    def from_env(cls) -> "ScorerConfig":
        """Build a config from WORDCLOUD_* environment variables, falling back to defaults."""
        defaults = cls()
        return cls(
            top_k=int(os.getenv("WORDCLOUD_TOP_K", defaults.top_k)),
            output_range=(
                float(os.getenv("WORDCLOUD_MIN_SIZE", defaults.output_range[0])),
                float(os.getenv("WORDCLOUD_MAX_SIZE", defaults.output_range[1])),
            ),
            min_term_length=int(os.getenv("WORDCLOUD_MIN_TERM_LENGTH", defaults.min_term_length)),
            workers=int(os.getenv("WORDCLOUD_WORKERS", defaults.workers)),
        )
