"""
cgstats v0.1.0

Scoring and windowing utilities for cgstats.

Author: cgstats Development Team
License: MIT - See LICENSE
"""

from .scoring import (
    ScoreKind,
    count_bases,
    count_bigram,
    cg_content,
    cpg_frequency,
    get_scorer,
    min_window_length,
)
from .windows import (
    ScoredWindow,
    WindowIterator,
    iter_windows,
    validate_window_size,
)

__all__ = [
    # Scorers
    "ScoreKind",
    "count_bases",
    "count_bigram",
    "cg_content",
    "cpg_frequency",
    "get_scorer",
    "min_window_length",
    
    # Windowing
    "ScoredWindow",
    "WindowIterator",
    "iter_windows",
    "validate_window_size",
]
