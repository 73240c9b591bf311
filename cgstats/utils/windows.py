#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
cgstats v0.1.0

Fixed-size window iteration over a single sequence.

A sequence of length L is cut into contiguous, non-overlapping windows
[0, W), [W, 2W), ... with the last window truncated at L. Each window is
scored with the run's ScoreKind as it is produced.

Author: cgstats Development Team
License: MIT - See LICENSE
"""

import logging
from dataclasses import dataclass
from typing import Iterator, Tuple

from ..errors import InvalidWindowSizeError
from .scoring import ScoreKind, get_scorer, min_window_length

logger = logging.getLogger(__name__)


@dataclass
class ScoredWindow:
    """
    One scored interval of a sequence.
    
    Attributes:
        seqname: Identifier of the sequence the window belongs to
        start: 0-based start offset (inclusive)
        end: 0-based end offset (exclusive)
        score: Score of the window
    """
    seqname: str
    start: int
    end: int
    score: float
    
    @property
    def length(self) -> int:
        """Number of bases covered by the window."""
        return self.end - self.start


def validate_window_size(window_size) -> int:
    """
    Check that a window size is a positive integer.
    
    Args:
        window_size: Candidate window size
        
    Returns:
        The window size as an int
        
    Raises:
        InvalidWindowSizeError: If the value is not an integer or is < 1
    """
    if isinstance(window_size, bool) or not isinstance(window_size, int):
        raise InvalidWindowSizeError(window_size)
    if window_size < 1:
        raise InvalidWindowSizeError(window_size)
    return window_size


def iter_windows(length: int, window_size: int) -> Iterator[Tuple[int, int]]:
    """
    Yield (start, end) offsets of the windows covering [0, length).
    
    Example:
        >>> list(iter_windows(7, 3))
        [(0, 3), (3, 6), (6, 7)]
    """
    window_size = validate_window_size(window_size)
    for start in range(0, length, window_size):
        yield start, min(start + window_size, length)


class WindowIterator:
    """
    Forward cursor producing the scored windows of one sequence.
    
    The iterator is single-pass: once the cursor reaches the end of the
    sequence it stays exhausted, and a new iterator is needed to walk the
    sequence again.
    
    Args:
        record: Object with ``id`` (str) and ``sequence`` (bytes) attributes
        window_size: Window size in bases (> 0)
        kind: Scoring function to apply
    """
    
    def __init__(self, record, window_size: int, kind: ScoreKind):
        self.window_size = validate_window_size(window_size)
        self.kind = ScoreKind(kind)
        self.seqname = record.id
        self.sequence = record.sequence
        self.cursor = 0
        self._scorer = get_scorer(self.kind)
        self._min_length = min_window_length(self.kind)
    
    @property
    def exhausted(self) -> bool:
        """True once every window has been produced."""
        return self.cursor >= len(self.sequence)
    
    @property
    def total_windows(self) -> int:
        """Number of windows covering the whole sequence."""
        return (len(self.sequence) + self.window_size - 1) // self.window_size
    
    def __iter__(self) -> 'WindowIterator':
        return self
    
    def __next__(self) -> ScoredWindow:
        if self.exhausted:
            raise StopIteration
        
        start = self.cursor
        end = min(start + self.window_size, len(self.sequence))
        self.cursor = start + self.window_size
        
        window = self.sequence[start:end]
        if len(window) < self._min_length:
            # Scorer returns 0.0 here instead of dividing by zero
            logger.debug(
                "Window %s:%d-%d is shorter than %d bases; scored as 0.0 (%s)",
                self.seqname, start, end, self._min_length, self.kind.value
            )
        
        return ScoredWindow(
            seqname=self.seqname,
            start=start,
            end=end,
            score=self._scorer(window),
        )
    
    def __repr__(self) -> str:
        return (f"WindowIterator(seqname='{self.seqname}', "
                f"window_size={self.window_size}, kind={self.kind.value}, "
                f"cursor={self.cursor})")


__all__ = [
    'ScoredWindow',
    'WindowIterator',
    'iter_windows',
    'validate_window_size',
]

# cgstats v0.1.0
# Any usage is subject to this software's license.
