#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
cgstats v0.1.0

Window scoring functions.

Provides the two composition scores computed over a window of nucleotide
bytes: CG content and CpG dinucleotide frequency. Bases are matched
literally, so lowercase (soft-masked) and ambiguous bases never count.

Author: cgstats Development Team
License: MIT - See LICENSE
"""

from enum import Enum
from typing import Callable, Dict


class ScoreKind(Enum):
    """Scoring function applied to every window of a run."""
    CG_CONTENT = "cg"                # Fraction of C or G bases
    CPG_FREQUENCY = "cpg"            # Fraction of adjacent pairs equal to "CG"


def count_bases(window: bytes, bases: bytes = b"CG") -> int:
    """
    Count bytes of a window that appear in ``bases``.
    
    Args:
        window: Nucleotide bytes
        bases: Bytes to count
        
    Returns:
        Number of matching positions
        
    Example:
        >>> count_bases(b"ACGT")
        2
    """
    return sum(window.count(bytes([base])) for base in set(bases))


def count_bigram(window: bytes, bigram: bytes = b"CG") -> int:
    """
    Count occurrences of a two-byte motif, overlapping occurrences included.
    
    Args:
        window: Nucleotide bytes
        bigram: Two-byte motif to count
        
    Returns:
        Number of positions i where window[i:i + 2] == bigram
        
    Example:
        >>> count_bigram(b"ACGCGT")
        2
    """
    if len(bigram) != 2:
        raise ValueError(f"Expected a two-byte motif, got {bigram!r}")
    
    return sum(
        1 for i in range(len(window) - 1)
        if window[i:i + 2] == bigram
    )


def cg_content(window: bytes) -> float:
    """
    Calculate CG content of a window.
    
    Args:
        window: Nucleotide bytes
        
    Returns:
        (count of C + count of G) / window length, or 0.0 for an empty window
        
    Example:
        >>> cg_content(b"ACGT")
        0.5
    """
    if not window:
        return 0.0
    
    return count_bases(window, b"CG") / len(window)


def cpg_frequency(window: bytes) -> float:
    """
    Calculate CpG dinucleotide frequency of a window.
    
    Args:
        window: Nucleotide bytes
        
    Returns:
        Number of "CG" pairs / (window length - 1), or 0.0 for a window
        with fewer than two bases
        
    Example:
        >>> cpg_frequency(b"ACG")
        0.5
    """
    if len(window) < 2:
        return 0.0
    
    return count_bigram(window, b"CG") / (len(window) - 1)


_SCORERS: Dict[ScoreKind, Callable[[bytes], float]] = {
    ScoreKind.CG_CONTENT: cg_content,
    ScoreKind.CPG_FREQUENCY: cpg_frequency,
}

# Shortest window each scorer has a nonzero denominator for
_MIN_WINDOW_LENGTH: Dict[ScoreKind, int] = {
    ScoreKind.CG_CONTENT: 1,
    ScoreKind.CPG_FREQUENCY: 2,
}


def get_scorer(kind: ScoreKind) -> Callable[[bytes], float]:
    """Return the scoring function for a score kind."""
    return _SCORERS[ScoreKind(kind)]


def min_window_length(kind: ScoreKind) -> int:
    """Return the shortest window the score kind is defined for."""
    return _MIN_WINDOW_LENGTH[ScoreKind(kind)]


__all__ = [
    'ScoreKind',
    'count_bases',
    'count_bigram',
    'cg_content',
    'cpg_frequency',
    'get_scorer',
    'min_window_length',
]

# cgstats v0.1.0
# Any usage is subject to this software's license.
