#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
cgstats v0.1.0

BedGraph output for cgstats.

Each scored window becomes one tab-separated line:
    <seqname>\t<start>\t<end>\t<score>
with 0-based, end-exclusive coordinates. Scores use Python's shortest
round-tripping float repr, so float(field) gives back the exact value.

Author: cgstats Development Team
License: MIT - See LICENSE
"""

from typing import TextIO

from ..errors import OutputWriteError
from ..utils.windows import ScoredWindow


def format_bedgraph_line(seqname: str, start: int, end: int, score: float) -> str:
    """
    Render one BedGraph line, line terminator included.
    
    Example:
        >>> format_bedgraph_line("chr1", 0, 3, 2 / 3)
        'chr1\\t0\\t3\\t0.6666666666666666\\n'
    """
    return f"{seqname}\t{start}\t{end}\t{float(score)!r}\n"


def format_record(window: ScoredWindow) -> str:
    """Render a ScoredWindow as a BedGraph line."""
    return format_bedgraph_line(window.seqname, window.start, window.end, window.score)


class BedGraphWriter:
    """
    Write scored windows to a text sink.
    
    Args:
        handle: Writable text handle; buffering is left to the handle
    """
    
    def __init__(self, handle: TextIO):
        self.handle = handle
        self.written = 0
    
    def write(self, window: ScoredWindow):
        """Write one window. Raises OutputWriteError if the sink fails."""
        try:
            self.handle.write(format_record(window))
        except OSError as e:
            raise OutputWriteError(f"Failed to write output: {e}") from e
        self.written += 1


__all__ = [
    'BedGraphWriter',
    'format_bedgraph_line',
    'format_record',
]

# cgstats v0.1.0
# Any usage is subject to this software's license.
