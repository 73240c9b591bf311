#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
cgstats v0.1.0

Streaming driver: FASTA records in, BedGraph lines out.

Sequences are processed strictly one at a time and in input order. Each
record gets a fresh WindowIterator that is drained completely before the
next record is parsed.

Author: cgstats Development Team
License: MIT - See LICENSE
"""

import logging
from dataclasses import dataclass, asdict
from typing import Any, Dict, Iterable, TextIO

from .errors import OutputWriteError
from .io.bedgraph import BedGraphWriter
from .io.fasta import read_fasta
from .utils.scoring import ScoreKind
from .utils.windows import WindowIterator, validate_window_size

logger = logging.getLogger(__name__)


@dataclass
class RunSummary:
    """Counts accumulated over one run."""
    sequences: int = 0
    windows: int = 0
    bases: int = 0
    
    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def process_records(
    records: Iterable,
    sink: TextIO,
    window_size: int,
    kind: ScoreKind
) -> RunSummary:
    """
    Score every window of every record and write it to the sink.
    
    Args:
        records: Iterable of objects with ``id`` and ``sequence`` (bytes)
        sink: Writable text handle
        window_size: Window size in bases
        kind: Scoring function
    
    Returns:
        RunSummary for the records processed
    
    Raises:
        InvalidWindowSizeError: If window_size is not a positive integer
        MalformedInputError: Propagated from the record source
        OutputWriteError: If the sink rejects a write
    """
    window_size = validate_window_size(window_size)
    kind = ScoreKind(kind)
    writer = BedGraphWriter(sink)
    summary = RunSummary()
    
    for record in records:
        windows = WindowIterator(record, window_size, kind)
        for window in windows:
            writer.write(window)
        
        summary.sequences += 1
        summary.windows += windows.total_windows
        summary.bases += len(record.sequence)
        logger.debug("%s: %d bp, %d window(s)",
                     record.id, len(record.sequence), windows.total_windows)
    
    return summary


def run(
    input_handle: TextIO,
    output_handle: TextIO,
    window_size: int,
    kind: ScoreKind
) -> RunSummary:
    """
    Run one scoring pass from a FASTA handle to a BedGraph handle.
    
    The window size is validated before anything is read from
    ``input_handle``. The output handle is flushed on success; on error,
    lines already written stay written.
    
    Args:
        input_handle: Readable FASTA text handle
        output_handle: Writable text handle
        window_size: Window size in bases
        kind: Scoring function
    
    Returns:
        RunSummary for the whole input
    """
    window_size = validate_window_size(window_size)
    kind = ScoreKind(kind)
    logger.info("Scoring %s in %d bp windows", kind.value, window_size)
    
    summary = process_records(read_fasta(input_handle), output_handle, window_size, kind)
    try:
        output_handle.flush()
    except OSError as e:
        raise OutputWriteError(f"Failed to flush output: {e}") from e
    
    logger.info("Processed %d sequence(s), %d bp, %d window(s)",
                summary.sequences, summary.bases, summary.windows)
    return summary


__all__ = ['RunSummary', 'process_records', 'run']

# cgstats v0.1.0
# Any usage is subject to this software's license.
