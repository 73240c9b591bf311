#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
cgstats v0.1.0

FASTA input for cgstats.

Thin adapter over Biopython's FASTA parser: opens plain, gzipped, or
standard input streams and yields one SequenceRecord at a time so that
only a single sequence is held in memory.

Author: cgstats Development Team
License: MIT - See LICENSE
"""

import gzip
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, TextIO, Union

import click
from Bio import SeqIO

from ..errors import MalformedInputError

logger = logging.getLogger(__name__)


@dataclass
class SequenceRecord:
    """
    A named nucleotide sequence.
    
    Attributes:
        id: Sequence identifier (first word of the FASTA header)
        sequence: Nucleotide symbols as ASCII bytes, case preserved
    """
    id: str
    sequence: bytes
    
    @property
    def length(self) -> int:
        """Get sequence length."""
        return len(self.sequence)
    
    def __len__(self) -> int:
        return self.length
    
    def __repr__(self) -> str:
        return f"SequenceRecord(id='{self.id}', length={self.length})"


def open_input(path: Optional[Union[str, Path]] = None) -> TextIO:
    """
    Open a FASTA source for reading.
    
    Args:
        path: File path, '-' or None for standard input. Paths ending in
            .gz or .gzip are decompressed on the fly.
    
    Returns:
        Text handle usable as a context manager
    """
    if path is None or str(path) == '-':
        return click.open_file('-', 'r')
    
    path = Path(path)
    if path.suffix in ('.gz', '.gzip'):
        return gzip.open(path, 'rt')
    return click.open_file(str(path), 'r')


def read_fasta(handle: TextIO) -> Iterator[SequenceRecord]:
    """
    Parse FASTA records from an open handle.
    
    Args:
        handle: Text handle positioned at the start of FASTA data
    
    Yields:
        SequenceRecord objects in input order
    
    Raises:
        MalformedInputError: On the first record the parser rejects;
            records already yielded are not affected
    """
    index = 0
    try:
        for record in SeqIO.parse(handle, "fasta"):
            yield SequenceRecord(
                id=record.id,
                sequence=str(record.seq).encode('ascii'),
            )
            index += 1
    except (ValueError, EOFError, gzip.BadGzipFile) as e:
        raise MalformedInputError(str(e), record_index=index) from e
    
    logger.debug("Parsed %d FASTA record(s)", index)


__all__ = [
    'SequenceRecord',
    'open_input',
    'read_fasta',
]

# cgstats v0.1.0
# Any usage is subject to this software's license.
