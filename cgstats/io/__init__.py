"""
cgstats v0.1.0

Sequence input and BedGraph output for cgstats.

Author: cgstats Development Team
License: MIT - See LICENSE
"""

from .fasta import (
    SequenceRecord,
    open_input,
    read_fasta,
)
from .bedgraph import (
    BedGraphWriter,
    format_bedgraph_line,
    format_record,
)

__all__ = [
    # FASTA input
    "SequenceRecord",
    "open_input",
    "read_fasta",
    
    # BedGraph output
    "BedGraphWriter",
    "format_bedgraph_line",
    "format_record",
]
