#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
cgstats v0.1.0

Run configuration for cgstats.

cgstats reads no configuration file and no environment variables; every
run is fully described by its command line, captured here as a RunConfig.

Author: cgstats Development Team
License: MIT - See LICENSE
"""

from dataclasses import dataclass
from typing import Any, Dict

from .utils.scoring import ScoreKind
from .utils.windows import validate_window_size


# Default values for options that are not required on the command line
DEFAULTS: Dict[str, Any] = {
    'input_path': '-',               # Standard input
    'output_path': '-',              # Standard output
}


@dataclass(frozen=True)
class RunConfig:
    """
    Parameters of one scoring run, fixed for every sequence of the run.
    
    Attributes:
        window_size: Window size in bases
        kind: Scoring function
        input_path: FASTA path, '-' for standard input
        output_path: BedGraph path, '-' for standard output
    """
    window_size: int
    kind: ScoreKind
    input_path: str = DEFAULTS['input_path']
    output_path: str = DEFAULTS['output_path']
    
    def validate(self) -> 'RunConfig':
        """
        Validate the configuration.
        
        Returns:
            This configuration, for chaining
        
        Raises:
            InvalidWindowSizeError: If window_size is not a positive integer
            ValueError: If kind is not a known ScoreKind
        """
        validate_window_size(self.window_size)
        ScoreKind(self.kind)
        return self
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dictionary (kind rendered as its name)."""
        return {
            'window_size': self.window_size,
            'kind': ScoreKind(self.kind).value,
            'input_path': self.input_path,
            'output_path': self.output_path,
        }


__all__ = ['DEFAULTS', 'RunConfig']

# cgstats v0.1.0
# Any usage is subject to this software's license.
