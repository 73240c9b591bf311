#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
cgstats v0.1.0

Exception types raised by the windowed scoring pipeline.

All of them are fatal to a run: the CLI reports the message and exits
non-zero on the first one raised.

Author: cgstats Development Team
License: MIT - See LICENSE
"""

from typing import Optional


class CgStatsError(Exception):
    """Base class for all cgstats errors."""
    pass


class InvalidWindowSizeError(CgStatsError, ValueError):
    """Raised when the window size is not a positive integer."""

    def __init__(self, window_size):
        self.window_size = window_size
        super().__init__(
            f"Window size must be a positive integer, got {window_size!r}"
        )


class MalformedInputError(CgStatsError):
    """Raised when the sequence parser fails on an input record."""

    def __init__(self, message: str, record_index: Optional[int] = None):
        self.record_index = record_index
        if record_index is not None:
            message = f"Malformed input at record {record_index + 1}: {message}"
        else:
            message = f"Malformed input: {message}"
        super().__init__(message)


class OutputWriteError(CgStatsError):
    """Raised when a record cannot be written to the output sink."""
    pass


__all__ = [
    'CgStatsError',
    'InvalidWindowSizeError',
    'MalformedInputError',
    'OutputWriteError',
]

# cgstats v0.1.0
# Any usage is subject to this software's license.
