#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
cgstats v0.1.0

Tests for fixed-size window iteration.

Author: cgstats Development Team
License: MIT - See LICENSE
"""

import logging
from dataclasses import dataclass

import pytest

from cgstats.errors import InvalidWindowSizeError
from cgstats.utils.scoring import ScoreKind
from cgstats.utils.windows import (
    ScoredWindow,
    WindowIterator,
    iter_windows,
    validate_window_size,
)


# ---------------------------------------------------------------------------
# Minimal mock record — only needs .id and .sequence
# ---------------------------------------------------------------------------

@dataclass
class MockRecord:
    id: str
    sequence: bytes


class TestValidateWindowSize:
    """Test window size validation."""
    
    def test_positive_sizes_accepted(self):
        assert validate_window_size(1) == 1
        assert validate_window_size(1000) == 1000
    
    @pytest.mark.parametrize("bad", [0, -1, -100])
    def test_non_positive_rejected(self, bad):
        with pytest.raises(InvalidWindowSizeError):
            validate_window_size(bad)
    
    @pytest.mark.parametrize("bad", [1.5, "10", None, True])
    def test_non_integer_rejected(self, bad):
        with pytest.raises(InvalidWindowSizeError):
            validate_window_size(bad)
    
    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            validate_window_size(0)


class TestIterWindows:
    """Test (start, end) offset generation."""
    
    def test_truncated_last_window(self):
        assert list(iter_windows(7, 3)) == [(0, 3), (3, 6), (6, 7)]
    
    def test_exact_multiple(self):
        assert list(iter_windows(6, 3)) == [(0, 3), (3, 6)]
    
    def test_empty_sequence(self):
        assert list(iter_windows(0, 3)) == []
    
    @pytest.mark.parametrize("length", [1, 2, 9, 10, 11, 100, 101])
    @pytest.mark.parametrize("window_size", [1, 3, 10, 250])
    def test_windows_tile_sequence(self, length, window_size):
        """ceil(L / W) windows, contiguous, covering [0, L) exactly once."""
        windows = list(iter_windows(length, window_size))
        
        assert len(windows) == -(-length // window_size)
        assert windows[0][0] == 0
        assert windows[-1][1] == length
        for (_, prev_end), (next_start, _) in zip(windows, windows[1:]):
            assert prev_end == next_start
        for start, end in windows[:-1]:
            assert end - start == window_size
        assert 0 < windows[-1][1] - windows[-1][0] <= window_size


class TestWindowIterator:
    """Test scored window production."""
    
    def test_cg_example(self):
        """ACGCGT with W=3 gives two windows scoring 2/3."""
        record = MockRecord("id", b"ACGCGT")
        windows = list(WindowIterator(record, 3, ScoreKind.CG_CONTENT))
        
        assert windows == [
            ScoredWindow("id", 0, 3, 2 / 3),
            ScoredWindow("id", 3, 6, 2 / 3),
        ]
    
    def test_cpg_example(self):
        """ACGCGT with W=3 gives two windows scoring 0.5."""
        record = MockRecord("id", b"ACGCGT")
        windows = list(WindowIterator(record, 3, ScoreKind.CPG_FREQUENCY))
        
        assert [(w.start, w.end, w.score) for w in windows] == [(0, 3, 0.5), (3, 6, 0.5)]
    
    def test_window_equal_to_sequence_length(self):
        record = MockRecord("seq", b"ACGT")
        windows = list(WindowIterator(record, 4, ScoreKind.CG_CONTENT))
        
        assert len(windows) == 1
        assert (windows[0].start, windows[0].end) == (0, 4)
    
    def test_window_larger_than_sequence(self):
        record = MockRecord("seq", b"ACG")
        windows = list(WindowIterator(record, 100, ScoreKind.CG_CONTENT))
        
        assert [(w.start, w.end) for w in windows] == [(0, 3)]
        assert windows[0].score == 2 / 3
    
    def test_truncated_window_uses_actual_length(self):
        """Last window 'GC' of 'AAAAGC' is scored over 2 bases, not 4."""
        record = MockRecord("seq", b"AAAAGC")
        windows = list(WindowIterator(record, 4, ScoreKind.CG_CONTENT))
        
        assert windows[-1].length == 2
        assert windows[-1].score == 1.0
    
    def test_single_base_cpg_window_scores_zero(self):
        """A trailing 1-base window is emitted with score 0.0 under cpg."""
        record = MockRecord("seq", b"CGCGC")
        windows = list(WindowIterator(record, 2, ScoreKind.CPG_FREQUENCY))
        
        assert [(w.start, w.end, w.score) for w in windows] == [
            (0, 2, 1.0), (2, 4, 1.0), (4, 5, 0.0)
        ]
    
    def test_single_base_cpg_window_logged(self, caplog):
        record = MockRecord("seq", b"CGC")
        with caplog.at_level(logging.DEBUG, logger="cgstats"):
            list(WindowIterator(record, 2, ScoreKind.CPG_FREQUENCY))
        
        assert "scored as 0.0" in caplog.text
    
    def test_empty_sequence_yields_nothing(self):
        iterator = WindowIterator(MockRecord("empty", b""), 5, ScoreKind.CG_CONTENT)
        
        assert iterator.exhausted
        assert list(iterator) == []
        assert iterator.total_windows == 0
    
    def test_windows_carry_sequence_id(self):
        windows = list(WindowIterator(MockRecord("chrX", b"A" * 25), 10, "cg"))
        
        assert {w.seqname for w in windows} == {"chrX"}
    
    def test_total_windows(self):
        iterator = WindowIterator(MockRecord("seq", b"A" * 25), 10, ScoreKind.CG_CONTENT)
        
        assert iterator.total_windows == 3
        assert len(list(iterator)) == 3
    
    def test_not_restartable(self):
        """An exhausted iterator stays exhausted."""
        iterator = WindowIterator(MockRecord("seq", b"ACGTACGT"), 3, ScoreKind.CG_CONTENT)
        
        assert len(list(iterator)) == 3
        assert iterator.exhausted
        assert list(iterator) == []
        with pytest.raises(StopIteration):
            next(iterator)
    
    def test_cursor_advances_by_window_size(self):
        iterator = WindowIterator(MockRecord("seq", b"ACGTACGT"), 3, ScoreKind.CG_CONTENT)
        
        assert iterator.cursor == 0
        next(iterator)
        assert iterator.cursor == 3
        next(iterator)
        assert iterator.cursor == 6
        next(iterator)
        assert iterator.exhausted
    
    @pytest.mark.parametrize("bad", [0, -3])
    def test_invalid_window_size_fails_fast(self, bad):
        with pytest.raises(InvalidWindowSizeError):
            WindowIterator(MockRecord("seq", b"ACGT"), bad, ScoreKind.CG_CONTENT)
    
    def test_scores_in_unit_interval(self):
        sequence = b"ACGTTGCACGCGATATCCGGAACGT" * 7
        for kind in ScoreKind:
            for window in WindowIterator(MockRecord("seq", sequence), 7, kind):
                assert 0.0 <= window.score <= 1.0

# cgstats v0.1.0
# Any usage is subject to this software's license.
