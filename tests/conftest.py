#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
cgstats v0.1.0

Pytest configuration and shared fixtures.

Author: cgstats Development Team
License: MIT - See LICENSE
"""

import pytest
from pathlib import Path
import tempfile
import shutil


@pytest.fixture
def temp_output_dir():
    """Create temporary output directory for tests."""
    temp_dir = tempfile.mkdtemp(prefix="cgstats_test_")
    yield Path(temp_dir)
    # Cleanup after test
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def simple_fasta():
    """Single six-base sequence with two CpG sites."""
    return ">id\nACGCGT\n"


@pytest.fixture
def multi_fasta():
    """Three sequences, wrapped lines, one lowercase stretch."""
    return (
        ">chr1 first sequence\n"
        "ACGTACGTAC\n"
        "GT\n"
        ">chr2\n"
        "CCCCGGGG\n"
        ">chr3\n"
        "acgtACGTN\n"
    )
