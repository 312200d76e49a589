"""Shared test fixtures for toru core tests."""

import sys
from pathlib import Path

# Ensure toru package is importable
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import pytest


@pytest.fixture
def calls():
    """Counter dict for observing how often a source or stage runs."""
    return {'n': 0}


@pytest.fixture
def counting_source(calls):
    """Source callable returning a fresh generator over [1, 2, 3] per call."""
    def source():
        calls['n'] += 1
        yield from [1, 2, 3]
    return source
