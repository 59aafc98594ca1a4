"""
Pytest configuration file for the stream pipeline tests.

This file ensures that the project root is in the Python path
so that test files can import streams, collectors and models modules.
"""

import sys
from pathlib import Path

# Add the parent directory to the Python path
parent_dir = Path(__file__).parent.parent
if str(parent_dir) not in sys.path:
    sys.path.insert(0, str(parent_dir))

import pytest

from models import sample_persons


@pytest.fixture
def persons():
    return sample_persons()


@pytest.fixture
def numbers():
    return [5, 4, 7, 9, 2, 4, 3]


@pytest.fixture
def letters():
    return ["a1", "a2", "b1", "c2", "c1"]
