"""Pytest configuration and shared fixtures.

Provides sample Sortable record types and collections for the test suite.
"""

import sys
from pathlib import Path
from typing import Generator

import pytest

# Add parent directory to path so imports work
# This allows: from enums import ... to find /project/enums.py
sys.path.insert(0, str(Path(__file__).parent.parent))

from logging_config import setup_logging
from sample_records import Person, Role


# Configure logging once for entire test session
@pytest.fixture(scope="session", autouse=True)
def configure_logging() -> Generator[None, None, None]:
    """Configure logging for all tests (WARNING+ on the console)."""
    setup_logging(verbose=False)
    yield


@pytest.fixture
def people() -> list[Person]:
    """Unsorted people with distinct ages and names."""
    return [
        Person(name="Carol", age=30, flag=False, role=Role.ADMIN, email="c@example.com"),
        Person(name="Alice", age=20, flag=True, role=Role.MEMBER, email="a@example.com"),
        Person(name="Bob", age=25, flag=False, role=Role.GUEST, email="b@example.com"),
    ]


@pytest.fixture
def mixed_flags() -> list[Person]:
    """People whose age order disagrees with their flag order."""
    return [
        Person(name="Dan", age=18, flag=False),
        Person(name="Eve", age=40, flag=True),
        Person(name="Fay", age=22, flag=False),
        Person(name="Gus", age=35, flag=True),
    ]
