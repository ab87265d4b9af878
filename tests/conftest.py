# tests/conftest.py
# This file is part of the CNF toolkit - propositional logic sentences
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for the CNF toolkit tests.

This module makes the project root importable and provides common
fixtures: a seeded random source for reproducible generation and a few
representative sentences.
"""

import sys
import random
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Verify that the project packages are importable before any test runs.

    Raises:
        pytest.skip: If required modules cannot be imported
    """
    try:
        import cnf
        import generator
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


@pytest.fixture
def rng():
    """Provide a seeded random source.

    Returns:
        random.Random: Generator seeded with a fixed value
    """
    return random.Random(20240521)


@pytest.fixture
def basic_formula():
    """Provide a small CNF sentence.

    Returns:
        str: Two clauses over three variables
    """
    return "(A v ~B) ^ (B v C)"


@pytest.fixture
def nested_formula():
    """Provide a sentence that is not in strict CNF.

    Returns:
        str: A disjunction containing a parenthesized conjunction
    """
    return "(A ^ B) v ~C"
