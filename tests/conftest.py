"""
Shared fixtures for the test suite.

Centralizes reusable key contexts so individual test files don't need to
repeat KeyManager construction boilerplate. Every fixture returns a fresh
instance — resolvers are stateful and must never leak between tests.
"""

import pytest

from notation.key_manager import KeyManager

# ---------------------------------------------------------------------------
# Key contexts
# ---------------------------------------------------------------------------


@pytest.fixture
def c_major() -> KeyManager:
    """C major: no accidentals in the key signature."""
    return KeyManager("c")


@pytest.fixture
def f_major() -> KeyManager:
    """F major: one flat (b-flat)."""
    return KeyManager("f")


@pytest.fixture
def bb_major() -> KeyManager:
    """B-flat major: two flats (b-flat, e-flat)."""
    return KeyManager("bb")
