"""
Pytest configuration and shared fixtures for hashtree tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
3. Configures pytest markers
"""

import os
import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

from fixtures.common import CountingHasher, tag_hasher  # noqa: E402

from hashtree.config import set_default_config  # noqa: E402


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture
def tagged():
    """Hasher that wraps its input as H(...) so tree structure is readable."""
    return tag_hasher


@pytest.fixture
def counting_hasher():
    """SHA-512 hasher that records every call."""
    return CountingHasher()


@pytest.fixture
def abc_items():
    """The three-item scenario: ["a", "b", "c"]."""
    return ["a", "b", "c"]


HASHTREE_ENV_VARS = ("HASHTREE_ALGORITHM", "HASHTREE_MAX_WORKERS", "HASHTREE_LOG_LEVEL")


@pytest.fixture(autouse=True)
def reset_default_config(monkeypatch, tmp_path):
    """Isolate tests from HASHTREE_* variables, .env files and the default config."""
    for name in HASHTREE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # No .env from the checkout is picked up by from_env()
    monkeypatch.chdir(tmp_path)
    set_default_config(None)
    yield
    set_default_config(None)
    # Values loaded from a .env bypass monkeypatch; monkeypatch restores originals after this
    for name in HASHTREE_ENV_VARS:
        os.environ.pop(name, None)


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
