"""
Pytest configuration and shared fixtures for Merkle whitelist tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
3. Configures pytest markers and settings
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

# Get the project root (parent of tests/)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

# Add both project root and tests root to sys.path
for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

# =============================================================================
# Import fixtures using importlib (more robust for pytest loading)
# =============================================================================

import importlib

_common = importlib.import_module("fixtures.common")

SAMPLE_ADDRESSES = _common.SAMPLE_ADDRESSES
NON_MEMBER_ADDRESS = _common.NON_MEMBER_ADDRESS
make_whitelist_records = _common.make_whitelist_records
write_whitelist_file = _common.write_whitelist_file
make_static_source = _common.make_static_source
make_service = _common.make_service


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    """Keep WHITELIST_* variables from the developer's shell out of tests."""
    import os
    for key in list(os.environ):
        if key.startswith("WHITELIST_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def sample_addresses():
    """Provide the default member addresses."""
    return list(SAMPLE_ADDRESSES)


@pytest.fixture
def whitelist_records():
    """Provide a default whitelist document."""
    return make_whitelist_records()


@pytest.fixture
def whitelist_file(tmp_path, whitelist_records):
    """Provide a whitelist JSON file on disk."""
    return write_whitelist_file(tmp_path, whitelist_records)


@pytest.fixture
def static_source():
    """Provide an in-memory source over the default addresses."""
    return make_static_source()


@pytest.fixture
def service():
    """Provide a WhitelistService over the default addresses."""
    return make_service()


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
