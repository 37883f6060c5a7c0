from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared platform configuration fixtures used across unit tests.
"""

import os
import sys
from typing import Iterator

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from pathinfo.domain.platform import (  # noqa: E402
    PlatformConfig,
    posix_config,
    reset_default_config,
    windows_config,
)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def windows_cfg() -> PlatformConfig:
    """Drive-letter conventions, independent of the host running the tests."""
    return windows_config()


@pytest.fixture
def posix_cfg() -> PlatformConfig:
    """Single-separator conventions, independent of the host running the tests."""
    return posix_config()


@pytest.fixture
def fresh_default_config() -> Iterator[None]:
    """Drop the cached host configuration before and after a test."""
    reset_default_config()
    yield
    reset_default_config()
