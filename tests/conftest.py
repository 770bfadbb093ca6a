"""Root-level pytest configuration and shared fixtures.

Fixtures here are universally applicable across all test modules and
should be stateless or session-scoped.
"""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest
from pytest_mock import MockerFixture


# =============================================================================
# Path Fixtures
# =============================================================================

@pytest.fixture
def tmp_input_dir(tmp_path: Path) -> Path:
    """Create a temporary input directory for test files."""
    input_dir = tmp_path / "input"
    input_dir.mkdir(parents=True, exist_ok=True)
    return input_dir


@pytest.fixture
def tmp_output_dir(tmp_path: Path) -> Path:
    """Create a temporary output directory for transcoded files."""
    output_dir = tmp_path / "output"
    output_dir.mkdir(parents=True, exist_ok=True)
    return output_dir


# =============================================================================
# Sample Domain Fixtures
# =============================================================================

@pytest.fixture(scope="session")
def all_samples() -> np.ndarray:
    """Every signed 16-bit PCM value, in ascending order.

    Returns:
        Read-only int16 array of 65536 samples.
    """
    samples = np.arange(-32768, 32768, dtype=np.int32).astype(np.int16)
    samples.flags.writeable = False
    return samples


@pytest.fixture(scope="session")
def all_codes() -> np.ndarray:
    """Every 8-bit code, in ascending order."""
    codes = np.arange(256, dtype=np.uint8)
    codes.flags.writeable = False
    return codes


# =============================================================================
# Output Handler Fixtures
# =============================================================================

@pytest.fixture
def mock_console(mocker: MockerFixture):
    """Create a mock Rich Console for output testing."""
    return mocker.MagicMock(spec_set=["print", "log", "status"])


@pytest.fixture
def mock_output_handler(mocker: MockerFixture):
    """Create a mock OutputHandler for dependency injection."""
    handler = mocker.MagicMock()
    handler.info = mocker.MagicMock()
    handler.warning = mocker.MagicMock()
    handler.error = mocker.MagicMock()
    handler.summary = mocker.MagicMock()
    return handler


# =============================================================================
# Configuration Markers
# =============================================================================

def pytest_configure(config):
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "slow: Slow tests")
    config.addinivalue_line("markers", "pydantic: Tests for Pydantic validation")
