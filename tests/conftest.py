"""
Pytest configuration and shared fixtures for nctrace tests.

Provides sample programs and markers used across the test suite.
"""

import os
import sys
from pathlib import Path

import pytest

# Add the parent directory to Python path so we can import the package
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

DATA_DIR = Path(__file__).parent / "data"


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests that test individual components in isolation"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests that parse and trace complete program files"
    )
    config.addinivalue_line(
        "markers", "slow: Slow-running tests (large generated programs)"
    )


@pytest.fixture
def sample_program_path() -> Path:
    """Path to the bundled milling program."""
    return DATA_DIR / "raw_gcode.NC"


@pytest.fixture
def small_program_text() -> str:
    return "\n".join([
        "(TEST PROGRAM)",
        "N10 G90 G21",
        "N20 G00 X0.0 Y0.0 (rapid to origin)",
        "",
        "N30 G01 Z-1.5 F200.",
        "N40 X10.0",
        "N50 Y5.5",
    ])


@pytest.fixture
def program_file(tmp_path, small_program_text) -> Path:
    path = tmp_path / "program.nc"
    path.write_text(small_program_text + "\n", encoding="utf-8")
    return path
