"""
Integration test fixtures.

Integration tests:
- Test component boundaries
- Use real I/O but to temp locations
- Should be deterministic
"""

import pytest
import tempfile
import shutil
from pathlib import Path


@pytest.fixture
def temp_dir():
    """Temporary directory for test data."""
    d = tempfile.mkdtemp()
    yield Path(d)
    shutil.rmtree(d, ignore_errors=True)


@pytest.fixture
def config_file(temp_dir):
    """Write a trajectory.yaml into the temp dir and return its path."""
    def write(text: str) -> Path:
        path = temp_dir / "trajectory.yaml"
        path.write_text(text)
        return path

    return write
