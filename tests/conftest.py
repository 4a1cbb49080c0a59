"""Shared pytest fixtures."""

import pytest

from regexgen.core.config import Settings


@pytest.fixture
def settings(tmp_path):
    """Create settings that write logs into a temporary directory."""
    return Settings(log_dir=tmp_path / "logs", log_level="debug")
