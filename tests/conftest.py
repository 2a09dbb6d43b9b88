"""
Pytest configuration and shared fixtures for ffmpeg_batch tests.
"""
import sys
from pathlib import Path

import pytest

# Add project root to Python path
project_dir = Path(__file__).parent.parent
sys.path.insert(0, str(project_dir))

from ffmpeg_batch import config  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Drop cached settings and PEG_* env so every test starts clean."""
    monkeypatch.delenv("PEG_FFMPEG_BINARY", raising=False)
    monkeypatch.delenv("PEG_LOG_LEVEL", raising=False)
    config.clear_settings_cache()
    yield
    config.clear_settings_cache()
