"""Test configuration and utilities for the progress-eta test suite."""

import logging
import shutil
import tempfile
from pathlib import Path
from typing import Dict, Any

import pytest

from progress_eta.core.config.config_manager import ENV_MAPPINGS


class FakeTime:
    """Controllable time source standing in for ``time.monotonic``."""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def fake_time():
    """Time source frozen until advanced by the test."""
    return FakeTime()


@pytest.fixture
def temp_dir():
    """Create temporary directory for tests."""
    temp_dir = tempfile.mkdtemp()
    yield Path(temp_dir)
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def test_config() -> Dict[str, Any]:
    """Basic test configuration."""
    return {
        'progress': {
            'total': 10,
            'smoothing': 0.0,
            'starting_at': 0,
            'out_of_bounds_format': 'friendly'
        },
        'logging': {
            'level': 'ERROR',  # Reduce noise in tests
            'format': '%(message)s',
            'structured': False,
            'max_file_size': '1MB',
            'backup_count': 1
        }
    }


@pytest.fixture
def config_file(temp_dir, test_config):
    """Create temporary configuration file."""
    import yaml

    config_file = temp_dir / 'test_config.yml'
    with open(config_file, 'w') as f:
        yaml.dump(test_config, f)

    return config_file


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep configuration environment variables from leaking into tests."""
    for env_var in ENV_MAPPINGS:
        monkeypatch.delenv(env_var, raising=False)


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Detach handlers installed by LoggerManager during a test."""
    yield
    package_logger = logging.getLogger('progress_eta')
    for handler in package_logger.handlers[:]:
        handler.close()
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
