"""
Pytest configuration and fixtures.
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from models.source import PackageSource
from utils.paths import expected_offline_packages_path


OFFLINE_PROGRAM_FILES = r'C:\Program Files (x86)'
OFFLINE_PACKAGES_DIR = r'C:\Program Files (x86)\Microsoft SDKs\NuGetPackages'


@pytest.fixture(autouse=True)
def reset_offline_path_cache():
    """Each test starts without a memoized offline package path."""
    expected_offline_packages_path.cache_clear()
    yield
    expected_offline_packages_path.cache_clear()


@pytest.fixture
def program_files(monkeypatch):
    """Point the Program Files lookup at a known directory."""
    monkeypatch.setenv('ProgramFiles', OFFLINE_PROGRAM_FILES)
    return OFFLINE_PROGRAM_FILES


@pytest.fixture
def no_program_files(monkeypatch):
    """Make the Program Files lookup fail."""
    monkeypatch.delenv('ProgramFiles', raising=False)


@pytest.fixture
def mixed_sources():
    """nuget.org v3, nuget.org v2 and a local feed, all enabled."""
    return [
        PackageSource('nuget.org', 'https://api.nuget.org/v3/index.json'),
        PackageSource('nuget.org v2', 'https://www.nuget.org/api/v2/'),
        PackageSource('local', 'C:\\feed'),
    ]


@pytest.fixture
def sources_yaml():
    """Sample sources.yaml content."""
    return """
sources:
  nuget.org:
    source: https://api.nuget.org/v3/index.json
    protocol_version: 3
  nuget.org v2:
    source: https://www.nuget.org/api/v2/
  disabled feed:
    source: https://myget.org/F/feed/api/v2
    enabled: false
  local:
    source: C:\\feed
"""


@pytest.fixture
def settings_yaml():
    """Sample settings.yaml content."""
    return """
logging:
  level: WARNING
telemetry:
  sink: file
  file_path: events.jsonl
"""


@pytest.fixture
def config_files(tmp_path, sources_yaml, settings_yaml):
    """Write sample configuration files and return their paths."""
    sources_path = tmp_path / 'sources.yaml'
    settings_path = tmp_path / 'settings.yaml'
    sources_path.write_text(sources_yaml, encoding='utf-8')
    settings_path.write_text(settings_yaml, encoding='utf-8')
    return str(sources_path), str(settings_path)
