"""Unit test configuration - isolate tests from the developer's environment"""

import pytest

from toolsearch import config


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """
    Remove TOOL_SEARCH_* variables and ignore any .env file for each unit test.
    
    Tests that exercise .env loading call load_environment(force=True) explicitly.
    """
    for name in (config.ENV_THRESHOLD, config.ENV_LIMIT, config.ENV_USE_SYNONYMS):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config, "_file_settings", {})
    yield


@pytest.fixture
def fs_catalog():
    """Two filesystem tools and one network tool"""
    return [
        {"server": "fs", "tool": {"name": "read_file", "description": "Read a file from disk"}},
        {"server": "fs", "tool": {"name": "write_file", "description": "Write a file to disk"}},
        {"server": "net", "tool": {"name": "fetch_url", "description": "Download a resource from a URL"}},
    ]
