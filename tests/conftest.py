"""Root test configuration: isolate each test from local config and env vars"""

import os

import pytest

from matter_yaml.config import ENV_PREFIX


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Run every test in an empty directory with no MATTER_YAML_* overrides."""
    monkeypatch.chdir(tmp_path)
    for name in list(os.environ):
        if name.startswith(ENV_PREFIX):
            monkeypatch.delenv(name)
    yield tmp_path
