"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path

import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def config_dir(temp_dir, mocker):
    """Point the global config directory at a temporary location."""
    mock_dir = temp_dir / ".commitgenius"
    mocker.patch("commitgenius.global_config._CONFIG_DIR", mock_dir)
    return mock_dir


@pytest.fixture
def sample_diff():
    """Sample staged diff that adds code without any classifier keywords."""
    return """diff --git a/src/app.py b/src/app.py
--- a/src/app.py
+++ b/src/app.py
@@ -1,2 +1,4 @@
+import os
+value = 1
+other = 2
-old = 0
"""


@pytest.fixture
def docs_diff():
    """Sample staged diff touching only the README."""
    return """diff --git a/README.md b/README.md
--- a/README.md
+++ b/README.md
@@ -1,1 +1,1 @@
-# Project
+# Project title
"""
