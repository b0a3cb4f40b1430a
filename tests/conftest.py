"""
Pytest configuration and shared fixtures for SugarScan tests.

matcherlib.py and sample_matchers.py live beside this file; pytest puts
this directory on sys.path, so they import as top-level modules and the
scanner can resolve them by name.
"""

import pytest

from sugarscan.config import ScanOptions

MARKER = "matcherlib:Factory"
MATCHER = "matcherlib:Matcher"


@pytest.fixture
def options():
    """Scan options pointing at the test matcher library."""
    return ScanOptions(marker_type=MARKER, matcher_type=MATCHER)


@pytest.fixture
def scan_env(monkeypatch):
    """Point the environment defaults at the test matcher library."""
    monkeypatch.setenv("SUGARSCAN_MARKER_TYPE", MARKER)
    monkeypatch.setenv("SUGARSCAN_MATCHER_TYPE", MATCHER)
