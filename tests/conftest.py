"""Pytest fixtures for testing."""
import pytest
import requests

from urleq.utils.settings import MatcherSettings


@pytest.fixture
def recorded():
    return [
        requests.Request("POST", "http://example.com/api/items").prepare(),
        requests.Request("GET", "http://example.com/api/items?cb=1").prepare(),
        requests.Request("GET", "https://example.com/api/items?cb=2").prepare(),
    ]


@pytest.fixture
def matcher_settings_factory(monkeypatch):
    for name in ("URLEQ_IGNORE", "URLEQ_MATCH_METHOD", "URLEQ_LOG_MISMATCHES"):
        monkeypatch.delenv(name, raising=False)

    def fac(**kwargs):
        return MatcherSettings(**kwargs)
    return fac
