"""Tests for environment-driven settings."""

from codeless.config import DEFAULT_CASE_URL, Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("CASE_URL", raising=False)
    monkeypatch.delenv("REQUEST_TIMEOUT", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    s = Settings()

    assert s.case_url == DEFAULT_CASE_URL == "http://thecodelesscode.com/case/random"
    assert s.request_timeout is None
    assert s.log_level == "WARNING"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("CASE_URL", "http://mirror.test/case/random")
    monkeypatch.setenv("REQUEST_TIMEOUT", "12.5")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    s = Settings()

    assert s.case_url == "http://mirror.test/case/random"
    assert s.request_timeout == 12.5
    assert s.log_level == "DEBUG"


def test_blank_timeout_means_none(monkeypatch):
    monkeypatch.setenv("REQUEST_TIMEOUT", "  ")
    assert Settings().request_timeout is None
