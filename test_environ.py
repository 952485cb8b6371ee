"""
Test suite for environment configuration helpers and startup validation.
"""
from unittest.mock import patch

from config import get_config_summary, missing_required_config
from utils.environ import get_bool_env, get_int_env, normalize_feed_url


def test_webcal_is_rewritten_to_https():
    assert normalize_feed_url("webcal://example.test/cal.ics") == "https://example.test/cal.ics"
    assert normalize_feed_url("WEBCAL://example.test/cal.ics") == "https://example.test/cal.ics"


def test_other_schemes_are_kept():
    assert normalize_feed_url("https://example.test/cal.ics") == "https://example.test/cal.ics"
    assert normalize_feed_url("http://example.test/cal.ics") == "http://example.test/cal.ics"
    assert normalize_feed_url(None) is None
    assert normalize_feed_url("") is None


def test_typed_env_helpers(monkeypatch):
    monkeypatch.setenv("PLANNING_TEST_FLAG", "yes")
    monkeypatch.setenv("PLANNING_TEST_INT", "not-a-number")
    assert get_bool_env("PLANNING_TEST_FLAG") is True
    assert get_int_env("PLANNING_TEST_INT", 30) == 30
    assert get_int_env("PLANNING_TEST_UNSET", 7) == 7


def test_missing_required_config_is_reported():
    with patch("utils.environ.DISCORD_BOT_TOKEN", None), patch("utils.environ.ICAL_URL", None):
        assert missing_required_config() == ["DISCORD_BOT_TOKEN", "ICAL_URL"]
    with patch("utils.environ.DISCORD_BOT_TOKEN", "token"), \
         patch("utils.environ.ICAL_URL", "https://example.test/cal.ics"):
        assert missing_required_config() == []


def test_config_summary_hides_feed_path():
    with patch("utils.environ.ICAL_URL", "https://example.test/private/token123.ics"):
        summary = get_config_summary()
    assert summary["feed_host"] == "example.test"
    assert "token123" not in str(summary)
