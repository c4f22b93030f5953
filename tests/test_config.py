"""
Configuration Tests
-------------------
Tests cover:
- Defaults
- Environment overrides
- YAML loading (top-level and sectioned)
- Token masking in repr
"""

import logging

import pytest

from eventbrite_v3.core.errors import ConfigurationError
from eventbrite_v3.infra.config import DEFAULT_BASE_URL, ClientConfig


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove any EVENTBRITE_* variables from the test environment."""
    for name in ("TOKEN", "BASE_URL", "REQUESTS_PER_SECOND", "TIMEOUT_SECONDS", "USER_AGENT"):
        monkeypatch.delenv(f"EVENTBRITE_{name}", raising=False)


class TestDefaults:

    def test_defaults(self):
        config = ClientConfig()

        assert config.base_url == DEFAULT_BASE_URL
        assert config.token == ""
        assert config.requests_per_second == 5
        assert not config.has_token

    def test_frozen(self):
        config = ClientConfig()

        with pytest.raises(AttributeError):
            config.token = "changed"

    def test_repr_masks_token(self):
        config = ClientConfig(token="super-secret")

        assert "super-secret" not in repr(config)
        assert "***" in repr(config)


class TestFromEnv:

    def test_no_variables_returns_defaults(self):
        assert ClientConfig.from_env() == ClientConfig()

    def test_variables_override(self, monkeypatch):
        monkeypatch.setenv("EVENTBRITE_TOKEN", "env-token")
        monkeypatch.setenv("EVENTBRITE_REQUESTS_PER_SECOND", "0")
        monkeypatch.setenv("EVENTBRITE_TIMEOUT_SECONDS", "2.5")

        config = ClientConfig.from_env()

        assert config.token == "env-token"
        assert config.requests_per_second == 0
        assert config.timeout_seconds == 2.5

    def test_invalid_number(self, monkeypatch):
        monkeypatch.setenv("EVENTBRITE_REQUESTS_PER_SECOND", "fast")

        with pytest.raises(ConfigurationError):
            ClientConfig.from_env()

    def test_custom_prefix(self, monkeypatch):
        monkeypatch.setenv("EB_TOKEN", "prefixed")

        assert ClientConfig.from_env(prefix="EB_").token == "prefixed"


class TestFromYaml:

    def test_sectioned_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "eventbrite:\n"
            "  token: file-token\n"
            "  requests_per_second: 10\n"
            "  base_url: http://staging.local/v3\n"
        )

        config = ClientConfig.from_yaml(path)

        assert config.token == "file-token"
        assert config.requests_per_second == 10
        assert config.base_url == "http://staging.local/v3"

    def test_top_level_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("token: flat-token\n")

        assert ClientConfig.from_yaml(path).token == "flat-token"

    def test_env_overrides_file(self, tmp_path, monkeypatch):
        path = tmp_path / "config.yaml"
        path.write_text("eventbrite:\n  token: file-token\n  timeout_seconds: 5\n")
        monkeypatch.setenv("EVENTBRITE_TOKEN", "env-token")

        config = ClientConfig.from_yaml(path)

        assert config.token == "env-token"
        assert config.timeout_seconds == 5.0

    def test_unknown_keys_warned(self, tmp_path, caplog):
        path = tmp_path / "config.yaml"
        path.write_text("token: t\nretries: 3\n")

        with caplog.at_level(logging.WARNING, logger="eventbrite_v3.infra.config"):
            config = ClientConfig.from_yaml(path)

        assert config.token == "t"
        assert "retries" in caplog.text

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            ClientConfig.from_yaml(tmp_path / "absent.yaml")

    def test_non_mapping_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- just\n- a list\n")

        with pytest.raises(ConfigurationError):
            ClientConfig.from_yaml(path)

    def test_empty_section(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("eventbrite:\n")

        with pytest.raises(ConfigurationError):
            ClientConfig.from_yaml(path)

    def test_non_mapping_section(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("eventbrite:\n  - token\n")

        with pytest.raises(ConfigurationError):
            ClientConfig.from_yaml(path)
