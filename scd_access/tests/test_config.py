"""Tests for configuration loading."""

import pytest

from scd_access.config import Config, OSCP_ACCEPT_HEADER
from scd_access.exceptions import ConfigurationError

ENV_VARS = ["SCD_SERVICE_URL", "SCD_TOPIC", "SCD_TOKEN", "SCD_LOCAL", "SCD_REQUEST_TIMEOUT"]


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    # setenv first so values written by load_dotenv are removed on teardown
    for name in ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


class TestConfig:

    def test_defaults(self):
        config = Config()
        assert config.local is False
        assert config.request_timeout is None
        assert config.min_id_length == 16
        assert config.accept_header == OSCP_ACCEPT_HEADER

    def test_from_env(self, clean_env):
        clean_env.setenv("SCD_SERVICE_URL", "https://scd.example.org")
        clean_env.setenv("SCD_TOPIC", "3d")
        clean_env.setenv("SCD_LOCAL", "TRUE")
        clean_env.setenv("SCD_REQUEST_TIMEOUT", "2.5")

        config = Config.from_env()

        assert config.service_url == "https://scd.example.org"
        assert config.topic == "3d"
        assert config.local is True
        assert config.request_timeout == 2.5
        assert config.token is None

    def test_from_env_file(self, clean_env, tmp_path):
        env_file = tmp_path / "scd.env"
        env_file.write_text("SCD_TOKEN=abc123\nSCD_TOPIC=poi\n", encoding="utf-8")

        config = Config.from_env(str(env_file))

        assert config.token == "abc123"
        assert config.topic == "poi"

    def test_invalid_timeout(self, clean_env):
        clean_env.setenv("SCD_REQUEST_TIMEOUT", "soon")
        with pytest.raises(ConfigurationError):
            Config.from_env()

    def test_from_dict_ignores_unknown_keys(self):
        config = Config.from_dict({"service_url": "https://svc", "colour": "blue"})
        assert config.service_url == "https://svc"
