"""Tests for configuration loading."""

from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

from zt_hosts.config import DEFAULT_API_URL, Config, load_config, read_config_file
from zt_hosts.errors import ConfigError

FIXTURES = Path(__file__).parent / "fixtures"


class TestReadConfigFile:
    def test_reads_mapping(self):
        data = read_config_file(FIXTURES / "config.yaml")
        assert data["network"] == "8056c2e21c000001"
        assert data["interval"] == "15min"

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert read_config_file(path) == {}

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="not a YAML mapping"):
            read_config_file(path)

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("api_key: [unclosed\n")
        with pytest.raises(ConfigError, match="invalid YAML"):
            read_config_file(path)

    def test_unknown_key(self, tmp_path):
        path = tmp_path / "typo.yaml"
        path.write_text("apikey: abc\n")
        with pytest.raises(ConfigError, match="apikey"):
            read_config_file(path)


class TestLoadConfig:
    def test_defaults_without_file(self, tmp_path):
        config = load_config(tmp_path / "absent.yaml", env={})
        assert config == Config()
        assert config.api_url == DEFAULT_API_URL
        assert config.linux_hostfile == "/etc/hosts"
        assert config.header == "# ZeroTier Network"

    def test_file_values(self):
        config = load_config(FIXTURES / "config.yaml", env={})
        assert config.api_key == "0123456789abcdef0123456789abcdef"
        assert config.domain == "zt.example.lan"
        assert config.pihole_custom_list == "/srv/pihole/custom.list"
        assert config.windows_hostfile == "/mnt/c/Windows/System32/drivers/etc/hosts"

    def test_env_overrides_file(self):
        env = {"ZT_NETWORK": "deadbeef00000000", "ZT_TIMEOUT": "5"}
        config = load_config(FIXTURES / "config.yaml", env=env)
        assert config.network == "deadbeef00000000"
        assert config.timeout == 5.0
        assert config.domain == "zt.example.lan"

    def test_config_path_from_env(self, monkeypatch):
        monkeypatch.setenv("ZT_HOSTS_CONFIG", str(FIXTURES / "config.yaml"))
        assert load_config(env={}).interval == "15min"

    def test_numeric_yaml_values_become_strings(self, tmp_path):
        path = tmp_path / "c.yaml"
        path.write_text("network: 1234\ntimeout: 12\npihole_custom_list:\n")
        config = load_config(path, env={})
        assert config.network == "1234"
        assert config.timeout == 12.0
        assert config.pihole_custom_list == ""

    def test_empty_yaml_value_keeps_default(self, tmp_path):
        path = tmp_path / "c.yaml"
        path.write_text("timeout:\nlinux_hostfile:\n")
        config = load_config(path, env={})
        assert config.timeout == 30.0
        assert config.linux_hostfile == "/etc/hosts"

    def test_empty_timeout_env(self):
        with pytest.raises(ConfigError, match="timeout"):
            load_config("/nonexistent.yaml", env={"ZT_TIMEOUT": ""})

    def test_bad_timeout(self):
        with pytest.raises(ConfigError, match="timeout"):
            load_config("/nonexistent.yaml", env={"ZT_TIMEOUT": "soon"})

    def test_frozen(self):
        with pytest.raises(FrozenInstanceError):
            Config().api_key = "x"


class TestRequireCredentials:
    def test_missing_both(self):
        with pytest.raises(ConfigError, match="api_key, network"):
            Config().require_credentials()

    def test_present(self):
        Config(api_key="k", network="n").require_credentials()
