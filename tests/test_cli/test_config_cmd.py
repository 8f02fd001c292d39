"""Tests for CLI config command."""

import logging

import pytest
from click.testing import CliRunner

from intervalle.cli.main import cli


@pytest.fixture
def runner():
    return CliRunner()


class TestConfigPath:
    def test_explicit_config(self, runner, sample_config):
        result = runner.invoke(cli, ["--config", str(sample_config), "config", "path"])
        assert result.exit_code == 0
        assert "intervalle.toml" in result.output

    def test_no_config(self, runner, temp_dir, monkeypatch):
        monkeypatch.chdir(temp_dir)
        monkeypatch.setattr("intervalle.cli.config.find_config_file", lambda: None)
        result = runner.invoke(cli, ["config", "path"])
        assert result.exit_code == 0
        assert "No configuration file found" in result.output


class TestConfigShow:
    def test_show_file(self, runner, sample_config):
        result = runner.invoke(cli, ["--config", str(sample_config), "config", "show"])
        assert result.exit_code == 0
        assert "Config file:" in result.output
        assert "utc_offset" in result.output

    def test_show_search_locations(self, runner, monkeypatch):
        monkeypatch.setattr("intervalle.cli.config.find_config_file", lambda: None)
        result = runner.invoke(cli, ["config", "show"])
        assert result.exit_code == 0
        assert "[tool.intervalle]" in result.output


class TestVerbose:
    def test_verbose_flag(self, runner, monkeypatch):
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: None)
        result = runner.invoke(
            cli, ["--verbose", "parse", "today", "--anchor", "2023-11-11 12:20:45", "--json"]
        )
        assert result.exit_code == 0, result.output
