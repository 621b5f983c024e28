"""Unit tests for the click entry point and settings precedence."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from click.testing import CliRunner

from ecsnav import __version__
from ecsnav import cli
from ecsnav.app import EcsNavigatorApp
from ecsnav.constants.values import RUN_COMPLETE_MESSAGE
from ecsnav.models.state.app_settings import AppSettings


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def launched(monkeypatch: pytest.MonkeyPatch) -> list[AppSettings]:
    """Stub out AWS, logging and the TUI; record the settings the app got."""
    settings_seen: list[AppSettings] = []

    def fake_run(self: EcsNavigatorApp, *args, **kwargs) -> None:
        settings_seen.append(self.settings)

    monkeypatch.setattr(EcsNavigatorApp, "run", fake_run)
    monkeypatch.setattr(cli.boto3, "Session", MagicMock())
    monkeypatch.setattr(cli, "configure_logging", MagicMock(return_value=40))
    monkeypatch.delenv("AWS_DEFAULT_REGION", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    return settings_seen


class TestBuildSettings:
    """Test file < environment < flags precedence."""

    def test_flags_override_file(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("AWS_DEFAULT_REGION", raising=False)
        base = AppSettings(cluster_prefix="staging")
        settings = cli.build_settings(base, "prod", None, None)
        assert settings.cluster_prefix == "prod"

    def test_environment_overrides_file(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("AWS_DEFAULT_REGION", "eu-west-1")
        monkeypatch.setenv("LOG_LEVEL", "info")
        base = AppSettings(default_region="us-east-1", log_level="error")
        settings = cli.build_settings(base, None, None, None)
        assert settings.default_region == "eu-west-1"
        assert settings.log_level == "info"

    def test_unset_flags_keep_file_values(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("AWS_DEFAULT_REGION", raising=False)
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        base = AppSettings(cluster_prefix="prod", log_file="/tmp/x.log")
        assert cli.build_settings(base, None, None, None) == base

    def test_key_resolved(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(cli, "resolve_key_path", lambda location: f"/keys/{location}")
        settings = cli.build_settings(AppSettings(), None, "deploy.pem", None)
        assert settings.ssh_key == "/keys/deploy.pem"


class TestMain:
    """Test the command itself."""

    def test_version(self, runner: CliRunner) -> None:
        result = runner.invoke(cli.main, ["--version"])
        assert result.exit_code == 0
        assert result.output.strip() == f"ecsnav {__version__}"

    def test_short_version(self, runner: CliRunner) -> None:
        result = runner.invoke(cli.main, ["-v"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_help(self, runner: CliRunner) -> None:
        result = runner.invoke(cli.main, ["-h"])
        assert result.exit_code == 0
        assert "--cluster" in result.output
        assert "--key" in result.output

    def test_unknown_option_is_usage_error(self, runner: CliRunner) -> None:
        result = runner.invoke(cli.main, ["--bogus"])
        assert result.exit_code == 2

    def test_runs_app_and_reports_completion(
        self, runner: CliRunner, launched: list[AppSettings], tmp_path: Path
    ) -> None:
        result = runner.invoke(
            cli.main, ["--config", str(tmp_path / "none.yaml"), "-c", "prod"]
        )
        assert result.exit_code == 0, result.output
        assert RUN_COMPLETE_MESSAGE in result.output
        assert launched[0].cluster_prefix == "prod"

    def test_bad_config_exits_1(
        self, runner: CliRunner, launched: list[AppSettings], tmp_path: Path
    ) -> None:
        config = tmp_path / "settings.yaml"
        config.write_text("- not\n- a mapping\n", encoding="utf-8")

        result = runner.invoke(cli.main, ["--config", str(config)])

        assert result.exit_code == 1
        assert launched == []

    def test_unwritable_log_file_exits_1(
        self, runner: CliRunner, launched: list[AppSettings], tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setattr(cli, "configure_logging", MagicMock(side_effect=OSError("denied")))
        result = runner.invoke(cli.main, ["--config", str(tmp_path / "none.yaml")])
        assert result.exit_code == 1
        assert launched == []
