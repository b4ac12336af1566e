"""
Tests for the shipshape command line.
"""

import json
import logging
import os
import sys

import pytest
from click.testing import CliRunner

from shipshape.__version__ import __version__
from shipshape.api.exceptions import UnsupportedPlatformError
import shipshape.cli.main as cli_main
from shipshape.cli.main import check_platform, cli, log_level, main
from shipshape.constants import (
    ENV_ALLOW_ANY_PLATFORM,
    ENV_CONFIG_PATH,
    ENV_ENVIRONMENT,
    ENV_LOG_LEVEL,
)
from tests.conftest import python_command


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def workspace(tmp_path, monkeypatch, write_tree):
    monkeypatch.setenv(ENV_ALLOW_ANY_PLATFORM, "1")
    monkeypatch.delenv(ENV_ENVIRONMENT, raising=False)
    monkeypatch.delenv(ENV_CONFIG_PATH, raising=False)
    monkeypatch.chdir(tmp_path)
    write_tree(tmp_path, {
        "dist/index.html": "<html/>",
        "out/log/app.log": "history",
        "out/old.txt": "stale",
        "staging/old.txt": "stale",
    })
    return tmp_path


def write_config(root, data):
    (root / "shipshape.config.json").write_text(json.dumps(data), encoding="utf-8")


ENVIRONMENTS = {
    "default": {"source": "dist", "destination": "out", "keepList": ["log"]},
    "environments": {
        "staging": {"destination": "staging"},
        "prod": {"destination": "out"},
    },
}


def test_version(runner):
    result = runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert result.output.strip() == f"shipshape v{__version__}"


def test_help_mentions_environment_option(runner):
    result = runner.invoke(cli, ["-h"])

    assert result.exit_code == 0
    assert "--env" in result.output


def test_deploys_default_configuration(runner, workspace):
    write_config(workspace, ENVIRONMENTS)

    result = runner.invoke(cli, [])

    assert result.exit_code == 0, result.output
    assert sorted(os.listdir(workspace / "out")) == ["index.html", "log"]
    assert "Deployment completed successfully!" in result.output


def test_environment_option_is_case_insensitive(runner, workspace):
    write_config(workspace, ENVIRONMENTS)

    result = runner.invoke(cli, ["-e", "StAgInG"])

    assert result.exit_code == 0, result.output
    assert sorted(os.listdir(workspace / "staging")) == ["index.html"]
    assert (workspace / "out" / "old.txt").exists()


def test_environment_from_environment_variable(runner, workspace, monkeypatch):
    write_config(workspace, ENVIRONMENTS)
    monkeypatch.setenv(ENV_ENVIRONMENT, "staging")

    result = runner.invoke(cli, [])

    assert result.exit_code == 0, result.output
    assert (workspace / "staging" / "index.html").exists()


def test_invalid_environment(runner, workspace):
    write_config(workspace, ENVIRONMENTS)

    result = runner.invoke(cli, ["--env", "qa"])

    assert result.exit_code == 1
    assert "Invalid environment" in result.output
    assert (workspace / "out" / "old.txt").exists()


def test_missing_configuration_file(runner, workspace):
    result = runner.invoke(cli, [])

    assert result.exit_code == 1
    assert "not found" in result.output


def test_same_source_and_destination_touches_nothing(runner, workspace):
    write_config(workspace, {"source": "out", "destination": "out"})

    result = runner.invoke(cli, [])

    assert result.exit_code == 1
    assert "cannot be the same" in result.output
    assert sorted(os.listdir(workspace / "out")) == ["log", "old.txt"]


def test_failing_pre_deploy_exits_non_zero(runner, workspace):
    write_config(workspace, {
        "source": "dist",
        "destination": "out",
        "preDeploy": [python_command("import sys; sys.exit(4)")],
    })

    result = runner.invoke(cli, [])

    assert result.exit_code == 1
    assert "Deployment failed!" in result.output
    assert (workspace / "out" / "old.txt").exists()


def test_dry_run_changes_nothing(runner, workspace):
    write_config(workspace, {
        "source": "dist",
        "destination": "out",
        "preDeploy": [python_command("open('ran', 'w').close()")],
    })

    result = runner.invoke(cli, ["--dry-run"])

    assert result.exit_code == 0, result.output
    assert "Dry run" in result.output
    assert not (workspace / "ran").exists()
    assert (workspace / "out" / "old.txt").exists()


def test_explicit_config_option(runner, workspace):
    (workspace / "alt.json").write_text(json.dumps({"source": "dist", "destination": "fresh"}))

    result = runner.invoke(cli, ["--config", "alt.json"])

    assert result.exit_code == 0, result.output
    assert (workspace / "fresh" / "index.html").exists()


def test_quiet_hides_progress(runner, workspace):
    write_config(workspace, ENVIRONMENTS)

    result = runner.invoke(cli, ["-q"])

    assert result.exit_code == 0
    assert "Starting deployment" not in result.output


def test_verbose_shows_result_table(runner, workspace):
    write_config(workspace, ENVIRONMENTS)

    result = runner.invoke(cli, ["--verbose"])

    assert result.exit_code == 0, result.output
    assert "Deploy Result" in result.output


def test_refuses_other_platforms(runner, workspace, monkeypatch):
    write_config(workspace, ENVIRONMENTS)
    monkeypatch.delenv(ENV_ALLOW_ANY_PLATFORM)
    monkeypatch.setattr(sys, "platform", "linux")

    result = runner.invoke(cli, [])

    assert result.exit_code == 1
    assert "only on Windows" in result.output
    assert (workspace / "out" / "old.txt").exists()


class TestCheckPlatform:

    def test_windows_is_allowed(self, monkeypatch):
        monkeypatch.delenv(ENV_ALLOW_ANY_PLATFORM, raising=False)

        check_platform("win32")

    def test_other_platform_raises(self, monkeypatch):
        monkeypatch.delenv(ENV_ALLOW_ANY_PLATFORM, raising=False)

        with pytest.raises(UnsupportedPlatformError):
            check_platform("darwin")

    @pytest.mark.parametrize("value", ["1", "true", "YES"])
    def test_override_allows_any_platform(self, monkeypatch, value):
        monkeypatch.setenv(ENV_ALLOW_ANY_PLATFORM, value)

        check_platform("linux")


class TestMain:

    @pytest.fixture(autouse=True)
    def argv(self, monkeypatch):
        monkeypatch.setattr(sys, "argv", ["shipshape"])

    def test_keyboard_interrupt_exits_130(self, monkeypatch, capsys):
        def interrupted(platform=None):
            raise KeyboardInterrupt

        monkeypatch.setattr(cli_main, "check_platform", interrupted)

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 130
        assert "Aborted!" not in capsys.readouterr().out

    def test_success_exits_zero(self, workspace):
        write_config(workspace, ENVIRONMENTS)

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 0
        assert (workspace / "out" / "index.html").exists()

    def test_deployment_error_exits_one(self, workspace):
        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 1

    def test_version_exits_zero(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["shipshape", "--version"])

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_usage_error_exits_two(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["shipshape", "--no-such-option"])

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 2
        assert "No such option" in capsys.readouterr().err


class TestLogLevel:

    def test_flags_take_precedence(self, monkeypatch):
        monkeypatch.setenv(ENV_LOG_LEVEL, "ERROR")

        assert log_level(debug=True) == logging.DEBUG
        assert log_level(verbose=True) == logging.INFO

    def test_level_from_environment(self, monkeypatch):
        monkeypatch.setenv(ENV_LOG_LEVEL, "error")

        assert log_level() == logging.ERROR

    def test_unknown_level_falls_back_to_warning(self, monkeypatch):
        monkeypatch.setenv(ENV_LOG_LEVEL, "LOUD")

        assert log_level() == logging.WARNING

    def test_cli_runs_with_unknown_level(self, runner, workspace, monkeypatch):
        write_config(workspace, ENVIRONMENTS)
        monkeypatch.setenv(ENV_LOG_LEVEL, "LOUD")

        result = runner.invoke(cli, [])

        assert result.exit_code == 0, result.output
