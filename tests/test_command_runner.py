"""
Tests for the shell command executor (spawns real processes).
"""

import asyncio
import io
import os

import pytest
from rich.console import Console

from shipshape.api.exceptions import CommandFailedError
from shipshape.core.command_runner import ShellCommandExecutor
from tests.conftest import python_command


@pytest.fixture
def executor():
    return ShellCommandExecutor(console=Console(file=io.StringIO(), width=200))


def run(executor, command, cwd):
    return asyncio.run(executor.run(command, cwd))


def test_successful_command(executor, tmp_path):
    run(executor, python_command("open('marker', 'w').write('ok')"), tmp_path)

    assert (tmp_path / "marker").read_text() == "ok"


def test_runs_in_given_working_directory(executor, tmp_path):
    workdir = tmp_path / "work"
    workdir.mkdir()

    run(executor, python_command("import os; open('cwd.txt', 'w').write(os.getcwd())"), workdir)

    assert os.path.samefile((workdir / "cwd.txt").read_text(), workdir)


def test_nonzero_exit_raises_with_code(executor, tmp_path):
    command = python_command("import sys; sys.exit(3)")

    with pytest.raises(CommandFailedError) as exc_info:
        run(executor, command, tmp_path)

    assert exc_info.value.command == command
    assert exc_info.value.exit_code == 3
    assert exc_info.value.error_code == "SS010"


def test_missing_working_directory_fails_to_start(executor, tmp_path):
    with pytest.raises(CommandFailedError) as exc_info:
        run(executor, python_command("pass"), tmp_path / "missing")

    assert exc_info.value.exit_code is None
    assert isinstance(exc_info.value.cause, OSError)


def test_output_is_forwarded_to_streams(tmp_path):
    out, err = io.BytesIO(), io.BytesIO()
    stdout = io.TextIOWrapper(out, encoding="utf-8")
    stderr = io.TextIOWrapper(err, encoding="utf-8")
    executor = ShellCommandExecutor(console=Console(file=io.StringIO()), stdout=stdout, stderr=stderr)

    run(executor, python_command(
        "import sys; sys.stdout.write('to-out'); sys.stderr.write('to-err')"
    ), tmp_path)

    assert out.getvalue() == b"to-out"
    assert err.getvalue() == b"to-err"


def test_output_without_binary_buffer_is_decoded(tmp_path):
    stdout = io.StringIO()
    executor = ShellCommandExecutor(console=Console(file=io.StringIO()), stdout=stdout)

    run(executor, python_command("print('hello')"), tmp_path)

    assert stdout.getvalue().strip() == "hello"


def test_start_and_finish_lines(tmp_path):
    log = io.StringIO()
    executor = ShellCommandExecutor(console=Console(file=log, width=400))
    command = python_command("pass")

    run(executor, command, tmp_path)

    assert f'> Running command: "{command}"' in log.getvalue()
    assert f'> Command "{command}" finished successfully.' in log.getvalue()
