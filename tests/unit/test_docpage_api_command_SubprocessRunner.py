"""Unit tests for docpage.api.command.SubprocessRunner."""

import sys

import pytest

from docpage.api.command.CommandError import CommandError
from docpage.api.command.CommandResult import CommandResult
from docpage.api.command.SubprocessRunner import SubprocessRunner


def test_captures_stdout_and_status():
    result = SubprocessRunner().run([sys.executable, "-c", "print('hello')"])
    assert result.ok is True
    assert result.returncode == 0
    assert result.stdout == "hello\n"


def test_nonzero_exit_is_returned_not_raised():
    result = SubprocessRunner().run([sys.executable, "-c", "import sys; sys.stderr.write('bad'); sys.exit(3)"])
    assert result.ok is False
    assert result.returncode == 3
    assert result.stderr == "bad"


def test_runs_in_cwd(tmp_path):
    result = SubprocessRunner().run([sys.executable, "-c", "import os; print(os.getcwd())"], cwd=tmp_path)
    assert result.stdout.strip() == str(tmp_path.resolve())


def test_missing_executable_raises_command_error():
    with pytest.raises(CommandError, match="not found"):
        SubprocessRunner().run(["docpage-no-such-tool-xyz"])


def test_empty_command_raises():
    with pytest.raises(CommandError, match="empty command"):
        SubprocessRunner().run([])


def test_command_result_ok_property():
    assert CommandResult(args=["x"], returncode=0).ok is True
    assert CommandResult(args=["x"], returncode=2).ok is False
