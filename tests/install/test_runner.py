"""
Tests for plan execution — dry run, spawn failures, installer exit codes.
"""

import sys

import pytest

from qbit.core.services.install.domain.command import InstallCommand
from qbit.core.services.install.errors import InstallerFailed, SpawnFailed
from qbit.core.services.install.execution.runner import execute_or_dry_run, run_inherited


@pytest.fixture
def command():
    return InstallCommand("apt-get", ["install", "git"])


class TestDryRun:
    def test_never_spawns(self, command, exploding_executor, echo_lines):
        execute_or_dry_run(command, True, executor=exploding_executor, echo=echo_lines.append)
        assert echo_lines == ["Dry run: apt-get install git"]

    def test_without_echo(self, command, exploding_executor):
        execute_or_dry_run(command, True, executor=exploding_executor)


class TestExecute:
    def test_success(self, command, make_executor, echo_lines):
        executor = make_executor(0)
        execute_or_dry_run(command, False, executor=executor, echo=echo_lines.append)
        assert executor.calls == [["apt-get", "install", "git"]]
        assert echo_lines == ["Executing: apt-get install git"]

    def test_nonzero_exit(self, command, make_executor):
        with pytest.raises(InstallerFailed) as exc:
            execute_or_dry_run(command, False, executor=make_executor(100))
        assert exc.value.exit_code == 100
        assert "apt-get install git" in str(exc.value)

    def test_spawn_failure(self, command):
        def missing(argv):
            raise FileNotFoundError(2, "No such file or directory")

        with pytest.raises(SpawnFailed, match="No such file"):
            execute_or_dry_run(command, False, executor=missing)

    def test_executing_line_printed_before_spawn(self, command, echo_lines):
        def executor(argv):
            assert echo_lines == ["Executing: apt-get install git"]
            return 0

        execute_or_dry_run(command, False, executor=executor, echo=echo_lines.append)


class TestRunInherited:
    def test_real_exit_code(self):
        assert run_inherited([sys.executable, "-c", "raise SystemExit(3)"]) == 3

    def test_missing_program_raises_oserror(self):
        with pytest.raises(OSError):
            run_inherited(["qbit-definitely-not-a-real-binary"])
