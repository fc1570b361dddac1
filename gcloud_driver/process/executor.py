"""Command execution with dry-run support."""

from __future__ import annotations

import shlex
import sys
from typing import Callable, Optional, Sequence

from gcloud_driver.process.base import SUCCESS, ProcessResult, ProcessRunner
from gcloud_driver.process.local import SubprocessRunner


class Executor:
    """Run assembled commands, or just print them in dry-run mode.

    The dry-run switch is fixed at construction. In dry-run mode no process
    is ever started and every call reports success.
    """

    def __init__(
        self,
        runner: Optional[ProcessRunner] = None,
        dry_run: bool = False,
        sink: Optional[Callable[[str], None]] = None,
        verbose: bool = False,
    ):
        """Initialize executor.

        Args:
            runner: Process runner (defaults to SubprocessRunner)
            dry_run: Print commands instead of running them
            sink: Receives dry-run command lines (defaults to print)
            verbose: Echo each command to stderr before running it
        """
        self.runner = runner or SubprocessRunner()
        self._dry_run = dry_run
        self._sink = sink or print
        self.verbose = verbose

    @property
    def dry_run(self) -> bool:
        return self._dry_run

    def execute(self, command: Sequence[str]) -> bool:
        """Run a command for its side effect.

        Returns:
            True if the command exited with status 0 (always True in dry-run)
        """
        if self._dry_run:
            self._report(command)
            return True

        self._echo(command)
        result = self.runner.run(command)
        if not result.ok:
            self._warn_failed(command, result.returncode)
        return result.ok

    def execute_capturing(self, command: Sequence[str]) -> tuple[bool, str]:
        """Run a command and collect its standard output.

        Output is returned whether or not the command succeeded. In dry-run
        mode the command is printed and ``(True, "")`` is returned; callers
        must not try to parse that empty output.

        Returns:
            Tuple of (success, stdout)
        """
        result = self.execute_for_result(command)
        return result.ok, result.stdout

    def execute_for_result(self, command: Sequence[str]) -> ProcessResult:
        """Run a command and return its exit status along with stdout.

        In dry-run mode the command is printed and a successful empty
        result is returned.
        """
        if self._dry_run:
            self._report(command)
            return ProcessResult(returncode=SUCCESS)

        self._echo(command)
        result = self.runner.run(command, capture_output=True)
        if not result.ok:
            self._warn_failed(command, result.returncode)
        return result

    def _report(self, command: Sequence[str]):
        self._sink(" ".join(command))

    def _echo(self, command: Sequence[str]):
        if self.verbose:
            sys.stderr.write(f"[CMD] {shlex.join(command)}\n")
            sys.stderr.flush()

    def _warn_failed(self, command: Sequence[str], returncode: int):
        if self.verbose:
            sys.stderr.write(f"[WARN] {command[0]} exited with status {returncode}\n")
            sys.stderr.flush()
