"""Local subprocess runner."""

from __future__ import annotations

import subprocess
from typing import Sequence

from gcloud_driver.errors import ProcessSpawnFailure
from gcloud_driver.process.base import ProcessResult, ProcessRunner


class SubprocessRunner(ProcessRunner):
    """Run commands as local child processes.

    The command is passed as an argument vector, never through a shell.
    Stderr is inherited so the tool's own diagnostics reach the terminal.
    Stdout is decoded as UTF-8 whatever the locale; undecodable bytes become
    U+FFFD so malformed output surfaces as a parse error downstream.
    """

    def run(self, command: Sequence[str], capture_output: bool = False) -> ProcessResult:
        try:
            proc = subprocess.run(
                list(command),
                stdout=subprocess.PIPE if capture_output else None,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        except OSError as e:
            raise ProcessSpawnFailure(
                f"Failed to start {command[0]!r}: {e}", command=command
            ) from e
        return ProcessResult(returncode=proc.returncode, stdout=proc.stdout or "")
