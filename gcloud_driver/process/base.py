"""Abstract process runner interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

SUCCESS = 0


@dataclass(frozen=True)
class ProcessResult:
    """Outcome of a finished process."""
    returncode: int
    stdout: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == SUCCESS


class ProcessRunner(ABC):
    """Abstract interface for running external commands.

    Implementations can run commands in different ways:
    - Local subprocess (default)
    - Canned responses (testing)
    """

    @abstractmethod
    def run(self, command: Sequence[str], capture_output: bool = False) -> ProcessResult:
        """Run a command and wait for it to finish.

        Args:
            command: Argument vector, first token is the executable
            capture_output: Collect standard output into the result

        Returns:
            ProcessResult with the exit status and captured stdout
            (empty when capture_output is False)

        Raises:
            ProcessSpawnFailure: If the executable could not be started
        """
        pass
