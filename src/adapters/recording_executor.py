"""In-memory `CommandExecutor` that records invocations instead of running them.

Used by the test-suite and by the CLI `--dry-run` mode.
"""

from __future__ import annotations

from typing import Sequence

from core.domain.errors import ExecutionError


class RecordingExecutor:
    """Stores a copy of every command, in call order.

    `fail_after`:
    - `0` never fails.
    - `N > 0` makes the Nth call (1-based) and every later one raise
      `ExecutionError` after the command has been recorded.
    """

    def __init__(self, fail_after: int = 0) -> None:
        if fail_after < 0:
            raise ValueError("fail_after must be >= 0")
        self.fail_after = fail_after
        self.commands: list[list[str]] = []

    def execute_command(self, args: Sequence[str]) -> None:
        command = list(args)
        self.commands.append(command)
        if self.fail_after and len(self.commands) >= self.fail_after:
            raise ExecutionError("executor failure", args=command)
