"""Command execution contract.

Why Protocol:
- Structural contract (duck typing) with no inheritance required.
- The subprocess adapter and the recording double are interchangeable, so the
  admin service is testable without spawning `fnctl`.
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable


@runtime_checkable
class CommandExecutor(Protocol):
    """Minimal contract for running an external command.

    Rules:
    - `args[0]` is the program, the rest are passed positionally.
    - Returns nothing on success.
    - Raises `core.domain.errors.ExecutionError` on non-zero exit or when the
      program cannot be launched.
    """

    def execute_command(self, args: Sequence[str]) -> None:
        """Run `args` and block until it finishes."""

        ...
