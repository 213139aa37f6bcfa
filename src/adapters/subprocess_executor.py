"""Real `CommandExecutor`: runs the control binary with `subprocess`.

Why a separate adapter:
- The admin service never imports subprocess; tests swap this class for
  `adapters.recording_executor.RecordingExecutor`.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from typing import Sequence

from core.domain.errors import ExecutionError

_module_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExecutionResult:
    """What a finished process reported."""

    args: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    def detail(self) -> str:
        return (self.stderr or self.stdout).strip()


class SubprocessExecutor:
    """Spawn one process per call and block until it exits.

    Only `args[0]` and `args[1]` are logged: the remaining positional
    arguments can be credentials.
    """

    def __init__(self, timeout_seconds: float | None = None, logger: logging.Logger | None = None) -> None:
        self._timeout_seconds = timeout_seconds
        self._logger = logger or _module_logger

    def run(self, args: Sequence[str]) -> ExecutionResult:
        """Run `args` and return the raw result; raises only on launch failure."""

        argv = [str(a) for a in args]
        if not argv:
            raise ValueError("cannot execute an empty command")

        self._logger.debug("Running %s", " ".join(argv[:2]))
        try:
            completed = subprocess.run(
                argv,
                capture_output=True,
                text=True,
                timeout=self._timeout_seconds,
            )
        except subprocess.TimeoutExpired as exc:
            raise ExecutionError(
                f"{argv[0]} timed out after {exc.timeout}s",
                args=argv,
                detail=f"timeout after {exc.timeout}s",
            ) from exc
        except OSError as exc:
            raise ExecutionError(
                f"could not launch {argv[0]}: {exc.strerror or exc}",
                args=argv,
                detail=str(exc),
            ) from exc

        return ExecutionResult(
            args=tuple(argv),
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )

    def execute_command(self, args: Sequence[str]) -> None:
        result = self.run(args)
        if result.ok:
            self._logger.debug("%s exited with 0", result.args[0])
            return

        detail = result.detail()
        message = f"{' '.join(result.args[:2])} exited with status {result.returncode}"
        if detail:
            message = f"{message}: {detail}"
        raise ExecutionError(message, args=result.args, returncode=result.returncode, detail=detail)
