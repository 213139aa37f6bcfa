"""Admin account operations backed by the `fnctl` control binary.

The manager only formats the invocation and forwards it; it validates
nothing and retries nothing. Whatever `ExecutionError` the executor raises
reaches the caller unchanged.
"""

from __future__ import annotations

import logging

from adapters.subprocess_executor import SubprocessExecutor
from core.domain.commands import DEFAULT_CONTROL_BINARY, ControlCommand, build_invocation
from core.domain.errors import ExecutionError
from core.interfaces.command_executor import CommandExecutor


class AdminManager:
    """Create admin users and change their passwords."""

    def __init__(
        self,
        logger: logging.Logger,
        executor: CommandExecutor | None = None,
        *,
        control_binary: str = DEFAULT_CONTROL_BINARY,
    ) -> None:
        self._logger = logger
        if executor is None:
            executor = SubprocessExecutor(logger=logger.getChild("executor"))
        self._executor = executor
        self._control_binary = control_binary

    def create_admin_user(self, email: str, password: str) -> None:
        self._run(ControlCommand.CREATE_ADMIN_USER, email, password)

    def change_admin_password(self, email: str, password: str) -> None:
        self._run(ControlCommand.CHANGE_ADMIN_PASSWORD, email, password)

    def _run(self, command: ControlCommand, email: str, password: str) -> None:
        invocation = build_invocation(self._control_binary, command, email, password)
        self._logger.info("Running %s for %s", command.value, email)
        try:
            self._executor.execute_command(list(invocation))
        except ExecutionError as exc:
            self._logger.error("%s failed for %s: %s", command.value, email, exc)
            raise
        self._logger.info("%s succeeded for %s", command.value, email)
