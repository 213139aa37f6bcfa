"""Errors raised while talking to the control binary."""

from __future__ import annotations

from typing import Sequence


class ExecutionError(Exception):
    """The external command failed (non-zero exit) or could not be launched.

    `returncode` is `None` when the process never started.
    """

    def __init__(
        self,
        message: str,
        *,
        args: Sequence[str] = (),
        returncode: int | None = None,
        detail: str = "",
    ) -> None:
        super().__init__(message)
        self.command = tuple(args)
        self.returncode = returncode
        self.detail = detail
