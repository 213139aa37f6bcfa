"""Control binary subcommands and invocation building.

Only the subcommand name travels through this module as a typed value;
positional arguments (email, password) stay opaque strings.
"""

from __future__ import annotations

from enum import Enum

DEFAULT_CONTROL_BINARY = "/app/fnctl"

Invocation = tuple[str, ...]


class ControlCommand(str, Enum):
    """Subcommands understood by `fnctl`."""

    CREATE_ADMIN_USER = "create-admin-user"
    CHANGE_ADMIN_PASSWORD = "change-admin-password"

    def label(self) -> str:
        """Human readable label for console output."""

        return self.value.replace("-", " ")


def build_invocation(binary: str, command: ControlCommand, *positional: str) -> Invocation:
    """Return `(binary, subcommand, *positional)` without touching the values."""

    return (binary, command.value, *positional)


def mask_invocation(invocation: Invocation, *, secret_positions: tuple[int, ...] = (3,)) -> Invocation:
    """Copy of `invocation` with the given positions replaced by `********`.

    Index 3 is the password for both admin subcommands.
    """

    return tuple("********" if i in secret_positions else part for i, part in enumerate(invocation))
