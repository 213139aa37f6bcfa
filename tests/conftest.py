import logging
import stat
import sys
from pathlib import Path
from typing import Callable, Tuple

import pytest

from adapters.recording_executor import RecordingExecutor
from core.services.admin_manager import AdminManager

FNCTL = "/app/fnctl"


@pytest.fixture
def logger() -> logging.Logger:
    """Plain propagating logger so caplog sees the records"""
    test_logger = logging.getLogger("tests.admin")
    test_logger.setLevel(logging.DEBUG)
    return test_logger


@pytest.fixture
def make_manager(logger: logging.Logger) -> Callable[..., Tuple[AdminManager, RecordingExecutor]]:
    """Factory returning a manager wired to a fresh recording executor"""

    def _make(fail_after: int = 0, control_binary: str = FNCTL) -> Tuple[AdminManager, RecordingExecutor]:
        executor = RecordingExecutor(fail_after=fail_after)
        return AdminManager(logger, executor, control_binary=control_binary), executor

    return _make


@pytest.fixture
def fake_fnctl(tmp_path: Path) -> Path:
    """Executable stand-in for fnctl: echoes its args, exits 3 when FNCTL_FAIL is set"""
    if sys.platform.startswith("win"):
        pytest.skip("shell script stand-in requires a POSIX shell")
    script = tmp_path / "fnctl"
    script.write_text(
        "#!/bin/sh\n"
        'echo "$@"\n'
        'if [ -n "$FNCTL_FAIL" ]; then echo "user already exists" >&2; exit 3; fi\n'
        "exit 0\n",
        encoding="utf-8",
    )
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return script
