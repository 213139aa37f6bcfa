"""Checkout entry point: `python -m main ...` without `pip install -e .`.

The packages live under `src/`, which is not importable from a plain
checkout, so it is put on `sys.path` before the CLI is imported.
"""

from __future__ import annotations

import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parent / "src"


def _use_checkout_sources() -> None:
    if str(SRC_DIR) not in sys.path:
        sys.path.insert(0, str(SRC_DIR))


def main() -> None:
    _use_checkout_sources()
    from cli.main import app  # noqa: PLC0415

    app(prog_name="fusionaly-installer")


if __name__ == "__main__":
    main()
