"""Run script.

Why it exists:
- Allows `python -m main` during development.
- Keeps a simple entrypoint next to the `fusionaly-installer` console script.
"""

from __future__ import annotations

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
