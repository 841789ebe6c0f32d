"""Entry point for running the CLI from `src/` with `python -m main`."""

from __future__ import annotations

import sys

# Windows terminals default to cp1252; stored text may not fit it.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
