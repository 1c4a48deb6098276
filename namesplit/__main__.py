"""Module entrypoint for running namesplit as ``python -m namesplit``."""

from __future__ import annotations

from namesplit.cli import main


if __name__ == "__main__":
    main()
