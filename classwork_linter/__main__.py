"""Module entrypoint for running classwork-linter as ``python -m classwork_linter``."""

from __future__ import annotations

from classwork_linter.cli import main


if __name__ == "__main__":
    main()
