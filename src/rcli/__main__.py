"""Module entrypoint for `python -m rcli`."""

from __future__ import annotations

from rcli.cli.app import app

if __name__ == "__main__":
    app()
