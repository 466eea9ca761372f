"""Module entrypoint for running wordmatch as ``python -m wordmatch``."""

from __future__ import annotations

from wordmatch.cli import main


if __name__ == "__main__":
    main()
