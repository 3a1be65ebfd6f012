"""Module entrypoint for running txtepub as ``python -m txtepub``."""

from __future__ import annotations

from txtepub.cli import main


if __name__ == "__main__":
    main()
