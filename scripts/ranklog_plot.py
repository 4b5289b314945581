"""Script wrapper for the rank-log figure CLI."""

from __future__ import annotations

from proteoplot.cli import ranklog_main

if __name__ == "__main__":
    raise SystemExit(ranklog_main())
