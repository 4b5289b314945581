"""Script wrapper for the mirrored histogram and Bland-Altman CLI."""

from __future__ import annotations

from proteoplot.cli import compare_main

if __name__ == "__main__":
    raise SystemExit(compare_main())
