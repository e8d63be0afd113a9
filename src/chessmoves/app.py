"""Application entry point."""

from __future__ import annotations

import sys


def main() -> None:
    """Launch the chessmoves command-line tool."""
    from chessmoves.cli.bootstrap import run_cli

    sys.exit(run_cli())


if __name__ == "__main__":
    main()
