"""Command that opens the MegaStore window on a product file."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from megastore.gui import MegaStoreApp
from megastore.loader import ProductLoadError

__all__ = ["main"]

DEFAULT_CSV = "produtos.csv"


def main(argv: Sequence[str] | None = None) -> int:
    """Load the catalogue and run the window; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="megastore",
        description="Search a product catalogue and browse recommendations.",
    )
    parser.add_argument(
        "csv_path",
        nargs="?",
        default=DEFAULT_CSV,
        help=f"product file to load (default: {DEFAULT_CSV})",
    )
    args = parser.parse_args(argv)

    try:
        app = MegaStoreApp(args.csv_path)
    except (OSError, ProductLoadError) as exc:
        print(f"megastore: {exc}", file=sys.stderr)
        return 1

    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())