"""Command-line interface for odmatrix."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from odmatrix.config import ExportConfig, UnresolvedLocationPolicy
from odmatrix.errors import InputValidationError, ODMatrixError
from odmatrix.logging import configure_from_flags, get_logger
from odmatrix.pipeline import export_layer

logger = get_logger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="odmatrix",
        description=(
            "Write dense origin-destination cost matrices from a solved OD cost "
            "matrix layer as CSV files."
        ),
    )
    parser.add_argument("layer", type=Path, help="Path to the layer file")
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Directory for CSV files (default: the layer file's folder)",
    )
    parser.add_argument(
        "--encoding",
        default=ExportConfig.encoding,
        help="Text encoding of the CSV files (default: %(default)s)",
    )
    parser.add_argument(
        "--strict-locations",
        action="store_true",
        help="Fail on location rows without a network location instead of skipping them",
    )
    return parser


def _fail(message: str) -> None:
    logger.debug(f"Exiting with error: {message}")
    print(f"Exception thrown: {message}", file=sys.stderr)
    sys.exit(1)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``odmatrix`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = _build_parser()
    effective_args = sys.argv[1:] if argv is None else argv
    if len(effective_args) == 0:
        _fail(str(InputValidationError("Command line format: <layer file name>")))

    args = parser.parse_args(effective_args)
    configure_from_flags(verbose=args.verbose, quiet=args.quiet)

    try:
        config = ExportConfig(
            encoding=args.encoding,
            unresolved_policy=(
                UnresolvedLocationPolicy.ERROR
                if args.strict_locations
                else UnresolvedLocationPolicy.SKIP
            ),
        )
        written = export_layer(args.layer, output_dir=args.output, config=config)
    except ODMatrixError as e:
        _fail(str(e))
    except Exception as e:
        _fail(f"{type(e).__name__}: {e}")
    else:
        for path in written:
            print(path)


if __name__ == "__main__":
    main()
