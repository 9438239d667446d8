# ==============================================
# CLI - Command Line Entry Point
# ==============================================
#
# PURPOSE:
#   Provides the command-line interface: load one delimited
#   file, compute every feature's statistics and print the
#   continuous and discrete summary tables.
#
# USAGE:
# ------
#   describe data.csv
#   python -m describe data.csv
#   describe --version
#
# EXIT CODES:
# -----------
#   0 → tables printed
#   1 → file could not be loaded, or configuration is invalid
#   2 → bad command line (argparse)
#
# ==============================================

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Union

from rich.console import Console

from describe import __version__
from describe.analysis import Dataset
from describe.config import AppConfig, get_config
from describe.loading import CsvLoader, DataAccessError
from describe.rendering import TableRenderer


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="describe",
        description="Display features' informations of a csv dataset."
    )
    parser.add_argument("input", metavar="INPUT", help="Sets the csv input file to use")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def load_dataset(path: Union[str, Path], config: AppConfig) -> Dataset:
    """
    Read a delimited file and build its features.

    Args:
        path: Path to the input file
        config: Application configuration (delimiter, encoding)

    Raises:
        DataAccessError: If the file cannot be read or parsed
    """
    loader = CsvLoader(
        delimiter=config.csv.delimiter,
        encoding=config.csv.encoding
    )
    return Dataset.from_rows(loader.load(path))


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    """
    Run the describe command.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])
        console: Console to print tables on (defaults to stdout)

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)

    try:
        config = get_config()
        dataset = load_dataset(args.input, config)
    except (DataAccessError, ValueError) as e:
        print(f"✗ {e}", file=sys.stderr)
        return 1

    dataset.compute_all()
    summary = dataset.render_summary(precision=config.display.precision)
    TableRenderer(console).render(summary)
    return 0


if __name__ == "__main__":
    sys.exit(main())
