"""
cattocol - Combine two texts into one, as columns or line by line

Usage:
    cattocol FILE_A FILE_B [--mode {col,cat,pairs}] [--fill C] [--repeat N]

Examples:
    cattocol left.txt right.txt                 # Second file in a column after the first
    cattocol left.txt right.txt --repeat 4      # Four extra fill characters between columns
    cattocol left.txt right.txt --mode pairs    # Pair non-empty lines only
    git log --oneline | cattocol - notes.txt    # Read the first text from stdin
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterator

from prompt_toolkit.output import create_output

from cattocol import __version__
from cattocol.combine import CatToCol, by_pairs, cat_to_col
from cattocol.config import MODES, Config

logger = logging.getLogger(__name__)


# ANSI color codes
class Colors:
    """Terminal color definitions"""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[31m"
    YELLOW = "\033[33m"


def print_error(message: str):
    """Print an error message to stderr"""
    print(f"{Colors.RED}❌ Error: {message}{Colors.RESET}", file=sys.stderr)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        prog="cattocol",
        description="Combine two texts into one, as columns or line by line",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  cattocol left.txt right.txt                 # Second file in a column after the first
  cattocol left.txt right.txt --repeat 4      # Four extra fill characters between columns
  cattocol left.txt right.txt --mode pairs    # Pair non-empty lines only
  git log --oneline | cattocol - notes.txt    # Read the first text from stdin
        """,
    )
    parser.add_argument("file_a", help="First (left) text file, or - for stdin")
    parser.add_argument("file_b", help="Second (right) text file, or - for stdin")
    parser.add_argument(
        "--mode",
        "-m",
        choices=MODES,
        default=None,
        help="col: column aligned, cat: single space, pairs: non-empty lines only (default: from config)",
    )
    parser.add_argument(
        "--fill",
        "-f",
        type=str,
        default=None,
        help="Padding character for col mode (default: from config)",
    )
    parser.add_argument(
        "--repeat",
        "-r",
        type=int,
        default=None,
        help="Extra padding after the widest first-text line in col mode (default: from config)",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Configuration file (default: first config.yaml found)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"cattocol {__version__}",
    )

    return parser.parse_args(argv)


def read_text(source: str) -> str:
    """Read a whole text from a file path, or from stdin for "-"."""
    if source == "-":
        return sys.stdin.buffer.read().decode("utf-8")
    return Path(source).read_text(encoding="utf-8")


def combine_texts(text_a: str, text_b: str, mode: str, combiner: CatToCol) -> Iterator[str]:
    """Dispatch to the joiner selected by ``mode``"""
    if mode == "col":
        return combiner.combine_col(text_a, text_b)
    elif mode == "cat":
        return cat_to_col(text_a, text_b)
    elif mode == "pairs":
        return by_pairs(text_a, text_b)
    else:
        raise ValueError(f"Invalid mode: {mode}. Must be one of {', '.join(MODES)}")


def write_output(text: str):
    """Write combined text with its escape sequences untouched

    On a terminal the text goes through prompt_toolkit's raw output, so
    every escape run the column widths skipped reaches the terminal intact.
    """
    if sys.stdout.isatty():
        output = create_output(stdout=sys.stdout)
        output.write_raw(text)
        output.flush()
    else:
        sys.stdout.write(text)
        sys.stdout.flush()


def run(args: argparse.Namespace) -> int:
    """Combine the two inputs described by ``args``

    Returns:
        Process exit code
    """
    if args.file_a == "-" and args.file_b == "-":
        print_error("stdin can be used for only one of the two texts")
        return 1

    try:
        config = Config.load(args.config)
    except FileNotFoundError as e:
        print_error(str(e))
        return 1
    except ValueError as e:
        print_error(str(e))
        print(f"{Colors.YELLOW}Please check the configuration file format{Colors.RESET}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.logging.level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    mode = args.mode or config.combine.mode
    try:
        combiner = CatToCol(config.combine.to_combiner_config())
        if args.fill is not None:
            combiner = combiner.fill(args.fill)
        if args.repeat is not None:
            combiner = combiner.repeat(args.repeat)
    except ValueError as e:
        print_error(str(e))
        return 1
    logger.debug("mode=%s %r", mode, combiner)

    try:
        text_a = read_text(args.file_a)
        text_b = read_text(args.file_b)
    except (OSError, UnicodeDecodeError) as e:
        print_error(f"Failed to read input: {e}")
        return 1

    write_output("".join(combine_texts(text_a, text_b, mode, combiner)))
    return 0


def main(argv: list[str] | None = None):
    """Main entry point for CLI"""
    args = parse_args(argv)
    sys.exit(run(args))


if __name__ == "__main__":
    main()
