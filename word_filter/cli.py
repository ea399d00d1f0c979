#!/usr/bin/env python3
"""
Word Filter CLI Entry Point

Usage:
    word-filter "some text to check" [--mode clean|check|indexes|normalize|debug]
    echo "some text" | word-filter --list words.txt

Example:
    word-filter "what the fuuuck"            # -> what the ******
    word-filter --mode check "hello there"   # exit code 0, text is clean
    word-filter --regex --list patterns.txt --mode indexes "b4d day"
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, List, Optional

from .config import Config
from .error_handler import UserFriendlyError, handle_error, safe_operation
from .filter import Filter
from .logging_config import enable_debug_logging, setup_logging

logger = logging.getLogger(__name__)

MODES = ("clean", "check", "indexes", "normalize", "debug")

EXIT_OK = 0
EXIT_UNCLEAN = 1
EXIT_ERROR = 2


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="word-filter",
        description="Detect and censor profanity, including obfuscated spellings",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  word-filter "you are baaaad"
  word-filter --mode check "hello there"
  word-filter --clean-with "#" --list mywords.txt "some text"
  word-filter --random-censor --clean-with "#$%&" "some text"
  cat chat.log | word-filter --mode indexes
        """
    )

    parser.add_argument(
        "text",
        nargs="*",
        help="Text to filter. Reads lines from stdin when omitted"
    )

    parser.add_argument(
        "--mode", "-m",
        choices=MODES,
        default="clean",
        help="What to print for each input (default: clean)"
    )

    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to configuration YAML file"
    )

    parser.add_argument(
        "--list", "-l",
        dest="word_list",
        default=None,
        help="Word list file (.json with a 'filter' field, or one term per line)"
    )

    parser.add_argument(
        "--regex",
        action="store_true",
        default=None,
        help="Treat word list entries as regular expressions"
    )

    parser.add_argument(
        "--clean-with",
        default=None,
        help="Censor string (default: '*')"
    )

    parser.add_argument(
        "--random-censor",
        action="store_true",
        help="Draw a random character from --clean-with for every censored character"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug output"
    )

    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only log warnings and errors"
    )

    parser.add_argument(
        "--debug-log",
        action="store_true",
        help="Write a detailed debug log under ~/.word_filter/logs"
    )

    return parser.parse_args(argv)


@safe_operation("loading configuration")
def load_config(args: argparse.Namespace) -> Config:
    """Load configuration and apply CLI overrides."""
    config = Config.load(args.config)

    if args.word_list is not None:
        config.filter.word_list_path = args.word_list
        logger.info(f"CLI override: word list = {args.word_list}")

    if args.regex:
        config.filter.use_regex = True
        logger.info("CLI override: regex mode")

    if args.clean_with is not None:
        config.filter.clean_with = list(args.clean_with) if args.random_censor else args.clean_with
        logger.info(f"CLI override: clean with = {config.filter.clean_with!r}")
    elif args.random_censor and isinstance(config.filter.clean_with, str):
        config.filter.clean_with = list(config.filter.clean_with)

    return config


@safe_operation("building filter")
def build_filter(config: Config) -> Filter:
    return Filter.from_config(config.filter)


def configure_logging(args: argparse.Namespace, config: Config) -> None:
    """CLI flags win over the config file."""
    if args.debug_log:
        enable_debug_logging()
    elif args.quiet:
        setup_logging(level="WARNING", force=True)
    elif args.verbose:
        setup_logging(level="DEBUG", force=True)
    else:
        setup_logging(level=config.logging.level, log_file=config.logging.log_file or None, force=True)


def run(word_filter: Filter, lines: Iterable[str], mode: str) -> int:
    """Apply the filter to every line, printing results. Returns the exit code."""
    exit_code = EXIT_OK

    for line in lines:
        line = line.rstrip("\n")
        if mode == "clean":
            print(word_filter.clean(line))
        elif mode == "check":
            unclean = word_filter.is_unclean(line)
            print("unclean" if unclean else "clean")
            if unclean:
                exit_code = EXIT_UNCLEAN
        elif mode == "indexes":
            print(" ".join(str(i) for i in word_filter.get_unclean_word_indexes(line)))
        elif mode == "normalize":
            print(word_filter.normalize(line))
        else:
            word_filter.debug(line)

    return exit_code


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    try:
        config = load_config(args)
        configure_logging(args, config)
        word_filter = build_filter(config)
    except UserFriendlyError as e:
        # Unwrap errors that safe_operation wrapped
        error = e.__cause__ if type(e) is UserFriendlyError and e.__cause__ else e
        title, message = handle_error(error, "startup")
        print(f"Error: {title}\n\n{message}", file=sys.stderr)
        return EXIT_ERROR

    lines = [" ".join(args.text)] if args.text else sys.stdin
    return run(word_filter, lines, args.mode)


if __name__ == "__main__":
    sys.exit(main())
