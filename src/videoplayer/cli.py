"""Command-line interface for the video player."""

import argparse
import logging
import sys
from typing import List, Optional

from .commands import CommandParser
from .config import CATALOG_FILE, EXIT_COMMAND, LOG_LEVEL, PROMPT
from .errors import CatalogError
from .library import load_library
from .logging_config import configure_logging
from .player import VideoPlayer


logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(description="Video playback and playlist manager")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--catalog", default=CATALOG_FILE, help="Catalog file, one 'title | id | #tags' per line"
    )
    parser.add_argument(
        "-c",
        "--command",
        action="append",
        dest="commands",
        help="Run a command and exit instead of starting the interactive prompt (repeatable)",
    )
    return parser


def read_answer() -> Optional[str]:
    """Read the answer to a search's play question; EOF counts as no answer."""
    try:
        return input()
    except EOFError:
        return None


def run_interactive(command_parser: CommandParser) -> None:
    """Read and run commands until EXIT or end of input.

    Args:
        command_parser: Parser bound to the session
    """
    print("Hello and welcome to the video player, what would you like to do?")
    while True:
        try:
            line = input(PROMPT)
        except EOFError:
            break
        if line.strip().upper() == EXIT_COMMAND:
            break
        command_parser.execute(line)
    print("Video player has now terminated its execution. Thank you and goodbye!")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point.

    Returns:
        int: Exit code
    """
    parser = create_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        return 1 if e.code == 2 else e.code

    configure_logging("DEBUG" if args.debug else LOG_LEVEL)

    try:
        library = load_library(args.catalog)
    except CatalogError as e:
        logger.error("Failed to load catalog: %s", str(e))
        return 1

    player = VideoPlayer(library, prompt=read_answer, output=print)
    command_parser = CommandParser(player)

    try:
        if args.commands:
            for line in args.commands:
                command_parser.execute(line)
        else:
            run_interactive(command_parser)
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
