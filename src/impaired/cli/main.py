"""Command-line interface for ranking items by pairwise choices.

Every comparison is shown as two options, ``A`` and ``B``; a single keypress
picks the preferred one. When all comparisons are done the items are listed
with the number of times they were chosen.
"""

# Impaired
# Copyright (C) 2025  Impaired developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from prompt_toolkit import PromptSession
from prompt_toolkit.key_binding import KeyBindings

from impaired.constants import EXIT_FAILURE, EXIT_INTERRUPTED, EXIT_OK
from impaired.exceptions import FileSaveException, ImpairedException
from impaired.session import ComparisonSession, SessionConfig, SessionItem, load_config
from impaired.type_hints import LEFT, RIGHT, Chooser, Side
from impaired.utils import setup_logger

logger = setup_logger(__name__)


# ANSI color codes for terminal output
class Colors:
    OKBLUE = "\033[94m"
    ENDC = "\033[0m"
    BOLD = "\033[1m"


class KeyPressChooser:
    """Reads the choice for a comparison as a single keypress.

    The configured left and right keys (either case) pick a side, the quit
    key or Ctrl-C abort with ``KeyboardInterrupt``; any other key is ignored.
    """

    def __init__(self, config: SessionConfig) -> None:
        self.config = config
        self.bindings = self._create_bindings()
        # Created on first use, so building a chooser needs no terminal
        self._prompt_session: Optional[PromptSession] = None

    def _create_bindings(self) -> KeyBindings:
        bindings = KeyBindings()

        def choose(side: Side):
            def handler(event) -> None:
                event.app.exit(result=side)

            return handler

        def abort(event) -> None:
            event.app.exit(exception=KeyboardInterrupt, style="class:aborting")

        def ignore(event) -> None:
            pass

        for key, side in ((self.config.left_key, LEFT), (self.config.right_key, RIGHT)):
            for variant in {key.lower(), key.upper()}:
                bindings.add(variant)(choose(side))
        for variant in {self.config.quit_key.lower(), self.config.quit_key.upper()}:
            bindings.add(variant)(abort)
        bindings.add("c-c")(abort)
        bindings.add("<any>")(ignore)
        return bindings

    def __call__(self, left: SessionItem, right: SessionItem) -> Side:
        if self._prompt_session is None:
            self._prompt_session = PromptSession()
        message = (
            f"=> Choose by typing '{self.config.left_key}' "
            f"or '{self.config.right_key}': "
        )
        while True:
            answer = self._prompt_session.prompt(message, key_bindings=self.bindings)
            if answer in (LEFT, RIGHT):
                return answer


def print_comparison(left: SessionItem, right: SessionItem, progress: str = "") -> None:
    """Print the two options of a comparison."""
    if progress:
        print(f"{Colors.OKBLUE}{progress}{Colors.ENDC}")
    print(f"A: '{left.card.plain_text()}'  vs.")
    print(f"B: '{right.card.plain_text()}'")


def print_scores(session: ComparisonSession) -> None:
    """Print the final scores, best first."""
    print(f"\n{Colors.BOLD}Final scores:{Colors.ENDC}")
    for item, score in session.scores():
        print(f"- {item.card.plain_text()}: {score} votes")


def run_comparisons(
    items: Sequence[str], config: SessionConfig, choose: Chooser
) -> ComparisonSession:
    """Present every comparison of ``items`` and track the choices.

    Returns the finished session. ``KeyboardInterrupt`` raised by ``choose``
    propagates and aborts the run.
    """
    session = ComparisonSession(config)
    for text in items:
        session.push_item(text)
    session.start()

    while True:
        pair = session.next_comparison()
        if pair is None:
            break
        left, right = pair
        done, total = session.progress
        print_comparison(left, right, f"[{done}/{total}]")

        side = choose(left, right)
        if side == LEFT:
            session.track_result(left.handle, right.handle)
        else:
            session.track_result(right.handle, left.handle)
        print()

    return session


def write_standings(session: ComparisonSession, path: Path) -> None:
    """Write the session summary as JSON.

    Raises
    ------
    FileSaveException
        If the file cannot be written.
    """
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(session.to_dict(), f, indent=2)
    except OSError as e:
        raise FileSaveException(f"Cannot write standings to {path}: {e}") from e
    logger.info("Standings saved to %s", path)


def build_config(args: argparse.Namespace) -> SessionConfig:
    """Session configuration from the config file, overridden by CLI flags."""
    config = load_config(args.config) if args.config else SessionConfig()
    if args.no_retain:
        config.retain_winner = False
    if args.no_scores:
        config.show_scores = False
    return config


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI.

    Returns:
        Configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog="impaired",
        description="Rank items by choosing between two of them at a time",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Rank three programming languages
  impaired Rust C++ Java

  # Present comparisons in generation order instead of keeping the winner
  impaired --no-retain Rust C++ Java Go

  # Save the final standings
  impaired --output standings.json Rust C++ Java
        """,
    )

    parser.add_argument("items", nargs="*", help="Items to compare")

    parser.add_argument("--config", help="Load configuration from JSON file")

    parser.add_argument(
        "--no-retain",
        action="store_true",
        help="Do not keep the previous winner in the next comparison",
    )

    parser.add_argument(
        "--no-scores", action="store_true", help="Do not print the final scores"
    )

    parser.add_argument("--output", type=Path, help="Write standings to a JSON file")

    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")

    return parser


def main(argv: Optional[List[str]] = None, chooser: Optional[Chooser] = None) -> int:
    """Main entry point for CLI.

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logging.getLogger("impaired").setLevel(logging.DEBUG)

    if not args.items:
        print(f"USAGE: {parser.prog} item1 item2 ...", file=sys.stderr)
        return EXIT_FAILURE

    try:
        config = build_config(args)
        if chooser is None:
            chooser = KeyPressChooser(config)
        session = run_comparisons(args.items, config, chooser)
        if config.show_scores:
            print_scores(session)
        if args.output:
            write_standings(session, args.output)
        return EXIT_OK
    except KeyboardInterrupt:
        logger.info("Comparison interrupted by user")
        return EXIT_INTERRUPTED
    except ImpairedException as e:
        logger.error("Comparison failed: %s", e)
        return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
