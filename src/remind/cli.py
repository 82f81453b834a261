# remind - Terminal Reminder Utility
# Copyright (c) 2025-2026 Slash Daemon slashdaemon@protonmail.com
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, version 3 of the License.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program. If not, see <https://www.gnu.org/licenses/>.
#
# Commercial licensing: [slashdaemon@protonmail.com]

"""
Remind CLI

Command-line entry point for the reminder tool.

Usage:
    # Remind in two and a half hours, repeating every 30 seconds
    remind 2h30m "Go for a walk"

    # Remind once in 45 minutes with the default message
    remind --once 45m
"""

import argparse
import logging
import sys
from typing import Optional

from dotenv import load_dotenv

from . import __version__
from .config import RemindConfig
from .scheduler import ReminderScheduler
from .time_parser import DurationOverflowError, DurationParseError, parse_duration

logger = logging.getLogger("remind.cli")

OVERFLOW_MESSAGE = "Duration too long."
SYNTAX_MESSAGE = "Syntax error."


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="remind", description="Simple remind tool")
    parser.add_argument(
        "-V", "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "-o", "--once", action="store_true", help="Run reminder only once"
    )
    parser.add_argument(
        "delta", help="Time to wait before the reminder triggers (ex: 2h30m)"
    )
    parser.add_argument(
        "message", nargs="?", default=None,
        help='Optional reminder message (ex: "Go for a walk")',
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)

    config = RemindConfig.from_env()
    logging.basicConfig(
        level=logging.getLevelName(config.log_level),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        duration = parse_duration(args.delta)
    except DurationOverflowError as e:
        logger.debug(f"Rejected duration '{args.delta}': {e}")
        print(OVERFLOW_MESSAGE, file=sys.stderr)
        return 1
    except DurationParseError as e:
        logger.debug(f"Rejected duration '{args.delta}': {e}")
        print(SYNTAX_MESSAGE, file=sys.stderr)
        return 1

    scheduler = ReminderScheduler(config)
    try:
        scheduler.run(duration, args.message, once=args.once)
    except KeyboardInterrupt:
        logger.info(f"Interrupted while {scheduler.state.value}")
        return 130

    return 0


if __name__ == "__main__":
    sys.exit(main())
