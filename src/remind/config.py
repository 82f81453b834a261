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
Reminder Configuration

Settings for the reminder CLI. Values can be overridden via environment
variables (or a .env file loaded by the CLI).
"""

import logging
import math
import os
from dataclasses import dataclass

import pytz

logger = logging.getLogger("remind.config")

DEFAULT_MESSAGE = "Time is up!"

# Seconds between repeated alerts
ALERT_CADENCE_SECONDS = 30

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _valid_cadence(value) -> bool:
    """Cadence must be a finite number of seconds greater than zero."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value > 0


def validate_timezone(tz_name: str) -> bool:
    """
    Validate that a timezone name is valid.

    Args:
        tz_name: IANA timezone name (e.g., "America/Los_Angeles")

    Returns:
        True if valid, False otherwise
    """
    try:
        pytz.timezone(tz_name)
        return True
    except pytz.UnknownTimeZoneError:
        return False


@dataclass
class RemindConfig:
    """
    Configuration for the reminder CLI.

    Invalid values are replaced with their defaults (with a warning) however
    the config is built, so the scheduler never sees them.
    """

    default_message: str = DEFAULT_MESSAGE
    cadence_seconds: float = ALERT_CADENCE_SECONDS

    # Only used to log the wall-clock time a reminder fires at
    timezone: str = "UTC"

    log_level: str = "WARNING"

    def __post_init__(self):
        if not _valid_cadence(self.cadence_seconds):
            logger.warning(
                f"Invalid alert cadence {self.cadence_seconds!r}, "
                f"falling back to {ALERT_CADENCE_SECONDS} seconds"
            )
            self.cadence_seconds = ALERT_CADENCE_SECONDS

        if not validate_timezone(self.timezone):
            logger.warning(f"Invalid timezone '{self.timezone}', falling back to UTC")
            self.timezone = "UTC"

        self.log_level = str(self.log_level).upper()
        if self.log_level not in LOG_LEVELS:
            logger.warning(f"Invalid log level '{self.log_level}', falling back to WARNING")
            self.log_level = "WARNING"

    @classmethod
    def from_env(cls) -> "RemindConfig":
        """Create config from environment variables with defaults."""
        cadence = os.getenv("REMIND_CADENCE_SECONDS", str(ALERT_CADENCE_SECONDS))
        try:
            cadence_seconds = float(cadence)
        except ValueError:
            logger.warning(
                f"Invalid alert cadence '{cadence}', "
                f"falling back to {ALERT_CADENCE_SECONDS} seconds"
            )
            cadence_seconds = ALERT_CADENCE_SECONDS

        return cls(
            default_message=os.getenv("REMIND_DEFAULT_MESSAGE", DEFAULT_MESSAGE),
            cadence_seconds=cadence_seconds,
            timezone=os.getenv("REMIND_TIMEZONE", "UTC"),
            log_level=os.getenv("REMIND_LOG_LEVEL", "WARNING"),
        )
