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
Time Parser Module

Parses compact duration tokens such as "2h30m", "45m" or "3h" into a
Duration value.

Grammar notes:
- Digits accumulate until an 'h' (hours) or 'm' (minutes) terminator
- Only lowercase 'h'/'m' and ASCII digits are accepted, no whitespace
- Each field is limited to 0-255
- Digits left over at the end of the token are ignored ("2h30" is 2 hours)
"""

import logging
from dataclasses import dataclass
from datetime import timedelta

logger = logging.getLogger("remind.time_parser")

# Largest value either field may hold
MAX_FIELD_VALUE = 255

DIGITS = "0123456789"


class DurationParseError(Exception):
    """Raised when a duration token cannot be parsed."""

    pass


class DurationSyntaxError(DurationParseError):
    """Raised for an unexpected character or a unit with no digits before it."""

    pass


class DurationOverflowError(DurationParseError):
    """Raised when an hour or minute value does not fit in 0-255."""

    pass


@dataclass(frozen=True)
class Duration:
    """Wait interval parsed from a duration token."""

    hours: int = 0
    minutes: int = 0

    def __post_init__(self):
        for name in ("hours", "minutes"):
            value = getattr(self, name)
            if (
                isinstance(value, bool)
                or not isinstance(value, int)
                or not 0 <= value <= MAX_FIELD_VALUE
            ):
                raise ValueError(
                    f"{name} must be an integer between 0 and {MAX_FIELD_VALUE}, got {value!r}"
                )

    @property
    def total_seconds(self) -> int:
        return self.hours * 3600 + self.minutes * 60

    def to_timedelta(self) -> timedelta:
        return timedelta(hours=self.hours, minutes=self.minutes)

    def describe(self) -> str:
        """Human-readable form, e.g. '2 hour(s) and 30 minute(s)'."""
        return f"{self.hours} hour(s) and {self.minutes} minute(s)"


def _field_value(digits: str, label: str) -> int:
    """
    Convert an accumulated digit run into a field value.

    Args:
        digits: Digits collected since the previous terminator
        label: Field name used in error messages ("hours" or "minutes")

    Returns:
        The integer value

    Raises:
        DurationSyntaxError: If no digits were collected
        DurationOverflowError: If the value exceeds MAX_FIELD_VALUE
    """
    if not digits:
        raise DurationSyntaxError(f"Invalid {label}")

    value = int(digits)
    if value > MAX_FIELD_VALUE:
        raise DurationOverflowError(
            f"Invalid {label}: {value} exceeds {MAX_FIELD_VALUE}"
        )
    return value


def parse_duration(text: str) -> Duration:
    """
    Parse a duration token into a Duration.

    Supports:
    - Hours and minutes: "2h30m"
    - Hours only: "3h"
    - Minutes only: "45m"

    Args:
        text: The raw token, exactly as typed on the command line

    Returns:
        Duration with the parsed hours and minutes

    Raises:
        DurationSyntaxError: If the token contains an unexpected character
            or a unit letter with no digits in front of it
        DurationOverflowError: If a value is larger than 255
    """
    hours = 0
    minutes = 0
    number = ""

    for char in text:
        if char == "h":
            hours = _field_value(number, "hours")
            number = ""
        elif char == "m":
            minutes = _field_value(number, "minutes")
            number = ""
        elif char in DIGITS:
            number += char
        else:
            raise DurationSyntaxError("Invalid syntax, ex: 2h30m")

    if number:
        logger.debug(f"Ignoring unterminated digits '{number}' in '{text}'")

    return Duration(hours=hours, minutes=minutes)
