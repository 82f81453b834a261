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
Terminal Reminder Package

Parses compact durations ("2h30m") and rings the terminal bell when they run out.
"""

__version__ = "0.1.0"

from .time_parser import (
    Duration,
    DurationParseError,
    DurationSyntaxError,
    DurationOverflowError,
    parse_duration,
    MAX_FIELD_VALUE,
)
from .config import RemindConfig, validate_timezone
from .scheduler import ReminderScheduler, ReminderState

__all__ = [
    "Duration",
    "DurationParseError",
    "DurationSyntaxError",
    "DurationOverflowError",
    "parse_duration",
    "MAX_FIELD_VALUE",
    "RemindConfig",
    "validate_timezone",
    "ReminderScheduler",
    "ReminderState",
]
