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
Reminder Scheduler Module

Blocking wait-then-alert loop for a single reminder.

Sequence: report the duration, sleep once for the whole duration, clear the
terminal, then ring the bell with the message every cadence tick. In
single-shot mode the loop returns after the first alert; otherwise it runs
until the process is killed.
"""

import enum
import logging
import sys
import time
from datetime import datetime
from typing import Callable, Optional, TextIO

import pytz

from .config import RemindConfig
from .time_parser import Duration

logger = logging.getLogger("remind.scheduler")

# Erase display, then move the cursor home
CLEAR_SCREEN = "\x1b[2J\x1b[H"
BELL = "\x07"


class ReminderState(enum.Enum):
    IDLE = "idle"
    WAITING = "waiting"
    ALERTING = "alerting"
    DONE = "done"


class ReminderScheduler:
    """
    Runs one reminder on the calling thread.

    The sleep function, monotonic clock and output stream can be swapped out,
    which keeps tests from waiting in real time.
    """

    def __init__(
        self,
        config: Optional[RemindConfig] = None,
        out: Optional[TextIO] = None,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize the reminder scheduler.

        Args:
            config: Reminder settings (defaults used when omitted)
            out: Stream for status and alert output (stdout when omitted)
            sleep: Blocking sleep function
            clock: Monotonic clock used to anchor the alert cadence
        """
        self.config = config or RemindConfig()
        self._out = out
        self._sleep = sleep
        self._clock = clock
        self.state = ReminderState.IDLE

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    def _write(self, text: str) -> None:
        self.out.write(text)
        self.out.flush()

    def _due_at(self, duration: Duration) -> str:
        """Wall-clock time the reminder fires, in the configured timezone."""
        tz = pytz.timezone(self.config.timezone)
        due = tz.normalize(datetime.now(tz) + duration.to_timedelta())
        return due.strftime("%Y-%m-%d %H:%M:%S %Z")

    def run(
        self, duration: Duration, message: Optional[str] = None, once: bool = False
    ) -> None:
        """
        Wait for the duration, then alert.

        Args:
            duration: How long to wait before the first alert
            message: Alert text (config default when None)
            once: Alert a single time and return instead of repeating
        """
        if message is None:
            message = self.config.default_message

        self._write(f"Remind in {duration.describe()}.\n")
        logger.info(f"Reminder due at {self._due_at(duration)}")

        self.state = ReminderState.WAITING
        self._sleep(duration.total_seconds)

        self._write(CLEAR_SCREEN)
        self.state = ReminderState.ALERTING

        # Alert n is due at first alert + n * cadence
        next_alert = self._clock()
        alerts = 0
        while True:
            self._write(f"{BELL}{message}\n")
            alerts += 1
            logger.debug(f"Alert {alerts} sent")

            if once:
                self.state = ReminderState.DONE
                return

            next_alert += self.config.cadence_seconds
            self._sleep(max(0.0, next_alert - self._clock()))
