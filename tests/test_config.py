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

"""Tests for reminder configuration."""

import logging
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from remind.config import ALERT_CADENCE_SECONDS, RemindConfig, validate_timezone


class TestRemindConfig:
    """Test configuration defaults and environment overrides."""

    def test_default_config(self):
        config = RemindConfig()
        assert config.default_message == "Time is up!"
        assert config.cadence_seconds == 30
        assert config.timezone == "UTC"
        assert config.log_level == "WARNING"

    def test_config_from_env_default(self):
        with patch.dict("os.environ", {}, clear=True):
            config = RemindConfig.from_env()
            assert config == RemindConfig()

    def test_config_from_env_custom_values(self):
        with patch.dict("os.environ", {
            "REMIND_DEFAULT_MESSAGE": "Stand up",
            "REMIND_CADENCE_SECONDS": "10",
            "REMIND_TIMEZONE": "Europe/Paris",
            "REMIND_LOG_LEVEL": "debug",
        }):
            config = RemindConfig.from_env()
            assert config.default_message == "Stand up"
            assert config.cadence_seconds == 10.0
            assert config.timezone == "Europe/Paris"
            assert config.log_level == "DEBUG"

    def test_invalid_timezone_falls_back(self):
        with patch.dict("os.environ", {"REMIND_TIMEZONE": "Mars/Olympus"}):
            config = RemindConfig.from_env()
            assert config.timezone == "UTC"


class TestValidateTimezone:
    """Test timezone name validation."""

    def test_valid(self):
        assert validate_timezone("America/Los_Angeles") is True
        assert validate_timezone("UTC") is True

    def test_invalid(self):
        assert validate_timezone("Not/AZone") is False


class TestCadenceValidation:
    """Alert cadence must be a finite number of seconds above zero."""

    @pytest.mark.parametrize("raw", ["0", "-5", "nan", "inf", "soon", ""])
    def test_bad_env_value_falls_back(self, raw):
        with patch.dict("os.environ", {"REMIND_CADENCE_SECONDS": raw}):
            config = RemindConfig.from_env()
            assert config.cadence_seconds == ALERT_CADENCE_SECONDS

    def test_fractional_value_kept(self):
        with patch.dict("os.environ", {"REMIND_CADENCE_SECONDS": "2.5"}):
            assert RemindConfig.from_env().cadence_seconds == 2.5

    @pytest.mark.parametrize("value", [0, -5, float("nan"), float("inf"), True, "30"])
    def test_bad_direct_value_falls_back(self, value):
        assert RemindConfig(cadence_seconds=value).cadence_seconds == ALERT_CADENCE_SECONDS

    def test_fallback_is_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="remind.config"):
            RemindConfig(cadence_seconds=0)
        assert "Invalid alert cadence" in caplog.text


class TestDirectConstruction:
    """Validation also applies when the config is built without from_env."""

    def test_invalid_timezone_falls_back(self):
        assert RemindConfig(timezone="Mars/Olympus").timezone == "UTC"

    def test_log_level_normalized(self):
        assert RemindConfig(log_level="info").log_level == "INFO"

    def test_unknown_log_level_falls_back(self):
        assert RemindConfig(log_level="basicConfig").log_level == "WARNING"
        assert RemindConfig(log_level="verbose").log_level == "WARNING"
