"""Configuration management."""

import configparser
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from worktally.errors import InvalidConfigError, InvalidPayrollConfigError
from worktally.policy import (
    OvertimeMultipliers,
    PayrollConfig,
    RateTable,
    WorkMode,
    to_decimal,
)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "worktally" / "config.ini"
DEFAULT_TIMEZONE = "UTC"
DEFAULT_LOG_LEVEL = "WARNING"

logger = logging.getLogger(__name__)


@dataclass
class Config:
    """Reporting calendar, logging level and the default payroll policy."""

    timezone: str = DEFAULT_TIMEZONE
    log_level: str = DEFAULT_LOG_LEVEL
    default_payroll: PayrollConfig | None = None

    @property
    def tzinfo(self) -> ZoneInfo:
        """Zone that defines day boundaries and month periods."""
        try:
            return ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError) as e:
            msg = f"Unknown timezone: {self.timezone!r}"
            raise InvalidConfigError(msg) from e

    @property
    def logging_level(self) -> int:
        """Numeric logging level for `log_level`."""
        level = logging.getLevelNamesMapping().get(self.log_level.upper())
        if level is None:
            msg = f"Unknown log level: {self.log_level!r}"
            raise InvalidConfigError(msg)
        return level

    @classmethod
    def from_env(cls) -> "Config | None":
        """Load configuration from environment variables."""
        timezone = os.environ.get("WORKTALLY_TIMEZONE")
        log_level = os.environ.get("WORKTALLY_LOG_LEVEL")
        payroll_json = os.environ.get("WORKTALLY_DEFAULT_PAYROLL")
        if timezone is None and log_level is None and payroll_json is None:
            return None

        try:
            default_payroll = PayrollConfig.from_json(payroll_json) if payroll_json else None
        except InvalidPayrollConfigError as e:
            msg = f"WORKTALLY_DEFAULT_PAYROLL: {e}"
            raise InvalidConfigError(msg) from e

        return cls(
            timezone=timezone or DEFAULT_TIMEZONE,
            log_level=log_level or DEFAULT_LOG_LEVEL,
            default_payroll=default_payroll,
        )

    @classmethod
    def load(cls, path: Path = DEFAULT_CONFIG_PATH) -> "Config | None":
        """Load configuration from file."""
        if not path.is_file():
            return None

        config = configparser.ConfigParser(interpolation=None)
        config.read(path)
        general = config["general"] if config.has_section("general") else {}
        default_payroll = None
        if config.has_section("default_payroll"):
            default_payroll = _read_payroll_section(config["default_payroll"])

        logger.debug("Loaded configuration from %s", path)
        return cls(
            timezone=general.get("timezone", DEFAULT_TIMEZONE),
            log_level=general.get("log_level", DEFAULT_LOG_LEVEL),
            default_payroll=default_payroll,
        )

    def save(self, path: Path = DEFAULT_CONFIG_PATH) -> None:
        """Save configuration to file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        config = configparser.ConfigParser(interpolation=None)
        config["general"] = {
            "timezone": self.timezone,
            "log_level": self.log_level,
        }
        if self.default_payroll is not None:
            payroll = self.default_payroll
            multipliers = payroll.rate_table.multipliers
            config["default_payroll"] = {
                "mode": payroll.mode.value,
                "daily_regular_hours": str(payroll.daily_regular_hours),
                "hours_per_workday": str(payroll.hours_per_workday),
                "base_per_hour": str(payroll.rate_table.base_per_hour),
                "workday_multiplier": str(multipliers.workday),
                "rest_day_multiplier": str(multipliers.rest_day),
                "holiday_multiplier": str(multipliers.holiday),
            }
        with path.open("w") as config_file:
            config.write(config_file)


def _read_payroll_section(section: configparser.SectionProxy) -> PayrollConfig:
    """Build a payroll policy from an INI section; absent keys take defaults."""
    defaults = PayrollConfig()
    multipliers = defaults.rate_table.multipliers
    try:
        return PayrollConfig(
            mode=WorkMode(section.get("mode", defaults.mode.value)),
            daily_regular_hours=to_decimal(
                section.get("daily_regular_hours", defaults.daily_regular_hours)
            ),
            hours_per_workday=to_decimal(
                section.get("hours_per_workday", defaults.hours_per_workday)
            ),
            rate_table=RateTable(
                base_per_hour=to_decimal(
                    section.get("base_per_hour", defaults.rate_table.base_per_hour)
                ),
                multipliers=OvertimeMultipliers(
                    workday=to_decimal(section.get("workday_multiplier", multipliers.workday)),
                    rest_day=to_decimal(
                        section.get("rest_day_multiplier", multipliers.rest_day)
                    ),
                    holiday=to_decimal(section.get("holiday_multiplier", multipliers.holiday)),
                ),
            ),
        )
    except (ValueError, InvalidPayrollConfigError) as e:
        msg = f"Invalid [default_payroll] section: {e}"
        raise InvalidConfigError(msg) from e
