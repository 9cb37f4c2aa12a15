"""Payroll policy: work schemes, rate table and their JSON interchange form."""

import json
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any

from worktally.errors import InvalidPayrollConfigError

DEFAULT_DAILY_REGULAR_HOURS = Decimal(8)
DEFAULT_HOURS_PER_WORKDAY = Decimal(8)


class WorkMode(str, Enum):
    """High-level work scheme."""

    STANDARD_HOURS = "standardHours"  # OT after the daily threshold, rest days/holidays as OT
    COMPREHENSIVE_HOURS = "comprehensiveHours"  # OT after the monthly quota


class PeriodKind(str, Enum):
    """Payroll period granularity."""

    MONTHLY = "monthly"


def to_decimal(value: Any) -> Decimal:
    """Convert a number (or numeric string) to Decimal without binary float artefacts."""
    if isinstance(value, bool):
        msg = f"Expected a number, got {value!r}"
        raise InvalidPayrollConfigError(msg)
    try:
        result = Decimal(str(value))
    except InvalidOperation as e:
        msg = f"Expected a number, got {value!r}"
        raise InvalidPayrollConfigError(msg) from e
    if not result.is_finite():
        msg = f"Expected a finite number, got {value!r}"
        raise InvalidPayrollConfigError(msg)
    return result


@dataclass(frozen=True)
class OvertimeMultipliers:
    """Multipliers applied to the base rate for each overtime bucket."""

    workday: Decimal = Decimal("1.5")
    rest_day: Decimal = Decimal("2.0")
    holiday: Decimal = Decimal("3.0")


@dataclass(frozen=True)
class RateTable:
    """Base hourly rate and overtime multipliers."""

    base_per_hour: Decimal = Decimal(30)
    multipliers: OvertimeMultipliers = field(default_factory=OvertimeMultipliers)

    @classmethod
    def demo(cls) -> "RateTable":
        """Rate table used when a policy does not specify one."""
        return cls()


@dataclass(frozen=True)
class PayrollConfig:
    """Payroll policy knobs for one project (or the default for unassigned logs)."""

    mode: WorkMode = WorkMode.STANDARD_HOURS
    period_kind: PeriodKind = PeriodKind.MONTHLY
    daily_regular_hours: Decimal = DEFAULT_DAILY_REGULAR_HOURS  # standard hours only
    hours_per_workday: Decimal = DEFAULT_HOURS_PER_WORKDAY  # comprehensive quota only
    rate_table: RateTable = field(default_factory=RateTable.demo)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the interchange shape, numbers as exact decimal strings."""
        multipliers = self.rate_table.multipliers
        return {
            "mode": self.mode.value,
            "periodKind": self.period_kind.value,
            "dailyRegularHours": str(self.daily_regular_hours),
            "hoursPerWorkday": str(self.hours_per_workday),
            "rateTable": {
                "basePerHour": str(self.rate_table.base_per_hour),
                "multipliers": {
                    "workday": str(multipliers.workday),
                    "restDay": str(multipliers.rest_day),
                    "holiday": str(multipliers.holiday),
                },
            },
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PayrollConfig":
        """Build a policy from its interchange shape; missing keys take defaults."""
        if not isinstance(data, dict):
            msg = f"Payroll config must be an object, got {type(data).__name__}"
            raise InvalidPayrollConfigError(msg)

        try:
            mode = WorkMode(data.get("mode", WorkMode.STANDARD_HOURS.value))
            period_kind = PeriodKind(data.get("periodKind", PeriodKind.MONTHLY.value))
        except ValueError as e:
            raise InvalidPayrollConfigError(str(e)) from e

        defaults = OvertimeMultipliers()
        rate_data = _object(data, "rateTable")
        multiplier_data = _object(rate_data, "multipliers")
        rate_table = RateTable(
            base_per_hour=to_decimal(rate_data.get("basePerHour", RateTable().base_per_hour)),
            multipliers=OvertimeMultipliers(
                workday=to_decimal(multiplier_data.get("workday", defaults.workday)),
                rest_day=to_decimal(multiplier_data.get("restDay", defaults.rest_day)),
                holiday=to_decimal(multiplier_data.get("holiday", defaults.holiday)),
            ),
        )

        return cls(
            mode=mode,
            period_kind=period_kind,
            daily_regular_hours=to_decimal(
                data.get("dailyRegularHours", DEFAULT_DAILY_REGULAR_HOURS)
            ),
            hours_per_workday=to_decimal(data.get("hoursPerWorkday", DEFAULT_HOURS_PER_WORKDAY)),
            rate_table=rate_table,
        )

    def to_json(self) -> str:
        """Serialize to a JSON string."""
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, payload: str) -> "PayrollConfig":
        """Parse a JSON string produced by `to_json` (or the settings layer)."""
        try:
            data = json.loads(payload)
        except json.JSONDecodeError as e:
            msg = f"Invalid payroll config JSON: {e}"
            raise InvalidPayrollConfigError(msg) from e
        return cls.from_dict(data)


def _object(data: dict[str, Any], key: str) -> dict[str, Any]:
    """Nested object under `key`, empty when absent."""
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        msg = f"{key} must be an object, got {type(value).__name__}"
        raise InvalidPayrollConfigError(msg)
    return value
