"""Compensation engine: day slicing, bucket classification and rate conversion."""

from worktally.compensation.classifier import (
    classify,
    classify_comprehensive_hours,
    classify_standard_hours,
    resolve_day_type,
)
from worktally.compensation.engine import CompensationEngine
from worktally.compensation.rates import convert, round_currency
from worktally.compensation.slicer import slice_intervals

__all__ = [
    "CompensationEngine",
    "classify",
    "classify_comprehensive_hours",
    "classify_standard_hours",
    "convert",
    "resolve_day_type",
    "round_currency",
    "slice_intervals",
]
