"""
Rewards engine: point calculation and time-windowed aggregation.
Pure functions, no I/O. Callers supply already-filtered transactions.
"""

from rewards_engine.aggregator import (
    aggregate_all,
    aggregate_for_month,
    aggregate_for_recent_months,
)
from rewards_engine.errors import InvalidArgumentError
from rewards_engine.models import RewardsResult, Transaction
from rewards_engine.points import compute_points
from rewards_engine.windows import month_key, month_window, parse_year_month, recent_window

__all__ = [
    "aggregate_all",
    "aggregate_for_month",
    "aggregate_for_recent_months",
    "compute_points",
    "InvalidArgumentError",
    "month_key",
    "month_window",
    "parse_year_month",
    "recent_window",
    "RewardsResult",
    "Transaction",
]
