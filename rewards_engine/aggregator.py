"""
Rewards aggregation over a customer's transactions.

The caller fetches and date-filters the transactions; these functions only
sum the stamped points and bucket them by calendar month. Inputs are never
mutated, so the same list can be aggregated repeatedly or concurrently.
"""

from datetime import UTC, tzinfo
from typing import Dict, Sequence

from rewards_engine.models import RewardsResult, Transaction
from rewards_engine.windows import month_key, parse_year_month, validate_months

ALL_TIME_PERIOD = "All time"
NO_TRANSACTIONS_PERIOD = "No transactions found"


def group_points_by_month(transactions: Sequence[Transaction], tz: tzinfo = UTC) -> Dict[str, int]:
    """
    Sum points per YYYY-MM bucket.

    Returns:
        Dictionary of month key -> points, keys in ascending order
    """
    buckets: Dict[str, int] = {}
    for txn in transactions:
        key = month_key(txn.transaction_date, tz)
        buckets[key] = buckets.get(key, 0) + txn.points_earned
    return dict(sorted(buckets.items()))


def _empty_result(customer_id: str, customer_name: str, period: str) -> RewardsResult:
    return RewardsResult(
        customer_id=customer_id,
        customer_name=customer_name,
        total_points=0,
        monthly_points={},
        period=period,
    )


def _grouped_result(
    customer_id: str,
    customer_name: str,
    transactions: Sequence[Transaction],
    period: str,
    tz: tzinfo,
) -> RewardsResult:
    monthly_points = group_points_by_month(transactions, tz)
    return RewardsResult(
        customer_id=customer_id,
        customer_name=customer_name,
        total_points=sum(monthly_points.values()),
        monthly_points=monthly_points,
        period=period,
    )


def aggregate_all(
    customer_id: str,
    customer_name: str,
    transactions: Sequence[Transaction],
    tz: tzinfo = UTC,
) -> RewardsResult:
    """
    All-time rewards for a customer.

    Args:
        customer_id: business identifier of the customer
        customer_name: display name ("First Last")
        transactions: every transaction of the customer, any order
        tz: time zone used to derive month keys

    Returns:
        RewardsResult labelled "All time", or an empty result labelled
        "No transactions found" when the list is empty
    """
    if not transactions:
        return _empty_result(customer_id, customer_name, NO_TRANSACTIONS_PERIOD)
    return _grouped_result(customer_id, customer_name, transactions, ALL_TIME_PERIOD, tz)


def aggregate_for_month(
    customer_id: str,
    customer_name: str,
    transactions: Sequence[Transaction],
    year_month: str,
) -> RewardsResult:
    """
    Rewards for one calendar month.

    `transactions` must already be restricted to that month. The result
    always carries exactly one monthly entry, even when it is 0.

    Raises:
        InvalidArgumentError: if year_month is not a valid YYYY-MM
    """
    parse_year_month(year_month)
    month_points = sum(txn.points_earned for txn in transactions)
    return RewardsResult(
        customer_id=customer_id,
        customer_name=customer_name,
        total_points=month_points,
        monthly_points={year_month: month_points},
        period=f"Month: {year_month}",
    )


def aggregate_for_recent_months(
    customer_id: str,
    customer_name: str,
    transactions: Sequence[Transaction],
    months: int,
    tz: tzinfo = UTC,
) -> RewardsResult:
    """
    Rewards for the last `months` months (1 to 36).

    Raises:
        InvalidArgumentError: if months is outside [1, 36]
    """
    validate_months(months)
    if not transactions:
        return _empty_result(
            customer_id, customer_name, f"No transactions in last {months} months"
        )
    return _grouped_result(
        customer_id, customer_name, transactions, f"Last {months} months", tz
    )
