"""
Point calculation for a single transaction.
Deterministic and unit-testable.
"""

from decimal import Decimal
from typing import Optional, Union

# Tier boundaries in whole currency units
LOWER_TIER_THRESHOLD = 50
UPPER_TIER_THRESHOLD = 100
UPPER_TIER_RATE = 2

Amount = Union[Decimal, int, float, str]


def compute_points(amount: Optional[Amount]) -> int:
    """
    Convert a transaction amount into reward points.

    - 2 points per dollar spent over $100
    - 1 point per dollar spent between $50 and $100
    - 0 points for the first $50

    Fractional dollars are dropped before the tiers are applied, so $50.99
    counts as $50. Missing, zero and negative amounts earn nothing.

    Args:
        amount: Transaction amount, ideally a Decimal

    Returns:
        Non-negative integer point value

    Example:
        >>> compute_points(Decimal("120.00"))
        90
    """
    if amount is None:
        return 0

    if not isinstance(amount, Decimal):
        amount = Decimal(str(amount))

    if amount <= 0:
        return 0

    whole_dollars = int(amount)  # truncates toward zero, amount is positive here

    if whole_dollars > UPPER_TIER_THRESHOLD:
        upper_tier_points = (whole_dollars - UPPER_TIER_THRESHOLD) * UPPER_TIER_RATE
        return upper_tier_points + (UPPER_TIER_THRESHOLD - LOWER_TIER_THRESHOLD)
    if whole_dollars > LOWER_TIER_THRESHOLD:
        return whole_dollars - LOWER_TIER_THRESHOLD
    return 0
