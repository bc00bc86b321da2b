"""
Data models for the rewards engine.
Plain dataclasses so the engine never depends on the persistence layer.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Dict, Optional

from rewards_engine.points import compute_points


@dataclass(frozen=True)
class Transaction:
    """
    Snapshot of a stored transaction, as seen by the aggregator.

    Fields:
    - transaction_id: business identifier (e.g. "TXN001")
    - customer_id: owning customer's business identifier
    - amount: monetary amount, may be None or negative on input
    - transaction_date: timestamp used for ordering and month bucketing
    - description: free text
    - points_earned: derived from amount when the snapshot is built
    """
    transaction_id: str
    customer_id: str
    amount: Optional[Decimal]
    transaction_date: datetime
    description: str = ""
    points_earned: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "points_earned", compute_points(self.amount))

    @classmethod
    def from_stored(
        cls,
        transaction_id: str,
        customer_id: str,
        amount: Optional[Decimal],
        transaction_date: datetime,
        description: str,
        points_earned: int,
    ) -> "Transaction":
        """Rebuild a snapshot keeping the points stamped when it was first created."""
        snapshot = cls(transaction_id, customer_id, amount, transaction_date, description)
        object.__setattr__(snapshot, "points_earned", points_earned)
        return snapshot


@dataclass(frozen=True)
class RewardsResult:
    """
    The aggregation output for one customer and one period.

    Fields:
    - customer_id: business identifier of the customer
    - customer_name: first and last name joined by a space
    - total_points: sum over every transaction in scope
    - monthly_points: YYYY-MM -> points, keys in ascending order
    - period: human-readable label ("All time", "Month: 2024-09", ...)
    """
    customer_id: str
    customer_name: str
    total_points: int
    monthly_points: Dict[str, int]
    period: str
