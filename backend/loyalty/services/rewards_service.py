"""
Rewards Service - resolves the customer, fetches the transactions for the
requested window and hands them to the rewards engine.

The engine does the arithmetic; this layer owns the I/O:
- customer lookup (404 when missing)
- date-range queries, bounds computed in the configured rewards time zone
- converting ORM rows into immutable snapshots before aggregation
"""

import logging
from datetime import datetime, tzinfo
from typing import List, Optional

from sqlalchemy.orm import Session

from loyalty.config import settings
from loyalty.models.transaction import CustomerTransaction
from loyalty.services.customer_service import CustomerService
from loyalty.services.transaction_service import TransactionService
from rewards_engine.aggregator import (
    aggregate_all,
    aggregate_for_month,
    aggregate_for_recent_months,
)
from rewards_engine.models import RewardsResult, Transaction
from rewards_engine.windows import month_window, recent_window

logger = logging.getLogger(__name__)


def _snapshots(rows: List[CustomerTransaction]) -> List[Transaction]:
    return [row.to_snapshot() for row in rows]


class RewardsService:
    def __init__(
        self,
        db: Session,
        tz: Optional[tzinfo] = None,
        customer_service: Optional[CustomerService] = None,
        transaction_service: Optional[TransactionService] = None,
    ) -> None:
        self.db = db
        self.tz = tz or settings.REWARDS_TIMEZONE
        self.customer_service = customer_service or CustomerService(db)
        self.transaction_service = transaction_service or TransactionService(db, self.customer_service)

    def calculate_total_rewards(self, customer_id: str) -> RewardsResult:
        logger.debug("Calculating total rewards for customer: %s", customer_id)

        customer = self.customer_service.get_customer(customer_id)
        rows = self.transaction_service.find_by_customer(customer_id)

        if not rows:
            logger.info("No transactions found for customer: %s", customer_id)

        result = aggregate_all(customer_id, customer.full_name, _snapshots(rows), self.tz)
        logger.info(
            "Customer %s has %s total points across %s months",
            customer_id,
            result.total_points,
            len(result.monthly_points),
        )
        return result

    def calculate_monthly_rewards(self, customer_id: str, year_month: str) -> RewardsResult:
        """
        Rewards for a single YYYY-MM month.

        Raises:
            InvalidArgumentError: if year_month is not a valid YYYY-MM
            ServiceError: 404 if the customer does not exist
        """
        logger.debug("Calculating rewards for customer: %s for month: %s", customer_id, year_month)

        start, end = month_window(year_month, self.tz)
        customer = self.customer_service.get_customer(customer_id)
        rows = self.transaction_service.find_in_range(customer_id, start, end)

        result = aggregate_for_month(customer_id, customer.full_name, _snapshots(rows), year_month)
        logger.info("Customer %s earned %s points in %s", customer_id, result.total_points, year_month)
        return result

    def calculate_rewards_for_last_months(
        self,
        customer_id: str,
        months: int,
        now: Optional[datetime] = None,
    ) -> RewardsResult:
        """
        Rewards from the first day of the month `months` months ago until now.

        Raises:
            InvalidArgumentError: if months is outside [1, 36]
            ServiceError: 404 if the customer does not exist
        """
        logger.debug("Calculating rewards for customer: %s for last %s months", customer_id, months)

        start, end = recent_window(months, self.tz, now)
        customer = self.customer_service.get_customer(customer_id)
        rows = self.transaction_service.find_in_range(customer_id, start, end)

        if not rows:
            logger.info("No transactions found for customer %s in last %s months", customer_id, months)

        result = aggregate_for_recent_months(
            customer_id, customer.full_name, _snapshots(rows), months, self.tz
        )
        logger.info("Customer %s earned %s points in last %s months", customer_id, result.total_points, months)
        return result
