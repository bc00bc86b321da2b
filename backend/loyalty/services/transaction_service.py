import logging
import uuid
from datetime import UTC, datetime
from typing import List

from sqlalchemy.orm import Session

from loyalty.db.db import utc_now_naive
from loyalty.models.transaction import (
    DEFAULT_DESCRIPTION,
    CustomerTransaction,
    TransactionCreate,
    TransactionPage,
    TransactionResponse,
)
from loyalty.services.customer_service import CustomerService
from loyalty.services.errors import ServiceError, customer_not_found

logger = logging.getLogger(__name__)

MAX_PAGE_SIZE = 100


def to_storage_time(value: datetime) -> datetime:
    """Stored timestamps are naive UTC; aware values are converted, naive ones kept."""
    if value.tzinfo is None:
        return value
    return value.astimezone(UTC).replace(tzinfo=None)


def new_transaction_id() -> str:
    return "TXN" + uuid.uuid4().hex[:8].upper()


class TransactionService:
    def __init__(self, db: Session, customer_service: CustomerService | None = None) -> None:
        self.db = db
        self.customer_service = customer_service or CustomerService(db)

    def create_transaction(self, payload: TransactionCreate) -> CustomerTransaction:
        logger.info(
            "Creating transaction for customer: %s amount: $%s",
            payload.customer_id,
            payload.amount,
        )

        if not self.customer_service.exists(payload.customer_id):
            logger.error("Customer not found: %s", payload.customer_id)
            raise customer_not_found(payload.customer_id)

        transaction_date = (
            to_storage_time(payload.transaction_date)
            if payload.transaction_date
            else utc_now_naive()
        )
        description = (payload.description or "").strip() or DEFAULT_DESCRIPTION

        record = CustomerTransaction(
            transaction_id=new_transaction_id(),
            customer_id=payload.customer_id,
            amount=payload.amount,
            transaction_date=transaction_date,
            description=description,
        )

        self.db.add(record)
        self.db.commit()
        self.db.refresh(record)
        logger.info(
            "Transaction created: %s with %s points",
            record.transaction_id,
            record.points_earned,
        )
        return record

    def find_by_customer(self, customer_id: str) -> List[CustomerTransaction]:
        """All transactions for a customer, newest first."""
        return (
            self.db.query(CustomerTransaction)
            .filter(CustomerTransaction.customer_id == customer_id)
            .order_by(CustomerTransaction.transaction_date.desc())
            .all()
        )

    def find_in_range(self, customer_id: str, start: datetime, end: datetime) -> List[CustomerTransaction]:
        """Transactions with start <= transaction_date < end, newest first."""
        return (
            self.db.query(CustomerTransaction)
            .filter(
                CustomerTransaction.customer_id == customer_id,
                CustomerTransaction.transaction_date >= to_storage_time(start),
                CustomerTransaction.transaction_date < to_storage_time(end),
            )
            .order_by(CustomerTransaction.transaction_date.desc())
            .all()
        )

    def count_by_customer(self, customer_id: str) -> int:
        return (
            self.db.query(CustomerTransaction)
            .filter(CustomerTransaction.customer_id == customer_id)
            .count()
        )

    def list_customer_transactions(self, customer_id: str, page: int = 0, size: int = 20) -> TransactionPage:
        logger.info("Fetching transactions for customer: %s (page: %s, size: %s)", customer_id, page, size)

        if page < 0 or size < 1:
            raise ServiceError(
                400,
                "VALIDATION_ERROR",
                "page must be >= 0 and size must be >= 1.",
                {"page": page, "size": size},
            )
        if not self.customer_service.exists(customer_id):
            raise customer_not_found(customer_id)

        # Limit page size to prevent excessive data retrieval
        limited_size = min(size, MAX_PAGE_SIZE)
        rows = (
            self.db.query(CustomerTransaction)
            .filter(CustomerTransaction.customer_id == customer_id)
            .order_by(CustomerTransaction.transaction_date.desc(), CustomerTransaction.id.desc())
            .offset(page * limited_size)
            .limit(limited_size)
            .all()
        )
        total = self.count_by_customer(customer_id)
        logger.info("Found %s transactions for customer %s", total, customer_id)

        return TransactionPage(
            transactions=[TransactionResponse.model_validate(row) for row in rows],
            page=page,
            size=limited_size,
            total=total,
        )
