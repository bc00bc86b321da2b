from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from pydantic.alias_generators import to_camel
from sqlalchemy import Column, DateTime, Index, Integer, Numeric, String

from loyalty.db.db import Base, utc_now_naive
from rewards_engine.models import Transaction as TransactionSnapshot
from rewards_engine.points import compute_points

DEFAULT_DESCRIPTION = "Manual transaction"


class CustomerTransaction(Base):
    __tablename__ = "transactions"
    __table_args__ = (
        Index("ix_transactions_customer_date", "customer_id", "transaction_date"),
    )
    id = Column(Integer, primary_key=True, index=True)
    transaction_id = Column(String, nullable=False, unique=True, index=True)
    # Linked to Customer.customer_id by value only
    customer_id = Column(String, nullable=False, index=True)
    amount = Column(Numeric(12, 2), nullable=True)
    transaction_date = Column(DateTime, default=utc_now_naive, nullable=False)
    description = Column(String, nullable=False, default=DEFAULT_DESCRIPTION)
    points_earned = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, default=utc_now_naive, nullable=False)

    def __init__(self, **kwargs):
        # Points are derived from the amount exactly once, here.
        # Rows loaded from the database skip __init__ and keep their stored value.
        kwargs.pop("points_earned", None)
        super().__init__(**kwargs)
        self.points_earned = compute_points(self.amount)

    def to_snapshot(self) -> TransactionSnapshot:
        return TransactionSnapshot.from_stored(
            transaction_id=self.transaction_id,
            customer_id=self.customer_id,
            amount=self.amount,
            transaction_date=self.transaction_date,
            description=self.description,
            points_earned=self.points_earned,
        )


# Pydantic models for Transaction
class TransactionCreate(BaseModel):
    """Transaction creation request"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
    customer_id: str
    amount: Decimal = Field(max_digits=12, decimal_places=2)
    description: str | None = None
    transaction_date: datetime | None = None  # defaults to now if omitted

    @field_validator("customer_id")
    @classmethod
    def customer_id_required(cls, v):
        if not v or not v.strip():
            raise ValueError("customerId is required")
        return v.strip()

    @field_validator("amount")
    @classmethod
    def amount_positive(cls, v):
        if v <= 0:
            raise ValueError("Amount must be greater than zero")
        return v


class TransactionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)
    transaction_id: str
    customer_id: str
    amount: Decimal | None
    transaction_date: datetime
    description: str
    points_earned: int
    created_at: datetime

    @field_serializer("amount")
    def amount_as_number(self, v: Decimal | None):
        return float(v) if v is not None else None


class TransactionPage(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
    transactions: list[TransactionResponse]
    page: int
    size: int
    total: int
