import logging
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Optional

from sqlalchemy.orm import Session

from loyalty.db.db import utc_now_naive
from loyalty.models.customer import Customer
from loyalty.models.transaction import CustomerTransaction

logger = logging.getLogger(__name__)

SAMPLE_CUSTOMERS = [
    ("CUST001", "John", "Doe", "john.doe@example.com"),
    ("CUST002", "Jane", "Smith", "jane.smith@example.com"),
    ("CUST003", "Bob", "Johnson", "bob.johnson@example.com"),
]

# (transaction_id, customer_id, amount, days ago, description)
SAMPLE_TRANSACTIONS = [
    ("TXN001", "CUST001", "120.00", 5, "Electronics Store"),    # 90 points
    ("TXN002", "CUST001", "75.00", 15, "Grocery Store"),        # 25 points
    ("TXN003", "CUST001", "200.00", 35, "Department Store"),    # 250 points
    ("TXN004", "CUST001", "45.00", 40, "Gas Station"),          # 0 points
    ("TXN005", "CUST001", "51.00", 65, "Restaurant"),           # 1 point
    ("TXN006", "CUST002", "90.00", 10, "Online Shopping"),      # 40 points
    ("TXN007", "CUST002", "150.00", 25, "Home Improvement"),    # 150 points
    ("TXN008", "CUST002", "50.00", 60, "Bookstore"),            # 0 points
    ("TXN009", "CUST003", "300.00", 5, "Furniture Store"),      # 450 points
    ("TXN010", "CUST003", "25.00", 30, "Coffee Shop"),          # 0 points
    ("TXN011", "CUST003", "100.00", 45, "Clothing Store"),      # 50 points
]


def seed_sample_data(db: Session, now: Optional[datetime] = None) -> bool:
    """
    Load the demo customers and transactions into an empty database.

    Returns:
        True if data was inserted, False if customers already existed
    """
    existing = db.query(Customer).count()
    if existing > 0:
        logger.info("Database already initialized with %s customers", existing)
        return False

    logger.info("Initializing database with sample data...")
    now = now or utc_now_naive()

    for customer_id, first_name, last_name, email in SAMPLE_CUSTOMERS:
        db.add(Customer(customer_id=customer_id, first_name=first_name, last_name=last_name, email=email))

    for transaction_id, customer_id, amount, days_ago, description in SAMPLE_TRANSACTIONS:
        db.add(
            CustomerTransaction(
                transaction_id=transaction_id,
                customer_id=customer_id,
                amount=Decimal(amount),
                transaction_date=now - timedelta(days=days_ago),
                description=description,
            )
        )

    db.commit()
    logger.info("Created %s customers and %s transactions", len(SAMPLE_CUSTOMERS), len(SAMPLE_TRANSACTIONS))

    for customer_id, first_name, last_name, _ in SAMPLE_CUSTOMERS:
        rows = (
            db.query(CustomerTransaction)
            .filter(CustomerTransaction.customer_id == customer_id)
            .order_by(CustomerTransaction.transaction_date.desc())
            .all()
        )
        logger.info(
            "Customer: %s %s (%s) - %s transactions, %s total points",
            first_name,
            last_name,
            customer_id,
            len(rows),
            sum(row.points_earned for row in rows),
        )
    return True
