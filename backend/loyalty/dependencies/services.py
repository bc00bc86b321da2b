from fastapi import Depends
from sqlalchemy.orm import Session

from loyalty.dependencies.db import get_db
from loyalty.services.customer_service import CustomerService
from loyalty.services.rewards_service import RewardsService
from loyalty.services.transaction_service import TransactionService


def get_customer_service(db: Session = Depends(get_db)) -> CustomerService:
    return CustomerService(db)


def get_transaction_service(db: Session = Depends(get_db)) -> TransactionService:
    return TransactionService(db)


def get_rewards_service(db: Session = Depends(get_db)) -> RewardsService:
    # Time zone comes from settings
    return RewardsService(db)
