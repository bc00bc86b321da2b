from .customer_service import CustomerService
from .errors import ServiceError
from .rewards_service import RewardsService
from .sample_data import seed_sample_data
from .transaction_service import TransactionService

__all__ = [
    "CustomerService",
    "RewardsService",
    "ServiceError",
    "seed_sample_data",
    "TransactionService",
]
