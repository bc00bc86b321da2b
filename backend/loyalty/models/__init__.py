from .customer import Customer, CustomerCreate, CustomerResponse
from .rewards import RewardsResponse
from .transaction import CustomerTransaction, TransactionCreate, TransactionPage, TransactionResponse

__all__ = [
    "Customer",
    "CustomerCreate",
    "CustomerResponse",
    "CustomerTransaction",
    "RewardsResponse",
    "TransactionCreate",
    "TransactionPage",
    "TransactionResponse",
]
