import logging

from fastapi import APIRouter, Depends, status

from loyalty.dependencies.security import require_api_key
from loyalty.dependencies.services import get_transaction_service
from loyalty.models.transaction import TransactionCreate, TransactionPage, TransactionResponse
from loyalty.routes.errors import internal_http_error, service_http_error
from loyalty.services.errors import ServiceError
from loyalty.services.transaction_service import TransactionService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/transactions",
    tags=["transactions"],
    dependencies=[Depends(require_api_key)],
)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=TransactionResponse)
def create_transaction(
    payload: TransactionCreate,
    service: TransactionService = Depends(get_transaction_service),
):
    """
    Create a new transaction and stamp its reward points.

    Request body:
    {
        "customerId": "CUST001",
        "amount": 120.00,
        "description": "Electronics Store",
        "transactionDate": "2024-09-05T10:00:00Z"
    }

    description defaults to "Manual transaction", transactionDate to now.
    """
    try:
        return service.create_transaction(payload)
    except ServiceError as exc:
        raise service_http_error(exc)
    except Exception:
        logger.exception("Error creating transaction for customer: %s", payload.customer_id)
        raise internal_http_error()


@router.get("/customer/{customer_id}", response_model=TransactionPage)
def get_customer_transactions(
    customer_id: str,
    page: int = 0,
    size: int = 20,
    service: TransactionService = Depends(get_transaction_service),
):
    """
    Get a customer's transactions, newest first.

    Query Parameters:
    - page: page number, 0-based (default 0)
    - size: page size, capped at 100 (default 20)
    """
    try:
        return service.list_customer_transactions(customer_id, page=page, size=size)
    except ServiceError as exc:
        raise service_http_error(exc)
