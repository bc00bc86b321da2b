
from fastapi import APIRouter, Depends, status

from loyalty.dependencies.security import require_api_key
from loyalty.dependencies.services import get_customer_service
from loyalty.models.customer import CustomerCreate, CustomerResponse
from loyalty.routes.errors import service_http_error
from loyalty.services.customer_service import CustomerService
from loyalty.services.errors import ServiceError

router = APIRouter(
    prefix="/api/customers",
    tags=["customers"],
    dependencies=[Depends(require_api_key)],
)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=CustomerResponse)
def create_customer(
    payload: CustomerCreate,
    service: CustomerService = Depends(get_customer_service),
):
    """
    Create a new customer in the rewards program.

    Request body:
    {
        "customerId": "CUST004",
        "firstName": "Ada",
        "lastName": "Lovelace",
        "email": "ada@example.com"
    }

    Returns 409 if the customerId already exists.
    """
    try:
        return service.create_customer(payload)
    except ServiceError as exc:
        raise service_http_error(exc)


@router.get("/{customer_id}", response_model=CustomerResponse)
def get_customer(
    customer_id: str,
    service: CustomerService = Depends(get_customer_service),
):
    try:
        return service.get_customer(customer_id)
    except ServiceError as exc:
        raise service_http_error(exc)
