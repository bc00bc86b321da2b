import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from loyalty.models.customer import Customer, CustomerCreate
from loyalty.services.errors import ServiceError, customer_not_found

logger = logging.getLogger(__name__)


class CustomerService:
    def __init__(self, db: Session) -> None:
        self.db = db

    def find_by_customer_id(self, customer_id: str) -> Customer | None:
        return self.db.query(Customer).filter(Customer.customer_id == customer_id).first()

    def exists(self, customer_id: str) -> bool:
        return self.find_by_customer_id(customer_id) is not None

    def get_customer(self, customer_id: str) -> Customer:
        """Return the customer or raise a 404 ServiceError."""
        customer = self.find_by_customer_id(customer_id)
        if not customer:
            raise customer_not_found(customer_id)
        return customer

    def create_customer(self, payload: CustomerCreate) -> Customer:
        logger.info("Creating customer: %s", payload.customer_id)

        if self.exists(payload.customer_id):
            raise ServiceError(
                409,
                "CONFLICT",
                "Customer with that ID already exists",
                {"customer_id": payload.customer_id},
            )

        customer = Customer(
            customer_id=payload.customer_id,
            first_name=payload.first_name,
            last_name=payload.last_name,
            email=payload.email,
        )
        try:
            self.db.add(customer)
            self.db.commit()
        except IntegrityError:
            # lost a race with a concurrent insert of the same customer_id
            self.db.rollback()
            raise ServiceError(
                409,
                "CONFLICT",
                "Customer with that ID already exists",
                {"customer_id": payload.customer_id},
            )

        self.db.refresh(customer)
        logger.info("Customer created: %s", customer.customer_id)
        return customer
