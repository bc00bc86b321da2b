import logging
import re

from fastapi import APIRouter, Depends

from loyalty.dependencies.security import require_api_key
from loyalty.dependencies.services import get_rewards_service
from loyalty.models.rewards import RewardsResponse
from loyalty.routes.errors import internal_http_error, service_http_error, validation_http_error
from loyalty.services.errors import ServiceError
from loyalty.services.rewards_service import RewardsService
from rewards_engine.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

MONTH_PATH_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}")

router = APIRouter(
    prefix="/api/customers",
    tags=["rewards"],
    dependencies=[Depends(require_api_key)],
)


@router.get("/{customer_id}/rewards", response_model=RewardsResponse)
def get_total_rewards(
    customer_id: str,
    service: RewardsService = Depends(get_rewards_service),
):
    """All-time rewards points for a customer, broken down by month."""
    logger.info("Request received: GET /api/customers/%s/rewards", customer_id)
    try:
        return service.calculate_total_rewards(customer_id)
    except ServiceError as exc:
        logger.error("Customer not found: %s", customer_id)
        raise service_http_error(exc)
    except Exception:
        logger.exception("Error calculating rewards for customer: %s", customer_id)
        raise internal_http_error()


# Must stay above /{month} so "recent" is not read as a month
@router.get("/{customer_id}/rewards/recent", response_model=RewardsResponse)
def get_recent_rewards(
    customer_id: str,
    months: int = 3,
    service: RewardsService = Depends(get_rewards_service),
):
    """
    Rewards points for the last N months.

    Query Parameters:
    - months: number of months to look back, 1-36 (default 3)
    """
    logger.info("Request received: GET /api/customers/%s/rewards/recent?months=%s", customer_id, months)
    try:
        return service.calculate_rewards_for_last_months(customer_id, months)
    except InvalidArgumentError as exc:
        logger.error("Invalid months parameter: %s", months)
        raise validation_http_error(str(exc), {"months": months})
    except ServiceError as exc:
        logger.error("Customer not found: %s", customer_id)
        raise service_http_error(exc)
    except Exception:
        logger.exception("Error calculating recent rewards for customer: %s", customer_id)
        raise internal_http_error()


@router.get("/{customer_id}/rewards/{month}", response_model=RewardsResponse)
def get_monthly_rewards(
    customer_id: str,
    month: str,
    service: RewardsService = Depends(get_rewards_service),
):
    """
    Rewards points for a single month.

    Path Parameters:
    - month: month in YYYY-MM format, e.g. 2024-09
    """
    logger.info("Request received: GET /api/customers/%s/rewards/%s", customer_id, month)

    if not MONTH_PATH_PATTERN.fullmatch(month):
        logger.error("Invalid month format: %s", month)
        raise validation_http_error("Invalid month format. Use YYYY-MM.", {"month": month})

    try:
        return service.calculate_monthly_rewards(customer_id, month)
    except InvalidArgumentError as exc:
        logger.error("Invalid request: %s", exc)
        raise validation_http_error(str(exc), {"month": month})
    except ServiceError as exc:
        logger.error("Customer not found: %s", customer_id)
        raise service_http_error(exc)
    except Exception:
        logger.exception("Error calculating monthly rewards for customer: %s", customer_id)
        raise internal_http_error()
