from fastapi import HTTPException, status

from loyalty.services.errors import ServiceError, error_payload


def service_http_error(exc: ServiceError) -> HTTPException:
    return HTTPException(status_code=exc.status_code, detail=exc.to_payload())


def validation_http_error(message: str, details: dict | None = None) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=error_payload("VALIDATION_ERROR", message, details),
    )


def internal_http_error() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=error_payload("INTERNAL_ERROR", "Internal server error.", {}),
    )
