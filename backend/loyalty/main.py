import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from loyalty.config import settings
from loyalty.db.db import Base, SessionLocal, engine
from loyalty.dependencies.security import rate_limiter
from loyalty.routes import customers_router, rewards_router, transactions_router
from loyalty.services.errors import error_payload
from loyalty.services.sample_data import seed_sample_data

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL, logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan event handler - runs on startup and shutdown"""
    # Startup
    Base.metadata.create_all(bind=engine)
    if settings.SEED_SAMPLE_DATA:
        with SessionLocal() as db:
            seed_sample_data(db)
    yield
    # Shutdown


app = FastAPI(
    title="Loyalty Rewards API",
    version="0.1.0",
    description="Customers, transactions and rewards points calculation",
    docs_url="/api/docs",
    openapi_url="/api/openapi.json",
    lifespan=lifespan,
    dependencies=[Depends(rate_limiter)],
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_credentials="*" not in settings.CORS_ALLOW_ORIGINS,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request, exc: RequestValidationError):  # type: ignore[override]
    """Report request validation failures as HTTP 400 with the standard error envelope."""
    return JSONResponse(
        status_code=400,
        content=error_payload(
            "VALIDATION_ERROR",
            "Invalid request payload.",
            {"errors": jsonable_errors(exc)},
        ),
    )


@app.exception_handler(Exception)
async def general_exception_handler(request, exc: Exception):  # type: ignore[override]
    """Log anything unhandled and return a generic 500."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content=error_payload("INTERNAL_ERROR", "Internal server error.", {}),
    )


def jsonable_errors(exc: RequestValidationError) -> list:
    # ctx may carry the raw exception object, which is not JSON serializable
    return jsonable_encoder([
        {key: value for key, value in error.items() if key != "ctx"}
        for error in exc.errors()
    ])


@app.get("/health", tags=["health"])
def health() -> dict:
    return {"status": "ok"}


# Register routers
app.include_router(customers_router)
app.include_router(rewards_router)
app.include_router(transactions_router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8080)
