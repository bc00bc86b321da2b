import logging
import secrets
import threading
import time
from typing import Callable, Dict, Optional

from fastapi import HTTPException, Request, status

from loyalty.config import settings
from loyalty.services.errors import error_payload

logger = logging.getLogger(__name__)


def require_api_key(request: Request) -> str:
    header_name = settings.API_KEY_HEADER
    api_key = (request.headers.get(header_name) or "").strip()
    if not api_key or not secrets.compare_digest(api_key, settings.API_KEY):
        logger.warning("Invalid or missing API key for path: %s", request.url.path)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=error_payload(
                "UNAUTHORIZED",
                "Invalid or missing API key.",
                {"required_header": header_name},
            ),
        )
    return api_key


class RateLimiter:
    """
    Fixed-window request counter per client.

    Clients are identified by their API key header, or by address when the
    header is absent. All counters reset together when the clock crosses
    into a new window, so no background reset task is needed.
    """

    def __init__(
        self,
        max_requests: int,
        window_seconds: float = 60.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        self._counts: Dict[str, int] = {}
        self._window: Optional[int] = None
        self._lock = threading.Lock()

    def hit(self, client_id: str) -> bool:
        """Record one request; False once the client is over the limit for this window."""
        window = int(self._clock() // self.window_seconds)
        with self._lock:
            if window != self._window:
                self._counts.clear()
                self._window = window
            count = self._counts.get(client_id, 0) + 1
            self._counts[client_id] = count
        return count <= self.max_requests

    def reset(self) -> None:
        with self._lock:
            self._counts.clear()
            self._window = None

    @staticmethod
    def client_identifier(request: Request) -> str:
        api_key = request.headers.get(settings.API_KEY_HEADER)
        if api_key:
            return api_key
        return request.client.host if request.client else "unknown"

    def __call__(self, request: Request) -> None:
        client_id = self.client_identifier(request)
        if not self.hit(client_id):
            logger.warning("Rate limit exceeded for client: %s", client_id)
            raise HTTPException(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                detail=error_payload(
                    "RATE_LIMITED",
                    f"Rate limit exceeded. Max {self.max_requests} requests per minute.",
                    {},
                ),
            )


rate_limiter = RateLimiter(settings.RATE_LIMIT_PER_MINUTE)
