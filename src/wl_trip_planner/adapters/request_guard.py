"""Guard for outgoing trip requests.

Allows at most one request in flight per API and keeps a minimum delay
between consecutive requests to be nice to the routing API.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import ClassVar

logger = logging.getLogger(__name__)


class RequestGuard:
    """Serializes requests to one API.

    A second submission while a request is outstanding waits for the first one
    to finish instead of running concurrently.
    """

    # Class-level registry of guards by API name
    _instances: ClassVar[dict[str, RequestGuard]] = {}
    _registry_lock: ClassVar[asyncio.Lock | None] = None

    def __init__(self, api_name: str, min_delay_seconds: float = 0.0) -> None:
        """Initialize the guard.

        Args:
            api_name: Name of the API (for logging).
            min_delay_seconds: Minimum delay between the end of one request and
                the start of the next, in seconds.
        """
        self.api_name = api_name
        self.min_delay_seconds = min_delay_seconds
        self._last_release_time: float | None = None
        self._lock = asyncio.Lock()

    @classmethod
    async def get_instance(cls, api_name: str, min_delay_seconds: float = 0.0) -> RequestGuard:
        """Get or create the guard shared by all clients of an API.

        Args:
            api_name: Name of the API.
            min_delay_seconds: Minimum delay between requests in seconds.

        Returns:
            Shared RequestGuard instance for the API.
        """
        # Lazy init the registry lock
        if cls._registry_lock is None:
            cls._registry_lock = asyncio.Lock()

        async with cls._registry_lock:
            if api_name not in cls._instances:
                cls._instances[api_name] = cls(api_name, min_delay_seconds)
                logger.info(
                    f"Created request guard for {api_name} with {min_delay_seconds}s minimum delay"
                )
            return cls._instances[api_name]

    @property
    def in_flight(self) -> bool:
        """True while a request holds the guard."""
        return self._lock.locked()

    async def acquire(self) -> None:
        """Wait until no other request is in flight and the minimum delay has passed."""
        if self._lock.locked():
            logger.debug(f"{self.api_name}: request already in flight, waiting")
        await self._lock.acquire()

        if self._last_release_time is None:
            return
        wait_time = self.min_delay_seconds - (time.monotonic() - self._last_release_time)
        if wait_time > 0:
            logger.debug(f"{self.api_name}: waiting {wait_time:.2f}s before next request")
            try:
                await asyncio.sleep(wait_time)
            except asyncio.CancelledError:
                self._lock.release()
                raise

    def release(self) -> None:
        """Mark the current request as finished."""
        self._last_release_time = time.monotonic()
        self._lock.release()

    async def __aenter__(self) -> RequestGuard:
        """Context manager entry - wait for the guard."""
        await self.acquire()
        return self

    async def __aexit__(
        self, _exc_type: type | None, _exc_val: Exception | None, _exc_tb: object
    ) -> None:
        """Context manager exit - release the guard."""
        self.release()
