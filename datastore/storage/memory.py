from __future__ import annotations
import asyncio, logging
from typing import Dict, Optional
from ..core.config import LOCK_TIMEOUT

logger = logging.getLogger(__name__)

class StoreUnavailable(RuntimeError):
    """The store lock could not be acquired; the map is not reachable."""

class InMemoryStore:
    """Single shared key/value map guarded by one lock.

    Every read and write holds ``_lock`` so a reader sees a value
    either before or after a concurrent write, never in between.
    """

    def __init__(self, lock_timeout: Optional[float] = None):
        self._data: Dict[str, str] = {}
        self._lock = asyncio.Lock()
        self._lock_timeout = LOCK_TIMEOUT if lock_timeout is None else lock_timeout

    async def _acquire(self) -> None:
        try:
            await asyncio.wait_for(self._lock.acquire(), self._lock_timeout)
        except asyncio.TimeoutError:
            logger.error("store lock not acquired within %.2fs", self._lock_timeout)
            raise StoreUnavailable(f"store lock not acquired within {self._lock_timeout}s") from None

    async def get(self, key: str) -> str:
        await self._acquire()
        try:
            if key not in self._data: raise KeyError(key)
            return self._data[key]
        finally:
            self._lock.release()

    async def set(self, key: str, value: str) -> None:
        await self._acquire()
        try:
            self._data[key] = value
        finally:
            self._lock.release()

    async def count(self) -> int:
        await self._acquire()
        try:
            return len(self._data)
        finally:
            self._lock.release()
