"""
In-process keyed lock

Serializes critical sections per key (e.g. one showtime) while letting
different keys proceed in parallel. Lock objects are created on first use and
dropped once nobody holds or waits for them.
"""

from collections.abc import AsyncIterator, Hashable
from contextlib import asynccontextmanager

import anyio

from src.platform.logging.loguru_io import Logger


class KeyedLock:
    def __init__(self, *, name: str = 'keyed') -> None:
        self.name = name
        self._locks: dict[Hashable, anyio.Lock] = {}
        self._holders: dict[Hashable, int] = {}

    @asynccontextmanager
    async def hold(self, key: Hashable) -> AsyncIterator[None]:
        lock = self._locks.get(key)
        if lock is None:
            lock = self._locks[key] = anyio.Lock()
        self._holders[key] = self._holders.get(key, 0) + 1

        try:
            async with lock:
                Logger.base.debug(f'🔒 [LOCK] {self.name}:{key} acquired')
                yield
        finally:
            self._holders[key] -= 1
            if not self._holders[key]:
                del self._holders[key]
                del self._locks[key]
            Logger.base.debug(f'🔓 [LOCK] {self.name}:{key} released')

    def is_locked(self, key: Hashable) -> bool:
        lock = self._locks.get(key)
        return bool(lock and lock.locked())

    def __len__(self) -> int:
        return len(self._locks)
