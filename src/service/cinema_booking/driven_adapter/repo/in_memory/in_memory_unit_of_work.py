from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.logging.loguru_io import Logger
from src.service.cinema_booking.driven_adapter.repo.in_memory.in_memory_booking_command_repo import (
    InMemoryBookingCommandRepo,
)
from src.service.cinema_booking.driven_adapter.repo.in_memory.in_memory_booking_query_repo import (
    InMemoryBookingQueryRepo,
)
from src.service.cinema_booking.driven_adapter.repo.in_memory.in_memory_showtime_query_repo import (
    InMemoryShowtimeQueryRepo,
)
from src.service.cinema_booking.driven_adapter.repo.in_memory.in_memory_store import (
    InMemoryStore,
    StagedChanges,
)


class InMemoryUnitOfWork(AbstractUnitOfWork):
    """
    In-memory implementation of Unit of Work

    Writes are staged and applied to the store in a single synchronous step on
    commit; the showtime lock is an in-process keyed lock.
    """

    def __init__(self, *, store: InMemoryStore) -> None:
        self.store = store
        self.staged = StagedChanges()

    async def __aenter__(self) -> 'InMemoryUnitOfWork':
        self.staged = StagedChanges()
        self.booking_command_repo = InMemoryBookingCommandRepo(
            store=self.store, staged=self.staged
        )
        self.booking_query_repo = InMemoryBookingQueryRepo(store=self.store)
        self.showtime_query_repo = InMemoryShowtimeQueryRepo(store=self.store)
        await super().__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await super().__aexit__(*args)

    async def _commit(self) -> None:
        self.store.apply(self.staged)
        self.staged.clear()

    async def rollback(self) -> None:
        if self.staged:
            Logger.base.info('↩️ [UOW] Discarding staged in-memory changes')
        self.staged.clear()

    @asynccontextmanager
    async def lock_showtime(self, *, showtime_id: int) -> AsyncIterator[None]:
        async with self.store.showtime_locks.hold(showtime_id):
            yield
