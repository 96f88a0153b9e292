"""
Unit of Work Pattern - one transaction per booking operation

Architecture:
- UoW owns the transaction lifecycle (commit/rollback)
- Repositories obtained from the UoW share its transaction
- `lock_showtime` serializes check-and-commit per showtime until the UoW ends
- Leaving the `async with` block without `commit()` rolls everything back
"""

from __future__ import annotations

import abc
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import StorageFailureError
from src.platform.logging.loguru_io import Logger


if TYPE_CHECKING:
    from src.service.cinema_booking.app.interface.i_booking_command_repo import (
        IBookingCommandRepo,
    )
    from src.service.cinema_booking.app.interface.i_booking_query_repo import IBookingQueryRepo
    from src.service.cinema_booking.app.interface.i_showtime_query_repo import (
        IShowtimeQueryRepo,
    )


class AbstractUnitOfWork(abc.ABC):
    """
    Abstract Unit of Work for the booking engine

    Usage:
        async with uow:
            async with uow.lock_showtime(showtime_id=showtime_id):
                taken = await uow.booking_query_repo.get_taken_seats(showtime_id=showtime_id)
                booking = await uow.booking_command_repo.create(booking=...)
                await uow.commit()
    """

    booking_command_repo: IBookingCommandRepo
    booking_query_repo: IBookingQueryRepo
    showtime_query_repo: IShowtimeQueryRepo

    async def __aenter__(self) -> AbstractUnitOfWork:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.rollback()

    async def commit(self) -> None:
        await self._commit()

    @abc.abstractmethod
    async def _commit(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    async def rollback(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    def lock_showtime(self, *, showtime_id: int) -> AsyncIterator[None]:
        """Async context manager holding the per-showtime critical section"""
        raise NotImplementedError


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """
    SQLAlchemy implementation of Unit of Work

    The showtime lock is a transaction-scoped PostgreSQL advisory lock, so it
    is released by the database on commit or rollback, across all workers.
    """

    def __init__(self, session_factory: Callable[[], AsyncSession]):
        self.session_factory = session_factory
        self.session: AsyncSession | None = None

    async def __aenter__(self) -> SqlAlchemyUnitOfWork:
        from src.service.cinema_booking.driven_adapter.repo.booking_command_repo_impl import (
            BookingCommandRepoImpl,
        )
        from src.service.cinema_booking.driven_adapter.repo.booking_query_repo_impl import (
            BookingQueryRepoImpl,
        )
        from src.service.cinema_booking.driven_adapter.repo.showtime_query_repo_impl import (
            ShowtimeQueryRepoImpl,
        )

        self.session = self.session_factory()

        # Repositories share the UoW session
        self.booking_command_repo = BookingCommandRepoImpl(session=self.session)
        self.booking_query_repo = BookingQueryRepoImpl(session=self.session)
        self.showtime_query_repo = ShowtimeQueryRepoImpl(session=self.session)

        await super().__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        try:
            await super().__aexit__(*args)
        finally:
            if self.session is not None:
                await self.session.close()
                self.session = None

    async def _commit(self) -> None:
        assert self.session is not None, 'Unit of work used outside `async with`'
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            Logger.base.error(f'❌ [UOW] Commit failed: {e}')
            raise StorageFailureError() from e

    async def rollback(self) -> None:
        if self.session is not None:
            await self.session.rollback()

    @asynccontextmanager
    async def lock_showtime(self, *, showtime_id: int) -> AsyncIterator[None]:
        assert self.session is not None, 'Unit of work used outside `async with`'
        try:
            await self.session.execute(
                text('SELECT pg_advisory_xact_lock(:showtime_id)'),
                {'showtime_id': showtime_id},
            )
        except SQLAlchemyError as e:
            raise StorageFailureError() from e
        Logger.base.debug(f'🔒 [UOW] Advisory lock held for showtime {showtime_id}')
        # released by PostgreSQL when the transaction ends
        yield
