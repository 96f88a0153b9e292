from datetime import date, datetime, time, timedelta, timezone
from typing import List, Optional

from sqlalchemy import select

from src.platform.logging.loguru_io import Logger
from src.service.cinema_booking.app.interface.i_showtime_query_repo import IShowtimeQueryRepo
from src.service.cinema_booking.domain.entity.showtime_entity import Showtime
from src.service.cinema_booking.driven_adapter.model import ShowtimeModel
from src.service.cinema_booking.driven_adapter.repo.sqlalchemy_repo_base import (
    SqlAlchemyRepoBase,
    showtime_to_entity,
)


class ShowtimeQueryRepoImpl(SqlAlchemyRepoBase, IShowtimeQueryRepo):
    @Logger.io
    async def get_by_id(self, *, showtime_id: int) -> Optional[Showtime]:
        async with self._get_session() as session:
            result = await session.execute(
                select(ShowtimeModel).where(ShowtimeModel.id == showtime_id)
            )
            db_showtime = result.scalar_one_or_none()
            return showtime_to_entity(db_showtime) if db_showtime else None

    @Logger.io
    async def list_by_movie(self, *, movie_id: int) -> List[Showtime]:
        async with self._get_session() as session:
            result = await session.execute(
                select(ShowtimeModel)
                .where(ShowtimeModel.movie_id == movie_id)
                .order_by(ShowtimeModel.start_time)
            )
            return [showtime_to_entity(db_showtime) for db_showtime in result.scalars().all()]

    @Logger.io
    async def list_by_movie_and_date(self, *, movie_id: int, show_date: date) -> List[Showtime]:
        # UTC calendar day
        day_start = datetime.combine(show_date, time.min, tzinfo=timezone.utc)
        day_end = day_start + timedelta(days=1)

        async with self._get_session() as session:
            result = await session.execute(
                select(ShowtimeModel)
                .where(
                    ShowtimeModel.movie_id == movie_id,
                    ShowtimeModel.start_time >= day_start,
                    ShowtimeModel.start_time < day_end,
                )
                .order_by(ShowtimeModel.start_time)
            )
            return [showtime_to_entity(db_showtime) for db_showtime in result.scalars().all()]
