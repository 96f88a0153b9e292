from datetime import date, timezone
from typing import List, Optional

import attrs

from src.platform.logging.loguru_io import Logger
from src.service.cinema_booking.app.interface.i_showtime_query_repo import IShowtimeQueryRepo
from src.service.cinema_booking.domain.entity.showtime_entity import Showtime
from src.service.cinema_booking.driven_adapter.repo.in_memory.in_memory_store import (
    InMemoryStore,
)


class InMemoryShowtimeQueryRepo(IShowtimeQueryRepo):
    def __init__(self, *, store: InMemoryStore) -> None:
        self.store = store

    def _with_screen(self, showtime: Showtime) -> Showtime:
        return attrs.evolve(showtime, screen=self.store.screens.get(showtime.screen_id))

    @Logger.io
    async def get_by_id(self, *, showtime_id: int) -> Optional[Showtime]:
        showtime = self.store.showtimes.get(showtime_id)
        return self._with_screen(showtime) if showtime else None

    @Logger.io
    async def list_by_movie(self, *, movie_id: int) -> List[Showtime]:
        showtimes = [s for s in self.store.showtimes.values() if s.movie_id == movie_id]
        showtimes.sort(key=lambda showtime: showtime.start_time)
        return [self._with_screen(showtime) for showtime in showtimes]

    @Logger.io
    async def list_by_movie_and_date(self, *, movie_id: int, show_date: date) -> List[Showtime]:
        showtimes = await self.list_by_movie(movie_id=movie_id)
        # UTC calendar day
        return [
            showtime
            for showtime in showtimes
            if showtime.start_time.astimezone(timezone.utc).date() == show_date
        ]
