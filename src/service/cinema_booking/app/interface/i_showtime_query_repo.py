from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional

from src.service.cinema_booking.domain.entity.showtime_entity import Showtime


class IShowtimeQueryRepo(ABC):
    """Read-only access to the showtime catalog"""

    @abstractmethod
    async def get_by_id(self, *, showtime_id: int) -> Optional[Showtime]:
        """Showtime with its screen attached when the screen is known"""
        pass

    @abstractmethod
    async def list_by_movie(self, *, movie_id: int) -> List[Showtime]:
        pass

    @abstractmethod
    async def list_by_movie_and_date(self, *, movie_id: int, show_date: date) -> List[Showtime]:
        pass
