from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.platform.database.orm_db_setting import Base


if TYPE_CHECKING:
    from src.service.cinema_booking.driven_adapter.model.screen_model import ScreenModel


class ShowtimeModel(Base):
    __tablename__ = 'showtime'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    movie_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    screen_id: Mapped[int] = mapped_column(Integer, ForeignKey('screen.id'), nullable=False)
    start_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    end_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    price: Mapped[int] = mapped_column(Integer, nullable=False)

    screen: Mapped['ScreenModel'] = relationship('ScreenModel', lazy='selectin', viewonly=True)
