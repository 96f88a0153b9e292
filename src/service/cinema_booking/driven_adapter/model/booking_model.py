from datetime import datetime
from typing import TYPE_CHECKING, List

from sqlalchemy import DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from src.platform.database.orm_db_setting import Base


if TYPE_CHECKING:
    from src.service.cinema_booking.driven_adapter.model.booking_seat_model import (
        BookingSeatModel,
    )


class BookingModel(Base):
    __tablename__ = 'booking'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    showtime_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('showtime.id'), nullable=False, index=True
    )
    total_amount: Mapped[int] = mapped_column(Integer, nullable=False)
    booking_reference: Mapped[str] = mapped_column(String(32), nullable=False, unique=True)
    status: Mapped[str] = mapped_column(String(20), default='confirmed', nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    seats: Mapped[List['BookingSeatModel']] = relationship(
        'BookingSeatModel',
        lazy='selectin',
        order_by='BookingSeatModel.id',
        viewonly=True,
    )
