from sqlalchemy import ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base


class BookingSeatModel(Base):
    __tablename__ = 'booking_seat'
    __table_args__ = (
        UniqueConstraint('booking_id', 'seat_number', name='uq_booking_seat_booking_seat_number'),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    booking_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('booking.id', ondelete='CASCADE'), nullable=False, index=True
    )
    seat_number: Mapped[str] = mapped_column(String(5), nullable=False)  # e.g. 'J12'
    ticket_type: Mapped[str] = mapped_column(String(50), nullable=False)
    price: Mapped[int] = mapped_column(Integer, nullable=False)
