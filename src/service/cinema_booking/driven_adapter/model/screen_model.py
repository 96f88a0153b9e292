from sqlalchemy import Integer, String
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base


class ScreenModel(Base):
    __tablename__ = 'screen'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    cinema_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    total_seats: Mapped[int] = mapped_column(Integer, nullable=False)
    # {"rows": 10, "seats_per_row": 12, "row_labels": ["A", ..., "J"]}
    seat_layout: Mapped[dict] = mapped_column(JSONB, nullable=False)
