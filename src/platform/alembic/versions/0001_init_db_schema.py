"""init_db_schema

Revision ID: 0001
Revises:
Create Date: 2025-12-06

Schema:
- screen: Screens with their fixed seat layout
- showtime: Scheduled screenings with per-seat price
- booking: Bookings with unique human-readable reference
- booking_seat: One row per booked seat

Note: seat_layout uses compact format:
  {"rows": 10, "seats_per_row": 12, "row_labels": ["A", "B", ...]}
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import JSONB


# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create all tables with final schema."""

    op.create_table(
        'screen',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('cinema_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('total_seats', sa.Integer(), nullable=False),
        sa.Column('seat_layout', JSONB(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_screen_cinema_id'), 'screen', ['cinema_id'], unique=False)

    op.create_table(
        'showtime',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('movie_id', sa.Integer(), nullable=False),
        sa.Column('screen_id', sa.Integer(), nullable=False),
        sa.Column('start_time', sa.DateTime(timezone=True), nullable=False),
        sa.Column('end_time', sa.DateTime(timezone=True), nullable=False),
        sa.Column('price', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['screen_id'], ['screen.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_showtime_movie_id'), 'showtime', ['movie_id'], unique=False)

    op.create_table(
        'booking',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('showtime_id', sa.Integer(), nullable=False),
        sa.Column('total_amount', sa.Integer(), nullable=False),
        sa.Column('booking_reference', sa.String(length=32), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.Column(
            'created_at',
            sa.DateTime(timezone=True),
            server_default=sa.text('now()'),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(['showtime_id'], ['showtime.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('booking_reference'),
        sa.CheckConstraint(
            "status IN ('pending', 'confirmed', 'cancelled')", name='ck_booking_status'
        ),
    )
    op.create_index(op.f('ix_booking_user_id'), 'booking', ['user_id'], unique=False)
    op.create_index(op.f('ix_booking_showtime_id'), 'booking', ['showtime_id'], unique=False)

    op.create_table(
        'booking_seat',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('booking_id', sa.Integer(), nullable=False),
        sa.Column('seat_number', sa.String(length=5), nullable=False),
        sa.Column('ticket_type', sa.String(length=50), nullable=False),
        sa.Column('price', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['booking_id'], ['booking.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint(
            'booking_id', 'seat_number', name='uq_booking_seat_booking_seat_number'
        ),
    )
    op.create_index(op.f('ix_booking_seat_booking_id'), 'booking_seat', ['booking_id'])


def downgrade() -> None:
    op.drop_table('booking_seat')
    op.drop_table('booking')
    op.drop_table('showtime')
    op.drop_table('screen')
