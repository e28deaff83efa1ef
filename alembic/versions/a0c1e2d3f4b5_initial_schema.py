"""initial_schema

Revision ID: a0c1e2d3f4b5
Revises:
Create Date: 2026-10-19 09:00:00.000000

차량/고객/예약/대여 테이블 생성.
Create fleet, customer, reservation and rental tables.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID


# revision identifiers, used by Alembic.
revision: str = 'a0c1e2d3f4b5'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # cars: 등급별 플릿 (fleet classified by category)
    op.create_table(
        'cars',
        sa.Column('id', UUID(as_uuid=True), primary_key=True),
        sa.Column('manufacturer', sa.String(100), nullable=False),
        sa.Column('model', sa.String(100), nullable=False),
        sa.Column('license_plate', sa.String(20), nullable=False, unique=True),
        sa.Column('category', sa.String(20), nullable=False),
        sa.Column('status', sa.String(20), nullable=False, server_default='available'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('retired_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('ix_cars_category_status', 'cars', ['category', 'status'])

    # customers: 고객 (email unique, stored lowercased)
    op.create_table(
        'customers',
        sa.Column('id', UUID(as_uuid=True), primary_key=True),
        sa.Column('first_name', sa.String(100), nullable=False),
        sa.Column('last_name', sa.String(100), nullable=False),
        sa.Column('email', sa.String(255), nullable=False, unique=True),
        sa.Column('phone', sa.String(50), nullable=True),
        sa.Column('is_blocked', sa.Boolean, nullable=False, server_default=sa.text('false')),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
    )

    # reservations: 등급 단위 예약, 반개구간 [start_at, end_at)
    op.create_table(
        'reservations',
        sa.Column('id', UUID(as_uuid=True), primary_key=True),
        sa.Column('customer_id', UUID(as_uuid=True), sa.ForeignKey('customers.id', ondelete='RESTRICT'), nullable=False),
        sa.Column('car_category', sa.String(20), nullable=False),
        sa.Column('start_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('end_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('status', sa.String(20), nullable=False, server_default='draft'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('confirmed_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('cancelled_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('expired_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('rental_id', UUID(as_uuid=True), nullable=True),
    )
    op.create_index('ix_reservations_category_status', 'reservations', ['car_category', 'status'])
    op.create_index('ix_reservations_status_created_at', 'reservations', ['status', 'created_at'])

    # rentals: 예약당 최대 1건 (one rental per reservation)
    op.create_table(
        'rentals',
        sa.Column('id', UUID(as_uuid=True), primary_key=True),
        sa.Column('reservation_id', UUID(as_uuid=True), sa.ForeignKey('reservations.id', ondelete='RESTRICT'), nullable=False, unique=True),
        sa.Column('customer_id', UUID(as_uuid=True), sa.ForeignKey('customers.id', ondelete='RESTRICT'), nullable=False),
        sa.Column('car_id', UUID(as_uuid=True), sa.ForeignKey('cars.id', ondelete='RESTRICT'), nullable=False),
        sa.Column('km_out', sa.Integer, nullable=False),
        sa.Column('fuel_out', sa.Integer, nullable=False),
        sa.Column('picked_up_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('km_in', sa.Integer, nullable=True),
        sa.Column('fuel_in', sa.Integer, nullable=True),
        sa.Column('returned_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('ix_rentals_car_id', 'rentals', ['car_id'])


def downgrade() -> None:
    op.drop_index('ix_rentals_car_id', table_name='rentals')
    op.drop_table('rentals')
    op.drop_index('ix_reservations_status_created_at', table_name='reservations')
    op.drop_index('ix_reservations_category_status', table_name='reservations')
    op.drop_table('reservations')
    op.drop_table('customers')
    op.drop_index('ix_cars_category_status', table_name='cars')
    op.drop_table('cars')
