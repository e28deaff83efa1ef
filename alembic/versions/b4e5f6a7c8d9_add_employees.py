"""add_employees

Revision ID: b4e5f6a7c8d9
Revises: a0c1e2d3f4b5
Create Date: 2026-10-19 12:00:00.000000

직원 테이블 추가 (사번/이메일 고유, 권한 비트마스크).
Add the employees table (unique personnel number and email, rights bitmask).
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID


# revision identifiers, used by Alembic.
revision: str = 'b4e5f6a7c8d9'
down_revision: Union[str, None] = 'a0c1e2d3f4b5'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'employees',
        sa.Column('id', UUID(as_uuid=True), primary_key=True),
        sa.Column('first_name', sa.String(100), nullable=False),
        sa.Column('last_name', sa.String(100), nullable=False),
        sa.Column('email', sa.String(255), nullable=False, unique=True),
        sa.Column('phone', sa.String(50), nullable=True),
        sa.Column('personnel_number', sa.String(32), nullable=False, unique=True),
        sa.Column('admin_rights', sa.Integer, nullable=False, server_default='0'),
        sa.Column('is_active', sa.Boolean, nullable=False, server_default=sa.text('true')),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('deactivated_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('ix_employees_is_active', 'employees', ['is_active'])


def downgrade() -> None:
    op.drop_index('ix_employees_is_active', table_name='employees')
    op.drop_table('employees')
