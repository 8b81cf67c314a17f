"""create_customers_and_addresses

Revision ID: 20261019_customers
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy import inspect


# revision identifiers, used by Alembic.
revision: str = '20261019_customers'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def table_exists(table_name):
    """Check if a table exists in the database"""
    bind = op.get_bind()
    inspector = inspect(bind)
    return table_name in inspector.get_table_names()


def upgrade():
    # 1. Customers
    if not table_exists('customers'):
        op.create_table(
            'customers',
            sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
            sa.Column('name', sa.String(length=100), nullable=False),
            sa.Column('cpf', sa.String(length=11), nullable=False),
            sa.UniqueConstraint('cpf', name='uq_customers_cpf'),
            sqlite_autoincrement=True,
        )

    # 2. Addresses (owned by a customer)
    if not table_exists('addresses'):
        op.create_table(
            'addresses',
            sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
            sa.Column('street', sa.String(length=100), nullable=False),
            sa.Column('city', sa.String(length=100), nullable=False),
            sa.Column(
                'customer_id',
                sa.Integer(),
                sa.ForeignKey('customers.id', ondelete='CASCADE'),
                nullable=False,
            ),
            sqlite_autoincrement=True,
        )
        op.create_index('idx_addresses_customer', 'addresses', ['customer_id'])


def downgrade():
    if table_exists('addresses'):
        op.drop_index('idx_addresses_customer', table_name='addresses')
        op.drop_table('addresses')
    if table_exists('customers'):
        op.drop_table('customers')
