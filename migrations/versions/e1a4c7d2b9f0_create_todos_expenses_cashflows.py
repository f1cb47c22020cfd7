"""Create todos, expenses and cashflows tables

Revision ID: e1a4c7d2b9f0
Revises:
Create Date: 2025-06-02 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'e1a4c7d2b9f0'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

ID_TYPE = sa.BigInteger().with_variant(sa.Integer(), 'sqlite')


def _ledger_columns():
    return [
        sa.Column('id', ID_TYPE, primary_key=True),
        sa.Column('user_id', sa.String(32), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('amount', sa.Numeric(12, 2), nullable=False),
        sa.Column('account', sa.String(255), nullable=False),
        sa.Column('type', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('transaction_timestamp', sa.DateTime(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.Column('deleted_at', sa.DateTime(), nullable=True),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'todos',
        sa.Column('id', ID_TYPE, primary_key=True),
        sa.Column('user_id', sa.String(32), nullable=False),
        sa.Column('text', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
    )
    op.create_index('ix_todos_user_id', 'todos', ['user_id'])

    op.create_table('expenses', *_ledger_columns())
    op.create_index('idx_expenses_user_ts', 'expenses', ['user_id', 'transaction_timestamp'])

    op.create_table('cashflows', *_ledger_columns())
    op.create_index('idx_cashflows_user_ts', 'cashflows', ['user_id', 'transaction_timestamp'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('idx_cashflows_user_ts', table_name='cashflows')
    op.drop_table('cashflows')
    op.drop_index('idx_expenses_user_ts', table_name='expenses')
    op.drop_table('expenses')
    op.drop_index('ix_todos_user_id', table_name='todos')
    op.drop_table('todos')
