"""
Database models for PocketBot.
Defines Todo, Expense, and Cashflow tables.
"""

import enum
from datetime import datetime
from sqlalchemy import (
    BigInteger,
    Integer,
    String,
    Text,
    DateTime,
    Numeric,
    Index,
)
from sqlalchemy.orm import declarative_base
from sqlalchemy import Column

Base = declarative_base()


class TransactionType(enum.IntEnum):
    """Direction of a ledger entry, stored as its integer value."""

    EXPENSE = 0
    INCOME = 1


class Todo(Base):
    """Todos table - plain to-do items, hard deleted."""

    __tablename__ = "todos"

    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True)
    user_id = Column(String(32), nullable=False, index=True)
    text = Column(Text, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, nullable=True)

    def __repr__(self):
        return f"<Todo(id={self.id}, user_id={self.user_id}, text={self.text!r})>"


class LedgerEntryMixin:
    """Columns shared by expense and cashflow entries (soft deleted)."""

    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True)
    user_id = Column(String(32), nullable=False)
    name = Column(String(255), nullable=False)
    amount = Column(Numeric(12, 2), nullable=False)  # Signed
    account = Column(String(255), nullable=False)
    type = Column(Integer, nullable=False, default=TransactionType.EXPENSE.value)
    transaction_timestamp = Column(DateTime, default=datetime.now, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, nullable=True)
    deleted_at = Column(DateTime, nullable=True)

class Expense(LedgerEntryMixin, Base):
    """Expenses table - amounts shown in USD."""

    __tablename__ = "expenses"

    __table_args__ = (
        Index("idx_expenses_user_ts", "user_id", "transaction_timestamp"),
    )

    def __repr__(self):
        return f"<Expense(id={self.id}, user_id={self.user_id}, name={self.name}, amount={self.amount})>"


class Cashflow(LedgerEntryMixin, Base):
    """Cashflows table - amounts shown in IDR."""

    __tablename__ = "cashflows"

    __table_args__ = (
        Index("idx_cashflows_user_ts", "user_id", "transaction_timestamp"),
    )

    def __repr__(self):
        return f"<Cashflow(id={self.id}, user_id={self.user_id}, name={self.name}, amount={self.amount})>"


__all__ = ["Base", "TransactionType", "Todo", "LedgerEntryMixin", "Expense", "Cashflow"]
