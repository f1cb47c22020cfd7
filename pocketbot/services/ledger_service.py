"""
Ledger service - Manage expense and cashflow entries.

Both tables share the same columns, so every function takes the model class
(Expense or Cashflow) as its first argument after the session. Entries are
soft deleted: a non-null ``deleted_at`` hides them from every query here.
"""

from dataclasses import dataclass, fields
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional, Type, Union
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from pocketbot.database.models import LedgerEntryMixin, TransactionType


class _Unset:
    """Marker for a patch field that should be left unchanged."""

    def __repr__(self):
        return "UNSET"

    def __bool__(self):
        return False


UNSET: Any = _Unset()


@dataclass
class EntryPatch:
    """Sparse update for a ledger entry. Fields left as UNSET are not touched."""

    name: Union[str, _Unset] = UNSET
    amount: Union[Decimal, _Unset] = UNSET
    account: Union[str, _Unset] = UNSET
    type: Union[TransactionType, int, _Unset] = UNSET
    transaction_timestamp: Union[datetime, _Unset] = UNSET

    def changes(self) -> Dict[str, Any]:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not UNSET
        }

    def is_empty(self) -> bool:
        return not self.changes()


async def add_entry(
    session: AsyncSession,
    model: Type[LedgerEntryMixin],
    user_id: str,
    name: str,
    amount: Decimal,
    account: str,
    transaction_type: TransactionType,
    transaction_timestamp: Optional[datetime] = None
) -> LedgerEntryMixin:
    """
    Add a new expense or cashflow entry.

    Args:
        session: AsyncSession instance
        model: Expense or Cashflow
        user_id: Discord user ID of the owner
        name: Entry name/description
        amount: Signed amount
        account: Account used for the transaction
        transaction_type: TransactionType.EXPENSE or TransactionType.INCOME
        transaction_timestamp: When it happened (default: now)

    Returns:
        The new entry with its assigned ID
    """
    entry = model(
        user_id=user_id,
        name=name,
        amount=amount,
        account=account,
        type=int(transaction_type),
        transaction_timestamp=transaction_timestamp or datetime.now(),
    )
    session.add(entry)
    await session.flush()

    return entry


async def list_entries(
    session: AsyncSession,
    model: Type[LedgerEntryMixin],
    user_id: str,
    start: Optional[datetime] = None,
    end: Optional[datetime] = None
) -> List[LedgerEntryMixin]:
    """
    Get a user's live entries, newest transaction first.

    Args:
        start: Inclusive lower bound on transaction_timestamp (optional)
        end: Inclusive upper bound on transaction_timestamp (optional)
    """
    stmt = select(model).where(
        (model.user_id == user_id) &
        (model.deleted_at.is_(None))
    )
    if start is not None:
        stmt = stmt.where(model.transaction_timestamp >= start)
    if end is not None:
        stmt = stmt.where(model.transaction_timestamp <= end)

    result = await session.execute(
        stmt.order_by(model.transaction_timestamp.desc(), model.id.desc())
    )
    return list(result.scalars().all())


async def get_entry_with_owner_check(
    session: AsyncSession,
    model: Type[LedgerEntryMixin],
    user_id: str,
    entry_id: int
) -> Optional[LedgerEntryMixin]:
    """
    Get a live entry with ownership verification.

    Returns:
        Entry if found, owned by user and not deleted, None otherwise
    """
    result = await session.execute(
        select(model).where(
            (model.id == entry_id) &
            (model.user_id == user_id) &
            (model.deleted_at.is_(None))
        )
    )
    return result.scalar_one_or_none()


async def update_entry(
    session: AsyncSession,
    model: Type[LedgerEntryMixin],
    user_id: str,
    entry_id: int,
    patch: EntryPatch
) -> Optional[LedgerEntryMixin]:
    """
    Apply a sparse patch to an entry. updated_at is always stamped.

    Returns:
        Updated entry, or None if not found, deleted, or owned by someone else
    """
    entry = await get_entry_with_owner_check(session, model, user_id, entry_id)
    if not entry:
        return None

    for column, value in patch.changes().items():
        if column == "type":
            value = int(value)
        setattr(entry, column, value)
    entry.updated_at = datetime.utcnow()

    await session.flush()
    return entry


async def soft_delete_entry(
    session: AsyncSession,
    model: Type[LedgerEntryMixin],
    user_id: str,
    entry_id: int
) -> bool:
    """
    Mark an entry as deleted.

    Returns:
        True if deleted, False if not found, not owned, or already deleted
    """
    entry = await get_entry_with_owner_check(session, model, user_id, entry_id)
    if not entry:
        return False

    now = datetime.utcnow()
    entry.deleted_at = now
    entry.updated_at = now
    await session.flush()
    return True


__all__ = [
    "UNSET",
    "EntryPatch",
    "add_entry",
    "list_entries",
    "get_entry_with_owner_check",
    "update_entry",
    "soft_delete_entry",
]
