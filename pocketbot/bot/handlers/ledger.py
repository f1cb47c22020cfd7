"""
Expense and cashflow command handlers.

Both commands share the same sub-commands and reply texts; a LedgerKind
selects the table, the renderer, and the wording.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional, Type

import discord

from pocketbot.database.config import AsyncSessionLocal
from pocketbot.database.models import Cashflow, Expense, LedgerEntryMixin, TransactionType
from pocketbot.services.ledger_service import (
    EntryPatch,
    add_entry,
    list_entries,
    update_entry,
    soft_delete_entry,
)
from pocketbot.bot.renderers import (
    CASHFLOW_RENDERER,
    EXPENSE_RENDERER,
    LedgerRenderer,
    type_icon,
)
from pocketbot.utils.formatters import day_bounds, format_currency, parse_transaction_date

from .shared import send_reply, start_pagination

logger = logging.getLogger(__name__)

INVALID_DATE = "❌ Invalid date format. Use YYYY-MM-DD HH:MM format."
EMPTY_PATCH = "❌ Please provide at least one field to update."


@dataclass(frozen=True)
class LedgerKind:
    """Everything that differs between /expense and /cashflow."""

    label: str  # "expense"
    model: Type[LedgerEntryMixin]
    renderer: LedgerRenderer
    today_title: str

    @property
    def plural(self) -> str:
        return self.renderer.noun


EXPENSE = LedgerKind("expense", Expense, EXPENSE_RENDERER, "📅 Today's Expenses")
CASHFLOW = LedgerKind("cashflow", Cashflow, CASHFLOW_RENDERER, "📅 Today's Cashflows")


def _to_decimal(amount: float) -> Decimal:
    # Discord number options arrive as floats
    return Decimal(str(amount))


def _parse_optional_date(text: Optional[str]) -> Optional[datetime]:
    """Parse a date option; None when not given, ValueError when malformed."""
    if not text:
        return None
    return parse_transaction_date(text)


async def ledger_add(
    interaction: discord.Interaction,
    kind: LedgerKind,
    name: str,
    amount: float,
    account: str,
    transaction_type: int,
    date: Optional[str] = None,
) -> None:
    """Handle /{kind} add - Record a new entry."""
    user_id = str(interaction.user.id)

    try:
        timestamp = _parse_optional_date(date)
    except ValueError:
        await send_reply(interaction, INVALID_DATE)
        return

    transaction_type = TransactionType(transaction_type)
    value = _to_decimal(amount)

    try:
        async with AsyncSessionLocal() as session:
            entry = await add_entry(
                session,
                kind.model,
                user_id=user_id,
                name=name,
                amount=value,
                account=account,
                transaction_type=transaction_type,
                transaction_timestamp=timestamp,
            )
            await session.commit()
    except Exception:
        logger.exception(f"Error adding {kind.label}")
        await send_reply(interaction, f"❌ Failed to add {kind.label}. Please try again.")
        return

    direction = "income" if transaction_type == TransactionType.INCOME else "expense"
    formatted = format_currency(value, kind.renderer.currency)
    await send_reply(
        interaction,
        f"✅ Added {direction} **#{entry.id}**: {name}\n"
        f"{type_icon(transaction_type)} {formatted} from {account}",
    )


async def ledger_list(
    interaction: discord.Interaction,
    kind: LedgerKind,
    per_page: Optional[int] = None,
) -> None:
    """Handle /{kind} list - Page through every live entry, newest first."""
    user_id = str(interaction.user.id)

    try:
        async with AsyncSessionLocal() as session:
            entries = await list_entries(session, kind.model, user_id=user_id)
    except Exception:
        logger.exception(f"Error fetching {kind.plural}")
        await send_reply(interaction, f"❌ Failed to fetch {kind.plural}. Please try again.")
        return

    await start_pagination(interaction, entries, kind.renderer, per_page=per_page)


async def ledger_today(
    interaction: discord.Interaction,
    kind: LedgerKind,
    per_page: Optional[int] = None,
    now: Optional[datetime] = None,
) -> None:
    """Handle /{kind} today - Page through entries dated today."""
    user_id = str(interaction.user.id)
    start, end = day_bounds(now)

    try:
        async with AsyncSessionLocal() as session:
            entries = await list_entries(
                session, kind.model, user_id=user_id, start=start, end=end
            )
    except Exception:
        logger.exception(f"Error fetching today's {kind.plural}")
        await send_reply(interaction, f"❌ Failed to fetch today's {kind.plural}. Please try again.")
        return

    await start_pagination(
        interaction, entries, kind.renderer, per_page=per_page, title=kind.today_title
    )


async def ledger_edit(
    interaction: discord.Interaction,
    kind: LedgerKind,
    entry_id: int,
    name: Optional[str] = None,
    amount: Optional[float] = None,
    account: Optional[str] = None,
    transaction_type: Optional[int] = None,
    date: Optional[str] = None,
) -> None:
    """Handle /{kind} edit - Change only the fields that were given."""
    user_id = str(interaction.user.id)

    patch = EntryPatch()
    if name:
        patch.name = name
    if amount is not None:
        patch.amount = _to_decimal(amount)
    if account:
        patch.account = account
    if transaction_type is not None:
        patch.type = TransactionType(transaction_type)
    if date:
        try:
            patch.transaction_timestamp = parse_transaction_date(date)
        except ValueError:
            await send_reply(interaction, INVALID_DATE)
            return

    if patch.is_empty():
        await send_reply(interaction, EMPTY_PATCH)
        return

    try:
        async with AsyncSessionLocal() as session:
            entry = await update_entry(
                session, kind.model, user_id=user_id, entry_id=entry_id, patch=patch
            )
            await session.commit()
    except Exception:
        logger.exception(f"Error updating {kind.label} #{entry_id}")
        await send_reply(interaction, f"❌ Failed to update {kind.label}. Please try again.")
        return

    if not entry:
        await send_reply(interaction, f"❌ {kind.label.capitalize()} not found or already deleted.")
        return

    await send_reply(interaction, f"✏️ Updated {kind.label} **#{entry_id}**.")


async def ledger_delete(interaction: discord.Interaction, kind: LedgerKind, entry_id: int) -> None:
    """Handle /{kind} delete - Soft delete an entry."""
    user_id = str(interaction.user.id)

    try:
        async with AsyncSessionLocal() as session:
            deleted = await soft_delete_entry(
                session, kind.model, user_id=user_id, entry_id=entry_id
            )
            await session.commit()
    except Exception:
        logger.exception(f"Error deleting {kind.label} #{entry_id}")
        await send_reply(interaction, f"❌ Failed to delete {kind.label}. Please try again.")
        return

    if not deleted:
        await send_reply(interaction, f"❌ {kind.label.capitalize()} not found or already deleted.")
        return

    await send_reply(interaction, f"🗑️ Deleted {kind.label} **#{entry_id}**.")


__all__ = [
    "LedgerKind",
    "EXPENSE",
    "CASHFLOW",
    "ledger_add",
    "ledger_list",
    "ledger_today",
    "ledger_edit",
    "ledger_delete",
]
