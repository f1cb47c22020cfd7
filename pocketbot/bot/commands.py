"""
Slash command declarations.

Only option schemas live here; every command forwards to a handler in
pocketbot.bot.handlers.
"""

from typing import List, Optional

import discord
from discord import app_commands

from pocketbot.bot.handlers import (
    EXPENSE,
    CASHFLOW,
    LedgerKind,
    todo_add,
    todo_list,
    todo_update,
    todo_delete,
    ledger_add,
    ledger_list,
    ledger_today,
    ledger_edit,
    ledger_delete,
    ping,
    user_info,
    stats,
    clear_messages,
)

TYPE_CHOICES = [
    app_commands.Choice(name="Expense", value=0),
    app_commands.Choice(name="Income", value=1),
]


def _with_article(noun: str) -> str:
    return f"an {noun}" if noun[0] in "aeiou" else f"a {noun}"


PerPage = app_commands.Range[int, 1, 15]
# Ledger name and account columns are String(255)
Label = app_commands.Range[str, 1, 255]
TodoText = app_commands.Range[str, 1, 1000]
ClearAmount = app_commands.Range[int, 1, 100]


def build_todo_group() -> app_commands.Group:
    group = app_commands.Group(name="todo", description="Manage your todos")

    @group.command(name="add", description="Add a new todo")
    @app_commands.describe(text="What to do?")
    async def add(interaction: discord.Interaction, text: TodoText):
        await todo_add(interaction, text)

    @group.command(name="list", description="Show your todos")
    @app_commands.rename(per_page="per-page")
    @app_commands.describe(per_page="Number of todos per page (default: 5)")
    async def list_todos(interaction: discord.Interaction, per_page: Optional[PerPage] = None):
        await todo_list(interaction, per_page)

    @group.command(name="update", description="Update a todo")
    @app_commands.rename(todo_id="id")
    @app_commands.describe(todo_id="Todo ID", text="New todo")
    async def update(interaction: discord.Interaction, todo_id: int, text: TodoText):
        await todo_update(interaction, todo_id, text)

    @group.command(name="delete", description="Delete a todo")
    @app_commands.rename(todo_id="id")
    @app_commands.describe(todo_id="Todo ID")
    async def delete(interaction: discord.Interaction, todo_id: int):
        await todo_delete(interaction, todo_id)

    return group


def build_ledger_group(kind: LedgerKind) -> app_commands.Group:
    """Build /expense or /cashflow; both share the same sub-commands."""
    label = kind.label
    title = label.capitalize()
    group = app_commands.Group(name=label, description=f"Manage your {kind.plural}")

    @group.command(name="add", description=f"Add a new {label}")
    @app_commands.rename(transaction_type="type")
    @app_commands.describe(
        name=f"{title} name/description",
        amount=f"{title} amount",
        account="Account used for transaction",
        transaction_type="Transaction type (0 = expense, 1 = income)",
        date="Transaction date (YYYY-MM-DD HH:MM, default: now)",
    )
    @app_commands.choices(transaction_type=TYPE_CHOICES)
    async def add(
        interaction: discord.Interaction,
        name: Label,
        amount: float,
        account: Label,
        transaction_type: app_commands.Choice[int],
        date: Optional[str] = None,
    ):
        await ledger_add(interaction, kind, name, amount, account, transaction_type.value, date)

    @group.command(name="list", description=f"Show your {kind.plural}")
    @app_commands.rename(per_page="per-page")
    @app_commands.describe(per_page=f"Number of {kind.plural} per page (default: 5)")
    async def list_entries(interaction: discord.Interaction, per_page: Optional[PerPage] = None):
        await ledger_list(interaction, kind, per_page)

    @group.command(name="today", description=f"Show today's {kind.plural}")
    @app_commands.rename(per_page="per-page")
    @app_commands.describe(per_page=f"Number of {kind.plural} per page (default: 5)")
    async def today(interaction: discord.Interaction, per_page: Optional[PerPage] = None):
        await ledger_today(interaction, kind, per_page)

    @group.command(name="edit", description=f"Edit {_with_article(label)}")
    @app_commands.rename(entry_id="id", transaction_type="type")
    @app_commands.describe(
        entry_id=f"{title} ID",
        name=f"New {label} name/description",
        amount=f"New {label} amount",
        account="New account",
        transaction_type="New transaction type",
        date="New transaction date (YYYY-MM-DD HH:MM)",
    )
    @app_commands.choices(transaction_type=TYPE_CHOICES)
    async def edit(
        interaction: discord.Interaction,
        entry_id: int,
        name: Optional[Label] = None,
        amount: Optional[float] = None,
        account: Optional[Label] = None,
        transaction_type: Optional[app_commands.Choice[int]] = None,
        date: Optional[str] = None,
    ):
        await ledger_edit(
            interaction,
            kind,
            entry_id,
            name=name,
            amount=amount,
            account=account,
            transaction_type=transaction_type.value if transaction_type else None,
            date=date,
        )

    @group.command(name="delete", description=f"Delete {_with_article(label)} (soft delete)")
    @app_commands.rename(entry_id="id")
    @app_commands.describe(entry_id=f"{title} ID")
    async def delete(interaction: discord.Interaction, entry_id: int):
        await ledger_delete(interaction, kind, entry_id)

    return group


def build_app_group() -> app_commands.Group:
    group = app_commands.Group(name="app", description="Replies with information about the bot.")
    chat = app_commands.Group(name="chat", description="Chat related commands.", parent=group)

    @group.command(name="ping", description="Show app ping.")
    async def app_ping(interaction: discord.Interaction):
        await ping(interaction)

    @group.command(name="stats", description="Show app stats.")
    async def app_stats(interaction: discord.Interaction):
        await stats(interaction)

    @chat.command(name="clean", description="Clean an amount of messages")
    @app_commands.describe(amount="Amount of messages to clean")
    async def clean(interaction: discord.Interaction, amount: ClearAmount):
        await clear_messages(interaction, amount)

    return group


def build_top_level_commands() -> List[app_commands.Command]:
    @app_commands.command(name="ping", description="Replies with Pong and latency.")
    async def ping_command(interaction: discord.Interaction):
        await ping(interaction)

    @app_commands.command(name="user", description="Provides information about the user.")
    async def user_command(interaction: discord.Interaction):
        await user_info(interaction)

    @app_commands.command(name="clear", description="Delete a number of recent messages.")
    @app_commands.describe(amount="Number of messages to delete (1–100)")
    @app_commands.default_permissions(manage_messages=True)
    @app_commands.guild_only()
    async def clear_command(interaction: discord.Interaction, amount: ClearAmount):
        await clear_messages(interaction, amount)

    return [ping_command, user_command, clear_command]


def build_commands() -> list:
    """Every command and group the bot exposes."""
    return [
        build_todo_group(),
        build_ledger_group(EXPENSE),
        build_ledger_group(CASHFLOW),
        build_app_group(),
        *build_top_level_commands(),
    ]


def register_commands(tree: app_commands.CommandTree) -> None:
    """Add all commands to a command tree (syncing is up to the caller)."""
    for command in build_commands():
        tree.add_command(command)


__all__ = [
    "TYPE_CHOICES",
    "build_todo_group",
    "build_ledger_group",
    "build_app_group",
    "build_top_level_commands",
    "build_commands",
    "register_commands",
]
