"""
Bot handlers package for PocketBot.

Re-exports all handler functions for use in the command declarations.
"""

from .todo import (
    todo_add,
    todo_list,
    todo_update,
    todo_delete,
)
from .ledger import (
    LedgerKind,
    EXPENSE,
    CASHFLOW,
    ledger_add,
    ledger_list,
    ledger_today,
    ledger_edit,
    ledger_delete,
)
from .utility import (
    ping,
    user_info,
    stats,
    clear_messages,
)
from .shared import (
    GENERIC_ERROR,
    send_reply,
    start_pagination,
)

__all__ = [
    # Todo
    "todo_add",
    "todo_list",
    "todo_update",
    "todo_delete",
    # Expense / cashflow
    "LedgerKind",
    "EXPENSE",
    "CASHFLOW",
    "ledger_add",
    "ledger_list",
    "ledger_today",
    "ledger_edit",
    "ledger_delete",
    # Utility
    "ping",
    "user_info",
    "stats",
    "clear_messages",
    # Shared
    "GENERIC_ERROR",
    "send_reply",
    "start_pagination",
]
