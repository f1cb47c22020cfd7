"""
Render strategies for paginated listings.

A renderer turns one page of records into a PageContent (title, body,
footer). It knows nothing about buttons or Discord messages, so the same
pagination session drives todos, expenses, and cashflows.
"""

from typing import NamedTuple, Optional, Sequence

from pocketbot.database.models import TransactionType
from pocketbot.utils.formatters import format_currency, format_timestamp

INCOME_ICON = "📈"
EXPENSE_ICON = "📉"

# Discord rejects embed descriptions over 4096 characters
MAX_BODY_LENGTH = 4000


class PageContent(NamedTuple):
    title: str
    body: str
    footer: str


def shorten(text: str, width: int) -> str:
    """Cut ``text`` to at most ``width`` characters, marking the cut with an ellipsis."""
    if len(text) <= width:
        return text
    return text[:max(0, width - 1)] + "…"


def type_icon(transaction_type) -> str:
    """Directional icon for a transaction type."""
    return INCOME_ICON if int(transaction_type) == TransactionType.INCOME else EXPENSE_ICON


class PageRenderer:
    """
    Base render strategy.

    Subclasses set the display nouns and implement ``format_item``.
    ``prefix`` namespaces the button custom IDs ({prefix}_prev, ...).
    """

    prefix = "page"
    noun = "items"
    default_title = "Items"
    empty_message = "You have no items."
    separator = "\n"

    def format_item(self, item, width: Optional[int] = None) -> str:
        """Format one record, shortening free text to fit in ``width`` characters."""
        raise NotImplementedError

    def render(
        self,
        items: Sequence,
        page: int,
        total_pages: int,
        total_items: int,
        title: Optional[str] = None,
    ) -> PageContent:
        """
        Render one page.

        Args:
            items: Records on this page
            page: Zero-based page index
            total_pages: Number of pages in the session
            total_items: Number of records in the session
            title: Overrides default_title when given
        """
        footer = f"Page {page + 1} of {total_pages} • Total: {total_items} {self.noun}"

        if not items:
            body = f"No {self.noun} found on this page."
        else:
            # Every record gets an equal share of the body
            width = (MAX_BODY_LENGTH - len(self.separator) * (len(items) - 1)) // len(items)
            body = self.separator.join(self.format_item(item, width) for item in items)

        return PageContent(title or self.default_title, body, footer)


class TodoRenderer(PageRenderer):
    prefix = "todo"
    noun = "todos"
    default_title = "📝 Your Todos"
    empty_message = "📝 You have no todos."

    def format_item(self, item, width: Optional[int] = None) -> str:
        label = f"**#{item.id}**: "
        text = item.text
        if width is not None:
            text = shorten(text, max(1, width - len(label)))
        return label + text


class LedgerRenderer(PageRenderer):
    """Renderer for expense and cashflow entries."""

    def __init__(
        self,
        prefix: str,
        noun: str,
        currency: str,
        default_title: str,
        empty_message: str,
    ):
        self.prefix = prefix
        self.noun = noun
        self.currency = currency
        self.default_title = default_title
        self.empty_message = empty_message

    def _entry_block(self, item, name: str, account: str) -> str:
        return (
            f"{type_icon(item.type)} **#{item.id}**: {name}\n"
            f"💳 {account} • {format_currency(item.amount, self.currency)}\n"
            f"🕐 {format_timestamp(item.transaction_timestamp)}\n"
        )

    def format_item(self, item, width: Optional[int] = None) -> str:
        name, account = item.name, item.account
        if width is not None:
            room = max(2, width - len(self._entry_block(item, "", "")))
            # The account gets at most half, the name the rest
            account = shorten(account, max(1, room // 2))
            name = shorten(name, max(1, room - len(account)))
        return self._entry_block(item, name, account)


EXPENSE_RENDERER = LedgerRenderer(
    prefix="expense",
    noun="expenses",
    currency="USD",
    default_title="💰 Your Expenses",
    empty_message="💰 You have no expenses.",
)

CASHFLOW_RENDERER = LedgerRenderer(
    prefix="cashflow",
    noun="cashflows",
    currency="IDR",
    default_title="💰 Your Cashflows",
    empty_message="💰 You have no cashflows.",
)


__all__ = [
    "MAX_BODY_LENGTH",
    "PageContent",
    "PageRenderer",
    "TodoRenderer",
    "LedgerRenderer",
    "EXPENSE_RENDERER",
    "CASHFLOW_RENDERER",
    "shorten",
    "type_icon",
]
