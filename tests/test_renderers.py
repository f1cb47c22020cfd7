from datetime import datetime
from decimal import Decimal
from types import SimpleNamespace

from pocketbot.bot.renderers import (
    CASHFLOW_RENDERER,
    EXPENSE_RENDERER,
    MAX_BODY_LENGTH,
    TodoRenderer,
    shorten,
    type_icon,
)


def _entry(id, type, amount="12.5", name="Lunch", account="BCA"):
    return SimpleNamespace(
        id=id,
        name=name,
        amount=Decimal(amount),
        account=account,
        type=type,
        transaction_timestamp=datetime(2025, 1, 5, 15, 4),
    )


def test_todo_page_lists_one_line_per_todo():
    todos = [SimpleNamespace(id=1, text="Buy milk"), SimpleNamespace(id=2, text="Call mom")]

    content = TodoRenderer().render(todos, page=0, total_pages=3, total_items=12)

    assert content.title == "📝 Your Todos"
    assert content.body == "**#1**: Buy milk\n**#2**: Call mom"
    assert content.footer == "Page 1 of 3 • Total: 12 todos"


def test_title_override():
    content = TodoRenderer().render([SimpleNamespace(id=1, text="x")], 0, 1, 1, title="Custom")
    assert content.title == "Custom"


def test_empty_page_placeholder():
    content = EXPENSE_RENDERER.render([], page=1, total_pages=2, total_items=5)
    assert content.body == "No expenses found on this page."


def test_expense_entry_block_uses_usd_and_icon():
    content = EXPENSE_RENDERER.render([_entry(7, 0)], 0, 1, 1)

    assert content.title == "💰 Your Expenses"
    assert content.body == (
        "📉 **#7**: Lunch\n"
        "💳 BCA • $12.50\n"
        "🕐 Jan 5, 2025, 03:04 PM\n"
    )
    assert content.footer == "Page 1 of 1 • Total: 1 expenses"


def test_cashflow_entries_use_idr_and_are_blank_line_separated():
    content = CASHFLOW_RENDERER.render(
        [_entry(1, 1, amount="50000", name="Salary"), _entry(2, 0, amount="15000")],
        0, 1, 2,
    )

    blocks = content.body.split("\n\n")
    assert blocks[0].startswith("📈 **#1**: Salary\n💳 BCA • Rp\u00a050.000,00")
    assert blocks[1].startswith("📉 **#2**: Lunch\n💳 BCA • Rp\u00a015.000,00")
    assert content.footer.endswith("Total: 2 cashflows")


def test_type_icon():
    assert type_icon(1) == "📈"
    assert type_icon(0) == "📉"


def test_button_prefixes():
    assert TodoRenderer.prefix == "todo"
    assert EXPENSE_RENDERER.prefix == "expense"
    assert CASHFLOW_RENDERER.prefix == "cashflow"


def test_shorten():
    assert shorten("Lunch", 5) == "Lunch"
    assert shorten("Lunch at the mall", 6) == "Lunch…"


def test_full_page_of_long_entries_fits_in_an_embed():
    entries = [
        _entry(i, i % 2, amount="1234567.89", name="N" * 255, account="A" * 255)
        for i in range(1, 16)
    ]

    content = EXPENSE_RENDERER.render(entries, 0, 1, 15)

    assert len(content.body) <= MAX_BODY_LENGTH
    blocks = content.body.split("\n\n")
    assert len(blocks) == 15
    for i, block in enumerate(blocks, start=1):
        assert f"**#{i}**: NNN" in block
        assert "…" in block
        assert "$1,234,567.89" in block
        assert "Jan 5, 2025, 03:04 PM" in block


def test_full_page_of_long_todos_fits_in_an_embed():
    todos = [SimpleNamespace(id=i, text="x" * 1000) for i in range(1, 16)]

    content = TodoRenderer().render(todos, 0, 1, 15)

    assert len(content.body) <= MAX_BODY_LENGTH
    lines = content.body.split("\n")
    assert [line.split(":")[0] for line in lines] == [f"**#{i}**" for i in range(1, 16)]
    assert all(line.endswith("…") for line in lines)


def test_short_account_leaves_room_for_the_name():
    entry = _entry(1, 0, name="N" * 255, account="BCA")

    content = EXPENSE_RENDERER.render([entry] * 15, 0, 1, 15)

    first = content.body.split("\n\n")[0]
    assert "💳 BCA •" in first
    assert len(content.body) <= MAX_BODY_LENGTH
