"""
Todo command handlers.

Handles /todo add, list, update, and delete.
"""

import logging
from typing import Optional

import discord

from pocketbot.database.config import AsyncSessionLocal
from pocketbot.services.todo_service import add_todo, list_todos, update_todo, delete_todo
from pocketbot.bot.renderers import TodoRenderer

from .shared import send_reply, start_pagination

logger = logging.getLogger(__name__)

TODO_RENDERER = TodoRenderer()


async def todo_add(interaction: discord.Interaction, text: str) -> None:
    """Handle /todo add - Store a new todo."""
    user_id = str(interaction.user.id)

    try:
        async with AsyncSessionLocal() as session:
            todo = await add_todo(session, user_id=user_id, text=text)
            await session.commit()
    except Exception:
        logger.exception("Error adding todo")
        await send_reply(interaction, "❌ Failed to add todo. Please try again.")
        return

    await send_reply(interaction, f"✅ Added todo **#{todo.id}**: {text}")


async def todo_list(interaction: discord.Interaction, per_page: Optional[int] = None) -> None:
    """Handle /todo list - Show the user's todos page by page."""
    user_id = str(interaction.user.id)

    try:
        async with AsyncSessionLocal() as session:
            todos = await list_todos(session, user_id=user_id)
    except Exception:
        logger.exception("Error fetching todos")
        await send_reply(interaction, "❌ Failed to fetch todos. Please try again.")
        return

    await start_pagination(interaction, todos, TODO_RENDERER, per_page=per_page)


async def todo_update(interaction: discord.Interaction, todo_id: int, text: str) -> None:
    """Handle /todo update - Replace the text of a todo."""
    user_id = str(interaction.user.id)

    try:
        async with AsyncSessionLocal() as session:
            todo = await update_todo(session, user_id=user_id, todo_id=todo_id, text=text)
            await session.commit()
    except Exception:
        logger.exception(f"Error updating todo #{todo_id}")
        await send_reply(interaction, "❌ Failed to update todo. Please try again.")
        return

    if not todo:
        await send_reply(interaction, "❌ Todo not found.")
        return

    await send_reply(interaction, f"✏️ Updated todo **#{todo_id}**.")


async def todo_delete(interaction: discord.Interaction, todo_id: int) -> None:
    """Handle /todo delete - Remove a todo for good."""
    user_id = str(interaction.user.id)

    try:
        async with AsyncSessionLocal() as session:
            deleted = await delete_todo(session, user_id=user_id, todo_id=todo_id)
            await session.commit()
    except Exception:
        logger.exception(f"Error deleting todo #{todo_id}")
        await send_reply(interaction, "❌ Failed to delete todo. Please try again.")
        return

    if not deleted:
        await send_reply(interaction, "❌ Todo not found.")
        return

    await send_reply(interaction, f"🗑️ Deleted todo **#{todo_id}**.")


__all__ = ["TODO_RENDERER", "todo_add", "todo_list", "todo_update", "todo_delete"]
