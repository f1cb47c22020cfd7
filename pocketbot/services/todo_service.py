"""
Todo service - Manage a user's to-do items.
"""

from datetime import datetime
from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from pocketbot.database.models import Todo


async def add_todo(
    session: AsyncSession,
    user_id: str,
    text: str
) -> Todo:
    """
    Add a new todo for a user.

    Args:
        session: AsyncSession instance
        user_id: Discord user ID of the owner
        text: What to do

    Returns:
        Todo instance with its assigned ID
    """
    todo = Todo(user_id=user_id, text=text)
    session.add(todo)
    await session.flush()  # Get ID without committing

    return todo


async def list_todos(
    session: AsyncSession,
    user_id: str
) -> List[Todo]:
    """
    Get all todos of a user, oldest first (ID ascending).
    """
    result = await session.execute(
        select(Todo)
        .where(Todo.user_id == user_id)
        .order_by(Todo.id.asc())
    )
    return list(result.scalars().all())


async def get_todo_with_owner_check(
    session: AsyncSession,
    user_id: str,
    todo_id: int
) -> Optional[Todo]:
    """
    Get a todo with ownership verification.

    Returns:
        Todo if found and owned by user, None otherwise
    """
    result = await session.execute(
        select(Todo).where(
            (Todo.id == todo_id) &
            (Todo.user_id == user_id)
        )
    )
    return result.scalar_one_or_none()


async def update_todo(
    session: AsyncSession,
    user_id: str,
    todo_id: int,
    text: str
) -> Optional[Todo]:
    """
    Replace the text of a todo.

    Returns:
        Updated Todo, or None if not found or not owned
    """
    todo = await get_todo_with_owner_check(session, user_id, todo_id)
    if not todo:
        return None

    todo.text = text
    todo.updated_at = datetime.utcnow()
    await session.flush()
    return todo


async def delete_todo(
    session: AsyncSession,
    user_id: str,
    todo_id: int
) -> bool:
    """
    Delete a todo permanently (todos are not soft deleted).

    Returns:
        True if deleted, False if not found or not owned
    """
    todo = await get_todo_with_owner_check(session, user_id, todo_id)
    if not todo:
        return False

    await session.delete(todo)
    await session.flush()
    return True


__all__ = [
    "add_todo",
    "list_todos",
    "get_todo_with_owner_check",
    "update_todo",
    "delete_todo",
]
