import pytest

from pocketbot.services.todo_service import (
    add_todo,
    delete_todo,
    get_todo_with_owner_check,
    list_todos,
    update_todo,
)

OWNER = "1001"
OTHER = "2002"


@pytest.mark.asyncio
async def test_add_todo_assigns_id_and_timestamp(session):
    todo = await add_todo(session, OWNER, "Buy milk")
    await session.commit()

    assert todo.id is not None
    assert todo.created_at is not None
    assert todo.updated_at is None


@pytest.mark.asyncio
async def test_list_todos_is_owner_scoped_and_id_ordered(session):
    first = await add_todo(session, OWNER, "one")
    await add_todo(session, OTHER, "not mine")
    second = await add_todo(session, OWNER, "two")
    await session.commit()

    todos = await list_todos(session, OWNER)

    assert [t.id for t in todos] == [first.id, second.id]
    assert [t.text for t in todos] == ["one", "two"]


@pytest.mark.asyncio
async def test_update_todo_changes_text_and_stamps_updated_at(session):
    todo = await add_todo(session, OWNER, "draft")
    await session.commit()

    updated = await update_todo(session, OWNER, todo.id, "final")
    await session.commit()

    assert updated.text == "final"
    assert updated.updated_at is not None


@pytest.mark.asyncio
async def test_update_todo_of_other_user_is_not_found(session):
    todo = await add_todo(session, OWNER, "mine")
    await session.commit()

    assert await update_todo(session, OTHER, todo.id, "hijacked") is None
    refreshed = await get_todo_with_owner_check(session, OWNER, todo.id)
    assert refreshed.text == "mine"


@pytest.mark.asyncio
async def test_delete_todo_is_permanent(session):
    todo = await add_todo(session, OWNER, "temporary")
    await session.commit()

    assert await delete_todo(session, OWNER, todo.id) is True
    await session.commit()

    assert await list_todos(session, OWNER) == []
    assert await delete_todo(session, OWNER, todo.id) is False


@pytest.mark.asyncio
async def test_delete_todo_of_other_user_is_not_found(session):
    todo = await add_todo(session, OWNER, "mine")
    await session.commit()

    assert await delete_todo(session, OTHER, todo.id) is False
    assert len(await list_todos(session, OWNER)) == 1
