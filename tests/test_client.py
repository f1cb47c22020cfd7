from unittest.mock import AsyncMock, MagicMock

import discord
import pytest
from discord import app_commands

from pocketbot.bot.client import PocketBot
from pocketbot.bot.handlers import GENERIC_ERROR


def test_commands_are_registered():
    bot = PocketBot(pagination_timeout=30)

    names = {command.name for command in bot.tree.get_commands()}
    assert {"todo", "expense", "cashflow", "app", "ping", "user", "clear"} <= names
    assert bot.pagination_timeout == 30


@pytest.mark.asyncio
async def test_setup_hook_syncs_globally_without_guild(monkeypatch):
    bot = PocketBot()
    sync = AsyncMock(return_value=[])
    monkeypatch.setattr(bot.tree, "sync", sync)

    await bot.setup_hook()

    sync.assert_awaited_once_with()


@pytest.mark.asyncio
async def test_setup_hook_syncs_to_guild(monkeypatch):
    bot = PocketBot(guild_id=1234)
    sync = AsyncMock(return_value=[])
    copy_global_to = MagicMock()
    monkeypatch.setattr(bot.tree, "sync", sync)
    monkeypatch.setattr(bot.tree, "copy_global_to", copy_global_to)

    await bot.setup_hook()

    guild = sync.call_args.kwargs["guild"]
    assert guild.id == 1234
    assert copy_global_to.call_args.kwargs["guild"].id == 1234


@pytest.mark.asyncio
async def test_unhandled_error_gets_generic_reply(interaction, caplog):
    bot = PocketBot()
    interaction.command.qualified_name = "todo add"

    await bot.on_app_command_error(interaction, app_commands.AppCommandError("boom"))

    interaction.response.send_message.assert_awaited_once_with(GENERIC_ERROR, ephemeral=True)
    assert "Error executing /todo add" in caplog.text


@pytest.mark.asyncio
async def test_error_after_reply_uses_followup(interaction):
    bot = PocketBot()
    await interaction.response.defer()

    await bot.on_app_command_error(interaction, app_commands.AppCommandError("boom"))

    interaction.followup.send.assert_awaited_once_with(GENERIC_ERROR, ephemeral=True)


@pytest.mark.asyncio
async def test_error_reply_failure_is_logged(interaction, caplog):
    bot = PocketBot()
    interaction.response.send_message.side_effect = discord.HTTPException(
        MagicMock(status=500, reason="Server Error"), "down"
    )

    await bot.on_app_command_error(interaction, app_commands.AppCommandError("boom"))

    assert "Could not report error" in caplog.text
