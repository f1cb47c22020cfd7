"""
Discord client for PocketBot.

Owns the slash command tree, syncs it on startup, and is the last line of
error handling for commands.
"""

import logging
from typing import Optional

import discord
from discord import app_commands

from pocketbot.bot.commands import register_commands
from pocketbot.bot.handlers import GENERIC_ERROR, send_reply
from pocketbot.bot.pagination import DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)


class PocketBot(discord.Client):
    """
    Slash command bot for todos, expenses, and cashflows.

    Args:
        guild_id: Sync commands to this guild only (instant); None syncs globally
        pagination_timeout: Lifetime in seconds of listing buttons
    """

    def __init__(self, guild_id: Optional[int] = None, pagination_timeout: float = DEFAULT_TIMEOUT):
        intents = discord.Intents.default()
        super().__init__(intents=intents)

        self.guild_id = guild_id
        self.pagination_timeout = pagination_timeout

        self.tree = app_commands.CommandTree(self)
        self.tree.error(self.on_app_command_error)
        register_commands(self.tree)

    async def setup_hook(self) -> None:
        """Register slash commands with Discord before connecting."""
        if self.guild_id:
            guild = discord.Object(id=self.guild_id)
            self.tree.copy_global_to(guild=guild)
            synced = await self.tree.sync(guild=guild)
            logger.info(f"✅ Synced {len(synced)} slash commands to guild {self.guild_id}")
        else:
            synced = await self.tree.sync()
            logger.info(f"✅ Synced {len(synced)} global slash commands")

    async def on_ready(self) -> None:
        logger.info(f"🤖 Logged in as {self.user} (ID: {self.user.id})")

    async def on_app_command_error(
        self,
        interaction: discord.Interaction,
        error: app_commands.AppCommandError,
    ) -> None:
        """Catch-all for anything a handler did not answer itself."""
        command_name = interaction.command.qualified_name if interaction.command else "unknown"
        logger.error(f"Error executing /{command_name}: {error}", exc_info=error)

        try:
            await send_reply(interaction, GENERIC_ERROR, ephemeral=True)
        except discord.HTTPException as e:
            logger.warning(f"Could not report error for /{command_name}: {e}")


__all__ = ["PocketBot"]
