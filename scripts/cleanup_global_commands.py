"""
Delete every globally registered slash command of the application.

PocketBot syncs to a single guild when GUILD_ID is set; global commands left
over from earlier runs would otherwise show up twice in that guild.

Usage:
    python scripts/cleanup_global_commands.py
"""

import asyncio
import logging

import discord
from discord import app_commands

from pocketbot.config import DISCORD_TOKEN, CLIENT_ID

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=logging.INFO,
)
logger = logging.getLogger(__name__)


async def cleanup_global_commands():
    client = discord.Client(intents=discord.Intents.none(), application_id=CLIENT_ID)
    tree = app_commands.CommandTree(client)

    async with client:
        await client.login(DISCORD_TOKEN)

        commands = await tree.fetch_commands()
        for cmd in commands:
            logger.info(f"❌ Deleting global command: {cmd.name}")

        # Syncing an empty global tree removes them all in one request
        tree.clear_commands(guild=None)
        await tree.sync()
        logger.info(f"✅ All {len(commands)} global commands deleted.")


if __name__ == "__main__":
    try:
        asyncio.run(cleanup_global_commands())
    except discord.HTTPException as e:
        logger.error(f"❌ Error deleting global commands: {e}")
        raise SystemExit(1)
