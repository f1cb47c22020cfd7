"""
Main entry point for PocketBot.

Runs database migrations, then connects to Discord and serves slash
commands until interrupted.
"""

import asyncio
import logging
import sys

from alembic.config import Config
from alembic import command

from pocketbot.config import DISCORD_TOKEN, GUILD_ID, LOG_LEVEL, PAGINATION_TIMEOUT_SECONDS
from pocketbot.bot.client import PocketBot

# Configure logging
logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=LOG_LEVEL,
)
logger = logging.getLogger(__name__)


def run_migrations():
    """Run Alembic migrations automatically on startup."""
    try:
        alembic_cfg = Config("alembic.ini")
        alembic_cfg.attributes["configure_logger"] = False
        command.upgrade(alembic_cfg, "head")
        logger.info("✅ Database migrations completed successfully")
    except Exception as e:
        logger.error(f"❌ Migration error: {e}")
        raise


async def run_bot():
    """Connect to Discord and block until the client closes."""
    bot = PocketBot(guild_id=GUILD_ID, pagination_timeout=PAGINATION_TIMEOUT_SECONDS)

    async with bot:
        logger.info("Starting PocketBot...")
        await bot.start(DISCORD_TOKEN)


def main():
    # On Windows, use SelectorEventLoop for psycopg compatibility
    if sys.platform == "win32":
        asyncio.set_event_loop_policy(asyncio.WindowsSelectorEventLoopPolicy())

    run_migrations()

    try:
        asyncio.run(run_bot())
    except KeyboardInterrupt:
        logger.info("Bot stopped.")


if __name__ == "__main__":
    main()
