"""
Configuration module - Load environment variables safely.
"""

import os
from dotenv import load_dotenv

# Load .env file if exists
load_dotenv()

# Discord Bot Token
DISCORD_TOKEN = os.getenv("DISCORD_TOKEN")
if not DISCORD_TOKEN:
    raise ValueError("Missing DISCORD_TOKEN in environment variables")

# Application ID (needed only by the command cleanup script)
CLIENT_ID = int(os.getenv("CLIENT_ID")) if os.getenv("CLIENT_ID") else None

# Sync slash commands to a single guild when set, globally otherwise
GUILD_ID = int(os.getenv("GUILD_ID")) if os.getenv("GUILD_ID") else None

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Fixed lifetime of a pagination session, not renewed by clicks
PAGINATION_TIMEOUT_SECONDS = float(os.getenv("PAGINATION_TIMEOUT_SECONDS", "60"))

__all__ = [
    "DISCORD_TOKEN",
    "CLIENT_ID",
    "GUILD_ID",
    "LOG_LEVEL",
    "PAGINATION_TIMEOUT_SECONDS",
]
