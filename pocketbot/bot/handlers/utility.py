"""
Utility command handlers: ping, user, stats, and message clearing.
"""

import logging
import time

import discord

from pocketbot.utils.formatters import format_uptime

from .shared import send_reply

logger = logging.getLogger(__name__)

BOT_VERSION = "1.1.0"
STATS_COLOR = discord.Colour(0x00AEFF)
MAX_CLEAR = 100

# Process start, for /app stats uptime
STARTED_AT = time.monotonic()


async def ping(interaction: discord.Interaction) -> None:
    """Handle /ping - Report round-trip latency of a reply."""
    await interaction.response.send_message("Pinging...")
    sent = await interaction.original_response()

    latency_ms = (sent.created_at - interaction.created_at).total_seconds() * 1000
    await interaction.edit_original_response(content=f"🏓 Pong! Latency is **{latency_ms:.0f}ms**")


async def user_info(interaction: discord.Interaction) -> None:
    """Handle /user - Tell who ran the command."""
    await send_reply(interaction, f"This command was used by {interaction.user.name}.")


def build_stats_embed(client: discord.Client, uptime_seconds: float) -> discord.Embed:
    embed = discord.Embed(
        title="📊 Bot Stats",
        description="Here's my stat",
        colour=STATS_COLOR,
    )
    embed.add_field(name="Uptime", value=f"**{format_uptime(uptime_seconds)}**", inline=False)
    embed.add_field(name="Users", value=str(len(client.users)), inline=False)

    icon_url = client.user.display_avatar.url if client.user else None
    embed.set_footer(text=f"Version {BOT_VERSION}", icon_url=icon_url)
    return embed


async def stats(interaction: discord.Interaction) -> None:
    """Handle /app stats - Uptime and cached user count."""
    embed = build_stats_embed(interaction.client, time.monotonic() - STARTED_AT)
    await send_reply(interaction, embed=embed)


async def clear_messages(interaction: discord.Interaction, amount: int) -> None:
    """
    Handle /clear and /app chat clean - Bulk delete recent messages.

    Only works in regular guild text channels and for 1-100 messages.
    All replies are ephemeral.
    """
    channel = interaction.channel

    if not isinstance(channel, discord.TextChannel):
        await send_reply(
            interaction,
            "This command can only be used in a regular text channel.",
            ephemeral=True,
        )
        return

    if amount < 1 or amount > MAX_CLEAR:
        await send_reply(interaction, "Please provide a number between 1 and 100.", ephemeral=True)
        return

    # Purging can take longer than the interaction reply window
    await interaction.response.defer(ephemeral=True, thinking=True)

    try:
        deleted = await channel.purge(limit=amount)
    except discord.HTTPException as e:
        logger.error(f"Bulk delete failed in channel {channel.id}: {e}")
        await send_reply(
            interaction,
            "❌ Failed to delete messages. Do I have permission?",
            ephemeral=True,
        )
        return

    logger.info(f"Deleted {len(deleted)} messages in channel {channel.id} for user {interaction.user.id}")
    await send_reply(interaction, f"🧹 Deleted {len(deleted)} messages.", ephemeral=True)


__all__ = ["BOT_VERSION", "ping", "user_info", "build_stats_embed", "stats", "clear_messages"]
