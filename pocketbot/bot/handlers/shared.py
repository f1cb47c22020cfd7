"""
Shared utilities for bot handlers.

Contains reply helpers and the pagination entry point used by the todo,
expense, and cashflow handlers.
"""

import logging
from typing import Optional, Sequence

import discord

from pocketbot.bot.pagination import DEFAULT_PAGE_SIZE, DEFAULT_TIMEOUT, PaginationSession
from pocketbot.bot.renderers import PageRenderer

logger = logging.getLogger(__name__)

GENERIC_ERROR = "There was an error executing this command."


async def send_reply(
    interaction: discord.Interaction,
    content: str = None,
    ephemeral: bool = False,
    **kwargs
) -> None:
    """
    Reply to an interaction whether or not it was already answered.

    The first reply goes through interaction.response; later ones (or replies
    after a defer) go through the followup webhook.
    """
    if interaction.response.is_done():
        await interaction.followup.send(content, ephemeral=ephemeral, **kwargs)
    else:
        await interaction.response.send_message(content, ephemeral=ephemeral, **kwargs)


async def start_pagination(
    interaction: discord.Interaction,
    items: Sequence,
    renderer: PageRenderer,
    per_page: Optional[int] = None,
    title: Optional[str] = None,
) -> PaginationSession:
    """
    Open a pagination session answering ``interaction``.

    ``per_page`` falls back to the default page size when not given. The
    session lifetime comes from the client (``pagination_timeout``).
    """
    timeout = getattr(interaction.client, "pagination_timeout", DEFAULT_TIMEOUT)
    session = PaginationSession(
        interaction,
        items,
        renderer,
        page_size=per_page or DEFAULT_PAGE_SIZE,
        title=title,
        timeout=timeout,
    )
    await session.start()
    return session


__all__ = ["GENERIC_ERROR", "send_reply", "start_pagination"]
