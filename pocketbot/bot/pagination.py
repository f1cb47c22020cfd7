"""
Interactive pagination for record listings.

Paginator holds the page state and knows nothing about Discord.
PaginationSession binds a Paginator to one slash command interaction: it
sends the first page, lets only the invoking user flip pages with the
buttons of a PaginationView, and disables the buttons once its fixed
window runs out. The window is armed once when the message is sent and is
not extended by clicks.
"""

import asyncio
import logging
import math
from typing import Optional, Sequence

import discord

from pocketbot.bot.renderers import PageRenderer

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 5
DEFAULT_TIMEOUT = 60.0  # seconds
EMBED_COLOR = discord.Colour(0x0099FF)

PREVIOUS = "prev"
PAGE_INFO = "page_info"
NEXT = "next"


class Paginator:
    """Fixed-size windows over an immutable snapshot of records."""

    def __init__(self, items: Sequence, page_size: int = DEFAULT_PAGE_SIZE):
        if page_size <= 0:
            raise ValueError(f"page_size must be positive, got {page_size}")
        self.items = tuple(items)
        self.page_size = page_size
        self.current_page = 0

    @property
    def total_pages(self) -> int:
        return math.ceil(len(self.items) / self.page_size)

    @property
    def is_first(self) -> bool:
        return self.current_page == 0

    @property
    def is_last(self) -> bool:
        return self.current_page >= self.total_pages - 1

    def page_items(self) -> tuple:
        start = self.current_page * self.page_size
        return self.items[start:start + self.page_size]

    def apply(self, action: str) -> int:
        """
        Move the current page. Clamped at both ends, never wraps.

        Returns:
            The new current page index
        """
        if action == PREVIOUS:
            self.current_page = max(0, self.current_page - 1)
        elif action == NEXT:
            self.current_page = min(self.total_pages - 1, self.current_page + 1)
        # PAGE_INFO is a label, nothing to do
        return self.current_page


class PageButton(discord.ui.Button):
    def __init__(self, action: str, **kwargs):
        super().__init__(**kwargs)
        self.action = action

    async def callback(self, interaction: discord.Interaction) -> None:
        await self.view.session.turn_page(interaction, self.action)


class PaginationView(discord.ui.View):
    """Previous / page indicator / next buttons for one session."""

    def __init__(self, session: "PaginationSession"):
        super().__init__(timeout=None)  # Expiry is driven by the session
        self.session = session
        prefix = session.renderer.prefix

        self.previous_button = PageButton(
            PREVIOUS,
            custom_id=f"{prefix}_{PREVIOUS}",
            label="⬅️ Previous",
            style=discord.ButtonStyle.primary,
        )
        self.page_button = PageButton(
            PAGE_INFO,
            custom_id=f"{prefix}_{PAGE_INFO}",
            style=discord.ButtonStyle.secondary,
            disabled=True,
        )
        self.next_button = PageButton(
            NEXT,
            custom_id=f"{prefix}_{NEXT}",
            label="Next ➡️",
            style=discord.ButtonStyle.primary,
        )
        self.add_item(self.previous_button)
        self.add_item(self.page_button)
        self.add_item(self.next_button)
        self.refresh()

    def refresh(self, disable_all: bool = False) -> None:
        """Sync labels and disabled states with the paginator."""
        paginator = self.session.paginator
        self.previous_button.disabled = disable_all or paginator.is_first
        self.page_button.label = f"{paginator.current_page + 1}/{paginator.total_pages}"
        self.page_button.disabled = True
        self.next_button.disabled = disable_all or paginator.is_last

    async def interaction_check(self, interaction: discord.Interaction) -> bool:
        return await self.session.authorize(interaction)


class PaginationSession:
    """
    One paginated listing bound to a single message and a single user.

    Args:
        interaction: The slash command interaction to answer
        items: Records to page through (snapshotted)
        renderer: Render strategy for the record kind
        page_size: Records per page, 1-15 is enforced by the command options
        title: Embed title, defaults to the renderer's
        timeout: Seconds the buttons stay active after the first page is sent
    """

    def __init__(
        self,
        interaction: discord.Interaction,
        items: Sequence,
        renderer: PageRenderer,
        page_size: int = DEFAULT_PAGE_SIZE,
        title: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.interaction = interaction
        self.user_id = interaction.user.id
        self.paginator = Paginator(items, page_size)
        self.renderer = renderer
        self.title = title
        self.timeout = timeout

        self.view: Optional[PaginationView] = None
        self.message: Optional[discord.InteractionMessage] = None
        self.finished = False
        self._expiry_task: Optional[asyncio.Task] = None

    def build_embed(self) -> discord.Embed:
        paginator = self.paginator
        content = self.renderer.render(
            paginator.page_items(),
            paginator.current_page,
            paginator.total_pages,
            len(paginator.items),
            self.title,
        )
        embed = discord.Embed(title=content.title, description=content.body, colour=EMBED_COLOR)
        embed.set_footer(text=content.footer)
        return embed

    async def start(self) -> None:
        """Send the first page and, if there is more than one, arm the buttons."""
        if not self.paginator.items:
            await self.interaction.response.send_message(self.renderer.empty_message)
            self.finished = True
            return

        # Nothing to page through
        if self.paginator.total_pages == 1:
            await self.interaction.response.send_message(embed=self.build_embed())
            self.finished = True
            return

        self.view = PaginationView(self)
        await self.interaction.response.send_message(embed=self.build_embed(), view=self.view)
        self.message = await self.interaction.original_response()

        self._expiry_task = asyncio.create_task(self._expire_after(self.timeout))
        logger.debug(
            f"Pagination started: {self.renderer.prefix} user={self.user_id} "
            f"pages={self.paginator.total_pages} timeout={self.timeout}s"
        )

    async def _expire_after(self, delay: float) -> None:
        await asyncio.sleep(delay)
        await self.expire()

    async def authorize(self, interaction: discord.Interaction) -> bool:
        """Only the user who ran the command may flip pages."""
        if interaction.user.id == self.user_id:
            return True

        await interaction.response.send_message(
            "❌ These buttons are not for you!",
            ephemeral=True,
        )
        return False

    async def turn_page(self, interaction: discord.Interaction, action: str) -> None:
        """Apply a button press and update the message in place."""
        if self.finished:
            # Click raced the expiry; keep the page and the buttons disabled
            self.view.refresh(disable_all=True)
        else:
            self.paginator.apply(action)
            self.view.refresh()
        await interaction.response.edit_message(embed=self.build_embed(), view=self.view)

    async def expire(self) -> None:
        """Render the current page once more with every button disabled."""
        if self.finished:
            return
        self.finished = True

        if self._expiry_task is not None and self._expiry_task is not asyncio.current_task():
            self._expiry_task.cancel()

        self.view.refresh(disable_all=True)
        self.view.stop()

        try:
            await self.message.edit(embed=self.build_embed(), view=self.view)
        except discord.HTTPException as e:
            # Usually the message was deleted before the window ran out
            logger.info(f"Could not disable {self.renderer.prefix} pagination buttons: {e}")


__all__ = [
    "DEFAULT_PAGE_SIZE",
    "DEFAULT_TIMEOUT",
    "PREVIOUS",
    "PAGE_INFO",
    "NEXT",
    "Paginator",
    "PageButton",
    "PaginationView",
    "PaginationSession",
]
