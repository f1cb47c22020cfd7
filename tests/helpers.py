"""Fakes shared by the test modules."""

from unittest.mock import AsyncMock, MagicMock

OWNER_ID = 1001
OTHER_USER_ID = 2002


def make_interaction(user_id: int = OWNER_ID, timeout: float = 60.0) -> MagicMock:
    """
    Build a fake discord.Interaction.

    response.is_done() flips to True once the interaction is answered or
    deferred, like the real InteractionResponse.
    """
    interaction = MagicMock()
    interaction.user.id = user_id
    interaction.user.name = f"user{user_id}"
    interaction.client.pagination_timeout = timeout

    done = {"value": False}

    def _mark_done(*args, **kwargs):
        done["value"] = True

    interaction.response.is_done = MagicMock(side_effect=lambda: done["value"])
    interaction.response.send_message = AsyncMock(side_effect=_mark_done)
    interaction.response.edit_message = AsyncMock(side_effect=_mark_done)
    interaction.response.defer = AsyncMock(side_effect=_mark_done)
    interaction.followup.send = AsyncMock()

    message = MagicMock()
    message.edit = AsyncMock()
    interaction.original_response = AsyncMock(return_value=message)
    interaction.edit_original_response = AsyncMock()
    return interaction


def sent_text(interaction: MagicMock) -> str:
    """Content of the last response.send_message call."""
    args, kwargs = interaction.response.send_message.call_args
    return kwargs.get("content", args[0] if args else None)
