"""Discord message helpers and formatting utilities."""

from __future__ import annotations

import logging

import discord

from ...models import Reply, ReplyKind

logger = logging.getLogger(__name__)


_MAX_MESSAGE_LENGTH = 1900


def _clamp_text(text: str) -> str:
    """Ensure Discord-compatible message length."""

    if len(text) <= _MAX_MESSAGE_LENGTH:
        return text
    return text[: _MAX_MESSAGE_LENGTH - 1].rstrip() + "…"


async def _send_text(channel: discord.abc.Messageable, content: str, *, purpose: str) -> None:
    try:
        await channel.send(_clamp_text(content))
    except Exception:
        logger.exception("Failed to send %s message", purpose)


async def _add_reaction(message: discord.Message, emoji: str) -> None:
    try:
        await message.add_reaction(emoji)
    except Exception:  # pragma: no cover - defensive logging
        logger.exception("Failed to add %s reaction", emoji)


async def deliver_reply(message: discord.Message, reply: Reply, *, purpose: str = "lookup") -> None:
    """Post a reply in the channel the message came from.

    Failures are logged only: the reply was the sole way to reach the user.
    """

    if reply.kind is ReplyKind.REACTION:
        await _add_reaction(message, reply.content)
        return
    await _send_text(message.channel, reply.content, purpose=purpose)


__all__ = ["_clamp_text", "deliver_reply"]
