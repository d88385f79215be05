"""Discord bot entry point for the Taigi lookup bot."""
from __future__ import annotations

import logging
from typing import Optional

import discord
from discord.ext import commands
from dotenv import load_dotenv

from .adapters.discord import deliver_reply
from .config import BotConfig
from .models import LookupRequest
from .service import LookupService

logger = logging.getLogger(__name__)


def default_intents() -> discord.Intents:
    intents = discord.Intents.none()
    intents.guilds = True
    intents.guild_messages = True
    intents.dm_messages = True
    intents.message_content = True
    return intents


def should_handle(message: discord.Message, channel_id: int) -> bool:
    """Only human messages in the lookup channel trigger a search."""

    if message.author.bot:
        return False
    return message.channel.id == channel_id


def build_bot(
    config: BotConfig,
    intents: Optional[discord.Intents] = None,
    service: Optional[LookupService] = None,
) -> commands.Bot:
    intents = intents or default_intents()
    bot = commands.Bot(command_prefix="!", intents=intents)
    service = service or LookupService(config.settings)
    setattr(bot, "lookup_service", service)

    @bot.event
    async def on_ready() -> None:
        logger.info("%s is connected!", bot.user)

    @bot.event
    async def on_message(message: discord.Message) -> None:
        if not should_handle(message, config.channel_id):
            return
        request = LookupRequest.from_text(message.content)
        logger.debug("Lookup requested in %s: %r", message.channel.id, request.keyword)
        reply = await service.handle(request)
        await deliver_reply(message, reply)

    return bot


def main() -> None:
    load_dotenv()
    logging.basicConfig(level=logging.INFO)
    config = BotConfig.from_env()
    bot = build_bot(config)
    bot.run(config.token, log_handler=None)


__all__ = ["build_bot", "default_intents", "main", "should_handle"]
