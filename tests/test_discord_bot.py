"""Tests for the Discord binding: filtering messages and delivering replies."""
from __future__ import annotations

from unittest.mock import AsyncMock, Mock

import pytest

from taigi_lookup.adapters.discord.handlers import _clamp_text, deliver_reply
from taigi_lookup.config import BotConfig
from taigi_lookup.discord_bot import build_bot, default_intents, should_handle
from taigi_lookup.models import LookupRequest, Reply

CHANNEL_ID = 1234


def _message(content="食飯", *, channel_id=CHANNEL_ID, bot=False):
    message = Mock()
    message.content = content
    message.author.bot = bot
    message.channel.id = channel_id
    message.channel.send = AsyncMock()
    message.add_reaction = AsyncMock()
    return message


@pytest.fixture
def config(settings):
    return BotConfig(token="secret", channel_id=CHANNEL_ID, settings=settings)


@pytest.fixture
def service():
    stub = Mock()
    stub.handle = AsyncMock(return_value=Reply.text("Found 1 result"))
    return stub


def test_intents_include_message_content():
    intents = default_intents()
    assert intents.message_content
    assert intents.guild_messages
    assert intents.dm_messages


def test_should_handle_filters_bots_and_other_channels():
    assert should_handle(_message(), CHANNEL_ID)
    assert not should_handle(_message(bot=True), CHANNEL_ID)
    assert not should_handle(_message(channel_id=999), CHANNEL_ID)


@pytest.mark.asyncio
async def test_on_message_replies_in_origin_channel(config, service):
    bot = build_bot(config, service=service)
    message = _message("  食飯  ")

    await bot.on_message(message)

    request = service.handle.await_args.args[0]
    assert request == LookupRequest("食飯")
    message.channel.send.assert_awaited_once_with("Found 1 result")
    message.add_reaction.assert_not_awaited()


@pytest.mark.asyncio
async def test_on_message_ignores_other_channels(config, service):
    bot = build_bot(config, service=service)

    await bot.on_message(_message(channel_id=999))
    await bot.on_message(_message(bot=True))

    service.handle.assert_not_awaited()


@pytest.mark.asyncio
async def test_reaction_reply_reacts_on_message():
    message = _message()

    await deliver_reply(message, Reply.reaction("❌"))

    message.add_reaction.assert_awaited_once_with("❌")
    message.channel.send.assert_not_awaited()


@pytest.mark.asyncio
async def test_send_failure_is_logged_not_raised(caplog):
    message = _message()
    message.channel.send.side_effect = RuntimeError("403 Forbidden")

    await deliver_reply(message, Reply.text("hello"))

    assert "Failed to send lookup message" in caplog.text


def test_clamp_text_limits_length():
    assert _clamp_text("short") == "short"
    clamped = _clamp_text("x" * 5000)
    assert len(clamped) == 1900
    assert clamped.endswith("…")
