"""
Test suite for text command classification and dispatch.
"""
import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from bot.command_router import CommandKind, classify_message, dispatch_message
from bot.commands import UWU_GIF, handle_uwu_command


@pytest.mark.parametrize("content, expected", [
    ("uwu", CommandKind.TRIVIAL),
    ("UwU", CommandKind.TRIVIAL),
    ("!planning today", CommandKind.TODAY),
    ("!planning", CommandKind.SELECT),
    ("!planning tomorrow", CommandKind.IGNORE),
    ("!planningtoday", CommandKind.IGNORE),
    ("!Planning", CommandKind.IGNORE),
    ("!planning Today", CommandKind.IGNORE),
    ("uwu please", CommandKind.IGNORE),
    ("hello there", CommandKind.IGNORE),
    ("", CommandKind.IGNORE),
])
def test_classify_message(content, expected):
    assert classify_message(content) is expected


def test_bot_authored_messages_are_ignored():
    assert classify_message("!planning today", author_is_bot=True) is CommandKind.IGNORE
    assert classify_message("uwu", author_is_bot=True) is CommandKind.IGNORE


def _message(content, bot=False):
    message = MagicMock()
    message.content = content
    message.author.bot = bot
    message.channel.send = AsyncMock()
    return message


def test_dispatch_routes_today_command():
    message = _message("!planning today")
    with patch("bot.command_router.handle_today_command", new=AsyncMock()) as handler:
        kind = asyncio.run(dispatch_message(message, MagicMock()))
    assert kind is CommandKind.TODAY
    handler.assert_awaited_once_with(message)


def test_dispatch_routes_selection_with_client_wait_for():
    message = _message("!planning")
    client = MagicMock()
    with patch("bot.command_router.handle_selection_command", new=AsyncMock()) as handler:
        asyncio.run(dispatch_message(message, client))
    handler.assert_awaited_once_with(message, client.wait_for)


def test_dispatch_ignores_unrelated_text():
    message = _message("!planning next week")
    with patch("bot.command_router.handle_today_command", new=AsyncMock()) as today, \
         patch("bot.command_router.handle_selection_command", new=AsyncMock()) as select:
        kind = asyncio.run(dispatch_message(message, MagicMock()))
    assert kind is CommandKind.IGNORE
    today.assert_not_awaited()
    select.assert_not_awaited()
    message.channel.send.assert_not_awaited()


def test_dispatch_contains_handler_failures():
    message = _message("!planning today")
    with patch("bot.command_router.handle_today_command", new=AsyncMock(side_effect=RuntimeError("boom"))):
        kind = asyncio.run(dispatch_message(message, MagicMock()))
    assert kind is CommandKind.TODAY


def test_uwu_replies_with_media_link():
    message = _message("UWU")
    asyncio.run(handle_uwu_command(message))
    message.channel.send.assert_awaited_once_with(UWU_GIF)
