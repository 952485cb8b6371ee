"""
Test suite for the reaction-driven date picker and the `!planning` flows.
Discord objects are faked with unittest.mock; no gateway is involved.
"""
import asyncio
from datetime import date, timedelta
from unittest.mock import AsyncMock, MagicMock

import discord
import pytest

from bot.commands.planning import handle_selection_command, handle_today_command
from bot.events import LookupResult
from bot.selection import SELECTION_MARKERS, SelectionSession, wait_for_selection
from utils.error_handling import InvalidSelection, SelectionTimeout
from utils.message_formatter import NO_EVENTS_MESSAGE, TIMEOUT_MESSAGE

TODAY = date(2024, 3, 11)
ISSUER_ID = 42
PROMPT_ID = 999


def _reaction(emoji, message_id=PROMPT_ID):
    reaction = MagicMock()
    reaction.emoji = emoji
    reaction.message.id = message_id
    return reaction


def _user(user_id=ISSUER_ID):
    user = MagicMock()
    user.id = user_id
    return user


def fake_wait_for(*events):
    """
    Mimics discord.Client.wait_for over a fixed stream of (reaction, user)
    pairs: returns the first one accepted by `check`, or times out.
    """
    seen = []

    async def wait_for(event, check=None, timeout=None):
        assert event == "reaction_add"
        for reaction, user in events:
            seen.append((reaction, user))
            if check(reaction, user):
                return reaction, user
        raise asyncio.TimeoutError()

    wait_for.seen = seen
    return wait_for


def _command_message():
    prompt = MagicMock()
    prompt.id = PROMPT_ID
    prompt.add_reaction = AsyncMock()
    prompt.delete = AsyncMock()
    message = MagicMock()
    message.author.id = ISSUER_ID
    message.channel.send = AsyncMock(return_value=prompt)
    return message, prompt


def test_session_offers_five_consecutive_days():
    session = SelectionSession.create(ISSUER_ID, TODAY)
    assert session.candidate_dates == tuple(TODAY + timedelta(days=i) for i in range(5))
    assert session.markers == SELECTION_MARKERS
    assert len(set(session.markers)) == 5
    assert session.timeout == 60


def test_marker_index_two_resolves_to_today_plus_two():
    session = SelectionSession.create(ISSUER_ID, TODAY)
    assert session.resolve(SELECTION_MARKERS[2]) == TODAY + timedelta(days=2)


def test_unknown_marker_is_invalid_selection():
    session = SelectionSession.create(ISSUER_ID, TODAY)
    with pytest.raises(InvalidSelection):
        session.resolve("❌")


def test_matches_only_issuer_marker_on_prompt():
    session = SelectionSession.create(ISSUER_ID, TODAY).bind(PROMPT_ID)
    assert session.matches(_reaction("1️⃣"), _user())
    assert not session.matches(_reaction("1️⃣"), _user(7))
    assert not session.matches(_reaction("👍"), _user())
    assert not session.matches(_reaction("1️⃣", message_id=123), _user())


def test_non_qualifying_reactions_do_not_end_the_wait():
    session = SelectionSession.create(ISSUER_ID, TODAY).bind(PROMPT_ID)
    wait_for = fake_wait_for(
        (_reaction("3️⃣"), _user(7)),
        (_reaction("👍"), _user()),
        (_reaction("4️⃣"), _user()),
    )
    chosen = asyncio.run(wait_for_selection(session, wait_for))
    assert chosen == TODAY + timedelta(days=3)
    assert len(wait_for.seen) == 3


def test_wait_times_out_without_qualifying_reaction():
    session = SelectionSession.create(ISSUER_ID, TODAY).bind(PROMPT_ID)
    wait_for = fake_wait_for((_reaction("2️⃣"), _user(7)))
    with pytest.raises(SelectionTimeout):
        asyncio.run(wait_for_selection(session, wait_for))


def test_selection_flow_posts_chosen_day_then_deletes_prompt():
    message, prompt = _command_message()
    lookup = AsyncMock(side_effect=lambda day: LookupResult(day=day, events=[]))
    wait_for = fake_wait_for((_reaction("3️⃣"), _user()))

    asyncio.run(handle_selection_command(message, wait_for, lookup=lookup, today=TODAY))

    assert [c.args[0] for c in prompt.add_reaction.await_args_list] == list(SELECTION_MARKERS)
    lookup.assert_awaited_once_with(TODAY + timedelta(days=2))
    assert message.channel.send.await_count == 2
    planning_embed = message.channel.send.await_args_list[1].kwargs["embed"]
    assert "13/03/2024" in planning_embed.title
    prompt.delete.assert_awaited_once()


def test_selection_flow_timeout_deletes_prompt_and_notifies_once():
    message, prompt = _command_message()
    lookup = AsyncMock()
    wait_for = fake_wait_for()

    asyncio.run(handle_selection_command(message, wait_for, lookup=lookup, today=TODAY))

    prompt.delete.assert_awaited_once()
    lookup.assert_not_awaited()
    assert message.channel.send.await_count == 2
    message.channel.send.assert_awaited_with(TIMEOUT_MESSAGE)


def test_prompt_deletion_failure_is_not_surfaced():
    message, prompt = _command_message()
    response = MagicMock(status=403, reason="Forbidden")
    prompt.delete = AsyncMock(side_effect=discord.Forbidden(response, "Missing Permissions"))

    asyncio.run(handle_selection_command(message, fake_wait_for(), lookup=AsyncMock(), today=TODAY))

    prompt.delete.assert_awaited_once()
    message.channel.send.assert_awaited_with(TIMEOUT_MESSAGE)


def test_today_command_posts_single_day_planning():
    message, _ = _command_message()
    lookup = AsyncMock(return_value=LookupResult(day=TODAY, events=[]))

    asyncio.run(handle_today_command(message, lookup=lookup, today=TODAY))

    lookup.assert_awaited_once_with(TODAY)
    embed = message.channel.send.await_args.kwargs["embed"]
    assert embed.description == NO_EVENTS_MESSAGE
