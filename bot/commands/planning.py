# ╔════════════════════════════════════════════════════════════════════════════╗
# ║                   PLANNING BOT PLANNING COMMAND HANDLERS                   ║
# ║   `!planning today` lookup and the `!planning` 5-day selection prompt      ║
# ╚════════════════════════════════════════════════════════════════════════════╝

"""
Handles the `!planning` text commands.

`!planning today` posts today's planning straight away. `!planning` posts a
prompt offering five days. The issuer picks one by reacting, and the bot then
posts that day's planning. If nobody picks within the timeout, the prompt is
removed and a notice is sent.
"""

from datetime import date
from typing import Awaitable, Callable, Optional

import discord

from bot.events import LookupResult, get_events_for_day_async
from bot.selection import SelectionSession, WaitFor, wait_for_selection
from utils.error_handling import InvalidSelection, SelectionTimeout, safe_delete
from utils.logging import logger
from utils.message_formatter import (
    INVALID_SELECTION_MESSAGE,
    TIMEOUT_MESSAGE,
    build_planning_embed,
    build_selection_embed,
)
from utils.timezone_utils import get_today

# Anything that returns the lookup result for a date
Lookup = Callable[[date], Awaitable[LookupResult]]

# ╔════════════════════════════════════════════════════════════════════════════╗
# ║ SINGLE DAY                                                                 ║
# ╚════════════════════════════════════════════════════════════════════════════╝

# --- post_planning_for_date ---
# Runs fetch → filter → compose → send for one day.
# Fetch/parse failures arrive as an error result and are posted as an
# error embed, never raised.
# Args:
#     channel: Where to send (any discord.abc.Messageable).
#     day: The date to look up.
#     lookup: Coroutine returning a LookupResult (defaults to the live feed).
# Returns: The sent message.
async def post_planning_for_date(channel, day: date, lookup: Optional[Lookup] = None):
    lookup = lookup or get_events_for_day_async
    result = await lookup(day)
    embed = build_planning_embed(result)
    return await channel.send(embed=embed)

# --- handle_today_command ---
# Handler for `!planning today`.
async def handle_today_command(message: discord.Message, lookup: Optional[Lookup] = None,
                               today: Optional[date] = None):
    day = today or get_today()
    logger.info(f"{message.author} requested planning for today ({day.isoformat()})")
    return await post_planning_for_date(message.channel, day, lookup)

# ╔════════════════════════════════════════════════════════════════════════════╗
# ║ MULTI DAY SELECTION                                                        ║
# ╚════════════════════════════════════════════════════════════════════════════╝

# --- handle_selection_command ---
# Handler for `!planning`.
# 1. Sends the prompt embed listing five days with their markers.
# 2. Adds the markers as reactions, in listed order.
# 3. Waits for the issuer's reaction (60s).
# 4. Resolved: posts the chosen day's planning, then deletes the prompt.
#    Timed out: deletes the prompt, then sends the timeout notice.
# Args:
#     message: The command message (its author is the only accepted reactor).
#     wait_for: Usually `client.wait_for`.
#     lookup: Optional lookup override (tests).
#     today: Optional first candidate date (defaults to local today).
async def handle_selection_command(message: discord.Message, wait_for: WaitFor,
                                   lookup: Optional[Lookup] = None, today: Optional[date] = None):
    channel = message.channel
    session = SelectionSession.create(message.author.id, today or get_today())

    prompt = await channel.send(embed=build_selection_embed(session.candidate_dates, session.markers, int(session.timeout)))
    for marker in session.markers:
        await prompt.add_reaction(marker)
    session = session.bind(prompt.id)
    logger.info(f"Date selection prompt {prompt.id} sent for {message.author}")

    try:
        chosen = await wait_for_selection(session, wait_for)
    except SelectionTimeout:
        await safe_delete(prompt)
        await channel.send(TIMEOUT_MESSAGE)
        return
    except InvalidSelection as e:
        logger.warning(f"Invalid selection on prompt {prompt.id}: {e}")
        await channel.send(INVALID_SELECTION_MESSAGE)
        await safe_delete(prompt)
        return

    await post_planning_for_date(channel, chosen, lookup)
    await safe_delete(prompt)
