# ╔════════════════════════════════════════════════════════════════════════════╗
# ║                       COMMAND ROUTER & DISPATCH                            ║
# ║   Classifies inbound text messages and routes them to command handlers     ║
# ╚════════════════════════════════════════════════════════════════════════════╝
"""
command_router.py: first-match dispatch of plain text messages.
"""

from enum import Enum

import discord

from bot.commands import (
    UWU_TRIGGER,
    handle_selection_command,
    handle_today_command,
    handle_uwu_command,
)
from utils.logging import logger

PLANNING_PREFIX = "!planning"
PLANNING_TODAY = "!planning today"


class CommandKind(Enum):
    IGNORE = "ignore"
    TRIVIAL = "trivial"
    TODAY = "today"
    SELECT = "select"

# --- classify_message ---
# Decides what an inbound message asks for. First match wins:
#   bot author → IGNORE, "uwu" (any case) → TRIVIAL,
#   "!planning today" → TODAY, "!planning" → SELECT, anything else → IGNORE.
# Planning commands are matched exactly and case-sensitively.
# Args:
#     content: The raw message text.
#     author_is_bot: Whether the author is a bot (including this one).
# Returns: The CommandKind to run.
def classify_message(content: str, author_is_bot: bool = False) -> CommandKind:
    if author_is_bot:
        return CommandKind.IGNORE
    if content.lower() == UWU_TRIGGER:
        return CommandKind.TRIVIAL
    if not content.startswith(PLANNING_PREFIX):
        return CommandKind.IGNORE
    if content == PLANNING_TODAY:
        return CommandKind.TODAY
    if content == PLANNING_PREFIX:
        return CommandKind.SELECT
    return CommandKind.IGNORE

# --- dispatch_message ---
# Routes a message to its handler. Failures are logged and contained to the
# command that raised them so the bot keeps serving other messages.
# Args:
#     message: The inbound discord.Message.
#     client: The discord.Client (provides wait_for for reaction prompts).
# Returns: The CommandKind that was handled.
async def dispatch_message(message: discord.Message, client: discord.Client) -> CommandKind:
    kind = classify_message(message.content, message.author.bot)
    if kind is CommandKind.IGNORE:
        return kind

    logger.debug(f"Dispatching {kind.value} command from {message.author} in #{message.channel}")
    try:
        if kind is CommandKind.TRIVIAL:
            await handle_uwu_command(message)
        elif kind is CommandKind.TODAY:
            await handle_today_command(message)
        elif kind is CommandKind.SELECT:
            await handle_selection_command(message, client.wait_for)
    except discord.HTTPException as e:
        logger.error(f"Discord API error while handling {kind.value} command: {e}")
    except Exception as e:
        logger.exception(f"Unexpected error while handling {kind.value} command: {e}")
    return kind
