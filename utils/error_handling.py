# ╔════════════════════════════════════════════════════════════════════════════╗
# ║                  PLANNING BOT ERROR TYPES AND HANDLING                     ║
# ║ Error taxonomy for calendar lookups and date selection, plus helpers for   ║
# ║      Discord operations whose failure must never reach the user.           ║
# ╚════════════════════════════════════════════════════════════════════════════╝

# Standard library imports
from typing import Optional

# Third-party imports
import discord

# Local application imports
from utils.logging import logger

# ╔════════════════════════════════════════════════════════════════════════════╗
# ║ CALENDAR LOOKUP ERRORS                                                     ║
# ╚════════════════════════════════════════════════════════════════════════════╝

class CalendarError(Exception):
    """Base class for failures while retrieving or reading the calendar feed."""


class FetchError(CalendarError):
    """The feed could not be downloaded (transport error or non-2xx status)."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ParseError(CalendarError):
    """The feed body is not a readable iCalendar document."""

# ╔════════════════════════════════════════════════════════════════════════════╗
# ║ DATE SELECTION ERRORS                                                      ║
# ╚════════════════════════════════════════════════════════════════════════════╝

class SelectionError(Exception):
    """Base class for outcomes of the reaction-driven date picker."""


class SelectionTimeout(SelectionError):
    """No qualifying reaction arrived before the session expired."""


class InvalidSelection(SelectionError):
    """The chosen marker does not map to any candidate date."""

# ╔════════════════════════════════════════════════════════════════════════════╗
# ║ DISCORD OPERATION HELPERS                                                  ║
# ╚════════════════════════════════════════════════════════════════════════════╝

# --- safe_delete ---
# Deletes a Discord message, logging (not raising) on failure.
# Used for prompt cleanup where the user should never see an error.
# Args:
#     message: The discord.Message to delete.
# Returns: True if the message was deleted, False otherwise.
async def safe_delete(message) -> bool:
    try:
        await message.delete()
        return True
    except discord.NotFound:
        logger.debug(f"Message {getattr(message, 'id', '?')} was already deleted")
        return False
    except discord.HTTPException as e:
        logger.warning(f"Failed to delete message {getattr(message, 'id', '?')}: {e}")
        return False
