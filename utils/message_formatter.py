# ╔════════════════════════════════════════════════════════════════════════════╗
# ║                       DISCORD MESSAGE FORMATTERS                           ║
# ║  Builds the planning embed for one day and the date-selection prompt.      ║
# ╚════════════════════════════════════════════════════════════════════════════╝

# Standard library imports
from datetime import date, datetime
from typing import List, Optional, Sequence

# Third-party imports
import discord

# Local application imports
from bot.events.models import Event, LookupResult
from utils.logging import logger
from utils.timezone_utils import get_local_timezone

# ╔════════════════════════════════════════════════════════════════════════════╗
# ║ CONSTANTS                                                                  ║
# ╚════════════════════════════════════════════════════════════════════════════╝

PLANNING_COLOR = 0x0099ff
ERROR_COLOR = 0xff0000
SELECTION_COLOR = 0xf0b232

PLANNING_FOOTER = "MyEfrei Planning Bot"
SELECTION_FOOTER = "Répondez avec une réaction !"

UNTITLED_EVENT = "Sans titre"
NO_EVENTS_MESSAGE = "Aucun événement prévu pour cette journée. Profitez-en !"
ERROR_MESSAGE = "Désolé, une erreur est survenue lors de la récupération de l'emploi du temps : {error}"
TIMEOUT_MESSAGE = "Aucune sélection de date n'a été faite dans le temps imparti."
INVALID_SELECTION_MESSAGE = "Sélection de date invalide."

# Discord API limits
MAX_EMBED_FIELDS = 25
MAX_FIELD_VALUE = 1024

# ╔════════════════════════════════════════════════════════════════════════════╗
# ║ HELPER FUNCTIONS                                                           ║
# ╚════════════════════════════════════════════════════════════════════════════╝

# --- format_date ---
# French short date, e.g. 19/10/2026.
def format_date(day: date) -> str:
    return day.strftime("%d/%m/%Y")

# --- format_time ---
# 24h clock, e.g. 08:30. Events are already in local time.
def format_time(moment: datetime) -> str:
    return moment.strftime("%H:%M")

# --- first_description_line ---
# Extracts the "professor" part of an event description: everything before the
# first line break. Feeds are inconsistent about escaping, so both an escaped
# "\n" (backslash + n) and an actual newline count as a line break.
# Args:
#     description: The raw description text (may be None).
# Returns: The first line, stripped, or None if nothing is left.
def first_description_line(description: Optional[str]) -> Optional[str]:
    if not description:
        return None
    lines = description.split("\\n", 1)[0].splitlines()
    first = lines[0].strip() if lines else ""
    return first or None

# --- format_event_field ---
# Builds the (name, value) pair of one embed field for an event.
# Location and professor lines are omitted when absent.
def format_event_field(event: Event) -> tuple[str, str]:
    name = f"**{event.title or UNTITLED_EVENT}**"
    lines = [f"Heure: {format_time(event.start)} - {format_time(event.end)}"]
    if event.location:
        lines.append(f"Lieu: {event.location}")
    professor = first_description_line(event.description)
    if professor:
        lines.append(f"Prof: {professor}")
    value = "\n".join(lines)
    if len(value) > MAX_FIELD_VALUE:
        value = value[:MAX_FIELD_VALUE - 1] + "…"
    return name, value

# ╔════════════════════════════════════════════════════════════════════════════╗
# ║ PLANNING EMBED                                                             ║
# ╚════════════════════════════════════════════════════════════════════════════╝

# --- build_planning_embed ---
# Turns a lookup result into the embed posted in the channel.
# One field per event in feed order; a fixed message when there is nothing
# scheduled; an error-colored description when the lookup failed.
# Args:
#     result: The LookupResult for the requested day.
#     now: Optional timestamp for the embed (defaults to the current time).
# Returns: A discord.Embed ready to send.
def build_planning_embed(result: LookupResult, now: Optional[datetime] = None) -> discord.Embed:
    embed = discord.Embed(
        title=f"🗓️ Emploi du temps pour le {format_date(result.day)}",
        color=PLANNING_COLOR,
        timestamp=now or datetime.now(get_local_timezone()),
    )
    footer = PLANNING_FOOTER

    if not result.ok:
        embed.description = ERROR_MESSAGE.format(error=result.error)
        embed.color = ERROR_COLOR
    elif not result.events:
        embed.description = NO_EVENTS_MESSAGE
    else:
        shown = result.events[:MAX_EMBED_FIELDS]
        for event in shown:
            name, value = format_event_field(event)
            embed.add_field(name=name, value=value, inline=False)
        hidden = len(result.events) - len(shown)
        if hidden:
            logger.warning(f"Planning for {result.day.isoformat()} has {len(result.events)} events, only {len(shown)} shown")
            footer = f"{PLANNING_FOOTER} • {hidden} événement(s) non affiché(s)"

    embed.set_footer(text=footer)
    return embed

# ╔════════════════════════════════════════════════════════════════════════════╗
# ║ SELECTION PROMPT                                                           ║
# ╚════════════════════════════════════════════════════════════════════════════╝

# --- build_selection_embed ---
# Lists each candidate date tagged with its reaction marker, in order.
# Args:
#     dates: The candidate dates.
#     markers: The reaction emojis, positionally matched to `dates`.
#     timeout_seconds: Validity shown to the user.
# Returns: A discord.Embed for the selection prompt.
def build_selection_embed(dates: Sequence[date], markers: Sequence[str], timeout_seconds: int = 60) -> discord.Embed:
    if len(markers) < len(dates):
        raise ValueError(f"Need {len(dates)} markers, got {len(markers)}")
    embed = discord.Embed(
        title="🗓️ Choisissez une date pour votre emploi du temps",
        description=(
            "Réagissez avec l'emoji correspondant au jour désiré.\n"
            f"*(Sélection valide pour {timeout_seconds} secondes)*"
        ),
        color=SELECTION_COLOR,
        timestamp=datetime.now(get_local_timezone()),
    )
    for marker, day in zip(markers, dates):
        embed.add_field(name=f"{marker} {format_date(day)}", value="\u200b", inline=False)
    embed.set_footer(text=SELECTION_FOOTER)
    return embed

# ╔════════════════════════════════════════════════════════════════════════════╗
# ║ EXPORTS                                                                    ║
# ╚════════════════════════════════════════════════════════════════════════════╝

__all__: List[str] = [
    'build_planning_embed',
    'build_selection_embed',
    'format_event_field',
    'first_description_line',
    'format_date',
    'format_time',
    'NO_EVENTS_MESSAGE',
    'TIMEOUT_MESSAGE',
    'INVALID_SELECTION_MESSAGE',
    'UNTITLED_EVENT',
    'PLANNING_COLOR',
    'ERROR_COLOR',
    'SELECTION_COLOR',
]
