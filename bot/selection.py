# ╔════════════════════════════════════════════════════════════════════════════╗
# ║                    PLANNING BOT DATE SELECTION SESSION                     ║
# ║   Reaction-driven picker: offer N days, wait for one reaction, resolve.    ║
# ╚════════════════════════════════════════════════════════════════════════════╝

import asyncio
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Awaitable, Callable, Optional, Tuple

from utils.error_handling import InvalidSelection, SelectionTimeout
from utils.logging import logger

# Keycap markers, positionally mapped to candidate dates
SELECTION_MARKERS: Tuple[str, ...] = ("1️⃣", "2️⃣", "3️⃣", "4️⃣", "5️⃣")
SELECTION_DAYS = 5
SELECTION_TIMEOUT = 60.0

# discord.Client.wait_for signature, injected so tests need no gateway
WaitFor = Callable[..., Awaitable[tuple]]

# ╔════════════════════════════════════════════════════════════════════════════╗
# ║ SESSION                                                                    ║
# ╚════════════════════════════════════════════════════════════════════════════╝

@dataclass(frozen=True)
class SelectionSession:
    """
    State of one date picker prompt.

    Lives only while the prompt waits for a reaction. A session resolves
    at most once and is discarded afterwards.
    """
    issuer_id: int
    candidate_dates: Tuple[date, ...]
    prompt_message_id: Optional[int] = None
    markers: Tuple[str, ...] = SELECTION_MARKERS
    timeout: float = SELECTION_TIMEOUT

    @classmethod
    def create(cls, issuer_id: int, today: date, prompt_message_id: Optional[int] = None,
               days: int = SELECTION_DAYS, timeout: float = SELECTION_TIMEOUT) -> "SelectionSession":
        if days > len(SELECTION_MARKERS):
            raise ValueError(f"At most {len(SELECTION_MARKERS)} days can be offered, got {days}")
        dates = tuple(today + timedelta(days=offset) for offset in range(days))
        return cls(
            issuer_id=issuer_id,
            candidate_dates=dates,
            prompt_message_id=prompt_message_id,
            markers=SELECTION_MARKERS[:days],
            timeout=timeout,
        )

    def bind(self, prompt_message_id: int) -> "SelectionSession":
        """Return a copy tied to the sent prompt message."""
        return SelectionSession(
            issuer_id=self.issuer_id,
            candidate_dates=self.candidate_dates,
            prompt_message_id=prompt_message_id,
            markers=self.markers,
            timeout=self.timeout,
        )

    def matches(self, reaction, user) -> bool:
        """True for a registered marker, from the issuer, on the prompt message."""
        if user.id != self.issuer_id:
            return False
        if self.prompt_message_id is not None and reaction.message.id != self.prompt_message_id:
            return False
        return str(reaction.emoji) in self.markers

    def resolve(self, marker: str) -> date:
        try:
            index = self.markers.index(marker)
            return self.candidate_dates[index]
        except (ValueError, IndexError):
            raise InvalidSelection(f"Marker {marker!r} does not map to a candidate date")

# ╔════════════════════════════════════════════════════════════════════════════╗
# ║ WAIT                                                                       ║
# ╚════════════════════════════════════════════════════════════════════════════╝

# --- wait_for_selection ---
# Waits for the first qualifying reaction and maps it to a date.
# discord.py's wait_for races the reaction listener against the timeout and
# cancels whichever loses; reactions rejected by the check are skipped
# without ending the wait.
# Args:
#     session: The SelectionSession (bound to the prompt message).
#     wait_for: Usually `client.wait_for`.
# Returns: The chosen date.
# Raises: SelectionTimeout, InvalidSelection.
async def wait_for_selection(session: SelectionSession, wait_for: WaitFor) -> date:
    try:
        reaction, user = await wait_for("reaction_add", check=session.matches, timeout=session.timeout)
    except asyncio.TimeoutError:
        logger.info(f"Date selection for user {session.issuer_id} timed out after {session.timeout:.0f}s")
        raise SelectionTimeout(f"No selection within {session.timeout:.0f}s")
    chosen = session.resolve(str(reaction.emoji))
    logger.info(f"User {user.id} selected {chosen.isoformat()} via {reaction.emoji}")
    return chosen
