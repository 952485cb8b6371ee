# ╔════════════════════════════════════════════════════════════════════════════╗
# ║                    PLANNING BOT COMMANDS PACKAGE INIT                      ║
# ║    Exports command handlers for the router                                 ║
# ╚════════════════════════════════════════════════════════════════════════════╝

"""
Initializes the bot.commands package.

Imports and re-exports the handler function from each command module so the
command router (`bot/command_router.py`) can dispatch to them.
"""

from .planning import handle_selection_command, handle_today_command, post_planning_for_date
from .uwu import UWU_GIF, UWU_TRIGGER, handle_uwu_command

__all__ = [
    # Command Handlers
    'handle_today_command',
    'handle_selection_command',
    'handle_uwu_command',
    # Shared posting function
    'post_planning_for_date',
    # Constants
    'UWU_GIF',
    'UWU_TRIGGER',
]
