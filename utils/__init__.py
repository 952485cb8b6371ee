"""
utils package: configuration, logging, timezone, error handling and message
formatting helpers shared by the bot.

Submodules are imported explicitly (e.g. `from utils.logging import logger`);
this package does not re-export them, since `utils.message_formatter` depends
on `bot.events`, which itself imports from `utils`.
"""
