#!/usr/bin/env python3
"""
Planning Bot - Main Entry Point

A Discord bot that reads an iCalendar feed and posts the day's planning
on `!planning today`, or lets users pick one of the next five days with
`!planning`.
"""

import sys
import signal
import asyncio
from utils.logging import logger
from utils.environ import DISCORD_BOT_TOKEN

def signal_handler(signum, frame):
    """Handle shutdown signals gracefully."""
    logger.info(f"Received signal {signum}, initiating shutdown...")
    sys.exit(0)

def main():
    """Main application entry point."""
    try:
        signal.signal(signal.SIGINT, signal_handler)
        signal.signal(signal.SIGTERM, signal_handler)

        logger.info("=" * 60)
        logger.info("🗓️ Planning Bot Starting")
        logger.info("=" * 60)

        from config import validate_required_config, log_startup_config
        if not validate_required_config():
            logger.error("Please set DISCORD_BOT_TOKEN and ICAL_URL and try again.")
            sys.exit(1)
        log_startup_config()

        from bot.core import run_bot
        asyncio.run(run_bot(DISCORD_BOT_TOKEN))

    except KeyboardInterrupt:
        logger.info("Bot stopped by user")
    except Exception as e:
        logger.exception(f"Fatal error starting bot: {e}")
        sys.exit(1)
    finally:
        logger.info("🗓️ Planning Bot Shutdown Complete")

if __name__ == "__main__":
    main()
