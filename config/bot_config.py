# ╔════════════════════════════════════════════════════════════════════════════╗
# ║                      PLANNING BOT CONFIGURATION CHECKS                     ║
# ║                                                                            ║
# ║  Validates the environment-derived settings at startup and logs a          ║
# ║  summary that never exposes secrets.                                       ║
# ╚════════════════════════════════════════════════════════════════════════════╝

from typing import Any, Dict, List
from urllib.parse import urlsplit

from utils import environ
from utils.logging import logger, get_log_file_location

# --- missing_required_config ---
# Returns: Names of required variables that are unset or empty.
def missing_required_config() -> List[str]:
    required_vars = [
        ("DISCORD_BOT_TOKEN", environ.DISCORD_BOT_TOKEN),
        ("ICAL_URL", environ.ICAL_URL),
    ]
    return [name for name, value in required_vars if not value]

# --- validate_required_config ---
# Logs each missing required variable.
# Returns: True if every required variable is present.
def validate_required_config() -> bool:
    missing = missing_required_config()
    if missing:
        logger.error(f"Missing required environment variables: {', '.join(missing)}")
        return False
    return True

# --- get_config_summary ---
# Feed URLs often embed a private token, so only the host is reported.
def get_config_summary() -> Dict[str, Any]:
    feed_host = urlsplit(environ.ICAL_URL).netloc if environ.ICAL_URL else None
    return {
        "debug_mode": environ.DEBUG,
        "discord_token_set": bool(environ.DISCORD_BOT_TOKEN),
        "feed_host": feed_host,
        "timezone": environ.TIMEZONE or "host local",
        "fetch_timeout": environ.ICAL_FETCH_TIMEOUT,
        "log_file": get_log_file_location(),
    }

# --- log_startup_config ---
def log_startup_config():
    config = get_config_summary()
    logger.info("=" * 50)
    logger.info("🔧 Configuration Summary")
    logger.info("=" * 50)
    logger.info(f"Debug Mode: {config['debug_mode']}")
    logger.info(f"Discord Token: {'✅' if config['discord_token_set'] else '❌'}")
    logger.info(f"Calendar Feed: {config['feed_host'] or '❌'}")
    logger.info(f"Timezone: {config['timezone']}")
    logger.info(f"Fetch Timeout: {config['fetch_timeout']}s")
    logger.info(f"Log File: {config['log_file']}")
    logger.info("=" * 50)
