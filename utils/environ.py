# ╔════════════════════════════════════════════════════════════════════════════╗
# ║                       ENVIRONMENT CONFIGURATION                            ║
# ║    Centralized access and type conversion for environment variables.       ║
# ║   Includes helpers for boolean, integer, string values and feed URLs.      ║
# ╚════════════════════════════════════════════════════════════════════════════╝

# Standard library imports
import os
from typing import Optional

# Third-party imports
from dotenv import load_dotenv

# Load a local .env file (if any) before reading variables below.
load_dotenv()

# ╔════════════════════════════════════════════════════════════════════════════╗
# ║ HELPER FUNCTIONS                                                           ║
# ╚════════════════════════════════════════════════════════════════════════════╝

# --- get_bool_env ---
# Retrieves an environment variable and interprets it as a boolean.
# Considers '1', 'true', 'yes' (case-insensitive) as True.
# Args:
#     var_name: The name of the environment variable.
#     default: The default boolean value if the variable is not set.
# Returns: The boolean value of the environment variable or the default.
def get_bool_env(var_name: str, default: bool = False) -> bool:
    val = os.getenv(var_name, str(default)).lower()
    return val in ("1", "true", "yes")

# --- get_int_env ---
# Retrieves an environment variable and converts it to an integer.
# Args:
#     var_name: The name of the environment variable.
#     default: The default integer value if the variable is not set or invalid.
# Returns: The integer value of the environment variable or the default.
def get_int_env(var_name: str, default: int = 0) -> int:
    val_str = os.getenv(var_name)
    if val_str is None:
        return default
    try:
        return int(val_str)
    except ValueError:
        return default

# --- get_str_env ---
# Retrieves an environment variable as a string.
# Args:
#     var_name: The name of the environment variable.
#     default: The default string value if the variable is not set.
# Returns: The string value of the environment variable or the default.
def get_str_env(var_name: str, default: Optional[str] = "") -> Optional[str]:
    return os.getenv(var_name, default)

# --- normalize_feed_url ---
# Calendar apps hand out subscription links as webcal://, which is plain
# HTTPS underneath. Rewrites the scheme so requests can fetch it.
# Args:
#     url: The raw feed URL (may be None).
# Returns: The URL with a leading webcal:// replaced by https://, or None.
def normalize_feed_url(url: Optional[str]) -> Optional[str]:
    if not url:
        return None
    url = url.strip()
    if url.lower().startswith("webcal://"):
        return "https://" + url[len("webcal://"):]
    return url

# ╔════════════════════════════════════════════════════════════════════════════╗
# ║ CORE CONFIGURATION VARIABLES                                               ║
# ╚════════════════════════════════════════════════════════════════════════════╝

# Debug mode flag (controls verbose logging)
DEBUG: bool = get_bool_env("DEBUG", False)

# Discord Bot Token (required for Discord API authentication)
# DISCORD_TOKEN is accepted as an alias for older deployments.
DISCORD_BOT_TOKEN: Optional[str] = get_str_env("DISCORD_BOT_TOKEN", None) or get_str_env("DISCORD_TOKEN", None)

# Calendar feed URL (required), webcal:// rewritten to https://
ICAL_URL: Optional[str] = normalize_feed_url(get_str_env("ICAL_URL", None))

# ╔════════════════════════════════════════════════════════════════════════════╗
# ║ ADDITIONAL CONFIGURATION VARIABLES                                         ║
# ╚════════════════════════════════════════════════════════════════════════════╝

# IANA timezone used as "local time" for day windows and display.
# Empty means the host's local timezone.
TIMEZONE: str = get_str_env("TIMEZONE", "")

# Seconds to wait for the calendar feed before giving up
ICAL_FETCH_TIMEOUT: int = get_int_env("ICAL_FETCH_TIMEOUT", 30)

# Preferred log directory (often mounted in Docker)
LOG_DIR: str = get_str_env("LOG_DIR", "/data/logs")
