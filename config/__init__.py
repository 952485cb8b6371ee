# ╔════════════════════════════════════════════════════════════════════════════╗
# ║                      CONFIGURATION PACKAGE INITIALIZER                     ║
# ║                                                                            ║
# ║  Startup validation and summary of the environment-driven settings.        ║
# ║  The raw values themselves live in utils/environ.py.                       ║
# ╚════════════════════════════════════════════════════════════════════════════╝

from .bot_config import (
    missing_required_config,  # Names of required variables that are unset
    validate_required_config, # Logs missing variables, returns True when complete
    get_config_summary,       # Secret-free dictionary of the active settings
    log_startup_config        # Logs the summary at startup
)
