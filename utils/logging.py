# ╔════════════════════════════════════════════════════════════════════════════╗
# ║                        PLANNING BOT LOGGING SETUP                          ║
# ║ Configures asynchronous, rotating file logging and colored console output. ║
# ║ Includes fallback mechanisms for log directory permissions.                ║
# ╚════════════════════════════════════════════════════════════════════════════╝

# Standard library imports
import logging
import sys
import platform
import atexit
import os
import tempfile
import traceback
from logging.handlers import QueueHandler, QueueListener, MemoryHandler, TimedRotatingFileHandler
from queue import Queue

# Third-party imports
from colorlog import ColoredFormatter

# Local application imports
from utils.environ import DEBUG, LOG_DIR

# ╔════════════════════════════════════════════════════════════════════════════╗
# ║ LOGGING CONFIGURATION AND CONSTANTS                                        ║
# ╚════════════════════════════════════════════════════════════════════════════╝

LOG_FILE = os.path.join(LOG_DIR, "bot.log")

# Fallback directories if LOG_DIR is not writable
FALLBACK_DIRS = [
    os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "logs"),
    tempfile.gettempdir(),
]

# Set by setup_log_directory()
active_log_file = None
log_dir_used = None

# ╔════════════════════════════════════════════════════════════════════════════╗
# ║ LOG DIRECTORY SETUP                                                        ║
# ╚════════════════════════════════════════════════════════════════════════════╝

# --- setup_log_directory ---
# Attempts to create and verify write access to the log directory.
# Tries the preferred LOG_DIR first, then iterates through FALLBACK_DIRS.
# Sets `active_log_file` and `log_dir_used` globals upon success.
# Returns: True if a writable log directory was found and set up, False otherwise.
def setup_log_directory():
    global active_log_file, log_dir_used
    # --- Try Preferred Directory ---
    parent = os.path.dirname(os.path.abspath(LOG_DIR))
    if os.access(parent, os.W_OK):
        try:
            os.makedirs(LOG_DIR, exist_ok=True)
            if os.access(LOG_DIR, os.W_OK):
                active_log_file = LOG_FILE
                log_dir_used = LOG_DIR
                return True
        except OSError as e:
            print(f"Notice: Could not use preferred log directory {LOG_DIR}: {e}")

    # --- Try Fallback Directories ---
    for fallback in FALLBACK_DIRS:
        try:
            os.makedirs(fallback, exist_ok=True)
            if os.access(fallback, os.W_OK):
                active_log_file = os.path.join(fallback, "planningbot.log")
                log_dir_used = fallback
                print(f"Using fallback log directory: {fallback}")
                return True
        except OSError as e:
            print(f"Notice: Could not use fallback log directory {fallback}: {e}")
            continue

    # --- Failure Case ---
    print("WARNING: Could not find any writable log directory. File logging disabled.")
    return False

has_valid_log_dir = setup_log_directory()

# ╔════════════════════════════════════════════════════════════════════════════╗
# ║ LOGGER INITIALIZATION AND CONFIGURATION                                    ║
# ╚════════════════════════════════════════════════════════════════════════════╝

logger = logging.getLogger("planningbot")
logger.setLevel(logging.DEBUG if DEBUG else logging.INFO)

# --- Prevent Re-initialization ---
if not getattr(logger, '_initialized', False):
    # --- Asynchronous Logging Setup ---
    # Handlers run on the listener thread so the event loop never blocks on I/O
    log_queue = Queue(-1)
    queue_handler = QueueHandler(log_queue)
    logger.addHandler(queue_handler)

    handlers = []
    try:
        # --- Define Formatters ---
        file_formatter = logging.Formatter(
            "[%(asctime)s] %(levelname)s in %(name)s [%(filename)s:%(lineno)d]: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
        console_formatter = ColoredFormatter(
            "%(log_color)s[%(asctime)s] %(levelname)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "bold_red",
            }
        )

        # --- Setup File Handler (if directory is valid) ---
        if has_valid_log_dir and active_log_file:
            try:
                file_handler = TimedRotatingFileHandler(
                    active_log_file,
                    when="midnight",
                    interval=1,
                    backupCount=7,
                    encoding="utf-8",
                    delay=True
                )
                file_handler.setFormatter(file_formatter)
                file_handler.setLevel(logging.DEBUG if DEBUG else logging.INFO)

                # Buffers records and flushes on ERROR or when full
                memory_handler = MemoryHandler(
                    capacity=1000,
                    flushLevel=logging.ERROR,
                    target=file_handler
                )
                memory_handler.setLevel(logging.DEBUG)
                handlers.append(memory_handler)
            except OSError as e:
                print(f"ERROR: Failed to set up file logging handler: {e}")
                has_valid_log_dir = False

        # --- Setup Console Handler ---
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(console_formatter)
        console_handler.setLevel(logging.DEBUG if DEBUG else logging.INFO)
        handlers.append(console_handler)

        # --- Start Queue Listener ---
        listener = QueueListener(log_queue, *handlers, respect_handler_level=True)
        listener.start()
        logger._listener = listener

        # --- Mark as Initialized and Register Cleanup ---
        logger._initialized = True

        def cleanup():
            try:
                # Stop first so queued records reach the handlers
                if getattr(logger, '_listener', None):
                    logger._listener.stop()
                for handler in handlers:
                    if isinstance(handler, MemoryHandler):
                        handler.flush()
                        handler.close()
                        if handler.target:
                            handler.target.close()
                    else:
                        handler.close()
            except Exception as e:
                print(f"Error during logging cleanup: {e}")

        atexit.register(cleanup)

        # --- Initial Log Messages ---
        logger.debug(f"Logging initialized ({platform.system()} {platform.release()})")
        logger.debug(f"Log Level: {'DEBUG' if DEBUG else 'INFO'}")
        if has_valid_log_dir and log_dir_used:
            logger.debug(f"Log Directory: {log_dir_used}")

    except Exception as e:
        # --- Critical Initialization Failure ---
        print(f"CRITICAL ERROR during logger initialization: {e}")
        traceback.print_exc()
        logger.handlers.clear()
        basic_handler = logging.StreamHandler(sys.stdout)
        basic_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        logger.addHandler(basic_handler)
        logger.setLevel(logging.INFO)
        logger.critical("Logging system failed to initialize properly. Using basic console logging.")

# ╔════════════════════════════════════════════════════════════════════════════╗
# ║ UTILITY FUNCTIONS                                                          ║
# ╚════════════════════════════════════════════════════════════════════════════╝

# --- get_log_file_location ---
# Returns: The active log file path, or a message indicating console-only logging.
def get_log_file_location():
    if has_valid_log_dir and active_log_file:
        return active_log_file
    return "Console only (File logging disabled)"
