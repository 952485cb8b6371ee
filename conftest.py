"""
Shared test setup: pins the environment before any bot module is imported.
"""
import os
import tempfile

# Deterministic "local time" for day windows and formatting
os.environ["TIMEZONE"] = "Europe/Paris"
os.environ.setdefault("LOG_DIR", os.path.join(tempfile.gettempdir(), "planningbot-test-logs"))
os.environ.setdefault("ICAL_URL", "webcal://calendar.example.test/planning.ics")
os.environ.setdefault("DISCORD_BOT_TOKEN", "test_token")
