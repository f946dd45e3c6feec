# src/jplaunch/telemetry/logger/processors.py

"""
Custom structlog processors used by the jplaunch logging setup.
"""

import logging
from typing import Any

from structlog.typing import EventDict, WrappedLogger

LOG_EMOJIS = {
    logging.DEBUG: "🐛",
    logging.INFO: "ℹ️",
    logging.WARNING: "⚠️",
    logging.ERROR: "❌",
    logging.CRITICAL: "💥",
}

# Keys callers may pass that only select an emoji and must not be rendered.
EXTRA_KEYS = ("emoji_key",)

EMOJI_KEYS = {
    "path": "📁",
    "launch": "🚀",
    "time": "⏱️",
    "fail": "🚫",
    "success": "🎉",
}


def add_emoji_processor(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Prefixes the event with an emoji picked from `emoji_key` or the log level."""
    emoji_key: Any = event_dict.get("emoji_key")
    emoji = EMOJI_KEYS.get(emoji_key) if emoji_key else None
    if emoji is None:
        level = logging._nameToLevel.get(str(event_dict.get("level", method_name)).upper())
        emoji = LOG_EMOJIS.get(level, "➡️")
    event = event_dict.get("event")
    if isinstance(event, str):
        event_dict["event"] = f"{emoji} {event}"
    return event_dict


def remove_extra_keys_processor(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    for key in EXTRA_KEYS:
        event_dict.pop(key, None)
    return event_dict

# 🔼⚙️
