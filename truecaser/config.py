"""Configuration defaults and .env loading.

WHY: The CLI and the HTTP service share a handful of settings (where the
model lives, how to treat unknown words, how chatty logging is). Keeping
them in one module makes them easy to find and override per deployment.

HOW: python-dotenv loads the .env file on import. Each setting is a
module-level constant read from the environment with a default. The
load_* helpers validate values and give clear errors.

RULES:
- TRUECASER_MODEL_PATH: model file used by the HTTP service and as CLI default
- TRUECASER_UNKNOWN_WORDS: "preserve" (default) or "lowercase"
- TRUECASER_LOG_LEVEL: standard logging level name, default WARNING
- TRUECASER_ENCODING: text encoding for corpus and input files, default utf-8
- All defaults can be overridden via environment variables
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from dotenv import load_dotenv

from truecaser.core.model import UnknownWordPolicy

# Load .env from the working directory
load_dotenv()

DEFAULT_MODEL_PATH = os.getenv("TRUECASER_MODEL_PATH", "truecase-model.json")
DEFAULT_UNKNOWN_WORDS = os.getenv("TRUECASER_UNKNOWN_WORDS", UnknownWordPolicy.PRESERVE.value)
DEFAULT_LOG_LEVEL = os.getenv("TRUECASER_LOG_LEVEL", "WARNING")
DEFAULT_ENCODING = os.getenv("TRUECASER_ENCODING", "utf-8")


def load_unknown_word_policy(value: Optional[str] = None) -> UnknownWordPolicy:
    """Parse an unknown-word policy name.

    WHY: The policy arrives as free text from the environment or a CLI
    flag; a typo must fail loudly instead of silently changing output.

    RULES:
    - value=None reads TRUECASER_UNKNOWN_WORDS (default "preserve")
    - Matching is case-insensitive and ignores surrounding whitespace
    - Raises ValueError listing the allowed values otherwise
    """
    raw = DEFAULT_UNKNOWN_WORDS if value is None else value
    try:
        return UnknownWordPolicy(raw.strip().lower())
    except ValueError as exc:
        allowed = ", ".join(p.value for p in UnknownWordPolicy)
        raise ValueError(
            "Invalid unknown-word policy '{}'. Allowed: {}".format(raw, allowed)
        ) from exc


def load_log_level(value: Optional[str] = None) -> int:
    """Resolve a logging level name (e.g. "INFO") to its numeric value."""
    raw = (DEFAULT_LOG_LEVEL if value is None else value).strip().upper()
    level = logging.getLevelName(raw)
    if not isinstance(level, int):
        raise ValueError("Invalid log level '{}'".format(raw))
    return level
