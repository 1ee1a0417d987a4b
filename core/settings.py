# core/settings.py
"""
Runtime settings, read from the environment.

Every value has a default so the app runs with no configuration at all.
Without OPENAI_API_KEY the report summary falls back to canned guidance.
"""

import os
from pathlib import Path
from typing import Optional

DEFAULT_MODEL = "gpt-4o-mini"
STORAGE_KEY = "hormonal-health-data"

# Bounded retry for extraction / generation: fixed delay, no backoff.
RETRY_ATTEMPTS = 3
RETRY_DELAY_SECONDS = 2.0

# Pause after upload before extraction starts.
UPLOAD_SETTLE_SECONDS = 1.0

# Simulated wearable pairing time.
PAIRING_DELAY_SECONDS = 2.0

MAX_UPLOAD_BYTES = 10 * 1024 * 1024


def get_data_dir() -> Path:
    return Path(os.environ.get("HORMONA_DATA_DIR", "data"))


def get_model() -> str:
    """
    Model used for report summaries.
    OPENAI_MODEL overrides the default.
    """
    return os.environ.get("OPENAI_MODEL", DEFAULT_MODEL)


def get_api_key() -> Optional[str]:
    return os.environ.get("OPENAI_API_KEY") or None


def get_log_level() -> str:
    return os.environ.get("HORMONA_LOG_LEVEL", "INFO").upper()
