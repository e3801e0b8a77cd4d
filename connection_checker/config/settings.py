"""Process-level settings for the connection checker."""
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

ENV_PATH = Path(__file__).resolve().parent / '.env'
load_dotenv(dotenv_path=ENV_PATH)


def _optional_path(name: str) -> Optional[Path]:
    value = os.getenv(name, '').strip()
    return Path(value) if value else None


class Settings:
    """
    Values are read once at import. ``config/.env`` is loaded first but never
    overrides variables already present in the environment.

    Probe targets are deliberately not configured here: a default checker
    uses the built-in resolver table, and environment-driven targets are
    opt-in through ``TargetConfig.from_env()``.
    """

    # ── Logging ────────────────────────────────────────────────────────────
    LOG_LEVEL:   str            = os.getenv('CONNECTION_CHECKER_LOG_LEVEL', 'INFO')
    LOG_CONSOLE: bool           = os.getenv('CONNECTION_CHECKER_LOG_CONSOLE', 'false').strip().lower() == 'true'
    LOG_DIR:     Optional[Path] = _optional_path('CONNECTION_CHECKER_LOG_DIR')


settings = Settings()
