"""Client settings loaded from the environment."""
import os
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from ..core.exceptions import ConfigurationError

ENV_PATH = Path.cwd() / '.env'
load_dotenv(dotenv_path=ENV_PATH)


def parse_keys(raw: Optional[str]) -> List[str]:
    """Split a comma separated key list, dropping blanks."""
    if not raw:
        return []
    return [k.strip() for k in raw.split(',') if k.strip()]


def _optional_path(raw: Optional[str]) -> Optional[Path]:
    return Path(raw).expanduser() if raw and raw.strip() else None


class Settings:
    """
    HYPIXEL_API_KEYS takes precedence over the single HYPIXEL_API_KEY.
    Keys are filtered again by the key ring, malformed entries are dropped
    there rather than here.
    """

    HYPIXEL_API_KEYS: List[str] = (
        parse_keys(os.getenv('HYPIXEL_API_KEYS'))
        or parse_keys(os.getenv('HYPIXEL_API_KEY'))
    )

    # ── HTTP ───────────────────────────────────────────────────────────────
    API_HOST:        str   = os.getenv('HYPIXEL_API_HOST', 'https://api.hypixel.net').rstrip('/')
    REQUEST_TIMEOUT: float = float(os.getenv('HYPIXEL_REQUEST_TIMEOUT', '30'))
    USER_AGENT:      str   = os.getenv('HYPIXEL_USER_AGENT', 'hypixel-stats/1.0')

    # ── Logging ────────────────────────────────────────────────────────────
    LOG_LEVEL: str            = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR:   Optional[Path] = _optional_path(os.getenv('LOG_DIR'))

    @classmethod
    def validate(cls) -> None:
        if not cls.HYPIXEL_API_KEYS:
            raise ConfigurationError("HYPIXEL_API_KEYS or HYPIXEL_API_KEY must be set in .env")


settings = Settings()
