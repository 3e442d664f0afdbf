"""Round-robin rotation over the configured API keys."""
import re
import threading
from typing import Sequence, Tuple, Union

from ...core.exceptions import ConfigurationError
from ...core.logging import get_logger

logger = get_logger(__name__, service="hypixel")

KEY_PATTERN = re.compile(r'[a-z0-9]{8}-(?:[a-z0-9]{4}-){3}[a-z0-9]{12}')


def is_valid_key(candidate: object) -> bool:
    return isinstance(candidate, str) and KEY_PATTERN.fullmatch(candidate) is not None


class KeyRing:
    """
    Holds the validated keys and a rotation cursor.

    The first ``next_key()`` call advances before reading, so with several
    keys rotation starts at index 1. The cursor is only touched under the
    lock; key values are never logged, only indices.
    """

    def __init__(self, keys: Union[str, Sequence[str]]):
        if isinstance(keys, str):
            candidates = [keys]
        elif isinstance(keys, dict):
            raise ConfigurationError("Mappings are not supported, you must use a list of keys.")
        elif isinstance(keys, (list, tuple)):
            candidates = list(keys)
        else:
            raise ConfigurationError("Keys must be a 'string' or a 'list of keys'.")

        valid = tuple(k for k in candidates if is_valid_key(k))
        if not valid:
            raise ConfigurationError(
                "No valid keys were provided.",
                {"provided": len(candidates)},
            )
        dropped = len(candidates) - len(valid)
        if dropped:
            logger.warning(lambda: f"Ignoring {dropped} malformed API key(s)")

        self._keys: Tuple[str, ...] = valid
        self._cursor = 0
        self._lock = threading.Lock()
        logger.info(lambda: f"Key ring initialized with {len(valid)} key(s)")

    def __len__(self) -> int:
        return len(self._keys)

    @property
    def keys(self) -> Tuple[str, ...]:
        return self._keys

    @property
    def cursor(self) -> int:
        return self._cursor

    def next_key(self) -> str:
        """Advance the cursor (wrapping) and return the key it lands on."""
        with self._lock:
            self._cursor = (self._cursor + 1) % len(self._keys)
            index = self._cursor
        logger.trace(lambda: "rotated key", extra={"key_index": index})
        return self._keys[index]
