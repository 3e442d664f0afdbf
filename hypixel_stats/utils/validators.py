"""Identifier checks used when routing player and guild lookups."""
import re

_UUID_RE = re.compile(r'^[0-9a-f]{8}-?[0-9a-f]{4}-?[0-9a-f]{4}-?[0-9a-f]{4}-?[0-9a-f]{12}$', re.IGNORECASE)
_GUILD_ID_RE = re.compile(r'^[0-9a-f]{24}$', re.IGNORECASE)


def clean(value: str) -> str:
    """Normalize a UUID or name: trim, drop dashes, lowercase."""
    return str(value).strip().replace('-', '').lower()


def is_uuid(value: object) -> bool:
    """Minecraft UUID, with or without dashes."""
    return isinstance(value, str) and bool(_UUID_RE.match(value.strip()))


def is_guild_id(value: object) -> bool:
    """Guild ids are 24 hex digit object ids."""
    return isinstance(value, str) and bool(_GUILD_ID_RE.match(value.strip()))
