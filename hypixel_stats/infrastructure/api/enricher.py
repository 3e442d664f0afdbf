"""Wraps player and guild payloads in their domain records."""
from typing import Any, Mapping, Union

from ...domain.entities import GuildRecord, PlayerRecord

ENRICHED_KINDS = {
    'player': PlayerRecord,
    'guild': GuildRecord,
}


def enrich(record: Mapping[str, Any], kind: str) -> Union[PlayerRecord, GuildRecord]:
    try:
        wrapper = ENRICHED_KINDS[kind]
    except KeyError:
        raise ValueError(f"Cannot enrich records of kind {kind!r}") from None
    if isinstance(record, wrapper):
        return record
    return wrapper(dict(record) if not isinstance(record, dict) else record)
