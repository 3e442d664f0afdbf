"""Infrastructure API module."""
from .hypixel_client import RESULT_FIELDS, HypixelAPIClient
from .key_ring import KeyRing, is_valid_key
from .paths import build_path
from .enricher import enrich

__all__ = [
    'HypixelAPIClient',
    'RESULT_FIELDS',
    'KeyRing',
    'is_valid_key',
    'build_path',
    'enrich',
]
