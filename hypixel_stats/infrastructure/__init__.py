"""Infrastructure layer - HTTP client, key rotation and enrichment."""
from .api import HypixelAPIClient, KeyRing, build_path, enrich

__all__ = [
    'HypixelAPIClient',
    'KeyRing',
    'build_path',
    'enrich',
]
