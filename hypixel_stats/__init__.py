"""
Hypixel Stats
=============

Asynchronous client for the Hypixel public API.

Features:
- Round-robin rotation over several API keys
- Awaitable and callback calling conventions on every operation
- Player and guild records with derived rank, level and online status

Version: 1.0.0
"""

__version__ = "1.0.0"

from .core import (
    HypixelError,
    ConfigurationError,
    EmptyResponseError,
    InvalidResponseError,
    RequestFailedError,
    ApiRequestError,
)

from .domain import (
    PlayerRecord, GuildRecord,
    PackageRank, StaffRank,
    network_level, is_online, rank_label,
)

from .infrastructure import HypixelAPIClient, KeyRing

from .config import settings

__all__ = [
    '__version__',

    # Errors
    'HypixelError',
    'ConfigurationError',
    'EmptyResponseError',
    'InvalidResponseError',
    'RequestFailedError',
    'ApiRequestError',

    # Domain
    'PlayerRecord',
    'GuildRecord',
    'PackageRank',
    'StaffRank',
    'network_level',
    'is_online',
    'rank_label',

    # Infrastructure
    'HypixelAPIClient',
    'KeyRing',

    # Config
    'settings',
]
