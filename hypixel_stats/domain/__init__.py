"""Domain layer - records, rank enums and derived attributes."""
from .attributes import is_online, network_level, rank_label, resolve_rank
from .entities import GuildRecord, PlayerRecord
from .enums import PackageRank, StaffRank

__all__ = [
    # Entities
    'PlayerRecord',
    'GuildRecord',
    # Enums
    'PackageRank',
    'StaffRank',
    # Derived attributes
    'network_level',
    'is_online',
    'rank_label',
    'resolve_rank',
]
