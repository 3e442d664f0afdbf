"""Domain entities."""
from .player import PlayerRecord
from .guild import GuildRecord

__all__ = [
    'PlayerRecord',
    'GuildRecord',
]
