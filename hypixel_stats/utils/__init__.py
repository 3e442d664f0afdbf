from .validators import clean, is_guild_id, is_uuid

__all__ = ['clean', 'is_guild_id', 'is_uuid']
