"""Configuration module."""
from .settings import Settings, parse_keys, settings

__all__ = ['Settings', 'parse_keys', 'settings']
