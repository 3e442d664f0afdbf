"""Presentation CLI exports."""
from .lookup_command import LookupCommand

__all__ = [
    "LookupCommand",
]
