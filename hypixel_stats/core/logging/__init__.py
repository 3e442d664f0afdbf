"""Structured logging helpers."""
from .config import bootstrap_logging, shutdown_logging
from .context import bind, context, get_context, unbind
from .levels import LogLevel, register_levels, to_level
from .logger import StructuredLogger, get_logger

register_levels()

__all__ = [
    'bootstrap_logging',
    'shutdown_logging',
    'bind',
    'context',
    'get_context',
    'unbind',
    'LogLevel',
    'register_levels',
    'to_level',
    'StructuredLogger',
    'get_logger',
]
