"""Core layer - errors and logging."""
from .exceptions import (
    ApiRequestError,
    ConfigurationError,
    EmptyResponseError,
    HypixelError,
    InvalidResponseError,
    RequestFailedError,
)

__all__ = [
    'HypixelError',
    'ConfigurationError',
    'EmptyResponseError',
    'InvalidResponseError',
    'RequestFailedError',
    'ApiRequestError',
]
