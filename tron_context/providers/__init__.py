"""Endpoint providers for TRON nodes."""

from tron_context.providers.http_provider import HttpProvider

__all__ = [
    'HttpProvider',
]
