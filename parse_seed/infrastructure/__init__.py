"""
Infrastructure package for parse-seed.

Centralizes outbound I/O: the shared HTTP client, the random-user fetcher and
the Parse REST client. Keep this layer focused on transport and decoding,
decoupled from pipeline logic.
"""

from parse_seed.infrastructure.http import build_async_client
from parse_seed.infrastructure.parse_client import ParseClient
from parse_seed.infrastructure.randomuser import RandomUserClient

__all__ = [
    "build_async_client",
    "ParseClient",
    "RandomUserClient",
]
