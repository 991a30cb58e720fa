"""
parse-seed - populate a Parse class with randomly generated people.

Fetches fake person records from randomuser.me, turns each into an object
with a single title-cased `name` field and saves the whole collection to a
Parse Server in one batch operation.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from parse_seed.config import Settings, get_settings
from parse_seed.domain import OutputObject, RawUserRecord, title_case, to_output_object
from parse_seed.errors import (
    FetchError,
    NetworkError,
    RemoteWriteError,
    ResponseParseError,
    SeedError,
)
from parse_seed.infrastructure import ParseClient, RandomUserClient, build_async_client
from parse_seed.pipeline import SeedConfig, SeedOutcome, SeedResult, run_seed
from parse_seed.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "OutputObject",
    "RawUserRecord",
    "title_case",
    "to_output_object",
    # Errors
    "SeedError",
    "FetchError",
    "NetworkError",
    "ResponseParseError",
    "RemoteWriteError",
    # Infrastructure
    "ParseClient",
    "RandomUserClient",
    "build_async_client",
    # Pipeline
    "SeedConfig",
    "SeedOutcome",
    "SeedResult",
    "run_seed",
    # Logging
    "configure_logging",
    "get_logger",
]
