"""
Domain package for parse-seed.

Exports the record models and the name transform used by the pipeline.
Keep this package free of I/O.
"""

from parse_seed.domain.models import (
    OutputObject,
    RandomUserResponse,
    RawUserRecord,
    UserName,
    to_output_object,
)
from parse_seed.domain.naming import full_name, title_case

__all__ = [
    "OutputObject",
    "RandomUserResponse",
    "RawUserRecord",
    "UserName",
    "to_output_object",
    "full_name",
    "title_case",
]
