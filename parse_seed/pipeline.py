"""
Seeding pipeline: fetch random users, map them to Parse objects, save them.

Usage (example from CLI):
    from parse_seed.pipeline import SeedConfig, run_seed

    result = await run_seed(SeedConfig(count=3), fetcher, store)
    print(result.outcome)

The run ends in one of two terminal states. `completed` logs `done`;
`failed` logs `error: <reason>`. Failures are reported through the returned
`SeedResult`, never re-raised.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Protocol, Sequence

from parse_seed.domain.models import OutputObject, RawUserRecord, to_output_object
from parse_seed.errors import SeedError
from parse_seed.utils.logging import get_logger

log = get_logger(__name__)


class UserSource(Protocol):
    async def fetch(self, count: int) -> List[RawUserRecord]: ...


class ObjectStore(Protocol):
    async def save_all(self, objects: Sequence[OutputObject]) -> List[str]: ...


class SeedOutcome(str, Enum):
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass
class SeedConfig:
    """
    Parameters for one seeding run.

    Attributes
    ----------
    count : int
        Number of random users to request.
    class_name : str
        Parse class the created objects belong to.
    """

    count: int = 100
    class_name: str = "Contact"


@dataclass
class SeedResult:
    outcome: SeedOutcome
    requested: int
    created: int = 0
    object_ids: List[str] = field(default_factory=list)
    error: Optional[str] = None
    duration_seconds: float = 0.0

    @property
    def ok(self) -> bool:
        return self.outcome is SeedOutcome.COMPLETED


def build_objects(records: Sequence[RawUserRecord], class_name: str) -> List[OutputObject]:
    """Map every record to one output object, preserving order."""
    return [to_output_object(record, class_name) for record in records]


def _failed(config: SeedConfig, exc: BaseException, start: float) -> SeedResult:
    return SeedResult(
        outcome=SeedOutcome.FAILED,
        requested=config.count,
        error=str(exc),
        duration_seconds=time.perf_counter() - start,
    )


async def run_seed(config: SeedConfig, fetcher: UserSource, store: ObjectStore) -> SeedResult:
    """
    Run fetch -> transform -> save for `config`.

    The save only starts once the fetch has fully resolved.
    """
    start = time.perf_counter()
    try:
        records = await fetcher.fetch(config.count)
        objects = build_objects(records, config.class_name)
        object_ids = await store.save_all(objects) if objects else []
    except SeedError as exc:
        log.error(
            f"error: {exc}",
            extra={"class_name": config.class_name, "error_type": type(exc).__name__},
        )
        return _failed(config, exc, start)
    except Exception as exc:  # noqa: BLE001 - every failure ends the run in the failed state
        log.exception(
            f"error: {exc}",
            extra={"class_name": config.class_name, "error_type": type(exc).__name__},
        )
        return _failed(config, exc, start)

    duration = time.perf_counter() - start
    log.info(
        "done",
        extra={
            "objects_created": len(object_ids),
            "class_name": config.class_name,
            "duration_seconds": round(duration, 3),
        },
    )
    return SeedResult(
        outcome=SeedOutcome.COMPLETED,
        requested=config.count,
        created=len(object_ids),
        object_ids=object_ids,
        duration_seconds=duration,
    )


__all__ = [
    "ObjectStore",
    "SeedConfig",
    "SeedOutcome",
    "SeedResult",
    "UserSource",
    "build_objects",
    "run_seed",
]
