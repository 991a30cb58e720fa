from __future__ import annotations

import asyncio
import sys
from typing import Optional

import typer

from parse_seed.config import Settings, get_settings
from parse_seed.infrastructure.http import build_async_client
from parse_seed.infrastructure.parse_client import ParseClient
from parse_seed.infrastructure.randomuser import RandomUserClient
from parse_seed.pipeline import SeedConfig, SeedResult, run_seed
from parse_seed.utils.logging import configure_logging, get_logger

log = get_logger(__name__)

app = typer.Typer(help="Seed a Parse class with randomly generated people.", add_completion=False)


async def _seed(settings: Settings, config: SeedConfig) -> SeedResult:
    async with build_async_client(settings) as http:
        fetcher = RandomUserClient.from_settings(settings, http)
        store = ParseClient.from_settings(settings, http)
        return await run_seed(config, fetcher, store)


@app.command()
def seed(
    count: Optional[int] = typer.Argument(
        None,
        min=0,
        max=5000,
        help="Number of objects to create (default from settings, 100).",
        show_default=False,
    ),
    class_name: Optional[str] = typer.Argument(
        None,
        help="Parse class to create the objects in (default from settings, Contact).",
        show_default=False,
    ),
) -> None:
    """
    Fetch COUNT random users and save them as CLASS_NAME objects in one batch.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    if not settings.parse_application_id:
        log.error("PARSE_APPLICATION_ID is not set; nothing to seed into.")
        raise typer.Exit(code=1)

    config = SeedConfig(
        count=settings.default_count if count is None else count,
        class_name=class_name or settings.default_class_name,
    )
    log.info(f"Creating {config.count} {config.class_name} objects")
    asyncio.run(_seed(settings, config))


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
