"""
Client for the randomuser.me API.

Fetches `count` generated people in a single GET, buffers the whole body and
decodes it into `RawUserRecord` models. Transport problems surface as
`NetworkError`, undecodable or malformed bodies as `ResponseParseError`.

Transport failures can optionally be retried with exponential backoff
(`SEED_FETCH_MAX_ATTEMPTS`); the default of one attempt issues exactly one
request.
"""

from __future__ import annotations

import json
from typing import List, Optional

import httpx
from pydantic import ValidationError
from tenacity import (
    AsyncRetrying,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from parse_seed.config import Settings
from parse_seed.domain.models import RandomUserResponse, RawUserRecord
from parse_seed.errors import NetworkError, ResponseParseError, UpstreamStatusError
from parse_seed.utils.logging import get_logger

log = get_logger(__name__)


def _is_transport_failure(exc: BaseException) -> bool:
    # Only connection-level failures are retried; status and URL errors are deterministic.
    if isinstance(exc, UpstreamStatusError):
        return False
    return isinstance(exc, NetworkError) and isinstance(exc.__cause__, httpx.TransportError)


class RandomUserClient:
    """
    Fetch generated person records from randomuser.me.

    Attributes
    ----------
    base_url : str
        Endpoint queried with `?results=<count>`.
    max_attempts : int
        Total attempts for transport failures (1 = no retry).
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        base_url: str = "https://randomuser.me/api/",
        max_attempts: int = 1,
    ) -> None:
        self._http = http_client
        self.base_url = base_url
        self.max_attempts = max_attempts

    @classmethod
    def from_settings(cls, settings: Settings, http_client: httpx.AsyncClient) -> "RandomUserClient":
        return cls(
            http_client,
            base_url=settings.randomuser_url,
            max_attempts=settings.fetch_max_attempts,
        )

    async def fetch(self, count: int) -> List[RawUserRecord]:
        """
        Retrieve `count` records.

        Raises
        ------
        NetworkError
            On transport errors or a non-2xx response.
        ResponseParseError
            When the body is not JSON or lacks a well-formed `results` list.
        """
        if count <= 0:
            return []

        body: Optional[str] = None
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_exponential(multiplier=1, min=1, max=10),
            retry=retry_if_exception(_is_transport_failure),
            reraise=True,
        ):
            with attempt:
                body = await self._get(count)

        records = self._decode(body or "")
        log.debug("Fetched random users", extra={"requested": count, "received": len(records)})
        return records

    async def _get(self, count: int) -> str:
        try:
            response = await self._http.get(self.base_url, params={"results": count})
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as exc:
            raise NetworkError(f"request to {self.base_url} failed: {exc}") from exc

        if response.is_error:
            raise UpstreamStatusError(
                f"{self.base_url} answered HTTP {response.status_code}",
                status_code=response.status_code,
            )
        return response.text

    @staticmethod
    def _decode(body: str) -> List[RawUserRecord]:
        try:
            payload = json.loads(body)
        except json.JSONDecodeError as exc:
            raise ResponseParseError(f"response is not valid JSON: {exc}") from exc

        try:
            return list(RandomUserResponse.model_validate(payload).results)
        except ValidationError as exc:
            raise ResponseParseError(f"unexpected response shape: {exc}") from exc


__all__ = ["RandomUserClient"]
