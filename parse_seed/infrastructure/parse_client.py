"""
Parse Server REST client.

An explicitly constructed replacement for the Parse SDK's process-wide
`initialize(appId, key)` session: credentials and the HTTP client are held by
the instance and passed in by the caller.

`save_all` creates objects through the `/batch` endpoint. As with the SDK's
`saveAll`, large collections are split into sub-batches no larger than Parse's
batch limit and sent one after the other. The caller sees a single operation:
either every object is created and their ids are returned, or
`RemoteWriteError` is raised and nothing is reported as saved.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence
from urllib.parse import urlsplit

import httpx

from parse_seed.config import Settings
from parse_seed.domain.models import OutputObject
from parse_seed.errors import RemoteWriteError
from parse_seed.utils.logging import get_logger

log = get_logger(__name__)

PARSE_MAX_BATCH_SIZE = 50


class ParseClient:
    """
    Minimal Parse REST client covering class-tagged object creation.

    Parameters
    ----------
    http_client : httpx.AsyncClient
        Shared client; its lifecycle belongs to the caller.
    server_url : str
        Parse mount URL, e.g. `http://localhost:1337/parse`.
    application_id : str
        Sent as `X-Parse-Application-Id`.
    client_key : str
        Sent as `X-Parse-REST-API-Key`.
    batch_size : int
        Sub-batch size, capped at `PARSE_MAX_BATCH_SIZE`.
    transaction : bool
        Ask Parse Server to run each sub-batch as a transaction.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        server_url: str,
        application_id: str,
        client_key: str,
        batch_size: int = PARSE_MAX_BATCH_SIZE,
        transaction: bool = False,
    ) -> None:
        if not application_id:
            raise ValueError("Parse application id is required")
        self._http = http_client
        self.server_url = server_url.rstrip("/")
        self.batch_size = max(1, min(batch_size, PARSE_MAX_BATCH_SIZE))
        self.transaction = transaction
        self._headers = {
            "X-Parse-Application-Id": application_id,
            "Content-Type": "application/json",
        }
        if client_key:
            self._headers["X-Parse-REST-API-Key"] = client_key

    @classmethod
    def from_settings(cls, settings: Settings, http_client: httpx.AsyncClient) -> "ParseClient":
        return cls(
            http_client,
            server_url=settings.parse_server_url,
            application_id=settings.parse_application_id,
            client_key=settings.parse_client_key,
            batch_size=settings.parse_batch_size,
            transaction=settings.parse_batch_transaction,
        )

    @property
    def batch_url(self) -> str:
        return f"{self.server_url}/batch"

    def class_path(self, class_name: str) -> str:
        """Path of a class collection as it must appear inside a batch request."""
        mount = urlsplit(self.server_url).path.rstrip("/")
        return f"{mount}/classes/{class_name}"

    def _batch_body(self, objects: Sequence[OutputObject]) -> Dict[str, Any]:
        body: Dict[str, Any] = {
            "requests": [
                {
                    "method": "POST",
                    "path": self.class_path(obj.class_name),
                    "body": obj.to_parse_body(),
                }
                for obj in objects
            ]
        }
        if self.transaction:
            body["transaction"] = True
        return body

    async def save_all(self, objects: Sequence[OutputObject]) -> List[str]:
        """
        Create every object in `objects` and return their Parse object ids.

        Raises
        ------
        RemoteWriteError
            If any HTTP call fails or any sub-request is rejected.
        """
        object_ids: List[str] = []
        for start in range(0, len(objects), self.batch_size):
            chunk = objects[start : start + self.batch_size]
            object_ids.extend(await self._send_batch(chunk))
        return object_ids

    async def _send_batch(self, chunk: Sequence[OutputObject]) -> List[str]:
        try:
            response = await self._http.post(
                self.batch_url, json=self._batch_body(chunk), headers=self._headers
            )
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as exc:
            raise RemoteWriteError(f"batch request to {self.batch_url} failed: {exc}") from exc

        payload = _json_or_none(response)
        if response.is_error:
            code, message = _parse_error(payload)
            raise RemoteWriteError(
                message or f"Parse answered HTTP {response.status_code}",
                code=code,
                status_code=response.status_code,
            )
        if not isinstance(payload, list) or len(payload) != len(chunk):
            raise RemoteWriteError(
                "unexpected batch response from Parse", status_code=response.status_code
            )

        object_ids: List[str] = []
        failures: List[tuple[int, Optional[int], Optional[str]]] = []
        for index, item in enumerate(payload):
            success = item.get("success") if isinstance(item, dict) else None
            if isinstance(success, dict) and success.get("objectId"):
                object_ids.append(success["objectId"])
                continue
            code, message = _parse_error(item.get("error") if isinstance(item, dict) else None)
            failures.append((index, code, message))

        if failures:
            index, code, message = failures[0]
            log.debug("Parse rejected batch entries", extra={"failed": len(failures)})
            raise RemoteWriteError(
                f"{len(failures)} of {len(chunk)} objects rejected "
                f"(first at index {index}: {message or 'unknown error'})",
                code=code,
                status_code=response.status_code,
            )
        return object_ids


def _json_or_none(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None


def _parse_error(payload: Any) -> tuple[Optional[int], Optional[str]]:
    """Extract `(code, error)` from a Parse error object, if it looks like one."""
    if not isinstance(payload, dict):
        return None, None
    code = payload.get("code")
    message = payload.get("error")
    return (code if isinstance(code, int) else None), (str(message) if message else None)


__all__ = ["PARSE_MAX_BATCH_SIZE", "ParseClient"]
