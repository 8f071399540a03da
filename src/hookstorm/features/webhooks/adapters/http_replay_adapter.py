"""HTTP replay adapter using aiohttp.

Re-sends a captured webhook event to a new target URL. The outbound request
reproduces the captured method, headers, query parameters and body; only the
parts that describe the original connection are dropped.
"""

import asyncio
import json
from typing import Any, Dict, Mapping, Optional, Sequence

from aiohttp import ClientError, ClientSession, ClientTimeout
from multidict import CIMultiDict
from yarl import URL

from ....config.constants import DEFAULT_REPLAY_TIMEOUT_SECONDS
from ....core.exceptions import ReplayError, TransportFailureError
from ....utils import utc_now
from ..entities import ReplayResult, WebhookEvent
from ..utils.validation import validate_target_url

# Headers tied to the capture-time connection or payload framing.
# aiohttp derives fresh values from the target URL and the re-serialized body.
EXCLUDED_REPLAY_HEADERS = frozenset({"host", "content-length", "transfer-encoding"})

JSON_CONTENT_TYPE = "application/json"


def build_replay_headers(headers: Mapping[str, Sequence[str]]) -> CIMultiDict:
    """Copy captured headers for the outbound request.

    Every value of every header is kept, in order, except the excluded
    connection headers (matched case-insensitively).
    """
    outbound: CIMultiDict = CIMultiDict()
    for name, values in headers.items():
        if name.lower() in EXCLUDED_REPLAY_HEADERS:
            continue
        for value in values:
            outbound.add(name, value)

    if "Content-Type" not in outbound:
        outbound["Content-Type"] = JSON_CONTENT_TYPE

    return outbound


def build_replay_url(target: URL, query_params: Mapping[str, Sequence[str]]) -> URL:
    """Append captured query parameters to the target's own query string."""
    if not query_params:
        return target

    pairs = list(target.query.items())
    for key, values in query_params.items():
        pairs.extend((key, value) for value in values)

    return target.with_query(pairs)


def encode_body(body: Dict[str, Any]) -> bytes:
    """Serialize the stored body back to a JSON payload."""
    return json.dumps(body).encode("utf-8")


class HttpReplayAdapter:
    """HTTP adapter that replays captured events with aiohttp.

    Handles target validation, request reconstruction and bounded delivery.
    A completed exchange is a successful replay whatever the status code;
    only failing to complete the exchange is reported as a failure. No
    retries are attempted.
    """

    def __init__(self, timeout_seconds: float = DEFAULT_REPLAY_TIMEOUT_SECONDS):
        """Initialize replay adapter.

        Args:
            timeout_seconds: Total time budget for one replay request
        """
        self._timeout_seconds = timeout_seconds
        self._session: Optional[ClientSession] = None

    @property
    def timeout_seconds(self) -> float:
        return self._timeout_seconds

    async def __aenter__(self):
        """Async context manager entry."""
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    async def _ensure_session(self) -> ClientSession:
        """Ensure aiohttp session exists."""
        if self._session is None or self._session.closed:
            self._session = ClientSession(
                timeout=ClientTimeout(total=self._timeout_seconds)
            )
        return self._session

    async def close(self) -> None:
        """Close aiohttp session if exists."""
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None

    async def replay_event(self, event: WebhookEvent, target_url: str) -> ReplayResult:
        """Replay a stored event to a target URL."""
        return await self.replay(
            method=event.method,
            target_url=target_url,
            headers=event.headers,
            query_params=event.query_params,
            body=event.body,
        )

    async def replay(
        self,
        method: str,
        target_url: str,
        headers: Mapping[str, Sequence[str]],
        query_params: Mapping[str, Sequence[str]],
        body: Dict[str, Any]
    ) -> ReplayResult:
        """Reconstruct a captured request and send it to a new target.

        Args:
            method: Captured HTTP method
            target_url: Absolute http(s) URL to deliver to
            headers: Captured headers
            query_params: Captured query parameters, appended to the target's
            body: Captured body, sent as JSON

        Returns:
            ReplayResult describing the outcome; never raises for invalid
            targets or transport failures
        """
        try:
            payload = encode_body(body)
        except (TypeError, ValueError) as e:
            return ReplayResult.failed(utc_now(), f"Failed to prepare request body: {e}")

        try:
            url = build_replay_url(validate_target_url(target_url), query_params)
        except ReplayError as e:
            return ReplayResult.failed(utc_now(), e.message)
        except (TypeError, ValueError) as e:
            return ReplayResult.failed(utc_now(), f"Failed to create request: {e}")

        request_headers = build_replay_headers(headers)

        replayed_at = utc_now()
        try:
            status_code = await self._send(method, url, request_headers, payload)
        except TransportFailureError as e:
            return ReplayResult.failed(replayed_at, e.message)

        return ReplayResult.delivered(replayed_at, status_code)

    async def _send(self, method: str, url: URL, headers: CIMultiDict, payload: bytes) -> int:
        """Make the actual HTTP request.

        Returns:
            Status code of the target's response

        Raises:
            TransportFailureError: If the exchange did not complete
        """
        session = await self._ensure_session()

        try:
            async with session.request(
                method,
                url,
                headers=headers,
                data=payload,
            ) as response:
                return response.status
        except asyncio.TimeoutError:
            raise TransportFailureError(
                f"Request to {url} timed out after {self._timeout_seconds}s",
                details={"url": str(url)}
            )
        except (ClientError, OSError) as e:
            raise TransportFailureError(
                str(e) or e.__class__.__name__,
                details={"url": str(url)}
            )
