from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

import httpx

from slate_ecosystem.core.config import settings
from slate_ecosystem.core.log import get_logger

from .errors import DocumentParseError
from .sanitize import parse_document
from .types import FetchNotFound, FetchOutcome, FetchSuccess, FetchTransientError

logger = get_logger("client")

NO_CACHE_HEADERS = {"Cache-Control": "no-cache", "Pragma": "no-cache"}


@dataclass
class DocumentClient:
    """
    Async client for date-keyed JSON objects.

    - Uses a single underlying httpx.AsyncClient so concurrent resolutions share a pool.
    - Never raises for transport or HTTP failures; every attempt is classified
      into a FetchOutcome instead.
    - Every request asks intermediaries not to serve a cached copy, since objects
      can be rewritten intraday.
    """

    timeout_s: float = field(default_factory=lambda: settings.timeout_s)
    connect_timeout_s: float = field(default_factory=lambda: settings.connect_timeout_s)
    headers: Mapping[str, str] = field(default_factory=dict)

    transport: httpx.AsyncBaseTransport | None = None

    def __post_init__(self) -> None:
        self._client = httpx.AsyncClient(
            timeout=httpx.Timeout(self.timeout_s, connect=self.connect_timeout_s),
            headers={"User-Agent": settings.user_agent, **NO_CACHE_HEADERS, **self.headers},
            transport=self.transport,
            follow_redirects=True,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> DocumentClient:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def fetch_raw(self, url: str) -> FetchOutcome:
        """
        GET `url` once and classify the result.

        Order: transport failure -> TransientError, 404 -> NotFound,
        other non-2xx -> TransientError("HTTP <status>"), 2xx -> parse body.
        """
        try:
            resp = await self._client.get(url)
        except httpx.RequestError as e:
            message = str(e) or "Network error"
            logger.debug("GET %s failed: %s", url, message)
            return FetchTransientError(message)

        if resp.status_code == 404:
            logger.debug("GET %s -> 404", url)
            return FetchNotFound()

        if not resp.is_success:
            logger.debug("GET %s -> HTTP %s", url, resp.status_code)
            return FetchTransientError(f"HTTP {resp.status_code}")

        try:
            data = parse_document(resp.text)
        except DocumentParseError as e:
            logger.debug("GET %s -> unparsable body: %s", url, e)
            return FetchTransientError(str(e))

        logger.debug("GET %s -> %s", url, resp.status_code)
        return FetchSuccess(data=data, last_modified=resp.headers.get("Last-Modified"))
