from __future__ import annotations

import asyncio
import json
from dataclasses import dataclass, field
from typing import Any

import httpx
import pytest

from slate_ecosystem.loader.client import DocumentClient

BASE_URL = "https://objects.example.test"


@dataclass
class FakeOrigin:
    """In-memory object store served through httpx.MockTransport.

    Anything not published answers 404. `delay_s` is awaited before every
    response so concurrency can be observed.
    """

    delay_s: float = 0.0
    objects: dict[tuple[str, str], tuple[int, str, dict[str, str]]] = field(default_factory=dict)
    always: dict[str, int | Exception] = field(default_factory=dict)
    requests: list[tuple[str, str]] = field(default_factory=list)
    in_flight: int = 0
    max_in_flight: int = 0

    def publish(
        self,
        date: str,
        filename: str,
        payload: Any = None,
        *,
        text: str | None = None,
        last_modified: str | None = None,
    ) -> None:
        body = text if text is not None else json.dumps(payload)
        headers = {"Last-Modified": last_modified} if last_modified else {}
        self.objects[(date, filename)] = (200, body, headers)

    def fail(self, date: str, filename: str, status: int) -> None:
        self.objects[(date, filename)] = (status, "", {})

    def fail_always(self, filename: str, status: int) -> None:
        self.always[filename] = status

    def drop_always(self, filename: str, message: str = "connection reset") -> None:
        self.always[filename] = httpx.ConnectError(message)

    def hits(self, filename: str) -> list[str]:
        return [date for date, name in self.requests if name == filename]

    async def handler(self, request: httpx.Request) -> httpx.Response:
        date, filename = request.url.path.strip("/").split("/")[-2:]
        self.requests.append((date, filename))

        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            if self.delay_s:
                await asyncio.sleep(self.delay_s)
        finally:
            self.in_flight -= 1

        if (date, filename) in self.objects:
            status, body, headers = self.objects[(date, filename)]
            return httpx.Response(status, text=body, headers=headers)

        failure = self.always.get(filename)
        if isinstance(failure, Exception):
            raise type(failure)(str(failure), request=request)
        if failure is not None:
            return httpx.Response(failure)

        return httpx.Response(404, text="NoSuchKey")

    def client(self) -> DocumentClient:
        return DocumentClient(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def origin() -> FakeOrigin:
    return FakeOrigin()
