"""Shared fixtures: a fake Hypixel API served through httpx.MockTransport."""
from typing import Any, Callable, Dict, List, Optional

import httpx
import pytest
import pytest_asyncio

from hypixel_stats.infrastructure.api import HypixelAPIClient

KEYS = [f"0a1b2c3d-0000-4000-8000-00000000000{i}" for i in range(3)]

Responder = Callable[[httpx.Request], httpx.Response]


def reply(status: int = 200, json: Any = None, content: Optional[bytes] = None) -> Responder:
    """Build a fresh response per request."""
    def _respond(request: httpx.Request) -> httpx.Response:
        if content is not None:
            return httpx.Response(status, content=content)
        return httpx.Response(status, json=json)
    return _respond


class FakeHypixel:
    """Routes requests by endpoint path and records everything it receives."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.routes: Dict[str, Responder] = {}

    def route(self, endpoint: str, responder: Responder) -> None:
        self.routes[endpoint] = responder

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        endpoint = request.url.path.lstrip("/")
        return self.routes[endpoint](request)

    @property
    def used_keys(self) -> List[str]:
        return [r.url.params["key"] for r in self.requests]

    def params(self, index: int = -1) -> Dict[str, str]:
        return dict(self.requests[index].url.params)


@pytest.fixture
def player_payload():
    return {
        "uuid": "069a79f444e94726a5befca90e38aaf5",
        "displayname": "Notch",
        "networkExp": 30000,
        "lastLogin": 1700000100000,
        "lastLogout": 1700000000000,
        "newPackageRank": "MVP_PLUS",
    }


@pytest.fixture
def guild_payload():
    return {
        "_id": "5363aa0eed50ed7a0bd0a72d",
        "name": "Miners",
        "tag": "MINE",
        "members": [
            {"uuid": "069a79f444e94726a5befca90e38aaf5", "rank": "Guild Master"},
            {"uuid": "853c80ef3c3749fdaa49938b674adae6", "rank": "Member"},
        ],
    }


@pytest.fixture
def fake_api():
    return FakeHypixel()


@pytest_asyncio.fixture
async def client(fake_api):
    api = HypixelAPIClient(KEYS, host="https://api.test", transport=httpx.MockTransport(fake_api.handler))
    async with api:
        yield api
