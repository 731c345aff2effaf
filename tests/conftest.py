from __future__ import annotations

import json
from typing import Any
from urllib.parse import urlparse

import pytest
import requests
from requests.adapters import BaseAdapter

from osrsnav.host import HeldItem
from osrsnav.skills import Skill
from osrsnav.testing import FakeGame


class StubAdapter(BaseAdapter):
    """Transport adapter answering from canned routes instead of the network."""

    def __init__(self) -> None:
        super().__init__()
        self.routes: dict[tuple[str, str], dict[str, Any]] = {}
        self.sent: list[requests.PreparedRequest] = []
        self.timeouts: list[Any] = []

    def add(
        self,
        method: str,
        path: str,
        *,
        status: int = 200,
        json_body: Any = None,
        text: str | None = None,
        exc: Exception | None = None,
    ) -> None:
        self.routes[(method, path)] = {"status": status, "json": json_body, "text": text, "exc": exc}

    def send(self, request, **kwargs):  # type: ignore[override]
        self.sent.append(request)
        self.timeouts.append(kwargs.get("timeout"))
        route = self.routes.get((request.method, urlparse(request.url).path))
        if route is None:
            raise requests.ConnectionError(f"No stub route for {request.method} {request.url}")
        if route["exc"] is not None:
            raise route["exc"]

        response = requests.Response()
        response.status_code = route["status"]
        response.url = request.url
        response.request = request
        response.encoding = "utf-8"
        if route["text"] is not None:
            response._content = route["text"].encode("utf-8")
            response.headers["Content-Type"] = "text/plain"
        else:
            response._content = json.dumps(route["json"]).encode("utf-8")
            response.headers["Content-Type"] = "application/json"
        return response

    def close(self) -> None:
        pass

    def bodies(self, path: str) -> list[Any]:
        """Decoded JSON bodies of every request sent to ``path``."""
        return [json.loads(r.body) for r in self.sent if urlparse(r.url).path == path]

    def count(self, method: str, path: str) -> int:
        return sum(1 for r in self.sent if r.method == method and urlparse(r.url).path == path)


@pytest.fixture
def stub() -> StubAdapter:
    return StubAdapter()


@pytest.fixture
def stub_session(stub: StubAdapter) -> requests.Session:
    session = requests.Session()
    session.mount("http://", stub)
    return session


@pytest.fixture
def fake_game() -> FakeGame:
    """A character at Lumbridge with a few items and skills."""
    return FakeGame(
        varps={281: 1000, 29: 3},
        varbits={4070: 1},
        inventory_items=[
            HeldItem("Ring of dueling(8)", 1),
            HeldItem("Coins", 2500),
            HeldItem("Varrock teleport", 5),
        ],
        equipment_items=[
            HeldItem("Amulet of glory(4)", 1),
            HeldItem("Coins", 10),
        ],
        levels={Skill.AGILITY: 52, Skill.MAGIC: 45, Skill.WOODCUTTING: 60},
        object_names={1543: "Door", 16671: "Staircase"},
    )
