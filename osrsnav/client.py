# osrsnav/client.py
"""HTTP client for the navigation service.

Two endpoints are used:
- ``GET /select``: which parts of the game state the service wants reported
- ``POST /path``: a path between two coordinates for a given game state

Transport errors and non-200 answers are logged and turned into ``None``
so callers can fall back to default behaviour. Protocol errors
(MalformedEdge, UnsupportedEncoding) propagate.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import requests

from .config import Settings
from .config import settings as default_settings
from .edges import Edge, decode_path
from .errors import TransportFailure, UnexpectedStatus
from .models import Coordinate, DataSelection, GameState, PathGenerationRequest
from .state import build_game_state

if TYPE_CHECKING:
    from .host import GameClient

logger = logging.getLogger("osrsnav.client")


class NavClient:
    """Synchronous client for one navigation service.

    The data selection is fetched lazily and kept for the lifetime of the
    client once a fetch succeeds. Failed fetches are not cached.
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        session: requests.Session | None = None,
        timeout: float | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.settings = settings or default_settings
        self.base_url = (base_url or self.settings.NAV_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else self.settings.REQUEST_TIMEOUT_S
        self._session = session or requests.Session()
        self._owns_session = session is None
        self._selection: DataSelection | None = None

    # ------------------------------------------------------------------
    # Data selection
    # ------------------------------------------------------------------

    @property
    def data_selection(self) -> DataSelection | None:
        """Cached selection, fetched on first access."""
        if self._selection is None:
            selection = self.fetch_selection()
            if selection is not None:
                self._selection = selection
        return self._selection

    def refresh_selection(self) -> DataSelection | None:
        """Refetch the selection. The cached value is kept if the fetch fails."""
        selection = self.fetch_selection()
        if selection is not None:
            self._selection = selection
        return self._selection

    def clear_selection(self) -> None:
        self._selection = None

    def fetch_selection(self) -> DataSelection | None:
        """GET /select, bypassing the cache."""
        try:
            response = self._exchange("GET", "/select")
        except (TransportFailure, UnexpectedStatus) as e:
            logger.warning(f"Data selection unavailable: {e}")
            return None

        try:
            return DataSelection.model_validate(response.json())
        except ValueError as e:
            logger.error(f"Could not decode data selection: {e}")
            return None

    # ------------------------------------------------------------------
    # Paths
    # ------------------------------------------------------------------

    def request_path(self, start: Coordinate, end: Coordinate, game_state: GameState) -> list[Edge] | None:
        """POST /path and decode the edges in traversal order."""
        request = PathGenerationRequest(start=start, end=end, game_state=game_state)
        try:
            response = self._exchange(
                "POST",
                "/path",
                data=request.model_dump_json(by_alias=True),
                headers={"Content-Type": "application/json"},
            )
        except (TransportFailure, UnexpectedStatus) as e:
            logger.warning(f"Path {start} -> {end} unavailable: {e}")
            return None

        try:
            payload = response.json()
        except ValueError as e:
            logger.error(f"Could not decode path response: {e}")
            return None

        path = decode_path(payload)
        logger.debug(f"Received path of {len(path)} edges")
        return path

    def build_between(
        self,
        start: Coordinate,
        end: Coordinate,
        game_state: GameState | None = None,
        *,
        game: GameClient | None = None,
    ) -> list[Edge] | None:
        """Request a path, snapshotting ``game`` when no state is given."""
        if game_state is None:
            if game is None:
                raise ValueError("build_between needs either game_state or game")
            game_state = build_game_state(game, self.data_selection, item_merge=self.settings.ITEM_MERGE)
        return self.request_path(start, end, game_state)

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    def _exchange(self, method: str, path: str, **kwargs: Any) -> requests.Response:
        url = f"{self.base_url}{path}"
        try:
            response = self._session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            raise TransportFailure(f"{method} {url} failed: {e}") from e

        if response.status_code != 200:
            raise UnexpectedStatus(response.status_code, response.text)
        return response

    def close(self) -> None:
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> NavClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
