"""Hypixel public API client."""
from __future__ import annotations

import asyncio
import time
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional, Sequence, Set, Tuple, Union

import httpx

from ...config import Settings, settings
from ...core.exceptions import (
    ApiRequestError,
    EmptyResponseError,
    HypixelError,
    InvalidResponseError,
    RequestFailedError,
)
from ...core.logging import get_logger
from ...domain.entities import PlayerRecord
from ...utils.validators import clean, is_guild_id, is_uuid
from .enricher import ENRICHED_KINDS, enrich
from .key_ring import KeyRing
from .paths import build_path

logger = get_logger(__name__, service="hypixel")

Outcome = Tuple[Optional[HypixelError], Any]
Callback = Callable[[Optional[HypixelError], Any], Any]

# endpoint -> envelope field holding the result (None: the whole envelope)
RESULT_FIELDS: Dict[str, Optional[str]] = {
    "key":           "record",
    "boosters":      "boosters",
    "leaderboards":  "leaderboards",
    "playerCount":   "playerCount",
    "watchdogstats": None,
    "guild":         "guild",
    "friends":       "records",
    "session":       "session",
    "player":        "player",
}


class HypixelAPIClient:
    """Asynchronous Hypixel API client with round-robin key rotation.

    Every public operation supports two calling conventions over the same
    request coroutine:

    * ``await client.get_player("name")`` resolves with the result or raises
      the request error.
    * ``client.get_player("name", callback)`` schedules the request on the
      running loop and calls ``callback(error, result)`` exactly once; the
      returned task may be awaited.

    An API-level failure (``success: false``) is not an error: the raw
    envelope is delivered as the result so its ``cause`` can be inspected.
    """

    def __init__(
        self,
        keys: Union[str, Sequence[str]],
        *,
        host: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.key_ring = KeyRing(keys)
        self.host = (host or settings.API_HOST).rstrip("/")
        self.timeout = settings.REQUEST_TIMEOUT if timeout is None else timeout
        self.session: Optional[httpx.AsyncClient] = None
        self.last_status_code: Optional[int] = None
        self._transport = transport
        self._pending: Set[asyncio.Task] = set()

    @classmethod
    def from_settings(cls, **kwargs: Any) -> "HypixelAPIClient":
        Settings.validate()
        return cls(settings.HYPIXEL_API_KEYS, **kwargs)

    async def __aenter__(self):
        self._ensure_session()
        return self

    async def __aexit__(self, *_):
        await self.aclose()

    def _ensure_session(self) -> httpx.AsyncClient:
        if self.session is None or self.session.is_closed:
            self.session = httpx.AsyncClient(
                timeout=self.timeout,
                headers={"Accept": "application/json", "User-Agent": settings.USER_AGENT},
                transport=self._transport,
            )
        return self.session

    async def aclose(self) -> None:
        if self.session and not self.session.is_closed:
            await self.session.aclose()

    def get_keys(self) -> List[str]:
        return list(self.key_ring.keys)

    def build_path(self, endpoint: str, query: Optional[Mapping[str, Any]] = None) -> str:
        """Request URL for ``endpoint``; consumes one key rotation."""
        return build_path(self.host, endpoint, query, self.key_ring.next_key())

    # ── Dispatch ───────────────────────────────────────────────────────

    async def _send_request(
        self,
        endpoint: str,
        query: Optional[Mapping[str, Any]],
        result_field: Optional[str],
    ) -> Outcome:
        try:
            return await self._exchange(endpoint, query, result_field)
        except Exception as exc:
            logger.error(lambda: f"Request failed: {type(exc).__name__}: {exc}", extra={"endpoint": endpoint})
            error = RequestFailedError(endpoint)
            error.__cause__ = exc
            return error, None

    async def _exchange(
        self,
        endpoint: str,
        query: Optional[Mapping[str, Any]],
        result_field: Optional[str],
    ) -> Outcome:
        url = self.build_path(endpoint, query)
        start = time.perf_counter()
        try:
            response = await self._ensure_session().get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.error(lambda: f"Network error: {type(exc).__name__}", extra={"endpoint": endpoint})
            error = EmptyResponseError(endpoint)
            error.__cause__ = exc
            return error, None

        elapsed_ms = round((time.perf_counter() - start) * 1000.0, 2)
        self.last_status_code = response.status_code
        logger.debug(
            lambda: "dispatched",
            extra={"endpoint": endpoint, "status": response.status_code, "elapsed_ms": elapsed_ms},
        )

        if not response.content:
            logger.error(lambda: "Empty response body", extra={"endpoint": endpoint})
            return EmptyResponseError(endpoint), None

        try:
            data = response.json()
        except ValueError:
            logger.error(lambda: "Response is not valid JSON", extra={"endpoint": endpoint})
            return InvalidResponseError(endpoint), None

        # A body carrying ``success`` is an API envelope and is delivered as
        # data whatever the status; Hypixel answers 400/403/429 this way.
        is_envelope = isinstance(data, dict) and "success" in data
        if response.is_error and not is_envelope:
            return ApiRequestError(response.status_code, endpoint, data), data

        if is_envelope and data["success"]:
            if result_field is None:
                return None, data
            value = data.get(result_field)
            if result_field in ENRICHED_KINDS and isinstance(value, Mapping):
                value = enrich(value, result_field)
            return None, value

        cause = data.get("cause") if isinstance(data, dict) else None
        logger.warning(
            lambda: f"API request failed: {cause or 'unknown cause'}",
            extra={"endpoint": endpoint, "status": response.status_code},
        )
        return None, data

    async def _settle(self, outcome: Awaitable[Outcome]) -> Any:
        error, data = await outcome
        if error is not None:
            raise error
        return data

    async def _notify(self, outcome: Awaitable[Outcome], callback: Callback) -> Any:
        error, data = await outcome
        callback(error, data)
        return data

    def _deliver(self, outcome: Awaitable[Outcome], callback: Optional[Callback]):
        if callback is None:
            return self._settle(outcome)
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            outcome.close()
            raise
        task = loop.create_task(self._notify(outcome, callback))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    def request(
        self,
        endpoint: str,
        query: Optional[Mapping[str, Any]] = None,
        result_field: Optional[str] = None,
        callback: Optional[Callback] = None,
    ):
        """Perform one GET against ``endpoint``.

        Returns an awaitable result when ``callback`` is None, otherwise the
        task that will invoke ``callback(error, result)``.

        Request failures are never raised from here. The one exception is
        misuse: passing ``callback`` outside a running event loop raises
        ``RuntimeError`` immediately, since there is no loop to schedule on.
        """
        return self._deliver(self._send_request(endpoint, query, result_field), callback)

    def _call(self, endpoint: str, query: Optional[Dict[str, Any]] = None, callback: Optional[Callback] = None):
        return self.request(endpoint, query, RESULT_FIELDS[endpoint], callback)

    # ── Network ────────────────────────────────────────────────────────

    def get_key_info(self, callback: Optional[Callback] = None):
        return self._call("key", None, callback)

    def get_boosters(self, callback: Optional[Callback] = None):
        return self._call("boosters", None, callback)

    def get_leaderboards(self, callback: Optional[Callback] = None):
        return self._call("leaderboards", None, callback)

    def get_online_players(self, callback: Optional[Callback] = None):
        return self._call("playerCount", None, callback)

    def get_watchdog_stats(self, callback: Optional[Callback] = None):
        return self._call("watchdogstats", None, callback)

    # ── Players ────────────────────────────────────────────────────────

    def get_player(self, search: str, callback: Optional[Callback] = None):
        """Look a player up by UUID (dashes optional) or by name."""
        if is_uuid(search):
            return self._call("player", {"uuid": clean(search)}, callback)
        return self._call("player", {"name": search}, callback)

    def get_friends(self, player: str, callback: Optional[Callback] = None):
        return self._call("friends", {"player": _player_id(player)}, callback)

    def get_session(self, player: str, callback: Optional[Callback] = None):
        return self._call("session", {"uuid": _player_id(player)}, callback)

    # ── Guilds ─────────────────────────────────────────────────────────

    def get_guild_by_name(self, name: str, callback: Optional[Callback] = None):
        return self._call("guild", {"name": name}, callback)

    def get_guild_by_player(self, player: str, callback: Optional[Callback] = None):
        return self._call("guild", {"player": clean(player)}, callback)

    def get_guild_by_id(self, guild_id: str, callback: Optional[Callback] = None):
        return self._call("guild", {"id": guild_id}, callback)

    def get_guild(self, search: str, callback: Optional[Callback] = None):
        """Find a guild by id, member UUID, guild name or member name.

        Names are tried as a guild name first; when no guild matches, the
        name is resolved to a player and that player's guild is returned.
        """
        if is_guild_id(search):
            return self.get_guild_by_id(search, callback)
        if is_uuid(search):
            return self.get_guild_by_player(search, callback)
        return self._deliver(self._search_guild(search), callback)

    async def _search_guild(self, name: str) -> Outcome:
        error, guild = await self._send_request("guild", {"name": name}, RESULT_FIELDS["guild"])
        if error is not None or guild is not None:
            return error, guild

        error, player = await self._send_request("player", {"name": name}, RESULT_FIELDS["player"])
        if error is not None or not isinstance(player, PlayerRecord) or not player.uuid:
            return error, None

        logger.debug(lambda: "guild name miss, retrying by member", extra={"endpoint": "guild"})
        return await self._send_request("guild", {"player": clean(player.uuid)}, RESULT_FIELDS["guild"])


def _player_id(player: str) -> str:
    return clean(player) if is_uuid(player) else player
