from __future__ import annotations

import argparse
import json
from typing import Any, List, Optional

from ...core.exceptions import ApiRequestError, HypixelError
from ...core.logging import StructuredLogger, get_logger
from ...domain.entities import GuildRecord, PlayerRecord
from ...infrastructure.api import HypixelAPIClient

_GREEN = "\033[92m"
_CYAN = "\033[96m"
_YELLOW = "\033[93m"
_RESET = "\033[0m"


def _c(s: str) -> str:
    return f"{_CYAN}{s}{_RESET}"


def _dump(value: Any) -> str:
    if isinstance(value, (PlayerRecord, GuildRecord)):
        value = value.to_dict()
    return json.dumps(value, indent=2, ensure_ascii=False, default=str)


class LookupCommand:
    """One-shot lookups against the Hypixel API."""

    def __init__(self, client: Optional[HypixelAPIClient] = None) -> None:
        self.log: StructuredLogger = get_logger(__name__, service="cli")
        self.client = client

    @staticmethod
    def build_parser() -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(prog="hypixel-stats", description="Query the Hypixel public API.")
        parser.add_argument("--json", action="store_true", help="print the raw result as JSON")
        sub = parser.add_subparsers(dest="command", required=True)

        sub.add_parser("player", help="player by name or UUID").add_argument("search")
        sub.add_parser("guild", help="guild by id, name, member name or member UUID").add_argument("search")
        sub.add_parser("friends", help="friend records of a player").add_argument("player")
        sub.add_parser("session", help="current session of a player").add_argument("player")
        sub.add_parser("key", help="information about the next API key")
        sub.add_parser("boosters", help="active network boosters")
        sub.add_parser("leaderboards", help="current leaderboards")
        sub.add_parser("count", help="online player count")
        sub.add_parser("watchdog", help="watchdog ban statistics")
        return parser

    def _operation(self, args: argparse.Namespace):
        client = self.client
        return {
            "player": lambda: client.get_player(args.search),
            "guild": lambda: client.get_guild(args.search),
            "friends": lambda: client.get_friends(args.player),
            "session": lambda: client.get_session(args.player),
            "key": client.get_key_info,
            "boosters": client.get_boosters,
            "leaderboards": client.get_leaderboards,
            "count": client.get_online_players,
            "watchdog": client.get_watchdog_stats,
        }[args.command]

    async def run(self, argv: List[str]) -> int:
        args = self.build_parser().parse_args(argv)
        owns_client = self.client is None
        if owns_client:
            try:
                self.client = HypixelAPIClient.from_settings()
            except HypixelError as e:
                print(f"{_YELLOW}{e.message}{_RESET}")
                return 1

        try:
            result = await self._operation(args)()
        except ApiRequestError as e:
            self.log.error(lambda: f"lookup-failed {e.message}")
            print(f"{_YELLOW}{e.message}: {e.cause or 'no cause given'}{_RESET}")
            return 1
        except HypixelError as e:
            self.log.error(lambda: f"lookup-failed {e.message}")
            print(f"{_YELLOW}{e.message}{_RESET}")
            return 1
        finally:
            if owns_client:
                await self.client.aclose()
                self.client = None

        if result is None:
            print(f"{_YELLOW}Nothing found.{_RESET}")
            return 1
        if isinstance(result, dict) and result.get("success") is False:
            print(f"{_YELLOW}API error: {result.get('cause', 'unknown')}{_RESET}")
            return 1

        if args.json:
            print(_dump(result))
        elif isinstance(result, PlayerRecord):
            print(self.format_player(result))
        elif isinstance(result, GuildRecord):
            print(self.format_guild(result))
        else:
            print(_dump(result))
        return 0

    @staticmethod
    def format_player(player: PlayerRecord) -> str:
        rank = player.get_rank(False)
        name = f"{rank} {player.display_name}" if rank else str(player.display_name)
        status = f"{_GREEN}online{_RESET}" if player.is_online() else "offline"
        return f"{_c(name)}  level {player.get_level()}  {status}"

    @staticmethod
    def format_guild(guild: GuildRecord) -> str:
        tag = guild.get_tag(False)
        title = f"{guild.name} {tag}" if tag else str(guild.name)
        return f"{_c(title)}  {guild.get_member_count()} members"
