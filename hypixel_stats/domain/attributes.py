"""Derived player attributes computed from raw API fields."""
from __future__ import annotations

import math
import re
from typing import Any, Mapping, Optional

from .enums import PackageRank, StaffRank

BASE = 10000
GROWTH = 2500
HALF_GROWTH = 0.5 * GROWTH

# Going from level n to n + 1 costs BASE + GROWTH * (n - 1) exp. The cumulative
# sum is inverted with the quadratic formula.
REVERSE_PQ_PREFIX = -(BASE - HALF_GROWTH) / GROWTH
REVERSE_CONST = REVERSE_PQ_PREFIX ** 2
GROWTH_DIVIDES_2 = 2 / GROWTH

_PREFIX_STRIP = re.compile(r"§[0-9a-z]|\[|\]")


def network_level(experience: Optional[float]) -> int:
    """Network level for a ``networkExp`` value.

    Negative experience is the API's marker for accounts below level one.
    The result is floored, matching the level shown in game.
    """
    exp = experience or 0
    if exp < 0:
        return 1
    return math.floor(1 + REVERSE_PQ_PREFIX + math.sqrt(REVERSE_CONST + GROWTH_DIVIDES_2 * exp))


def is_online(last_login: Optional[int], last_logout: Optional[int]) -> bool:
    if last_login is None or last_logout is None:
        return False
    return last_login > last_logout


def _prefix_rank(prefix: str) -> str:
    return _PREFIX_STRIP.sub("", prefix)


def _legacy_rank(rank: str) -> str:
    staff = StaffRank.from_string(rank)
    return staff.display if staff else ""


def _package_rank(record: Mapping[str, Any]) -> str:
    package = PackageRank.from_string(record.get("newPackageRank"))
    if package is None:
        return ""
    return package.display_with(record.get("monthlyPackageRank"))


def resolve_rank(record: Mapping[str, Any]) -> str:
    """Bare rank text: custom prefix first, then legacy staff rank, then package rank."""
    prefix = record.get("prefix")
    if prefix:
        return _prefix_rank(prefix)
    rank = record.get("rank")
    if rank and rank != StaffRank.NORMAL.value:
        return _legacy_rank(rank)
    return _package_rank(record)


def rank_label(record: Mapping[str, Any], formatting: bool = True) -> str:
    """Rank text for display.

    ``formatting=True`` returns the bare text (``MVP+``), ``False`` wraps it
    in brackets (``[MVP+]``). A rankless player is always ``""``.
    """
    rank = resolve_rank(record)
    if not rank:
        return ""
    return rank if formatting else f"[{rank}]"
