"""Legacy ``rank`` field enumeration."""
from enum import Enum
from typing import Optional


class StaffRank(Enum):
    """Staff and special ranks carried by the legacy ``rank`` field."""

    NORMAL = "NORMAL"
    HELPER = "HELPER"
    MODERATOR = "MODERATOR"
    ADMIN = "ADMIN"
    YOUTUBER = "YOUTUBER"

    @property
    def display(self) -> str:
        """Rank text, empty for NORMAL."""
        return {
            StaffRank.NORMAL: "",
            StaffRank.HELPER: "Helper",
            StaffRank.MODERATOR: "MOD",
            StaffRank.ADMIN: "Admin",
            StaffRank.YOUTUBER: "Youtuber",
        }[self]

    @classmethod
    def from_string(cls, rank_str: Optional[str]) -> Optional['StaffRank']:
        """Create StaffRank from string; unrecognized values give None."""
        if not rank_str:
            return None
        try:
            return cls(rank_str)
        except ValueError:
            return None
