"""Purchased package rank enumeration."""
from enum import Enum
from typing import Optional


class PackageRank(Enum):
    """Ranks reported in ``newPackageRank``."""

    VIP = "VIP"
    VIP_PLUS = "VIP_PLUS"
    MVP = "MVP"
    MVP_PLUS = "MVP_PLUS"

    @property
    def display(self) -> str:
        """Rank text as shown in game, without brackets."""
        return _DISPLAY[self]

    def display_with(self, monthly_rank: Optional[str]) -> str:
        """Display text, upgraded to MVP++ for MVP+ with an active SUPERSTAR subscription."""
        if self is PackageRank.MVP_PLUS and monthly_rank == MONTHLY_SUPERSTAR:
            return "MVP++"
        return self.display

    @classmethod
    def from_string(cls, rank_str: Optional[str]) -> Optional['PackageRank']:
        """Create PackageRank from string, None for unknown or missing values."""
        if not rank_str:
            return None
        try:
            return cls(rank_str)
        except ValueError:
            return None


MONTHLY_SUPERSTAR = "SUPERSTAR"

_DISPLAY = {
    PackageRank.VIP: "VIP",
    PackageRank.VIP_PLUS: "VIP+",
    PackageRank.MVP: "MVP",
    PackageRank.MVP_PLUS: "MVP+",
}
