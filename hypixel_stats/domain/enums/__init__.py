"""Domain enumerations."""
from .package_rank import MONTHLY_SUPERSTAR, PackageRank
from .staff_rank import StaffRank

__all__ = [
    'MONTHLY_SUPERSTAR',
    'PackageRank',
    'StaffRank',
]
