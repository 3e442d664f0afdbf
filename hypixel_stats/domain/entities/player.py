"""Player record returned by the ``player`` endpoint."""
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict, Iterator, Optional

from ..attributes import is_online, network_level, rank_label


@dataclass(eq=False)
class PlayerRecord(Mapping):
    """Read-only view over a raw player object with derived helpers.

    Every field of the API payload stays reachable with ``record[key]`` or
    ``record.get(key)``; the wrapped dict is never modified.
    """

    data: Dict[str, Any]

    def __getitem__(self, key: str) -> Any:
        return self.data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.data)

    def __len__(self) -> int:
        return len(self.data)

    @property
    def uuid(self) -> Optional[str]:
        return self.data.get('uuid')

    @property
    def display_name(self) -> Optional[str]:
        return self.data.get('displayname')

    @property
    def network_exp(self) -> float:
        return self.data.get('networkExp', 0)

    def get_level(self) -> int:
        """Network level derived from ``networkExp``."""
        return network_level(self.network_exp)

    def is_online(self) -> bool:
        """True when the last login is newer than the last logout."""
        return is_online(self.data.get('lastLogin'), self.data.get('lastLogout'))

    def get_rank(self, formatting: bool = True) -> str:
        """Display rank, bare when ``formatting`` is true, else in brackets."""
        return rank_label(self.data, formatting)

    def to_dict(self) -> dict:
        """Raw fields plus the derived values."""
        return {
            **self.data,
            'level': self.get_level(),
            'online': self.is_online(),
            'rankLabel': self.get_rank(),
        }
