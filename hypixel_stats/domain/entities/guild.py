"""Guild record returned by the ``guild`` endpoint."""
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional

from ...utils.validators import clean


@dataclass(eq=False)
class GuildRecord(Mapping):
    """Read-only view over a raw guild object."""

    data: Dict[str, Any]

    def __getitem__(self, key: str) -> Any:
        return self.data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.data)

    def __len__(self) -> int:
        return len(self.data)

    @property
    def guild_id(self) -> Optional[str]:
        return self.data.get('_id')

    @property
    def name(self) -> Optional[str]:
        return self.data.get('name')

    @property
    def members(self) -> List[Dict[str, Any]]:
        return self.data.get('members') or []

    def get_tag(self, formatting: bool = True) -> str:
        """Guild tag, bare when ``formatting`` is true, else in brackets."""
        tag = self.data.get('tag') or ""
        if not tag:
            return ""
        return tag if formatting else f"[{tag}]"

    def get_member(self, uuid: str) -> Optional[Dict[str, Any]]:
        """Member entry for a player UUID (dashes ignored)."""
        wanted = clean(uuid)
        for member in self.members:
            if clean(member.get('uuid', '')) == wanted:
                return member
        return None

    def get_member_count(self) -> int:
        return len(self.members)

    def to_dict(self) -> dict:
        return dict(self.data)
