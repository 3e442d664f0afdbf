"""Request URL composition."""
from typing import Mapping, Optional
from urllib.parse import urlencode


def build_path(host: str, endpoint: str, query: Optional[Mapping[str, object]], key: str) -> str:
    """``{host}/{endpoint}?{query}&key={key}`` with every value form-encoded."""
    params = dict(query or {})
    params['key'] = key
    return f"{host.rstrip('/')}/{endpoint}?{urlencode(params)}"
