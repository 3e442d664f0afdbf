"""Request URL composition."""
from urllib.parse import parse_qs, urlsplit

import pytest

from hypixel_stats.infrastructure.api import build_path

from .conftest import KEYS

HOST = "https://api.hypixel.net"


class TestBuildPath:

    def test_no_query_only_key(self):
        assert build_path(HOST, "boosters", None, KEYS[0]) == f"{HOST}/boosters?key={KEYS[0]}"

    def test_query_then_key(self):
        url = build_path(HOST, "player", {"name": "Notch"}, KEYS[0])
        assert url == f"{HOST}/player?name=Notch&key={KEYS[0]}"

    def test_trailing_slash_on_host(self):
        assert build_path(HOST + "/", "key", None, KEYS[0]).startswith(f"{HOST}/key?")

    @pytest.mark.parametrize("value, encoded", [
        ("Some Body", "Some+Body"),
        ("a&b=c", "a%26b%3Dc"),
        ("é", "%C3%A9"),
        ("50%+/?", "50%25%2B%2F%3F"),
    ])
    def test_values_are_encoded(self, value, encoded):
        url = build_path(HOST, "guild", {"name": value}, KEYS[0])
        assert f"name={encoded}&" in url
        assert parse_qs(urlsplit(url).query)["name"] == [value]

    def test_query_mapping_not_mutated(self):
        query = {"uuid": "abc"}
        build_path(HOST, "session", query, KEYS[0])
        assert query == {"uuid": "abc"}
