"""Key ring construction and rotation."""
import threading
from collections import Counter

import pytest

from hypixel_stats.core.exceptions import ConfigurationError
from hypixel_stats.infrastructure.api import KeyRing, is_valid_key

from .conftest import KEYS


class TestKeyRingConstruction:

    def test_single_string_key(self):
        ring = KeyRing(KEYS[0])
        assert len(ring) == 1
        assert ring.keys == (KEYS[0],)

    def test_malformed_keys_are_dropped(self):
        ring = KeyRing(["not-a-key", KEYS[0], "", KEYS[1].upper(), KEYS[2]])
        assert ring.keys == (KEYS[0], KEYS[2])

    def test_tuple_input_accepted(self):
        assert len(KeyRing(tuple(KEYS))) == 3

    def test_no_valid_keys_fails(self):
        with pytest.raises(ConfigurationError):
            KeyRing(["nope", "1234"])

    def test_empty_list_fails(self):
        with pytest.raises(ConfigurationError):
            KeyRing([])

    @pytest.mark.parametrize("bad", [42, 3.5, None, {"key": KEYS[0]}, {KEYS[0]}])
    def test_unsupported_input_shape_fails(self, bad):
        with pytest.raises(ConfigurationError):
            KeyRing(bad)

    def test_key_pattern(self):
        assert is_valid_key(KEYS[0])
        assert not is_valid_key(KEYS[0][:-1])
        assert not is_valid_key(KEYS[0] + "0")
        assert not is_valid_key(12345)


class TestKeyRingRotation:

    def test_rotation_starts_by_advancing(self):
        ring = KeyRing(KEYS)
        assert [ring.next_key() for _ in range(5)] == [KEYS[1], KEYS[2], KEYS[0], KEYS[1], KEYS[2]]

    def test_single_key_always_returned(self):
        ring = KeyRing(KEYS[0])
        assert {ring.next_key() for _ in range(10)} == {KEYS[0]}
        assert ring.cursor == 0

    @pytest.mark.parametrize("calls", [1, 2, 7, 10, 31])
    def test_even_spread(self, calls):
        ring = KeyRing(KEYS)
        counts = Counter(ring.next_key() for _ in range(calls))
        low, high = calls // len(KEYS), -(-calls // len(KEYS))
        for key in KEYS:
            assert low <= counts[key] <= high

    def test_cursor_stays_in_bounds(self):
        ring = KeyRing(KEYS)
        for _ in range(100):
            ring.next_key()
            assert 0 <= ring.cursor < len(ring)

    def test_concurrent_rotation_never_collides(self):
        keys = KEYS + ["0a1b2c3d-0000-4000-8000-000000000009"]
        ring = KeyRing(keys)
        results = []
        lock = threading.Lock()

        def worker():
            got = [ring.next_key() for _ in range(300)]
            with lock:
                results.extend(got)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        counts = Counter(results)
        assert len(results) == 2400
        assert all(counts[k] == 600 for k in keys)
