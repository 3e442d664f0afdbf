"""Derived player attributes."""
import pytest

from hypixel_stats.domain import PackageRank, StaffRank
from hypixel_stats.domain.attributes import is_online, network_level, rank_label, resolve_rank


class TestNetworkLevel:

    @pytest.mark.parametrize("exp", [-1, -5000])
    def test_negative_experience_is_level_one(self, exp):
        assert network_level(exp) == 1

    @pytest.mark.parametrize("exp, level", [
        (0, 1),
        (2500, 1),
        (5000, 1),
        (15000, 2),
        (30000, 3),
        (100000, 7),
        (1234567, 29),
    ])
    def test_reference_values(self, exp, level):
        assert network_level(exp) == level

    def test_missing_experience(self):
        assert network_level(None) == 1

    def test_result_is_floored_not_rounded(self):
        # 2.9-ish level must stay 2
        assert network_level(19999) == 2


class TestIsOnline:

    def test_login_after_logout(self):
        assert is_online(100, 50) is True

    def test_logout_after_login(self):
        assert is_online(50, 100) is False

    def test_equal_timestamps_are_offline(self):
        assert is_online(100, 100) is False

    def test_missing_timestamps_are_offline(self):
        assert is_online(None, 100) is False
        assert is_online(100, None) is False


class TestRankLabel:

    def test_prefix_strips_colour_codes_and_brackets(self):
        assert rank_label({"prefix": "§6[MVP§c+§6]"}, True) == "MVP+"

    def test_prefix_wins_over_other_fields(self):
        record = {"prefix": "§c[OWNER]", "rank": "ADMIN", "newPackageRank": "MVP_PLUS"}
        assert rank_label(record) == "OWNER"
        assert rank_label(record, False) == "[OWNER]"

    @pytest.mark.parametrize("rank, text", [
        ("MODERATOR", "MOD"),
        ("YOUTUBER", "Youtuber"),
        ("HELPER", "Helper"),
        ("ADMIN", "Admin"),
    ])
    def test_legacy_ranks(self, rank, text):
        assert rank_label({"rank": rank, "newPackageRank": "VIP"}) == text

    def test_admin_unformatted(self):
        assert rank_label({"rank": "ADMIN"}, False) == "[Admin]"

    def test_unmapped_legacy_rank_yields_nothing(self):
        assert rank_label({"rank": "OWNER", "newPackageRank": "MVP"}) == ""
        assert rank_label({"rank": "OWNER"}, False) == ""

    def test_normal_legacy_rank_falls_through_to_package(self):
        assert rank_label({"rank": "NORMAL", "newPackageRank": "VIP_PLUS"}) == "VIP+"

    def test_superstar(self):
        record = {"newPackageRank": "MVP_PLUS", "monthlyPackageRank": "SUPERSTAR"}
        assert rank_label(record, True) == "MVP++"
        assert rank_label(record, False) == "[MVP++]"

    def test_mvp_plus_without_monthly(self):
        assert rank_label({"newPackageRank": "MVP_PLUS"}, True) == "MVP+"
        assert rank_label({"newPackageRank": "MVP_PLUS", "monthlyPackageRank": "NONE"}) == "MVP+"

    @pytest.mark.parametrize("package, text", [("MVP", "MVP"), ("VIP_PLUS", "VIP+"), ("VIP", "VIP")])
    def test_package_ranks(self, package, text):
        assert rank_label({"newPackageRank": package}) == text

    @pytest.mark.parametrize("formatting", [True, False])
    def test_rankless(self, formatting):
        assert rank_label({}, formatting) == ""
        assert rank_label({"newPackageRank": "NONE"}, formatting) == ""

    def test_superstar_only_upgrades_mvp_plus(self):
        assert resolve_rank({"newPackageRank": "VIP", "monthlyPackageRank": "SUPERSTAR"}) == "VIP"


class TestRankEnums:

    def test_package_rank_from_string(self):
        assert PackageRank.from_string("VIP_PLUS") is PackageRank.VIP_PLUS
        assert PackageRank.from_string("vip_plus") is None
        assert PackageRank.from_string(None) is None

    def test_staff_rank_display(self):
        assert StaffRank.from_string("MODERATOR").display == "MOD"
        assert StaffRank.NORMAL.display == ""
        assert StaffRank.from_string("GAME_MASTER") is None
