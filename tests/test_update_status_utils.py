"""
Tests for utils/update_status.py: status codes, labels, filter categories.
"""
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from utils import update_status as us
from utils.update_status import STATUS_OPTIONS, StatusFilter, status_categories, status_label


class TestStatusFilter:
    def test_order(self):
        assert [f.value for f in StatusFilter] == ["all", "updates", "security", "unsupported"]

    def test_default_is_all(self):
        assert StatusFilter.default() is StatusFilter.ALL

    def test_options_match_enum(self):
        assert list(STATUS_OPTIONS) == [f.value for f in StatusFilter]
        assert STATUS_OPTIONS["updates"] == "Update available"

    def test_is_str(self):
        assert StatusFilter.SECURITY == "security"


class TestStatusCategories:
    @pytest.mark.parametrize("status, expected", [
        (us.NOT_CURRENT, ("updates",)),
        (us.NOT_SECURE, ("updates", "security")),
        (us.REVOKED, ("security", "unsupported")),
        (us.NOT_SUPPORTED, ("unsupported",)),
        (us.CURRENT, ()),
        (us.NOT_CHECKED, ()),
        (us.UNKNOWN, ()),
        (us.NOT_FETCHED, ()),
        (us.FETCH_PENDING, ()),
        (999, ()),
    ])
    def test_mapping(self, status, expected):
        assert status_categories(status) == expected

    def test_all_never_listed(self):
        for code in (us.NOT_SECURE, us.REVOKED, us.NOT_SUPPORTED, us.NOT_CURRENT):
            assert "all" not in status_categories(code)


class TestStatusLabel:
    def test_known(self):
        assert status_label(us.NOT_SECURE) == "Security update required!"
        assert status_label(us.CURRENT) == "Up to date"

    def test_unknown_code_falls_back(self):
        assert status_label(42) == "Unknown"
