"""Tests for fameex_connector/utils/params.py"""

import pytest

from fameex_connector.utils import get_params_string, trim_any


class TestTrimAny:
    def test_strips_spaces_and_periods(self):
        assert trim_any("  Signature error.. ", " .") == "Signature error"

    def test_keeps_inner_periods(self):
        assert trim_any("v1.0 failed.", " .") == "v1.0 failed"

    def test_non_string_raises(self):
        with pytest.raises(AttributeError):
            trim_any(123, " .")


class TestGetParamsString:
    def test_empty(self):
        assert get_params_string({}) == ""
        assert get_params_string(None) == ""

    def test_keeps_insertion_order(self):
        assert get_params_string({"symbol": "BTC-USDT", "orderId": "1"}) == "symbol=BTC-USDT&orderId=1"

    def test_lists_are_comma_joined(self):
        assert get_params_string({"orderIds": ["1", "2"]}) == "orderIds=1,2"

    def test_none_values_skipped(self):
        assert get_params_string({"a": 1, "b": None}) == "a=1"
