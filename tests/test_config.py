"""配置模块单元测试"""

import pytest

from enterprise_core.config import get_decimals, get_default_period


class TestGetDecimals:
    """get_decimals() 测试"""

    def test_default(self, monkeypatch):
        monkeypatch.delenv("KPI_GROWTH_DECIMALS", raising=False)
        assert get_decimals() == 2

    def test_blank_uses_default(self, monkeypatch):
        monkeypatch.setenv("KPI_GROWTH_DECIMALS", "  ")
        assert get_decimals() == 2

    def test_custom(self, monkeypatch):
        monkeypatch.setenv("KPI_GROWTH_DECIMALS", " 4 ")
        assert get_decimals() == 4

    def test_not_integer(self, monkeypatch):
        monkeypatch.setenv("KPI_GROWTH_DECIMALS", "two")
        with pytest.raises(ValueError, match="KPI_GROWTH_DECIMALS"):
            get_decimals()

    @pytest.mark.parametrize("raw", ["-1", "11"])
    def test_out_of_range(self, monkeypatch, raw):
        monkeypatch.setenv("KPI_GROWTH_DECIMALS", raw)
        with pytest.raises(ValueError, match="0 到 10"):
            get_decimals()


class TestGetDefaultPeriod:
    """get_default_period() 测试"""

    def test_default(self, monkeypatch):
        monkeypatch.delenv("KPI_GROWTH_PERIOD", raising=False)
        assert get_default_period() == "年度"

    def test_custom(self, monkeypatch):
        monkeypatch.setenv("KPI_GROWTH_PERIOD", "季度")
        assert get_default_period() == "季度"
