"""補正係数のテスト"""

import pytest

from racecard.analyzers.adjustments import weather_adjustment, weight_change_adjustment


class TestWeightChangeAdjustment:
    """weight_change_adjustmentのテスト"""

    def test_weight_gain(self):
        """斤量増は1.19"""
        assert weight_change_adjustment(60.0, 59.0) == 1.19

    def test_same_weight(self):
        """同斤量は1.0"""
        assert weight_change_adjustment(60.0, 60.0) == 1.0

    def test_weight_loss(self):
        """斤量減は1.0"""
        assert weight_change_adjustment(58.0, 60.0) == 1.0


class TestWeatherAdjustment:
    """weather_adjustment（同馬場平均着順補正）のテスト"""

    def test_unknown_is_neutral(self):
        """実績なしは1.0"""
        assert weather_adjustment(None) == 1.0

    @pytest.mark.parametrize(
        "average, expected",
        [
            (1.0, 1.2),
            (3.0, 1.2),
            (3.01, 1.0),
            (6.0, 1.0),
            (6.01, 0.8),
            (12.0, 0.8),
        ],
    )
    def test_boundaries(self, average, expected):
        """3以下は1.2、6以下は1.0、それより大きいと0.8"""
        assert weather_adjustment(average) == expected

    def test_zero_average(self):
        """着順が読めず平均0の場合は好走扱い"""
        assert weather_adjustment(0.0) == 1.2
