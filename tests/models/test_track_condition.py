"""Tests for racecard.models.track_condition module."""

import pytest

from racecard.models.track_condition import TrackCondition


class TestTrackConditionTokens:
    """馬場コードのテスト"""

    def test_members(self):
        """5種類の馬場状態を持つ"""
        assert [c.token for c in TrackCondition] == ["Gd", "Sft", "Hy", "Fm", "St"]

    def test_label(self):
        """表示名は先頭大文字の名前"""
        assert TrackCondition.GOOD.label == "Good"
        assert TrackCondition.STANDARD.label == "Standard"


class TestFromValue:
    """TrackCondition.from_valueのテスト"""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("Gd", TrackCondition.GOOD),
            ("Sft", TrackCondition.SOFT),
            ("sft", TrackCondition.SOFT),
            (" St ", TrackCondition.STANDARD),
            ("st", TrackCondition.STANDARD),
            ("heavy", TrackCondition.HEAVY),
            ("FIRM", TrackCondition.FIRM),
        ],
    )
    def test_resolves_token_or_name(self, value, expected):
        """馬場コードまたは名前から取得できる"""
        assert TrackCondition.from_value(value) is expected

    def test_unknown_value_raises(self):
        """不明な値はValueErrorを送出する"""
        with pytest.raises(ValueError, match="Mud"):
            TrackCondition.from_value("Mud")
