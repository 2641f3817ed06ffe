"""Tests for racecard.parsers.form_figures module."""

import pytest

from racecard.models.horse import PriorResult
from racecard.parsers.form_figures import parse_form_figures, parse_form_token


class TestParseFormToken:
    """parse_form_tokenのテスト"""

    @pytest.mark.parametrize(
        "token, position, ground",
        [
            ("3Gd", 3, "Gd"),
            ("Sft4", 4, "Sft"),
            ("Hy12", 12, "Hy"),
            ("1", 1, ""),
            ("Gd", 0, "Gd"),
            ("21-1161", 0, ""),
            ("3Gd1", 0, "Gd"),
            ("P", 0, "P"),
        ],
    )
    def test_parse_token(self, token, position, ground):
        """数字部分が着順、英字部分が馬場コードになる"""
        assert parse_form_token(token) == PriorResult(
            finish_position=position, ground_code=ground
        )


class TestParseFormFigures:
    """parse_form_figuresのテスト"""

    def test_one_result_per_token(self):
        """トークンごとに1件の成績になる"""
        results = parse_form_figures("1Gd 3Sft 2Gd")
        assert results == (
            PriorResult(1, "Gd"),
            PriorResult(3, "Sft"),
            PriorResult(2, "Gd"),
        )

    def test_unreadable_tokens_are_kept(self):
        """読めないトークンも着順0として残る"""
        results = parse_form_figures("Form: 1Gd")
        assert results == (PriorResult(0, "Form"), PriorResult(1, "Gd"))

    def test_empty_line(self):
        """空行は空タプルを返す"""
        assert parse_form_figures("   ") == ()

    def test_returns_tuple(self):
        """戻り値はタプル（イミュータブル）"""
        assert isinstance(parse_form_figures("1Gd"), tuple)
