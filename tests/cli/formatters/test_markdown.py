"""Tests for markdown formatter module."""

from pathlib import Path

from racecard.cli.formatters.markdown import (
    format_score_line,
    save_predictions_markdown,
    slugify_title,
)
from racecard.models.horse import HorseRecord, PriorResult
from racecard.models.track_condition import TrackCondition
from racecard.services.scoring_service import score_horses


def _scored():
    horses = [
        HorseRecord(name="Thunder Bolt", current_weight=61.5, prior_weight=61.5),
        HorseRecord(
            name="Silver Arrow",
            age=4,
            current_weight=50.0,
            prior_weight=50.0,
            prior_results=(PriorResult(2, "Gd"),),
        ),
    ]
    return score_horses(horses, TrackCondition.GOOD)


class TestFormatScoreLine:
    """format_score_lineのテスト"""

    def test_two_decimal_places(self):
        """馬名とスコア（小数点以下2桁）"""
        scored = _scored()
        assert format_score_line(scored[-1]) == "Thunder Bolt: -61.50"


class TestSlugifyTitle:
    """slugify_titleのテスト"""

    def test_slug(self):
        assert slugify_title("Kempton 2:30 Handicap") == "kempton-2-30-handicap"

    def test_empty_slug_uses_default(self):
        assert slugify_title("!!!") == "race-card"


class TestSaveMarkdown:
    """save_predictions_markdownのテスト"""

    def test_writes_file(self, tmp_path):
        """出力ディレクトリにファイルを作成する"""
        filepath = save_predictions_markdown(
            _scored(), TrackCondition.GOOD, "Kempton 2:30", str(tmp_path)
        )
        assert Path(filepath) == tmp_path / "kempton-2-30-gd.md"
        assert Path(filepath).exists()

    def test_content(self, tmp_path):
        """順位・馬名・スコアの表を含む"""
        filepath = save_predictions_markdown(
            _scored(), TrackCondition.GOOD, "Kempton 2:30", str(tmp_path)
        )
        content = Path(filepath).read_text(encoding="utf-8")

        assert "# Kempton 2:30 予測結果" in content
        assert "馬場状態: Good (Gd)" in content
        assert "| 1 | Silver Arrow |" in content
        assert "| 2 | Thunder Bolt | -61.50 |" in content

    def test_creates_missing_directory(self, tmp_path):
        """出力ディレクトリがなければ作成する"""
        output_dir = tmp_path / "nested" / "predictions"
        save_predictions_markdown(_scored(), TrackCondition.SOFT, "Race", str(output_dir))
        assert (output_dir / "race-sft.md").exists()

    def test_empty_predictions(self, tmp_path):
        """予測対象がない場合もファイルを作成する"""
        filepath = save_predictions_markdown([], TrackCondition.GOOD, "Race", str(tmp_path))
        content = Path(filepath).read_text(encoding="utf-8")
        assert "予測対象の馬がありません" in content
