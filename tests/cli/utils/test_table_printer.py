"""Tests for table printer utilities."""

from racecard.cli.utils.table_printer import print_horse_table, print_prediction_table
from racecard.models.horse import HorseRecord, PriorResult
from racecard.models.track_condition import TrackCondition
from racecard.services.scoring_service import score_horses


class TestPrintHorseTable:
    """print_horse_tableのテスト"""

    def test_prints_each_horse(self, capsys):
        horses = [
            HorseRecord(
                name="Thunder Bolt",
                age=5,
                current_weight=61.5,
                prior_results=(PriorResult(1, "Gd"), PriorResult(3, "Sft")),
            ),
            HorseRecord(name=""),
        ]
        print_horse_table(horses)
        output = capsys.readouterr().out

        assert "Thunder Bolt" in output
        assert "1Gd 3Sft" in output
        assert "(名前なし)" in output


class TestPrintPredictionTable:
    """print_prediction_tableのテスト"""

    def test_prints_rank_and_score(self, capsys):
        scored = score_horses(
            [HorseRecord(name="Thunder Bolt", current_weight=61.5, prior_weight=61.5)],
            TrackCondition.GOOD,
        )
        print_prediction_table(scored)
        output = capsys.readouterr().out

        assert "Thunder Bolt" in output
        assert "-61.50" in output
