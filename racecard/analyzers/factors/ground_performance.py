"""GroundPerformanceFactor - 馬場適性Factor"""

from racecard.analyzers.factors.base import BaseFactor
from racecard.models.horse import HorseRecord, PriorResult
from racecard.models.track_condition import TrackCondition


def average_ground_performance(
    ground_code: str, prior_results: tuple[PriorResult, ...] | list[PriorResult]
) -> float | None:
    """指定馬場での平均着順を計算する

    Args:
        ground_code: 馬場コード（完全一致で照合する）
        prior_results: 過去成績

    Returns:
        平均着順、該当馬場の成績がない場合はNone
    """
    positions = [
        r.finish_position for r in prior_results if r.ground_code == ground_code
    ]
    if not positions:
        return None
    return sum(positions) / len(positions)


class GroundPerformanceFactor(BaseFactor):
    """選択された馬場状態での平均着順

    着順は小さいほど良いため、重みは負の値で使う。
    """

    name = "ground_performance"

    def calculate(
        self, horse: HorseRecord, condition: TrackCondition, **kwargs
    ) -> float | None:
        return average_ground_performance(condition.token, horse.prior_results)
