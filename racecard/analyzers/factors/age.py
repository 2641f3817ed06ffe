"""AgeFactor - 年齢Factor"""

from racecard.analyzers.factors.base import BaseFactor
from racecard.config.weights import (
    AGE_CEILING,
    AGE_DECAY_RATE,
    AGE_DECAY_SPAN,
    AGE_PEAK,
    AGE_RAMP_START,
    SHORT_DISTANCE_THRESHOLD,
)
from racecard.models.horse import HorseRecord
from racecard.models.track_condition import TrackCondition


def age_adjustment(age: float, distance: float) -> float:
    """年齢補正値を計算する

    2歳以下は0、4.5歳まで上限値に向けて直線的に上昇し、
    それ以降は直線的に減衰する。上限値と減衰率は距離で切り替える。

    Args:
        age: 年齢
        distance: レース距離

    Returns:
        年齢補正値
    """
    band = "short" if distance < SHORT_DISTANCE_THRESHOLD else "long"
    ceiling = AGE_CEILING[band]

    if age <= AGE_RAMP_START:
        return 0.0
    if age <= AGE_PEAK:
        return (age - AGE_RAMP_START) / (AGE_PEAK - AGE_RAMP_START) * ceiling
    return ceiling - (age - AGE_PEAK) / AGE_DECAY_SPAN * AGE_DECAY_RATE[band]


class AgeFactor(BaseFactor):
    """年齢に基づく補正値

    距離が不明な場合は0として扱う（短距離側のカーブになる）。
    """

    name = "age"

    def calculate(
        self, horse: HorseRecord, condition: TrackCondition, **kwargs
    ) -> float | None:
        distance = horse.race_distance if horse.race_distance is not None else 0.0
        return age_adjustment(horse.age, distance)
