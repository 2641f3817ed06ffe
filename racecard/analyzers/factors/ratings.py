"""JockeyRatingFactor / TrainerRatingFactor - 騎手・調教師レーティングFactor

現状の出馬表パーサーはレーティングを読み取らないため、常にNoneになる。
"""

from racecard.analyzers.factors.base import BaseFactor
from racecard.models.horse import HorseRecord
from racecard.models.track_condition import TrackCondition


class JockeyRatingFactor(BaseFactor):
    """騎手レーティング"""

    name = "jockey_rating"

    def calculate(
        self, horse: HorseRecord, condition: TrackCondition, **kwargs
    ) -> float | None:
        return horse.jockey_rating


class TrainerRatingFactor(BaseFactor):
    """調教師レーティング"""

    name = "trainer_rating"

    def calculate(
        self, horse: HorseRecord, condition: TrackCondition, **kwargs
    ) -> float | None:
        return horse.trainer_rating
