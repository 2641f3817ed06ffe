"""WeightFactor - 斤量Factor"""

from racecard.analyzers.factors.base import BaseFactor
from racecard.models.horse import HorseRecord
from racecard.models.track_condition import TrackCondition


class WeightFactor(BaseFactor):
    """今回斤量（kg）をそのまま返す"""

    name = "weight"

    def calculate(
        self, horse: HorseRecord, condition: TrackCondition, **kwargs
    ) -> float | None:
        return horse.current_weight
