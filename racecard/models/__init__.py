"""データモデルパッケージ"""

from racecard.models.horse import HorseRecord, PriorResult
from racecard.models.scored import ScoredHorse
from racecard.models.track_condition import TrackCondition

__all__ = [
    "HorseRecord",
    "PriorResult",
    "ScoredHorse",
    "TrackCondition",
]
