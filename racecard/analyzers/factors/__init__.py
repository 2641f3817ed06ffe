"""Factor modules"""

from racecard.analyzers.factors.age import AgeFactor
from racecard.analyzers.factors.base import BaseFactor
from racecard.analyzers.factors.ground_performance import GroundPerformanceFactor
from racecard.analyzers.factors.ratings import JockeyRatingFactor, TrainerRatingFactor
from racecard.analyzers.factors.weight import WeightFactor

__all__ = [
    "AgeFactor",
    "BaseFactor",
    "GroundPerformanceFactor",
    "JockeyRatingFactor",
    "TrainerRatingFactor",
    "WeightFactor",
]
