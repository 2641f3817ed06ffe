"""サービス層パッケージ"""

from racecard.services.scoring_service import ScoringService, score_horses

__all__ = [
    "ScoringService",
    "score_horses",
]
