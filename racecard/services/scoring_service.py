"""ScoringService - 出馬表の各馬にスコアを付けて順位付けするサービス"""

import logging

from racecard.analyzers.adjustments import weather_adjustment, weight_change_adjustment
from racecard.analyzers.factors import (
    AgeFactor,
    GroundPerformanceFactor,
    JockeyRatingFactor,
    TrainerRatingFactor,
    WeightFactor,
)
from racecard.analyzers.score_calculator import ScoreCalculator
from racecard.models.horse import HorseRecord
from racecard.models.scored import ScoredHorse
from racecard.models.track_condition import TrackCondition

logger = logging.getLogger(__name__)


class ScoringService:
    """馬場状態を指定して各馬のスコアを計算し、スコア降順に並べるサービス

    入力の馬ごとに独立して計算するため、他の馬の値には影響されない。
    """

    def __init__(self, weights: dict[str, float] | None = None):
        """初期化

        Args:
            weights: Factor重み設定（Noneの場合はデフォルト値を使用）
        """
        # Factorインスタンスを作成（この順序で加算する）
        self._factors = {
            factor.name: factor
            for factor in (
                AgeFactor(),
                WeightFactor(),
                JockeyRatingFactor(),
                TrainerRatingFactor(),
                GroundPerformanceFactor(),
            )
        }

        self._score_calculator = ScoreCalculator(weights)

    def score(
        self, horses: list[HorseRecord], condition: TrackCondition
    ) -> list[ScoredHorse]:
        """各馬のスコアを計算して順位付けする

        Args:
            horses: 馬のリスト
            condition: 馬場状態

        Returns:
            スコア降順のScoredHorseリスト。同スコアの場合は入力順を保つ。
        """
        scored = [
            (index, horse, *self._score_horse(horse, condition))
            for index, horse in enumerate(horses)
        ]

        # 同スコアは入力順（安定ソートを明示）
        scored.sort(key=lambda item: (-item[2], item[0]))

        return [
            ScoredHorse(
                horse=horse,
                score=total,
                rank=rank,
                factor_scores=factor_scores,
                multipliers=multipliers,
            )
            for rank, (_, horse, total, factor_scores, multipliers) in enumerate(
                scored, 1
            )
        ]

    def _score_horse(
        self, horse: HorseRecord, condition: TrackCondition
    ) -> tuple[float, dict[str, float | None], dict[str, float]]:
        """1頭分のスコアを計算する

        Args:
            horse: 対象馬
            condition: 馬場状態

        Returns:
            (総合スコア, Factor値, 補正係数) のタプル
        """
        factor_scores = {
            name: factor.calculate(horse, condition)
            for name, factor in self._factors.items()
        }

        multipliers = {
            "weight_change": weight_change_adjustment(
                horse.current_weight, horse.prior_weight
            ),
            "ground_form": weather_adjustment(
                factor_scores[GroundPerformanceFactor.name]
            ),
        }

        total = self._score_calculator.calculate_total(factor_scores, multipliers)

        logger.debug(
            "Calculating for %s: factors=%s, multipliers=%s, score=%s",
            horse.name,
            factor_scores,
            multipliers,
            total,
        )
        return total, factor_scores, multipliers


def score_horses(
    horses: list[HorseRecord],
    condition: TrackCondition,
    weights: dict[str, float] | None = None,
) -> list[ScoredHorse]:
    """各馬のスコアを計算して順位付けする

    ScoringService(weights).score() のショートカット。
    """
    return ScoringService(weights).score(horses, condition)
