"""ScoredHorse - スコア計算結果"""

from dataclasses import dataclass

from racecard.models.horse import HorseRecord


@dataclass(frozen=True)
class ScoredHorse:
    """スコア計算結果（イミュータブル）

    Attributes:
        horse: 対象馬
        score: 総合スコア
        rank: 順位（1始まり、スコア降順）
        factor_scores: 各Factorの値（Noneはデータなし）
        multipliers: 各補正係数
    """

    horse: HorseRecord
    score: float
    rank: int
    factor_scores: dict[str, float | None]
    multipliers: dict[str, float]
