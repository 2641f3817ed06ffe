"""ScoreCalculator - 重み付きスコア計算"""

from racecard.config.weights import FACTOR_WEIGHTS


class ScoreCalculator:
    """Factor値の重み付き合計に補正係数を掛けたスコアを計算する"""

    def __init__(self, weights: dict[str, float] | None = None):
        """ScoreCalculatorを初期化する

        Args:
            weights: Factor重み設定（Noneの場合はデフォルト値を使用）。
                     一部のFactorだけを指定した場合、残りはデフォルト値を使う。
        """
        self._weights = {**FACTOR_WEIGHTS, **(weights or {})}

    def get_weights(self) -> dict[str, float]:
        """重み設定を取得する"""
        return self._weights.copy()

    def calculate_total(
        self,
        factor_scores: dict[str, float | None],
        multipliers: dict[str, float] | None = None,
    ) -> float:
        """重み付き合計スコアを計算する

        Args:
            factor_scores: 各Factorの値（Noneは0として扱う）
            multipliers: 合計に掛ける補正係数

        Returns:
            総合スコア
        """
        total_score = 0.0

        for factor_name, score in factor_scores.items():
            if score is not None and factor_name in self._weights:
                total_score += self._weights[factor_name] * score

        for multiplier in (multipliers or {}).values():
            total_score *= multiplier

        return total_score
