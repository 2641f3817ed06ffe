"""スコア補正係数

Factorの重み付き合計に掛ける乗数を計算する。
"""

from racecard.config.weights import (
    GROUND_FORM_BANDS,
    GROUND_FORM_POOR_MULTIPLIER,
    GROUND_FORM_UNKNOWN_MULTIPLIER,
    WEIGHT_GAIN_MULTIPLIER,
)


def weight_change_adjustment(current_weight: float, prior_weight: float) -> float:
    """斤量変化による補正係数を計算する

    Args:
        current_weight: 今回斤量
        prior_weight: 前走斤量

    Returns:
        斤量が増えていれば1.19、それ以外は1.0
    """
    if current_weight > prior_weight:
        return WEIGHT_GAIN_MULTIPLIER
    return 1.0


def weather_adjustment(average_position: float | None) -> float:
    """同馬場の平均着順による補正係数を計算する

    Args:
        average_position: 同馬場での平均着順（Noneは実績なし）

    Returns:
        3着以内なら1.2、6着以内なら1.0、それより悪ければ0.8、実績なしは1.0
    """
    if average_position is None:
        return GROUND_FORM_UNKNOWN_MULTIPLIER

    for upper_bound, multiplier in GROUND_FORM_BANDS:
        if average_position <= upper_bound:
            return multiplier
    return GROUND_FORM_POOR_MULTIPLIER
