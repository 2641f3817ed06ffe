"""テーブル表示ユーティリティ"""

import click

from racecard.models.horse import HorseRecord
from racecard.models.scored import ScoredHorse


def _format_optional(value: float | None, spec: str = ".2f") -> str:
    """Noneを"-"として数値を整形する"""
    return format(value, spec) if value is not None else "-"


def print_horse_table(horses: list[HorseRecord]) -> None:
    """パース結果テーブルを表示する

    Args:
        horses: HorseRecordのリスト
    """
    click.echo(f"{'No':^4} | {'馬名':^20} | {'年齢':^4} | {'斤量':^6} | {'成績':<}")
    click.echo("-" * 60)

    for number, horse in enumerate(horses, 1):
        # 馬名を20文字に切り詰め
        horse_name = horse.name[:20] if horse.name else "(名前なし)"
        form = " ".join(
            f"{r.finish_position}{r.ground_code}" for r in horse.prior_results
        )
        click.echo(
            f"{number:^4} | {horse_name:<20} | {horse.age:^4} | "
            f"{horse.current_weight:^6.1f} | {form or '-'}"
        )


def print_prediction_table(scored_horses: list[ScoredHorse]) -> None:
    """予測結果テーブルを表示する

    Args:
        scored_horses: スコア降順のScoredHorseリスト
    """
    click.echo(
        f"{'順位':^4} | {'馬名':^20} | {'スコア':^8} | {'年齢補正':^8} | "
        f"{'斤量':^6} | {'同馬場':^6} | {'補正':^6}"
    )
    click.echo("-" * 82)

    for scored in scored_horses:
        horse_name = scored.horse.name[:20] if scored.horse.name else "(名前なし)"
        age = _format_optional(scored.factor_scores.get("age"))
        weight = _format_optional(scored.factor_scores.get("weight"), ".1f")
        ground = _format_optional(scored.factor_scores.get("ground_performance"))

        multiplier = 1.0
        for value in scored.multipliers.values():
            multiplier *= value

        click.echo(
            f"{scored.rank:^4} | {horse_name:<20} | {scored.score:^8.2f} | {age:^8} | "
            f"{weight:^6} | {ground:^6} | {multiplier:^6.2f}"
        )
