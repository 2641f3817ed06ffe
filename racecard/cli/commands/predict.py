"""predict コマンド - 出馬表テキストから各馬のスコアを計算する"""

import logging
from pathlib import Path

import click

from racecard.cli.formatters.markdown import DEFAULT_TITLE, save_predictions_markdown
from racecard.cli.utils.table_printer import print_prediction_table
from racecard.models.track_condition import TrackCondition
from racecard.parsers.race_card import parse_race_card
from racecard.services.scoring_service import ScoringService

logger = logging.getLogger(__name__)

CONDITION_CHOICES = [condition.token for condition in TrackCondition]


def _prompt_condition() -> TrackCondition:
    """馬場状態を対話的に選択する

    Returns:
        選択されたTrackCondition
    """
    for condition in TrackCondition:
        click.echo(f"  {condition.token:<4} {condition.label}")
    value = click.prompt(
        "馬場状態を選択してください",
        type=click.Choice(CONDITION_CHOICES, case_sensitive=False),
    )
    return TrackCondition.from_value(value)


@click.command()
@click.argument("input_file", type=click.File("r", encoding="utf-8"))
@click.option(
    "--condition",
    "condition_value",
    default=None,
    type=click.Choice(CONDITION_CHOICES, case_sensitive=False),
    help="馬場状態（省略時は対話的に選択）",
)
@click.option("--output-dir", default=None, type=click.Path(file_okay=False), help="Markdown出力ディレクトリ")
@click.option("--title", default=None, help="レース名（省略時は入力ファイル名）")
def predict(input_file, condition_value: str | None, output_dir: str | None, title: str | None):
    """出馬表テキストから各馬のスコアを計算して順位を表示する"""
    horses = parse_race_card(input_file.read())

    if not horses:
        click.echo("有効な馬データが見つかりません")
        raise SystemExit(1)

    click.echo(f"{len(horses)}頭のデータを読み込みました")

    if condition_value is None:
        condition = _prompt_condition()
    else:
        condition = TrackCondition.from_value(condition_value)

    click.echo(f"馬場状態: {condition.label} ({condition.token})")
    click.echo("")

    scored_horses = ScoringService().score(horses, condition)
    print_prediction_table(scored_horses)

    if output_dir is not None:
        if title is None:
            stem = Path(input_file.name).stem
            title = stem if not stem.startswith("<") else DEFAULT_TITLE
        filepath = save_predictions_markdown(scored_horses, condition, title, output_dir)
        logger.info("Saved predictions to %s", filepath)
        click.echo("")
        click.echo(f"予測結果を保存しました: {filepath}")
