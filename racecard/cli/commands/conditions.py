"""conditions コマンド - 選択可能な馬場状態を表示する"""

import click

from racecard.models.track_condition import TrackCondition


@click.command()
def conditions():
    """選択可能な馬場状態を表示する"""
    for condition in TrackCondition:
        click.echo(f"{condition.token:<4} {condition.label}")
