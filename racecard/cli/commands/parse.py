"""parse コマンド - 出馬表テキストをパースして表示する"""

import click

from racecard.cli.utils.table_printer import print_horse_table
from racecard.parsers.race_card import parse_race_card


@click.command()
@click.argument("input_file", type=click.File("r", encoding="utf-8"))
def parse(input_file):
    """出馬表テキストをパースして馬データを表示する（INPUT_FILEに - を指定すると標準入力）"""
    horses = parse_race_card(input_file.read())

    if not horses:
        click.echo("有効な馬データが見つかりません")
        raise SystemExit(1)

    click.echo(f"{len(horses)}頭のデータを読み込みました")
    click.echo("")
    print_horse_table(horses)
