"""Click CLIメインモジュール"""

import logging

import click


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="デバッグログを表示する")
def main(verbose: bool):
    """出馬表テキスト解析・スコア計算CLI"""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


# コマンドの登録
from racecard.cli.commands.conditions import conditions
from racecard.cli.commands.parse import parse
from racecard.cli.commands.predict import predict

main.add_command(conditions)
main.add_command(parse)
main.add_command(predict)


__all__ = ["main"]
