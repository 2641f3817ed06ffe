"""CLI出力フォーマッタパッケージ"""

from racecard.cli.formatters.markdown import (
    format_score_line,
    save_predictions_markdown,
    slugify_title,
)

__all__ = [
    "format_score_line",
    "save_predictions_markdown",
    "slugify_title",
]
