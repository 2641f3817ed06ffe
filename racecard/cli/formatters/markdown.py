"""Markdown予測結果ファイルの生成機能を提供するモジュール"""

import logging
import re
from datetime import datetime as dt
from pathlib import Path

from racecard.models.scored import ScoredHorse
from racecard.models.track_condition import TrackCondition

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "race-card"


def format_score_line(scored: ScoredHorse) -> str:
    """1頭分の表示行を生成する

    Args:
        scored: スコア計算結果

    Returns:
        "馬名: スコア" 形式の文字列（スコアは小数点以下2桁）
    """
    return f"{scored.horse.name}: {scored.score:.2f}"


def slugify_title(title: str) -> str:
    """タイトルをファイル名用の文字列に変換する

    Args:
        title: レース名など

    Returns:
        英数字とハイフンのみの小文字文字列（空になる場合はDEFAULT_TITLE）
    """
    slug = re.sub(r"[^0-9A-Za-z]+", "-", title).strip("-").lower()
    return slug or DEFAULT_TITLE


def save_predictions_markdown(
    scored_horses: list[ScoredHorse],
    condition: TrackCondition,
    title: str,
    output_dir: str | None = None,
) -> str:
    """予測結果をMarkdownファイルに保存する

    Args:
        scored_horses: スコア降順のScoredHorseリスト
        condition: 馬場状態
        title: レース名（ファイル名と見出しに使用）
        output_dir: 出力ディレクトリ（Noneの場合はカレントディレクトリのpredictions）

    Returns:
        保存したファイルパス
    """
    # 出力ディレクトリを決定
    if output_dir is None:
        base_path = Path.cwd() / "predictions"
    else:
        base_path = Path(output_dir)

    # ディレクトリが存在しない場合は作成
    base_path.mkdir(parents=True, exist_ok=True)

    filename = f"{slugify_title(title)}-{condition.token.lower()}.md"
    filepath = base_path / filename

    lines = [
        f"# {title} 予測結果",
        "",
        f"生成日時: {dt.now().strftime('%Y-%m-%d %H:%M:%S')}",
        f"馬場状態: {condition.label} ({condition.token})",
        "",
    ]

    if scored_horses:
        lines.append("| 順位 | 馬名 | スコア | 年齢 | 斤量 | 同馬場平均着順 | 補正 |")
        lines.append("|:---:|:---|:---:|:---:|:---:|:---:|:---:|")
        for scored in scored_horses:
            avg = scored.factor_scores.get("ground_performance")
            avg_str = f"{avg:.2f}" if avg is not None else "-"
            multiplier = 1.0
            for value in scored.multipliers.values():
                multiplier *= value
            lines.append(
                f"| {scored.rank} | {scored.horse.name} | {scored.score:.2f} | "
                f"{scored.horse.age} | {scored.horse.current_weight:.1f} | "
                f"{avg_str} | x{multiplier:.2f} |"
            )
    else:
        logger.warning("No predictions to save for %s", title)
        lines.append("予測対象の馬がありません")

    lines.append("")
    filepath.write_text("\n".join(lines), encoding="utf-8")

    return str(filepath)
