"""出馬表テキストの数値トークンを解析するモジュール

OCRやPDFテキストから取り出したトークンは崩れていることが多いため、
解析できない場合は例外ではなくNoneを返す。負数・指数表記・inf/nanは受け付けない。
整数部は最大18桁（64bit整数に収まる範囲）とし、それより長い数字列は解析できない値として扱う。
"""

import re

_INT_PATTERN = re.compile(r"\+?\d{1,18}")
_DECIMAL_PATTERN = re.compile(r"\+?(?:\d{1,18}(?:\.\d*)?|\.\d+)")


def parse_non_negative_int(token: str) -> int | None:
    """非負整数トークンを解析する

    Args:
        token: 解析対象の文字列（例: "5"）

    Returns:
        整数値、解析できない場合はNone
    """
    if not _INT_PATTERN.fullmatch(token):
        return None
    return int(token)


def parse_non_negative_float(token: str) -> float | None:
    """非負の小数トークンを解析する

    Args:
        token: 解析対象の文字列（例: "61.5"）

    Returns:
        浮動小数点値、解析できない場合はNone
    """
    if not _DECIMAL_PATTERN.fullmatch(token):
        return None
    return float(token)
