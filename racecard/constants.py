"""Constants for race card parsing."""

# 出馬表の見出し/フッター行に含まれる予想欄の目印（データ行ではない）
VERDICT_MARKER = "ATR VERDICT"

# ヘッダー行末尾の斤量フィールドに付く単位
WEIGHT_UNIT_SUFFIX = "kg"
