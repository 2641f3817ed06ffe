"""出馬表テキストの解析とヒューリスティックなスコア計算"""
