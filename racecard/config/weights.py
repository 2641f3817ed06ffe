"""Factor重み・補正係数設定

スコア = (各Factor値 × 重み の合計) × 斤量変化補正 × 馬場適性補正
重みは符号付き（負の重みは値が大きいほどスコアを下げる）。
"""

FACTOR_WEIGHTS = {
    "age": 1.0,  # 年齢補正: そのまま加算
    "weight": -1.0,  # 斤量: 重いほど減点
    "jockey_rating": 2.0,  # 騎手レーティング
    "trainer_rating": 2.0,  # 調教師レーティング
    "ground_performance": -3.0,  # 同馬場の平均着順: 着順が小さいほど良い
}

# FACTOR_WEIGHTSのキーをイミュータブルなタプルとして提供
FACTOR_NAMES = tuple(FACTOR_WEIGHTS.keys())

# 年齢補正カーブ
AGE_RAMP_START = 2.0  # この年齢以下は補正なし
AGE_PEAK = 4.5  # ピーク年齢
AGE_DECAY_SPAN = 5.0  # ピーク以降の減衰スパン（年）
SHORT_DISTANCE_THRESHOLD = 1.0  # 距離がこれ未満なら短距離扱い
AGE_CEILING = {"short": 10.0, "long": 15.0}
AGE_DECAY_RATE = {"short": 6.0, "long": 9.5}

# 斤量増加時の補正係数
WEIGHT_GAIN_MULTIPLIER = 1.19

# 同馬場平均着順による補正（上限着順, 係数）を昇順で評価する
GROUND_FORM_BANDS = (
    (3.0, 1.2),  # 好走: 3着以内
    (6.0, 1.0),  # 普通
)
GROUND_FORM_POOR_MULTIPLIER = 0.8  # 6着より悪い
GROUND_FORM_UNKNOWN_MULTIPLIER = 1.0  # 該当馬場の実績なし
