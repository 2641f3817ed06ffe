"""TrackCondition - 馬場状態の列挙型"""

from enum import Enum


class TrackCondition(Enum):
    """馬場状態

    値は出馬表の成績欄で使われる馬場コードで、表示と
    PriorResult.ground_code との照合の両方に使う。
    """

    GOOD = "Gd"
    SOFT = "Sft"
    HEAVY = "Hy"
    FIRM = "Fm"
    STANDARD = "St"

    @property
    def token(self) -> str:
        """馬場コード"""
        return self.value

    @property
    def label(self) -> str:
        """表示名（例: "Good"）"""
        return self.name.capitalize()

    @classmethod
    def from_value(cls, value: str) -> "TrackCondition":
        """馬場コードまたは表示名からTrackConditionを取得する

        Args:
            value: 馬場コード（"Gd"など）または表示名（"good"など、大文字小文字不問）

        Returns:
            TrackCondition

        Raises:
            ValueError: 該当する馬場状態がない場合
        """
        text = value.strip()
        for condition in cls:
            if text == condition.token:
                return condition
        lowered = text.lower()
        for condition in cls:
            if lowered in (condition.token.lower(), condition.name.lower()):
                return condition
        raise ValueError(f"Unknown track condition: {value}")
