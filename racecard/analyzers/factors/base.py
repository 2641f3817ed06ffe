"""Factor基底クラス"""

from abc import ABC, abstractmethod

from racecard.models.horse import HorseRecord
from racecard.models.track_condition import TrackCondition


class BaseFactor(ABC):
    """スコア計算Factorの基底クラス

    全てのFactorはこのクラスを継承し、nameとcalculateメソッドを実装する必要がある。
    Factorは重みを掛ける前の生の値を返す。重みはScoreCalculatorが適用する。
    """

    name: str

    @abstractmethod
    def calculate(
        self, horse: HorseRecord, condition: TrackCondition, **kwargs
    ) -> float | None:
        """Factor値を計算する

        Args:
            horse: 対象馬
            condition: 馬場状態
            **kwargs: 追加パラメータ

        Returns:
            Factor値、データがない場合はNone
        """
        pass
