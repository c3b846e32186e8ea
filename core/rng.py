"""
可重現的亂數來源

同樣的 seed + 同樣的抽取順序 => 同樣的結果。
GameSession reset 時會呼叫 reseed()，讓重置後的伺服器產生的「隨機」棋盤
和剛啟動時一模一樣。
"""
import random


class SeededRng:
    """包裝 random.Random，記住初始 seed 以便重新播種"""

    def __init__(self, seed: int):
        self._seed = seed
        self._random = random.Random(seed)

    @property
    def seed(self) -> int:
        return self._seed

    def reseed(self) -> None:
        """回到初始 seed 的狀態"""
        self._random.seed(self._seed)

    def next_bool(self) -> bool:
        return self._random.random() < 0.5
