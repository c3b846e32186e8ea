"""
Game Session：唯一的共享遊戲狀態

職責：
1. 持有棋盤（Board）和亂數來源（SeededRng）
2. 用讀寫鎖保護所有存取
3. 下棋前檢查遊戲是否還能繼續
4. 重置時同時清空棋盤並重新播種

生命週期：
- 在 FastAPI lifespan 啟動時建立一次，放在 app.state
- 透過 get_game_session dependency 傳給 endpoint，不使用全域變數
- 隨 process 結束而結束，沒有持久化

所有回傳的棋盤文字都在鎖內產生，讀取者不會看到只套用一半的寫入
"""
from fastapi import Request
import logging

from core.board import Board, Player, count_pieces
from core.rng import SeededRng
from core.locks import ReadWriteLock
from core.exceptions import MoveRejected
from services.board_generator import generate_random_board

logger = logging.getLogger(__name__)


class GameSession:
    """棋盤 + RNG，由同一把讀寫鎖保護"""

    def __init__(self, seed: int):
        self._board = Board()
        self._rng = SeededRng(seed)
        self._lock = ReadWriteLock()

    @property
    def seed(self) -> int:
        return self._rng.seed

    def render_board(self) -> str:
        """取得目前棋盤文字（共享鎖）"""
        with self._lock.read_locked():
            return self._board.render()

    def snapshot(self) -> Board:
        """取得目前棋盤的複本（共享鎖），呼叫者可以隨意使用"""
        with self._lock.read_locked():
            return self._board.copy()

    def reset(self) -> str:
        """
        重置遊戲（獨佔鎖）

        效果：
        - 清空棋盤
        - RNG 回到初始 seed

        兩者在同一個 critical section 內完成，讀取者只會看到重置前或重置後

        返回：
            重置後的棋盤文字
        """
        with self._lock.write_locked():
            self._board.reset()
            self._rng.reseed()
            logger.info(f"Game reset (seed={self._rng.seed})")
            return self._board.render()

    def place(self, player: Player, column: int) -> str:
        """
        下一步棋（獨佔鎖）

        前置條件：
        1. 該欄還沒滿
        2. 棋盤還沒滿
        3. 還沒有贏家

        參數：
            player: 下棋的玩家
            column: 0-based 欄位（API 層已經檢查過範圍）

        返回：
            下完後的棋盤文字

        異常：
            MoveRejected: 不符合前置條件，棋盤不會被修改
            InvalidColumn: column 超出範圍（API 層應該已經擋掉）
        """
        with self._lock.write_locked():
            reason = self._rejection_reason(column)
            if reason:
                logger.warning(
                    f"Rejected move by {player.value} on column {column + 1}: {reason}"
                )
                raise MoveRejected(reason, self._board.render())

            self._board.play(player, column)

            logger.info(
                f"{player.value} played column {column + 1} "
                f"(height {self._board.column_height(column)}, "
                f"{count_pieces(self._board)} pieces on board)"
            )
            return self._board.render()

    def _rejection_reason(self, column: int) -> str:
        if self._board.column_full(column):
            return "column full"
        if self._board.is_terminal():
            winner = self._board.winner()
            return f"{winner.value} already won" if winner is not None else "board full"
        return ""

    def random_board(self) -> str:
        """
        產生一個隨機棋盤（獨佔鎖，因為會推進 RNG）

        產生的棋盤只用來回傳，不會取代 session 的棋盤
        """
        with self._lock.write_locked():
            board = generate_random_board(self._rng)
            logger.info("Generated random board")
            return board.render()


def get_game_session(request: Request) -> GameSession:
    """
    FastAPI dependency：提供唯一的 GameSession

    Session 在 lifespan 啟動時建立並掛在 app.state 上
    """
    return request.app.state.game_session
