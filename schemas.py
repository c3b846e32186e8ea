"""
Pydantic schemas：JSON endpoint 的回應格式

棋盤本身以純文字回傳，這裡只定義 JSON 狀態查詢和健康檢查
"""
from typing import List, Optional

from pydantic import BaseModel

from core.board import Board, Player


class BoardStateResponse(BaseModel):
    rows: List[List[Optional[Player]]]
    winner: Optional[Player] = None
    board_full: bool
    terminal: bool

    @classmethod
    def from_board(cls, board: Board) -> "BoardStateResponse":
        winner = board.winner()
        full = board.board_full()
        return cls(
            rows=[list(row) for row in board.cells],
            winner=winner,
            board_full=full,
            terminal=winner is not None or full,
        )


class StatusResponse(BaseModel):
    status: str
    message: Optional[str] = None
