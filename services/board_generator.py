"""
隨機棋盤服務：產生展示 / 測試用的棋盤

純計算邏輯，不涉及狀態轉換；RNG 狀態由呼叫者（GameSession）持有
"""
from core.board import Board, Player, BOARD_SIZE
from core.rng import SeededRng


def generate_random_board(rng: SeededRng) -> Board:
    """
    每一格抽一個 boolean，填滿整個棋盤

    規則：
    - True -> 🍪（cookie），False -> 🥛（milk）
    - 由上到下、由左到右依序抽取，不套用重力規則

    參數：
        rng: 會被推進 BOARD_SIZE * BOARD_SIZE 次

    返回：
        新的 Board（不是 session 裡的那一個）
    """
    rows = [
        [Player.COOKIE if rng.next_bool() else Player.MILK for _ in range(BOARD_SIZE)]
        for _ in range(BOARD_SIZE)
    ]
    return Board.from_rows(rows)
