"""
自定義異常類別

集中管理所有業務邏輯異常，方便 API 層統一處理
"""


class Connect4Exception(Exception):
    """所有遊戲異常的基類"""
    pass


# ============ 棋盤相關異常 ============

class InvalidColumn(Connect4Exception):
    """欄位超出棋盤範圍（或無法解析為整數）"""
    def __init__(self, column):
        self.column = column
        super().__init__(f"Invalid column: {column}")


class ColumnFull(Connect4Exception):
    """該欄最上方已有棋子"""
    def __init__(self, column):
        self.column = column
        super().__init__(f"Column {column} is full")


# ============ 玩家相關異常 ============

class InvalidPlayer(Connect4Exception):
    """未知的玩家代號（只接受 milk / cookie）"""
    def __init__(self, token):
        self.token = token
        super().__init__(f"Invalid player: {token}")


# ============ Session 相關異常 ============

class MoveRejected(Connect4Exception):
    """
    遊戲流程拒絕這一步（欄位已滿、棋盤已滿、或已有贏家）

    這不是 bug，而是正常的遊戲狀態，所以帶著當下的棋盤文字，
    讓 API 層可以直接回傳給玩家
    """
    def __init__(self, reason: str, board: str):
        self.reason = reason
        self.board = board
        super().__init__(f"Move rejected: {reason}")
