"""
Board：4x4 Connect Four 棋盤

職責：
1. 放置棋子（重力規則：由下往上找第一個空格）
2. 判斷勝負（橫、直、兩條斜線）
3. 判斷棋盤是否已滿
4. 輸出固定格式的文字棋盤（HTTP 回應的內容）

純計算邏輯，不涉及鎖和 I/O；並發控制交給 GameSession
"""
from enum import Enum
from typing import Iterable, Optional, Sequence, Tuple

from core.exceptions import InvalidColumn, ColumnFull

BOARD_SIZE = 4

EMPTY_GLYPH = "⬛"
BORDER_GLYPH = "⬜"


class Player(str, Enum):
    """兩位玩家，值是 URL 上使用的代號"""
    MILK = "milk"
    COOKIE = "cookie"

    @property
    def glyph(self) -> str:
        return _GLYPHS[self]


_GLYPHS = {
    Player.MILK: "🥛",
    Player.COOKIE: "🍪",
}

# 勝負掃描順序：(起點 row, 起點 col, row_delta, col_delta)
# 先掃所有橫列，再掃所有直行，最後是 "\" 和 "/" 兩條斜線
_WIN_SCANS: Tuple[Tuple[int, int, int, int], ...] = (
    tuple((row, 0, 0, 1) for row in range(BOARD_SIZE))
    + tuple((0, col, 1, 0) for col in range(BOARD_SIZE))
    + ((0, 0, 1, 1), (0, BOARD_SIZE - 1, 1, -1))
)


class Board:
    """
    棋盤狀態

    cells[row][col]，row 0 是最上面一列，row BOARD_SIZE-1 是最底下一列。
    每格是 None（空）或 Player。
    """

    def __init__(self):
        self._cells = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Optional[Player]]]) -> "Board":
        """
        用明確的格子內容建立棋盤（不套用重力規則）

        用途：
        - 產生隨機棋盤
        - 測試時建立特定局面

        異常：
            ValueError: rows 不是 BOARD_SIZE x BOARD_SIZE
        """
        if len(rows) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in rows):
            raise ValueError(f"Board must be {BOARD_SIZE}x{BOARD_SIZE}")

        board = cls()
        board._cells = [list(row) for row in rows]
        return board

    def copy(self) -> "Board":
        return Board.from_rows(self._cells)

    @property
    def cells(self) -> Tuple[Tuple[Optional[Player], ...], ...]:
        """唯讀快照，呼叫者拿到的內容不會跟著棋盤變動"""
        return tuple(tuple(row) for row in self._cells)

    def _check_column(self, column: int) -> None:
        if not 0 <= column < BOARD_SIZE:
            raise InvalidColumn(column)

    def play(self, player: Player, column: int) -> None:
        """
        在指定欄位放下一顆棋子

        規則：
        - 由最底列往上找，放在第一個空格

        參數：
            player: 下棋的玩家
            column: 0-based 欄位

        異常：
            InvalidColumn: column 不在 [0, BOARD_SIZE)
            ColumnFull: 該欄已滿（棋盤不會被修改）
        """
        self._check_column(column)

        for row in reversed(self._cells):
            if row[column] is None:
                row[column] = player
                return

        raise ColumnFull(column)

    def column_full(self, column: int) -> bool:
        """最上面那格有棋子就代表整欄已滿"""
        self._check_column(column)
        return self._cells[0][column] is not None

    def column_height(self, column: int) -> int:
        self._check_column(column)
        return sum(1 for row in self._cells if row[column] is not None)

    def board_full(self) -> bool:
        return all(cell is not None for row in self._cells for cell in row)

    def _check_line(self, row: int, col: int, row_delta: int, col_delta: int) -> Optional[Player]:
        player = self._cells[row][col]
        if player is None:
            return None

        for step in range(1, 4):
            r = row + row_delta * step
            c = col + col_delta * step
            if not (0 <= r < BOARD_SIZE and 0 <= c < BOARD_SIZE):
                return None
            if self._cells[r][c] != player:
                return None

        return player

    def winner(self) -> Optional[Player]:
        """
        找出連成四顆的玩家

        掃描順序固定（橫 -> 直 -> "\" -> "/"），回傳第一個找到的贏家。
        4x4 棋盤上同時出現兩個贏家只可能是人為構造的局面，以先找到的為準。
        """
        for row, col, row_delta, col_delta in _WIN_SCANS:
            player = self._check_line(row, col, row_delta, col_delta)
            if player is not None:
                return player
        return None

    def is_terminal(self) -> bool:
        return self.winner() is not None or self.board_full()

    def reset(self) -> None:
        for row in self._cells:
            for col in range(BOARD_SIZE):
                row[col] = None

    def render(self) -> str:
        """
        輸出文字棋盤

        格式：
            ⬜⬛⬛⬛⬛⬜
            ⬜⬛⬛⬛⬛⬜
            ⬜⬛⬛⬛⬛⬜
            ⬜🥛⬛⬛⬛⬜
            ⬜⬜⬜⬜⬜⬜
            🥛 wins!      <- 只有分出勝負時
            No winner.    <- 棋盤已滿但沒有贏家時

        每一行（包含最後一行）都以換行結尾，相同的棋盤一定得到相同的文字
        """
        lines = [
            BORDER_GLYPH + "".join(_cell_glyph(cell) for cell in row) + BORDER_GLYPH
            for row in self._cells
        ]
        lines.append(BORDER_GLYPH * (BOARD_SIZE + 2))

        winner = self.winner()
        if winner is not None:
            lines.append(f"{winner.glyph} wins!")
        elif self.board_full():
            lines.append("No winner.")

        return "".join(f"{line}\n" for line in lines)

    def __str__(self) -> str:
        return self.render()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f"Board({self.cells!r})"


def _cell_glyph(cell: Optional[Player]) -> str:
    return EMPTY_GLYPH if cell is None else cell.glyph


def count_pieces(board: Board, players: Iterable[Player] = tuple(Player)) -> int:
    """計算棋盤上屬於指定玩家的棋子總數"""
    wanted = set(players)
    return sum(1 for row in board.cells for cell in row if cell in wanted)
