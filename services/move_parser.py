"""
下棋參數解析：URL path -> (Player, 0-based column)

在取得任何鎖之前就先擋掉格式錯誤的請求
"""
from core.board import Player, BOARD_SIZE
from core.exceptions import InvalidColumn, InvalidPlayer


def parse_player(token: str) -> Player:
    """
    參數：
        token: "milk" 或 "cookie"（大小寫必須一致）

    異常：
        InvalidPlayer: 其他字串
    """
    try:
        return Player(token)
    except ValueError:
        raise InvalidPlayer(token)


def parse_column(raw: str) -> int:
    """
    把 1-based 欄位轉成 0-based

    範例：
        parse_column("1") -> 0
        parse_column("4") -> 3
        parse_column("5") -> InvalidColumn
        parse_column("x") -> InvalidColumn
        parse_column(" 3") -> InvalidColumn（只接受 ASCII 數字）
    """
    if not (isinstance(raw, str) and raw.isascii() and raw.isdigit()):
        raise InvalidColumn(raw)

    column = int(raw)
    if not 1 <= column <= BOARD_SIZE:
        raise InvalidColumn(raw)

    return column - 1
