"""
Connect Four API Endpoints

職責：
1. 查詢 / 重置棋盤
2. 下棋
3. 產生隨機棋盤
4. JSON 狀態查詢

棋盤一律以 text/plain 回傳（和 Board.render() 的輸出完全相同）
"""
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse
import logging

from schemas import BoardStateResponse
from core.game_session import GameSession, get_game_session
from core.exceptions import InvalidColumn, InvalidPlayer, MoveRejected
from services.move_parser import parse_player, parse_column

router = APIRouter(tags=["connect4"])
logger = logging.getLogger(__name__)


@router.get("/board", response_class=PlainTextResponse)
def get_board(session: GameSession = Depends(get_game_session)):
    """取得目前棋盤"""
    return PlainTextResponse(session.render_board())


@router.post("/reset", response_class=PlainTextResponse)
def reset_board(session: GameSession = Depends(get_game_session)):
    """
    重置遊戲

    效果：
    - 清空棋盤
    - RNG 回到初始 seed（之後的 random-board 和剛啟動時相同）
    """
    return PlainTextResponse(session.reset())


@router.post("/place/{player}/{column}", response_class=PlainTextResponse)
def place(
    player: str,
    column: str,
    session: GameSession = Depends(get_game_session)
):
    """
    下一步棋

    參數：
        player: "milk" 或 "cookie"
        column: 1-based 欄位（1 ~ 4）

    返回：
        - 200: 下完後的棋盤
        - 400: 玩家代號或欄位不合法（不會取得鎖）
        - 503: 欄位已滿 / 棋盤已滿 / 已有贏家，附上目前棋盤（不修改）
        - 500: 引擎拒絕這一步（理論上不會發生）
    """
    # 1. 解析參數（在取得鎖之前）
    try:
        parsed_player = parse_player(player)
        parsed_column = parse_column(column)
    except (InvalidPlayer, InvalidColumn) as e:
        raise HTTPException(status_code=400, detail=str(e))

    # 2. 下棋
    try:
        return PlainTextResponse(session.place(parsed_player, parsed_column))

    except MoveRejected as e:
        return PlainTextResponse(e.board, status_code=503)
    except InvalidColumn as e:
        logger.error(f"Engine rejected column {e.column}: {e}")
        raise HTTPException(status_code=500, detail=str(e))
    except Exception as e:
        logger.error(f"Failed to place move: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal error")


@router.get("/random-board", response_class=PlainTextResponse)
def random_board(session: GameSession = Depends(get_game_session)):
    """
    產生隨機棋盤

    注意：
        - 會推進 session 的 RNG，但不會改變 session 的棋盤
    """
    return PlainTextResponse(session.random_board())


@router.get("/state", response_model=BoardStateResponse)
def get_state(session: GameSession = Depends(get_game_session)):
    """取得目前棋盤的 JSON 表示（給前端使用）"""
    return BoardStateResponse.from_board(session.snapshot())
