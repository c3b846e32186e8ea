import pytest
from fastapi.testclient import TestClient

from config import settings
from core.board import Board, Player
from core.game_session import GameSession
from main import app

PREFIX = settings.route_prefix

M = Player.MILK
C = Player.COOKIE
_ = None


@pytest.fixture
def board():
    return Board()


@pytest.fixture
def session():
    return GameSession(seed=settings.rng_seed)


@pytest.fixture
def client():
    # 每個測試都重新跑 lifespan，拿到全新的 session
    with TestClient(app) as test_client:
        yield test_client


def play_all(board, moves):
    """moves: [(player, 0-based column), ...]"""
    for player, column in moves:
        board.play(player, column)
