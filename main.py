from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging
import time

from config import settings
from api import connect4
from core.game_session import GameSession
from schemas import StatusResponse

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: 建立唯一的遊戲 session
    app.state.game_session = GameSession(seed=settings.rng_seed)
    logger.info(f"Game session created (seed={settings.rng_seed})")
    yield
    # Shutdown: session 只存在記憶體中，沒有需要清理的資源
    logger.info("Stop Server")


app = FastAPI(
    title="Connect Four API",
    description="4x4 Connect Four game service (milk vs cookie)",
    version="1.0.0",
    lifespan=lifespan
)

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """每個請求記一行：method、path、status、latency（微秒）"""
    start = time.perf_counter()
    response = await call_next(request)
    latency_us = int((time.perf_counter() - start) * 1_000_000)
    logger.info(
        f"{request.method} {request.url.path} -> {response.status_code} ({latency_us} us)"
    )
    return response


# Include routers
app.include_router(connect4.router, prefix=settings.route_prefix)


@app.get("/", response_model=StatusResponse, response_model_exclude_none=True)
def root():
    return StatusResponse(message="Connect Four API", status="ok")


@app.get("/health", response_model=StatusResponse, response_model_exclude_none=True)
def health():
    return StatusResponse(status="healthy")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)
