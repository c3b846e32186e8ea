"""
並發控制工具

提供 process 內的讀寫鎖，保護唯一的 GameSession

規則：
- 讀（查詢棋盤）使用共享鎖：多個讀取可以同時進行
- 寫（下棋、重置、產生隨機棋盤）使用獨佔鎖：同一時間只有一個寫入
- 有寫入在等待時，新的讀取會先等（避免寫入被餓死）

注意：
    - 不可重入：持有鎖的 thread 不能再取得同一把鎖（會 deadlock）
    - FastAPI 的同步 endpoint 跑在 thread pool 上，所以用 threading 而不是 asyncio
"""
import threading
from contextlib import contextmanager


class ReadWriteLock:
    """讀寫鎖（writer preference）"""

    def __init__(self):
        self._condition = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer_active = False
        self._writers_waiting = 0

    @contextmanager
    def read_locked(self):
        """
        取得共享鎖

        範例：
            with lock.read_locked():
                text = board.render()
        """
        with self._condition:
            while self._writer_active or self._writers_waiting:
                self._condition.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._condition:
                self._readers -= 1
                if self._readers == 0:
                    self._condition.notify_all()

    @contextmanager
    def write_locked(self):
        """
        取得獨佔鎖

        範例：
            with lock.write_locked():
                board.play(player, column)
                text = board.render()
        """
        with self._condition:
            self._writers_waiting += 1
            try:
                while self._writer_active or self._readers:
                    self._condition.wait()
            finally:
                self._writers_waiting -= 1
            self._writer_active = True
        try:
            yield
        finally:
            with self._condition:
                self._writer_active = False
                self._condition.notify_all()
