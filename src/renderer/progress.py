# renderer/progress.py
import threading
from typing import Callable, Optional

class RenderProgress:
    """
    Append-only count of finished pixels. The renderer only ever advances it;
    readers may poll it from any thread while a render is running.
    """
    def __init__(self, total: int, listener: Optional[Callable[["RenderProgress"], None]] = None):
        self.total = total
        self.listener = listener
        self._completed = 0
        self._lock = threading.Lock()

    @property
    def completed(self) -> int:
        return self._completed

    @property
    def fraction(self) -> float:
        if self.total <= 0:
            return 1.0
        return self._completed / self.total

    @property
    def done(self) -> bool:
        return self._completed >= self.total

    def advance(self, count: int = 1) -> None:
        if count < 0:
            raise ValueError("progress can only move forward")
        with self._lock:
            self._completed += count
        if self.listener is not None:
            self.listener(self)
