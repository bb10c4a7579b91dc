import math
import threading
import time
from collections import deque
from typing import Callable, Deque, Dict


class SlidingWindowRateLimiter:
    """
    Ограничение числа отправок с одного адреса в скользящем окне.

    Отклонённые попытки не записываются и окно не продлевают.
    Адреса без попыток в текущем окне удаляются, раз в окно.
    """

    def __init__(self, max_attempts: int = 3, window_seconds: float = 60,
                 clock: Callable[[], float] = time.monotonic):
        self.max_attempts = max_attempts
        self.window_seconds = window_seconds
        self._clock = clock
        self._lock = threading.Lock()
        self._attempts: Dict[str, Deque[float]] = {}
        self._last_sweep = clock()

    def __len__(self):
        """Сколько адресов сейчас отслеживается"""
        with self._lock:
            return len(self._attempts)

    def hit(self, client: str) -> int:
        """
        Зарегистрировать попытку клиента.

        Возвращает 0, если попытка разрешена, иначе через сколько секунд
        можно повторить.
        """
        now = self._clock()

        with self._lock:
            if now - self._last_sweep >= self.window_seconds:
                self._sweep(now)

            attempts = self._attempts.setdefault(client, deque())
            self._evict(attempts, now)

            if len(attempts) >= self.max_attempts:
                retry_after = attempts[0] + self.window_seconds - now
                return max(1, math.ceil(retry_after))

            attempts.append(now)
            return 0

    def _evict(self, attempts: Deque[float], now: float):
        while attempts and attempts[0] <= now - self.window_seconds:
            attempts.popleft()

    def _sweep(self, now: float):
        for client in list(self._attempts):
            attempts = self._attempts[client]
            self._evict(attempts, now)
            if not attempts:
                del self._attempts[client]
        self._last_sweep = now
