import time
from datetime import datetime, timezone


def now_ms() -> int:
    """Текущее время в миллисекундах с начала эпохи"""
    return time.time_ns() // 1_000_000


def now_iso() -> str:
    """Текущее время UTC в ISO-8601 с миллисекундами: 2024-01-31T12:00:00.000Z"""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
