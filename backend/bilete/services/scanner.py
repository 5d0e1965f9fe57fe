from __future__ import annotations
from enum import Enum
from typing import Callable, Optional
import logging
import time

from bilete.core.config import settings

logger = logging.getLogger("bilete.scanner")


def _now_ms() -> int:
    return int(time.monotonic() * 1000)


class ScannerState(str, Enum):
    idle = "idle"
    scanning = "scanning"


class ScannerSession:
    """Lifecycle of a camera QR scanner on the verification page.

    The same code read twice inside the debounce window is reported once.
    """

    def __init__(self, debounce_ms: Optional[int] = None, clock: Callable[[], int] = _now_ms) -> None:
        self.debounce_ms = settings.scan_debounce_ms if debounce_ms is None else debounce_ms
        self._clock = clock
        self.state = ScannerState.idle
        self._last_code: Optional[str] = None
        self._last_time = 0

    @property
    def active(self) -> bool:
        return self.state == ScannerState.scanning

    def _reset(self) -> None:
        self._last_code = None
        self._last_time = 0

    def start(self) -> bool:
        if self.active:
            return False
        self._reset()
        self.state = ScannerState.scanning
        logger.info("QR scanner started")
        return True

    def stop(self) -> bool:
        if not self.active:
            return False
        self.state = ScannerState.idle
        self._reset()
        logger.info("QR scanner stopped")
        return True

    def detect(self, code: Optional[str], now_ms: Optional[int] = None) -> bool:
        """Register a decoded QR payload; True means the caller should verify it."""
        if not self.active:
            return False
        code = (code or "").strip()
        if not code:
            return False
        now = self._clock() if now_ms is None else now_ms
        if code == self._last_code and (now - self._last_time) < self.debounce_ms:
            logger.debug("Duplicate scan ignored (debounce)")
            return False
        self._last_code = code
        self._last_time = now
        return True

# One scanner per verification desk process.
session = ScannerSession()
