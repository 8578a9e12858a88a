from __future__ import annotations

from typing import Any, Callable

from PyQt6.QtCore import QObject, QTimer  # type: ignore[import]

from .logging_setup import get_logger

log = get_logger("utils.debounce")


class Debouncer(QObject):
    """Coalesce a burst of calls into one delayed call.

    Each call cancels the pending one and restarts the wait. Only the last call
    of a burst reaches the handler, with that call's arguments.
    """

    def __init__(self, handler: Callable[..., Any], wait_ms: int, parent: QObject | None = None):
        super().__init__(parent)
        if int(wait_ms) < 0:
            raise ValueError(f"wait_ms must be >= 0, got {wait_ms}")
        self._handler = handler
        self._wait_ms = int(wait_ms)
        self._args: tuple = ()
        self._kwargs: dict = {}
        # 디바운스당 하나의 대기 타이머만 소유
        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.setInterval(self._wait_ms)
        self._timer.timeout.connect(self._fire)

    @property
    def wait_ms(self) -> int:
        return self._wait_ms

    @property
    def is_pending(self) -> bool:
        return self._timer.isActive()

    def trigger(self, *args, **kwargs) -> None:
        self._args = args
        self._kwargs = kwargs
        if self._timer.isActive():
            self._timer.stop()
        self._timer.start()

    __call__ = trigger

    def cancel(self) -> None:
        if self._timer.isActive():
            self._timer.stop()
        self._args = ()
        self._kwargs = {}

    def flush(self) -> None:
        """대기 중인 호출이 있으면 즉시 실행."""
        if not self._timer.isActive():
            return
        self._timer.stop()
        self._fire()

    def _fire(self) -> None:
        args, kwargs = self._args, self._kwargs
        self._args = ()
        self._kwargs = {}
        log.debug("debounce_fire | wait_ms=%d", self._wait_ms)
        self._handler(*args, **kwargs)
