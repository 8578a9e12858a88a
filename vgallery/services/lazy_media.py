from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from PyQt6.QtCore import QRect  # type: ignore[import]

from ..storage.settings_store import LAZY_LOAD_MARGIN
from ..utils.logging_setup import get_logger

log = get_logger("services.lazy_media")


@dataclass
class _Watch:
    element: Any
    callback: Callable[[Any], None]
    rect: Callable[[], QRect]


class LazyMediaScheduler:
    """Fire a load callback once per element when it nears the viewport.

    ``observe()`` registers interest; ``check()`` is called with the current
    viewport whenever visibility may have changed (navigation, resize). An
    element whose rect intersects the viewport grown by ``margin`` on every side
    is deregistered and its callback runs exactly once.
    """

    def __init__(self, margin: int = LAZY_LOAD_MARGIN):
        if int(margin) < 0:
            raise ValueError(f"margin must be >= 0, got {margin}")
        self._margin = int(margin)
        # id(element) -> watch, 삽입 순서 유지
        self._watches: Dict[int, _Watch] = {}

    @property
    def margin(self) -> int:
        return self._margin

    @property
    def pending_count(self) -> int:
        return len(self._watches)

    def is_observed(self, element: Any) -> bool:
        return id(element) in self._watches

    def observe(self, element: Any, callback: Callable[[Any], None],
                rect: Optional[Callable[[], QRect]] = None) -> None:
        if rect is None:
            rect = element.geometry
        self._watches[id(element)] = _Watch(element, callback, rect)

    def unobserve(self, element: Any) -> bool:
        return self._watches.pop(id(element), None) is not None

    def clear(self) -> None:
        self._watches.clear()

    def check(self, viewport: QRect) -> int:
        """Run callbacks for elements within the margin. Returns how many fired."""
        m = self._margin
        area = QRect(viewport).adjusted(-m, -m, m, m)
        ready = [w for w in list(self._watches.values()) if area.intersects(w.rect())]
        for w in ready:
            # 콜백 전에 해제: 콜백이 다시 check()를 불러도 중복 로드 없음
            self._watches.pop(id(w.element), None)
        for w in ready:
            try:
                w.callback(w.element)
            except Exception:
                log.exception("lazy_load_callback_failed | element=%r", w.element)
        if ready:
            log.debug("lazy_load_fired | count=%d | pending=%d", len(ready), len(self._watches))
        return len(ready)
