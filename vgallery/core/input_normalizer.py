from __future__ import annotations

from typing import Callable

from PyQt6.QtCore import Qt  # type: ignore[import]

from .state import NavigationIntent
from ..storage.settings_store import SWIPE_THRESHOLD_PX

_NEXT_KEYS = {Qt.Key.Key_Down, Qt.Key.Key_PageDown, "ArrowDown", "PageDown"}
_PREV_KEYS = {Qt.Key.Key_Up, Qt.Key.Key_PageUp, "ArrowUp", "PageUp"}
_HOME_KEYS = {Qt.Key.Key_Home, "Home"}
_END_KEYS = {Qt.Key.Key_End, "End"}


def _as_key(key):
    # QKeyEvent.key()는 int를 돌려주므로 Qt.Key로 맞춘다
    if isinstance(key, int) and not isinstance(key, Qt.Key):
        try:
            return Qt.Key(key)
        except ValueError:
            return key
    return key


class InputNormalizer:
    """Turn wheel, swipe and key signals into one ``NavigationIntent``.

    Wheel deltas follow the DOM sign convention: positive means scrolling down
    (towards the next slide). ``total_slides`` is read through a callable so
    ``End`` always targets the current last slide.
    """

    def __init__(self, total_slides: Callable[[], int], swipe_threshold: int = SWIPE_THRESHOLD_PX):
        if int(swipe_threshold) < 0:
            raise ValueError(f"swipe_threshold must be >= 0, got {swipe_threshold}")
        self._total = total_slides
        self._threshold = int(swipe_threshold)
        self.touch_start_y = 0.0
        self.touch_end_y = 0.0

    @property
    def swipe_threshold(self) -> int:
        return self._threshold

    # --- wheel ---
    def wheel(self, delta_y: float) -> NavigationIntent | None:
        if delta_y > 0:
            return NavigationIntent.next()
        if delta_y < 0:
            return NavigationIntent.previous()
        return None

    # --- touch ---
    def touch_start(self, y: float) -> None:
        # 이동 없이 떼면 거리 0(탭)으로 처리
        self.touch_start_y = float(y)
        self.touch_end_y = float(y)

    def touch_move(self, y: float) -> None:
        self.touch_end_y = float(y)

    def reset_touch(self) -> None:
        self.touch_start_y = 0.0
        self.touch_end_y = 0.0

    def touch_end(self) -> NavigationIntent | None:
        distance = self.touch_start_y - self.touch_end_y
        self.reset_touch()
        # 임계값 이하는 탭/노이즈로 간주
        if abs(distance) <= self._threshold:
            return None
        if distance > 0:
            return NavigationIntent.next()
        return NavigationIntent.previous()

    # --- keyboard ---
    def is_navigation_key(self, key) -> bool:
        key = _as_key(key)
        return key in _NEXT_KEYS or key in _PREV_KEYS or key in _HOME_KEYS or key in _END_KEYS

    def key(self, key) -> NavigationIntent | None:
        key = _as_key(key)
        if key in _NEXT_KEYS:
            return NavigationIntent.next()
        if key in _PREV_KEYS:
            return NavigationIntent.previous()
        if key in _HOME_KEYS:
            return NavigationIntent.goto(0)
        if key in _END_KEYS:
            return NavigationIntent.goto(int(self._total()) - 1)
        return None
