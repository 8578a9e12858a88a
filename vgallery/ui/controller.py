from __future__ import annotations

from typing import Any, Iterable

from PyQt6.QtCore import Qt, QObject, QEvent, QRect, pyqtSignal  # type: ignore[import]
from PyQt6.QtWidgets import QWidget  # type: ignore[import]

from ..core.input_normalizer import InputNormalizer
from ..core.navigator import NavigationStateMachine
from ..core.state import NavigationIntent
from ..services.lazy_media import LazyMediaScheduler
from ..storage.settings_store import GalleryConfig
from ..utils.debounce import Debouncer
from ..utils.logging_setup import get_logger
from .counter import CounterPresenter, TextSink
from .hint import HintController


class GalleryController(QObject):
    """Input hooks for the host plus the wiring between gallery components.

    The host routes wheel, touch, key and resize input here (directly or through
    ``GalleryEventFilter``). Input that arrives while a transition is in flight
    is dropped before normalization.
    """

    # 디바운스된 리사이즈: 마지막 크기 전달
    resized = pyqtSignal(object)

    def __init__(self, sources: Iterable[Any] = (), config: GalleryConfig | None = None,
                 hint_widget: QWidget | None = None,
                 current_label: TextSink | None = None, total_label: TextSink | None = None,
                 parent: QObject | None = None):
        super().__init__(parent)
        self.log = get_logger("ui.GalleryController")
        self.config = config or GalleryConfig()
        cfg = self.config
        self.navigator = NavigationStateMachine(sources, transition_ms=cfg.transition_ms, parent=self)
        self.normalizer = InputNormalizer(lambda: self.navigator.total_slides, cfg.swipe_threshold_px)
        self.hint = HintController(hint_widget, cfg.hint_removal_ms, parent=self)
        self.counter = CounterPresenter(current_label, total_label)
        self.lazy = LazyMediaScheduler(cfg.lazy_load_margin)
        self._resize_debouncer = Debouncer(self._on_resize_settled, cfg.resize_debounce_ms, parent=self)

        self.navigator.currentIndexChanged.connect(self._on_current_index_changed)
        self.counter.render(self.navigator.current_index, self.navigator.total_slides)

    # --- 입력 훅 ---
    def handle_wheel(self, delta_y: float) -> bool:
        """DOM 부호 규약의 세로 델타(양수 = 아래로). 이동했으면 True."""
        if self.navigator.is_animating:
            return False
        self.hint.dismiss()
        return self._apply(self.normalizer.wheel(delta_y), "wheel")

    def handle_touch_begin(self, y: float) -> None:
        self.normalizer.touch_start(y)

    def handle_touch_update(self, y: float) -> None:
        self.normalizer.touch_move(y)

    def handle_touch_end(self) -> bool:
        # 잠금 여부와 무관하게 좌표는 항상 초기화
        intent = self.normalizer.touch_end()
        if self.navigator.is_animating:
            return False
        self.hint.dismiss()
        return self._apply(intent, "touch")

    def cancel_touch(self) -> None:
        self.normalizer.reset_touch()

    def handle_key(self, key) -> bool:
        """탐색 키이면 True: 호출 측에서 기본 스크롤 동작을 막아야 함."""
        if not self.normalizer.is_navigation_key(key):
            return False
        if not self.navigator.is_animating:
            self.hint.dismiss()
            self._apply(self.normalizer.key(key), "key")
        return True

    def handle_resize(self, size: Any = None) -> None:
        self._resize_debouncer.trigger(size)

    def check_visibility(self, viewport: QRect) -> int:
        return self.lazy.check(viewport)

    # --- 내부 ---
    def _apply(self, intent: NavigationIntent | None, source: str) -> bool:
        if intent is None:
            return False
        accepted = self.navigator.apply(intent)
        self.log.debug("input | source=%s | intent=%s | accepted=%s", source, intent.kind.value, accepted)
        return accepted

    def _on_current_index_changed(self, index: int) -> None:
        self.counter.render(index, self.navigator.total_slides)

    def _on_resize_settled(self, size: Any) -> None:
        self.log.info("resize_settled | size=%s", _fmt_size(size))
        self.resized.emit(size)


def _fmt_size(size: Any) -> str:
    try:
        return f"{int(size.width())}x{int(size.height())}"
    except AttributeError:
        return repr(size)


class GalleryEventFilter(QObject):
    """Route a widget's wheel/touch/key/resize events into a controller."""

    def __init__(self, controller: GalleryController, parent: QObject | None = None):
        super().__init__(parent if parent is not None else controller)
        self._controller = controller

    def install_on(self, widget: QWidget) -> None:
        widget.setAttribute(Qt.WidgetAttribute.WA_AcceptTouchEvents, True)
        widget.installEventFilter(self)

    def eventFilter(self, obj, event):
        et = event.type()
        c = self._controller
        if et == QEvent.Type.Wheel:
            # Qt angleDelta는 위로 굴리면 양수 → DOM 규약으로 부호 반전
            dy = event.angleDelta().y()
            if dy == 0:
                dy = event.pixelDelta().y()
            c.handle_wheel(-dy)
            event.accept()
            return True
        if et == QEvent.Type.TouchBegin:
            pts = event.points()
            if pts:
                c.handle_touch_begin(pts[0].position().y())
            event.accept()
            return True
        if et == QEvent.Type.TouchUpdate:
            pts = event.points()
            if pts:
                c.handle_touch_update(pts[0].position().y())
            event.accept()
            return True
        if et == QEvent.Type.TouchEnd:
            c.handle_touch_end()
            event.accept()
            return True
        if et == QEvent.Type.TouchCancel:
            c.cancel_touch()
            return True
        if et == QEvent.Type.KeyPress:
            if c.handle_key(event.key()):
                event.accept()
                return True
            return False
        if et == QEvent.Type.Resize:
            c.handle_resize(event.size())
            return False
        return False
