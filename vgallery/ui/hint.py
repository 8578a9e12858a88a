from __future__ import annotations

from PyQt6.QtCore import QObject, QTimer, QPropertyAnimation, QEasingCurve, pyqtSignal  # type: ignore[import]
from PyQt6.QtWidgets import QWidget, QGraphicsOpacityEffect  # type: ignore[import]

from ..storage.settings_store import HINT_REMOVAL_MS
from ..utils.logging_setup import get_logger


class HintController(QObject):
    """One-shot lifecycle of the scroll hint: Visible -> Hidden -> Removed."""

    hidden = pyqtSignal()
    removed = pyqtSignal()

    def __init__(self, widget: QWidget | None = None, removal_ms: int = HINT_REMOVAL_MS,
                 parent: QObject | None = None):
        super().__init__(parent)
        if int(removal_ms) < 0:
            raise ValueError(f"removal_ms must be >= 0, got {removal_ms}")
        self.log = get_logger("ui.hint")
        self._widget = widget
        self._removal_ms = int(removal_ms)
        self._visible = True
        self._removed = False
        self._fade: QPropertyAnimation | None = None
        self._removal_timer = QTimer(self)
        self._removal_timer.setSingleShot(True)
        self._removal_timer.timeout.connect(self._remove)

    @property
    def visible(self) -> bool:
        return self._visible

    @property
    def is_removed(self) -> bool:
        return self._removed

    def dismiss(self) -> None:
        if not self._visible:
            return
        self._visible = False
        self.log.info("hint_dismiss | removal_ms=%d", self._removal_ms)
        self._start_fade()
        self.hidden.emit()
        self._removal_timer.start(self._removal_ms)

    def _start_fade(self) -> None:
        w = self._widget
        if w is None:
            return
        effect = QGraphicsOpacityEffect(w)
        effect.setOpacity(1.0)
        w.setGraphicsEffect(effect)
        self._fade = QPropertyAnimation(effect, b"opacity", self)
        self._fade.setDuration(self._removal_ms)
        self._fade.setEasingCurve(QEasingCurve.Type.OutCubic)
        self._fade.setStartValue(1.0)
        self._fade.setEndValue(0.0)
        self._fade.start()

    def _remove(self) -> None:
        # 페이드 종료 후 표시 트리에서 영구 제거
        if self._widget is not None:
            self._widget.setVisible(False)
        self._removed = True
        self.log.debug("hint_removed")
        self.removed.emit()
