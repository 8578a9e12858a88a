from __future__ import annotations

import os
from typing import Dict, List, Optional

from PyQt6.QtCore import Qt, QRect, QPoint, QEasingCurve, QPropertyAnimation, QParallelAnimationGroup  # type: ignore[import]
from PyQt6.QtGui import QPixmap  # type: ignore[import]
from PyQt6.QtWidgets import QWidget, QLabel, QHBoxLayout  # type: ignore[import]

from ..core.state import ScrollDirection
from ..storage.settings_store import GalleryConfig
from ..utils.logging_setup import get_logger
from .controller import GalleryController, GalleryEventFilter

# 이전 슬라이드가 빠져나가는 거리(뷰포트 높이 대비) - 패럴랙스
_PARALLAX_FRAC = 0.3


class GalleryWindow(QWidget):
    """Full-viewport host: one label per slide, counter and scroll hint.

    The window only reacts to navigator signals. It animates the incoming slide
    over ``config.transition_ms`` and reports the end of the animation back
    through ``navigator.complete()``.
    """

    def __init__(self, paths: List[str], config: GalleryConfig | None = None, parent: QWidget | None = None):
        super().__init__(parent)
        self.log = get_logger("ui.GalleryWindow")
        self.setWindowTitle("VGallery")
        self.setStyleSheet("background-color: #000000;")
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.resize(1280, 800)

        self._paths = list(paths)
        self._source_pixmaps: Dict[int, QPixmap] = {}
        self._anim: Optional[QParallelAnimationGroup] = None

        self.slide_labels: List[QLabel] = []
        for i, p in enumerate(self._paths):
            lbl = QLabel(self)
            lbl.setObjectName(f"slide_{i}")
            lbl.setAlignment(Qt.AlignmentFlag.AlignCenter)
            lbl.setToolTip(os.path.basename(p))
            lbl.setVisible(False)
            self.slide_labels.append(lbl)

        # 카운터: "01 / 05"
        self.counter_bar = QWidget(self)
        bar = QHBoxLayout(self.counter_bar)
        bar.setContentsMargins(12, 6, 12, 6)
        bar.setSpacing(6)
        self.current_label = QLabel(self.counter_bar)
        self.current_label.setObjectName("current-slide")
        sep = QLabel("/", self.counter_bar)
        self.total_label = QLabel(self.counter_bar)
        self.total_label.setObjectName("total-slides")
        for w in (self.current_label, sep, self.total_label):
            w.setStyleSheet("color: #EAEAEA; font-size: 14px;")
            bar.addWidget(w)

        self.hint_label = QLabel("Scroll ↓", self)
        self.hint_label.setObjectName("scroll-hint")
        self.hint_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.hint_label.setStyleSheet("color: rgba(234,234,234,200); font-size: 13px;")

        self.controller = GalleryController(
            self._paths, config,
            hint_widget=self.hint_label,
            current_label=self.current_label,
            total_label=self.total_label,
            parent=self,
        )
        self.navigator = self.controller.navigator
        self.navigator.transitionStarted.connect(self._on_transition_started)
        self.navigator.transitionFinished.connect(self._on_transition_finished)
        self.controller.resized.connect(self._on_resize_settled)

        self._event_filter = GalleryEventFilter(self.controller, self)
        self._event_filter.install_on(self)

        for i, lbl in enumerate(self.slide_labels):
            self.controller.lazy.observe(lbl, self._load_slide, rect=lambda i=i: self._slide_rect(i))

        self._layout_all()
        self.controller.check_visibility(self.rect())
        self.log.info("gallery_ready | slides=%d", len(self._paths))

    # --- 레이아웃 ---
    def _slide_rect(self, index: int) -> QRect:
        # 슬라이드는 뷰포트 높이 간격으로 세로로 쌓인 것으로 간주
        cur = max(0, self.navigator.current_index)
        h = self.height()
        return QRect(0, (index - cur) * h, self.width(), h)

    def _layout_all(self) -> None:
        for i, lbl in enumerate(self.slide_labels):
            lbl.setGeometry(self.rect())
            lbl.setVisible(i == self.navigator.current_index)
            self._apply_pixmap(i)
        self.counter_bar.adjustSize()
        cb = self.counter_bar
        cb.move(self.width() - cb.width() - 16, self.height() - cb.height() - 16)
        cb.raise_()
        self.hint_label.setGeometry(0, self.height() - 64, self.width(), 32)
        self.hint_label.raise_()

    def _apply_pixmap(self, index: int) -> None:
        pm = self._source_pixmaps.get(index)
        if pm is None or pm.isNull():
            return
        scaled = pm.scaled(self.size(), Qt.AspectRatioMode.KeepAspectRatio,
                           Qt.TransformationMode.SmoothTransformation)
        self.slide_labels[index].setPixmap(scaled)

    def _load_slide(self, label: QLabel) -> None:
        index = self.slide_labels.index(label)
        path = self._paths[index]
        pm = QPixmap(path)
        if pm.isNull():
            self.log.warning("slide_load_failed | index=%d | file=%s", index, os.path.basename(path))
            label.setText(os.path.basename(path))
            return
        self._source_pixmaps[index] = pm
        self._apply_pixmap(index)
        self.log.debug("slide_loaded | index=%d | file=%s", index, os.path.basename(path))

    # --- 전이 표현 ---
    def _on_transition_started(self, from_index: int, to_index: int, direction: ScrollDirection) -> None:
        self.controller.check_visibility(self.rect())
        h = self.height()
        sign = 1 if direction is ScrollDirection.DOWN else -1
        outgoing = self.slide_labels[from_index]
        incoming = self.slide_labels[to_index]
        incoming.setGeometry(self.rect())
        incoming.move(0, sign * h)
        incoming.setVisible(True)
        incoming.raise_()
        self.counter_bar.raise_()
        self.hint_label.raise_()

        duration = max(0, int(self.controller.config.transition_ms))
        group = QParallelAnimationGroup(self)
        a_in = QPropertyAnimation(incoming, b"pos", group)
        a_in.setDuration(duration)
        a_in.setEasingCurve(QEasingCurve.Type.OutCubic)
        a_in.setStartValue(QPoint(0, sign * h))
        a_in.setEndValue(QPoint(0, 0))
        a_out = QPropertyAnimation(outgoing, b"pos", group)
        a_out.setDuration(duration)
        a_out.setEasingCurve(QEasingCurve.Type.OutCubic)
        a_out.setStartValue(QPoint(0, 0))
        a_out.setEndValue(QPoint(0, -sign * int(h * _PARALLAX_FRAC)))
        group.addAnimation(a_in)
        group.addAnimation(a_out)
        # 애니메이션 종료 = 전이 완료 핸드셰이크
        group.finished.connect(self.navigator.complete)
        self._anim = group
        group.start()

    def _on_transition_finished(self, out_index: int, cur_index: int) -> None:
        if self._anim is not None:
            self._anim.stop()
            self._anim.deleteLater()
            self._anim = None
        if 0 <= out_index < len(self.slide_labels):
            out = self.slide_labels[out_index]
            out.setVisible(False)
            out.move(0, 0)
        if 0 <= cur_index < len(self.slide_labels):
            self.slide_labels[cur_index].move(0, 0)

    def _on_resize_settled(self, size) -> None:
        self._layout_all()
        self.controller.check_visibility(self.rect())

    def closeEvent(self, event):
        self.log.info("window_close | index=%d", self.navigator.current_index)
        super().closeEvent(event)
