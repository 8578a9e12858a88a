from __future__ import annotations

from typing import Any, Iterable, List, Optional

from PyQt6.QtCore import Qt, QObject, QTimer, pyqtSignal  # type: ignore[import]

from .state import (
    NavigationIntent,
    NavigatorState,
    PresentationState,
    ScrollDirection,
    Slide,
    TransitionTag,
)
from ..storage.settings_store import TRANSITION_MS
from ..utils.logging_setup import get_logger


class NavigationStateMachine(QObject):
    """Owns the deck position, the transition lock and the scroll direction.

    States are IDLE (``is_animating`` False) and TRANSITIONING. ``apply()`` moves
    IDLE -> TRANSITIONING; ``complete()`` moves back. The presentation layer
    calls ``complete()`` when its own animation ends; when ``transition_ms`` is
    positive a single-shot timer calls it as a fallback after that duration.
    Intents that arrive while TRANSITIONING are dropped, never queued.
    """

    # (outgoing Slide, incoming Slide)
    slidesChanged = pyqtSignal(object, object)
    currentIndexChanged = pyqtSignal(int)
    # (from index, to index, ScrollDirection)
    transitionStarted = pyqtSignal(int, int, object)
    # (outgoing index, current index)
    transitionFinished = pyqtSignal(int, int)

    def __init__(self, sources: Iterable[Any] = (), transition_ms: Optional[int] = TRANSITION_MS,
                 parent: QObject | None = None):
        super().__init__(parent)
        if transition_ms is not None and int(transition_ms) < 0:
            raise ValueError(f"transition_ms must be >= 0, got {transition_ms}")
        self.log = get_logger("core.navigator")
        self._slides: List[Slide] = [Slide(i, src) for i, src in enumerate(sources)]
        self._transition_ms = int(transition_ms) if transition_ms is not None else 0
        self._is_animating = False
        self._direction = ScrollDirection.NONE
        self._outgoing: Slide | None = None
        if self._slides:
            self._current_index = 0
            self._slides[0].presentation_state = PresentationState.ACTIVE
        else:
            # 빈 덱: 유효한 현재 인덱스 없음, 모든 인텐트 거부
            self._current_index = -1
        self._complete_timer = QTimer(self)
        self._complete_timer.setSingleShot(True)
        self._complete_timer.setTimerType(Qt.TimerType.PreciseTimer)
        self._complete_timer.timeout.connect(self.complete)

    @classmethod
    def with_count(cls, total: int, transition_ms: Optional[int] = TRANSITION_MS,
                   parent: QObject | None = None) -> "NavigationStateMachine":
        if int(total) < 0:
            raise ValueError(f"total must be >= 0, got {total}")
        return cls([None] * int(total), transition_ms=transition_ms, parent=parent)

    # --- 읽기 전용 상태 ---
    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def total_slides(self) -> int:
        return len(self._slides)

    @property
    def is_animating(self) -> bool:
        return self._is_animating

    is_locked = is_animating

    @property
    def scroll_direction(self) -> ScrollDirection:
        return self._direction

    @property
    def transition_ms(self) -> int:
        return self._transition_ms

    @property
    def slides(self) -> tuple[Slide, ...]:
        return tuple(self._slides)

    def slide(self, index: int) -> Slide:
        if not (0 <= index < len(self._slides)):
            raise IndexError(f"slide index {index} out of range [0, {len(self._slides)})")
        return self._slides[index]

    @property
    def current_slide(self) -> Slide | None:
        if 0 <= self._current_index < len(self._slides):
            return self._slides[self._current_index]
        return None

    def snapshot(self) -> NavigatorState:
        return NavigatorState(
            current_index=self._current_index,
            total_slides=len(self._slides),
            is_animating=self._is_animating,
            scroll_direction=self._direction,
            slide_states=tuple(s.presentation_state for s in self._slides),
        )

    # --- 전이 ---
    def can_apply(self, intent: NavigationIntent) -> bool:
        return self._rejection_reason(intent.resolve(self._current_index)) is None

    def _rejection_reason(self, target: int) -> str | None:
        if self._is_animating:
            return "locked"
        if not self._slides:
            return "empty"
        if target == self._current_index:
            return "same"
        if not (0 <= target < len(self._slides)):
            return "out_of_range"
        return None

    def apply(self, intent: NavigationIntent) -> bool:
        target = intent.resolve(self._current_index)
        reason = self._rejection_reason(target)
        if reason is not None:
            self.log.debug("nav_reject | intent=%s | cur=%d | target=%d | reason=%s",
                           intent.kind.value, self._current_index, target, reason)
            return False

        prev_index = self._current_index
        # GoTo 점프도 인덱스 비교로 방향 결정(패럴랙스 일관성)
        self._direction = ScrollDirection.DOWN if target > prev_index else ScrollDirection.UP
        outgoing = self._slides[prev_index]
        incoming = self._slides[target]
        outgoing.transition_tag = self._direction.tag()
        outgoing.presentation_state = PresentationState.PREVIOUS
        incoming.presentation_state = PresentationState.ACTIVE
        incoming.transition_tag = TransitionTag.NONE
        self._outgoing = outgoing
        self._current_index = target
        self._is_animating = True
        self.log.info("nav_accept | from=%d | to=%d | dir=%s", prev_index, target, self._direction.value)

        # 슬롯에서 complete()를 바로 호출해도 되도록 시그널 전에 타이머 시작
        if self._transition_ms > 0:
            self._complete_timer.start(self._transition_ms)
        self.slidesChanged.emit(outgoing, incoming)
        self.currentIndexChanged.emit(target)
        self.transitionStarted.emit(prev_index, target, self._direction)
        return True

    def complete(self) -> bool:
        """Finish the in-flight transition. No-op while IDLE."""
        if not self._is_animating:
            return False
        if self._complete_timer.isActive():
            self._complete_timer.stop()
        outgoing = self._outgoing
        self._outgoing = None
        out_index = -1
        if outgoing is not None:
            outgoing.transition_tag = TransitionTag.NONE
            outgoing.presentation_state = PresentationState.INACTIVE
            out_index = outgoing.index
        self._direction = ScrollDirection.NONE
        self._is_animating = False
        self.log.debug("nav_complete | out=%d | cur=%d", out_index, self._current_index)
        self.transitionFinished.emit(out_index, self._current_index)
        return True

    # 편의 메서드
    def next(self) -> bool:
        return self.apply(NavigationIntent.next())

    def previous(self) -> bool:
        return self.apply(NavigationIntent.previous())

    def go_to(self, index: int) -> bool:
        return self.apply(NavigationIntent.goto(index))
