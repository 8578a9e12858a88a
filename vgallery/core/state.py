from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class PresentationState(Enum):
    INACTIVE = "inactive"
    ACTIVE = "active"
    PREVIOUS = "prev"


class TransitionTag(Enum):
    NONE = "none"
    ENTERING_FROM_BELOW = "scrolling-down"
    ENTERING_FROM_ABOVE = "scrolling-up"


class ScrollDirection(Enum):
    NONE = "none"
    DOWN = "down"
    UP = "up"

    def tag(self) -> TransitionTag:
        if self is ScrollDirection.DOWN:
            return TransitionTag.ENTERING_FROM_BELOW
        if self is ScrollDirection.UP:
            return TransitionTag.ENTERING_FROM_ABOVE
        return TransitionTag.NONE


class IntentKind(Enum):
    NEXT = "next"
    PREVIOUS = "previous"
    GOTO = "goto"


@dataclass(frozen=True)
class NavigationIntent:
    kind: IntentKind
    target: int | None = None

    @staticmethod
    def next() -> "NavigationIntent":
        return NavigationIntent(IntentKind.NEXT)

    @staticmethod
    def previous() -> "NavigationIntent":
        return NavigationIntent(IntentKind.PREVIOUS)

    @staticmethod
    def goto(index: int) -> "NavigationIntent":
        return NavigationIntent(IntentKind.GOTO, int(index))

    def resolve(self, current_index: int) -> int:
        if self.kind is IntentKind.NEXT:
            return current_index + 1
        if self.kind is IntentKind.PREVIOUS:
            return current_index - 1
        return int(self.target if self.target is not None else current_index)


@dataclass
class Slide:
    index: int
    source: Any = None
    presentation_state: PresentationState = PresentationState.INACTIVE
    transition_tag: TransitionTag = TransitionTag.NONE

    def __setattr__(self, name: str, value: Any) -> None:
        # index는 덱 생성 시 한 번만 지정
        if name == "index" and "index" in self.__dict__:
            raise AttributeError("Slide.index is immutable")
        super().__setattr__(name, value)

    @property
    def is_active(self) -> bool:
        return self.presentation_state is PresentationState.ACTIVE


@dataclass(frozen=True)
class NavigatorState:
    current_index: int
    total_slides: int
    is_animating: bool = False
    scroll_direction: ScrollDirection = ScrollDirection.NONE
    slide_states: tuple[PresentationState, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        return self.total_slides == 0
