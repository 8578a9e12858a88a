from __future__ import annotations

from typing import Protocol


class TextSink(Protocol):
    def setText(self, text: str) -> None: ...


def format_number(n: int) -> str:
    """한 자리 수는 앞에 0을 붙인다: 5 -> '05', 10 -> '10'."""
    n = int(n)
    return f"0{n}" if n < 10 else f"{n}"


class CounterPresenter:
    def __init__(self, current_sink: TextSink | None = None, total_sink: TextSink | None = None):
        self._current_sink = current_sink
        self._total_sink = total_sink
        self._last: tuple[str, str] | None = None

    @property
    def last_rendered(self) -> tuple[str, str] | None:
        return self._last

    def render(self, current_index: int, total: int) -> tuple[str, str]:
        # 빈 덱은 current_index == -1 이므로 "00"
        current_text = format_number(current_index + 1)
        total_text = format_number(total)
        if self._current_sink is not None:
            self._current_sink.setText(current_text)
        if self._total_sink is not None:
            self._total_sink.setText(total_text)
        self._last = (current_text, total_text)
        return self._last
