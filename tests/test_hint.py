import pytest
from PyQt6.QtWidgets import QLabel

from vgallery.ui.hint import HintController


def test_dismiss_is_idempotent(qtbot):
    hint = HintController(removal_ms=30)
    hidden, removed = [], []
    hint.hidden.connect(lambda: hidden.append(1))
    hint.removed.connect(lambda: removed.append(1))
    assert hint.visible
    hint.dismiss()
    assert not hint.visible
    assert not hint.is_removed
    hint.dismiss()
    qtbot.waitUntil(lambda: hint.is_removed, timeout=1000)
    hint.dismiss()
    qtbot.wait(60)
    assert hidden == [1]
    assert removed == [1]


def test_widget_is_hidden_after_removal_delay(qtbot):
    label = QLabel("Scroll")
    qtbot.addWidget(label)
    label.show()
    hint = HintController(label, removal_ms=50)
    hint.dismiss()
    # 즉시 숨김 상태, 위젯 제거는 지연 후
    assert not hint.visible
    assert label.isVisible()
    qtbot.waitUntil(lambda: not label.isVisible(), timeout=1000)
    assert hint.is_removed


def test_negative_removal_delay_rejected(qtbot):
    with pytest.raises(ValueError):
        HintController(removal_ms=-1)
