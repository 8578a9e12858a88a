import pytest
from PyQt6.QtCore import Qt

from vgallery.core.input_normalizer import InputNormalizer
from vgallery.core.state import IntentKind, NavigationIntent


def make(total=5, threshold=50):
    return InputNormalizer(lambda: total, threshold)


def test_wheel_sign_maps_to_direction():
    n = make()
    assert n.wheel(1) == NavigationIntent.next()
    assert n.wheel(0.01) == NavigationIntent.next()
    assert n.wheel(-300) == NavigationIntent.previous()
    assert n.wheel(0) is None


def test_swipe_threshold_boundary():
    n = make()
    n.touch_start(300)
    n.touch_move(250)
    assert n.touch_end() is None  # 정확히 50
    n.touch_start(300)
    n.touch_move(249)
    assert n.touch_end() == NavigationIntent.next()  # 51, 위로 스와이프


def test_swipe_down_is_previous():
    n = make()
    n.touch_start(100)
    n.touch_move(400)
    assert n.touch_end() == NavigationIntent.previous()


def test_touch_coordinates_reset_after_release():
    n = make()
    n.touch_start(500)
    n.touch_move(10)
    n.touch_end()
    assert (n.touch_start_y, n.touch_end_y) == (0.0, 0.0)
    n.touch_start(500)
    n.touch_move(480)
    n.touch_end()
    assert (n.touch_start_y, n.touch_end_y) == (0.0, 0.0)


def test_tap_without_move_produces_nothing():
    n = make()
    n.touch_start(700)
    assert n.touch_end() is None


@pytest.mark.parametrize(
    "key, kind",
    [
        (Qt.Key.Key_Down, IntentKind.NEXT),
        (Qt.Key.Key_PageDown, IntentKind.NEXT),
        (Qt.Key.Key_Up, IntentKind.PREVIOUS),
        (Qt.Key.Key_PageUp, IntentKind.PREVIOUS),
        ("ArrowDown", IntentKind.NEXT),
        ("PageUp", IntentKind.PREVIOUS),
    ],
)
def test_arrow_and_page_keys(key, kind):
    intent = make().key(key)
    assert intent is not None
    assert intent.kind is kind


def test_home_and_end_keys():
    n = make(total=7)
    assert n.key(Qt.Key.Key_Home) == NavigationIntent.goto(0)
    assert n.key(Qt.Key.Key_End) == NavigationIntent.goto(6)
    assert n.key("End") == NavigationIntent.goto(6)


def test_key_accepts_plain_int_from_key_event():
    n = make()
    assert n.key(int(Qt.Key.Key_Down.value)) == NavigationIntent.next()


def test_other_keys_are_ignored():
    n = make()
    for key in (Qt.Key.Key_Left, Qt.Key.Key_Space, Qt.Key.Key_A, "Enter", "x"):
        assert n.key(key) is None
        assert not n.is_navigation_key(key)
    assert n.is_navigation_key(Qt.Key.Key_End)


def test_negative_threshold_rejected():
    with pytest.raises(ValueError):
        InputNormalizer(lambda: 1, -1)
