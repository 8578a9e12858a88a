import pytest
from PyQt6.QtCore import QRect

from vgallery.services.lazy_media import LazyMediaScheduler

VIEWPORT = QRect(0, 0, 100, 100)


class _Elem:
    def __init__(self, name, rect):
        self.name = name
        self._rect = rect

    def geometry(self):
        return self._rect


def test_loads_within_margin_once():
    s = LazyMediaScheduler(margin=100)
    near = _Elem("near", QRect(0, 150, 100, 100))
    far = _Elem("far", QRect(0, 300, 100, 100))
    loaded = []
    s.observe(near, lambda e: loaded.append(e.name))
    s.observe(far, lambda e: loaded.append(e.name))
    assert s.check(VIEWPORT) == 1
    assert loaded == ["near"]
    assert not s.is_observed(near)
    assert s.is_observed(far)
    assert s.check(VIEWPORT) == 0
    assert loaded == ["near"]
    assert s.pending_count == 1


def test_zero_margin_needs_real_overlap():
    s = LazyMediaScheduler(margin=0)
    e = _Elem("e", QRect(0, 150, 100, 100))
    loaded = []
    s.observe(e, loaded.append)
    s.check(VIEWPORT)
    assert loaded == []
    s.check(QRect(0, 100, 100, 100))
    assert loaded == [e]


def test_visibility_order_not_registration_order():
    s = LazyMediaScheduler(margin=0)
    pos = {"a": QRect(0, 500, 10, 10), "b": QRect(0, 10, 10, 10)}
    a = _Elem("a", None)
    b = _Elem("b", None)
    loaded = []
    s.observe(a, lambda e: loaded.append(e.name), rect=lambda: pos["a"])
    s.observe(b, lambda e: loaded.append(e.name), rect=lambda: pos["b"])
    s.check(VIEWPORT)
    pos["a"] = QRect(0, 20, 10, 10)
    s.check(VIEWPORT)
    assert loaded == ["b", "a"]


def test_reobserve_replaces_callback_and_unobserve():
    s = LazyMediaScheduler()
    e = _Elem("e", QRect(0, 0, 10, 10))
    first, second = [], []
    s.observe(e, first.append)
    s.observe(e, second.append)
    assert s.pending_count == 1
    s.check(VIEWPORT)
    assert first == [] and second == [e]

    g = _Elem("g", QRect(0, 0, 10, 10))
    s.observe(g, first.append)
    assert s.unobserve(g)
    assert not s.unobserve(g)
    s.check(VIEWPORT)
    assert first == []


def test_failing_callback_is_logged_and_deregistered(caplog):
    s = LazyMediaScheduler()
    bad = _Elem("bad", QRect(0, 0, 10, 10))
    good = _Elem("good", QRect(0, 0, 10, 10))
    loaded = []

    def boom(_e):
        raise RuntimeError("decode failed")

    s.observe(bad, boom)
    s.observe(good, lambda e: loaded.append(e.name))
    with caplog.at_level("ERROR"):
        assert s.check(VIEWPORT) == 2
    assert loaded == ["good"]
    assert s.pending_count == 0
    assert "lazy_load_callback_failed" in caplog.text


def test_negative_margin_rejected():
    with pytest.raises(ValueError):
        LazyMediaScheduler(margin=-1)
