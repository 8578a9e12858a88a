import pytest

from vgallery.ui.counter import CounterPresenter, format_number


class _Sink:
    def __init__(self):
        self.texts = []

    def setText(self, text):
        self.texts.append(text)


@pytest.mark.parametrize(
    "n, expected",
    [
        (0, "00"),
        (1, "01"),
        (5, "05"),
        (9, "09"),
        (10, "10"),
        (123, "123"),
    ],
)
def test_format_number(n, expected):
    assert format_number(n) == expected


def test_render_writes_one_based_index_and_total():
    cur, tot = _Sink(), _Sink()
    p = CounterPresenter(cur, tot)
    assert p.last_rendered is None
    assert p.render(4, 12) == ("05", "12")
    assert cur.texts == ["05"]
    assert tot.texts == ["12"]
    assert p.last_rendered == ("05", "12")


def test_render_is_idempotent():
    cur, tot = _Sink(), _Sink()
    p = CounterPresenter(cur, tot)
    p.render(2, 3)
    p.render(2, 3)
    assert cur.texts == ["03", "03"]
    assert p.last_rendered == ("03", "03")


def test_render_empty_deck():
    p = CounterPresenter()
    assert p.render(-1, 0) == ("00", "00")
