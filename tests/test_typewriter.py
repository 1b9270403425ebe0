import math
import random
import threading

import pytest

from pixelplay.geometry import Vec
from pixelplay.typewriter import (
    Dotlight,
    Style,
    Typewriter,
    scroll_speeds,
    shake_offsets,
)


class FixedDice(random.Random):
    def __init__(self, value):
        super().__init__(0)
        self.value = value

    def randrange(self, *args, **kwargs):
        return self.value


@pytest.mark.parametrize(
    "dice, style",
    [(0, Style.REGULAR), (18, Style.REGULAR), (19, Style.BOLD), (20, Style.ITALIC)],
)
def test_ribbon_style_follows_dice(dice, style):
    tw = Typewriter(10, 20, FixedDice(dice))
    assert tw.ribbon("a") is style
    assert tw.glyphs[0].style is style


def test_ribbon_advances_dot():
    tw = Typewriter(10, 20, random.Random(1))
    tw.ribbon("a")
    tw.ribbon("b")
    assert tw.dot() == Vec(20, 0)
    assert [g.char for g in tw.glyphs] == ["a", "b"]
    assert tw.glyphs[1].pos == Vec(10, 0)


def test_newline_returns_to_margin_and_drops_a_line():
    tw = Typewriter(10, 20, random.Random(1))
    tw.ribbon("a")
    tw.ribbon("\n")
    assert tw.dot() == Vec(0, -20)
    assert len(tw.glyphs) == 1


def test_tab_reaches_next_stop():
    tw = Typewriter(10, 20, random.Random(1))
    tw.ribbon("a")
    tw.ribbon("\t")
    assert tw.dot().x == pytest.approx(tw.tab_width)


def test_back_moves_one_space():
    tw = Typewriter(10, 20, random.Random(1))
    tw.ribbon("a")
    tw.ribbon("b")
    tw.back()
    assert tw.dot() == Vec(10, 0)


def test_invalid_metrics_rejected():
    with pytest.raises(ValueError):
        Typewriter(0, 20)


def test_update_scrolls_by_move():
    tw = Typewriter(10, 20)
    tw.set_move(Vec(0, 4))
    tw.update(0.5)
    tw.update(0.5)
    assert tw.position() == Vec(0, 4)


def test_shake_offsets_round_trip_to_rest():
    tw = Typewriter(10, 20)
    prev = Vec()
    offsets = list(shake_offsets(3, 17, random.Random(7)))
    for off in offsets:
        tw.offset_by(prev.scaled(-1))
        tw.offset_by(off)
        prev = off
    tw.offset_by(prev.scaled(-1))
    assert offsets
    assert tw.offset().length() == pytest.approx(0, abs=1e-9)


def test_shake_offsets_stay_within_intensity_and_decay():
    offsets = list(shake_offsets(3, 17, random.Random(3)))
    assert all(abs(o.x) <= 3 and abs(o.y) <= 3 for o in offsets)
    assert len(offsets) < 100


def test_shake_without_intensity_is_empty():
    assert list(shake_offsets(0, 17, random.Random(3))) == []


def test_scroll_brings_line_back_to_baseline():
    tw = Typewriter(10, 20, random.Random(1))
    tw.ribbon("\n")
    ticks = 0
    for speed in scroll_speeds(tw, 20, 6400):
        assert speed >= 0
        tw.update(1 / 120)
        ticks += 1
        assert ticks < 10_000
    assert abs(tw.dot().y + tw.position().y) < 0.01


def test_scroll_on_baseline_does_nothing():
    tw = Typewriter(10, 20)
    assert list(scroll_speeds(tw, 20, 6400)) == []


def test_concurrent_typing_counts_every_character():
    tw = Typewriter(1, 20, random.Random(5))

    def type_many():
        for _ in range(200):
            tw.ribbon("x")

    threads = [threading.Thread(target=type_many) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert tw.dot().x == pytest.approx(800)
    assert len(tw.glyphs) == 800


def test_dotlight_starts_at_dot_and_chases_it():
    tw = Typewriter(10, 20, random.Random(1))
    light = Dotlight(tw)
    assert light.pos == Vec(0, 0)
    tw.ribbon("a")
    light.update(0.01)
    assert 0 < light.pos.x < 10
    assert light.pos.y == pytest.approx(0)


def test_dotlight_speed_is_capped():
    tw = Typewriter(10, 20, random.Random(1))
    light = Dotlight(tw, max_speed=5)
    for _ in range(20):
        tw.ribbon("a")
    light.update(0.1)
    assert light.vel.length() <= 5 + 1e-9


def test_dotlight_outline_is_closed_circle():
    tw = Typewriter(10, 20)
    light = Dotlight(tw, radius=6)
    points = light.outline()
    assert len(points) == 33
    assert all(math.isclose((p - light.pos).length(), 6) for p in points)
    assert (points[0] - points[-1]).length() == pytest.approx(0, abs=1e-9)