import random

import pytest
from PIL import Image

from pixelplay.geometry import Rect, Vec
from pixelplay.smoke import (
    Particle,
    ParticleSystem,
    SmokeData,
    SmokeSystem,
    load_sprite_sheet,
    parse_sprite_rects,
)


def test_parse_sprite_rects_flips_y():
    rects = parse_sprite_rects([["3", "5", "10", "20"]], 100)
    (r,) = rects
    assert r.min.x == 3
    assert r.width() == 10
    assert r.height() == 20
    assert r.max.y == 100 - 5


def test_parse_sprite_rects_bad_number_is_zero():
    (r,) = parse_sprite_rects([["x", "0", "10", "20"]], 100)
    assert r.min.x == 0


def test_parse_sprite_rects_short_row():
    with pytest.raises((IndexError, ValueError)):
        parse_sprite_rects([["1", "2"]], 100)


def test_load_sprite_sheet(tmp_path):
    sheet_path = tmp_path / "smoke.png"
    Image.new("RGBA", (64, 50)).save(sheet_path)
    desc_path = tmp_path / "smoke.csv"
    desc_path.write_text("0,0,32,50\n32,0,32,25\n")
    sheet, rects = load_sprite_sheet(str(sheet_path), str(desc_path))
    assert sheet.size == (64, 50)
    assert rects[0] == Rect(Vec(0, 0), Vec(32, 50))
    assert rects[1].max.y == 50
    assert rects[1].height() == 25


def test_load_sprite_sheet_missing(tmp_path):
    with pytest.raises(OSError):
        load_sprite_sheet(str(tmp_path / "a.png"), str(tmp_path / "a.csv"))


def _counting_system(spawn_avg=1.0):
    made = []

    def generate():
        p = Particle(data=len(made))
        made.append(p)
        return p

    def update(dt, p):
        p.pos = p.pos + Vec(dt, 0)
        return p.data != 1

    return ParticleSystem(generate, update, spawn_avg, 0.0, random.Random(0)), made


def test_particle_system_spawns_newest_first():
    system, made = _counting_system()
    system.update_all(0)
    assert len(made) == 1
    system.update_all(2.5)
    assert len(made) == 3
    assert system.spawn_time > 0
    ids = [p.data for p in system]
    assert ids == sorted(ids, reverse=True)


def test_particle_system_removes_expired():
    system, made = _counting_system()
    system.update_all(0)
    system.update_all(1.0)
    assert len(made) == 2
    assert [p.data for p in system] == [0]
    assert made[0].pos.x == 1.0


def test_smoke_generate_deterministic_when_no_spread():
    rects = [Rect(Vec(0, 0), Vec(1, 1)), Rect(Vec(1, 0), Vec(2, 1))]
    ss = SmokeSystem(rects, vel_dist=0.0, life_dist=0.0, orig=Vec(5, 5), rng=random.Random(2))
    p = ss.generate()
    assert p.pos == Vec(5, 5)
    assert p.scale == 1.0
    assert p.mask == 1.0
    assert p.sprite in rects
    assert p.data.life == 7
    assert p.data.vel.x == pytest.approx(0)
    assert p.data.vel.y == pytest.approx(100)


def test_smoke_velocity_never_reverses():
    ss = SmokeSystem([Rect(Vec(0, 0), Vec(1, 1))], vel_dist=5.0, rng=random.Random(9))
    for _ in range(50):
        p = ss.generate()
        assert p.data.vel.y >= 0
        assert p.data.life >= 0


def test_smoke_update_fades_and_expires():
    ss = SmokeSystem([Rect(Vec(0, 0), Vec(1, 1))])
    p = Particle(data=SmokeData(vel=Vec(0, 100), life=10.0))
    assert ss.update(3.0, p)
    assert p.mask == 1.0
    assert p.pos == Vec(0, 300)
    scale_mid = p.scale
    assert ss.update(4.0, p)
    assert 0 < p.mask < 1
    assert p.scale > scale_mid
    assert not ss.update(5.0, p)
    assert 0 <= p.mask <= 1


def test_smoke_fade_in_rises():
    ss = SmokeSystem([Rect(Vec(0, 0), Vec(1, 1))])
    p = Particle(data=SmokeData(life=10.0))
    ss.update(0.5, p)
    first = p.mask
    ss.update(0.5, p)
    assert 0 < first < p.mask < 1


def test_smoke_system_in_particle_system():
    ss = SmokeSystem([Rect(Vec(0, 0), Vec(1, 1))], rng=random.Random(4))
    system = ParticleSystem(ss.generate, ss.update, 0.3, 0.1, random.Random(5))
    for _ in range(100):
        system.update_all(0.1)
    assert len(system) > 0
    assert all(p.data.time < p.data.life for p in system)