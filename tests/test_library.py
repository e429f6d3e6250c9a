import pytest

from crankbox.library import DEFAULT_SPEED_INDEX, SONGS, SPEEDS, Speed, song_at, speed_at
from crankbox.songs import (
    bic_camera,
    fly_me_to_the_moon,
    kimiwo_nosete,
    piano_cat,
    rydeen,
    twinkle_star,
    yodobashi,
)


def test_song_order():
    assert [song_at(i).name for i in range(len(SONGS))] == [
        piano_cat.NAME,
        twinkle_star.NAME,
        kimiwo_nosete.NAME,
        rydeen.NAME,
        fly_me_to_the_moon.NAME,
        bic_camera.NAME,
        yodobashi.NAME,
    ]


def test_song_at_wraps():
    assert song_at(0) is SONGS[0]
    assert song_at(len(SONGS)) is SONGS[0]
    assert song_at(-1) is SONGS[-1]


def test_default_speed():
    speed = speed_at(DEFAULT_SPEED_INDEX)
    assert speed == Speed(6, "普通")


def test_speed_extremes():
    assert speed_at(0) == Speed(18, "最遅")
    assert speed_at(len(SPEEDS) - 1) == Speed(2, "最速")


def test_speeds_get_faster():
    counts = [speed_at(i).event_count for i in range(len(SPEEDS))]
    assert counts == sorted(counts, reverse=True)
    assert len(set(counts)) == len(counts)


@pytest.mark.parametrize("index", [-1, len(SPEEDS), 100])
def test_speed_out_of_range(index):
    with pytest.raises(IndexError):
        speed_at(index)