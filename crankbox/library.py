"""The songs and crank speeds the music box offers."""

from __future__ import annotations

from dataclasses import dataclass

from crankbox.notes import Song
from crankbox.songs import (
    bic_camera,
    fly_me_to_the_moon,
    kimiwo_nosete,
    piano_cat,
    rydeen,
    twinkle_star,
    yodobashi,
)


@dataclass(frozen=True)
class Speed:
    """A playback speed: crank pulses per sixteenth and its display name."""

    event_count: int
    name: str


SONGS: tuple[Song, ...] = (
    piano_cat.SONG,
    twinkle_star.SONG,
    kimiwo_nosete.SONG,
    rydeen.SONG,
    fly_me_to_the_moon.SONG,
    bic_camera.SONG,
    yodobashi.SONG,
)

SPEEDS: tuple[Speed, ...] = (
    Speed(18, "最遅"),
    Speed(12, "超遅"),
    Speed(8, "遅い"),
    Speed(6, "普通"),
    Speed(5, "速い"),
    Speed(3, "超速"),
    Speed(2, "最速"),
)

DEFAULT_SPEED_INDEX = 3
"""Index of the speed selected at start-up."""


def song_at(index: int) -> Song:
    """The song at ``index``, wrapping around the list in both directions."""
    return SONGS[index % len(SONGS)]


def speed_at(index: int) -> Speed:
    """The speed at ``index``; speeds do not wrap."""
    if not 0 <= index < len(SPEEDS):
        raise IndexError(f"speed index must be between 0 and {len(SPEEDS) - 1}, got {index}")
    return SPEEDS[index]