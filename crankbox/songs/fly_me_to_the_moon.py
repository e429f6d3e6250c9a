"""Fly Me to the Moon."""

from crankbox.notes import Song, rest, single

NAME = "FLY ME TO THE MOON"

# (key, length in sixteenths); key 0 is a rest.
_OPENING = (
    (72, 6), (71, 2), (69, 2), (67, 4), (65, 8), (67, 2), (69, 2),
    (72, 6), (71, 6), (69, 2), (67, 2), (65, 4), (64, 18), (0, 4),
    (69, 2), (67, 2), (65, 2), (64, 6), (62, 4), (64, 4), (65, 4),
)

_A_END = (
    (69, 4), (68, 4), (65, 4), (64, 2), (62, 4), (60, 10), (0, 4),
    (61, 4),
)

_B = (
    (62, 4), (69, 2), (69, 18), (72, 4), (71, 4), (67, 24), (0, 4),
    (60, 4), (60, 4), (65, 2), (65, 18), (69, 4), (67, 4), (65, 4),
    (64, 28),
)

_C_END = (
    (69, 4), (68, 4), (69, 4), (71, 4), (71, 4), (72, 2), (71, 2),
    (69, 8), (69, 4),
)

_D = (
    (69, 2), (67, 2), (69, 16), (0, 4), (72, 4), (71, 4), (76, 16),
    (77, 8), (0, 4), (76, 4), (76, 4), (72, 2), (72, 18), (71, 4),
    (74, 4), (72, 32),
)

_SCORE = _OPENING + _A_END + _B + _OPENING + _C_END + _D

NOTES = tuple(single(pitch, span) if pitch else rest(span) for pitch, span in _SCORE)

SONG = Song(NAME, NOTES, 362)