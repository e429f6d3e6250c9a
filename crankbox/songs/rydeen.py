"""Rydeen."""

from crankbox.notes import Note, Song, double, rest, single

NAME = "RYDEEN"

# (key, length in sixteenths); key 0 is a rest, a pair of keys a chord.
_INTRO = ((69, 4), (71, 4))

_RIFF = ((0, 2), (72, 2), (74, 2), (72, 2), (71, 2), (71, 1), (69, 1), (67, 2))
_HOLD = ((64, 2), (69, 24), (69, 4), (71, 4))

_A = ((72, 16),) + _RIFF + _HOLD + ((72, 16),) + _RIFF + ((69, 2), (76, 24), (0, 8))

_B = (
    (69, 4), (69, 2), (67, 2), (69, 2), (72, 4), (74, 2), (67, 2),
    (69, 2), (67, 2), (64, 2), (67, 2), (69, 6), (69, 4), (69, 2),
    (67, 2), (69, 2), (72, 4), (74, 2), (76, 2), (74, 2), (72, 2),
    (67, 2), (72, 4), (67, 2), (72, 2), (76, 10), (79, 2), (76, 2),
    (74, 2), (76, 8), (67, 4), (72, 4), (76, 10), (74, 4), (76, 2),
)

_B_TURN = ((74, 8), (67, 4), (71, 4))
_B_END = ((74, 8), (0, 8))

_C = (
    (77, 2), (77, 2), (72, 2), (75, 2), (77, 4), (0, 2), (77, 6),
    (77, 2), (72, 2), (75, 2), (77, 4), (0, 4), (75, 2), (75, 2),
    (70, 2), (72, 2), (75, 4), (0, 2), (74, 4), (74, 2), (69, 2),
    (72, 2), (74, 2), (75, 2), (76, 2), (77, 4), (77, 2), (72, 2),
    (75, 2), (76, 4), (0, 2), (77, 4), (77, 2), (72, 2), (75, 2),
    (77, 4), (0, 4), (75, 2), (75, 2), (70, 2), (72, 2), (75, 4),
    (0, 2), (75, 4), (74, 2), (70, 2), (72, 2), (75, 4), (0, 4),
    (74, 2), (74, 2), (69, 2), (72, 2), (74, 4), (0, 2), (76, 4),
    (76, 2), (69, 2), (72, 2), (74, 2), (76, 2), (78, 2), (72, 2),
    (67, 4), (69, 4), (72, 4), (74, 4),
)

_C_TAIL = (((72, 79), 2), ((72, 79), 2), (0, 4)) + _INTRO

_D = ((72, 16),) + _RIFF + _HOLD + _RIFF + ((69, 2),)
_D_TURN = ((76, 24),) + _INTRO
_D_END = ((76, 16), ((69, 76), 4), (0, 12))

_VERSE = _A + _B + _B_TURN + _A + _B + _B_END + _C + _C_TAIL

_SCORE = _INTRO + _VERSE + _VERSE + _D + _D_TURN + _D + _D_END


def _note(key: int | tuple[int, int], length: int) -> Note:
    if isinstance(key, tuple):
        return double(*key, length)
    return single(key, length) if key else rest(length)


NOTES = tuple(_note(key, length) for key, length in _SCORE)

SONG = Song(NAME, NOTES, 1224)