"""Carrying You, the theme from Castle in the Sky."""

from crankbox.notes import Song, double, rest, single

NAME = "君をのせて"

# (key, length in sixteenths); key 0 is a rest.
_INTRO = ((69, 2), (71, 2))

_A = (
    (72, 6), (71, 2), (72, 4), (76, 4), (71, 12), (64, 4), (69, 6),
    (67, 4), (69, 4), (72, 4), (67, 8), (0, 4), (64, 2), (64, 2),
    (65, 6), (64, 2), (65, 2), (72, 6), (64, 8), (0, 2), (72, 2),
    (72, 2), (72, 2), (71, 6), (66, 2), (66, 4), (71, 4), (71, 8),
    (0, 4), (69, 2), (71, 2),
)

_A_PRIME = (
    (72, 6), (71, 2), (72, 4), (76, 4), (71, 12), (64, 2), (64, 2),
    (69, 6), (67, 2), (69, 4), (72, 4), (67, 12), (0, 2), (64, 2),
    (65, 4), (72, 2), (71, 6), (72, 4), (74, 2), (74, 4), (76, 2),
    (72, 8), (72, 2), (71, 2), (69, 2), (69, 2), (71, 4), (68, 4),
)

_A_PRIME_END = ((69, 8), (0, 4), (72, 2), (74, 4))

_B = (
    (76, 4), (74, 2), (76, 4), (79, 4), (74, 8), (0, 4), (67, 2),
    (67, 2), (72, 6), (71, 2), (72, 4), (76, 2), (76, 12), (0, 4),
    (69, 2), (71, 2), (72, 4), (71, 2), (72, 2), (74, 2), (74, 2),
    (72, 6), (67, 2), (67, 4), (77, 4), (76, 4), (74, 4), (72, 4),
    (76, 24), (0, 4), (76, 4),
)

_C_OPENING = ((81, 8), (79, 6), (79, 2), (76, 2), (74, 2), (72, 8))

_C_REST = (
    (72, 2), (74, 4), (72, 2), (74, 4), (79, 6), (76, 8), (0, 4),
    (76, 4), (81, 8), (79, 8), (76, 2), (74, 2), (72, 8), (0, 2),
    (72, 2), (74, 4), (72, 2), (74, 6), (71, 4),
)

# The first chorus breathes after its opening phrase, the second does not.
_C_FIRST = _C_OPENING + ((0, 2),) + _C_REST
_C_SECOND = _C_OPENING + _C_REST

_C_END = ((69, 12), (69, 2), (71, 2))

_CODA_LEAD = ((69, 6), (68, 2))

_SCORE = (
    _INTRO
    + _A + _A_PRIME + _A_PRIME_END + _B + _C_FIRST + _C_END
    + _A + _A_PRIME + _A_PRIME_END + _B + _C_SECOND + _C_END
    + _A + _A_PRIME + _CODA_LEAD
)

_CODA_CHORDS = tuple(
    double(upper, lower, length)
    for upper, lower, length in (
        (70, 62, 14), (70, 62, 2), (72, 64, 14),
        (72, 64, 2), (74, 65, 34), (74, 66, 16),
    )
)

NOTES = tuple(single(k, n) if k else rest(n) for k, n in _SCORE) + _CODA_CHORDS

SONG = Song(NAME, NOTES, 1152)