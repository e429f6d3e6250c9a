"""The Bic Camera advertising jingle."""

from crankbox.notes import Song, rest, single

NAME = "ビックカメラの\nCMソング"

# (key, length in sixteenths); key 0 is a rest.
_SCORE = (
    (71, 2), (71, 2), (71, 2), (71, 2), (71, 2), (69, 2), (71, 2),
    (72, 2), (74, 2), (74, 2), (74, 2), (74, 2), (71, 4), (0, 4),
    (69, 2), (69, 2), (69, 2), (71, 2), (72, 4), (71, 2), (69, 2),
    (71, 2), (69, 2), (71, 2), (72, 2), (74, 4), (0, 4),
    (71, 4), (71, 2), (71, 2), (71, 2), (69, 2), (71, 2), (72, 2),
    (74, 4), (74, 2), (74, 2), (71, 4), (0, 4),
    (69, 6), (71, 2), (72, 2), (72, 2), (71, 2), (69, 2), (67, 2),
    (67, 2), (67, 2), (67, 2), (67, 4), (0, 4),
)

NOTES = tuple(single(key, length) if key else rest(length) for key, length in _SCORE)

SONG = Song(NAME, NOTES, 128)