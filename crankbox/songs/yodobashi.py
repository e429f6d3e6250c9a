"""The Yodobashi Camera advertising jingle."""

from crankbox.notes import Song, rest, single

NAME = "ヨドバシカメラ\nのCMソング"

# (key, length in sixteenths); key 0 is a rest.
_CALL = (
    (67, 2), (67, 2), (67, 2), (65, 2), (64, 2), (67, 2), (72, 2),
    (74, 2), (76, 2), (76, 2), (76, 2), (74, 1), (72, 9),
)

_ANSWER = (
    (69, 2), (69, 2), (69, 2), (71, 2), (72, 2), (71, 2), (72, 2),
    (69, 2), (67, 2), (69, 2), (67, 2), (64, 1), (67, 9),
)

_FINISH = (
    (74, 2), (74, 2), (74, 2), (74, 2), (72, 2), (72, 2), (71, 2),
    (71, 2), (72, 2), (0, 2), (72, 3), (72, 1), (0, 8),
)

_SCORE = _CALL + _ANSWER + _CALL + _FINISH

NOTES = tuple(rest(length) if key == 0 else single(key, length) for key, length in _SCORE)

SONG = Song(NAME, NOTES, 128)