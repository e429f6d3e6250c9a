"""Twinkle, Twinkle, Little Star."""

from crankbox.notes import Note, Song, single

NAME = "きらきら星"


def _phrase(*keys: int) -> tuple[Note, ...]:
    """Quarter notes closed by a half note on the last key."""
    return tuple(single(key, 4) for key in keys[:-1]) + (single(keys[-1], 8),)


_OPENING = _phrase(60, 60, 67, 67, 69, 69, 67)
_CLOSING = _phrase(65, 65, 64, 64, 62, 62, 60)
_MIDDLE = _phrase(67, 67, 65, 65, 64, 64, 62)

NOTES = _OPENING + _CLOSING + _MIDDLE + _MIDDLE + _OPENING + _CLOSING

SONG = Song(NAME, NOTES, 192)