"""The Flea Waltz, known in Japan as "the cat stepped on it"."""

from crankbox.notes import Note, Song, double, rest, single

NAME = "ねこふんじゃった"

NOTE_COUNT = 305
"""Number of notes that are played; the written score has one more."""

_F = double(70, 78, 2)
_G = double(71, 77, 2)


def _bar(bass: int, chord: Note) -> tuple[Note, ...]:
    return (single(bass, 2), chord, chord, single(75, 1), single(73, 1))


def _alt(bass: int, chord: Note, middle: int) -> tuple[Note, ...]:
    return (single(bass, 2), chord, single(middle, 2), chord)


def _run(*keys: int) -> tuple[Note, ...]:
    return tuple(single(key, 2) for key in keys)


_PICKUP = (single(75, 1), single(73, 1))

_VERSE = (
    (_bar(66, _F),) * 2
    + (_alt(66, _F, 63),)
    + (_bar(61, _G),) * 3
    + (_alt(61, _G, 63),)
)

_BRIDGE = (
    (_bar(66, _F),)
    + (_bar(82, _F),) * 2
    + (_alt(82, _F, 85),)
    + (_bar(87, _G),) * 3
    + (_alt(87, _G, 85),)
    + (_bar(82, _F),)
    + (_alt(66, _F, 61),) * 2
    + (_run(66, 65, 66, 67), _bar(68, _G))
    + (_alt(68, _G, 63),) * 2
    + (_run(68, 67, 68, 69), _bar(70, _F))
)

_INTERLUDE = (
    (_bar(66, _F),)
    + _VERSE[:3]
    + (_bar(61, _G), _bar(66, _G), _bar(61, _G))
    + _VERSE[-1:]
)

_ENDING = (
    (single(66, 2), _F, double(70, 78, 4)),
    (_F, single(73, 1), single(72, 1), single(73, 1), single(74, 2), single(73, 2)),
    (rest(2), _G, double(70, 78, 4), single(66, 2)),
)

_MEASURES = (
    (_PICKUP,) + _VERSE + _BRIDGE + _VERSE + _INTERLUDE + _BRIDGE + _VERSE + _ENDING
)

NOTES = tuple(note for measure in _MEASURES for note in measure)[:NOTE_COUNT]

SONG = Song(NAME, NOTES, 533)