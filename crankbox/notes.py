"""Note and song data for the music box."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

MAX_NOTE_COUNT = 2
"""Maximum number of pitches sounded together by one note."""

_BYTE_MAX = 0xFF


def _check_byte(value: int, what: str) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{what} must be an int, got {type(value).__name__}")
    if not 0 <= value <= _BYTE_MAX:
        raise ValueError(f"{what} must be between 0 and {_BYTE_MAX}, got {value}")
    return value


@dataclass(frozen=True)
class Note:
    """A step of a melody: up to two pitches held for a number of sixteenths."""

    pitches: tuple[int, ...] = ()
    length: int = 1

    def __post_init__(self) -> None:
        pitches = tuple(self.pitches)
        if len(pitches) > MAX_NOTE_COUNT:
            raise ValueError(
                f"a note holds at most {MAX_NOTE_COUNT} pitches, got {len(pitches)}"
            )
        for pitch in pitches:
            _check_byte(pitch, "pitch")
        _check_byte(self.length, "length")
        object.__setattr__(self, "pitches", pitches)

    @property
    def size(self) -> int:
        """Number of pitches in the note."""
        return len(self.pitches)

    def is_rest(self) -> bool:
        """True when the note sounds no pitch."""
        return not self.pitches

    def transposed(self, offset: int) -> Note:
        """Return the note shifted by ``offset`` semitones, wrapping as a byte."""
        return Note(
            tuple((pitch + offset) & _BYTE_MAX for pitch in self.pitches),
            self.length,
        )


def single(key: int, length: int) -> Note:
    """A note with one pitch."""
    return Note((key,), length)


def double(key1: int, key2: int, length: int) -> Note:
    """A note with two pitches sounded together."""
    return Note((key1, key2), length)


def rest(length: int) -> Note:
    """A silent step."""
    return Note((), length)


@dataclass(frozen=True)
class Song:
    """A named melody and the number of sixteenths its seek bar spans."""

    name: str
    notes: tuple[Note, ...] = field(default_factory=tuple)
    counts_by_sixteens: int = 1

    def __post_init__(self) -> None:
        notes = tuple(self.notes)
        for note in notes:
            if not isinstance(note, Note):
                raise TypeError(f"song notes must be Note, got {type(note).__name__}")
        if self.counts_by_sixteens <= 0:
            raise ValueError(
                f"counts_by_sixteens must be positive, got {self.counts_by_sixteens}"
            )
        object.__setattr__(self, "notes", notes)

    def length(self) -> int:
        """Number of notes in the song."""
        return len(self.notes)

    def total_sixteenths(self) -> int:
        """Sum of the lengths of all notes."""
        return sum(note.length for note in self.notes)

    def __len__(self) -> int:
        return len(self.notes)

    def __iter__(self) -> Iterator[Note]:
        return iter(self.notes)

    def __getitem__(self, index: int) -> Note:
        return self.notes[index]