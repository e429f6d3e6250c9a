from crankbox.notes import single
from crankbox.songs.twinkle_star import SONG


def test_name_and_span():
    assert SONG.name == "きらきら星"
    assert SONG.counts_by_sixteens == 192
    assert SONG.total_sixteenths() == 192


def test_note_count():
    assert SONG.length() == 42


def test_sixteenths_fill_the_seek_bar_span():
    assert SONG.total_sixteenths() == SONG.counts_by_sixteens


def test_last_phrases_repeat_the_first():
    assert SONG.notes[28:] == SONG.notes[:14]
    assert SONG[28] == single(60, 4)


def test_has_no_rests():
    assert not any(note.is_rest() for note in SONG)
    assert SONG[0] == single(60, 4)