from crankbox.notes import rest, single
from crankbox.songs.bic_camera import SONG


def test_name_and_span():
    assert SONG.name == "ビックカメラの\nCMソング"
    assert SONG.counts_by_sixteens == 128
    assert SONG.total_sixteenths() == SONG.counts_by_sixteens


def test_note_count():
    assert SONG.length() == 51


def test_opening_and_ending():
    assert SONG[0] == single(71, 2)
    assert SONG[-1] == rest(4)
    assert SONG[-2] == single(67, 4)


def test_rests_are_where_the_phrases_end():
    rests = [i for i, note in enumerate(SONG) if note.is_rest()]
    assert rests == [13, 26, 38, 50]
    assert all(SONG[i] == rest(4) for i in rests)


def test_all_notes_are_single_pitch_or_rest():
    assert all(
        note == (rest(note.length) if note.size == 0 else single(note.pitches[0], note.length))
        for note in SONG
    )
    assert all(0 <= p <= 127 for note in SONG for p in note.pitches)