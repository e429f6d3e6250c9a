from crankbox.notes import Note, double, rest, single
from crankbox.songs import rydeen


def test_song_metadata():
    assert rydeen.SONG.name == "RYDEEN"
    assert rydeen.SONG.counts_by_sixteens == 1224
    assert rydeen.SONG.counts_by_sixteens > rydeen.SONG.length()


def test_note_count_matches_score():
    assert rydeen.SONG.length() == 446
    assert len(rydeen.NOTES) == 446


def test_opening_and_ending():
    assert rydeen.NOTES[0] == single(69, 4)
    assert rydeen.NOTES[1] == single(71, 4)
    assert rydeen.NOTES[-1] == rest(12)
    assert rydeen.NOTES[-2] == double(69, 76, 4)


def test_verse_is_played_twice():
    assert rydeen.NOTES[2:199] == rydeen.NOTES[199:396]
    assert rydeen.NOTES[2] == single(72, 16)


def test_double_notes_are_known_chords():
    chords = {note.pitches for note in rydeen.NOTES if note.size == 2}
    assert chords == {double(72, 79, 2).pitches, double(69, 76, 4).pitches}


def test_all_notes_are_valid():
    for note in rydeen.NOTES:
        assert isinstance(note, Note)
        assert note.length >= 1
        assert all(0 <= pitch <= 127 for pitch in note.pitches)
    assert rydeen.SONG.length() == len(rydeen.NOTES)


def test_rests_have_no_pitch():
    rests = [note for note in rydeen.NOTES if note.is_rest()]
    assert rests
    assert all(note == rest(note.length) for note in rests)
    assert all(note.size == 0 for note in rests)