from crankbox.notes import Note, double, rest, single
from crankbox.songs import kimiwo_nosete
from crankbox.songs.kimiwo_nosete import NAME, NOTES, SONG


def test_name():
    assert SONG.name == "君をのせて"
    assert NAME == SONG.name
    assert SONG.length() == len(NOTES)


def test_note_count_matches_score():
    assert SONG.length() == 314
    assert len(SONG) == len(NOTES)


def test_seek_span():
    assert SONG.counts_by_sixteens == 1152
    assert SONG.counts_by_sixteens > SONG.length()


def test_opening_notes():
    assert SONG[0] == single(69, 2)
    assert SONG[1] == single(71, 2)
    assert SONG[2] == single(72, 6)


def test_final_chord():
    assert SONG[-1] == double(74, 66, 16)
    assert SONG[-2] == double(74, 65, 34)


def test_only_coda_has_chords():
    chords = [note for note in SONG if note.size == 2]
    assert len(chords) == 6
    assert list(SONG.notes[-6:]) == chords
    assert chords[0] == double(70, 62, 14)


def test_every_note_is_a_note_with_positive_length():
    assert all(isinstance(note, Note) and note.length > 0 for note in SONG)
    assert all(
        note
        == (
            rest(note.length)
            if note.size == 0
            else single(note.pitches[0], note.length)
            if note.size == 1
            else double(note.pitches[0], note.pitches[1], note.length)
        )
        for note in SONG
    )


def test_transposed_by_key_limits_stays_in_midi_range():
    assert single(60, 1).transposed(16) == single(76, 1)
    for offset in (-16, 16):
        for note in SONG:
            assert all(0 <= pitch <= 127 for pitch in note.transposed(offset).pitches)


def test_module_exposes_song():
    assert kimiwo_nosete.SONG is SONG
    assert kimiwo_nosete.SONG.length() == 314