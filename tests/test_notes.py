import pytest

from crankbox.notes import MAX_NOTE_COUNT, Note, Song, double, rest, single


def test_single_holds_one_pitch():
    note = single(71, 2)
    assert note.pitches == (71,)
    assert note.length == 2
    assert note.size == 1
    assert not note.is_rest()


def test_double_holds_two_pitches_in_order():
    note = double(70, 78, 2)
    assert note.pitches == (70, 78)
    assert note.size == MAX_NOTE_COUNT


def test_rest_has_no_pitch():
    note = rest(4)
    assert note.is_rest()
    assert note.pitches == ()
    assert note.length == 4


def test_too_many_pitches_rejected():
    with pytest.raises(ValueError):
        Note((60, 64, 67), 2)


@pytest.mark.parametrize("pitch", [-1, 256])
def test_pitch_out_of_byte_range_rejected(pitch):
    with pytest.raises(ValueError):
        single(pitch, 2)


def test_length_out_of_range_rejected():
    with pytest.raises(ValueError):
        rest(256)


def test_non_int_pitch_rejected():
    with pytest.raises(TypeError):
        Note(("c",), 2)


def test_list_pitches_become_tuple():
    note = Note([60, 67], 4)
    assert note.pitches == (60, 67)
    assert note == double(60, 67, 4)


def test_transposed_round_trip():
    note = double(70, 78, 2)
    assert note.transposed(5).transposed(-5) == note


def test_transposed_shifts_each_pitch_by_offset():
    note = double(70, 78, 2)
    moved = note.transposed(2)
    assert [b - a for a, b in zip(note.pitches, moved.pitches)] == [2, 2]
    assert moved.length == note.length


def test_transposed_wraps_like_a_byte():
    assert single(255, 1).transposed(1).pitches == (0,)


def test_transposed_rest_stays_rest():
    assert rest(4).transposed(3) == rest(4)


def test_song_length_and_total_sixteenths():
    song = Song("demo", [single(60, 2), rest(4)], 16)
    assert song.length() == 2
    assert len(song) == 2
    assert song.total_sixteenths() == 6
    assert song[1].is_rest()
    assert list(song) == [single(60, 2), rest(4)]


def test_empty_song():
    song = Song("empty", (), 1)
    assert song.length() == 0
    assert song.total_sixteenths() == 0


def test_song_rejects_non_positive_counts():
    with pytest.raises(ValueError):
        Song("bad", (single(60, 2),), 0)


def test_song_rejects_non_note_items():
    with pytest.raises(TypeError):
        Song("bad", (60,), 4)