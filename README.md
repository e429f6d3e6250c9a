# crankbox

crankbox holds the parts of a MIDI music box that is played by turning a
crank: built-in melodies, a MIDI player that fades each held note out, and a
model of the touch screen with its buttons and seek bar.

## Installation

```
pip install crankbox
```

With the test extra, pytest is installed as well:

```
pip install "crankbox[test]"
```

## Melodies

`crankbox.notes` defines the data types:

- `Note` holds up to two pitches (`pitches`) and a `length` in sixteenths.
  `is_rest()` tells whether it sounds nothing, and `transposed(offset)`
  returns a copy shifted by a number of semitones.
- `Song` holds a `name`, a tuple of `notes` and `counts_by_sixteens`, the
  number of sixteenths its seek bar spans. `length()` gives the number of
  notes and `total_sixteenths()` the sum of their lengths. A song can be
  iterated and indexed.
- `single(key, length)`, `double(key1, key2, length)` and `rest(length)`
  build notes.

Seven songs live in `crankbox.songs` (`piano_cat`, `twinkle_star`,
`kimiwo_nosete`, `rydeen`, `fly_me_to_the_moon`, `bic_camera`,
`yodobashi`), each as a module-level `SONG`.

`crankbox.library` collects them:

- `SONGS` lists the songs in menu order; `song_at(index)` wraps around the
  list in both directions.
- `SPEEDS` lists seven `Speed` values, from slowest to fastest, each with an
  `event_count` (crank pulses per sixteenth) and a display `name`;
  `speed_at(index)` raises `IndexError` outside the list.
  `DEFAULT_SPEED_INDEX` is the speed selected at start-up.

```python
from crankbox.library import song_at, speed_at
from crankbox.notes import rest, single

song = song_at(0)
print(song.name, song.length(), song.total_sixteenths())

speed = speed_at(3)
print(speed.name, speed.event_count)

phrase = [single(60, 4), rest(2), single(67, 2)]
print([note.transposed(2) for note in phrase if not note.is_rest()])
```

## MIDI output

`crankbox.player.MidiPlayer` sends notes to any object with a `send` method,
such as a `mido` output port:

```python
import mido
from crankbox.library import song_at
from crankbox.player import MidiPlayer

with MidiPlayer(channel=0) as player:
    player.connect(mido.open_output())
    player.note_on(song_at(1)[0])
```

- `connect(port)` and `disconnect()` attach and detach the port and call the
  function given to `register_callback` with `True` or `False`.
- `note_on(note)` releases the held note, then sounds the new one at
  velocity 120, shifted by `key_offset()` (set with `set_key_offset`).
- `note_off(note, key_offset)` and `prev_note_off()` release notes.
- While a note is held, a background worker started by `begin()` (and
  stopped by `stop()`, or by leaving the `with` block) calls `fadeout()`
  every 50 ms. Each step lowers the expression controller (CC 11) by 2; when
  it reaches the bottom the note is released.

## Screen model

`crankbox.display.Screen` keeps what a 240×320 display would show: the wait
message, the song title, the seek bar position (`update_seekbar`,
`seek_thumb_x`), the speed name and the key offset text (`format_key`). Its
`buttons` map each `ButtonType` to a `Button` rectangle. `loop_button`
takes `Touch` values, each with a `TouchPhase`, tracks which button every
touch holds, and returns the button released inside itself, or
`ButtonType.NONE`. Hidden buttons ignore new presses.

## What the package does not do

There is no command to run and no main loop that ties the parts together:
nothing here reads crank pulses, advances a song one sixteenth per pulse,
or acts on the buttons that `loop_button` reports. The screen model keeps
state only; it draws nothing.