"""MIDI note output with a slow expression fade on held notes."""

from __future__ import annotations

import threading
from typing import Any, Callable, Optional

import mido

from crankbox.notes import Note

ConnectionCallback = Callable[[bool], Any]

DEFAULT_VELOCITY = 120
FADEOUT_STEP = 2
EXPRESSION_CONTROL = 11
FADEOUT_INTERVAL = 0.05
"""Seconds between fade steps."""
_LOCK_WAIT = 0.01


class MidiPlayer:
    """Plays notes on a MIDI output port and fades each one out while it is held."""

    def __init__(self, channel: int = 1, fadeout_interval: float = FADEOUT_INTERVAL):
        if not 0 <= channel <= 15:
            raise ValueError(f"MIDI channel must be between 0 and 15, got {channel}")
        if fadeout_interval <= 0:
            raise ValueError("fadeout interval must be positive")
        self.channel = channel
        self.fadeout_size = FADEOUT_STEP
        self._interval = fadeout_interval
        self._port: Any = None
        self._callback: Optional[ConnectionCallback] = None
        self._lock = threading.RLock()
        self._velocity = 0
        self._prev_note: Optional[Note] = None
        self._key_offset = 0
        self._prev_key_offset = 0
        self._timer_active = False
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def __enter__(self) -> MidiPlayer:
        self.begin()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    def begin(self) -> None:
        """Start the background fade-out worker."""
        if self._thread is not None and self._thread.is_alive():
            return
        self._stop.clear()
        self._thread = threading.Thread(
            target=self._run, name="fadeout", daemon=True
        )
        self._thread.start()

    def stop(self) -> None:
        """Stop the background fade-out worker."""
        self._stop.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None

    def _run(self) -> None:
        while not self._stop.wait(self._interval):
            if not (self._timer_active and self.is_note_on()):
                continue
            if self._lock.acquire(timeout=_LOCK_WAIT):
                try:
                    self.fadeout()
                finally:
                    self._lock.release()

    def register_callback(self, callback: Optional[ConnectionCallback]) -> None:
        """Set the function called with True on connect and False on disconnect."""
        self._callback = callback

    def connect(self, port: Any) -> None:
        """Attach an output port (anything with ``send``) and report the connection."""
        if port is None:
            raise ValueError("a port is required")
        with self._lock:
            self._port = port
        if self._callback is not None:
            self._callback(True)

    def disconnect(self) -> None:
        """Detach the output port and report the disconnection."""
        with self._lock:
            self._port = None
        if self._callback is not None:
            self._callback(False)

    def is_connected(self) -> bool:
        """True while an output port is attached."""
        return self._port is not None

    def is_note_on(self) -> bool:
        """True while a note is held."""
        return self._prev_note is not None

    def _send(self, message: mido.Message) -> None:
        self._port.send(message)

    def note_on(self, note: Optional[Note]) -> None:
        """Release the held note, then sound ``note`` at the current key offset."""
        if not self.is_connected() or note is None:
            return
        with self._lock:
            self.prev_note_off()
            self._velocity = DEFAULT_VELOCITY
            for pitch in note.pitches:
                self._send(
                    mido.Message(
                        "note_on",
                        channel=self.channel,
                        note=(pitch + self._key_offset) & 0x7F,
                        velocity=self._velocity,
                    )
                )
            self._prev_key_offset = self._key_offset
            self._prev_note = note
            if note.size > 0:
                self._timer_active = True

    def note_off(self, note: Optional[Note], key_offset: int = 0) -> None:
        """Release every pitch of ``note`` shifted by ``key_offset``."""
        if not self.is_connected() or note is None:
            return
        with self._lock:
            self._velocity = 0
            for pitch in note.pitches:
                self._send(
                    mido.Message(
                        "note_off",
                        channel=self.channel,
                        note=(pitch + key_offset) & 0x7F,
                        velocity=0,
                    )
                )

    def prev_note_off(self) -> None:
        """Release the held note and stop fading."""
        with self._lock:
            self.note_off(self._prev_note, self._prev_key_offset)
            self._prev_note = None
            self._timer_active = False

    def fadeout(self) -> bool:
        """Lower the expression one step; return True once the note is silent."""
        if not self.is_connected():
            return True
        with self._lock:
            if self._velocity == 0:
                return True
            if self._velocity > self.fadeout_size:
                self._velocity -= self.fadeout_size
                self._send(
                    mido.Message(
                        "control_change",
                        channel=self.channel,
                        control=EXPRESSION_CONTROL,
                        value=self._velocity,
                    )
                )
            else:
                self.prev_note_off()
            return self._velocity == 0

    def key_offset(self) -> int:
        """Semitones added to every pitch that is played."""
        return self._key_offset

    def set_key_offset(self, key_offset: int) -> None:
        """Set the semitones added to notes played from now on."""
        self._key_offset = key_offset