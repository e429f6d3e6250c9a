"""Touch screen model: layout, drawn state and touch handling of the music box."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Iterable, Optional

_log = logging.getLogger(__name__)

WAIT_MESSAGE = "接続待ち"

PREV_NEXT_BUTTON_HEIGHT = 40
PREV_NEXT_BUTTON_OFFSET_Y = 0

MUSIC_TITLE_OFFSET_Y = 40
MUSIC_TITLE_HEIGHT = 120

RESTART_BUTTON_WIDTH = 40
RESTART_BUTTON_HEIGHT = 40
RESTART_BUTTON_OFFSET_X = 0
RESTART_BUTTON_OFFSET_Y = 160

SEEKBAR_CANVAS_OFFSET_X = 50
SEEKBAR_CANVAS_OFFSET_Y = 160
SEEKBAR_CANVAS_HEIGHT = RESTART_BUTTON_HEIGHT
SEEKBAR_MARGIN_X = 5
SEEKBAR_HEIGHT = 4
SEEKBAR_THUMB_WIDTH = 10
SEEKBAR_THUMB_OFFSET_X = -(SEEKBAR_THUMB_WIDTH // 2)

SPEED_BUTTON_Y = 220
SPEED_BUTTON_WIDTH = 60
SPEED_BUTTON_HEIGHT = 40

KEY_BUTTON_Y = 280
KEY_BUTTON_WIDTH = 60
KEY_BUTTON_HEIGHT = 40


class ButtonType(IntEnum):
    """Which on-screen button was clicked."""

    NONE = -1
    RESTART = 0
    PREV = 1
    NEXT = 2
    UP = 3
    DOWN = 4
    KEY_UP = 5
    KEY_DOWN = 6


class TouchPhase(Enum):
    """State of a touch point in the current update."""

    PRESSED = "pressed"
    HOLDING = "holding"
    DRAGGING = "dragging"
    FLICKING = "flicking"
    RELEASED = "released"


@dataclass(frozen=True)
class Touch:
    """One touch point reported by the panel."""

    id: int
    x: int
    y: int
    phase: TouchPhase


@dataclass
class Button:
    """A rectangular touch target and its tracking state."""

    x: int
    y: int
    w: int
    h: int
    is_pressed: bool = False
    is_hide: bool = False
    touch_id: int = -1
    drawn_pressed: bool = False

    def contains(self, x: int, y: int) -> bool:
        """True when the point lies inside the button (right and bottom edges excluded)."""
        return self.x <= x < self.x + self.w and self.y <= y < self.y + self.h


def format_key(key: int) -> str:
    """Text shown for a key offset."""
    if key == 0:
        return "±0"
    if key > 0:
        return f"＋{key}"
    return f"‐{-key}"


class Screen:
    """What the display shows and which buttons the touches are holding."""

    def __init__(self, width: int = 240, height: int = 320) -> None:
        if width <= 2 * SPEED_BUTTON_WIDTH or height <= 0:
            raise ValueError(f"screen of {width}x{height} is too small for the layout")
        self.width = width
        self.height = height
        self.message: Optional[str] = None
        self.title: Optional[str] = None
        self.seek_value = 0
        self.speed: Optional[str] = None
        self.key_text: Optional[str] = None

        prev_next_width = width // 2 - 20
        self.buttons: dict[ButtonType, Button] = {
            ButtonType.RESTART: Button(
                RESTART_BUTTON_OFFSET_X,
                RESTART_BUTTON_OFFSET_Y,
                RESTART_BUTTON_WIDTH,
                RESTART_BUTTON_HEIGHT,
            ),
            ButtonType.PREV: Button(
                0, PREV_NEXT_BUTTON_OFFSET_Y, prev_next_width, PREV_NEXT_BUTTON_HEIGHT
            ),
            ButtonType.NEXT: Button(
                width - prev_next_width,
                PREV_NEXT_BUTTON_OFFSET_Y,
                prev_next_width,
                PREV_NEXT_BUTTON_HEIGHT,
            ),
            ButtonType.UP: Button(
                width - SPEED_BUTTON_WIDTH,
                SPEED_BUTTON_Y,
                SPEED_BUTTON_WIDTH,
                SPEED_BUTTON_HEIGHT,
            ),
            ButtonType.DOWN: Button(
                0, SPEED_BUTTON_Y, SPEED_BUTTON_WIDTH, SPEED_BUTTON_HEIGHT
            ),
            ButtonType.KEY_UP: Button(
                width - KEY_BUTTON_WIDTH, KEY_BUTTON_Y, KEY_BUTTON_WIDTH, KEY_BUTTON_HEIGHT
            ),
            ButtonType.KEY_DOWN: Button(
                0, KEY_BUTTON_Y, KEY_BUTTON_WIDTH, KEY_BUTTON_HEIGHT
            ),
        }

    @property
    def seekbar_canvas_width(self) -> int:
        """Width of the seek bar area."""
        return self.width - SEEKBAR_CANVAS_OFFSET_X

    @property
    def seekbar_width(self) -> int:
        """Width of the seek bar track."""
        return self.seekbar_canvas_width - SEEKBAR_MARGIN_X * 2

    def show_wait_message(self) -> None:
        """Clear the screen and show the waiting-for-connection message."""
        self.title = None
        self.message = WAIT_MESSAGE

    def show_music_title(self, title: str, clear: bool = False) -> None:
        """Show the song title, clearing the whole screen first if asked."""
        if clear:
            self.message = None
        self.title = title

    def update_seekbar(self, value: int) -> None:
        """Move the seek bar thumb to ``value`` percent, clamped to 0..100."""
        self.seek_value = max(0, min(100, value))

    def seek_thumb_x(self) -> int:
        """Left edge of the thumb within the seek bar area."""
        seek_pos = SEEKBAR_MARGIN_X + self.seekbar_width * self.seek_value // 100
        return seek_pos + SEEKBAR_THUMB_OFFSET_X

    def _draw(self, kind: ButtonType, is_pressed: bool, is_hide: bool = False) -> None:
        button = self.buttons[kind]
        button.drawn_pressed = is_pressed and not is_hide

    def _draw_hideable(self, kind: ButtonType, is_pressed: bool, is_hide: bool) -> None:
        self._draw(kind, is_pressed, is_hide)
        self.buttons[kind].is_hide = is_hide

    def show_restart_button(self, is_pressed: bool = False) -> None:
        """Draw the restart button."""
        self._draw(ButtonType.RESTART, is_pressed)

    def show_prev_button(self, is_pressed: bool = False) -> None:
        """Draw the previous-song button."""
        self._draw(ButtonType.PREV, is_pressed)

    def show_next_button(self, is_pressed: bool = False) -> None:
        """Draw the next-song button."""
        self._draw(ButtonType.NEXT, is_pressed)

    def show_up_button(self, is_pressed: bool = False, is_hide: bool = False) -> None:
        """Draw or hide the speed-up button."""
        self._draw_hideable(ButtonType.UP, is_pressed, is_hide)

    def show_down_button(self, is_pressed: bool = False, is_hide: bool = False) -> None:
        """Draw or hide the speed-down button."""
        self._draw_hideable(ButtonType.DOWN, is_pressed, is_hide)

    def show_speed(self, speed: str) -> None:
        """Show the speed name."""
        self.speed = speed

    def show_key_up_button(self, is_pressed: bool = False, is_hide: bool = False) -> None:
        """Draw or hide the key-up button."""
        self._draw_hideable(ButtonType.KEY_UP, is_pressed, is_hide)

    def show_key_down_button(
        self, is_pressed: bool = False, is_hide: bool = False
    ) -> None:
        """Draw or hide the key-down button."""
        self._draw_hideable(ButtonType.KEY_DOWN, is_pressed, is_hide)

    def show_key(self, key: int) -> None:
        """Show the key offset."""
        self.key_text = format_key(key)

    def _redraw(self, kind: ButtonType, is_pressed: bool) -> None:
        {
            ButtonType.RESTART: self.show_restart_button,
            ButtonType.PREV: self.show_prev_button,
            ButtonType.NEXT: self.show_next_button,
            ButtonType.UP: self.show_up_button,
            ButtonType.DOWN: self.show_down_button,
            ButtonType.KEY_UP: self.show_key_up_button,
            ButtonType.KEY_DOWN: self.show_key_down_button,
        }[kind](is_pressed)

    def _owner(self, touch_id: int) -> Optional[ButtonType]:
        return next(
            (kind for kind, b in self.buttons.items() if b.touch_id == touch_id), None
        )

    def loop_button(self, touches: Iterable[Touch]) -> ButtonType:
        """Track the touches and return the button released inside itself, if any."""
        result = ButtonType.NONE
        for touch in touches:
            if touch.phase is TouchPhase.PRESSED:
                kind = next(
                    (
                        k
                        for k, b in self.buttons.items()
                        if not b.is_hide and b.contains(touch.x, touch.y)
                    ),
                    None,
                )
                if kind is None:
                    _log.debug("touch outside buttons at x: %d, y: %d", touch.x, touch.y)
                    continue
                button = self.buttons[kind]
                button.touch_id = touch.id
                button.is_pressed = True
                self._redraw(kind, True)
            elif touch.phase in (TouchPhase.DRAGGING, TouchPhase.FLICKING):
                kind = self._owner(touch.id)
                if kind is None:
                    continue
                button = self.buttons[kind]
                inside = button.contains(touch.x, touch.y)
                if inside != button.is_pressed:
                    button.is_pressed = inside
                    self._redraw(kind, inside)
            elif touch.phase is TouchPhase.RELEASED:
                kind = self._owner(touch.id)
                if kind is None:
                    continue
                button = self.buttons[kind]
                if button.contains(touch.x, touch.y):
                    result = kind
                button.touch_id = -1
                button.is_pressed = False
                self._redraw(kind, False)
        return result