"""Keyboard, mouse and game-pad state with press, trigger, repeat and release tracking."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import IntEnum, IntFlag

NUM_KEYS = 256
NUM_MOUSE_BUTTONS = 8
GAMEPAD_MAX = 4
REPEAT_DELAY = 20

DEADZONE = 2500
RANGE_MAX = 1000
RANGE_MIN = -1000


class Key(IntEnum):
    """Keyboard scan codes used by the game."""

    ESCAPE = 0x01
    RETURN = 0x1C
    A = 0x1E
    D = 0x20
    SPACE = 0x39
    UP = 0xC8
    LEFT = 0xCB
    RIGHT = 0xCD
    DOWN = 0xD0


class MouseButton(IntEnum):
    LEFT = 0
    RIGHT = 1
    CENTER = 2


class PadButton(IntFlag):
    """Bits of a game-pad state word."""

    NONE = 0
    UP = 0x0001
    DOWN = 0x0002
    LEFT = 0x0004
    RIGHT = 0x0008
    X = 0x0010
    A = 0x0020
    B = 0x0040
    Y = 0x0080
    L = 0x0100
    R = 0x0200
    L2 = 0x0400
    R2 = 0x0800
    SELECT = 0x1000
    START = 0x2000


# Order of the raw button indices reported by a pad.
_PAD_BUTTON_ORDER = (
    PadButton.X,
    PadButton.A,
    PadButton.B,
    PadButton.Y,
    PadButton.L,
    PadButton.R,
    PadButton.L2,
    PadButton.R2,
    PadButton.SELECT,
    PadButton.START,
)


def read_pad(x: float, y: float, buttons: Sequence[bool]) -> PadButton:
    """Turn raw axis values and button flags into a ``PadButton`` state."""
    state = PadButton.NONE
    if y < 0:
        state |= PadButton.UP
    if y > 0:
        state |= PadButton.DOWN
    if x < 0:
        state |= PadButton.LEFT
    if x > 0:
        state |= PadButton.RIGHT
    for flag, pressed in zip(_PAD_BUTTON_ORDER, buttons):
        if pressed:
            state |= flag
    return state


def _check_key(key: int) -> int:
    if not 0 <= key < NUM_KEYS:
        raise ValueError(f"key code out of range: {key}")
    return int(key)


def _check_mouse_button(button: int) -> int:
    if not 0 <= button < NUM_MOUSE_BUTTONS:
        raise ValueError(f"mouse button out of range: {button}")
    return int(button)


def _check_pad(pad: int) -> int:
    if not 0 <= pad < GAMEPAD_MAX:
        raise IndexError(f"pad index out of range: {pad}")
    return pad


class InputState:
    """Per-frame input snapshot; call ``update`` once per frame with raw device state."""

    def __init__(self) -> None:
        self._keys: set[int] = set()
        self._triggered: set[int] = set()
        self._released: set[int] = set()
        self._repeated: set[int] = set()
        self._hold_frames: dict[int, int] = {}

        self._mouse: set[int] = set()
        self._mouse_triggered: set[int] = set()
        self.mouse_delta: tuple[int, int, int] = (0, 0, 0)
        self.mouse_x = 0
        self.mouse_y = 0

        self._pads = [PadButton.NONE] * GAMEPAD_MAX
        self._pad_triggered = [PadButton.NONE] * GAMEPAD_MAX

    def update(
        self,
        keys_down: Iterable[int] = (),
        mouse_buttons: Iterable[int] = (),
        mouse_delta: tuple[int, int, int] = (0, 0, 0),
        pads: Sequence[PadButton] = (),
    ) -> None:
        """Advance one frame from the currently held keys, mouse buttons and pad states."""
        keys = {_check_key(k) for k in keys_down}
        previous = self._keys
        self._triggered = keys - previous
        self._released = previous - keys
        self._repeated = set(self._triggered)
        self._hold_frames = {k: self._hold_frames.get(k, 0) + 1 for k in keys}
        self._repeated |= {k for k, n in self._hold_frames.items() if n >= REPEAT_DELAY}
        self._keys = keys

        buttons = {_check_mouse_button(b) for b in mouse_buttons}
        self._mouse_triggered = buttons - self._mouse
        self._mouse = buttons
        dx, dy, dz = mouse_delta
        self.mouse_delta = (dx, dy, dz)

        if len(pads) > GAMEPAD_MAX:
            raise ValueError(f"at most {GAMEPAD_MAX} pads are supported")
        current = list(pads) + [PadButton.NONE] * (GAMEPAD_MAX - len(pads))
        self._pad_triggered = [
            PadButton((last ^ now) & now) for last, now in zip(self._pads, current)
        ]
        self._pads = [PadButton(p) for p in current]

    def set_mouse_position(self, x: int, y: int) -> None:
        """Record the cursor position in window coordinates."""
        self.mouse_x = x
        self.mouse_y = y

    def is_key_pressed(self, key: int) -> bool:
        return _check_key(key) in self._keys

    def is_key_triggered(self, key: int) -> bool:
        return _check_key(key) in self._triggered

    def is_key_repeated(self, key: int) -> bool:
        return _check_key(key) in self._repeated

    def is_key_released(self, key: int) -> bool:
        return _check_key(key) in self._released

    def is_mouse_pressed(self, button: int) -> bool:
        return _check_mouse_button(button) in self._mouse

    def is_mouse_triggered(self, button: int) -> bool:
        return _check_mouse_button(button) in self._mouse_triggered

    def is_button_pressed(self, pad: int, button: PadButton) -> bool:
        return bool(button & self._pads[_check_pad(pad)])

    def is_button_triggered(self, pad: int, button: PadButton) -> bool:
        return bool(button & self._pad_triggered[_check_pad(pad)])