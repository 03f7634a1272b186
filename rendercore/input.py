"""Keyboard and mouse state tracking."""

from __future__ import annotations

from enum import IntEnum

__all__ = ["KeyAction", "ButtonAction", "InputManager", "MAX_KEYS", "MAX_BUTTONS"]

MAX_KEYS = 1024
MAX_BUTTONS = 32


class KeyAction(IntEnum):
    RELEASED = 0
    PRESSED = 1
    REPEAT = 2


class ButtonAction(IntEnum):
    BUTTON_RELEASED = 0
    BUTTON_PRESSED = 1


def _fmt(vec) -> str:
    return "(" + ", ".join(f"{float(c):g}" for c in vec) + ")"


class InputManager:
    """Records key, button, cursor and scroll state from window callbacks."""

    def __init__(self) -> None:
        self._keys = [int(KeyAction.RELEASED)] * MAX_KEYS
        self._buttons = [int(ButtonAction.BUTTON_RELEASED)] * MAX_BUTTONS
        self.cursor: tuple[float, float] = (0.0, 0.0)
        self.scroll_offset: tuple[float, float] = (0.0, 0.0)
        self.scroll_accum: tuple[float, float] = (0.0, 0.0)

    def callback_key(self, key: int, action: int) -> None:
        if not 0 <= key < MAX_KEYS:
            raise IndexError(f"key {key} out of range [0-{MAX_KEYS})")
        self._keys[key] = int(action)

    def callback_mouse_button(self, button: int, action: int, x: float, y: float) -> None:
        if not 0 <= button < MAX_BUTTONS:
            raise IndexError(f"button {button} out of range [0-{MAX_BUTTONS})")
        self._buttons[button] = int(action)
        self.cursor = (float(x), float(y))

    def callback_mouse_move(self, x: float, y: float) -> None:
        self.cursor = (float(x), float(y))

    def callback_scroll(self, x_off: float, y_off: float) -> None:
        self.scroll_offset = (float(x_off), float(y_off))
        self.scroll_accum = (
            self.scroll_accum[0] + float(x_off),
            self.scroll_accum[1] + float(y_off),
        )

    def is_key_down(self, key: int) -> bool:
        """Whether the key is pressed or repeating; False for unknown keys."""
        if not 0 <= key < MAX_KEYS:
            return False
        return self._keys[key] in (KeyAction.PRESSED, KeyAction.REPEAT)

    def is_mouse_down(self, button: int) -> bool:
        """Whether the button is pressed; False for unknown buttons."""
        if not 0 <= button < MAX_BUTTONS:
            return False
        return self._buttons[button] == ButtonAction.BUTTON_PRESSED

    def __str__(self) -> str:
        keys_down = "".join(f"{key} - " for key in range(MAX_KEYS) if self.is_key_down(key))
        return (
            "<InputManager\n"
            f"  cursor: {_fmt(self.cursor)}\n"
            f"  scrollOff: {_fmt(self.scroll_offset)}\n"
            f"  scrollAccum: {_fmt(self.scroll_accum)}\n"
            f"  keysDown: {keys_down}\n"
            ">\n"
        )