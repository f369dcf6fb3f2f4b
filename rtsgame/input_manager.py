"""Keyboard and mouse state tracking fed by window events."""

from __future__ import annotations

from enum import Enum
from typing import Any


class Action(Enum):
    PRESS = "press"
    RELEASE = "release"
    REPEAT = "repeat"


class InputManager:
    """Remembers which keys and buttons are held and how the cursor last moved.

    Cursor coordinates grow to the right and downwards.
    """

    def __init__(self, mouse_position: tuple[float, float] = (0.0, 0.0)) -> None:
        x, y = mouse_position
        self._key_states: dict[int, bool] = {}
        self._mouse_buttons: dict[int, bool] = {}
        self._mouse_position = (float(x), float(y))
        self._last_mouse_position = self._mouse_position
        self._mouse_delta = (0.0, 0.0)

    @property
    def mouse_position(self) -> tuple[float, float]:
        return self._mouse_position

    @property
    def mouse_delta(self) -> tuple[float, float]:
        return self._mouse_delta

    def is_key_pressed(self, key: int) -> bool:
        return self._key_states.get(key, False)

    def is_button_pressed(self, button: int) -> bool:
        return self._mouse_buttons.get(button, False)

    def reset_mouse_delta(self) -> None:
        self._mouse_delta = (0.0, 0.0)

    def key_event(self, key: int, action: Action | str) -> None:
        _apply(self._key_states, key, action)

    def button_event(self, button: int, action: Action | str) -> None:
        _apply(self._mouse_buttons, button, action)

    def cursor_moved(self, xpos: float, ypos: float) -> None:
        """Record a new cursor position; the delta is taken from the previous one."""
        self._mouse_position = (float(xpos), float(ypos))
        last_x, last_y = self._last_mouse_position
        self._mouse_delta = (self._mouse_position[0] - last_x, self._mouse_position[1] - last_y)
        self._last_mouse_position = self._mouse_position

    def attach(self, window: Any) -> None:
        """Subscribe to a window's keyboard and mouse events."""

        def on_key_press(symbol: int, modifiers: int) -> None:
            self.key_event(symbol, Action.PRESS)

        def on_key_release(symbol: int, modifiers: int) -> None:
            self.key_event(symbol, Action.RELEASE)

        def on_mouse_press(x: float, y: float, button: int, modifiers: int) -> None:
            self.button_event(button, Action.PRESS)

        def on_mouse_release(x: float, y: float, button: int, modifiers: int) -> None:
            self.button_event(button, Action.RELEASE)

        def on_mouse_motion(x: float, y: float, dx: float, dy: float) -> None:
            # Window events report y growing upwards; track it growing downwards.
            px, py = self._mouse_position
            self.cursor_moved(px + dx, py - dy)

        def on_mouse_drag(
            x: float, y: float, dx: float, dy: float, buttons: int, modifiers: int
        ) -> None:
            on_mouse_motion(x, y, dx, dy)

        window.push_handlers(
            on_key_press=on_key_press,
            on_key_release=on_key_release,
            on_mouse_press=on_mouse_press,
            on_mouse_release=on_mouse_release,
            on_mouse_motion=on_mouse_motion,
            on_mouse_drag=on_mouse_drag,
        )


def _apply(states: dict[int, bool], code: int, action: Action | str) -> None:
    action = Action(action)
    if action is Action.PRESS:
        states[code] = True
    elif action is Action.RELEASE:
        states[code] = False