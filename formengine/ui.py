"""On-screen UI elements, buttons, menus and the background/foreground/pause layers."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Optional

from .worldview import clamp, distance

PRESS = 1
RELEASE = 0
MOUSE_BUTTON_LEFT = 0

KEY_SPACE = 32
KEY_ENTER = 257
KEY_A = 65
KEY_D = 68
KEY_S = 83
KEY_W = 87
KEY_RIGHT = 262
KEY_LEFT = 263
KEY_DOWN = 264
KEY_UP = 265

PAD_UP = 11
PAD_RIGHT = 12
PAD_DOWN = 13
PAD_LEFT = 14
PAD_ACCEPT = 0

_UP_KEYS = (KEY_W, KEY_UP)
_LEFT_KEYS = (KEY_A, KEY_LEFT)
_DOWN_KEYS = (KEY_S, KEY_DOWN)
_RIGHT_KEYS = (KEY_D, KEY_RIGHT)
_ACCEPT_KEYS = (KEY_SPACE, KEY_ENTER)

NORMAL_SPRITE = 0
HIGHLIGHT_SPRITE = 1


def _set_text_color(text: Any, color: Optional[list[float]]) -> None:
    if text is not None and color is not None:
        text.color = list(color)


@dataclass(eq=False)
class UIElement:
    """An animation drawn at a fixed screen position, optionally with a text label.

    A label is any object with ``color``, ``x_offset`` and ``y_offset``.
    """

    anim: Any
    xp: float = 0.0
    yp: float = 0.0
    x_size: float = 1.0
    y_size: float = 1.0
    roto: int = 3
    x_invert: bool = False
    y_invert: bool = False
    text: Any = None

    def move(self, xd: int, yd: int, x_pow: float, y_pow: float) -> None:
        """Shift by ``xd`` steps of ``x_pow`` and ``yd`` steps of ``y_pow``."""
        self.xp += xd * x_pow
        self.yp += yd * y_pow

    def place(self, xp: float, yp: float) -> None:
        self.xp = xp
        self.yp = yp

    def text_position(self, width: float, height: float) -> tuple[float, float]:
        """Pixel position of the label on a ``width`` x ``height`` screen."""
        if self.text is None:
            raise ValueError("element has no text")
        x = ((1 + self.xp + self.text.x_offset) / 2) * width
        y = ((1 + self.yp + self.text.y_offset) / 2) * height
        return x, y


@dataclass(eq=False)
class Button:
    """A UI element that runs ``func`` when pressed.

    ``text_col1`` is the label colour normally, ``text_col2`` while selected.
    """

    graphics: UIElement
    func: Optional[Callable[[], Any]] = None
    text_col1: Optional[list[float]] = None
    text_col2: Optional[list[float]] = None

    def set_text(self, text: Any) -> None:
        """Attach a label; both label colours start as its current colour."""
        self.graphics.text = text
        self.text_col1 = list(text.color[:4])
        self.text_col2 = list(text.color[:4])

    def set_sub_color(self, r: float, g: float, b: float, a: float) -> None:
        """Set the label colour used while selected; ignored without a label."""
        if self.text_col2 is not None:
            self.text_col2 = [r, g, b, a]

    def press(self) -> None:
        if self.func is not None:
            self.func()

    def _highlight(self, selected: bool) -> None:
        anim = self.graphics.anim
        if anim is not None:
            anim.change_sprite(HIGHLIGHT_SPRITE if selected else NORMAL_SPRITE)
        _set_text_color(self.graphics.text,
                        self.text_col2 if selected else self.text_col1)


@dataclass(eq=False)
class Menu:
    """Buttons selected by the closest-to-cursor rule, driven by mouse, keys or pad."""

    key_speed: float = 0.0
    buttons: list[Button] = field(default_factory=list)
    cur_butt: Optional[Button] = None
    cursor_x: float = 0.0
    cursor_y: float = 0.0
    mx: int = 0
    my: int = 0

    def __len__(self) -> int:
        return len(self.buttons)

    def __iter__(self) -> Iterator[Button]:
        return iter(self.buttons)

    def add_button(self, button: Button) -> None:
        self.buttons.append(button)

    def movement(self, xp: float, yp: float) -> Optional[Button]:
        """Select the button closest to (xp, yp); return it."""
        chosen: Optional[Button] = None
        closest = math.inf
        for button in self.buttons:
            d = distance(button.graphics.xp, button.graphics.yp, xp, yp)
            if d < closest:
                closest = d
                chosen = button
        if self.cur_butt is not None:
            self.cur_butt._highlight(False)
        self.cur_butt = chosen
        if chosen is not None:
            chosen._highlight(True)
        return chosen

    def mouse_move(self, xpos: float, ypos: float, width: float,
                   height: float) -> Optional[Button]:
        """Select by a cursor given in window pixels, origin at the top left."""
        xp = -1 + xpos / (width / 2)
        yp = 1 - ypos / (height / 2)
        return self.movement(xp, yp)

    def _press_current(self) -> None:
        if self.cur_butt is not None:
            self.cur_butt.press()

    def _direction(self, up: bool, left: bool, down: bool, right: bool,
                   accept: bool, pressed: bool) -> None:
        if pressed:
            if up:
                self.my = 1
            elif left:
                self.mx = -1
            elif down:
                self.my = -1
            elif right:
                self.mx = 1
            elif accept:
                self._press_current()
        else:
            if up:
                if self.my != -1:
                    self.my = 0
            elif left:
                if self.mx != 1:
                    self.mx = 0
            elif down:
                if self.my != 1:
                    self.my = 0
            elif right:
                if self.mx != -1:
                    self.mx = 0

    def process_keys(self, key: int, action: int) -> None:
        """Arrow/WASD keys steer the cursor; space or enter presses the selection."""
        if action not in (PRESS, RELEASE):
            return
        self._direction(key in _UP_KEYS, key in _LEFT_KEYS, key in _DOWN_KEYS,
                        key in _RIGHT_KEYS, key in _ACCEPT_KEYS, action == PRESS)

    def process_axes(self, axis: int, value: float) -> None:
        """Axis 0 steers horizontally, axis 1 vertically."""
        if axis == 0:
            self.mx = int(value)
        elif axis == 1:
            self.my = int(value)

    def process_controller_buttons(self, button: int, pressed: int) -> None:
        """The d-pad steers the cursor; button 0 presses the selection."""
        self._direction(button == PAD_UP, button == PAD_LEFT, button == PAD_DOWN,
                        button == PAD_RIGHT, button == PAD_ACCEPT, pressed == 1)

    def process_clicks(self, button: int, action: int) -> None:
        if button == MOUSE_BUTTON_LEFT and action == PRESS:
            self._press_current()

    def update(self, width: float, height: float) -> None:
        """Move the key-driven cursor one step and reselect."""
        if self.mx == 0 and self.my == 0:
            return
        x = (self.mx * self.key_speed) / width / 2
        y = (self.my * self.key_speed) / height / 2
        self.cursor_x = clamp(self.cursor_x + x, -1, 1)
        self.cursor_y = clamp(self.cursor_y + y, -1, 1)
        self.movement(self.cursor_x, self.cursor_y)


def _remove(items: list, item: Any) -> None:
    for i, current in enumerate(items):
        if current is item:
            del items[i]
            return


class UILayers:
    """UI drawn behind the world, in front of it, and on the pause screen."""

    def __init__(self) -> None:
        self.background: list[UIElement] = []
        self.foreground: list[UIElement] = []
        self.pause: list[UIElement] = []
        self.active_menu: Optional[Menu] = None

    def add_background(self, ui: UIElement) -> None:
        self.background.append(ui)

    def remove_background(self, ui: UIElement) -> None:
        _remove(self.background, ui)

    def add_foreground(self, ui: UIElement) -> None:
        self.foreground.append(ui)

    def remove_foreground(self, ui: UIElement) -> None:
        _remove(self.foreground, ui)

    def add_pause(self, ui: UIElement) -> None:
        self.pause.append(ui)

    def remove_pause(self, ui: UIElement) -> None:
        _remove(self.pause, ui)

    def set_menu_active(self, menu: Menu, active: bool) -> None:
        """Show or hide the menu's buttons on the pause screen and make it current."""
        for button in menu.buttons:
            if active:
                self.add_pause(button.graphics)
            else:
                self.remove_pause(button.graphics)
        self.active_menu = menu if active else None