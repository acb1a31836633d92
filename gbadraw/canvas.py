"""The drawing pad: a 240x160 framebuffer, a 14x14 canvas and digit prediction."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import IntFlag

from .digits import digit_bitmap
from .img_ops import (
    GRID_SIZE,
    IMAGE_SIZE,
    boolean_to_grayscale,
    duplicate_array_size,
    gaussian_blur_3x3,
)

SCREEN_WIDTH = 240
SCREEN_HEIGHT = 160


def rgb15(r: int, g: int, b: int) -> int:
    """Pack three 5-bit channels into one 15-bit BGR colour."""
    return (r & 0x1F) | ((g & 0x1F) << 5) | ((b & 0x1F) << 10)


@dataclass(frozen=True)
class Position:
    """A pixel position on the screen."""

    x: int
    y: int

    def offset(self, dx: int, dy: int) -> Position:
        """Return the position moved by ``dx`` columns and ``dy`` rows."""
        return Position(self.x + dx, self.y + dy)


@dataclass(frozen=True)
class Color:
    """A colour given as three 5-bit channels."""

    r: int
    g: int
    b: int

    @property
    def value(self) -> int:
        """The colour as a 15-bit pixel value."""
        return rgb15(self.r, self.g, self.b)


class Key(IntFlag):
    """The console's buttons, as bits of the key input register."""

    A = 1 << 0
    B = 1 << 1
    SELECT = 1 << 2
    START = 1 << 3
    RIGHT = 1 << 4
    LEFT = 1 << 5
    UP = 1 << 6
    DOWN = 1 << 7
    R = 1 << 8
    L = 1 << 9


# Pixels of the 7x7 corner-bracket cursor, relative to its top-left corner.
_CURSOR_SHAPE = (
    (0, 0), (1, 0), (5, 0), (6, 0),
    (0, 1), (6, 1),
    (0, 5), (6, 5),
    (0, 6), (1, 6), (5, 6), (6, 6),
)


class Framebuffer:
    """A 240x160 screen of 15-bit pixels, stored row by row."""

    def __init__(self, pixels: Sequence[int] | None = None) -> None:
        size = SCREEN_WIDTH * SCREEN_HEIGHT
        if pixels is None:
            self.pixels = [0] * size
        else:
            if len(pixels) != size:
                raise ValueError(f"a framebuffer holds exactly {size} pixels")
            self.pixels = list(pixels)

    def __getitem__(self, xy: tuple[int, int]) -> int:
        x, y = xy
        return self.pixels[self._index(x, y)]

    @staticmethod
    def _index(x: int, y: int) -> int:
        if not (0 <= x < SCREEN_WIDTH and 0 <= y < SCREEN_HEIGHT):
            raise IndexError(f"pixel ({x}, {y}) is off the screen")
        return x + y * SCREEN_WIDTH

    def _put(self, x: int, y: int, value: int) -> None:
        self.pixels[self._index(x, y)] = value

    def draw_canvas_cursor(self, position: Position, color: Color) -> None:
        """Draw the 7x7 bracket cursor with its top-left corner at ``position``."""
        value = color.value
        for dx, dy in _CURSOR_SHAPE:
            self._put(position.x + dx, position.y + dy, value)

    def draw_rectangle(self, top_left: Position, length: int, color: Color) -> None:
        """Fill a ``length`` by ``length`` square starting at ``top_left``."""
        value = color.value
        for dx in range(length):
            for dy in range(length):
                self._put(top_left.x + dx, top_left.y + dy, value)

    def draw_prediction(self, prediction: int, position: Position) -> None:
        """Draw the bitmap of a digit; anything but 0-9 draws nothing."""
        try:
            bitmap = digit_bitmap(prediction)
        except ValueError:
            return
        for dy, row in enumerate(bitmap):
            for dx, value in enumerate(row):
                self._put(position.x + dx, position.y + dy, value)


def make_prediction(image: Sequence[Sequence[int]]) -> int:
    """Default predictor for a 28x28 grayscale image: it always answers 9."""
    if len(image) != IMAGE_SIZE or any(len(row) != IMAGE_SIZE for row in image):
        raise ValueError(f"expected a {IMAGE_SIZE}x{IMAGE_SIZE} image")
    return 9


CANVAS_ORIGIN = Position(78, 34)
CELL_PITCH = 6
CELL_SIZE = 5
DIGIT_POSITION = Position(121, 150)
CURSOR_COLOR = Color(31, 30, 19)
CANVAS_BORDER_COLOR = Color(22, 20, 27)
CELL_ACTIVE_COLOR = Color(0, 0, 0)
CELL_INACTIVE_COLOR = Color(29, 29, 29)

Predictor = Callable[[list[list[int]]], int]


class DrawingPad:
    """A 14x14 canvas edited with the buttons and drawn into a framebuffer."""

    def __init__(
        self,
        framebuffer: Framebuffer | None = None,
        predictor: Predictor = make_prediction,
    ) -> None:
        self.framebuffer = framebuffer if framebuffer is not None else Framebuffer()
        self.predictor = predictor
        self.cells = [[False] * GRID_SIZE for _ in range(GRID_SIZE)]
        self.column = 0
        self.row = 0
        self.cursor = CANVAS_ORIGIN
        self.framebuffer.draw_canvas_cursor(self.cursor, CURSOR_COLOR)

    def _move(self, dcol: int, drow: int) -> None:
        column, row = self.column + dcol, self.row + drow
        if not (0 <= column < GRID_SIZE and 0 <= row < GRID_SIZE):
            return
        moved = self.cursor.offset(dcol * CELL_PITCH, drow * CELL_PITCH)
        self.framebuffer.draw_canvas_cursor(self.cursor, CANVAS_BORDER_COLOR)
        self.framebuffer.draw_canvas_cursor(moved, CURSOR_COLOR)
        self.column, self.row, self.cursor = column, row, moved

    def _toggle(self) -> None:
        active = not self.cells[self.row][self.column]
        self.cells[self.row][self.column] = active
        color = CELL_ACTIVE_COLOR if active else CELL_INACTIVE_COLOR
        self.framebuffer.draw_rectangle(self.cursor.offset(1, 1), CELL_SIZE, color)

    def preprocess(self) -> list[list[int]]:
        """Turn the canvas into the blurred 28x28 grayscale image fed to the predictor."""
        return gaussian_blur_3x3(boolean_to_grayscale(duplicate_array_size(self.cells)))

    def press(self, key: Key) -> int | None:
        """Handle one press of ``key``; return the prediction when START is pressed."""
        key = Key(key)
        if Key.RIGHT in key:
            self._move(1, 0)
        if Key.LEFT in key:
            self._move(-1, 0)
        if Key.UP in key:
            self._move(0, -1)
        if Key.DOWN in key:
            self._move(0, 1)
        if Key.A in key:
            self._toggle()
        if Key.START in key:
            prediction = self.predictor(self.preprocess())
            self.framebuffer.draw_prediction(prediction, DIGIT_POSITION)
            return prediction
        return None