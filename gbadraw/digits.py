"""Small 7x8 bitmaps of the digits 0-9 in 15-bit BGR colour."""

from __future__ import annotations

DIGIT_WIDTH = 7
DIGIT_HEIGHT = 8

Bitmap = tuple[tuple[int, ...], ...]

# Each row lists seven pixels as "r.g.b" channel triples (0-31 each);
# a bare "0" stands for black.
_DIGIT_ROWS: tuple[tuple[str, ...], ...] = (
    (
        "26.26.29 18.17.19 3.3.3 0.0.1 7.7.8 24.23.26 26.26.29",
        "23.23.25 1.1.1 18.18.20 25.24.27 10.10.11 8.8.9 26.26.29",
        "14.14.16 7.7.8 26.26.29 26.26.29 23.22.25 0 26.25.28",
        "11.10.12 11.11.12 26.26.29 26.26.29 26.26.29 0 23.22.25",
        "11.11.12 12.12.13 26.26.29 26.26.29 26.26.29 0 23.23.26",
        "14.14.15 8.8.9 26.26.29 26.26.29 23.23.25 1.1.1 26.25.28",
        "23.22.25 1.1.1 20.19.22 25.24.27 9.9.10 10.10.11 26.26.29",
        "26.26.29 17.17.19 3.3.3 0.0.1 8.8.9 25.24.27 26.26.29",
    ),
    (
        "26.26.29 26.26.29 26.26.29 7.7.8 20.19.22 26.26.29 26.26.29",
        "26.26.29 25.24.27 16.16.18 0 20.19.22 26.26.29 26.26.29",
        "26.26.29 4.4.4 0 0 20.19.22 26.26.29 26.26.29",
        "26.26.29 26.26.29 26.26.29 3.3.3 20.19.22 26.26.29 26.26.29",
        "26.26.29 26.26.29 26.26.29 3.3.3 20.19.22 26.26.29 26.26.29",
        "26.26.29 26.26.29 26.26.29 3.3.3 20.19.22 26.26.29 26.26.29",
        "26.26.29 26.26.29 26.26.29 3.3.3 20.19.22 26.26.29 26.26.29",
        "26.26.29 26.26.29 26.26.29 3.3.3 20.19.22 26.26.29 26.26.29",
    ),
    (
        "26.26.29 17.17.18 3.3.4 1.1.1 5.5.5 20.20.22 26.26.29",
        "23.23.25 1.1.1 19.18.20 25.25.27 14.14.16 2.2.2 26.25.28",
        "17.16.18 7.7.8 26.26.29 26.26.29 26.25.28 0 23.23.25",
        "26.26.29 26.26.29 26.26.29 26.26.29 14.14.16 4.4.4 26.26.29",
        "26.26.29 26.26.29 21.21.23 7.6.7 6.6.7 23.23.25 26.26.29",
        "26.26.29 13.12.14 4.4.4 19.18.20 26.26.29 26.26.29 26.26.29",
        "19.19.21 5.5.5 26.25.28 26.26.29 26.26.29 26.26.29 26.26.29",
        "12.11.13 0 0 0 0 0 23.22.25",
    ),
    (
        "26.25.28 11.11.12 2.2.2 1.1.1 6.6.6 22.21.23 26.26.29",
        "16.15.17 5.5.6 24.23.26 25.25.28 12.11.13 7.6.7 26.26.29",
        "26.26.29 26.26.29 26.26.29 25.24.27 12.11.13 9.9.10 26.26.29",
        "26.26.29 26.26.29 15.15.16 0 0.0.1 20.19.21 26.26.29",
        "26.26.29 26.26.29 26.26.29 25.25.27 14.14.16 1.1.1 26.25.28",
        "9.9.10 14.14.15 26.26.29 26.26.29 26.25.28 0 24.23.26",
        "17.16.18 4.4.4 22.22.24 25.25.27 13.13.14 4.4.4 26.26.29",
        "26.26.29 12.12.13 2.2.2 1.1.1 7.7.8 22.22.25 26.26.29",
    ),
    (
        "26.26.29 26.26.29 26.26.29 20.19.22 0 25.25.27 26.26.29",
        "26.26.29 26.26.29 24.23.26 4.4.4 0 25.25.27 26.26.29",
        "26.26.29 26.25.28 6.6.6 19.18.20 0 25.25.27 26.26.29",
        "26.26.29 10.10.11 14.14.15 26.25.28 0 25.25.27 26.26.29",
        "16.16.18 8.8.9 26.26.29 26.25.28 0 25.25.27 26.26.29",
        "8.8.9 0 0 0 0 0 19.18.21",
        "26.26.29 26.26.29 26.26.29 26.25.28 0 25.25.27 26.26.29",
        "26.26.29 26.26.29 26.26.29 26.25.28 0 25.25.27 26.26.29",
    ),
    (
        "26.26.29 6.6.7 0 0 0 8.8.9 26.26.29",
        "26.26.29 2.2.3 26.25.28 26.26.29 26.26.29 26.26.29 26.26.29",
        "25.24.27 2.2.2 5.5.5 1.1.1 7.7.8 23.22.25 26.26.29",
        "20.20.22 2.2.2 21.21.23 25.24.27 10.10.11 5.4.5 26.26.29",
        "26.26.29 26.26.29 26.26.29 26.26.29 25.25.27 0 24.23.26",
        "26.26.29 26.26.29 26.26.29 26.26.29 25.24.27 0 25.24.27",
        "14.14.15 6.5.6 23.23.25 25.24.27 10.10.11 7.7.8 26.26.29",
        "26.25.28 10.10.11 2.2.2 2.1.2 8.8.9 24.24.26 26.26.29",
    ),
    (
        "26.26.29 21.21.23 5.5.6 0.0.1 4.4.4 19.19.21 26.26.29",
        "25.25.28 2.2.2 14.14.15 25.25.27 17.16.18 2.2.2 26.26.29",
        "18.18.20 4.4.4 26.26.29 26.26.29 26.26.29 26.26.29 26.26.29",
        "13.13.15 7.7.8 7.7.8 1.1.1 4.4.5 19.19.21 26.26.29",
        "12.12.13 1.1.1 20.20.22 25.25.28 16.16.18 1.1.1 25.25.28",
        "14.14.16 7.7.8 26.26.29 26.26.29 26.26.29 1.1.1 22.22.24",
        "22.22.24 1.1.1 20.19.22 26.25.28 16.16.17 3.3.3 26.25.28",
        "26.26.29 19.18.20 4.4.5 1.1.1 6.6.6 22.21.24 26.26.29",
    ),
    (
        "11.11.12 0 0 0 0 0 19.19.21",
        "26.26.29 26.26.29 26.26.29 26.26.29 18.17.19 7.7.8 26.25.28",
        "26.26.29 26.26.29 26.26.29 23.23.26 3.3.3 24.23.26 26.26.29",
        "26.26.29 26.26.29 26.26.29 8.8.9 14.14.16 26.26.29 26.26.29",
        "26.26.29 26.26.29 22.21.24 2.2.3 26.25.28 26.26.29 26.26.29",
        "26.26.29 26.26.29 9.9.10 13.12.14 26.26.29 26.26.29 26.26.29",
        "26.26.29 26.26.29 1.1.1 22.22.24 26.26.29 26.26.29 26.26.29",
        "26.26.29 20.20.22 2.2.2 26.26.29 26.26.29 26.26.29 26.26.29",
    ),
    (
        "26.26.29 15.14.16 3.3.3 1.1.1 6.6.7 22.22.24 26.26.29",
        "21.21.23 2.2.2 22.22.24 25.25.28 12.12.13 6.6.7 26.26.29",
        "22.21.24 2.2.2 21.21.23 25.25.28 12.12.13 8.8.9 26.26.29",
        "26.26.29 10.10.11 0 0 0.0.1 21.21.23 26.26.29",
        "17.17.19 3.3.3 22.21.24 25.25.28 14.14.15 3.3.3 26.25.28",
        "11.11.12 11.10.12 26.26.29 26.26.29 26.25.28 0 24.23.26",
        "17.17.18 3.3.3 22.21.24 26.25.28 15.15.16 3.3.4 26.26.29",
        "26.26.29 14.13.15 3.3.3 1.1.1 6.6.7 22.21.24 26.26.29",
    ),
    (
        "26.26.29 14.13.15 3.3.3 1.1.1 8.8.9 24.24.27 26.26.29",
        "18.18.20 3.3.3 22.22.24 25.25.27 11.11.12 9.9.10 26.26.29",
        "12.12.13 11.11.12 26.26.29 26.26.29 22.21.23 1.1.1 26.26.29",
        "17.16.18 4.4.4 23.22.25 25.25.27 11.11.12 0 25.24.27",
        "26.26.29 12.12.13 2.2.2 2.2.2 12.12.13 0 26.25.28",
        "26.26.29 26.26.29 26.26.29 26.26.29 19.19.21 4.4.5 26.26.29",
        "17.17.18 4.4.5 24.23.26 23.22.25 5.5.5 15.14.16 26.26.29",
        "26.25.28 10.10.11 1.1.2 1.1.1 12.11.13 26.26.29 26.26.29",
    ),
)


def _pixel(token: str) -> int:
    if token == "0":
        return 0
    r, g, b = (int(part) for part in token.split("."))
    return r | (g << 5) | (b << 10)


def _decode(rows: tuple[str, ...]) -> Bitmap:
    return tuple(tuple(_pixel(token) for token in row.split()) for row in rows)


DIGITS: tuple[Bitmap, ...] = tuple(_decode(rows) for rows in _DIGIT_ROWS)


def digit_bitmap(value: int) -> Bitmap:
    """Return the 8-row by 7-column colour bitmap of the digit ``value``."""
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 9:
        raise ValueError(f"not a decimal digit: {value!r}")
    return DIGITS[value]