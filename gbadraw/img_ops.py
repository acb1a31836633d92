"""Image operations that turn a drawn grid into a 28x28 grayscale image."""

from __future__ import annotations

from collections.abc import Sequence

GRID_SIZE = 14
IMAGE_SIZE = 28

_KERNEL = ((1, 2, 1), (2, 4, 2), (1, 2, 1))
_KERNEL_SUM = 16


def _check_square(src: Sequence[Sequence[object]], size: int) -> None:
    if len(src) != size or any(len(row) != size for row in src):
        raise ValueError(f"expected a {size}x{size} array")


def duplicate_array_size(src: Sequence[Sequence[bool]]) -> list[list[bool]]:
    """Upscale a 14x14 boolean grid to 28x28 by doubling every cell."""
    _check_square(src, GRID_SIZE)
    result = []
    for row in src:
        doubled = [bool(cell) for cell in row for _ in range(2)]
        result.append(doubled)
        result.append(list(doubled))
    return result


def boolean_to_grayscale(src: Sequence[Sequence[bool]]) -> list[list[int]]:
    """Map a 28x28 boolean array to pixels of 255 (set) and 0 (clear)."""
    _check_square(src, IMAGE_SIZE)
    return [[255 if cell else 0 for cell in row] for row in src]


def gaussian_blur_3x3(src: Sequence[Sequence[int]]) -> list[list[int]]:
    """Blur a 28x28 grayscale image with a 3x3 Gaussian kernel, clamping at edges."""
    _check_square(src, IMAGE_SIZE)
    if any(not 0 <= px <= 255 for row in src for px in row):
        raise ValueError("pixel values must lie in 0..255")
    last = IMAGE_SIZE - 1

    def clamp(i: int) -> int:
        return min(max(i, 0), last)

    result = []
    for y in range(IMAGE_SIZE):
        out_row = []
        for x in range(IMAGE_SIZE):
            acc = sum(
                src[clamp(y + ky)][clamp(x + kx)] * weight
                for ky, kernel_row in zip((-1, 0, 1), _KERNEL)
                for kx, weight in zip((-1, 0, 1), kernel_row)
            )
            value = (acc + _KERNEL_SUM // 2) // _KERNEL_SUM
            out_row.append(min(value, 255))
        result.append(out_row)
    return result