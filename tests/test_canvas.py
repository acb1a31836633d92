import pytest

from gbadraw.canvas import (
    CANVAS_BORDER_COLOR,
    CANVAS_ORIGIN,
    CELL_ACTIVE_COLOR,
    CELL_INACTIVE_COLOR,
    CELL_PITCH,
    CURSOR_COLOR,
    DIGIT_POSITION,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    Color,
    DrawingPad,
    Framebuffer,
    Key,
    Position,
    make_prediction,
    rgb15,
)
from gbadraw.digits import digit_bitmap
from gbadraw.img_ops import (
    boolean_to_grayscale,
    duplicate_array_size,
    gaussian_blur_3x3,
)

CURSOR_OFFSETS = {
    (0, 0), (1, 0), (5, 0), (6, 0),
    (0, 1), (6, 1),
    (0, 5), (6, 5),
    (0, 6), (1, 6), (5, 6), (6, 6),
}


def painted(fb):
    return {(i % SCREEN_WIDTH, i // SCREEN_WIDTH) for i, v in enumerate(fb.pixels) if v}


def white_pad(**kwargs):
    return DrawingPad(Framebuffer([0x7FFF] * (SCREEN_WIDTH * SCREEN_HEIGHT)), **kwargs)


def test_rgb15_white():
    assert rgb15(31, 31, 31) == 0x7FFF


def test_rgb15_channel_positions():
    assert rgb15(1, 0, 0) == 1
    assert rgb15(0, 1, 0) == 1 << 5
    assert rgb15(0, 0, 1) == 1 << 10


def test_rgb15_masks_channels():
    assert rgb15(32, 33, 34) == rgb15(0, 1, 2)


def test_color_value():
    assert Color(31, 30, 19).value == rgb15(31, 30, 19)


def test_position_offset():
    assert Position(3, 4).offset(2, -1) == Position(5, 3)


def test_new_framebuffer_is_black():
    fb = Framebuffer()
    assert len(fb.pixels) == SCREEN_WIDTH * SCREEN_HEIGHT
    assert set(fb.pixels) == {0}


def test_framebuffer_rejects_wrong_size():
    with pytest.raises(ValueError):
        Framebuffer([0] * 10)


def test_cursor_outline():
    fb = Framebuffer()
    color = Color(31, 0, 0)
    fb.draw_canvas_cursor(Position(10, 20), color)
    assert painted(fb) == {(10 + dx, 20 + dy) for dx, dy in CURSOR_OFFSETS}
    assert all(fb[10 + dx, 20 + dy] == color.value for dx, dy in CURSOR_OFFSETS)


def test_rectangle_fills_square():
    fb = Framebuffer()
    fb.draw_rectangle(Position(50, 60), 5, Color(1, 2, 3))
    expected = {(50 + dx, 60 + dy) for dx in range(5) for dy in range(5)}
    assert painted(fb) == expected
    assert fb[52, 62] == Color(1, 2, 3).value


def test_prediction_draws_digit():
    fb = Framebuffer()
    fb.draw_prediction(3, Position(5, 6))
    for dy, row in enumerate(digit_bitmap(3)):
        for dx, value in enumerate(row):
            assert fb[5 + dx, 6 + dy] == value


@pytest.mark.parametrize("prediction", [-1, 10, 42])
def test_invalid_prediction_draws_nothing(prediction):
    fb = Framebuffer()
    fb.draw_prediction(prediction, Position(5, 6))
    assert set(fb.pixels) == {0}


def test_drawing_off_screen_raises():
    fb = Framebuffer()
    with pytest.raises(IndexError):
        fb.draw_rectangle(Position(SCREEN_WIDTH - 2, 0), 5, Color(1, 1, 1))


def test_reading_off_screen_raises():
    with pytest.raises(IndexError):
        Framebuffer()[0, SCREEN_HEIGHT]


def test_make_prediction_answers_nine():
    assert make_prediction([[0] * 28 for _ in range(28)]) == 9


def test_make_prediction_rejects_bad_shape():
    with pytest.raises(ValueError):
        make_prediction([[0] * 28 for _ in range(27)])


def test_pad_starts_with_cursor_at_origin():
    pad = DrawingPad()
    assert pad.cursor == CANVAS_ORIGIN
    assert (pad.column, pad.row) == (0, 0)
    assert pad.framebuffer[CANVAS_ORIGIN.x, CANVAS_ORIGIN.y] == CURSOR_COLOR.value


def test_right_moves_cursor_and_restores_border():
    pad = DrawingPad()
    assert pad.press(Key.RIGHT) is None
    moved = Position(CANVAS_ORIGIN.x + CELL_PITCH, CANVAS_ORIGIN.y)
    assert pad.cursor == moved
    assert pad.column == 1
    assert pad.framebuffer[CANVAS_ORIGIN.x, CANVAS_ORIGIN.y + 1] == CANVAS_BORDER_COLOR.value
    assert pad.framebuffer[moved.x, moved.y] == CURSOR_COLOR.value


def test_left_at_edge_does_nothing():
    pad = DrawingPad()
    before = list(pad.framebuffer.pixels)
    pad.press(Key.LEFT)
    pad.press(Key.UP)
    assert pad.cursor == CANVAS_ORIGIN
    assert pad.framebuffer.pixels == before


def test_cursor_stays_on_grid():
    pad = DrawingPad()
    for _ in range(20):
        pad.press(Key.RIGHT)
        pad.press(Key.DOWN)
    assert (pad.column, pad.row) == (13, 13)
    assert pad.cursor == Position(
        CANVAS_ORIGIN.x + CELL_PITCH * pad.column,
        CANVAS_ORIGIN.y + CELL_PITCH * pad.row,
    )


def test_down_then_up_returns():
    pad = DrawingPad()
    pad.press(Key.DOWN)
    pad.press(Key.UP)
    assert pad.cursor == CANVAS_ORIGIN
    assert pad.row == 0


def test_combined_keys():
    pad = DrawingPad()
    pad.press(Key.RIGHT | Key.DOWN)
    assert (pad.column, pad.row) == (1, 1)


def test_a_toggles_cell():
    pad = white_pad()
    pad.press(Key.A)
    assert pad.cells[0][0] is True
    cell = [(CANVAS_ORIGIN.x + 1 + dx, CANVAS_ORIGIN.y + 1 + dy) for dx in range(5) for dy in range(5)]
    assert all(pad.framebuffer[x, y] == CELL_ACTIVE_COLOR.value for x, y in cell)
    pad.press(Key.A)
    assert pad.cells[0][0] is False
    assert all(pad.framebuffer[x, y] == CELL_INACTIVE_COLOR.value for x, y in cell)


def test_preprocess_empty_canvas_is_black():
    pad = DrawingPad()
    image = pad.preprocess()
    assert len(image) == 28
    assert all(len(row) == 28 and set(row) == {0} for row in image)


def test_preprocess_matches_pipeline():
    pad = DrawingPad()
    pad.press(Key.RIGHT)
    pad.press(Key.A)
    expected = gaussian_blur_3x3(boolean_to_grayscale(duplicate_array_size(pad.cells)))
    assert pad.preprocess() == expected
    assert max(max(row) for row in pad.preprocess()) > 0


def test_start_draws_default_prediction():
    pad = DrawingPad()
    assert pad.press(Key.START) == 9
    for dy, row in enumerate(digit_bitmap(9)):
        for dx, value in enumerate(row):
            assert pad.framebuffer[DIGIT_POSITION.x + dx, DIGIT_POSITION.y + dy] == value


def test_start_uses_custom_predictor():
    seen = []

    def predictor(image):
        seen.append(image)
        return 4

    pad = DrawingPad(predictor=predictor)
    pad.press(Key.A)
    assert pad.press(Key.START) == 4
    assert seen == [pad.preprocess()]
    assert pad.framebuffer[DIGIT_POSITION.x, DIGIT_POSITION.y] == digit_bitmap(4)[0][0]