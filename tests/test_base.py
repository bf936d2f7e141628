import pytest

from pixelboard.base import BoundsStatus, ColorIdx, GraphicsBase, Point, Size


class _Board(GraphicsBase):
    def __init__(self, width, height):
        self._w = width
        self._h = height
        self.pixels = {}

    @property
    def width(self):
        return self._w

    @property
    def height(self):
        return self._h

    def is_in_bounds(self, p):
        status = BoundsStatus.OK
        if not 0 <= p.x <= self._w:
            status |= BoundsStatus.X_OUT
        if not 0 <= p.y <= self._h:
            status |= BoundsStatus.Y_OUT
        return status

    def is_valid_color(self, idx):
        return idx in set(ColorIdx)

    def color_value(self, idx):
        return int(idx)

    def color_name(self, idx):
        return ColorIdx(idx).name.lower()

    def draw_pixel(self, p, color):
        self.pixels[p] = color
        return True

    def draw_line(self, start, end, color):
        return True

    def draw_rect(self, top_left, size, color, fill):
        return True

    def draw_text(self, p, text, color):
        return True

    def refresh(self):
        self.pixels.clear()


def test_abstract_base_cannot_be_instantiated():
    with pytest.raises(TypeError):
        GraphicsBase()


def test_num_colors_matches_color_enum():
    board = _Board(10, 10)
    assert board.num_colors == len(list(ColorIdx))
    assert ColorIdx(board.num_colors - 1) is ColorIdx.DARK_PURPLE


def test_color_indices_are_contiguous_from_black():
    assert ColorIdx(0) is ColorIdx.BLACK
    assert [int(c) for c in ColorIdx] == list(range(len(ColorIdx)))


def test_bounds_flags_combine():
    assert BoundsStatus.X_OUT | BoundsStatus.Y_OUT == BoundsStatus.BOTH_OUT
    assert BoundsStatus(3) is BoundsStatus.BOTH_OUT
    assert not BoundsStatus.OK


def test_point_and_size_default_to_origin():
    assert Point() == (0, 0)
    assert Size() == (0, 0)
    assert Point(3, 4).y == 4
    assert Size(5, 6).w == 5


def test_subclass_uses_shared_interface():
    board = _Board(10, 10)
    assert board.draw_pixel(Point(1, 2), ColorIdx.RED)
    assert board.pixels == {Point(1, 2): ColorIdx.RED}
    board.refresh()
    assert board.pixels == {}
    assert board.is_in_bounds(Point(-1, 11)) is BoundsStatus.BOTH_OUT