import pytest

from stterm.boxdraw import (
    BBS,
    BDA,
    BDB,
    BDL,
    BOXDATA,
    BRL,
    Rect,
    box_index,
    box_rects,
    glyph_rects,
    is_boxdraw,
    shade_color,
)

CW, CH = 8, 16

LINE_CODES = [0x2500 + i for i, v in enumerate(BOXDATA) if v & (BDL | BDA)]


def area(rects):
    return sum(r.w * r.h for r in rects)


def test_is_boxdraw():
    assert is_boxdraw(0x2500, boxdraw=True)
    assert not is_boxdraw(0x2500, boxdraw=False)
    assert not is_boxdraw(0x2504, boxdraw=True)
    assert not is_boxdraw(0x41, boxdraw=True)
    assert is_boxdraw(0x2800, boxdraw=False, braille=True)
    assert not is_boxdraw(0x2800, boxdraw=True, braille=False)


def test_box_index():
    assert box_index(0x28AB, braille=True) == BRL | 0xAB
    assert box_index(0x2500, bold=True, boxdraw_bold=True) == BDB | BOXDATA[0]
    assert box_index(0x2500, bold=True, boxdraw_bold=False) == BOXDATA[0]


def test_full_block_fills_cell():
    assert box_rects(3, 5, CW, CH, BOXDATA[0x88]) == [Rect(3, 5, CW, CH)]


def test_upper_and_lower_halves_tile_cell():
    (upper,) = box_rects(0, 0, CW, CH, BOXDATA[0x80])
    (lower,) = box_rects(0, 0, CW, CH, BOXDATA[0x84])
    assert upper.h + lower.h == CH
    assert lower.y == upper.h


def test_left_and_right_halves_tile_cell():
    (left,) = box_rects(0, 0, CW, CH, BOXDATA[0x8C])
    (right,) = box_rects(0, 0, CW, CH, BOXDATA[0x90])
    assert left.w + right.w == CW
    assert right.x == left.w


def test_quadrants_complement():
    three = box_rects(0, 0, CW, CH, BOXDATA[0x9B])
    one = box_rects(0, 0, CW, CH, BOXDATA[0x97])
    assert len(three) == 3
    assert area(three) + area(one) == CW * CH


def test_braille_all_dots_fill_cell():
    rects = box_rects(0, 0, CW, CH, box_index(0x28FF, braille=True))
    assert len(rects) == 8
    assert area(rects) == CW * CH


def test_shade_rect_carries_level():
    assert box_rects(1, 2, CW, CH, BOXDATA[0x92]) == [Rect(1, 2, CW, CH, shade=2)]
    assert BOXDATA[0x92] == BBS + 2


def test_shade_color():
    white = (0xFFFF, 0xFFFF, 0xFFFF)
    black = (0, 0, 0)
    assert shade_color(white, white, 2) == white
    assert shade_color(black, white, 2) == (0x8000, 0x8000, 0x8000)


def test_unsupported_shape_draws_nothing():
    assert box_rects(0, 0, CW, CH, 0) == []


def test_arc_leaves_centre_open():
    px, py = CW // 2, CH // 2
    cross = box_rects(0, 0, CW, CH, BOXDATA[0x3C])
    arc = box_rects(0, 0, CW, CH, BOXDATA[0x6D])
    assert len(cross) == 4
    assert len(arc) == 2
    cross_hits = [r for r in cross if r.x <= px < r.x + r.w and r.y <= py < r.y + r.h]
    arc_hits = [r for r in arc if r.x <= px < r.x + r.w and r.y <= py < r.y + r.h]
    assert len(cross_hits) >= 1
    assert arc_hits == []


@pytest.mark.parametrize("bold", [False, True])
@pytest.mark.parametrize("code", LINE_CODES)
def test_line_rects_stay_in_cell(code, bold):
    bd = box_index(code, bold=bold, boxdraw_bold=True)
    rects = box_rects(0, 0, CW, CH, bd)
    assert rects
    for r in rects:
        assert r.w >= 0 and r.h >= 0
        assert r.x >= 0 and r.y >= 0
        assert r.x + r.w <= CW and r.y + r.h <= CH


def test_glyph_rects_advance_by_cell_width():
    rects = glyph_rects(10, 0, CW, CH, [BOXDATA[0x88], BOXDATA[0x88]])
    assert [r.x for r in rects] == [10, 10 + CW]