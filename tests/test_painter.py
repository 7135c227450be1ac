import pytest

from quadgui.cursor import Rect, Vec2
from quadgui.painter import (
    Alignment,
    Clip,
    DrawCharacter,
    DrawLine,
    DrawRawTexture,
    DrawRect,
    DrawSprite,
    DrawTriangle,
    LabelParams,
    Painter,
    estimate_triangles_budget,
)
from quadgui.style import Color, RectOffset

WHITE_SRC = Rect(0.0, 0.0, 0.01, 0.01)
RED = Color(1.0, 0.0, 0.0, 1.0)
SHIFT = Vec2(10.0, 20.0)


def make_painter(**kwargs):
    return Painter(white_source=WHITE_SRC, **kwargs)


def test_rect_commands_offset_only_their_rect():
    rect = Rect(1.0, 2.0, 3.0, 4.0)
    cmd = DrawRect(rect=rect, source=WHITE_SRC, fill=RED).offset(SHIFT)
    assert cmd.rect == rect.offset(SHIFT)
    assert cmd.source == WHITE_SRC
    assert cmd.fill == RED and cmd.stroke is None

    sprite = DrawSprite(rect, WHITE_SRC, RED, RectOffset(1, 1, 1, 1)).offset(SHIFT)
    assert sprite.rect == rect.offset(SHIFT)
    assert sprite.offsets == RectOffset(1, 1, 1, 1)

    ch = DrawCharacter(rect, WHITE_SRC, RED).offset(SHIFT)
    assert ch.dest == rect.offset(SHIFT)

    tex = DrawRawTexture(rect, "tex").offset(SHIFT)
    assert tex.rect == rect.offset(SHIFT) and tex.texture == "tex"


def test_point_commands_offset_every_point():
    a, b, c = Vec2(0, 0), Vec2(1, 0), Vec2(0, 1)
    tri = DrawTriangle(a, b, c, WHITE_SRC, RED).offset(SHIFT)
    assert (tri.p0, tri.p1, tri.p2) == (a + SHIFT, b + SHIFT, c + SHIFT)
    line = DrawLine(a, b, WHITE_SRC, RED).offset(SHIFT)
    assert (line.start, line.end) == (a + SHIFT, b + SHIFT)


def test_clip_offset():
    assert Clip(None).offset(SHIFT) == Clip(None)
    rect = Rect(0, 0, 5, 5)
    assert Clip(rect).offset(SHIFT) == Clip(rect.offset(SHIFT))


def test_estimate_budget():
    rect = Rect(0, 0, 1, 1)
    assert estimate_triangles_budget(DrawRect(rect, WHITE_SRC)) == (10, 10)
    assert estimate_triangles_budget(DrawLine(Vec2(), Vec2(), WHITE_SRC, RED)) == (10, 10)
    assert estimate_triangles_budget(DrawSprite(rect, WHITE_SRC, RED)) == (0, 0)
    assert estimate_triangles_budget(Clip(None)) == (0, 0)


def test_label_params_defaults():
    params = LabelParams()
    assert params.color == Color(0.0, 0.0, 0.0, 1.0)
    assert params.alignment is Alignment.LEFT


def test_draw_rect_uses_white_source():
    painter = make_painter()
    rect = Rect(0, 0, 10, 10)
    painter.draw_rect(rect, RED, None)
    assert painter.commands == [DrawRect(rect=rect, source=WHITE_SRC, fill=None, stroke=RED)]


def test_clip_sets_zone_and_emits_command():
    painter = make_painter()
    zone = Rect(0, 0, 100, 100)
    painter.clip(zone)
    assert painter.clipping_zone == zone
    assert painter.commands[-1] == Clip(zone)


def test_clip_intersects_with_previous_zone():
    painter = make_painter()
    first = Rect(0, 0, 100, 100)
    second = Rect(50, 50, 100, 100)
    painter.clip(first)
    painter.clip(second)
    assert painter.clipping_zone == first.intersect(second)


def test_clip_disjoint_falls_back_to_new_rect():
    painter = make_painter()
    painter.clip(Rect(0, 0, 10, 10))
    far = Rect(500, 500, 10, 10)
    painter.clip(far)
    assert painter.clipping_zone == far


def test_clip_none_clears_zone():
    painter = make_painter()
    painter.clip(Rect(0, 0, 10, 10))
    painter.clip(None)
    assert painter.clipping_zone is None
    assert painter.commands[-1] == Clip(None)


def test_clip_command_scaled_by_dpi():
    painter = make_painter(dpi_scale=2.0)
    zone = Rect(1, 2, 3, 4)
    painter.clip(zone)
    assert painter.clipping_zone == zone
    assert painter.commands[-1] == Clip(Rect(2, 4, 6, 8))


def test_outside_primitives_are_dropped():
    painter = make_painter()
    painter.clip(Rect(0, 0, 10, 10))
    count = len(painter.commands)
    far = Rect(100, 100, 5, 5)
    painter.draw_rect(far, None, RED)
    painter.draw_raw_texture(far, "tex")
    painter.draw_sprite(far, WHITE_SRC, RED, None)
    painter.draw_line(Vec2(100, 100), Vec2(200, 200), RED)
    painter.draw_triangle(Vec2(100, 100), Vec2(200, 100), Vec2(100, 200), RED)
    assert len(painter.commands) == count


def test_line_kept_when_one_end_inside():
    painter = make_painter()
    painter.clip(Rect(0, 0, 10, 10))
    painter.draw_line(Vec2(5, 5), Vec2(200, 200), RED)
    assert painter.commands[-1] == DrawLine(Vec2(5, 5), Vec2(200, 200), WHITE_SRC, RED)


def test_triangle_kept_when_one_point_inside():
    painter = make_painter()
    painter.clip(Rect(0, 0, 10, 10))
    painter.draw_triangle(Vec2(100, 100), Vec2(5, 5), Vec2(100, 200), RED)
    assert isinstance(painter.commands[-1], DrawTriangle)
    assert painter.commands[-1].p1 == Vec2(5, 5)


def test_draw_sprite_margin_in_uv_space():
    painter = make_painter(atlas_size=(200.0, 100.0))
    margin = RectOffset(left=20.0, right=40.0, top=10.0, bottom=30.0)
    src = Rect(0.1, 0.1, 0.2, 0.2)
    painter.draw_sprite(Rect(0, 0, 50, 50), src, RED, margin)
    cmd = painter.commands[-1]
    assert cmd.offsets == margin
    assert cmd.source == src
    assert cmd.offsets_uv == pytest.approx(RectOffset(0.1, 0.2, 0.1, 0.3))


def test_draw_sprite_without_margin():
    painter = make_painter()
    painter.draw_sprite(Rect(0, 0, 5, 5), WHITE_SRC, RED)
    cmd = painter.commands[-1]
    assert cmd.offsets is None and cmd.offsets_uv is None


def test_clear_resets():
    painter = make_painter()
    painter.clip(Rect(0, 0, 10, 10))
    painter.draw_rect(Rect(0, 0, 1, 1), RED, RED)
    painter.clear()
    assert painter.commands == []
    assert painter.clipping_zone is None
    painter.draw_rect(Rect(500, 500, 1, 1), None, RED)
    assert len(painter.commands) == 1