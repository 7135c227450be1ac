import pytest

from quadgui.style import Color, ElementState, RectOffset, Style

NORMAL = Color(0.1, 0.1, 0.1, 1.0)
HOVERED = Color(0.2, 0.2, 0.2, 1.0)
CLICKED = Color(0.3, 0.3, 0.3, 1.0)
SELECTED = Color(0.4, 0.4, 0.4, 1.0)
SELECTED_HOVERED = Color(0.5, 0.5, 0.5, 1.0)


def make_style(**kwargs):
    base = dict(
        color=NORMAL,
        color_hovered=HOVERED,
        color_clicked=CLICKED,
        color_selected=SELECTED,
        color_selected_hovered=SELECTED_HOVERED,
    )
    base.update(kwargs)
    return Style(**base)


def test_from_rgba_extremes():
    assert Color.from_rgba(255, 255, 255, 255) == Color(1.0, 1.0, 1.0, 1.0)
    assert Color.from_rgba(0, 0, 0, 255) == Color(0.0, 0.0, 0.0, 1.0)


def test_from_rgba_rejects_out_of_range():
    with pytest.raises(ValueError):
        Color.from_rgba(256, 0, 0, 0)
    with pytest.raises(ValueError):
        Color.from_rgba(0, -1, 0, 0)


def test_style_defaults_match_source():
    style = Style()
    assert style.font_size == 16
    assert style.color == Color.from_rgba(255, 255, 255, 255)
    assert style.text_color == Color.from_rgba(0, 0, 0, 255)
    assert style.color_inactive is None


def test_border_margin_without_margins_is_zero():
    assert Style().border_margin() == RectOffset()


def test_border_margin_with_only_background_margin():
    offset = RectOffset(1.0, 14.0, 1.0, 1.0)
    assert Style(background_margin=offset).border_margin() == offset
    assert Style(margin=offset).border_margin() == offset


def test_border_margin_is_symmetric():
    a = RectOffset(1.0, 2.0, 3.0, 4.0)
    b = RectOffset(5.0, 6.0, 7.0, 8.0)
    assert (
        Style(background_margin=a, margin=b).border_margin()
        == Style(background_margin=b, margin=a).border_margin()
    )


def test_text_color_priority():
    style = Style(
        text_color=NORMAL, text_color_hovered=HOVERED, text_color_clicked=CLICKED
    )
    assert style.text_color_for(ElementState(clicked=True, hovered=True)) == CLICKED
    assert style.text_color_for(ElementState(hovered=True, focused=True)) == HOVERED
    assert style.text_color_for(ElementState(focused=True)) == NORMAL


def test_text_color_dimmed_when_idle():
    style = Style(text_color=Color(1.0, 1.0, 1.0, 1.0))
    dimmed = style.text_color_for(ElementState())
    assert dimmed == Color(0.6, 0.6, 0.6, 0.6)


@pytest.mark.parametrize(
    "state, expected",
    [
        (ElementState(focused=True, clicked=True, selected=True, hovered=True), CLICKED),
        (ElementState(focused=True, selected=True, hovered=True), SELECTED_HOVERED),
        (ElementState(focused=True, selected=True), SELECTED),
        (ElementState(focused=True, hovered=True), HOVERED),
        (ElementState(focused=True), NORMAL),
    ],
)
def test_color_priority(state, expected):
    assert make_style().color_for(state) == expected


def test_color_inactive_used_when_unfocused():
    inactive = Color.from_rgba(238, 238, 238, 128)
    style = make_style(color_inactive=inactive)
    assert style.color_for(ElementState(clicked=True, hovered=True)) == inactive


def test_color_unfocused_without_inactive_fades_alpha():
    style = make_style(color=Color.from_rgba(204, 204, 204, 235))
    faded = style.color_for(ElementState())
    assert (faded.r, faded.g, faded.b) == (
        style.color.r,
        style.color.g,
        style.color.b,
    )
    assert faded.a < style.color.a


def test_background_sprite_choice():
    style = Style(background="bg", background_hovered="hover", background_clicked="click")
    assert style.background_sprite(ElementState(clicked=True, hovered=True)) == "click"
    assert style.background_sprite(ElementState(hovered=True)) == "hover"
    assert style.background_sprite(ElementState(focused=True)) == "bg"


def test_background_sprite_falls_back():
    style = Style(background="bg")
    assert style.background_sprite(ElementState(clicked=True)) == "bg"
    assert style.background_sprite(ElementState(hovered=True)) == "bg"
    assert Style().background_sprite(ElementState(clicked=True)) is None