from core.page.models import TextItem, Viewport
from extraction.markup import (
    css_number,
    css_string,
    item_position,
    render_item,
    render_page,
)


def test_css_number():
    assert css_number(10.0) == "10"
    assert css_number(12) == "12"
    assert css_number(0.1) == "0.1"
    assert css_number(-3.5) == "-3.5"


def test_item_position_flips_y_axis():
    item = TextItem("Hello", (12, 0, 0, 12, 10, 780), "Helvetica")
    assert item_position(item, Viewport(612, 792)) == (10, 12, 12)


def test_item_position_scales_with_viewport():
    item = TextItem("x", (9, 0, 0, 9, 15, 190), "Sans")
    assert item_position(item, Viewport(200, 400, scale=2.0)) == (30, 20, 18)


def test_render_item_escapes_markup():
    item = TextItem("<b>&</b>", (10, 0, 0, 10, 0, 0), "Sans")
    out = render_item(item, Viewport(100, 100))
    assert out.endswith(">&lt;b&gt;&amp;&lt;/b&gt;</div>")


def test_render_page_without_items():
    out = render_page(3, Viewport(50, 60.5), [])
    assert out == (
        '<div class="pdf-page" data-page="3" style="position: relative; '
        'width: 50px; height: 60.5px;"></div>'
    )


def test_font_name_cannot_add_style_rules():
    item = TextItem("x", (10, 0, 0, 10, 0, 0), "F; color: red; display: none")
    out = render_item(item, Viewport(100, 100))
    assert 'font-family: &quot;F; color: red; display: none&quot;;"' in out


def test_subset_font_name_is_quoted():
    item = TextItem("x", (10, 0, 0, 10, 0, 0), "ABCDEF+Calibri")
    out = render_item(item, Viewport(100, 100))
    assert "font-family: &quot;ABCDEF+Calibri&quot;;" in out


def test_empty_font_name_omits_font_family():
    item = TextItem("x", (10, 0, 0, 10, 0, 0), "")
    out = render_item(item, Viewport(100, 100))
    assert "font-family" not in out
    assert out == (
        '<div style="position: absolute; left: 0px; top: 100px; '
        'font-size: 10px;">x</div>'
    )


def test_css_string_escapes_quotes_and_backslashes():
    assert css_string('a"b\\c') == '"a\\"b\\\\c"'
