from svgchart.svg_builder import SVGBuilder


def test_basic_svg_generation():
    svg = SVGBuilder(100, 100).render()
    assert '<svg width="100" height="100"' in svg
    assert svg.startswith("<svg")
    assert svg.endswith("</svg>")


def test_add_elements():
    sb = SVGBuilder(100, 100)
    sb.add_rect(10, 10, 80, 80, {"fill": "blue"})
    sb.add_circle(50, 50, 25, {"fill": "red"})
    sb.add_line(10, 10, 90, 90, {"stroke": "black"})
    sb.add_text(50, 50, "Test", {"text-anchor": "middle"})
    sb.add_path("M10,10 L90,90", {"stroke": "green"})
    svg = sb.render()

    assert "<rect" in svg and 'fill="blue"' in svg
    assert "<circle" in svg and 'fill="red"' in svg
    assert "<line" in svg and 'stroke="black"' in svg
    assert "<text" in svg and 'text-anchor="middle"' in svg
    assert "<path" in svg and 'stroke="green"' in svg
    assert ">Test<" in svg


def test_rect_markup():
    sb = SVGBuilder(10, 10)
    sb.add_rect(1, 2, 3, 4, {"fill": "blue"})
    assert '<rect fill="blue" x="1" y="2" width="3" height="4"/>' in sb.render()


def test_positional_attributes_override_given_ones():
    sb = SVGBuilder(10, 10)
    sb.add_circle(5, 6, 2, {"cx": "0"})
    svg = sb.render()
    assert 'cx="5"' in svg
    assert 'cx="0"' not in svg


def test_caller_attrs_not_modified():
    attrs = {"stroke": "black"}
    sb = SVGBuilder(10, 10)
    sb.add_line(0, 0, 1, 1, attrs)
    assert attrs == {"stroke": "black"}


def test_element_with_and_without_content():
    sb = SVGBuilder(10, 10)
    sb.add_element("g", {"id": "a"}, "")
    sb.add_element("title", {}, "hello")
    svg = sb.render()
    assert '<g id="a"/>' in svg
    assert "<title>hello</title>" in svg


def test_render_is_repeatable_and_str_matches():
    sb = SVGBuilder(20, 30)
    sb.add_path("M0,0 L1,1")
    first = sb.render()
    assert sb.render() == first
    assert str(sb) == first
    assert first.count("</svg>") == 1