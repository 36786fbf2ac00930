"""Tests for SVG serialization."""

import xml.etree.ElementTree as ET

import pytest

from patternforge.engine.context import DrawablePart, ResolvedDocument
from patternforge.engine.transforms import Transform
from patternforge.errors import InvalidCanvasSizeError
from patternforge.svg.serializer import part_to_tag, serialize_document, serialize_svg

SVG_NS = "{http://www.w3.org/2000/svg}"


def test_empty_document():
    svg = serialize_svg([], (800, 600), "#000000")
    lines = svg.split("\n")
    assert lines[0] == '<?xml version="1.0" encoding="UTF-8"?>'
    assert 'width="800" height="600" viewBox="0 0 800 600"' in lines[1]
    assert 'preserveAspectRatio="xMidYMid meet"' in lines[1]
    assert lines[2].strip() == '<rect width="800" height="600" fill="#000000" />'
    assert lines[-1] == "</svg>"


def test_part_tag_with_fill_and_transform():
    part = DrawablePart(
        "path",
        {"d": "M0 0H64V64Z"},
        transform=Transform.positioned(109, 109, 2.90625, 2.90625, 32),
        fill="#FF6B6B",
    )
    assert part_to_tag(part) == (
        '<path d="M0 0H64V64Z" fill="#FF6B6B" '
        'transform="translate(109, 109) scale(2.90625, 2.90625) translate(-32, -32)" />'
    )


def test_part_tag_omits_absent_attributes():
    part = DrawablePart("circle", {"cx": 109.0, "cy": 109.0, "r": 93.0})
    assert part_to_tag(part) == '<circle cx="109" cy="109" r="93" />'


def test_attribute_escaping():
    part = DrawablePart("path", {"d": 'M0 0"<&>'}, fill="#fff")
    assert 'd="M0 0&quot;&lt;&amp;&gt;"' in part_to_tag(part)


def test_output_is_well_formed_xml():
    parts = [
        DrawablePart("circle", {"cx": 10, "cy": 10, "r": 5}, fill="#111111"),
        DrawablePart("rect", {"x": 0, "y": 0, "width": 4, "height": 4}, fill="#222222"),
    ]
    root = ET.fromstring(serialize_svg(parts, (20, 20), "#ffffff").encode())
    assert root.tag == f"{SVG_NS}svg"
    assert [child.tag for child in root] == [f"{SVG_NS}rect", f"{SVG_NS}circle", f"{SVG_NS}rect"]


def test_serialize_document(engine, config):
    doc = engine.generate(config)
    svg = serialize_document(doc)
    root = ET.fromstring(svg.encode())
    # Background plus one element per part
    assert len(root) == doc.num_parts + 1


def test_missing_background_defaults_to_white():
    doc = ResolvedDocument(parts=(), canvas_size=(10, 10), background_color="")
    assert 'fill="#ffffff"' in serialize_document(doc)


@pytest.mark.parametrize("canvas", [None, (10,), (0, 10), (10, -5), ("a", 10)])
def test_invalid_canvas(canvas):
    with pytest.raises(InvalidCanvasSizeError):
        serialize_svg([], canvas)
