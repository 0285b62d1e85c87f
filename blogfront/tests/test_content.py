"""Tests for entity decoding, tag stripping, and content normalization."""

import pytest

from blogfront.services.content import (
    decode_entities,
    normalize_content,
    plain_text,
    strip_html,
)


class TestDecodeEntities:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("Tom &amp; Jerry", "Tom & Jerry"),
            ("&lt;b&gt;", "<b>"),
            ("&quot;quoted&quot;", '"quoted"'),
            ("it&apos;s", "it's"),
            ("a&nbsp;b", "a b"),
            ("it&#39;s", "it's"),
            ("&#8220;hi&#8221;", "“hi”"),
            ("&#x2014;", "—"),
            ("&#X41;", "A"),
        ],
    )
    def test_decodes_known_references(self, raw, expected):
        assert decode_entities(raw) == expected

    def test_unknown_named_reference_passes_through(self):
        assert decode_entities("&copy; 2025 &bogus;") == "&copy; 2025 &bogus;"

    def test_malformed_references_are_left_alone(self):
        assert decode_entities("AT&T & friends &amp") == "AT&T & friends &amp"

    def test_out_of_range_code_point_passes_through(self):
        assert decode_entities("&#99999999;") == "&#99999999;"
        assert decode_entities("&#xD800;") == "&#xD800;"

    def test_none_and_empty(self):
        assert decode_entities(None) == ""
        assert decode_entities("") == ""

    def test_second_pass_over_decoded_text_is_a_no_op(self):
        once = decode_entities("Fish &amp; Chips &#8211; &quot;best&quot;")
        assert decode_entities(once) == once


class TestStripHtml:
    def test_removes_tags_and_collapses_whitespace(self):
        html = "<p>Hello\n   <strong>world</strong></p>\t<br/> again "
        assert strip_html(html) == "Hello world again"

    def test_empty_input(self):
        assert strip_html("") == ""
        assert strip_html(None) == ""

    @pytest.mark.parametrize(
        "html",
        [
            "<h1>Title</h1>",
            "<div><p>one</p>\n<p>two</p></div>",
            "plain   text",
            "<a href='x'>link</a> &amp; more",
        ],
    )
    def test_is_idempotent(self, html):
        once = strip_html(html)
        assert strip_html(once) == once

    def test_plain_text_strips_then_decodes(self):
        assert plain_text("<p>Fish &amp; Chips</p>") == "Fish & Chips"


class TestNormalizeContent:
    def test_sections_become_divs(self):
        html = '<section class="hero" id="top"><p>x</p></SECTION>'
        assert normalize_content(html) == "<div><p>x</p></div>"

    @pytest.mark.parametrize(
        "cls",
        [
            "elementor-widget-container",
            "elementor-widget-wrap",
            "elementor-container",
            "elementor-column elementor-col-100",
            "elementor-element elementor-element-abc123",
            "elementor-widget elementor-widget-text-editor",
        ],
    )
    def test_elementor_wrappers_collapse(self, cls):
        html = f'<div data-id="1" class="{cls}" data-x="y"><p>Body</p></div>'
        assert normalize_content(html) == "<div><p>Body</p></div>"

    def test_other_divs_keep_their_attributes(self):
        html = '<div class="callout"><p>Body</p></div>'
        assert normalize_content(html) == html

    @pytest.mark.parametrize(
        "cls", ["oss-social-share-buttons", "ocean-social-share", "social-share"]
    )
    def test_social_share_blocks_are_removed(self, cls):
        html = f'<p>Keep</p><div class="{cls}"><a href="#">Share</a></div><p>Also</p>'
        assert normalize_content(html) == "<p>Keep</p><p>Also</p>"

    def test_removes_every_inline_style(self):
        html = "".join(
            f'<span style="color: #{i:03d}; margin: 0">{i}</span>' for i in range(25)
        )
        html += "<p style='font-size:12px'>single quotes</p>"
        html += '<img src="a.png" STYLE="width:10px" alt="a">'
        out = normalize_content(html)
        assert "style=" not in out.lower()
        assert '<img src="a.png" alt="a">' in out

    def test_spliced_style_attribute_is_removed(self):
        # Removing the inner attribute joins " s" and "tyle=" into a new one
        html = '<p s style="a"tyle="b">x</p>'
        assert "style=" not in normalize_content(html)

    def test_empty_paragraphs_are_dropped(self):
        html = "<p>Text</p><p> </p><p>\n</p><P></P>"
        assert normalize_content(html) == "<p>Text</p>"

    def test_styled_empty_paragraph_is_dropped(self):
        assert normalize_content('<p style="margin:0"> </p><p>x</p>') == "<p>x</p>"

    def test_empty_input(self):
        assert normalize_content(None) == ""
        assert normalize_content("") == ""
