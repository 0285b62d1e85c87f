"""WordPress HTML clean-up: entity decoding, tag stripping, normalization.

These are narrow regex transforms for rendering WordPress/Elementor output
consistently. They are not an HTML sanitizer; markup outside the listed
patterns passes through untouched.
"""

import re

_ENTITY_RE = re.compile(r"&(#\d+|#[xX][0-9a-fA-F]+|\w+);")
_TAG_RE = re.compile(r"<[^>]+>")
_WHITESPACE_RE = re.compile(r"\s+")
_STYLE_ATTR_RE = re.compile(
    r"""\sstyle\s*=\s*(?:"[^"]*"|'[^']*')""", re.IGNORECASE
)

NAMED_ENTITIES = {
    "amp": "&",
    "lt": "<",
    "gt": ">",
    "quot": '"',
    "apos": "'",
    "nbsp": " ",
}

# Page-builder wrappers collapsed to a bare <div>
ELEMENTOR_WRAPPER_CLASSES = (
    "elementor-widget-container",
    "elementor-widget-wrap",
    "elementor-container",
    "elementor-column",
    "elementor-element",
    "elementor-widget",
)

_NORMALIZE_RULES: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"<section\b[^>]*>", re.IGNORECASE), "<div>"),
    (re.compile(r"</section>", re.IGNORECASE), "</div>"),
    *(
        (
            re.compile(
                rf'<div\b[^>]*class="[^"]*{re.escape(cls)}[^"]*"[^>]*>',
                re.IGNORECASE,
            ),
            "<div>",
        )
        for cls in ELEMENTOR_WRAPPER_CLASSES
    ),
    # Social sharing widgets that only some posts carry
    (
        re.compile(
            r'<div[^>]*class="[^"]*(?:oss-social-share|ocean-social|social-share)'
            r'[^"]*"[^>]*>[\s\S]*?</div>',
            re.IGNORECASE,
        ),
        "",
    ),
    # Inline styles fight the site typography
    (_STYLE_ATTR_RE, ""),
    (re.compile(r"<p>\s*</p>", re.IGNORECASE), ""),
]


def _decode_entity(match: re.Match[str]) -> str:
    entity = match.group(1)
    if entity[0] != "#":
        return NAMED_ENTITIES.get(entity, match.group(0))
    try:
        if entity[1] in "xX":
            code_point = int(entity[2:], 16)
        else:
            code_point = int(entity[1:], 10)
        if 0xD800 <= code_point <= 0xDFFF:
            return match.group(0)
        return chr(code_point)
    except (ValueError, OverflowError):
        return match.group(0)


def decode_entities(text: str | None) -> str:
    """Replace ``&name;``, ``&#NNN;`` and ``&#xHHH;`` with their characters.

    Unknown named references and out-of-range code points are left as-is.
    """
    if not text:
        return ""
    return _ENTITY_RE.sub(_decode_entity, text)


def strip_tags(html: str | None) -> str:
    """Drop every tag, leaving the text untouched."""
    if not html:
        return ""
    return _TAG_RE.sub("", html)


def strip_html(html: str | None) -> str:
    """Drop every tag and collapse whitespace into single spaces."""
    text = strip_tags(html)
    return _WHITESPACE_RE.sub(" ", text).strip()


def plain_text(html: str | None) -> str:
    """Stripped and decoded text, as used for titles and excerpts."""
    return decode_entities(strip_html(html))


def normalize_content(html: str | None) -> str:
    """Rewrite WordPress/Elementor markup for display.

    Sections and builder wrappers become plain ``<div>`` tags, social share
    blocks are dropped, inline ``style`` attributes and empty paragraphs
    are removed.
    """
    if not html:
        return ""
    clean = html
    for pattern, replacement in _NORMALIZE_RULES:
        clean = pattern.sub(replacement, clean)
    # A removal can splice two fragments into a new style attribute
    while True:
        clean, count = _STYLE_ATTR_RE.subn("", clean)
        if not count:
            return clean
