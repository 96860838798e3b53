"""
Content Sanitizer - Convert rich chapter markup into plain text.

Paragraph structure survives as blank lines:
    <br>, <br/>, <br />   -> "\\n"
    </p>                  -> "\\n\\n"
    any other <...>       -> removed

Entities are decoded only after tags are gone, in a fixed order
(&nbsp; &amp; &lt; &gt; &quot; &#39;), so "&amp;lt;" ends up as "<".
A pass is repeated until the text no longer changes, which keeps the
result free of tags and decodable entities: sanitize(sanitize(x)) == sanitize(x).

Tags are found by scanning for '<' and the next '>' with str.find, so the
cost of one pass is linear in the input regardless of how the markup nests.

Usage:
    from core.book_export.sanitizer import sanitize
    text = sanitize("<p>Hello&nbsp;world</p><p>Second</p>")
    # "Hello world\\n\\nSecond"
"""

import re
import logging

logger = logging.getLogger(__name__)


# Anchored at a '<' position; only ever looks at one tag
_BREAK_TAG = re.compile(r"<(?:br\s*/?|/p)>", re.IGNORECASE)

# A run of escaped ampersands ("&amp;amp;amp;") is one ampersand
_AMP_RUN = re.compile(r"&(?:amp;)+")

# Characters XML 1.0 cannot carry (tab, LF and CR are allowed)
_XML_INVALID = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\ufffe\uffff]")

# Decoded in this order, after tag stripping
_ENTITIES = (
    ("&nbsp;", " "),
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#39;", "'"),
)


def _replace_break_tags(text: str) -> str:
    """Turn line-break and paragraph-closing tags into newlines."""
    out = []
    pos = 0
    while True:
        start = text.find("<", pos)
        if start < 0:
            out.append(text[pos:])
            break
        out.append(text[pos:start])
        match = _BREAK_TAG.match(text, start)
        if match:
            out.append("\n\n" if match.group(0)[1] == "/" else "\n")
            pos = match.end()
        else:
            out.append("<")
            pos = start + 1
    return "".join(out)


def _strip_tags(text: str) -> str:
    """Drop every '<...>' sequence. An unterminated '<' is kept as text."""
    out = []
    pos = 0
    while True:
        start = text.find("<", pos)
        if start < 0:
            out.append(text[pos:])
            break
        end = text.find(">", start + 1)
        if end < 0:
            # No '>' after this '<' means none after any later '<' either
            out.append(text[pos:])
            break
        out.append(text[pos:start])
        pos = end + 1
    return "".join(out)


def _decode_entities(text: str) -> str:
    for entity, char in _ENTITIES:
        if entity == "&amp;":
            text = _AMP_RUN.sub("&", text)
        else:
            text = text.replace(entity, char)
    return text


def strip_control_chars(text: str) -> str:
    """Remove control characters that cannot appear in an XML document."""
    return _XML_INVALID.sub("", text)


def _sanitize_once(text: str) -> str:
    text = _replace_break_tags(text)
    text = _strip_tags(text)
    text = _decode_entities(text)
    text = strip_control_chars(text)
    return text.strip()


def sanitize(markup) -> str:
    """
    Convert rich-text markup to plain text with paragraph breaks.

    Never raises: malformed or partially closed markup degrades to stray
    characters. Non-string input is converted with str() first.

    Args:
        markup: HTML-like chapter content

    Returns:
        Plain text, paragraphs separated by a blank line
    """
    if not markup:
        return ""
    if not isinstance(markup, str):
        markup = str(markup)

    text = _sanitize_once(markup)
    passes = 1
    # Every pass that changes something makes the text shorter, so this ends
    while True:
        cleaned = _sanitize_once(text)
        if cleaned == text:
            break
        text = cleaned
        passes += 1

    if passes > 2:
        logger.debug(f"Sanitizer needed {passes} passes for nested escapes")
    return text
