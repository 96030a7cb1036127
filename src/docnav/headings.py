"""Extract level-2/3 headings from index documents."""

from __future__ import annotations

import re

from docnav.schemas import Heading
from docnav.slugs import encode_slug

_HEADING_RE = re.compile(
    r"^(?P<marks>#{2,3})[ \t]+(?P<text>.*?)"
    r"(?:[ \t]*\{#(?P<anchor>[^\s{}]+)\})?[ \t]*$"
)


def extract_headings(text: str, *, anchored_only: bool = False) -> list[Heading]:
    """Return the ``##``/``###`` headings of ``text`` in document order.

    Both levels are flattened into one sequence. A trailing ``{#id}`` is
    recorded as the heading's anchor override. Headings whose text is empty
    after trimming are kept.

    Args:
        text: Raw document text.
        anchored_only: If True, return only headings with an anchor override.
    """
    headings: list[Heading] = []
    for line_number, line in enumerate(text.split("\n"), start=1):
        # Only LF and CRLF end a line.
        match = _HEADING_RE.match(line.removesuffix("\r"))
        if not match:
            continue
        anchor = match.group("anchor")
        if anchored_only and anchor is None:
            continue
        headings.append(
            Heading(
                text=match.group("text").strip(),
                level=len(match.group("marks")),
                line_number=line_number,
                anchor_override=anchor,
            )
        )
    return headings


def heading_anchor(heading: Heading) -> str:
    """Return the fragment a heading is linked by."""
    if heading.anchor_override is not None:
        return heading.anchor_override
    return encode_slug(heading.text)
