"""Derive heading anchors the way the documentation renderer does."""

from __future__ import annotations

import re

_WHITESPACE_RE = re.compile(r"\s+")
_KEPT_RE = re.compile(r"[\w-]")

# Hiragana, Katakana, CJK Unified Ideographs
_JAPANESE_RANGES = (
    (0x3040, 0x309F),
    (0x30A0, 0x30FF),
    (0x4E00, 0x9FFF),
)


def encode_slug(text: str) -> str:
    """Convert heading text into its anchor fragment.

    The text is lowercased and each whitespace run becomes a single hyphen.
    Word characters, hyphens and every code point in the Hiragana, Katakana
    and CJK Unified Ideographs blocks are kept (``・`` included); everything
    else is dropped.

    Hyphen runs are neither collapsed nor trimmed.
    """
    slug = _WHITESPACE_RE.sub("-", text.lower())
    return "".join(char for char in slug if _is_kept(char))


def _is_kept(char: str) -> bool:
    return bool(_KEPT_RE.match(char)) or _is_japanese(char)


def _is_japanese(char: str) -> bool:
    code = ord(char)
    return any(start <= code <= end for start, end in _JAPANESE_RANGES)
