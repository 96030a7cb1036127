"""Splice a navigation tree into a JavaScript configuration source.

The patch is textual: only the array literal assigned to ``nav`` is
replaced, so comments, unrelated keys and formatting elsewhere survive
byte-for-byte.
"""

from __future__ import annotations

import os
import re
import shutil
from pathlib import Path
from typing import Any, Iterable

from docnav.exceptions import ConfigFileError, PatchTargetNotFoundError
from docnav.schemas import NavGroup, NavLink
from docnav.utils.logging_config import get_logger

logger = get_logger(__name__)

_NAV_ASSIGNMENT_RE = re.compile(r"""(?<![\w$])(?:nav|'nav'|"nav")\s*[:=]\s*\[""")
_INDENT_RE = re.compile(r"[ \t]*")
_JS_ESCAPES = {
    "\\": "\\\\",
    "'": "\\'",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def render_nav(
    tree: Iterable[NavLink | NavGroup],
    *,
    indent: str = "  ",
    base_indent: str = "",
) -> str:
    """Serialize ``tree`` as a JavaScript array literal.

    The opening bracket carries no indentation so the result can follow a
    ``nav:`` key on the same line; nested lines start with ``base_indent``.
    """
    lines = ["["]
    for item in tree:
        lines.extend(_render_item(item.to_config(), indent, base_indent + indent))
    lines.append(f"{base_indent}]")
    return "\n".join(lines)


def _render_item(config: dict[str, Any], indent: str, prefix: str) -> list[str]:
    if "items" not in config:
        return [f"{prefix}{_render_link(config)},"]

    inner = prefix + indent
    lines = [
        f"{prefix}{{",
        f"{inner}text: {_js_string(config['text'])},",
        f"{inner}items: [",
    ]
    lines.extend(f"{inner}{indent}{_render_link(child)}," for child in config["items"])
    lines.append(f"{inner}],")
    lines.append(f"{prefix}}},")
    return lines


def _render_link(config: dict[str, str]) -> str:
    return f"{{ text: {_js_string(config['text'])}, link: {_js_string(config['link'])} }}"


def _js_string(value: str) -> str:
    return "'" + "".join(_JS_ESCAPES.get(char, char) for char in value) + "'"


def find_nav_span(source: str) -> tuple[int, int]:
    """Locate the array literal assigned to ``nav``.

    Matches ``nav: [``, ``nav = [`` and quoted ``'nav': [`` outside strings
    and comments; the first one wins.

    Returns:
        ``(start, end)`` so that ``source[start:end]`` is the array literal,
        brackets included.

    Raises:
        PatchTargetNotFoundError: If there is no assignment or its brackets
            do not balance.
    """
    index = 0
    length = len(source)
    while index < length:
        match = _NAV_ASSIGNMENT_RE.match(source, index)
        if match:
            start = match.end() - 1
            end = _find_closing_bracket(source, start)
            if end is None:
                raise PatchTargetNotFoundError("Unbalanced brackets in navigation array")
            return start, end + 1
        skipped = _skip_literal(source, index)
        index = skipped if skipped > index else index + 1
    raise PatchTargetNotFoundError("No navigation assignment found")


def _find_closing_bracket(source: str, start: int) -> int | None:
    depth = 0
    index = start
    length = len(source)
    while index < length:
        skipped = _skip_literal(source, index)
        if skipped > index:
            index = skipped
            continue
        char = source[index]
        if char == "[":
            depth += 1
        elif char == "]":
            depth -= 1
            if depth == 0:
                return index
        index += 1
    return None


def _skip_literal(source: str, index: int) -> int:
    """Return the index just past a string or comment starting at ``index``.

    Returns ``index`` unchanged when no literal starts there.
    """
    char = source[index]
    if source.startswith("//", index):
        newline = source.find("\n", index)
        return len(source) if newline == -1 else newline
    if source.startswith("/*", index):
        close = source.find("*/", index + 2)
        return len(source) if close == -1 else close + 2
    if char in "'\"`":
        position = index + 1
        while position < len(source):
            current = source[position]
            if current == "\\":
                position += 2
                continue
            if current == char:
                return position + 1
            position += 1
        return len(source)
    return index


def patch_config_source(tree: Iterable[NavLink | NavGroup], source: str) -> str:
    """Return ``source`` with its navigation array replaced by ``tree``.

    Raises:
        PatchTargetNotFoundError: If no navigation array can be located.
    """
    start, end = find_nav_span(source)
    line_start = source.rfind("\n", 0, start) + 1
    base_indent = _INDENT_RE.match(source, line_start).group(0)
    rendered = render_nav(tree, base_indent=base_indent)
    return source[:start] + rendered + source[end:]


def patch_config_file(tree: Iterable[NavLink | NavGroup], path: Path) -> str:
    """Patch the navigation array of the configuration file at ``path``.

    The file is read once and, if its content changes, replaced atomically.
    Nothing is written when the navigation array cannot be located.

    Returns:
        The patched source text.

    Raises:
        ConfigFileError: If the file cannot be read or written.
        PatchTargetNotFoundError: If no navigation array is found; carries
            ``path``.
    """
    try:
        # Bytes keep line endings untouched.
        source = path.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigFileError(f"Cannot read configuration file {path}: {exc}") from exc

    try:
        patched = patch_config_source(tree, source)
    except PatchTargetNotFoundError as exc:
        raise PatchTargetNotFoundError(str(exc), path=path) from exc

    if patched == source:
        logger.info("Navigation already up to date", extra={"path": str(path)})
        return patched

    tmp_path = path.with_name(f".{path.name}.tmp")
    try:
        tmp_path.write_bytes(patched.encode("utf-8"))
        shutil.copymode(path, tmp_path)
        os.replace(tmp_path, path)
    except OSError as exc:
        tmp_path.unlink(missing_ok=True)
        raise ConfigFileError(f"Cannot write configuration file {path}: {exc}") from exc

    logger.info("Patched navigation", extra={"path": str(path)})
    return patched
