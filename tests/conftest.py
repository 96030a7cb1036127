"""Test setup for docnav."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def docs_root(tmp_path: Path) -> Path:
    """Documents root with a ``ruby`` category carrying an index document."""
    root = tmp_path / "docs"
    ruby = root / "ruby"
    ruby.mkdir(parents=True)
    (ruby / "index.md").write_text(
        "# Ruby\n\n## 1. Ruby基礎 {#basics}\n\nIntro.\n\n### 2. Ruby応用\n",
        encoding="utf-8",
    )
    return root


@pytest.fixture
def config_source() -> str:
    """A VuePress configuration source with a navigation array."""
    return (
        "// Site configuration\n"
        "module.exports = {\n"
        "  title: 'Tech Notes',\n"
        "  themeConfig: {\n"
        "    logo: '/logo.png', /* [keep] */\n"
        "    nav: [\n"
        "      { text: 'Home', link: '/' }, // placeholder ]\n"
        "    ],\n"
        "    sidebar: 'auto',\n"
        "  },\n"
        "}\n"
    )
