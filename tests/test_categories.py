"""Tests for category resolution and discovery."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from docnav.categories import categories_from_table, list_categories, resolve_category
from docnav.schemas import Category, NavGroup, NavLink
from docnav.slugs import encode_slug


class TestResolveCategory:
    """Tests for resolve_category function."""

    def test_headings_become_group(self, docs_root: Path) -> None:
        """An index document with headings resolves to a drop-down."""
        result = resolve_category(Category(id="ruby", display_name="Ruby"), docs_root)

        assert result == NavGroup(
            text="Ruby",
            children=[
                NavLink(text="1. Ruby基礎", href="/ruby/#basics"),
                NavLink(text="2. Ruby応用", href="/ruby/#" + encode_slug("2. Ruby応用")),
            ],
        )

    def test_missing_index_falls_back_to_link(
        self, docs_root: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """A category without an index document becomes a flat link."""
        caplog.set_level(logging.WARNING, logger="docnav.categories")

        result = resolve_category(
            Category(id="graphql", display_name="GraphQL"), docs_root
        )

        assert result == NavLink(text="GraphQL", href="/graphql/")
        assert result.to_config() == {"text": "GraphQL", "link": "/graphql/"}
        assert any(record.levelno == logging.WARNING for record in caplog.records)

    def test_no_headings_falls_back_to_link(
        self, docs_root: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """An index document without headings never yields an empty group."""
        caplog.set_level(logging.WARNING, logger="docnav.categories")
        (docs_root / "git").mkdir()
        (docs_root / "git" / "index.md").write_text("# Git\n\nJust prose.\n")

        result = resolve_category(Category(id="git", display_name="Git"), docs_root)

        assert isinstance(result, NavLink)
        assert result.href == "/git/"
        assert [record.levelno for record in caplog.records] == [logging.WARNING]

    def test_unreadable_index_falls_back_to_link(self, docs_root: Path) -> None:
        """Read errors are downgraded to the plain link."""
        (docs_root / "aws" / "index.md").mkdir(parents=True)

        result = resolve_category(Category(id="aws", display_name="AWS"), docs_root)

        assert result == NavLink(text="AWS", href="/aws/")

    def test_undecodable_index_falls_back_to_link(self, docs_root: Path) -> None:
        """Invalid UTF-8 is treated like an unreadable document."""
        (docs_root / "vue").mkdir()
        (docs_root / "vue" / "index.md").write_bytes(b"## \xff\xfe broken\n")

        result = resolve_category(Category(id="vue", display_name="Vue"), docs_root)

        assert result == NavLink(text="Vue", href="/vue/")

    def test_duplicate_fragments_kept(self, docs_root: Path) -> None:
        """Colliding headings are neither merged nor reordered."""
        (docs_root / "react").mkdir()
        (docs_root / "react" / "index.md").write_text("## Setup\n### Hooks\n## Setup\n")

        result = resolve_category(Category(id="react", display_name="React"), docs_root)

        assert isinstance(result, NavGroup)
        assert [child.href for child in result.children] == [
            "/react/#setup",
            "/react/#hooks",
            "/react/#setup",
        ]

    def test_custom_index_name(self, docs_root: Path) -> None:
        """The index document name can be changed."""
        (docs_root / "ruby" / "README.md").write_text("## Only {#only}\n")

        result = resolve_category(
            Category(id="ruby", display_name="Ruby"), docs_root, index_name="README.md"
        )

        assert isinstance(result, NavGroup)
        assert result.children == [NavLink(text="Only", href="/ruby/#only")]


class TestCategoriesFromTable:
    """Tests for categories_from_table function."""

    def test_preserves_table_order(self) -> None:
        """Categories follow the table's insertion order."""
        categories = categories_from_table({"ruby": "Ruby", "aws": "AWS", "git": "Git"})

        assert [c.id for c in categories] == ["ruby", "aws", "git"]
        assert categories[1] == Category(id="aws", display_name="AWS")


class TestListCategories:
    """Tests for list_categories function."""

    def test_filters_and_sorts_directories(self, tmp_path: Path) -> None:
        """Only known, non-excluded directories are returned, sorted by name."""
        for name in ("ruby", "docker", ".vuepress", "node_modules", "drafts"):
            (tmp_path / name).mkdir()
        (tmp_path / "README.md").write_text("# Docs\n")
        display_names = {
            "ruby": "Ruby",
            "docker": "Docker",
            "node_modules": "Modules",
            "graphql": "GraphQL",
        }

        categories = list_categories(tmp_path, display_names, {"node_modules"})

        assert categories == [
            Category(id="docker", display_name="Docker"),
            Category(id="ruby", display_name="Ruby"),
        ]

    def test_missing_root(self, tmp_path: Path) -> None:
        """A missing documents root yields no categories."""
        assert list_categories(tmp_path / "missing", {"ruby": "Ruby"}) == []
