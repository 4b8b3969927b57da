"""Tests for ignorecli.templates.catalog module."""

import pytest

from ignorecli.core.types import Template
from ignorecli.templates.catalog import (
    CATALOG,
    FRAMEWORKS,
    LANGUAGES,
    TOOLS,
    TemplateCatalog,
)


class TestDefaultCatalog:
    """Tests for the built-in template catalog."""

    def test_categories_non_empty(self) -> None:
        """Test every category has templates."""
        assert len(CATALOG.languages) > 0
        assert len(CATALOG.frameworks) > 0
        assert len(CATALOG.tools) > 0

    def test_filenames(self) -> None:
        """Test every filename is derived from the template name."""
        for template in CATALOG.list_all():
            assert template.filename == f"{template.name}.gitignore"

    def test_names_unique(self) -> None:
        """Test names are unique ignoring case."""
        names = [n.lower() for n in CATALOG.names()]
        assert len(names) == len(set(names))
        assert len(CATALOG) == len(names)

    @pytest.mark.parametrize("name", CATALOG.names())
    def test_lookup_case_insensitive(self, name: str) -> None:
        """Test lookup ignores case for every catalog entry."""
        template = CATALOG.lookup(name)
        assert template is not None
        assert CATALOG.lookup(name.lower()) == template
        assert CATALOG.lookup(name.upper()) == template

    def test_lookup_python(self) -> None:
        """Test the canonical Python lookup."""
        assert CATALOG.lookup("python") == CATALOG.lookup("Python") == CATALOG.lookup("PYTHON")
        assert CATALOG.lookup("python").name == "Python"

    def test_lookup_strips_whitespace(self) -> None:
        """Test surrounding whitespace is ignored."""
        assert CATALOG.lookup("  go ").name == "Go"

    def test_lookup_unknown(self) -> None:
        """Test unknown names are not found."""
        assert CATALOG.lookup("NonExistentLanguage") is None
        assert CATALOG.lookup("Pyth") is None
        assert CATALOG.lookup("") is None

    def test_contains(self) -> None:
        """Test membership uses case-insensitive lookup."""
        assert "rust" in CATALOG
        assert "Fortran" not in CATALOG
        assert 42 not in CATALOG


class TestListAll:
    """Tests for TemplateCatalog.list_all."""

    def test_order(self) -> None:
        """Test categories are concatenated languages, frameworks, tools."""
        assert CATALOG.list_all() == [*LANGUAGES, *FRAMEWORKS, *TOOLS]

    def test_includes_each_category(self) -> None:
        """Test known templates from each category are present."""
        names = CATALOG.names()
        assert "Python" in names
        assert "Node" in names
        assert "VisualStudioCode" in names

    def test_categories_mapping(self) -> None:
        """Test display categories are ordered."""
        assert list(CATALOG.categories()) == ["Languages", "Frameworks", "Tools"]


class TestSearch:
    """Tests for TemplateCatalog.search."""

    def test_matches_name(self) -> None:
        """Test substring match on the name."""
        names = [t.name for t in CATALOG.search("visual")]
        assert names == ["VisualStudio", "VisualStudioCode"]

    def test_matches_description(self) -> None:
        """Test substring match on the description."""
        names = [t.name for t in CATALOG.search("golang")]
        assert names == ["Go"]

    def test_case_insensitive(self) -> None:
        """Test search ignores case."""
        assert CATALOG.search("RUBY") == CATALOG.search("ruby")
        assert [t.name for t in CATALOG.search("ruby")] == ["Ruby", "Rails"]

    def test_no_match(self) -> None:
        """Test an unmatched query returns nothing."""
        assert CATALOG.search("zzzz") == []

    def test_template_without_description(self) -> None:
        """Test templates without description match on name only."""
        catalog = TemplateCatalog(tools=[Template(name="Nano", filename="Nano.gitignore")])
        assert len(catalog.search("nan")) == 1
        assert catalog.search("editor") == []


class TestTemplateCatalog:
    """Tests for constructing catalogs."""

    def test_duplicate_names_rejected(self) -> None:
        """Test duplicate names across categories are rejected."""
        with pytest.raises(ValueError, match="Duplicate template name"):
            TemplateCatalog(
                languages=[Template(name="Go", filename="Go.gitignore")],
                tools=[Template(name="go", filename="go.gitignore")],
            )

    def test_empty_catalog(self) -> None:
        """Test an empty catalog finds nothing."""
        catalog = TemplateCatalog()
        assert catalog.list_all() == []
        assert catalog.lookup("Python") is None
