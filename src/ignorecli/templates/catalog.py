"""Static catalog of templates from GitHub's gitignore repository.

Source: https://github.com/github/gitignore
"""

from collections.abc import Iterable

from ignorecli.core.types import Template


def _template(name: str, description: str) -> Template:
    return Template(name=name, filename=f"{name}.gitignore", description=description)


LANGUAGES: tuple[Template, ...] = (
    _template("C", "C language projects"),
    _template("C++", "C++ language projects"),
    _template("Go", "Go/Golang projects"),
    _template("Java", "Java projects"),
    _template("Kotlin", "Kotlin projects"),
    _template("Python", "Python projects"),
    _template("Ruby", "Ruby projects"),
    _template("Rust", "Rust projects"),
    _template("Swift", "Swift projects"),
    _template("Dart", "Dart projects"),
    _template("Haskell", "Haskell projects"),
    _template("Scala", "Scala projects"),
    _template("Elixir", "Elixir projects"),
    _template("OCaml", "OCaml projects"),
)

FRAMEWORKS: tuple[Template, ...] = (
    _template("Node", "Node.js projects"),
    _template("Android", "Android development"),
    _template("Rails", "Ruby on Rails projects"),
    _template("Laravel", "Laravel PHP projects"),
    _template("Flutter", "Flutter/Dart projects"),
)

TOOLS: tuple[Template, ...] = (
    _template("VisualStudio", "Visual Studio IDE"),
    _template("VisualStudioCode", "VS Code editor"),
    _template("JetBrains", "JetBrains IDEs"),
    _template("Vim", "Vim editor"),
    _template("Emacs", "Emacs editor"),
)


class TemplateCatalog:
    """Read-only collection of templates grouped by category."""

    def __init__(
        self,
        languages: Iterable[Template] = (),
        frameworks: Iterable[Template] = (),
        tools: Iterable[Template] = (),
    ) -> None:
        """Initialize the catalog.

        Args:
            languages: Programming language templates.
            frameworks: Framework templates.
            tools: Editor and IDE templates.

        Raises:
            ValueError: If two templates share a name (case-insensitive).
        """
        self._languages = tuple(languages)
        self._frameworks = tuple(frameworks)
        self._tools = tuple(tools)

        self._by_name: dict[str, Template] = {}
        for template in self.list_all():
            key = template.name.lower()
            if key in self._by_name:
                raise ValueError(f"Duplicate template name: {template.name}")
            self._by_name[key] = template

    @property
    def languages(self) -> tuple[Template, ...]:
        """Get language templates."""
        return self._languages

    @property
    def frameworks(self) -> tuple[Template, ...]:
        """Get framework templates."""
        return self._frameworks

    @property
    def tools(self) -> tuple[Template, ...]:
        """Get tool templates."""
        return self._tools

    def categories(self) -> dict[str, tuple[Template, ...]]:
        """Get templates keyed by display category, in display order."""
        return {
            "Languages": self._languages,
            "Frameworks": self._frameworks,
            "Tools": self._tools,
        }

    def list_all(self) -> list[Template]:
        """Get all templates as a flat list.

        Returns:
            Languages, then frameworks, then tools.
        """
        return [*self._languages, *self._frameworks, *self._tools]

    def names(self) -> list[str]:
        """Get all template names."""
        return [t.name for t in self.list_all()]

    def lookup(self, name: str) -> Template | None:
        """Find a template by name (case-insensitive).

        Args:
            name: Template name.

        Returns:
            Matching Template or None if not found.
        """
        return self._by_name.get(name.strip().lower())

    def search(self, query: str) -> list[Template]:
        """Find templates whose name or description contains a substring.

        Args:
            query: Substring to look for (case-insensitive).

        Returns:
            Matching templates in catalog order.
        """
        needle = query.lower()
        return [
            t
            for t in self.list_all()
            if needle in t.name.lower()
            or (t.description is not None and needle in t.description.lower())
        ]

    def __len__(self) -> int:
        return len(self._by_name)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.lookup(name) is not None


CATALOG = TemplateCatalog(languages=LANGUAGES, frameworks=FRAMEWORKS, tools=TOOLS)
