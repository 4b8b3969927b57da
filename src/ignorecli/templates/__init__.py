"""Template catalog for ignorecli."""

from ignorecli.templates.catalog import CATALOG, TemplateCatalog

__all__ = [
    "CATALOG",
    "TemplateCatalog",
]
