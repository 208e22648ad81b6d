__all__ = [
    "Category",
    "VocabularyRegistry",
    "default_registry",
    "UnknownSymbolError",
    "MalformedConfigurationError",
    "SENTINEL",
    "CategoryTables",
    "JamoTables",
    "build_category_tables",
    "build_tables",
    "render",
    "render_c",
    "render_python",
    "render_json",
]

from .vocabulary import (
    Category,
    VocabularyRegistry,
    default_registry,
    UnknownSymbolError,
)
from .builder import (
    SENTINEL,
    CategoryTables,
    JamoTables,
    MalformedConfigurationError,
    build_category_tables,
    build_tables,
)
from .emit import render, render_c, render_python, render_json
