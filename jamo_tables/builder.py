# jamo_tables/builder.py
# Build master <-> local conversion tables for each syllable slot.
#   master_to_local[m] = local index of master symbol m, or SENTINEL if not a member
#   local_to_master[i] = master index of the i-th category member
from __future__ import annotations

import logging
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .vocabulary import Category, UnknownSymbolError, VocabularyRegistry, default_registry

log = logging.getLogger(__name__)

# uint8 max; no vocabulary or category here gets anywhere near 255 entries
SENTINEL = 255
DEFAULT_PREFIX = "comp"


class MalformedConfigurationError(ValueError): ...


class CategoryTables(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: Category
    master_to_local: Tuple[int, ...] = Field(..., description="indexed by master index")
    local_to_master: Tuple[int, ...] = Field(..., description="indexed by local index")

    @property
    def size(self) -> int:
        return len(self.local_to_master)

    def master_to_local_name(self, prefix: str = DEFAULT_PREFIX) -> str:
        return f"_{prefix}To{self.category.value.capitalize()}"

    def local_to_master_name(self, prefix: str = DEFAULT_PREFIX) -> str:
        return f"_{self.category.value}To{prefix.capitalize()}"


class JamoTables(BaseModel):
    """
    The full, immutable table set. Consumers only read from it:

    >>> tables = build_tables()
    >>> tables.to_local(Category.JONGSEONG, "None")
    0
    >>> tables.to_master(Category.CHOSEONG, 18)
    'Hieut'
    """
    model_config = ConfigDict(frozen=True)

    sentinel: int = SENTINEL
    prefix: str = DEFAULT_PREFIX
    master: Tuple[str, ...]
    categories: Tuple[CategoryTables, ...]

    def for_category(self, category: Category) -> CategoryTables:
        for t in self.categories:
            if t.category is category:
                return t
        raise KeyError(f"No tables built for category '{category}'.")

    def master_index_of(self, symbol: str) -> int:
        try:
            return self.master.index(symbol)
        except ValueError:
            raise UnknownSymbolError(f"Jamo '{symbol}' is not declared in the master vocabulary.") from None

    def to_local(self, category: Category, symbol: str) -> int:
        local = self.for_category(category).master_to_local[self.master_index_of(symbol)]
        if local == self.sentinel:
            raise ValueError(f"The jamo passed is not a valid {category}.")
        return local

    def to_master(self, category: Category, local_index: int) -> str:
        t = self.for_category(category)
        if not 0 <= local_index < t.size:
            raise IndexError(f"{category} index {local_index} out of range 0..{t.size - 1}.")
        return self.master[t.local_to_master[local_index]]


def _fail(msg: str) -> MalformedConfigurationError:
    log.error("Malformed jamo configuration: %s", msg)
    return MalformedConfigurationError(msg)


def _check_master(registry: VocabularyRegistry, sentinel: int) -> None:
    if len(registry) > sentinel:
        raise _fail(f"master vocabulary has {len(registry)} entries, more than the sentinel {sentinel} allows")
    if registry.has_duplicates():
        raise _fail("master vocabulary contains duplicate symbols")


def build_category_tables(registry: VocabularyRegistry, category: Category,
                          sentinel: int = SENTINEL) -> CategoryTables:
    _check_master(registry, sentinel)
    members = registry.members(category)
    if len(members) > sentinel:
        raise _fail(f"{category} has {len(members)} members, more than the sentinel {sentinel} allows")
    if registry.has_duplicates(category):
        raise _fail(f"{category} contains duplicate symbols")

    # name -> local index; doubles as the membership test
    local = registry.local_index_map(category)
    master_to_local = tuple(local.get(sym, sentinel) for sym in registry.master)
    try:
        local_to_master = tuple(registry.master_index_of(sym) for sym in members)
    except UnknownSymbolError as e:
        log.error("Malformed jamo configuration: %s member: %s", category, e)
        raise MalformedConfigurationError(f"{category} member is not in the master vocabulary: {e}") from e

    log.debug("%s: %d master entries, %d members", category, len(master_to_local), len(local_to_master))
    return CategoryTables(category=category, master_to_local=master_to_local, local_to_master=local_to_master)


def build_tables(registry: Optional[VocabularyRegistry] = None, prefix: str = DEFAULT_PREFIX) -> JamoTables:
    """All-or-nothing: any bad category aborts the whole build."""
    if registry is None:
        registry = default_registry()
    built = tuple(build_category_tables(registry, cat) for cat in registry.categories)
    log.info("Built jamo tables: master=%d, %s",
             len(registry), ", ".join(f"{t.category}={t.size}" for t in built))
    return JamoTables(sentinel=SENTINEL, prefix=prefix, master=registry.master, categories=built)
