# jamo_tables/vocabulary.py
# Master jamo vocabulary + the three syllable slot subsets (choseong / jungseong / jongseong)
# - master index  = position in HANGUL_JAMO (compatibility jamo order)
# - local index   = position in the category member list
# - "None" = no trailing consonant (real jongseong member, local 0)
# - "Any"  = wildcard, never a member of any category
from __future__ import annotations

from enum import Enum
from typing import Dict, Iterator, Mapping, Optional, Sequence, Tuple


class UnknownSymbolError(LookupError): ...


class Category(Enum):
    CHOSEONG = "choseong"
    JUNGSEONG = "jungseong"
    JONGSEONG = "jongseong"

    def __str__(self) -> str:
        return self.value


# --- Master vocabulary (order matches Hangul compatibility jamo) ---
_consonants = (
    "Giyeok", "SsangGiyeok", "GiyeokSiot", "Nieun", "NieunJieut",
    "NieunHieut", "Digeut", "SsangDigeut", "Rieul", "RieulGiyeok",
    "RieulMieum", "RieulBieup", "RieulSiot", "RieulTieut", "RieulPieup",
    "RieulHieut", "Mieum", "Bieup", "SsangBieup", "BieupSiot", "Siot",
    "SsangSiot", "Ieung", "Jieut", "SsangJieut", "Chieut", "Kieuk",
    "Tieut", "Pieup", "Hieut",
)
_vowels = (
    "A", "Ae", "Ya", "Yae", "Eo", "E", "Yeo", "Ye", "O", "OA", "OAe",
    "OI", "Yo", "U", "UEo", "UE", "UI", "Yu", "Eu", "EuI", "I",
)
NONE = "None"
ANY = "Any"

HANGUL_JAMO: Tuple[str, ...] = _consonants + _vowels + (NONE, ANY)

# --- Category member lists (local order = syllable block index order) ---
CHOSEONG: Tuple[str, ...] = (
    "Giyeok", "SsangGiyeok", "Nieun", "Digeut", "SsangDigeut", "Rieul",
    "Mieum", "Bieup", "SsangBieup", "Siot", "SsangSiot", "Ieung", "Jieut",
    "SsangJieut", "Chieut", "Kieuk", "Tieut", "Pieup", "Hieut",
)
JUNGSEONG: Tuple[str, ...] = _vowels
JONGSEONG: Tuple[str, ...] = (
    NONE, "Giyeok", "SsangGiyeok", "GiyeokSiot", "Nieun", "NieunJieut",
    "NieunHieut", "Digeut", "Rieul", "RieulGiyeok", "RieulMieum",
    "RieulBieup", "RieulSiot", "RieulTieut", "RieulPieup", "RieulHieut",
    "Mieum", "Bieup", "BieupSiot", "Siot", "SsangSiot", "Ieung", "Jieut",
    "Chieut", "Kieuk", "Tieut", "Pieup", "Hieut",
)

CONVERSIONS: Dict[Category, Tuple[str, ...]] = {
    Category.CHOSEONG: CHOSEONG,
    Category.JUNGSEONG: JUNGSEONG,
    Category.JONGSEONG: JONGSEONG,
}


def _index_map(seq: Sequence[str]) -> Dict[str, int]:
    """symbol -> position. Later duplicates are detected by the caller via len()."""
    return {sym: i for i, sym in enumerate(seq)}


class VocabularyRegistry:
    """
    Read-only view over a master list and its category subsets.

    Nothing is validated against the master list here; the table builder does
    the closed-world check so that a bad configuration aborts the build as a whole.
    """

    def __init__(self, master: Sequence[str], conversions: Mapping[Category, Sequence[str]]):
        self._master: Tuple[str, ...] = tuple(master)
        self._master_idx = _index_map(self._master)
        self._members: Dict[Category, Tuple[str, ...]] = {}
        self._local_idx: Dict[Category, Dict[str, int]] = {}
        # keep enum order regardless of the mapping's order
        for cat in Category:
            if cat in conversions:
                members = tuple(conversions[cat])
                self._members[cat] = members
                self._local_idx[cat] = _index_map(members)

    def __len__(self) -> int:
        return len(self._master)

    def __iter__(self) -> Iterator[str]:
        return iter(self._master)

    def __repr__(self) -> str:
        sizes = ", ".join(f"{c}={len(m)}" for c, m in self._members.items())
        return f"VocabularyRegistry(master={len(self._master)}, {sizes})"

    @property
    def master(self) -> Tuple[str, ...]:
        return self._master

    @property
    def categories(self) -> Tuple[Category, ...]:
        return tuple(self._members)

    def members(self, category: Category) -> Tuple[str, ...]:
        try:
            return self._members[category]
        except KeyError:
            raise UnknownSymbolError(f"Category '{category}' is not configured.") from None

    def has_duplicates(self, category: Optional[Category] = None) -> bool:
        if category is None:
            return len(self._master_idx) != len(self._master)
        return len(self._local_idx[category]) != len(self.members(category))

    def master_index_of(self, symbol: str) -> int:
        try:
            return self._master_idx[symbol]
        except KeyError:
            raise UnknownSymbolError(f"Jamo '{symbol}' is not declared in the master vocabulary.") from None

    def is_member(self, category: Category, symbol: str) -> bool:
        self.members(category)
        return symbol in self._local_idx[category]

    def local_index_of(self, category: Category, symbol: str) -> int:
        self.members(category)
        try:
            return self._local_idx[category][symbol]
        except KeyError:
            raise UnknownSymbolError(f"Jamo '{symbol}' is not a {category}.") from None

    def local_index_map(self, category: Category) -> Dict[str, int]:
        self.members(category)
        return dict(self._local_idx[category])


def default_registry() -> VocabularyRegistry:
    return VocabularyRegistry(HANGUL_JAMO, CONVERSIONS)
