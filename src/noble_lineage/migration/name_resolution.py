"""
Legacy monarch name -> canonical monarch id.

Older person records list monarchs as free text, usually in the form
``"Gustav Vasa (1523–1560)"``. This module maps such strings onto the
canonical registry with an explicit, ordered list of match strategies:

    1. exact          verbatim name equality
    2. parenthetical  "<Name> (<start>–<end>)": name containment either way
                      AND identical reign start/end years
    3. substring      case-insensitive containment either way, trailing
                      parenthetical removed
    4. word_set       every search word is part of some monarch word, or
                      contains one
    5. roman_numeral  "Gustav Vasa" vs "Gustav I Vasa": two words against
                      three, the middle one a Roman numeral

Each strategy is tried against the whole registry before the next one, so
a stronger match on a later monarch beats a weaker match on an earlier one.
No strategy raises; a name nothing matches resolves to None.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Optional, Sequence, Tuple

from noble_lineage.core.exceptions import RecordShapeError
from noble_lineage.dates.reign_dates import year_of
from noble_lineage.logging import get_logger
from noble_lineage.registry.build_records import build_monarchs
from noble_lineage.registry.entities import Monarch

log = get_logger("name_resolution")


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------

ROMAN_NUMERALS = frozenset(
    ["i", "ii", "iii", "iv", "v", "vi", "vii", "viii", "ix", "x", "xi", "xii", "xiii", "xiv", "xv"]
)

# En dash is what the legacy data uses; hyphen and em dash show up in hand edits.
_YEAR_RANGE_RE = re.compile(r"^(?P<name>.+?)\s*\((?P<start>\d{4})\s*[–—-]\s*(?P<end>\d{4})\)$")
_TRAILING_PAREN_RE = re.compile(r"\s*\([^)]*\)$")

DISPLAY_RANGE_DASH = "–"

Strategy = Callable[[str, Sequence[Monarch]], Optional[Monarch]]


@dataclass(slots=True, frozen=True)
class NameResolution:
    display_name: str
    monarch_id: Optional[str] = None
    strategy: Optional[str] = None

    @property
    def resolved(self) -> bool:
        return self.monarch_id is not None


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _search_name(display_name: str) -> str:
    return _TRAILING_PAREN_RE.sub("", display_name).strip().lower()


def _named(monarchs: Sequence[Monarch]) -> Iterable[Tuple[Monarch, str]]:
    for monarch in monarchs:
        name = (monarch.name or "").strip().lower()
        if name:
            yield monarch, name


def format_monarch_display_name(monarch: Monarch) -> str:
    """Legacy display form: ``"Gustav I Vasa (1523–1560)"``."""
    return f"{monarch.name} ({year_of(monarch.reign_from)}{DISPLAY_RANGE_DASH}{year_of(monarch.reign_to)})"


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------

def match_exact_name(display_name: str, monarchs: Sequence[Monarch]) -> Optional[Monarch]:
    for monarch in monarchs:
        if monarch.name == display_name:
            return monarch
    return None


def match_parenthetical_years(display_name: str, monarchs: Sequence[Monarch]) -> Optional[Monarch]:
    m = _YEAR_RANGE_RE.match(display_name.strip())
    if not m:
        return None

    name = m.group("name").strip()
    start, end = int(m.group("start")), int(m.group("end"))

    for monarch in monarchs:
        if not monarch.name:
            continue
        if not (name in monarch.name or monarch.name in name):
            continue
        if year_of(monarch.reign_from) == start and year_of(monarch.reign_to) == end:
            return monarch
    return None


def match_substring(display_name: str, monarchs: Sequence[Monarch]) -> Optional[Monarch]:
    search = _search_name(display_name)
    if not search:
        return None
    for monarch, name in _named(monarchs):
        if search in name or name in search:
            return monarch
    return None


def match_word_set(display_name: str, monarchs: Sequence[Monarch]) -> Optional[Monarch]:
    search_words = _search_name(display_name).split()
    if not search_words:
        return None
    for monarch, name in _named(monarchs):
        monarch_words = name.split()
        if all(any(w in mw or mw in w for mw in monarch_words) for w in search_words):
            return monarch
    return None


def match_roman_numeral_infix(display_name: str, monarchs: Sequence[Monarch]) -> Optional[Monarch]:
    search_words = _search_name(display_name).split()
    if len(search_words) != 2:
        return None
    for monarch, name in _named(monarchs):
        monarch_words = name.split()
        if len(monarch_words) != 3 or monarch_words[1] not in ROMAN_NUMERALS:
            continue
        if search_words[0] == monarch_words[0] and search_words[1] == monarch_words[2]:
            return monarch
    return None


# Priority order is part of the contract.
MATCH_STRATEGIES: Tuple[Tuple[str, Strategy], ...] = (
    ("exact", match_exact_name),
    ("parenthetical", match_parenthetical_years),
    ("substring", match_substring),
    ("word_set", match_word_set),
    ("roman_numeral", match_roman_numeral_infix),
)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def resolve_monarch_name(
    display_name: str,
    monarchs: Iterable[Any],
    *,
    strategies: Sequence[Tuple[str, Strategy]] = MATCH_STRATEGIES,
) -> NameResolution:
    """Resolve one legacy display name, reporting which strategy matched."""
    if not isinstance(display_name, str):
        raise RecordShapeError(f"Monarch display name must be a string, got {type(display_name).__name__}")

    registry = build_monarchs(monarchs)
    if not display_name.strip():
        return NameResolution(display_name=display_name)

    for strategy_name, strategy in strategies:
        monarch = strategy(display_name, registry)
        if monarch is not None:
            log.debug("Resolved %r -> %s via %s", display_name, monarch.id, strategy_name)
            return NameResolution(display_name, monarch.id, strategy_name)

    return NameResolution(display_name=display_name)


def resolve_monarch_name_to_id(display_name: str, monarchs: Iterable[Any]) -> Optional[str]:
    return resolve_monarch_name(display_name, monarchs).monarch_id


def convert_monarch_names_to_ids(names: Iterable[str], monarchs: Iterable[Any]) -> List[str]:
    """
    Resolve a list of legacy names, dropping (and logging) unresolved ones.
    The result is de-duplicated, first occurrence wins.
    """
    registry = build_monarchs(monarchs)
    ids: List[str] = []
    for name in names:
        monarch_id = resolve_monarch_name_to_id(name, registry)
        if monarch_id is None:
            log.warning("Could not find monarch id for %r", name)
            continue
        if monarch_id not in ids:
            ids.append(monarch_id)
    return ids
