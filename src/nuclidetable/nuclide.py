"""
Nuclides: the chemical elements plus the neutron (Z=0).

A :class:`Nuclide` is built once from the compiled-in catalog data. Its
block, discovery era, stable isotope count and stability class are derived
at construction; its occurrence is settled when the catalog resolves the
occurrence of every isotope.

Example:
    >>> from nuclidetable import get_catalog
    >>> iron = get_catalog().get_by_symbol("Fe")
    >>> iron.block, iron.long_column, iron.get_state(300.0)
    ('d', 22, <State.SOLID: 1>)
    >>> iron.get_name("de")
    'Eisen'
"""

from __future__ import annotations

import enum
import types
from typing import Iterable, Mapping, Sequence

from .config import Config
from .isotope import Isotope, Origin
from .terms import (
    CATEGORY_ABBREVIATIONS,
    CATEGORY_NAMES,
    LIFE_CODES,
    LIFE_DESCRIPTIONS,
    STABILITY_DESCRIPTIONS,
    STATE_CODES,
    STATE_NAMES,
    format_fixed,
    localize,
)

__all__ = [
    "Category",
    "Nutrition",
    "State",
    "Nuclide",
    "block_of",
    "known_era",
]

# Last discovery year of each era; later discoveries fall in the final era
_ERA_ENDS: tuple[int, ...] = (0, 1789, 1869, 1923, 1945, 2000, 2012)


class Category(enum.IntEnum):
    """Region of the periodic table with similar traits."""

    ALKALI_METAL = 0
    ALKALINE_EARTH_METAL = 1
    LANTHANOID = 2
    ACTINOID = 3
    TRANSITION_METAL = 4
    POST_TRANSITION_METAL = 5
    METALLOID = 6
    NONMETAL = 7
    HALOGEN = 8
    NOBLE_GAS = 9

    @property
    def abbreviation(self) -> str:
        return CATEGORY_ABBREVIATIONS[self]

    def get_name(self, lang: str | None = None) -> str:
        return localize(CATEGORY_NAMES, lang)[self]


class Nutrition(enum.IntEnum):
    """Biological significance."""

    NONE = 0
    BULK_ESSENTIAL = 1    # one of the 11 elements making up 99.85% of body mass
    TRACE_ESSENTIAL = 2
    BENEFICIAL = 3
    ABSORBED = 4          # absorbed with no known benefit

    @property
    def code(self) -> str:
        return LIFE_CODES[self]

    def get_description(self, lang: str | None = None) -> str:
        return localize(LIFE_DESCRIPTIONS, lang)[self]


class State(enum.IntEnum):
    """Phase of matter; UNKNOWN when melt or boil data is missing."""

    UNKNOWN = 0
    SOLID = 1
    LIQUID = 2
    GAS = 3

    @property
    def code(self) -> str:
        return STATE_CODES[self]

    def get_name(self, lang: str | None = None) -> str:
        return localize(STATE_NAMES, lang)[self]


def block_of(z: int, group: int) -> str:
    """
    Periodic table block letter for an element.

    Helium sits in group 18 but fills an s orbital. The neutron has no block.

    Example:
        >>> block_of(2, 18), block_of(26, 8), block_of(92, 0)
        ('s', 'd', 'f')
    """
    if group == 0:
        return " " if z == 0 else "f"
    if group <= 2 or z == 2:
        return "s"
    if group >= 13:
        return "p"
    return "d"


def known_era(year: int) -> int:
    """
    Bucket a discovery year into eras 0..7.

    Era 0 is prehistoric (year 0). Eras end in 1789, 1869, 1923, 1945,
    2000 and 2012; anything later is era 7.
    """
    for era, last_year in enumerate(_ERA_ENDS):
        if year <= last_year:
            return era
    return len(_ERA_ENDS)


class Nuclide:
    """
    A chemical element, or the neutron at Z=0.

    Args:
        z: Atomic number.
        symbol: Chemical symbol (1 to 3 characters).
        name: Canonical (world English) name.
        category: Category member or its name.
        period: Periodic table row.
        group: Periodic table column, 0 for the f-block.
        weight: Standard atomic weight.
        isotopes: Isotopes in authored order.
        names: Localized names keyed by language code, only where they
            differ from ``name``.
        naming: Short etymology.
        melt: Melting point in kelvin, None if unknown.
        boil: Boiling point in kelvin, None if unknown.
        known: Year of discovery, 0 if prehistoric.
        credit: Discoverer credit.
        life: Nutrition member or its name.
    """

    def __init__(
        self,
        z: int,
        symbol: str,
        name: str,
        category: Category | str,
        period: int,
        group: int,
        weight: float,
        isotopes: Iterable[Isotope],
        names: Mapping[str, str] | None = None,
        naming: str = "",
        melt: float | None = None,
        boil: float | None = None,
        known: int = 0,
        credit: str | None = None,
        life: Nutrition | str = Nutrition.NONE,
    ):
        self._z = z
        self._symbol = symbol
        self._name = name
        self._category = Category[category] if isinstance(category, str) else Category(category)
        self._period = period
        self._group = group
        self._weight = float(weight)
        self._isotopes = tuple(isotopes)
        self._names = types.MappingProxyType(dict(names or {}))
        self._naming = naming
        self._melt = melt
        self._boil = boil
        self._known = known
        self._credit = credit
        self._life = Nutrition[life] if isinstance(life, str) else Nutrition(life)

        self._block = block_of(z, group)
        self._known_index = known_era(known)
        self._stable_count = sum(1 for iso in self._isotopes if iso.is_stable)
        self._stability_index = min((iso.stability_index for iso in self._isotopes), default=5)
        self._occurrence: Origin | None = None

    def __repr__(self) -> str:
        return f"Nuclide(z={self._z}, symbol={self._symbol!r})"

    def __str__(self) -> str:
        return self._symbol

    def __getitem__(self, a: int) -> Isotope | None:
        """First isotope with mass number ``a``, or None."""
        for iso in self._isotopes:
            if iso.a == a:
                return iso
        return None

    @property
    def z(self) -> int:
        return self._z

    @property
    def symbol(self) -> str:
        return self._symbol

    @property
    def name(self) -> str:
        return self._name

    @property
    def names(self) -> Mapping[str, str]:
        """Read-only map of language code to localized name."""
        return self._names

    @property
    def period(self) -> int:
        return self._period

    @property
    def group(self) -> int:
        return self._group

    @property
    def block(self) -> str:
        return self._block

    @property
    def category(self) -> Category:
        return self._category

    @property
    def category_index(self) -> int:
        return int(self._category)

    @property
    def category_abbr(self) -> str:
        return self._category.abbreviation

    @property
    def melt(self) -> float | None:
        return self._melt

    @property
    def boil(self) -> float | None:
        return self._boil

    @property
    def weight(self) -> float:
        return self._weight

    @property
    def known(self) -> int:
        return self._known

    @property
    def known_index(self) -> int:
        return self._known_index

    @property
    def credit(self) -> str | None:
        return self._credit

    @property
    def naming(self) -> str:
        return self._naming

    @property
    def life(self) -> Nutrition:
        return self._life

    @property
    def life_index(self) -> int:
        return int(self._life)

    @property
    def life_code(self) -> str:
        return self._life.code

    @property
    def isotopes(self) -> tuple[Isotope, ...]:
        return self._isotopes

    @property
    def stable_count(self) -> int:
        return self._stable_count

    @property
    def stability_index(self) -> int:
        """0 if any isotope is stable, else 1..5 from the longest halflife."""
        return self._stability_index

    def get_stability_description(self, lang: str | None = None) -> str:
        return localize(STABILITY_DESCRIPTIONS, lang)[self._stability_index]

    @property
    def long_column(self) -> int:
        """Column (1..32) in the long-form periodic table."""
        if self._group > 2:
            return self._group + 14
        if self._group > 0:
            return self._group
        if self._z >= 89:
            return self._z - 86
        return self._z - 54

    @property
    def occurrence(self) -> Origin:
        """The most natural origin among this nuclide's isotopes."""
        if self._occurrence is None:
            self._occurrence = max(
                (iso.occurrence for iso in self._isotopes), default=Origin.SYNTHETIC
            )
        return self._occurrence

    @property
    def occurrence_index(self) -> int:
        return int(self.occurrence)

    @property
    def occurrence_code(self) -> str:
        return self.occurrence.code

    def resolve_occurrence(self, table: Sequence["Nuclide"]) -> Origin:
        """Settle the occurrence of every isotope against a nuclide table."""
        self._occurrence = max(
            (iso.resolve_occurrence(table) for iso in self._isotopes), default=Origin.SYNTHETIC
        )
        return self._occurrence

    def get_state(self, kelvin: float) -> State:
        """
        Phase of the element at a temperature.

        Args:
            kelvin: Temperature in kelvin.

        Returns:
            SOLID below the melting point, GAS at or above the boiling point,
            LIQUID in between, UNKNOWN when the data cannot decide.
        """
        if self._melt is not None and kelvin < self._melt:
            return State.SOLID
        if self._boil is not None:
            if kelvin >= self._boil:
                return State.GAS
            if self._melt is not None and kelvin >= self._melt:
                return State.LIQUID
        return State.UNKNOWN

    @property
    def state_at_0c(self) -> State:
        return self.get_state(Config.STANDARD_TEMPERATURE)

    @property
    def state_at_0c_index(self) -> int:
        return int(self.state_at_0c)

    @property
    def state_at_0c_code(self) -> str:
        return self.state_at_0c.code

    def get_name(self, lang: str | None = None) -> str:
        """
        Localized name of the element.

        The language code must match a stored key exactly, ignoring case.
        A region code such as "en-US" does not fall back to "en"; when
        nothing matches, the canonical name is returned.

        Example:
            >>> from nuclidetable import get_catalog
            >>> al = get_catalog()[13]
            >>> al.get_name("en-US"), al.get_name("en-AU")
            ('Aluminum', 'Aluminium')
        """
        if lang:
            wanted = lang.casefold()
            for code, name in self._names.items():
                if code.casefold() == wanted:
                    return name
        return self._name

    def to_dict(self, lang: str | None = None) -> dict:
        """Flat dictionary of the nuclide's attributes and derived values."""
        return {
            "Z": self._z,
            "symbol": self._symbol,
            "name": self.get_name(lang),
            "period": self._period,
            "group": self._group,
            "block": self._block,
            "long_column": self.long_column,
            "category": self._category.get_name(lang),
            "weight": self._weight,
            "melt_K": self._melt,
            "boil_K": self._boil,
            "state_at_0C": self.state_at_0c.get_name(lang),
            "discovered": self._known,
            "discovery_era": self._known_index,
            "credit": self._credit,
            "naming": self._naming,
            "life": self._life.get_description(lang),
            "occurrence": self.occurrence.get_name(lang),
            "isotope_count": len(self._isotopes),
            "stable_count": self._stable_count,
            "stability_index": self._stability_index,
        }

    def to_fixed_width_string(self, lang: str | None = None, name_width: int | None = None) -> str:
        """
        One line of narrow fixed-width columns.

        Columns: Z, symbol, name, period, group, category, discovery year,
        discovery era, stable count, stability, block, occurrence, life,
        state at 0 °C, melt, boil, weight.

        Args:
            lang: Language for the name and decimal separator.
            name_width: Width of the name column; defaults to the longest
                name in the catalog for ``lang``.
        """
        name = self.get_name(lang)
        if name_width is None:
            from .catalog import get_catalog
            name_width = get_catalog().max_name_length(lang or "en")

        melt = "" if self._melt is None else format_fixed(self._melt, 3, lang)
        boil = "" if self._boil is None else format_fixed(self._boil, 3, lang)
        weight = format_fixed(self._weight, 3, lang)
        return (
            f"{self._z:>3} {self._symbol:<3}{name:<{name_width + 1}}"
            f"{self._period}{self._group:>3} {self.category_abbr:<9}"
            f"{self._known:>4} {self._known_index}{self._stable_count:>3} "
            f"{self._stability_index} {self._block} {self.occurrence_code} "
            f"{self.life_code:<3}{self.state_at_0c_code}"
            f"{melt:>9}{boil:>9}{weight:>8}"
        )

    def to_json_string(self, quote: str = '"') -> str:
        """
        Render the nuclide's properties as the body of a JSON object.

        The surrounding braces are left to the caller so the columns of
        consecutive nuclides line up.

        Args:
            quote: Delimiter for property names; pass "" for JavaScript.
        """
        q = quote
        melt = "null" if self._melt is None else f"{self._melt:.3f}"
        boil = "null" if self._boil is None else f"{self._boil:.3f}"
        isotopes = ", ".join(iso.to_json_string(quote) for iso in self._isotopes)
        return (
            f"{q}z{q}:{self._z:>3}, "
            f"{q}symbol{q}: \"{self._symbol}\",{' ' * (3 - len(self._symbol))}"
            f"{q}period{q}: {self._period}, "
            f"{q}group{q}:{self._group:>2}, "
            f"{q}categoryIndex{q}: {self.category_index}, "
            f"{q}block{q}: \"{self._block}\", "
            f"{q}occurrenceIndex{q}: {self.occurrence_index}, "
            f"{q}lifeIndex{q}: {self.life_index}, "
            f"{q}discoveryYear{q}:{self._known:>5}, "
            f"{q}discoveryIndex{q}: {self._known_index}, "
            f"{q}stateIndex{q}: {self.state_at_0c_index}, "
            f"{q}melt{q}:{melt:>9}, "
            f"{q}boil{q}:{boil:>9}, "
            f"{q}weight{q}:{self._weight:>8.3f}, "
            f"{q}stableCount{q}:{self._stable_count:>2}, "
            f"{q}stabilityIndex{q}: {self._stability_index}, "
            f"{q}isotopes{q}: [{isotopes}]"
        )
