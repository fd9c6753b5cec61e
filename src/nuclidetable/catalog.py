"""
The catalog: an immutable, Z-indexed table of every nuclide.

The catalog is built in one pass from :data:`elements_data.NUCLIDE_DATA`.
Building either succeeds completely or raises; no partly built catalog is
ever visible. After the build nothing in it changes, so any number of
readers may share it.

Example:
    >>> from nuclidetable import get_catalog
    >>> catalog = get_catalog()
    >>> catalog.get_by_symbol("W").z
    74
    >>> catalog.get_by_symbol("Xy") is None
    True
    >>> for line in catalog.get_long_table():
    ...     print(line)
"""

from __future__ import annotations

import types
from collections import Counter
from functools import lru_cache
from typing import Iterable, Iterator, Mapping, Sequence

import pandas as pd

from .config import Config, get_logger
from .elements_data import NUCLIDE_DATA
from .exceptions import CatalogIntegrityError, NuclideOutOfRangeError
from .isotope import Isotope
from .nuclide import Nuclide

logger = get_logger("catalog")

__all__ = [
    "Catalog",
    "get_catalog",
]

# Natural abundances of a nuclide must add up to about nothing or about 100%
_ABUNDANCE_NONE_MAX = 0.05
_ABUNDANCE_FULL_RANGE = (99.5, 101.0)


def _build_isotope(z: int, entry: Sequence) -> Isotope:
    if len(entry) == 2:
        a, abundance = entry
        return Isotope.stable(z, a, abundance)
    a, abundance, codes, halflife, unit = entry
    return Isotope.radioactive(z, a, abundance, codes, halflife, unit)


def _build_nuclide(row: Mapping) -> Nuclide:
    fields = dict(row)
    z = fields["z"]
    isotopes = [_build_isotope(z, entry) for entry in fields.pop("isotopes", ())]
    return Nuclide(isotopes=isotopes, **fields)


def _validate(position: int, nuclide: Nuclide) -> None:
    if nuclide.z != position:
        raise CatalogIntegrityError(nuclide.z, f"found at position {position}")
    if not 1 <= len(nuclide.symbol) <= 3:
        raise CatalogIntegrityError(nuclide.z, f"symbol {nuclide.symbol!r} must have 1 to 3 characters")

    total = sum(iso.abundance for iso in nuclide.isotopes if iso.is_natural)
    low, high = _ABUNDANCE_FULL_RANGE
    if not (total < _ABUNDANCE_NONE_MAX or low < total < high):
        raise CatalogIntegrityError(nuclide.z, f"natural abundances add up to {total:.4f}%")


class Catalog:
    """
    Immutable table of nuclides indexed by atomic number.

    Args:
        rows: Nuclide entries in Z order, shaped like ``NUCLIDE_DATA``.

    Raises:
        InvalidIsotopeError: If any isotope entry is contradictory.
        CatalogIntegrityError: If the table has gaps, bad symbols,
            duplicate symbols or implausible abundance totals.
    """

    def __init__(self, rows: Iterable[Mapping] = NUCLIDE_DATA):
        nuclides = []
        symbols = set()
        for position, row in enumerate(rows):
            nuclide = _build_nuclide(row)
            _validate(position, nuclide)
            if nuclide.symbol in symbols:
                raise CatalogIntegrityError(nuclide.z, f"duplicate symbol {nuclide.symbol!r}")
            symbols.add(nuclide.symbol)
            nuclides.append(nuclide)

        self._table: tuple[Nuclide, ...] = tuple(nuclides)

        for nuclide in self._table:
            nuclide.resolve_occurrence(self._table)

        self._max_name_lengths = types.MappingProxyType({
            lang: self._longest_name(lang) for lang in Config.LANGUAGES
        })

        isotope_count = sum(len(n.isotopes) for n in self._table)
        logger.info(f"Built catalog: {len(self._table)} nuclides, {isotope_count} isotopes")

    def __len__(self) -> int:
        return len(self._table)

    def __iter__(self) -> Iterator[Nuclide]:
        return iter(self._table)

    def __getitem__(self, z: int) -> Nuclide:
        if not 0 <= z < len(self._table):
            raise NuclideOutOfRangeError(f"No nuclide with Z={z} in the catalog", z=z)
        return self._table[z]

    def __repr__(self) -> str:
        return f"Catalog({len(self._table)} nuclides)"

    @property
    def table(self) -> tuple[Nuclide, ...]:
        """All nuclides, the neutron first."""
        return self._table

    def get_elements(self) -> Iterator[Nuclide]:
        """Yield the elements (Z >= 1) in Z order."""
        for nuclide in self._table[1:]:
            yield nuclide

    def get_isotopes(self) -> Iterator[Isotope]:
        """Yield the isotopes of every element in Z, then authored A, order."""
        for nuclide in self.get_elements():
            yield from nuclide.isotopes

    def get_by_symbol(self, symbol: str) -> Nuclide | None:
        """Find a nuclide by its exact, case-sensitive symbol."""
        for nuclide in self._table:
            if nuclide.symbol == symbol:
                return nuclide
        return None

    def get_long_table(self) -> Iterator[str]:
        """
        Yield the 32-column periodic table, one line per period.

        Each cell is two characters wide: the symbol, padded with a space
        when it has one letter, or ". " for an empty cell.
        """
        cells: list[str] = []
        row = 1
        column = 1
        for nuclide in self.get_elements():
            while row < nuclide.period:
                yield "".join(cells)
                cells = []
                row += 1
                column = 1

            while column < nuclide.long_column:
                cells.append(". ")
                column += 1

            column += 1
            cells.append(nuclide.symbol.ljust(2))

        yield "".join(cells)

    def _longest_name(self, lang: str) -> int:
        return max((len(n.get_name(lang)) for n in self._table), default=0)

    @property
    def max_name_lengths(self) -> Mapping[str, int]:
        """Longest nuclide name for each language in Config.LANGUAGES."""
        return self._max_name_lengths

    def max_name_length(self, lang: str) -> int:
        """Longest nuclide name for any language code."""
        if lang in self._max_name_lengths:
            return self._max_name_lengths[lang]
        return self._longest_name(lang)

    def translation_counts(self) -> dict[str, int]:
        """Number of localized names per language code, in first-seen order."""
        counts: Counter[str] = Counter()
        for nuclide in self._table:
            counts.update(nuclide.names.keys())
        return dict(counts)

    def to_dataframe(self, lang: str | None = None) -> pd.DataFrame:
        """
        One row per nuclide with its attributes and derived values.

        Args:
            lang: Language for names and category/state/occurrence terms.

        Returns:
            DataFrame indexed 0..118 by Z.
        """
        return pd.DataFrame([nuclide.to_dict(lang) for nuclide in self._table])

    def isotopes_dataframe(self, lang: str | None = None, include_neutron: bool = False) -> pd.DataFrame:
        """
        One row per isotope with its decay channels and products.

        Args:
            lang: Language for halflife text and occurrence names.
            include_neutron: Also list the free neutron (Z=0).

        Returns:
            DataFrame with columns Z, symbol, A, N, abundance, occurrence,
            decay_code, halflife_s, halflife, stability_index, products.
        """
        nuclides = self._table if include_neutron else self._table[1:]
        rows = []
        for nuclide in nuclides:
            for iso in nuclide.isotopes:
                products = "; ".join(
                    f"{flag.symbol} {self[z].symbol}-{a}" for flag, z, a in iso.get_decay_products()
                )
                rows.append({
                    "Z": iso.z,
                    "symbol": nuclide.symbol,
                    "A": iso.a,
                    "N": iso.n,
                    "abundance": iso.abundance,
                    "occurrence": iso.occurrence.get_name(lang),
                    "decay_code": iso.decay_code,
                    "halflife_s": iso.halflife,
                    "halflife": iso.get_halflife_text(lang),
                    "stability_index": iso.stability_index,
                    "products": products,
                })
        return pd.DataFrame(rows)


@lru_cache(maxsize=1)
def get_catalog() -> Catalog:
    """
    Return the shared catalog, building it on first use.

    Returns:
        The process-wide :class:`Catalog` instance.
    """
    return Catalog()
