"""
nuclidetable - Elements, Isotopes and Decay Modes.

A compiled-in catalog of the 118 chemical elements plus the free neutron:

- **Nuclides**: symbol, localized names, period, group, block, category,
  melting and boiling points, discovery, biological role
- **Isotopes**: mass number, natural abundance, decay channels and halflife
- **Decay modes**: alpha, beta, electron capture, neutron emission and the
  non-transmuting channels, each with its (ΔZ, ΔA)

Quick Start:
    >>> from nuclidetable import get_catalog
    >>> catalog = get_catalog()
    >>> uranium = catalog.get_by_symbol("U")
    >>> u238 = uranium[238]
    >>> print(f"U-238 half-life: {u238.get_halflife_text()}")
    >>> for flag, z, a in u238.get_decay_products():
    ...     print(f"{flag.symbol} -> {catalog[z].symbol}-{a}")

References:
    Atomic weights: IUPAC Commission on Isotopic Abundances and Atomic Weights
        https://www.ciaaw.org

    NUBASE2020: Kondev et al., Chinese Physics C 45, 030001 (2021)
        DOI: 10.1088/1674-1137/abddae
"""

from .config import Config, setup_logging
from .decay import Decay, DECAY_CODES, DECAY_SYMBOLS
from .isotope import Isotope, Origin, format_halflife
from .nuclide import Category, Nuclide, Nutrition, State
from .catalog import Catalog, get_catalog
from .formatters import format_fixed_width, format_html_cells, format_json
from .plotting import plot_isotope_chart, plot_periodic_table
from .exceptions import (
    NuclideTableError,
    InvalidIsotopeError,
    NuclideOutOfRangeError,
    CatalogIntegrityError,
)

__version__ = "1.0.0"
__author__ = "Nuclide Table Contributors"

__all__ = [
    # Core classes
    "Catalog",
    "get_catalog",
    "Nuclide",
    "Isotope",
    "Decay",
    "DECAY_CODES",
    "DECAY_SYMBOLS",
    "Origin",
    "Category",
    "Nutrition",
    "State",
    "format_halflife",
    # Output
    "format_fixed_width",
    "format_json",
    "format_html_cells",
    # Plotting
    "plot_periodic_table",
    "plot_isotope_chart",
    # Configuration
    "Config",
    "setup_logging",
    # Exceptions
    "NuclideTableError",
    "InvalidIsotopeError",
    "NuclideOutOfRangeError",
    "CatalogIntegrityError",
]
