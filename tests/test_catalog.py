"""Tests for the catalog: table invariants, lookups, long table and DataFrames."""

import logging

import pandas as pd
import pytest
from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from nuclidetable import Catalog, get_catalog
from nuclidetable.config import Config
from nuclidetable.elements_data import NUCLIDE_DATA
from nuclidetable.exceptions import (
    CatalogIntegrityError,
    InvalidIsotopeError,
    NuclideOutOfRangeError,
)


LONG_TABLE = [
    "H " + ". " * 30 + "He",
    "LiBe" + ". " * 24 + "B C N O F Ne",
    "NaMg" + ". " * 24 + "AlSiP S ClAr",
    "K Ca" + ". " * 14 + "ScTiV CrMnFeCoNiCuZnGaGeAsSeBrKr",
    "RbSr" + ". " * 14 + "Y ZrNbMoTcRuRhPdAgCdInSnSbTeI Xe",
    "CsBaLaCePrNdPmSmEuGdTbDyHoErTmYbLuHfTaW ReOsIrPtAuHgTlPbBiPoAtRn",
    "FrRaAcThPaU NpPuAmCmBkCfEsFmMdNoLrRfDbSgBhHsMtDsRgCnNhFlMcLvTsOg",
]


@pytest.fixture
def catalog():
    return get_catalog()


class TestTableInvariants:
    """Tests for invariants that hold over the whole catalog."""

    def test_size(self, catalog):
        """Test the catalog holds the neutron and 118 elements."""
        assert len(catalog) == 119
        assert len(list(catalog.get_elements())) == 118

    def test_z_matches_position(self, catalog):
        """Test every nuclide sits at its atomic number."""
        for z, nuclide in enumerate(catalog):
            assert nuclide.z == z

    def test_symbols_unique(self, catalog):
        """Test symbols are unique and one to three characters long."""
        symbols = [n.symbol for n in catalog]
        assert len(set(symbols)) == len(symbols)
        assert all(1 <= len(s) <= 3 for s in symbols)

    def test_isotope_charge(self, catalog):
        """Test every isotope carries its nuclide's Z and A >= Z."""
        for nuclide in catalog:
            for iso in nuclide.isotopes:
                assert iso.z == nuclide.z
                assert iso.a >= max(iso.z, 1)

    def test_stability_consistent(self, catalog):
        """Test stable means no halflife and no decay mode."""
        for iso in catalog.get_isotopes():
            assert iso.is_stable == (iso.halflife is None)
            assert iso.is_stable == (iso.decay_code == "")

    def test_abundance_totals(self, catalog):
        """Test natural abundances add up to about 0 or 100 percent."""
        for nuclide in catalog.get_elements():
            total = sum(iso.abundance for iso in nuclide.isotopes if iso.is_natural)
            assert total < 0.05 or 99.5 < total < 101.0, nuclide.symbol

    def test_products_in_range(self, catalog):
        """Test every decay product lies inside the catalog."""
        for iso in catalog.get_isotopes():
            for _, z, a in iso.get_decay_products():
                assert 0 <= z <= 118
                assert a >= 0

    def test_element_stability(self, catalog):
        """Test element stability is the minimum over its isotopes."""
        for nuclide in catalog.get_elements():
            expected = min((iso.stability_index for iso in nuclide.isotopes), default=5)
            assert nuclide.stability_index == expected

    def test_neutron_first(self, catalog):
        """Test the neutron leads the table but is not an element."""
        assert catalog.table[0].symbol == "n"
        assert next(catalog.get_elements()).symbol == "H"
        assert next(catalog.get_isotopes()).z == 1


class TestLookups:
    """Tests for lookups by Z and symbol."""

    def test_by_z(self, catalog):
        """Test indexing by atomic number."""
        assert catalog[26].symbol == "Fe"
        assert catalog[118].symbol == "Og"

    @pytest.mark.parametrize("z", [-1, 119, 500])
    def test_by_z_out_of_range(self, catalog, z):
        """Test indexing outside 0..118 raises."""
        with pytest.raises(NuclideOutOfRangeError):
            catalog[z]

    def test_by_symbol(self, catalog):
        """Test lookup by symbol."""
        assert catalog.get_by_symbol("W").z == 74
        assert catalog.get_by_symbol("n").z == 0

    def test_by_symbol_missing(self, catalog):
        """Test an unknown symbol gives None."""
        assert catalog.get_by_symbol("Xy") is None

    def test_by_symbol_case_sensitive(self, catalog):
        """Test symbols are matched exactly."""
        assert catalog.get_by_symbol("fe") is None

    def test_shared_instance(self):
        """Test get_catalog returns one shared catalog."""
        assert get_catalog() is get_catalog()


class TestLongTable:
    """Tests for the 32-column periodic table."""

    def test_golden(self, catalog):
        """Test the exact seven lines."""
        assert list(catalog.get_long_table()) == LONG_TABLE

    def test_width(self, catalog):
        """Test every line spans 32 two-character cells."""
        for line in catalog.get_long_table():
            assert len(line) == 64


class TestNameLengths:
    """Tests for cached name widths and translation counts."""

    def test_languages_cached(self, catalog):
        """Test a width is cached for every configured language."""
        assert set(catalog.max_name_lengths) == set(Config.LANGUAGES)

    def test_english_width(self, catalog):
        """Test the longest English name."""
        longest = max(len(n.name) for n in catalog)
        assert catalog.max_name_length("en") == longest

    def test_uncached_language(self, catalog):
        """Test an uncached language is computed on demand."""
        assert catalog.max_name_length("xx") == catalog.max_name_length("en")

    def test_translation_counts(self, catalog):
        """Test the number of translations per language."""
        counts = catalog.translation_counts()
        assert counts == {
            "de": 43, "en-GB": 1, "en-US": 2, "es": 118,
            "fr": 52, "it": 113, "ru": 119,
        }


class TestDataFrames:
    """Tests for pandas exports."""

    def test_nuclides_frame(self, catalog):
        """Test one row per nuclide."""
        df = catalog.to_dataframe()
        assert len(df) == 119
        assert df.loc[26, "symbol"] == "Fe"
        assert df.loc[26, "block"] == "d"

    def test_nuclides_frame_localized(self, catalog):
        """Test localized names in the frame."""
        df = catalog.to_dataframe("de")
        assert df.loc[26, "name"] == "Eisen"

    def test_isotopes_frame(self, catalog):
        """Test one row per isotope with products."""
        df = catalog.isotopes_dataframe()
        assert len(df) == sum(len(n.isotopes) for n in catalog.get_elements())
        u238 = df[(df["Z"] == 92) & (df["A"] == 238)].iloc[0]
        assert u238["products"] == "α Th-234; β−β− Pu-238"
        assert u238["decay_code"] == "aBF"
        assert u238["N"] == 146

    def test_isotopes_frame_neutron(self, catalog):
        """Test the neutron is listed only on request."""
        assert (catalog.isotopes_dataframe()["Z"] == 0).sum() == 0
        df = catalog.isotopes_dataframe(include_neutron=True)
        neutron = df[df["Z"] == 0].iloc[0]
        assert neutron["products"] == "β− H-1"
        assert neutron["halflife"] == "10.17 m"

    def test_isotopes_frame_halflife_text(self, catalog):
        """Test localized halflife text."""
        df = catalog.isotopes_dataframe("de")
        tritium = df[(df["Z"] == 1) & (df["A"] == 3)].iloc[0]
        assert tritium["halflife"] == "12,32 a"
        assert pd.isna(df[(df["Z"] == 26) & (df["A"] == 56)].iloc[0]["halflife_s"])


class TestConstruction:
    """Tests for building catalogs from rows."""

    def test_small_catalog(self):
        """Test a catalog of the first three rows."""
        small = Catalog(NUCLIDE_DATA[:3])
        assert len(small) == 3
        assert list(small.get_long_table()) == ["H " + ". " * 30 + "He"]

    def test_gap(self):
        """Test a row out of position is rejected."""
        with pytest.raises(CatalogIntegrityError) as exc_info:
            Catalog(NUCLIDE_DATA[1:3])
        assert exc_info.value.z == 1

    def test_duplicate_symbol(self):
        """Test duplicate symbols are rejected."""
        rows = [NUCLIDE_DATA[0], NUCLIDE_DATA[1], dict(NUCLIDE_DATA[2], symbol="H")]
        with pytest.raises(CatalogIntegrityError, match="duplicate"):
            Catalog(rows)

    def test_long_symbol(self):
        """Test symbols longer than three characters are rejected."""
        rows = [NUCLIDE_DATA[0], dict(NUCLIDE_DATA[1], symbol="Hydr")]
        with pytest.raises(CatalogIntegrityError, match="symbol"):
            Catalog(rows)

    def test_bad_abundance_total(self):
        """Test abundances that add up to neither 0 nor 100 percent."""
        rows = [NUCLIDE_DATA[0], dict(NUCLIDE_DATA[1], isotopes=[(1, 50.0), (2, 0.015)])]
        with pytest.raises(CatalogIntegrityError, match="abundances"):
            Catalog(rows)

    def test_bad_isotope(self):
        """Test a contradictory isotope aborts the build."""
        rows = [NUCLIDE_DATA[0], dict(NUCLIDE_DATA[1], isotopes=[(1, 100.0, "b", -1.0, "s")])]
        with pytest.raises(InvalidIsotopeError):
            Catalog(rows)

    def test_build_logged(self, caplog):
        """Test the build is logged at INFO."""
        with caplog.at_level(logging.INFO, logger="nuclidetable"):
            Catalog(NUCLIDE_DATA[:3])
        assert "Built catalog: 3 nuclides" in caplog.text

    def test_repr(self):
        """Test the catalog repr."""
        assert repr(Catalog(NUCLIDE_DATA[:2])) == "Catalog(2 nuclides)"
