"""Tests for whole-catalog renderings: fixed-width, JSON and HTML."""

import json

import pytest
from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from nuclidetable import get_catalog
from nuclidetable.formatters import (
    HTML_CATEGORY_CLASSES,
    format_fixed_width,
    format_html_cells,
    format_json,
    iter_fixed_width,
    iter_html_cells,
)


@pytest.fixture
def catalog():
    return get_catalog()


class TestFixedWidth:
    """Tests for the fixed-width listing."""

    def test_sections(self, catalog):
        """Test the listing has all four sections in order."""
        lines = list(iter_fixed_width(catalog, "en"))
        assert lines[0].startswith("; Z,symbol,name")
        assert lines[1].startswith("  0 n  Neutron")
        assert lines[119].startswith("118 Og ")
        assert lines[120] == ""
        assert lines[121].startswith("; Z,symbol,A,")

    def test_isotope_lines(self, catalog):
        """Test every isotope gets one line, the neutron included."""
        lines = list(iter_fixed_width(catalog, "en"))
        isotope_count = sum(len(n.isotopes) for n in catalog)
        start = 122
        isotope_lines = lines[start:start + isotope_count]
        assert isotope_lines[0].startswith("  0 n     1 ")
        assert isotope_lines[-1].startswith("118 Og  294 ")
        assert lines[start + isotope_count] == ""

    def test_ends_with_long_table(self, catalog):
        """Test the long table closes the listing."""
        lines = list(iter_fixed_width(catalog))
        assert lines[-7:] == list(catalog.get_long_table())

    def test_translation_section(self, catalog):
        """Test translation counts are listed."""
        text = format_fixed_width(catalog)
        assert "; language,totalTranslations" in text
        assert "\nru    119\n" in text
        assert "\nen-GB   1\n" in text

    def test_german(self, catalog):
        """Test German names and decimal commas."""
        text = format_fixed_width(catalog, "de")
        assert " 26 Fe Eisen " in text
        assert "12,32 a" in text

    def test_unknown_language_falls_back(self, catalog):
        """Test an unknown language lists like the default."""
        assert format_fixed_width(catalog, "xx") == format_fixed_width(catalog, "en")

    def test_language_case_ignored(self, catalog):
        """Test a listing language in any case uses its regional names."""
        text = format_fixed_width(catalog, "EN-us")
        assert text == format_fixed_width(catalog, "en-US")
        assert " 13 Al Aluminum " in text

    def test_name_column_aligned(self, catalog):
        """Test the period column lines up for every nuclide."""
        lines = list(iter_fixed_width(catalog, "en"))[1:120]
        width = catalog.max_name_length("en")
        for line, nuclide in zip(lines, catalog):
            assert line[7 + width + 1] == str(nuclide.period)


class TestJson:
    """Tests for the JSON rendering."""

    @pytest.fixture
    def data(self, catalog):
        return json.loads(format_json(catalog))

    def test_valid_json(self, data):
        """Test the document parses with all sections."""
        for key in [
            "categoryGroupNames", "categoryNames", "decayCodes", "decaySymbols",
            "biologyCodes", "biologyDescriptions", "occurrenceCodes", "occurrenceNames",
            "stabilityDescriptions", "stateCodes", "stateNames", "themeNames",
            "nuclideNames", "nuclides",
        ]:
            assert key in data

    def test_code_tables(self, data):
        """Test the code strings."""
        assert data["decayCodes"] == "apbBeEngTCF"
        assert data["decaySymbols"][0] == "α"
        assert data["occurrenceCodes"] == "SCDP"
        assert data["stateCodes"] == " SLG"

    def test_nuclides(self, data):
        """Test nuclide objects."""
        assert len(data["nuclides"]) == 119
        fe = data["nuclides"][26]
        assert fe["z"] == 26
        assert fe["symbol"] == "Fe"
        assert fe["block"] == "d"
        assert fe["melt"] == 1811.0
        assert fe["stableCount"] == 4

    def test_isotopes(self, data):
        """Test isotope objects keep the authored halflife."""
        tritium = data["nuclides"][1]["isotopes"][2]
        assert tritium == {
            "z": 1, "a": 3, "abundance": 0, "occurrenceIndex": tritium["occurrenceIndex"],
            "stabilityIndex": 3, "decayFlags": 4, "halflife": 12.32, "timeUnit": "y",
        }
        assert "halflife" not in data["nuclides"][1]["isotopes"][0]

    def test_missing_temperatures(self, data):
        """Test unknown melting points are null."""
        assert data["nuclides"][0]["melt"] is None

    def test_nuclide_names(self, data):
        """Test the names table keys and values."""
        names = data["nuclideNames"]
        assert set(names) == {"de", "en", "enGB", "enUS", "es", "fr", "it", "ru"}
        assert names["enUS"][13] == "Aluminum"
        assert names["de"][26] == "Eisen"
        assert all(len(row) == 119 for row in names.values())

    def test_javascript(self, catalog):
        """Test JavaScript mode leaves names unquoted."""
        text = format_json(catalog, javascript=True)
        assert text.startswith("{")
        assert "\n  nuclides =" in text
        assert "{ z:  1, " in text
        assert '"nuclides"' not in text


class TestHtml:
    """Tests for the HTML cells."""

    def test_one_cell_per_element(self, catalog):
        """Test 118 cells, the neutron excluded."""
        cells = list(iter_html_cells(catalog))
        assert len(cells) == 118
        assert len(format_html_cells(catalog).splitlines()) == 118

    def test_hydrogen_cell(self, catalog):
        """Test the content of the first cell."""
        cell = next(iter_html_cells(catalog))
        assert cell.startswith('<td onclick="cellClick()"><div class="NMeCat">')
        assert '<div class="Sb">H</div>' in cell
        assert '<div class="An">1</div>' in cell
        assert '<span style="display:none" lang="de">Wasserstoff</span>' in cell

    def test_category_classes(self):
        """Test one CSS class per category."""
        assert len(HTML_CATEGORY_CLASSES) == 10
