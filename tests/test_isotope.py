"""Tests for isotopes: construction, transmutation, halflife text and occurrence."""

import pytest
from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from nuclidetable import get_catalog
from nuclidetable.config import Config
from nuclidetable.decay import Decay
from nuclidetable.exceptions import InvalidIsotopeError, NuclideOutOfRangeError
from nuclidetable.isotope import Isotope, Origin, format_halflife, stability_class


YEAR = Config.SECONDS_PER_YEAR


class TestConstruction:
    """Tests for isotope validation."""

    def test_stable(self):
        """Test a stable isotope has no halflife and no decay mode."""
        iso = Isotope.stable(26, 56, 91.75)
        assert iso.is_stable
        assert iso.is_natural
        assert iso.halflife is None
        assert iso.decay_mode == Decay.NONE
        assert iso.decay_code == ""
        assert iso.stability_index == 0
        assert iso.n == 30

    def test_radioactive(self):
        """Test a radioactive isotope converts its halflife to seconds."""
        iso = Isotope.radioactive(1, 3, 0.0, "b", 12.32, "y")
        assert not iso.is_stable
        assert iso.halflife == pytest.approx(12.32 * YEAR)
        assert iso.halflife_value == 12.32
        assert iso.time_unit == "y"
        assert iso.decay_mode == Decay.BETA_MINUS

    def test_synthetic(self):
        """Test that abundance None marks a synthetic isotope."""
        iso = Isotope.radioactive(26, 55, None, "e", 2.73, "y")
        assert not iso.is_natural
        assert iso.abundance is None

    def test_radioactive_requires_mode(self):
        """Test that radioactive() rejects an empty decay mode."""
        with pytest.raises(InvalidIsotopeError):
            Isotope.radioactive(1, 3, 0.0, "", 12.32, "y")

    def test_halflife_without_mode(self):
        """Test that a halflife on a stable isotope is rejected."""
        with pytest.raises(InvalidIsotopeError):
            Isotope(1, 3, 0.0, Decay.NONE, 12.32, "y")

    def test_mode_without_halflife(self):
        """Test that a decay mode without a halflife is rejected."""
        with pytest.raises(InvalidIsotopeError):
            Isotope(1, 3, 0.0, Decay.BETA_MINUS)

    @pytest.mark.parametrize("halflife", [0, -1.0])
    def test_non_positive_halflife(self, halflife):
        """Test that the halflife must be positive."""
        with pytest.raises(InvalidIsotopeError, match="positive"):
            Isotope.radioactive(1, 3, 0.0, "b", halflife, "y")

    @pytest.mark.parametrize("abundance", [-0.1, 100.5])
    def test_abundance_range(self, abundance):
        """Test that abundance must lie in 0..100."""
        with pytest.raises(InvalidIsotopeError):
            Isotope.stable(1, 1, abundance)

    def test_mass_below_charge(self):
        """Test that A < Z is rejected."""
        with pytest.raises(InvalidIsotopeError) as exc_info:
            Isotope.stable(26, 20, None)
        assert exc_info.value.z == 26
        assert exc_info.value.a == 20

    def test_unknown_time_unit(self):
        """Test that only the known time units are accepted."""
        with pytest.raises(InvalidIsotopeError, match="time unit"):
            Isotope.radioactive(1, 3, 0.0, "b", 12.32, "w")

    def test_repr(self):
        """Test the string forms."""
        iso = Isotope.stable(8, 16, 99.76)
        assert repr(iso) == "Isotope(z=8, a=16)"
        assert str(iso) == "Z=8, A=16"


class TestStabilityClass:
    """Tests for the 0..5 radioactivity scale."""

    def test_thresholds(self):
        """Test each bucket boundary."""
        assert stability_class(None) == 0
        assert stability_class(2000000.0 * YEAR) == 1
        assert stability_class(1999999.0 * YEAR) == 2
        assert stability_class(800.0 * YEAR) == 2
        assert stability_class(799.0 * YEAR) == 3
        assert stability_class(86400.0) == 3
        assert stability_class(86399.0) == 4
        assert stability_class(600.0) == 4
        assert stability_class(599.0) == 5

    def test_catalog_values(self):
        """Test stability of a few known isotopes."""
        catalog = get_catalog()
        assert catalog[92][238].stability_index == 1
        assert catalog[6][14].stability_index == 2
        assert catalog[118][294].stability_index == 5


class TestTransmute:
    """Tests for applying decay channels."""

    def test_tritium_beta(self):
        """Test H-3 beta minus decays to He-3."""
        tritium = get_catalog()[1][3]
        assert tritium.transmute(Decay.BETA_MINUS) == (2, 3)

    def test_by_index(self):
        """Test that a canonical index is accepted."""
        tritium = get_catalog()[1][3]
        assert tritium.transmute(Decay.BETA_MINUS.index) == (2, 3)

    def test_uranium_products(self):
        """Test U-238 alpha and double beta products; fission is skipped."""
        u238 = get_catalog()[92][238]
        assert list(u238.get_decay_indexes()) == [0, 3]
        products = list(u238.get_decay_products())
        assert products == [(Decay.ALPHA, 90, 234), (Decay.DOUBLE_BETA, 94, 238)]

    def test_indexes_restart(self):
        """Test that each call iterates from the start."""
        u238 = get_catalog()[92][238]
        assert list(u238.get_decay_indexes()) == list(u238.get_decay_indexes())

    def test_stable_has_no_indexes(self):
        """Test a stable isotope yields no decay indexes."""
        assert list(get_catalog()[26][56].get_decay_indexes()) == []

    def test_channel_not_present(self):
        """Test that a channel the isotope lacks raises."""
        tritium = get_catalog()[1][3]
        with pytest.raises(NuclideOutOfRangeError):
            tritium.transmute(Decay.ALPHA)

    def test_channel_without_product(self):
        """Test that gamma has no product."""
        iso = Isotope.radioactive(43, 96, None, "eg", 4.3, "d")
        with pytest.raises(NuclideOutOfRangeError):
            iso.transmute(Decay.GAMMA)

    def test_product_above_range(self):
        """Test that a product beyond Z=118 raises."""
        iso = Isotope.radioactive(118, 300, None, "b", 1.0, "s")
        with pytest.raises(NuclideOutOfRangeError) as exc_info:
            iso.transmute(Decay.BETA_MINUS)
        assert exc_info.value.z == 119

    def test_product_below_range(self):
        """Test that a product below Z=0 raises."""
        iso = Isotope.radioactive(1, 2, None, "E", 1.0, "s")
        with pytest.raises(NuclideOutOfRangeError):
            iso.transmute(Decay.DOUBLE_ELECTRON_CAPTURE)

    def test_neutron_decays_to_hydrogen(self):
        """Test the free neutron beta decays to a proton."""
        neutron = get_catalog()[0][1]
        assert neutron.transmute(Decay.BETA_MINUS) == (1, 1)


class TestHalflifeText:
    """Tests for localized halflife formatting."""

    def test_tritium_english(self):
        """Test years in English."""
        assert get_catalog()[1][3].get_halflife_text("en") == "12.32 y"

    def test_tritium_german(self):
        """Test German decimal comma and unit."""
        assert get_catalog()[1][3].get_halflife_text("de") == "12,32 a"

    def test_region_code_uses_base_language(self):
        """Test that en-GB formats like en."""
        assert get_catalog()[1][3].get_halflife_text("en-GB") == "12.32 y"

    def test_unknown_language_is_english(self):
        """Test fallback for an unknown language."""
        assert get_catalog()[1][3].get_halflife_text("xx") == "12.32 y"

    def test_minutes(self):
        """Test that an exact number of minutes drops the decimals."""
        assert format_halflife(600.0) == "10 m"

    def test_milliseconds_french(self):
        """Test milliseconds in French."""
        assert format_halflife(0.0451, "fr") == "45,1 ms"

    @pytest.mark.parametrize("seconds,text", [
        (59.99999, "1 m"),
        (0.99999, "1 s"),
        (3599.999, "1 h"),
        (86399.99, "1 d"),
    ])
    def test_rounding_moves_to_larger_unit(self, seconds, text):
        """Test a value that rounds up to the next unit is shown in that unit."""
        assert format_halflife(seconds) == text

    def test_rounding_stays_below_threshold(self):
        """Test values that do not round up keep their unit."""
        assert format_halflife(59.99) == "59.99 s"
        assert format_halflife(3599.0) == "59.98 m"

    def test_stable_is_empty(self):
        """Test a stable isotope has no halflife text."""
        assert format_halflife(None) == ""
        assert get_catalog()[26][56].get_halflife_text() == ""

    def test_very_long_halflife(self):
        """Test exponent notation for huge values."""
        assert format_halflife(2.2e24 * YEAR) == "2.2E+24 y"

    def test_digits(self):
        """Test the significant digit count."""
        assert format_halflife(4.468e9 * YEAR, digits=2) == "4500000000 y"
        assert format_halflife(4.468e9 * YEAR) == "4468000000 y"


class TestOccurrence:
    """Tests for natural origin classification."""

    def test_synthetic(self):
        """Test that isotopes without abundance are synthetic."""
        assert get_catalog()[26][55].occurrence == Origin.SYNTHETIC

    def test_primordial_stable(self):
        """Test that stable natural isotopes are primordial."""
        assert get_catalog()[26][56].occurrence == Origin.PRIMORDIAL

    def test_primordial_long_lived(self):
        """Test that U-238 has survived since the Earth formed."""
        assert get_catalog()[92][238].occurrence == Origin.PRIMORDIAL

    def test_technetium_is_decay(self):
        """Test natural technetium counts as a decay product."""
        assert get_catalog()[43][99].occurrence == Origin.DECAY

    def test_codes(self):
        """Test the occurrence code letters."""
        assert [o.code for o in Origin] == ["S", "C", "D", "P"]
        assert Origin.DECAY.get_name("de") == "Zerfall"


class TestSerialization:
    """Tests for the fixed-width and JSON renderings of one isotope."""

    def test_fixed_width_stable(self):
        """Test a stable isotope line."""
        line = get_catalog()[26][56].to_fixed_width_string("en")
        assert line.startswith(" 56  91.7500 P ")

    def test_fixed_width_german(self):
        """Test German decimal commas in a radioactive line."""
        line = get_catalog()[1][3].to_fixed_width_string("de")
        assert "0,0000" in line
        assert line.endswith("12,32 a")

    def test_json_stable(self):
        """Test that stable isotopes omit the decay fields."""
        text = get_catalog()[1][1].to_json_string()
        assert text == '{"z":1,"a":1,"abundance":99.985,"occurrenceIndex":3}'

    def test_json_radioactive(self):
        """Test that radioactive isotopes carry the authored halflife."""
        text = get_catalog()[1][3].to_json_string()
        assert '"decayFlags":4' in text
        assert '"halflife":12.32' in text
        assert '"timeUnit":"y"' in text

    def test_javascript_names(self):
        """Test unquoted property names."""
        assert get_catalog()[1][1].to_json_string("").startswith("{z:1,a:1,")
