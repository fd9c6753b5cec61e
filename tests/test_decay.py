"""Tests for the decay code table."""

import pytest
from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from nuclidetable.decay import (
    Decay,
    DECAY_CODES,
    DECAY_MODE_COUNT,
    DECAY_ORDER,
    DECAY_SYMBOLS,
)
from nuclidetable.exceptions import InvalidIsotopeError, NuclideOutOfRangeError
from nuclidetable.terms import DECAY_MODE_NAMES


class TestCodeTable:
    """Tests for the positional alignment of codes, symbols and flags."""

    def test_eleven_modes(self):
        """Test that every table has one entry per decay mode."""
        assert DECAY_MODE_COUNT == 11
        assert len(DECAY_ORDER) == 11
        assert len(DECAY_CODES) == 11
        assert len(DECAY_SYMBOLS) == 11

    def test_codes_are_unique(self):
        """Test that codes map one-to-one onto flags."""
        assert len(set(DECAY_CODES)) == len(DECAY_CODES)
        for ix, code in enumerate(DECAY_CODES):
            assert Decay.from_codes(code) == DECAY_ORDER[ix]

    def test_flags_are_single_bits(self):
        """Test that each flag is a distinct power of two."""
        values = [flag.value for flag in DECAY_ORDER]
        assert len(set(values)) == len(values)
        for value in values:
            assert value & (value - 1) == 0

    def test_canonical_order(self):
        """Test that the canonical order puts IT before IC."""
        assert DECAY_CODES == "apbBeEngTCF"
        assert Decay.ISOMERIC_TRANSITION.code == "T"
        assert Decay.INTERNAL_CONVERSION.code == "C"
        assert Decay.ISOMERIC_TRANSITION.symbol == "IT"
        assert Decay.INTERNAL_CONVERSION.symbol == "IC"

    def test_index_round_trip(self):
        """Test that from_index inverts index for every mode."""
        for ix in range(DECAY_MODE_COUNT):
            assert Decay.from_index(ix).index == ix

    def test_mode_names_aligned(self):
        """Test that localized mode names follow the canonical order."""
        for names in DECAY_MODE_NAMES.values():
            assert len(names) == DECAY_MODE_COUNT
        assert DECAY_MODE_NAMES["en"][Decay.ISOMERIC_TRANSITION.index] == "Isomeric transition"
        assert DECAY_MODE_NAMES["en"][Decay.INTERNAL_CONVERSION.index] == "Internal Conversion"


class TestFromCodes:
    """Tests for parsing decay code strings."""

    def test_empty_is_stable(self):
        """Test that an empty code string means stable."""
        assert Decay.from_codes("") == Decay.NONE
        assert Decay.NONE.codes == ""

    def test_union(self):
        """Test that several codes combine into one flag set."""
        mode = Decay.from_codes("aBF")
        assert Decay.ALPHA in mode
        assert Decay.DOUBLE_BETA in mode
        assert Decay.SPONTANEOUS_FISSION in mode
        assert Decay.BETA_MINUS not in mode

    def test_codes_render_in_canonical_order(self):
        """Test that input order does not matter."""
        assert Decay.from_codes("gep").codes == "peg"
        assert Decay.from_codes("ba").codes == "ab"

    def test_repeated_codes(self):
        """Test that repeating a code is harmless."""
        assert Decay.from_codes("bb") == Decay.BETA_MINUS

    def test_unknown_code(self):
        """Test that an unknown character raises InvalidIsotopeError."""
        with pytest.raises(InvalidIsotopeError, match="Unknown decay code"):
            Decay.from_codes("ax")


class TestDeltas:
    """Tests for the (ΔZ, ΔA) of each channel."""

    @pytest.mark.parametrize("flag,delta", [
        (Decay.ALPHA, (-2, -4)),
        (Decay.BETA_PLUS, (-1, 0)),
        (Decay.BETA_MINUS, (1, 0)),
        (Decay.DOUBLE_BETA, (2, 0)),
        (Decay.ELECTRON_CAPTURE, (-1, 0)),
        (Decay.DOUBLE_ELECTRON_CAPTURE, (-2, 0)),
        (Decay.NEUTRON_EMISSION, (0, -1)),
    ])
    def test_transmuting_channels(self, flag, delta):
        """Test the nucleon changes of the transmuting channels."""
        assert flag.delta == delta
        assert flag.transmutes

    @pytest.mark.parametrize("flag", [
        Decay.GAMMA,
        Decay.ISOMERIC_TRANSITION,
        Decay.INTERNAL_CONVERSION,
        Decay.SPONTANEOUS_FISSION,
    ])
    def test_channels_without_product(self, flag):
        """Test that gamma, IT, IC and SF have no single product."""
        assert flag.delta is None
        assert not flag.transmutes


class TestIndexErrors:
    """Tests for out-of-range and composite lookups."""

    @pytest.mark.parametrize("index", [-1, 11, 100])
    def test_from_index_out_of_range(self, index):
        """Test that an index outside 0..10 raises."""
        with pytest.raises(NuclideOutOfRangeError):
            Decay.from_index(index)

    def test_composite_has_no_index(self):
        """Test that a multi-channel set has no single index."""
        with pytest.raises(NuclideOutOfRangeError):
            Decay.from_codes("ab").index

    def test_flags_in_order(self):
        """Test that flags() lists members canonically."""
        assert Decay.from_codes("Fa").flags() == (Decay.ALPHA, Decay.SPONTANEOUS_FISSION)
        assert Decay.NONE.flags() == ()
