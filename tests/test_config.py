"""
Tests for configuration, logging, exceptions and localized term tables.
"""

import logging
import os

import pytest
from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


# =============================================================================
# Config Tests
# =============================================================================

class TestConfig:
    """Test the Config class."""

    def test_defaults(self):
        """Test the fixed constants."""
        from nuclidetable.config import Config
        assert Config.SECONDS_PER_YEAR == 31556952.0
        assert Config.STANDARD_TEMPERATURE == 273.15
        assert Config.Z_MIN == 0
        assert Config.Z_MAX == 118
        assert "en-US" in Config.LANGUAGES

    def test_reload_language(self):
        """Test that reload picks up NUCLIDETABLE_LANG."""
        from nuclidetable.config import Config

        try:
            os.environ["NUCLIDETABLE_LANG"] = "fr"
            Config.reload()
            assert Config.DEFAULT_LANGUAGE == "fr"
        finally:
            del os.environ["NUCLIDETABLE_LANG"]
            Config.reload()
        assert Config.DEFAULT_LANGUAGE == "en"

    def test_reload_validates_log_level(self):
        """Test that an invalid log level falls back to INFO."""
        from nuclidetable.config import Config

        try:
            os.environ["NUCLIDETABLE_LOG_LEVEL"] = "chatty"
            Config.reload()
            assert Config.LOG_LEVEL == "INFO"

            os.environ["NUCLIDETABLE_LOG_LEVEL"] = "debug"
            Config.reload()
            assert Config.LOG_LEVEL == "DEBUG"
        finally:
            del os.environ["NUCLIDETABLE_LOG_LEVEL"]
            Config.reload()

    def test_reload_validates_digits(self):
        """Test that halflife digits must be 1..15."""
        from nuclidetable.config import Config

        try:
            for value in ["invalid", "0", "99"]:
                os.environ["NUCLIDETABLE_HALFLIFE_DIGITS"] = value
                Config.reload()
                assert Config.HALFLIFE_DIGITS == 4

            os.environ["NUCLIDETABLE_HALFLIFE_DIGITS"] = "6"
            Config.reload()
            assert Config.HALFLIFE_DIGITS == 6
        finally:
            del os.environ["NUCLIDETABLE_HALFLIFE_DIGITS"]
            Config.reload()

    def test_digits_change_halflife_text(self):
        """Test that the digit setting reaches halflife formatting."""
        from nuclidetable.config import Config
        from nuclidetable.isotope import format_halflife

        try:
            os.environ["NUCLIDETABLE_HALFLIFE_DIGITS"] = "2"
            Config.reload()
            assert format_halflife(12.32 * Config.SECONDS_PER_YEAR) == "12 y"
        finally:
            del os.environ["NUCLIDETABLE_HALFLIFE_DIGITS"]
            Config.reload()


class TestSetupLogging:
    """Test the setup_logging function."""

    @pytest.fixture(autouse=True)
    def clean_logger(self):
        logger = logging.getLogger("nuclidetable")
        yield
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)

    def test_setup_logging_default_level(self):
        """Test setup_logging with default level."""
        from nuclidetable.config import setup_logging

        logger = setup_logging()
        assert logger.name == "nuclidetable"
        assert logger.level == logging.INFO

    def test_setup_logging_debug_level(self):
        """Test setup_logging with DEBUG level."""
        from nuclidetable.config import setup_logging

        logger = setup_logging("DEBUG")
        assert logger.level == logging.DEBUG

    def test_setup_logging_no_duplicate_handlers(self):
        """Test that setup_logging doesn't add duplicate handlers."""
        from nuclidetable.config import setup_logging

        logger = setup_logging()
        initial_handlers = len(logger.handlers)
        setup_logging()  # Call again
        assert len(logger.handlers) == initial_handlers


class TestGetLogger:
    """Test the get_logger function."""

    def test_get_logger_name(self):
        """Test that get_logger namespaces under nuclidetable."""
        from nuclidetable.config import get_logger

        assert get_logger("catalog").name == "nuclidetable.catalog"


# =============================================================================
# Exception Tests
# =============================================================================

class TestExceptions:
    """Tests for custom exception classes."""

    def test_invalid_isotope_message(self):
        """Test InvalidIsotopeError appends Z and A."""
        from nuclidetable.exceptions import InvalidIsotopeError

        err = InvalidIsotopeError("Halflife must be positive", z=1, a=3)
        assert str(err) == "Halflife must be positive (Z=1, A=3)"
        assert err.z == 1
        assert err.a == 3

    def test_invalid_isotope_without_position(self):
        """Test InvalidIsotopeError without Z and A."""
        from nuclidetable.exceptions import InvalidIsotopeError

        assert str(InvalidIsotopeError("Unknown decay code")) == "Unknown decay code"

    def test_out_of_range(self):
        """Test NuclideOutOfRangeError keeps the Z."""
        from nuclidetable.exceptions import NuclideOutOfRangeError

        err = NuclideOutOfRangeError("No nuclide with Z=119", z=119)
        assert err.z == 119

    def test_catalog_integrity(self):
        """Test CatalogIntegrityError message."""
        from nuclidetable.exceptions import CatalogIntegrityError

        err = CatalogIntegrityError(5, "duplicate symbol 'B'")
        assert str(err) == "Catalog entry Z=5 is invalid: duplicate symbol 'B'"
        assert err.reason == "duplicate symbol 'B'"

    def test_exception_hierarchy(self):
        """Test that all exceptions inherit from NuclideTableError."""
        from nuclidetable.exceptions import (
            CatalogIntegrityError,
            InvalidIsotopeError,
            NuclideOutOfRangeError,
            NuclideTableError,
        )

        assert issubclass(InvalidIsotopeError, NuclideTableError)
        assert issubclass(InvalidIsotopeError, ValueError)
        assert issubclass(NuclideOutOfRangeError, NuclideTableError)
        assert issubclass(NuclideOutOfRangeError, IndexError)
        assert issubclass(CatalogIntegrityError, NuclideTableError)


# =============================================================================
# Term Table Tests
# =============================================================================

class TestTerms:
    """Tests for localized term tables and number formatting."""

    def test_base_language(self):
        """Test reduction to a two-letter base."""
        from nuclidetable.terms import base_language

        assert base_language("en-GB") == "en"
        assert base_language("pt_BR") == "pt"
        assert base_language("FR") == "fr"
        assert base_language(None) == "en"

    def test_localize_fallback(self):
        """Test unknown languages use English."""
        from nuclidetable.terms import STATE_NAMES, localize

        assert localize(STATE_NAMES, "ja") == STATE_NAMES["en"]
        assert localize(STATE_NAMES, "de-CH") == STATE_NAMES["de"]

    def test_tables_aligned(self):
        """Test every language row matches the English length."""
        from nuclidetable import terms

        for table in [
            terms.CATEGORY_GROUP_NAMES, terms.CATEGORY_NAMES, terms.ISOTOPE_HEADINGS,
            terms.DECAY_MODE_NAMES, terms.LIFE_DESCRIPTIONS, terms.OCCURRENCE_NAMES,
            terms.STABILITY_DESCRIPTIONS, terms.STATE_NAMES, terms.TIME_UNIT_SUFFIXES,
            terms.THEME_NAMES, terms.ERA_NAMES,
        ]:
            for row in table.values():
                assert len(row) == len(table["en"])

    def test_decimal_separator(self):
        """Test comma languages."""
        from nuclidetable.terms import decimal_separator, format_fixed

        assert decimal_separator("ru") == ","
        assert decimal_separator("en-US") == "."
        assert format_fixed(1234.5, 3, "de") == "1234,500"
        assert format_fixed(1234.5, 3) == "1234.500"

    def test_format_general(self):
        """Test shortest number text."""
        from nuclidetable.terms import format_general

        assert format_general(100.0) == "100"
        assert format_general(99.985) == "99.985"
        assert format_general(0.0) == "0"
