"""
Configuration management for nuclidetable.

Settings can be customized via environment variables before importing nuclidetable.

Environment Variables
---------------------
NUCLIDETABLE_LOG_LEVEL : str
    Logging level: DEBUG, INFO, WARNING, ERROR (default: INFO).
NUCLIDETABLE_LANG : str
    Default language code for names and halflife text (default: en).
NUCLIDETABLE_HALFLIFE_DIGITS : int
    Significant digits used when formatting halflives (default: 4).

Examples
--------
Configure via shell environment::

    export NUCLIDETABLE_LANG=de
    nuclidetable element Fe

Or configure in Python before importing::

    import os
    os.environ['NUCLIDETABLE_LOG_LEVEL'] = 'DEBUG'
    from nuclidetable import get_catalog
"""

from __future__ import annotations

import logging
import os

__all__ = [
    "Config",
    "setup_logging",
    "get_logger",
]

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _read_digits() -> int:
    digits_env = os.environ.get("NUCLIDETABLE_HALFLIFE_DIGITS", "4")
    if digits_env.isdigit() and 1 <= int(digits_env) <= 15:
        return int(digits_env)
    return 4


class Config:
    """
    Configuration settings for nuclidetable.

    Runtime settings come from environment variables. The physical constants
    and catalog limits are fixed.

    Attributes:
        LOG_LEVEL: Logging verbosity (DEBUG, INFO, WARNING, ERROR).
        DEFAULT_LANGUAGE: Language code used when none is supplied.
        HALFLIFE_DIGITS: Significant digits for formatted halflives.

    Physical Constants:
        SECONDS_PER_YEAR: Mean Gregorian year (365.2425 days) in seconds.
        PRIMORDIAL_CUTOFF: Halflife above which a natural isotope has
            survived since the formation of the Earth (1e8 years).
        STANDARD_TEMPERATURE: 0 degrees Celsius in kelvin.

    Catalog Limits:
        Z_MIN, Z_MAX: Range of atomic numbers held by the catalog.
        LANGUAGES: Language codes with cached maximum name lengths.
    """

    # Logging (validated: must be valid level)
    _log_level_env = os.environ.get("NUCLIDETABLE_LOG_LEVEL", "INFO").upper()
    LOG_LEVEL: str = _log_level_env if _log_level_env in _LOG_LEVELS else "INFO"

    DEFAULT_LANGUAGE: str = os.environ.get("NUCLIDETABLE_LANG", "en") or "en"

    HALFLIFE_DIGITS: int = _read_digits()

    SECONDS_PER_YEAR: float = 31556952.0
    PRIMORDIAL_CUTOFF: float = 100000000.0 * SECONDS_PER_YEAR
    STANDARD_TEMPERATURE: float = 273.15  # K

    Z_MIN: int = 0
    Z_MAX: int = 118

    LANGUAGES: tuple[str, ...] = ("de", "en", "en-GB", "en-US", "es", "fr", "it", "ru")

    @classmethod
    def reload(cls) -> None:
        """
        Reload configuration from environment variables.

        Call this method after changing environment variables to update
        the configuration at runtime. Text already rendered is not affected.

        Example:
            >>> import os
            >>> os.environ["NUCLIDETABLE_LANG"] = "fr"
            >>> Config.reload()
        """
        log_env = os.environ.get("NUCLIDETABLE_LOG_LEVEL", "INFO").upper()
        cls.LOG_LEVEL = log_env if log_env in _LOG_LEVELS else "INFO"

        cls.DEFAULT_LANGUAGE = os.environ.get("NUCLIDETABLE_LANG", "en") or "en"

        cls.HALFLIFE_DIGITS = _read_digits()


def setup_logging(level: str | None = None) -> logging.Logger:
    """
    Set up logging for nuclidetable.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). If None, uses
            NUCLIDETABLE_LOG_LEVEL environment variable or INFO.

    Returns:
        The root nuclidetable logger.

    Example:
        >>> from nuclidetable.config import setup_logging
        >>> logger = setup_logging("DEBUG")
    """
    if level is None:
        level = Config.LOG_LEVEL

    logger = logging.getLogger("nuclidetable")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Only add handler if none exist (avoid duplicates)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setLevel(logging.DEBUG)
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%H:%M:%S"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a nuclidetable submodule.

    Args:
        name: Module name (e.g., "catalog", "isotope").

    Returns:
        Logger instance for the module.
    """
    return logging.getLogger(f"nuclidetable.{name}")
