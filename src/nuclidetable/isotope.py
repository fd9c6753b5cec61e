"""
Isotopes: the mass-number variants of a nuclide.

An isotope is stable exactly when it has neither a halflife nor a decay
channel. Natural isotopes carry an abundance percentage (0.0 for trace
amounts); synthetic ones have ``abundance=None``.

Example:
    >>> from nuclidetable.decay import Decay
    >>> from nuclidetable.isotope import Isotope
    >>> tritium = Isotope.radioactive(1, 3, 0.0, "b", 12.32, "y")
    >>> tritium.decay_code
    'b'
    >>> tritium.transmute(Decay.BETA_MINUS)
    (2, 3)
    >>> tritium.get_halflife_text("de")
    '12,32 a'
"""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING, Iterator, Sequence

from .config import Config
from .decay import Decay
from .exceptions import InvalidIsotopeError, NuclideOutOfRangeError
from .terms import (
    OCCURRENCE_CODES,
    OCCURRENCE_NAMES,
    TIME_UNIT_SUFFIXES,
    decimal_separator,
    format_fixed,
    format_general,
    localize,
)

if TYPE_CHECKING:
    from .nuclide import Nuclide

__all__ = [
    "Isotope",
    "Origin",
    "TIME_UNITS",
    "format_halflife",
    "stability_class",
]

# Authored time unit -> seconds
TIME_UNITS: dict[str, float] = {
    "n": 1e-9,
    "i": 1e-6,
    "t": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
    "d": 86400.0,
    "y": Config.SECONDS_PER_YEAR,
}

# Largest first: (seconds per display unit, index into TIME_UNIT_SUFFIXES)
_DISPLAY_UNITS: tuple[tuple[float, int], ...] = (
    (Config.SECONDS_PER_YEAR, 7),
    (86400.0, 6),
    (3600.0, 5),
    (60.0, 4),
    (1.0, 3),
    (1e-3, 2),
    (1e-6, 1),
    (1e-9, 0),
)


class Origin(enum.IntEnum):
    """How an isotope (or a nuclide's most natural isotope) arises in nature."""

    SYNTHETIC = 0
    COSMOGENIC = 1
    DECAY = 2
    PRIMORDIAL = 3

    @property
    def code(self) -> str:
        return OCCURRENCE_CODES[self]

    def get_name(self, lang: str | None = None) -> str:
        return localize(OCCURRENCE_NAMES, lang)[self]


def stability_class(seconds: float | None) -> int:
    """
    Bucket a halflife into the 0..5 radioactivity scale.

    Args:
        seconds: Halflife in seconds, or None for a stable isotope.

    Returns:
        0 for stable, then 1 (>= 2 million years) down to 5 (< 10 minutes).
    """
    if seconds is None:
        return 0
    if seconds >= 2000000.0 * Config.SECONDS_PER_YEAR:
        return 1
    if seconds >= 800.0 * Config.SECONDS_PER_YEAR:
        return 2
    if seconds >= 24.0 * 3600.0:
        return 3
    if seconds >= 10.0 * 60.0:
        return 4
    return 5


def _significant(value: float, digits: int) -> str:
    # Positional notation below 1e15, exponent form above
    mantissa, exponent = f"{value:.{digits - 1}e}".split("e")
    power = int(exponent)
    if power >= 15 or power < -4:
        mantissa = mantissa.rstrip("0").rstrip(".")
        return f"{mantissa}E{power:+03d}"
    figures = mantissa.replace(".", "")
    if power < 0:
        return "0." + "0" * (-power - 1) + figures.rstrip("0")
    if power + 1 >= len(figures):
        return figures + "0" * (power + 1 - len(figures))
    whole, fraction = figures[:power + 1], figures[power + 1:].rstrip("0")
    return f"{whole}.{fraction}" if fraction else whole


def format_halflife(seconds: float | None, lang: str | None = None, digits: int | None = None) -> str:
    """
    Format a halflife in the largest unit that does not exceed it.

    Args:
        seconds: Halflife in seconds. None (stable) gives an empty string.
        lang: Language code for the unit suffix and decimal separator.
            Unknown languages use English.
        digits: Significant digits (default: Config.HALFLIFE_DIGITS).

    Returns:
        Text such as "12.32 y", "12,32 a" or "3.8 d".

    Example:
        >>> format_halflife(600.0)
        '10 m'
        >>> format_halflife(0.0451, "fr")
        '45,1 ms'
    """
    if seconds is None:
        return ""
    if digits is None:
        digits = Config.HALFLIFE_DIGITS

    pos = len(_DISPLAY_UNITS) - 1
    for ix, (size, _) in enumerate(_DISPLAY_UNITS):
        if seconds >= size:
            pos = ix
            break

    # Rounding may carry into the next larger unit: 59.99999 s is "1 m"
    while pos > 0:
        size = _DISPLAY_UNITS[pos][0]
        rounded = float(f"{seconds / size:.{digits - 1}e}")
        if rounded * size < _DISPLAY_UNITS[pos - 1][0]:
            break
        pos -= 1

    scale, suffix_ix = _DISPLAY_UNITS[pos]
    text = _significant(seconds / scale, digits)
    if decimal_separator(lang) != ".":
        text = text.replace(".", decimal_separator(lang))
    return f"{text} {localize(TIME_UNIT_SUFFIXES, lang)[suffix_ix]}"


class Isotope:
    """
    One mass-number variant of a nuclide.

    Args:
        z: Proton count of the owning nuclide.
        a: Mass number (nucleon count).
        abundance: Natural abundance in percent, 0.0 for trace, None if synthetic.
        decay_mode: Decay channels, as flags or a code string such as "ab".
        halflife: Halflife expressed in ``time_unit``; None for stable isotopes.
        time_unit: One of n (ns), i (μs), t (ms), s, m, h, d, y.

    Raises:
        InvalidIsotopeError: If stability, halflife and decay mode disagree,
            the halflife is not positive, the abundance is outside 0..100,
            or A < Z.
    """

    def __init__(
        self,
        z: int,
        a: int,
        abundance: float | None = None,
        decay_mode: Decay | str = Decay.NONE,
        halflife: float | None = None,
        time_unit: str = "s",
    ):
        if isinstance(decay_mode, str):
            decay_mode = Decay.from_codes(decay_mode)

        if time_unit not in TIME_UNITS:
            raise InvalidIsotopeError(f"Unknown time unit {time_unit!r}", z=z, a=a)
        if decay_mode == Decay.NONE and halflife is not None:
            raise InvalidIsotopeError("Stable isotope cannot have a halflife", z=z, a=a)
        if decay_mode != Decay.NONE and halflife is None:
            raise InvalidIsotopeError("Radioactive isotope requires a halflife", z=z, a=a)
        if halflife is not None and halflife <= 0:
            raise InvalidIsotopeError(f"Halflife must be positive, got {halflife}", z=z, a=a)
        if abundance is not None and not 0.0 <= abundance <= 100.0:
            raise InvalidIsotopeError(f"Abundance {abundance}% is outside 0..100", z=z, a=a)
        if a < max(z, 1):
            raise InvalidIsotopeError("Mass number is smaller than the proton count", z=z, a=a)

        self._z = z
        self._a = a
        self._abundance = None if abundance is None else float(abundance)
        self._decay_mode = decay_mode
        self._halflife_value = halflife
        self._time_unit = time_unit
        self._halflife = None if halflife is None else halflife * TIME_UNITS[time_unit]
        self._stability_index = stability_class(self._halflife)
        self._occurrence: Origin | None = None

    @classmethod
    def stable(cls, z: int, a: int, abundance: float | None) -> "Isotope":
        """Create a stable isotope."""
        return cls(z, a, abundance)

    @classmethod
    def radioactive(
        cls,
        z: int,
        a: int,
        abundance: float | None,
        decay_mode: Decay | str,
        halflife: float,
        time_unit: str = "s",
    ) -> "Isotope":
        """Create a radioactive isotope; ``abundance=None`` marks it synthetic."""
        if isinstance(decay_mode, str):
            decay_mode = Decay.from_codes(decay_mode)
        if decay_mode == Decay.NONE:
            raise InvalidIsotopeError("Radioactive isotope requires a decay mode", z=z, a=a)
        return cls(z, a, abundance, decay_mode, halflife, time_unit)

    def __repr__(self) -> str:
        return f"Isotope(z={self._z}, a={self._a})"

    def __str__(self) -> str:
        return f"Z={self._z}, A={self._a}"

    @property
    def z(self) -> int:
        return self._z

    @property
    def a(self) -> int:
        return self._a

    @property
    def n(self) -> int:
        """Neutron count (A - Z)."""
        return self._a - self._z

    @property
    def abundance(self) -> float | None:
        return self._abundance

    @property
    def decay_mode(self) -> Decay:
        return self._decay_mode

    @property
    def decay_code(self) -> str:
        """One character per decay channel in canonical order, '' if stable."""
        return self._decay_mode.codes

    @property
    def halflife(self) -> float | None:
        """Halflife in seconds, None if stable."""
        return self._halflife

    @property
    def halflife_value(self) -> float | None:
        """Halflife as authored, in units of ``time_unit``."""
        return self._halflife_value

    @property
    def time_unit(self) -> str:
        return self._time_unit

    @property
    def is_natural(self) -> bool:
        return self._abundance is not None

    @property
    def is_stable(self) -> bool:
        return self._halflife is None

    @property
    def stability_index(self) -> int:
        return self._stability_index

    @property
    def nuclide(self) -> "Nuclide":
        """The owning nuclide, looked up by Z in the shared catalog."""
        from .catalog import get_catalog
        return get_catalog()[self._z]

    @property
    def occurrence(self) -> Origin:
        if self._occurrence is None:
            from .catalog import get_catalog
            self._occurrence = self._find_origin(get_catalog().table)
        return self._occurrence

    @property
    def occurrence_index(self) -> int:
        return int(self.occurrence)

    @property
    def occurrence_code(self) -> str:
        return self.occurrence.code

    def resolve_occurrence(self, table: Sequence["Nuclide"]) -> Origin:
        """Compute and cache the origin of this isotope against a nuclide table."""
        self._occurrence = self._find_origin(table)
        return self._occurrence

    def _find_origin(self, table: Sequence["Nuclide"]) -> Origin:
        if self._abundance is None:
            return Origin.SYNTHETIC
        if self.is_stable or self._halflife > Config.PRIMORDIAL_CUTOFF:
            return Origin.PRIMORDIAL

        # Radiogenic if a natural parent one or two protons away decays into us
        for parent_z in (self._z - 1, self._z + 1, self._z + 2):
            if not 0 <= parent_z < len(table):
                continue
            for parent in table[parent_z].isotopes:
                if not parent.is_natural or parent.is_stable:
                    continue
                for ix in parent.get_decay_indexes():
                    dz, da = Decay.from_index(ix).delta
                    if parent.z + dz == self._z and parent.a + da == self._a:
                        return Origin.DECAY

        # Technetium and neptunium occur as uranium fission products
        if self._z in (43, 93):
            return Origin.DECAY

        return Origin.COSMOGENIC

    def get_decay_indexes(self) -> Iterator[int]:
        """
        Yield the canonical index of each decay channel that has a product.

        Gamma, isomeric transition, internal conversion and spontaneous
        fission are skipped. Each call starts a fresh iteration.
        """
        for flag in self._decay_mode.flags():
            if flag.transmutes:
                yield flag.index

    def transmute(self, mode: Decay | int) -> tuple[int, int]:
        """
        Apply one decay channel to this isotope.

        Args:
            mode: A single Decay flag or its canonical index.

        Returns:
            (Z, A) of the product.

        Raises:
            NuclideOutOfRangeError: If the channel has no product, is not one
                of this isotope's channels, or the product Z is outside 0..118.
        """
        flag = Decay.from_index(mode) if isinstance(mode, int) else mode
        delta = flag.delta
        if delta is None:
            raise NuclideOutOfRangeError(f"{flag} does not produce a single nuclide", z=self._z)
        if flag not in self._decay_mode:
            raise NuclideOutOfRangeError(f"{self} does not decay by {flag}", z=self._z)

        z, a = self._z + delta[0], self._a + delta[1]
        if not Config.Z_MIN <= z <= Config.Z_MAX:
            raise NuclideOutOfRangeError(f"Decay of {self} by {flag} gives Z={z}", z=z)
        return z, a

    def get_decay_products(self) -> Iterator[tuple[Decay, int, int]]:
        """Yield (flag, Z, A) for every decay channel that has a product."""
        for ix in self.get_decay_indexes():
            flag = Decay.from_index(ix)
            z, a = self.transmute(flag)
            yield flag, z, a

    def get_halflife_text(self, lang: str | None = None) -> str:
        """Localized halflife such as "12.32 y"; empty for stable isotopes."""
        return format_halflife(self._halflife, lang)

    def to_fixed_width_string(self, lang: str | None = None) -> str:
        """A, abundance, occurrence, decay codes and halflife in narrow columns."""
        abundance = "" if self._abundance is None else format_fixed(self._abundance, 4, lang)
        return (
            f"{self._a:>3} {abundance:>8} {self.occurrence_code} "
            f"{self.decay_code:<5}{self.get_halflife_text(lang)}"
        )

    def to_json_string(self, quote: str = '"') -> str:
        """
        Render this isotope as a JSON object.

        Args:
            quote: Delimiter for property names; pass "" for JavaScript.
        """
        q = quote
        parts = [
            f"{q}z{q}:{self._z}",
            f"{q}a{q}:{self._a}",
            f"{q}abundance{q}:{'null' if self._abundance is None else format_general(self._abundance)}",
            f"{q}occurrenceIndex{q}:{self.occurrence_index}",
        ]
        if not self.is_stable:
            parts += [
                f"{q}stabilityIndex{q}:{self._stability_index}",
                f"{q}decayFlags{q}:{self._decay_mode.value}",
                f"{q}halflife{q}:{format_general(self._halflife_value)}",
                f'{q}timeUnit{q}:"{self._time_unit}"',
            ]
        return "{" + ",".join(parts) + "}"
