"""
Decay code table.

Each radioactive decay channel is one member of the :class:`Decay` flag set.
An isotope with competing channels carries the union of their flags. The
canonical order of the members drives code-string rendering and index
iteration:

    ====  ========================  ======  ====  ====
    Code  Channel                   Symbol  ΔZ    ΔA
    ====  ========================  ======  ====  ====
    a     Alpha                     α       -2    -4
    p     Beta plus                 β+      -1     0
    b     Beta minus                β−      +1     0
    B     Double beta minus         β−β−    +2     0
    e     Electron capture          ε       -1     0
    E     Double electron capture   εε      -2     0
    n     Neutron emission          n        0    -1
    g     Gamma                     γ       (no product)
    T     Isomeric transition       IT      (no product)
    C     Internal conversion       IC      (no product)
    F     Spontaneous fission       SF      (no product)
    ====  ========================  ======  ====  ====

Example:
    >>> from nuclidetable.decay import Decay
    >>> mode = Decay.from_codes("ab")
    >>> mode.codes
    'ab'
    >>> [f.symbol for f in mode.flags()]
    ['α', 'β−']
"""

from __future__ import annotations

import enum

from .exceptions import InvalidIsotopeError, NuclideOutOfRangeError

__all__ = [
    "Decay",
    "DECAY_CODES",
    "DECAY_SYMBOLS",
    "DECAY_ORDER",
    "DECAY_MODE_COUNT",
]


class Decay(enum.Flag):
    """Decay channels of an isotope. The empty set means stable."""

    NONE = 0
    ALPHA = 1
    BETA_PLUS = 2
    BETA_MINUS = 4
    DOUBLE_BETA = 8
    ELECTRON_CAPTURE = 16
    DOUBLE_ELECTRON_CAPTURE = 32
    NEUTRON_EMISSION = 64
    GAMMA = 128
    ISOMERIC_TRANSITION = 256
    INTERNAL_CONVERSION = 512
    SPONTANEOUS_FISSION = 1024

    @classmethod
    def from_codes(cls, codes: str) -> "Decay":
        """
        Parse a string of one-letter decay codes.

        Args:
            codes: Any combination of the characters in ``DECAY_CODES``.
                Order and repetition do not matter.

        Returns:
            The union of the named channels (``Decay.NONE`` for "").

        Raises:
            InvalidIsotopeError: If a character is not a decay code.
        """
        result = cls.NONE
        for ch in codes:
            ix = DECAY_CODES.find(ch)
            if ix < 0:
                raise InvalidIsotopeError(f"Unknown decay code {ch!r} in {codes!r}")
            result |= DECAY_ORDER[ix]
        return result

    @classmethod
    def from_index(cls, index: int) -> "Decay":
        """Return the single channel at a canonical index (0..10)."""
        if not 0 <= index < DECAY_MODE_COUNT:
            raise NuclideOutOfRangeError(f"Decay index {index} is out of range")
        return DECAY_ORDER[index]

    def flags(self) -> tuple["Decay", ...]:
        """Return the member channels in canonical order."""
        return tuple(flag for flag in DECAY_ORDER if flag in self)

    @property
    def codes(self) -> str:
        """Concatenated one-letter codes in canonical order, '' when stable."""
        return "".join(DECAY_CODES[flag.index] for flag in self.flags())

    @property
    def index(self) -> int:
        """Canonical index of a single channel."""
        try:
            return _INDEXES[self]
        except KeyError:
            raise NuclideOutOfRangeError(
                f"{self!r} is not a single decay channel"
            ) from None

    @property
    def code(self) -> str:
        return DECAY_CODES[self.index]

    @property
    def symbol(self) -> str:
        return DECAY_SYMBOLS[self.index]

    @property
    def delta(self) -> tuple[int, int] | None:
        """(ΔZ, ΔA) applied by this channel, or None if it has no product."""
        return _DELTAS.get(self)

    @property
    def transmutes(self) -> bool:
        """True for a single channel that yields a different nuclide."""
        return self in _DELTAS


DECAY_ORDER: tuple[Decay, ...] = (
    Decay.ALPHA,
    Decay.BETA_PLUS,
    Decay.BETA_MINUS,
    Decay.DOUBLE_BETA,
    Decay.ELECTRON_CAPTURE,
    Decay.DOUBLE_ELECTRON_CAPTURE,
    Decay.NEUTRON_EMISSION,
    Decay.GAMMA,
    Decay.ISOMERIC_TRANSITION,
    Decay.INTERNAL_CONVERSION,
    Decay.SPONTANEOUS_FISSION,
)

DECAY_MODE_COUNT: int = len(DECAY_ORDER)

# Positionally aligned with DECAY_ORDER
DECAY_CODES: str = "apbBeEngTCF"
DECAY_SYMBOLS: tuple[str, ...] = ("α", "β+", "β−", "β−β−", "ε", "εε", "n", "γ", "IT", "IC", "SF")

_INDEXES: dict[Decay, int] = {flag: ix for ix, flag in enumerate(DECAY_ORDER)}

_DELTAS: dict[Decay, tuple[int, int]] = {
    Decay.ALPHA: (-2, -4),
    Decay.BETA_PLUS: (-1, 0),
    Decay.BETA_MINUS: (1, 0),
    Decay.DOUBLE_BETA: (2, 0),
    Decay.ELECTRON_CAPTURE: (-1, 0),
    Decay.DOUBLE_ELECTRON_CAPTURE: (-2, 0),
    Decay.NEUTRON_EMISSION: (0, -1),
}
