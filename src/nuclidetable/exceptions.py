"""
Custom exceptions for the nuclidetable package.

Construction errors abort the catalog build. Lookups that simply find
nothing (an unknown symbol or language) are not errors and never raise.
"""

__all__ = [
    "NuclideTableError",
    "InvalidIsotopeError",
    "NuclideOutOfRangeError",
    "CatalogIntegrityError",
]


class NuclideTableError(Exception):
    """Base exception for all nuclidetable errors."""
    pass


class InvalidIsotopeError(NuclideTableError, ValueError):
    """
    Raised when isotope parameters contradict each other.

    Examples of invalid parameters:
    - A decay mode without a halflife, or a halflife without a decay mode
    - A halflife that is zero or negative
    - An abundance outside 0..100 percent
    - A mass number smaller than the proton count

    Attributes:
        z: Proton count of the offending isotope, if known.
        a: Mass number of the offending isotope, if known.
    """

    def __init__(self, message: str, z: int | None = None, a: int | None = None):
        self.z = z
        self.a = a
        if z is not None and a is not None:
            message = f"{message} (Z={z}, A={a})"
        super().__init__(message)


class NuclideOutOfRangeError(NuclideTableError, IndexError):
    """
    Raised when a transmutation or lookup resolves outside the catalog.

    Also raised when a decay channel has no product nuclide (gamma,
    isomeric transition, internal conversion, fission) or is not one of
    the isotope's own channels.

    Attributes:
        z: The proton count that was requested or produced.
    """

    def __init__(self, message: str, z: int | None = None):
        self.z = z
        super().__init__(message)


class CatalogIntegrityError(NuclideTableError):
    """
    Raised when the compiled-in catalog data violates a table invariant.

    This can happen if:
    - A nuclide sits at a position other than its atomic number
    - A symbol is empty or longer than three characters
    - Natural abundances of a nuclide do not add up to about 0 or 100 percent
    """

    def __init__(self, z: int, reason: str):
        self.z = z
        self.reason = reason
        super().__init__(f"Catalog entry Z={z} is invalid: {reason}")
