"""
Conversion errors.

Every failure carries the offending character and its position in the
input string. Conversion is atomic: when one of these is raised no partial
output has been returned.
"""

__all__ = [
    "ConversionError",
    "InvalidAtom",
    "InvalidCombination",
    "UnmappedGrapheme",
]


class ConversionError(ValueError):
    """Base class for betacode conversion failures."""

    def __init__(self, char: str, position: int, message: str) -> None:
        self.char = char
        self.position = position
        self.message = message
        super().__init__(f"{message}: {char!r} at position {position}")

    def __reduce__(self):
        return (type(self), (self.char, self.position, self.message))


class InvalidAtom(ConversionError):
    """A betacode character has no meaning in the active scheme."""


class InvalidCombination(ConversionError):
    """A betacode mark cannot be carried by the letter it follows."""


class UnmappedGrapheme(ConversionError):
    """A Greek character or mark combination has no betacode spelling."""
