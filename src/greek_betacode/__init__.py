"""
greek-betacode: betacode ↔ Unicode Greek conversion.

Reads and writes two betacode conventions: the default (Robinson-Pierpont
style) scheme, where ASCII case is Greek case, and the TLG scheme, where
"*" marks a capital letter.

Basic usage:
    >>> from greek_betacode import to_greek, to_betacode, Scheme
    >>> to_greek("qeo/v")
    'θεός'
    >>> to_greek("*qeo/s", Scheme.TLG)
    'Θεός'
    >>> to_betacode("ἐν ἀρχῇ", Scheme.TLG)
    'e)n a)rxh=|'

Detailed usage:
    >>> from greek_betacode import BetacodeConverter
    >>> converter = BetacodeConverter("tlg")
    >>> [g.target for g in converter.to_greek_detailed("*)/a").graphemes]
    ['Ἄ']
"""

from greek_betacode._errors import (
    ConversionError,
    InvalidAtom,
    InvalidCombination,
    UnmappedGrapheme,
)
from greek_betacode.charset import Scheme
from greek_betacode.convert import (
    BetacodeConverter,
    ConversionResult,
    Grapheme,
    canonicalize,
    to_betacode,
    to_greek,
)

__version__ = "0.1.0"
__all__ = [
    "Scheme",
    "to_greek",
    "to_betacode",
    "canonicalize",
    "BetacodeConverter",
    "ConversionResult",
    "Grapheme",
    "ConversionError",
    "InvalidAtom",
    "InvalidCombination",
    "UnmappedGrapheme",
]


# Lazy import for spaCy components (only when spacy is installed)
def __getattr__(name: str):
    if name in ("BetacodeToGreekComponent", "GreekToBetacodeComponent"):
        try:
            from greek_betacode import spacy as _spacy
        except ImportError:
            raise ImportError(
                "spaCy integration requires spacy. "
                "Install with: pip install greek-betacode[spacy]"
            )
        return getattr(_spacy, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
