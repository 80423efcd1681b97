"""
Conversion submodule.

Re-exports the rule-based converter and its convenience functions.
"""

from greek_betacode.convert._rules import (
    BetacodeConverter,
    ConversionResult,
    Grapheme,
    canonicalize,
    to_betacode,
    to_greek,
)

__all__ = [
    "BetacodeConverter",
    "ConversionResult",
    "Grapheme",
    "to_greek",
    "to_betacode",
    "canonicalize",
]
