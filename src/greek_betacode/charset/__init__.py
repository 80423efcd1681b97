"""
Rule tables submodule.

Constant lookup tables shared by both conversion directions.

Basic usage:
    >>> from greek_betacode.charset import letter_table, Scheme
    >>> letter_table(Scheme.TLG)["c"]
    'ξ'

    >>> from greek_betacode.charset import betacode_letter
    >>> betacode_letter("χ", "default")
    'c'
"""

from greek_betacode.charset._tables import (
    APOSTROPHE,
    CAPITAL_MARKER,
    DEFAULT_GREEK,
    DEFAULT_LETTERS,
    KORONIS,
    MARK_ATOMS,
    MARK_CARRIERS,
    MARK_ORDER,
    MARK_SLOTS,
    MARKS,
    PASSTHROUGH,
    SIGMA_VARIANT_DIGITS,
    SIGMA_VARIANTS,
    SIGMAS,
    TLG_GREEK,
    TLG_LETTERS,
    Scheme,
    betacode_letter,
    letter_table,
)

__all__ = [
    "Scheme",
    "DEFAULT_LETTERS",
    "TLG_LETTERS",
    "DEFAULT_GREEK",
    "TLG_GREEK",
    "MARKS",
    "MARK_ATOMS",
    "MARK_SLOTS",
    "MARK_ORDER",
    "MARK_CARRIERS",
    "SIGMA_VARIANTS",
    "SIGMA_VARIANT_DIGITS",
    "SIGMAS",
    "PASSTHROUGH",
    "APOSTROPHE",
    "KORONIS",
    "CAPITAL_MARKER",
    "letter_table",
    "betacode_letter",
]
