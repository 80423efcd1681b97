"""
Rule tables for betacode ↔ Unicode Greek conversion.

Provides:
- Scheme: the two betacode conventions (Default and TLG)
- Letter tables per scheme (betacode letter → Greek base letter)
- Mark tables (betacode mark atom → combining mark), the letters that may
  carry each mark, and the canonical mark order
- Sigma variants, pass-through punctuation and the apostrophe

All tables are module-level constants and are never mutated at runtime.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

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


class Scheme(Enum):
    """Betacode convention used to read or write ASCII text."""

    DEFAULT = "default"
    TLG = "tlg"

    @classmethod
    def coerce(cls, value: "Scheme | str") -> "Scheme":
        """
        Return a Scheme for an enum member or its name ("default", "tlg").

        Raises:
            ValueError: if the value names no known scheme
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.lower())
            except ValueError:
                pass
        raise ValueError(
            f"Unknown betacode scheme: {value!r}. Expected one of: "
            + ", ".join(s.value for s in cls)
        )


# =============================================================================
# Letters
# =============================================================================

# Letters shared by both schemes (lowercase betacode → lowercase Greek)
_COMMON_LETTERS = {
    "a": "α", "b": "β", "g": "γ", "d": "δ", "e": "ε", "z": "ζ",
    "h": "η", "q": "θ", "i": "ι", "k": "κ", "l": "λ", "m": "μ",
    "n": "ν", "o": "ο", "p": "π", "r": "ρ", "s": "σ", "t": "τ",
    "u": "υ", "f": "φ", "y": "ψ", "w": "ω",
}

# Robinson-Pierpont style: c is chi, v is sigma, j is always final sigma
_DEFAULT_EXTRA = {"c": "χ", "v": "σ", "j": "ς"}

# TLG: c is xi, x is chi, v is digamma
_TLG_EXTRA = {"c": "ξ", "x": "χ", "v": "ϝ"}

_default_lower = {**_COMMON_LETTERS, **_DEFAULT_EXTRA}

# Default is case-sensitive: ASCII case carries Greek case ("ς".upper() == "Σ")
DEFAULT_LETTERS = {
    **_default_lower,
    **{k.upper(): v.upper() for k, v in _default_lower.items()},
}

# TLG is case-insensitive; capitals are marked with "*"
TLG_LETTERS = {**_COMMON_LETTERS, **_TLG_EXTRA}

CAPITAL_MARKER = "*"


def _reverse(letters: dict[str, str]) -> dict[str, str]:
    # First spelling wins, so "s" (not "v") writes sigma under Default.
    reverse: dict[str, str] = {}
    for ascii_letter, greek in letters.items():
        if ascii_letter.islower() and greek not in SIGMAS:
            reverse.setdefault(greek, ascii_letter)
    return reverse


# =============================================================================
# Marks
# =============================================================================

SMOOTH = "\u0313"       # combining comma above (psili)
ROUGH = "\u0314"        # combining reversed comma above (dasia)
DIAERESIS = "\u0308"
ACUTE = "\u0301"
GRAVE = "\u0300"
CIRCUMFLEX = "\u0342"   # combining Greek perispomeni
IOTA_SUBSCRIPT = "\u0345"  # combining Greek ypogegrammeni

# Betacode mark atom → combining mark ("^" is an input-only alias of "=")
MARKS = {
    ")": SMOOTH,
    "(": ROUGH,
    "+": DIAERESIS,
    "/": ACUTE,
    "\\": GRAVE,
    "=": CIRCUMFLEX,
    "^": CIRCUMFLEX,
    "|": IOTA_SUBSCRIPT,
}

# Combining mark → canonical betacode atom
MARK_ATOMS = {
    SMOOTH: ")",
    ROUGH: "(",
    DIAERESIS: "+",
    ACUTE: "/",
    GRAVE: "\\",
    CIRCUMFLEX: "=",
    IOTA_SUBSCRIPT: "|",
}

MARK_SLOTS = {
    SMOOTH: "breathing",
    ROUGH: "breathing",
    DIAERESIS: "diaeresis",
    ACUTE: "accent",
    GRAVE: "accent",
    CIRCUMFLEX: "accent",
    IOTA_SUBSCRIPT: "iota",
}

# Canonical order for both betacode atoms and combining marks
MARK_ORDER = ("breathing", "diaeresis", "accent", "iota")

_VOWELS = frozenset("αεηιουω")

# Lowercase Greek letters that may carry each combining mark
MARK_CARRIERS = {
    SMOOTH: _VOWELS,
    ROUGH: _VOWELS | {"ρ"},
    DIAERESIS: frozenset("ιυ"),
    ACUTE: _VOWELS,
    GRAVE: _VOWELS,
    CIRCUMFLEX: frozenset("αηιυω"),
    IOTA_SUBSCRIPT: frozenset("αηω"),
}


# =============================================================================
# Sigma, punctuation
# =============================================================================

# Sigma variant digit → (lowercase form, uppercase form)
SIGMA_VARIANTS = {
    "1": ("σ", "Σ"),   # medial
    "2": ("ς", "Σ"),   # final
    "3": ("ϲ", "Ϲ"),   # lunate
}

# Greek sigma form → digit written when the bare letter would read otherwise
SIGMA_VARIANT_DIGITS = {"σ": "1", "ς": "2", "ϲ": "3", "Ϲ": "3"}

SIGMAS = frozenset("σςϲΣϹ")

# Copied unchanged in both directions (whitespace is handled separately)
PASSTHROUGH = frozenset(".,;:-")

APOSTROPHE = "'"
KORONIS = "\u1fbd"  # Greek koronis, used for elision

DEFAULT_GREEK = _reverse(DEFAULT_LETTERS)
TLG_GREEK = _reverse(TLG_LETTERS)


def letter_table(scheme: Scheme | str) -> dict[str, str]:
    """Return the betacode letter → Greek letter table for a scheme."""
    scheme = Scheme.coerce(scheme)
    return TLG_LETTERS if scheme is Scheme.TLG else DEFAULT_LETTERS


def betacode_letter(greek: str, scheme: Scheme | str) -> Optional[str]:
    """
    Return the lowercase betacode letter for a lowercase Greek base letter.

    Sigma forms are not covered here; they depend on word position.

    Args:
        greek: A single lowercase Greek letter without diacritics
        scheme: Betacode scheme to write

    Returns:
        The ASCII letter, or None if the scheme has no spelling for it
    """
    scheme = Scheme.coerce(scheme)
    table = TLG_GREEK if scheme is Scheme.TLG else DEFAULT_GREEK
    return table.get(greek)
