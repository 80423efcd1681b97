"""
Rule-based betacode ↔ Unicode Greek converter.

A single left-to-right scan in each direction. Betacode is read as groups
of (capital marker, letter, trailing marks); each group becomes one Greek
grapheme in NFC form. Greek is decomposed per character and each base
letter with its combining marks is written back in canonical atom order.

Example:
    >>> from greek_betacode.convert import to_greek, to_betacode
    >>> to_greek("qeo/v")
    'θεός'
    >>> to_greek("*qeo/s", "tlg")
    'Θεός'
    >>> to_betacode("Θεός", "tlg")
    '*qeo/s'
"""

from __future__ import annotations

import logging
import unicodedata
from dataclasses import dataclass, field
from typing import Optional

from greek_betacode._errors import InvalidAtom, InvalidCombination, UnmappedGrapheme
from greek_betacode.charset._tables import (
    APOSTROPHE,
    CAPITAL_MARKER,
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
    Scheme,
    betacode_letter,
    letter_table,
)

__all__ = [
    "BetacodeConverter",
    "ConversionResult",
    "Grapheme",
    "to_greek",
    "to_betacode",
    "canonicalize",
]

logger = logging.getLogger(__name__)

# =============================================================================
# Data Classes
# =============================================================================


@dataclass
class Grapheme:
    """One emitted unit and the slice of input it was read from."""

    position: int
    source: str
    target: str


@dataclass
class ConversionResult:
    """Detailed result from conversion."""

    original: str
    converted: str
    graphemes: list[Grapheme] = field(default_factory=list)


# Apostrophe-like characters accepted on the Greek side
_GREEK_APOSTROPHES = frozenset((KORONIS, "\u2019", APOSTROPHE))

# U+0387 (ano teleia) decomposes to U+00B7
_MIDDLE_DOT = "\u00b7"


def _is_passthrough(char: str) -> bool:
    return char in PASSTHROUGH or char.isspace()


# =============================================================================
# Grapheme Composition
# =============================================================================


def _place_marks(
    letter: str, marks: list[tuple[str, int, str]], error: type
) -> dict[str, tuple[str, str]]:
    """
    Check marks against the letter and sort them into slots.

    Args:
        letter: Greek base letter (either case)
        marks: (combining_mark, position, source_char) triples in input order
        error: Exception class to raise on an illegal mark

    Returns:
        Mapping of slot name → (combining_mark, source_char)
    """
    base = letter.lower()
    slots: dict[str, tuple[str, str]] = {}
    for mark, position, source in marks:
        slot = MARK_SLOTS.get(mark)
        if slot is None:
            raise error(source, position, "Mark has no betacode equivalent")
        if base not in MARK_CARRIERS[mark]:
            raise error(source, position, f"{letter!r} cannot carry this {slot} mark")
        if slot in slots:
            raise error(source, position, f"{letter!r} already carries a {slot} mark")
        slots[slot] = (mark, source)
    return slots


def _compose(letter: str, slots: dict[str, tuple[str, str]]) -> str:
    """Render a base letter plus slotted marks as NFC Greek."""
    combining = "".join(slots[slot][0] for slot in MARK_ORDER if slot in slots)
    return unicodedata.normalize("NFC", letter + combining)


# =============================================================================
# Converter
# =============================================================================


class BetacodeConverter:
    """
    Convert between betacode and Unicode Greek for one scheme.

    Instances hold no mutable state and can be shared between threads.

    Example:
        >>> converter = BetacodeConverter(Scheme.TLG)
        >>> converter.to_greek("*)/anqrwpos")
        'Ἄνθρωπος'
        >>> converter.to_betacode("Ἄνθρωπος")
        '*a)/nqrwpos'
    """

    def __init__(self, scheme: Scheme | str = Scheme.DEFAULT) -> None:
        self.scheme = Scheme.coerce(scheme)
        self._letters = letter_table(self.scheme)
        self._tlg = self.scheme is Scheme.TLG

    def __repr__(self) -> str:
        return f"BetacodeConverter(scheme={self.scheme.value!r})"

    # -------------------------------------------------------------------------
    # Betacode → Greek
    # -------------------------------------------------------------------------

    def _lookup(self, char: str) -> Optional[str]:
        """Return the Greek base letter for a betacode letter, or None."""
        if self._tlg:
            # TLG ignores ASCII case; only "*" makes capitals
            return self._letters.get(char.lower()) if char.isascii() else None
        return self._letters.get(char)

    def _starts_letter(self, char: str) -> bool:
        """Check if a character opens a new letter group."""
        if self._tlg and char == CAPITAL_MARKER:
            return True
        return self._lookup(char) is not None

    def to_greek_detailed(self, text: str) -> ConversionResult:
        """
        Convert betacode to Greek, recording each emitted grapheme.

        Args:
            text: Betacode text in this converter's scheme

        Returns:
            ConversionResult with one Grapheme per letter group, apostrophe
            and pass-through character

        Raises:
            InvalidAtom: a character has no meaning in the scheme
            InvalidCombination: a mark or sigma digit is illegal on its letter
        """
        graphemes: list[Grapheme] = []
        n = len(text)
        i = 0

        while i < n:
            char = text[i]

            if _is_passthrough(char):
                graphemes.append(Grapheme(i, char, char))
                i += 1
                continue

            if char == APOSTROPHE:
                graphemes.append(Grapheme(i, char, KORONIS))
                i += 1
                continue

            start = i
            capital = False
            marks: list[tuple[str, int, str]] = []

            # TLG capitals: "*", then optional marks, then the letter
            if self._tlg and char == CAPITAL_MARKER:
                capital = True
                i += 1
                while i < n and text[i] in MARKS:
                    marks.append((MARKS[text[i]], i, text[i]))
                    i += 1
                if i == n:
                    raise InvalidAtom(char, start, "Capital marker is not followed by a letter")

            letter = self._lookup(text[i])
            if letter is None:
                if capital:
                    raise InvalidAtom(text[i], i, "Expected a letter after capital marker")
                if text[i] in MARKS or text[i] in SIGMA_VARIANTS:
                    raise InvalidAtom(text[i], i, "Modifier is not preceded by a letter")
                raise InvalidAtom(text[i], i, f"Not a {self.scheme.value} betacode character")
            if capital:
                letter = letter.upper()
            i += 1

            # Trailing marks and sigma variant digits
            variant: Optional[tuple[str, int]] = None
            while i < n and (text[i] in MARKS or text[i] in SIGMA_VARIANTS):
                if text[i] in MARKS:
                    marks.append((MARKS[text[i]], i, text[i]))
                elif variant is not None:
                    raise InvalidCombination(text[i], i, "Sigma already has a variant digit")
                else:
                    variant = (text[i], i)
                i += 1

            if variant is not None:
                digit, digit_pos = variant
                if letter not in ("σ", "Σ"):
                    raise InvalidCombination(digit, digit_pos, f"{letter!r} is not a sigma")
                if marks:
                    raise InvalidCombination(digit, digit_pos, "Sigma variant cannot carry marks")
                lower, upper = SIGMA_VARIANTS[digit]
                target = upper if letter.isupper() else lower
            else:
                slots = _place_marks(letter, marks, InvalidCombination)
                if letter == "σ" and not (i < n and self._starts_letter(text[i])):
                    target = "ς"
                else:
                    target = _compose(letter, slots)
            graphemes.append(Grapheme(start, text[start:i], target))

        return ConversionResult(
            original=text,
            converted="".join(g.target for g in graphemes),
            graphemes=graphemes,
        )

    def to_greek(self, text: str) -> str:
        """
        Convert betacode to Unicode Greek.

        Example:
            >>> BetacodeConverter().to_greek("lo/gos")
            'λόγος'
        """
        if not text:
            return text
        return self.to_greek_detailed(text).converted

    # -------------------------------------------------------------------------
    # Greek → Betacode
    # -------------------------------------------------------------------------

    @staticmethod
    def _clusters(text: str) -> list[list]:
        """
        Split Greek text into [position, end, base, marks] clusters.

        Each character is decomposed on its own so positions refer to the
        original string. Combining marks attach to the preceding base.
        """
        clusters: list[list] = []
        for i, char in enumerate(text):
            decomposed = unicodedata.normalize("NFD", char)
            head, tail = decomposed[0], decomposed[1:]
            if unicodedata.combining(head):
                if not clusters:
                    raise UnmappedGrapheme(char, i, "Combining mark without a base letter")
                clusters[-1][1] = i + 1
                clusters[-1][3].extend((m, i, char) for m in decomposed)
            else:
                clusters.append([i, i + 1, head, [(m, i, char) for m in tail]])
        return clusters

    def _write_letter(self, base: str, position: int) -> str:
        """Return the betacode letter (with capital marking) for a base."""
        ascii_letter = betacode_letter(base.lower(), self.scheme)
        if ascii_letter is None:
            raise UnmappedGrapheme(base, position, f"No {self.scheme.value} betacode letter")
        if base.isupper():
            return CAPITAL_MARKER + ascii_letter if self._tlg else ascii_letter.upper()
        return ascii_letter

    def _write_sigma(self, base: str, word_end: bool) -> str:
        if base == "σ":
            return "s" + SIGMA_VARIANT_DIGITS[base] if word_end else "s"
        if base == "ς":
            return "s" if word_end else "s" + SIGMA_VARIANT_DIGITS[base]
        if base == "ϲ":
            return "s" + SIGMA_VARIANT_DIGITS[base]
        capital = CAPITAL_MARKER + "s" if self._tlg else "S"
        return capital + SIGMA_VARIANT_DIGITS.get(base, "")

    def to_betacode_detailed(self, text: str) -> ConversionResult:
        """
        Convert Unicode Greek to canonical betacode, recording each grapheme.

        Accepts precomposed and decomposed input alike.

        Args:
            text: Greek text

        Returns:
            ConversionResult with one Grapheme per base character and its marks

        Raises:
            UnmappedGrapheme: a character or mark combination has no betacode
                spelling in this scheme
        """
        clusters = self._clusters(text)
        graphemes: list[Grapheme] = []

        for k, (position, end, base, marks) in enumerate(clusters):
            source = text[position:end]

            if _is_passthrough(base) or base in _GREEK_APOSTROPHES or base == _MIDDLE_DOT:
                if marks:
                    _, mark_pos, mark_char = marks[0]
                    raise UnmappedGrapheme(mark_char, mark_pos, f"Mark on {base!r}")
                if base in _GREEK_APOSTROPHES:
                    target = APOSTROPHE
                elif base == _MIDDLE_DOT:
                    target = ":"
                else:
                    target = base
                graphemes.append(Grapheme(position, source, target))
                continue

            if base in SIGMAS:
                if marks:
                    _, mark_pos, mark_char = marks[0]
                    raise UnmappedGrapheme(mark_char, mark_pos, f"{base!r} cannot carry marks")
                word_end = k + 1 == len(clusters) or not clusters[k + 1][2].isalpha()
                graphemes.append(Grapheme(position, source, self._write_sigma(base, word_end)))
                continue

            letter = self._write_letter(base, position)
            slots = _place_marks(base, marks, UnmappedGrapheme)
            atoms = "".join(MARK_ATOMS[slots[slot][0]] for slot in MARK_ORDER if slot in slots)
            graphemes.append(Grapheme(position, source, letter + atoms))

        return ConversionResult(
            original=text,
            converted="".join(g.target for g in graphemes),
            graphemes=graphemes,
        )

    def to_betacode(self, text: str) -> str:
        """
        Convert Unicode Greek to canonical betacode.

        Example:
            >>> BetacodeConverter().to_betacode("λόγος")
            'lo/gos'
        """
        if not text:
            return text
        return self.to_betacode_detailed(text).converted

    def canonicalize(self, text: str) -> str:
        """Rewrite betacode in its canonical spelling for this scheme."""
        return self.to_betacode(self.to_greek(text))


# =============================================================================
# Module-level Convenience Functions
# =============================================================================

# Shared stateless converters, one per scheme
_converters: dict[Scheme, BetacodeConverter] = {}


def _get_converter(scheme: Scheme | str) -> BetacodeConverter:
    scheme = Scheme.coerce(scheme)
    converter = _converters.get(scheme)
    if converter is None:
        logger.debug(f"Creating shared {scheme.value} converter")
        converter = _converters.setdefault(scheme, BetacodeConverter(scheme))
    return converter


def to_greek(text: str, scheme: Scheme | str = Scheme.DEFAULT) -> str:
    """
    Convert betacode to Unicode Greek.

    Args:
        text: Betacode text
        scheme: Scheme.DEFAULT (ASCII case is Greek case) or Scheme.TLG
            ("*" marks capitals); the strings "default" and "tlg" also work

    Returns:
        NFC Greek text

    Raises:
        InvalidAtom: a character has no meaning in the scheme
        InvalidCombination: a mark is illegal on the letter it follows

    Example:
        >>> to_greek("qeo/v")
        'θεός'
        >>> to_greek("qeo/s", Scheme.TLG)
        'θεός'
    """
    return _get_converter(scheme).to_greek(text)


def to_betacode(text: str, scheme: Scheme | str = Scheme.DEFAULT) -> str:
    """
    Convert Unicode Greek to canonical betacode.

    Args:
        text: Greek text, precomposed or decomposed
        scheme: Betacode scheme to write

    Returns:
        Betacode with marks in canonical order (breathing, diaeresis,
        accent, iota subscript)

    Raises:
        UnmappedGrapheme: no betacode spelling exists in the scheme

    Example:
        >>> to_betacode("θεός")
        'qeo/s'
    """
    return _get_converter(scheme).to_betacode(text)


def canonicalize(text: str, scheme: Scheme | str = Scheme.DEFAULT) -> str:
    """
    Rewrite betacode in canonical form.

    Equivalent spellings collapse to one: marks are reordered, "^" becomes
    "=", TLG marks move after the capital letter and redundant sigma digits
    are dropped.

    Example:
        >>> canonicalize("*)/a", "tlg")
        '*a)/'
        >>> canonicalize("criv")
        'cris'
    """
    return _get_converter(scheme).canonicalize(text)
