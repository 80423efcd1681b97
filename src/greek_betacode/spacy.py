"""
spaCy integration for greek-betacode.

Provides pipeline components that convert betacode documents to Greek and
Greek documents to betacode.

Example:
    >>> import spacy
    >>> from spacy.tokenizer import Tokenizer
    >>> nlp = spacy.blank("xx")
    >>> nlp.tokenizer = Tokenizer(nlp.vocab)  # betacode marks are not infixes
    >>> nlp.add_pipe("betacode_to_greek", config={"scheme": "tlg"})
    >>> doc = nlp("*)/anqrwpos")
    >>> doc._.greek
    'Ἄνθρωπος'
"""

import logging
from typing import Callable, Optional

from spacy.language import Language
from spacy.tokens import Doc, Token

from greek_betacode._errors import ConversionError
from greek_betacode.charset import Scheme
from greek_betacode.convert._rules import BetacodeConverter

__all__ = [
    "BetacodeToGreekComponent",
    "GreekToBetacodeComponent",
    "create_betacode_to_greek",
    "create_greek_to_betacode",
]

logger = logging.getLogger(__name__)


class _ConversionComponent:
    """Shared behaviour: set a Doc and Token extension from a converter."""

    extension = ""

    def __init__(
        self,
        nlp: Language,
        name: str,
        *,
        scheme: str = "default",
        strict: bool = True,
    ) -> None:
        self.name = name
        self.scheme = Scheme.coerce(scheme)
        self.strict = strict
        self._converter = BetacodeConverter(self.scheme)

        if not Doc.has_extension(self.extension):
            Doc.set_extension(self.extension, default=None)
        if not Token.has_extension(self.extension):
            Token.set_extension(self.extension, default=None)

    def _convert(self, text: str) -> str:
        raise NotImplementedError

    def _safe_convert(self, text: str) -> Optional[str]:
        """Convert, or return None and log in non-strict mode."""
        if self.strict:
            return self._convert(text)
        try:
            return self._convert(text)
        except ConversionError as err:
            logger.warning(f"{self.name}: skipping {text!r}: {err}")
            return None

    def __call__(self, doc: Doc) -> Doc:
        setattr(doc._, self.extension, self._safe_convert(doc.text))

        for token in doc:
            setattr(token._, self.extension, self._safe_convert(token.text))

        return doc

    def to_disk(self, path: str, *, exclude: tuple[str, ...] = ()) -> None:
        pass

    def from_disk(self, path: str, *, exclude: tuple[str, ...] = ()):
        return self

    def to_bytes(self, *, exclude: tuple[str, ...] = ()) -> bytes:
        return b""

    def from_bytes(self, data: bytes, *, exclude: tuple[str, ...] = ()):
        return self


# =============================================================================
# Betacode → Greek Component
# =============================================================================


@Language.factory(
    "betacode_to_greek",
    default_config={"scheme": "default", "strict": True},
    assigns=["doc._.greek", "token._.greek"],
)
def create_betacode_to_greek(
    nlp: Language,
    name: str,
    scheme: str = "default",
    strict: bool = True,
) -> "BetacodeToGreekComponent":
    """Create a betacode → Greek pipeline component."""
    return BetacodeToGreekComponent(nlp, name, scheme=scheme, strict=strict)


class BetacodeToGreekComponent(_ConversionComponent):
    """
    spaCy pipeline component that reads betacode documents.

    Extensions:
        - Doc._.greek: Full Greek text.
        - Token._.greek: Greek form of each token.

    Note: the default tokenizer splits on "/" and "=", so betacode
    documents need a whitespace tokenizer for token-level values to be
    useful. Doc._.greek does not depend on tokenization.
    """

    extension = "greek"

    def _convert(self, text: str) -> str:
        return self._converter.to_greek(text)


# =============================================================================
# Greek → Betacode Component
# =============================================================================


@Language.factory(
    "greek_to_betacode",
    default_config={"scheme": "default", "strict": True},
    assigns=["doc._.betacode", "token._.betacode"],
)
def create_greek_to_betacode(
    nlp: Language,
    name: str,
    scheme: str = "default",
    strict: bool = True,
) -> "GreekToBetacodeComponent":
    """Create a Greek → betacode pipeline component."""
    return GreekToBetacodeComponent(nlp, name, scheme=scheme, strict=strict)


class GreekToBetacodeComponent(_ConversionComponent):
    """
    spaCy pipeline component that writes Greek documents as betacode.

    Extensions:
        - Doc._.betacode: Full betacode text.
        - Token._.betacode: Betacode form of each token.
    """

    extension = "betacode"

    def _convert(self, text: str) -> str:
        return self._converter.to_betacode(text)


# =============================================================================
# Utility Functions
# =============================================================================


def get_converter_pipe(nlp: Language) -> Optional[Callable[[Doc], Doc]]:
    """Get the first betacode conversion component from a pipeline."""
    for name in ("betacode_to_greek", "greek_to_betacode"):
        if name in nlp.pipe_names:
            return nlp.get_pipe(name)
    return None
