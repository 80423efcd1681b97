"""Shared fixtures for greek-betacode tests."""

import pytest

from greek_betacode import BetacodeConverter, Scheme


@pytest.fixture
def default_converter() -> BetacodeConverter:
    """Return a converter for the default (case-sensitive) scheme."""
    return BetacodeConverter(Scheme.DEFAULT)


@pytest.fixture
def tlg_converter() -> BetacodeConverter:
    """Return a converter for the TLG ("*" capitals) scheme."""
    return BetacodeConverter(Scheme.TLG)


@pytest.fixture
def canonical_words() -> dict[Scheme, list[str]]:
    """Canonical betacode words per scheme (round-trip fixed points)."""
    return {
        Scheme.DEFAULT: [
            "qeo/s", "Qeo/s", "lo/gos", "a)/nqrwpos", "A)/nqrwpos",
            "e)n a)rch=| h)=n o( lo/gos", "kai\\", "w)=|", "ui(o/s",
            "r(h/twr", "proi+e/nai", "es1", "s2a", "es3", "S3", "a)p'",
        ],
        Scheme.TLG: [
            "qeo/s", "*qeo/s", "*a)/nqrwpos", "*i)hsou=s",
            "e)n a)rxh=| h)=n o( lo/gos", "*r(o/dos", "cu/lon", "v",
            "*v", "es1", "s2a", "*s3", "lo/gos, kai\\ qeo/s.",
        ],
    }
