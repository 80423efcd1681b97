"""
Tests for the rule tables and the Scheme type.
"""

import pytest

from greek_betacode.charset import (
    DEFAULT_LETTERS,
    MARK_ATOMS,
    MARK_CARRIERS,
    MARK_ORDER,
    MARK_SLOTS,
    MARKS,
    SIGMA_VARIANTS,
    TLG_LETTERS,
    Scheme,
    betacode_letter,
    letter_table,
)


# =============================================================================
# Scheme
# =============================================================================


class TestScheme:
    def test_members(self):
        assert [s.value for s in Scheme] == ["default", "tlg"]

    def test_coerce_member(self):
        assert Scheme.coerce(Scheme.TLG) is Scheme.TLG

    @pytest.mark.parametrize("value", ["tlg", "TLG", "Tlg"])
    def test_coerce_string(self, value):
        assert Scheme.coerce(value) is Scheme.TLG

    def test_coerce_unknown(self):
        with pytest.raises(ValueError, match="Expected one of: default, tlg"):
            Scheme.coerce("robinson")

    def test_coerce_wrong_type(self):
        with pytest.raises(ValueError):
            Scheme.coerce(1)


# =============================================================================
# Letter Tables
# =============================================================================


class TestLetterTables:
    def test_letter_table_by_scheme(self):
        assert letter_table(Scheme.DEFAULT) is DEFAULT_LETTERS
        assert letter_table("tlg") is TLG_LETTERS

    def test_default_is_case_sensitive(self):
        for ascii_letter, greek in DEFAULT_LETTERS.items():
            if ascii_letter.isupper():
                assert greek.isupper(), ascii_letter
            else:
                assert greek.islower(), ascii_letter

    def test_tlg_is_lowercase_only(self):
        assert all(k.islower() and v.islower() for k, v in TLG_LETTERS.items())

    def test_scheme_specific_letters(self):
        assert DEFAULT_LETTERS["c"] == "χ"
        assert TLG_LETTERS["c"] == "ξ"
        assert TLG_LETTERS["x"] == "χ"
        assert "x" not in DEFAULT_LETTERS
        assert DEFAULT_LETTERS["v"] == "σ"
        assert TLG_LETTERS["v"] == "ϝ"

    def test_betacode_letter(self):
        assert betacode_letter("θ", Scheme.DEFAULT) == "q"
        assert betacode_letter("χ", "default") == "c"
        assert betacode_letter("χ", "tlg") == "x"

    def test_betacode_letter_unmapped(self):
        assert betacode_letter("ξ", Scheme.DEFAULT) is None
        assert betacode_letter("ϝ", Scheme.DEFAULT) is None

    def test_betacode_letter_skips_sigma(self):
        # Sigma spelling depends on word position
        assert betacode_letter("σ", Scheme.DEFAULT) is None

    def test_every_letter_writes_back(self):
        for scheme in Scheme:
            for ascii_letter, greek in letter_table(scheme).items():
                if ascii_letter.islower() and greek not in "σς":
                    assert letter_table(scheme)[betacode_letter(greek, scheme)] == greek


# =============================================================================
# Mark Tables
# =============================================================================


class TestMarkTables:
    def test_every_atom_has_a_slot(self):
        for atom, mark in MARKS.items():
            assert MARK_SLOTS[mark] in MARK_ORDER, atom

    def test_canonical_atoms_round_trip(self):
        for mark, atom in MARK_ATOMS.items():
            assert MARKS[atom] == mark

    def test_caret_is_circumflex_alias(self):
        assert MARKS["^"] == MARKS["="]
        assert MARK_ATOMS[MARKS["^"]] == "="

    def test_carriers_are_lowercase_letters(self):
        lowercase = set(TLG_LETTERS.values())
        for mark, carriers in MARK_CARRIERS.items():
            assert carriers <= lowercase, mark

    def test_rho_takes_rough_breathing_only(self):
        assert "ρ" in MARK_CARRIERS[MARKS["("]]
        assert "ρ" not in MARK_CARRIERS[MARKS[")"]]

    def test_sigma_variants(self):
        assert SIGMA_VARIANTS["1"] == ("σ", "Σ")
        assert SIGMA_VARIANTS["2"] == ("ς", "Σ")
        assert SIGMA_VARIANTS["3"] == ("ϲ", "Ϲ")
