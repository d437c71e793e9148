"""
Unit tests for the tokenizer module.
"""

import pytest

from transliteration_engine.phoneme import Phoneme, PhonemeKind
from transliteration_engine.tokenizer import tokenize

C = PhonemeKind.CONSONANT
IV = PhonemeKind.INDEPENDENT_VOWEL
DV = PhonemeKind.DEPENDENT_VOWEL
MOD = PhonemeKind.MODIFIER
OTHER = PhonemeKind.OTHER


class TestItransTokenizer:
    """Tests for tokenizing ITRANS text."""

    def test_longest_match_chh(self, itrans):
        """Test that chha is one consonant plus a vowel."""
        seq = tokenize("chha", itrans)
        assert len(seq) == 2
        assert seq[0] == Phoneme.consonant("cha", "chh")
        assert seq[1] == Phoneme.mark("a", "a")

    def test_rama(self, itrans):
        """Test a simple word."""
        seq = tokenize("rAma", itrans)
        assert seq.kinds() == [C, DV, C, DV]
        assert seq.ids() == ["ra", "aa", "ma", "a"]

    def test_vowel_after_consonant_is_dependent(self, itrans):
        """Test vowel form selection by position."""
        seq = tokenize("aki", itrans)
        assert seq.kinds() == [IV, C, DV]

    def test_vowel_after_vowel_is_independent(self, itrans):
        """Test that aa followed by i gives two independent vowels."""
        seq = tokenize("aai", itrans)
        assert seq.ids() == ["aa", "i"]
        assert seq.kinds() == [IV, IV]

    def test_ai_diphthong(self, itrans):
        """Test that ai is matched as one vowel."""
        seq = tokenize("kai", itrans)
        assert seq.ids() == ["ka", "ai"]

    def test_conjunct_has_no_vowel_between(self, itrans):
        """Test that kta yields two consonants in a row."""
        seq = tokenize("kta", itrans)
        assert seq.kinds() == [C, C, DV]

    def test_modifiers(self, itrans):
        """Test anusvara and visarga."""
        seq = tokenize("aMH", itrans)
        assert seq.kinds() == [IV, MOD, MOD]
        assert seq.ids() == ["a", "anusvara", "visarga"]

    def test_synonyms_tokenize_alike(self, itrans):
        """Test that alternative spellings give the same ids."""
        assert tokenize("raama", itrans).ids() == tokenize("rAma", itrans).ids()
        assert tokenize("kR^iShNa", itrans).ids() == tokenize("kRRiShNa", itrans).ids()

    def test_passthrough_characters(self, itrans):
        """Test that unknown characters become OTHER phonemes in place."""
        seq = tokenize("ka, 1!", itrans)
        assert seq.kinds() == [C, DV, OTHER, OTHER, OTHER, OTHER]
        assert [p.text for p in seq][2:] == [",", " ", "1", "!"]

    def test_separator_is_consumed(self, itrans):
        """Test that {} breaks a match and emits nothing."""
        seq = tokenize("k{}ha", itrans)
        assert seq.ids() == ["ka", "ha", "a"]

    def test_separator_splits_vowels(self, itrans):
        """Test that ka{}i keeps a and i apart."""
        seq = tokenize("ka{}i", itrans)
        assert seq.ids() == ["ka", "a", "i"]
        assert seq.kinds() == [C, DV, IV]

    def test_partial_symbol_at_end(self, itrans):
        """Test that a cut-off symbol degrades to raw characters."""
        seq = tokenize("kR^", itrans)
        assert seq.kinds() == [C, OTHER, OTHER]
        assert seq.source_text() == "kR^"

    def test_empty(self, itrans):
        """Test empty input."""
        assert len(tokenize("", itrans)) == 0

    def test_scheme_by_name(self):
        """Test passing the scheme as a name."""
        assert tokenize("ka", "itrans").ids() == ["ka", "a"]


class TestDevanagariTokenizer:
    """Tests for tokenizing Devanagari text."""

    def test_inherent_vowel(self, devanagari):
        """Test that a lone consonant carries the inherent a."""
        seq = tokenize("क", devanagari)
        assert seq.kinds() == [C, DV]
        assert seq[1] == Phoneme.mark("a")

    def test_virama_leaves_consonant_bare(self, devanagari):
        """Test that virama suppresses the inherent vowel."""
        seq = tokenize("क्", devanagari)
        assert seq.kinds() == [C]

    def test_explicit_matra(self, devanagari):
        """Test consonant plus matra."""
        seq = tokenize("कि", devanagari)
        assert seq.kinds() == [C, DV]
        assert seq[1] == Phoneme.mark("i", "ि")

    def test_rama(self, devanagari):
        """Test a simple word."""
        seq = tokenize("राम", devanagari)
        assert seq.ids() == ["ra", "aa", "ma", "a"]
        assert seq.kinds() == [C, DV, C, DV]

    def test_conjunct(self, devanagari):
        """Test a virama-joined cluster."""
        seq = tokenize("स्त", devanagari)
        assert seq.ids() == ["sa", "ta", "a"]
        assert seq.kinds() == [C, C, DV]

    def test_independent_vowel_after_consonant(self, devanagari):
        """Test that कइ is ka followed by an independent i."""
        seq = tokenize("कइ", devanagari)
        assert seq.ids() == ["ka", "a", "i"]
        assert seq.kinds() == [C, DV, IV]

    def test_modifier_after_consonant(self, devanagari):
        """Test that anusvara does not suppress the inherent vowel."""
        seq = tokenize("कं", devanagari)
        assert seq.ids() == ["ka", "a", "anusvara"]

    def test_compound_consonants(self, devanagari):
        """Test that क्ष and ज्ञ are read as units."""
        assert tokenize("क्षा", devanagari).ids() == ["kssa", "aa"]
        assert tokenize("ज्ञ", devanagari).ids() == ["jnya", "a"]

    def test_nukta_forms(self, devanagari):
        """Test precomposed and decomposed nukta consonants."""
        assert tokenize("\u095e", devanagari).ids() == ["fa", "a"]
        assert tokenize("\u092b\u093c", devanagari).ids() == ["fa", "a"]

    def test_stray_virama_passes_through(self, devanagari):
        """Test a virama with no consonant before it."""
        seq = tokenize("्", devanagari)
        assert seq.kinds() == [OTHER]

    def test_stray_matra(self, devanagari):
        """Test a matra with no consonant before it."""
        seq = tokenize("ा", devanagari)
        assert seq.kinds() == [DV]

    def test_mixed_scripts(self, devanagari):
        """Test Latin text inside Devanagari passes through."""
        seq = tokenize("राम ok", devanagari)
        assert [p.text for p in seq if p.kind is OTHER] == [" ", "o", "k"]

    @pytest.mark.parametrize("text", ["", " ", "123", "🙏"])
    def test_nothing_recognized(self, devanagari, text):
        """Test inputs with no Devanagari symbols."""
        seq = tokenize(text, devanagari)
        assert all(p.kind is OTHER for p in seq)
        assert seq.source_text() == text
