"""
Scheme definitions for the transliteration engine.

A :class:`Scheme` lists a script's symbols by functional group (consonants,
independent vowels, dependent vowel marks, modifiers) against shared phoneme
ids, so any two schemes can be mapped onto each other through those ids.

Two schemes are registered by default::

    ITRANS       ASCII romanization (``rAma``)
    DEVANAGARI   Brahmic script (``राम``)

Scheme tables are built once at import time and never mutated.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Union

from .phoneme import Phoneme, PhonemeKind


class UnknownSchemeError(ValueError):
    """Raised when a scheme name is not registered."""
    pass


# Phoneme ids, in table order. Names follow the Unicode character names.
CONSONANT_IDS = """
    ka kha ga gha nga
    ca cha ja jha nya
    tta ttha dda ddha nna
    ta tha da dha na
    pa pha ba bha ma
    ya ra la va
    sha ssa sa ha
    lla kssa jnya
    qa khha ghha za dddha rha fa yya
""".split()

VOWEL_IDS = """
    a aa i ii u uu
    vocalic_r vocalic_rr vocalic_l vocalic_ll
    e ai o au
""".split()

MODIFIER_IDS = """
    anusvara visarga candrabindu avagraha om danda double_danda
""".split()


@dataclass(frozen=True, eq=False)
class Scheme:
    """
    Symbol tables for one script or romanization.

    Attributes:
        name: Registry name (lowercase).
        consonants: Phoneme id -> consonant symbol.
        vowels: Phoneme id -> independent vowel symbol.
        marks: Phoneme id -> dependent vowel (matra) symbol.
        modifiers: Phoneme id -> modifier symbol.
        virama: Cluster joiner written after a consonant with no vowel.
            Empty for romanizations, where consonants simply concatenate.
        separator: Null symbol that breaks a greedy match without producing
            a phoneme (ITRANS ``{}``). Empty if the scheme has none.
        synonyms: Canonical symbol -> alternative spellings accepted on input.
        is_roman: True for romanizations, whose vowels are always explicit.
    """
    name: str
    consonants: Mapping[str, str]
    vowels: Mapping[str, str]
    marks: Mapping[str, str]
    modifiers: Mapping[str, str]
    virama: str = ""
    separator: str = ""
    synonyms: Mapping[str, tuple] = field(default_factory=dict)
    is_roman: bool = True
    _table: Mapping[str, tuple] = field(init=False, repr=False)
    longest: int = field(init=False, repr=False)

    def __post_init__(self):
        for attr in ("consonants", "vowels", "marks", "modifiers", "synonyms"):
            object.__setattr__(self, attr, MappingProxyType(dict(getattr(self, attr))))

        if self.is_roman:
            for pid, symbol in self.marks.items():
                if self.vowels.get(pid) != symbol:
                    raise ValueError(
                        f"Roman scheme {self.name} must spell mark {pid!r} like its vowel"
                    )

        table: dict[str, tuple] = {}
        groups = [
            (PhonemeKind.CONSONANT, self.consonants),
            (PhonemeKind.INDEPENDENT_VOWEL, self.vowels),
            (PhonemeKind.MODIFIER, self.modifiers),
        ]
        # Roman marks share the vowel spellings; the tokenizer picks the form.
        if not self.is_roman:
            groups.append((PhonemeKind.DEPENDENT_VOWEL, self.marks))

        for kind, group in groups:
            for pid, symbol in group.items():
                if symbol:
                    _register(table, symbol, (kind, pid), self.name)

        for canonical, alternates in self.synonyms.items():
            if canonical not in table:
                raise ValueError(f"Synonym target {canonical!r} is not a {self.name} symbol")
            for alternate in alternates:
                _register(table, alternate, table[canonical], self.name)

        object.__setattr__(self, "_table", MappingProxyType(table))
        object.__setattr__(self, "longest", max(len(symbol) for symbol in table))

    def match(self, text: str, pos: int = 0) -> Optional[tuple[str, PhonemeKind, str]]:
        """
        Find the longest symbol starting at `pos`.

        Returns:
            (symbol, kind, phoneme id), or None if no symbol starts there.
        """
        for length in range(min(self.longest, len(text) - pos), 0, -1):
            symbol = text[pos:pos + length]
            entry = self._table.get(symbol)
            if entry is not None:
                return symbol, entry[0], entry[1]
        return None

    def symbol_for(self, phoneme: Phoneme, dependent: bool = False) -> Optional[str]:
        """
        Spell a phoneme in this scheme.

        Vowels use the dependent (matra) form when `dependent` is set.
        Returns None when the scheme has no symbol for the phoneme.
        """
        kind = phoneme.kind
        if kind is PhonemeKind.CONSONANT:
            return self.consonants.get(phoneme.id)
        if kind is PhonemeKind.MODIFIER:
            return self.modifiers.get(phoneme.id)
        if phoneme.is_vowel:
            group = self.marks if dependent else self.vowels
            return group.get(phoneme.id)
        return None

    def extends_match(self, previous: str, following: str) -> bool:
        """
        Check whether `previous` would be read as part of a longer symbol
        when written directly before `following`.
        """
        candidate = previous + following[:self.longest]
        for length in range(min(self.longest, len(candidate)), len(previous), -1):
            if candidate[:length] in self._table:
                return True
        return False

    @property
    def symbols(self) -> list[str]:
        """Every symbol the tokenizer recognizes, synonyms included."""
        return sorted(self._table)

    def __repr__(self) -> str:
        return f"Scheme({self.name!r})"


def _register(table: dict, symbol: str, entry: tuple, scheme_name: str) -> None:
    existing = table.get(symbol)
    if existing is not None and existing != entry:
        raise ValueError(
            f"Symbol {symbol!r} is ambiguous in {scheme_name}: {existing[1]} vs {entry[1]}"
        )
    table[symbol] = entry


def _group(ids: list[str], symbols: list[str]) -> dict[str, str]:
    if len(ids) != len(symbols):
        raise ValueError(f"Expected {len(ids)} symbols, got {len(symbols)}")
    return dict(zip(ids, symbols))


# Devanagari
# ----------
NUKTA = "\u093c"
_NUKTA_BASES = "क ख ग ज ड ढ फ य".split()
# U+0958..U+095F, precomposed forms of the nukta consonants above
_PRECOMPOSED_NUKTA = [chr(code) for code in range(0x0958, 0x0960)]

DEVANAGARI = Scheme(
    name="devanagari",
    consonants=_group(CONSONANT_IDS, """
        क ख ग घ ङ
        च छ ज झ ञ
        ट ठ ड ढ ण
        त थ द ध न
        प फ ब भ म
        य र ल व
        श ष स ह
        ळ क्ष ज्ञ
    """.split() + [base + NUKTA for base in _NUKTA_BASES]),
    vowels=_group(VOWEL_IDS, "अ आ इ ई उ ऊ ऋ ॠ ऌ ॡ ए ऐ ओ औ".split()),
    # The inherent vowel has no mark.
    marks=_group(VOWEL_IDS, [""] + "ा ि ी ु ू ृ ॄ ॢ ॣ े ै ो ौ".split()),
    modifiers=_group(MODIFIER_IDS, "ं ः ँ ऽ ॐ । ॥".split()),
    virama="्",
    synonyms={
        base + NUKTA: (precomposed,)
        for base, precomposed in zip(_NUKTA_BASES, _PRECOMPOSED_NUKTA)
    },
    is_roman=False,
)


# ITRANS
# ------
_ITRANS_VOWELS = "a A i I u U RRi RRI LLi LLI e ai o au".split()

ITRANS = Scheme(
    name="itrans",
    consonants=_group(CONSONANT_IDS, """
        k kh g gh ~N
        ch Ch j jh ~n
        T Th D Dh N
        t th d dh n
        p ph b bh m
        y r l v
        sh Sh s h
        L kSh j~n
        q K G z .D .Dh f Y
    """.split()),
    vowels=_group(VOWEL_IDS, _ITRANS_VOWELS),
    marks=_group(VOWEL_IDS, _ITRANS_VOWELS),
    modifiers=_group(MODIFIER_IDS, "M H .N .a OM | ||".split()),
    separator="{}",
    synonyms={
        "A": ("aa",),
        "I": ("ii", "ee"),
        "U": ("uu", "oo"),
        "RRi": ("R^i",),
        "RRI": ("R^I",),
        "LLi": ("L^i",),
        "LLI": ("L^I",),
        "M": (".m", ".n"),
        "v": ("w",),
        "Ch": ("chh",),
        "Sh": ("S", "shh"),
        "~N": ("N^",),
        "~n": ("JN",),
        "kSh": ("x", "kS"),
        "j~n": ("GY",),
        "OM": ("AUM",),
    },
)


SCHEMES: Mapping[str, Scheme] = MappingProxyType({
    ITRANS.name: ITRANS,
    DEVANAGARI.name: DEVANAGARI,
})


def get_scheme(scheme: Union[str, Scheme]) -> Scheme:
    """
    Resolve a scheme object or a registered name (case-insensitive).

    Raises:
        UnknownSchemeError: If the name is not registered.
    """
    if isinstance(scheme, Scheme):
        return scheme
    key = str(scheme).strip().lower()
    try:
        return SCHEMES[key]
    except KeyError:
        raise UnknownSchemeError(
            f"Unknown scheme: {scheme!r}. Available: {', '.join(sorted(SCHEMES))}"
        ) from None
