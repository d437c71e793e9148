"""
Scheme-independent phoneme data structures shared by the tokenizer and renderer.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional


class PhonemeKind(Enum):
    """Classes of phonetic units produced by the tokenizer."""
    CONSONANT = "consonant"
    INDEPENDENT_VOWEL = "independent_vowel"
    DEPENDENT_VOWEL = "dependent_vowel"
    MODIFIER = "modifier"
    OTHER = "other"


VOWEL_KINDS = frozenset({PhonemeKind.INDEPENDENT_VOWEL, PhonemeKind.DEPENDENT_VOWEL})

# Id of the vowel every Devanagari consonant carries when nothing follows it
INHERENT_VOWEL = "a"


@dataclass(frozen=True)
class Phoneme:
    """
    A single phonetic unit.

    `id` names the unit independently of any script (``"ka"``, ``"aa"``,
    ``"anusvara"``). For OTHER phonemes it is None and `text` holds the
    literal character. `text` is always the source spelling the unit was
    read from, which doubles as the rendering fallback.
    """
    kind: PhonemeKind
    id: Optional[str]
    text: str = ""

    def __post_init__(self):
        if self.kind is PhonemeKind.OTHER:
            if self.id is not None:
                raise ValueError(f"Other phonemes carry no id, got {self.id!r}")
        elif not self.id:
            raise ValueError(f"{self.kind.value} phoneme requires an id")

    @property
    def is_vowel(self) -> bool:
        return self.kind in VOWEL_KINDS

    @property
    def is_consonant(self) -> bool:
        return self.kind is PhonemeKind.CONSONANT

    @classmethod
    def consonant(cls, id: str, text: str = "") -> "Phoneme":
        return cls(PhonemeKind.CONSONANT, id, text)

    @classmethod
    def vowel(cls, id: str, text: str = "") -> "Phoneme":
        return cls(PhonemeKind.INDEPENDENT_VOWEL, id, text)

    @classmethod
    def mark(cls, id: str, text: str = "") -> "Phoneme":
        return cls(PhonemeKind.DEPENDENT_VOWEL, id, text)

    @classmethod
    def modifier(cls, id: str, text: str = "") -> "Phoneme":
        return cls(PhonemeKind.MODIFIER, id, text)

    @classmethod
    def other(cls, text: str) -> "Phoneme":
        return cls(PhonemeKind.OTHER, None, text)


class PhonemeSequence:
    """
    Ordered phonemes read from one input text.

    Built fresh for every conversion and discarded after rendering.
    """

    def __init__(self, phonemes=None):
        self._phonemes: list[Phoneme] = list(phonemes or [])

    def append(self, phoneme: Phoneme) -> None:
        self._phonemes.append(phoneme)

    @property
    def last(self) -> Optional[Phoneme]:
        """The most recently appended phoneme, or None when empty."""
        return self._phonemes[-1] if self._phonemes else None

    def kinds(self) -> list[PhonemeKind]:
        return [p.kind for p in self._phonemes]

    def ids(self) -> list[Optional[str]]:
        return [p.id for p in self._phonemes]

    def source_text(self) -> str:
        """Concatenate the source spellings of all phonemes."""
        return "".join(p.text for p in self._phonemes)

    def __iter__(self) -> Iterator[Phoneme]:
        return iter(self._phonemes)

    def __len__(self) -> int:
        return len(self._phonemes)

    def __getitem__(self, index):
        return self._phonemes[index]

    def __eq__(self, other) -> bool:
        if not isinstance(other, PhonemeSequence):
            return NotImplemented
        return self._phonemes == other._phonemes

    def __repr__(self) -> str:
        return f"PhonemeSequence({self._phonemes!r})"
