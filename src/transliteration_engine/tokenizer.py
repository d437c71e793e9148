"""
Tokenizer: reads source text into a scheme-independent PhonemeSequence.
"""

from typing import Union

from .phoneme import INHERENT_VOWEL, Phoneme, PhonemeKind, PhonemeSequence
from .schemes import Scheme, get_scheme


def tokenize(text: str, scheme: Union[str, Scheme]) -> PhonemeSequence:
    """
    Split `text` into phonemes using `scheme`'s symbol table.

    Symbols are matched longest-first, so ITRANS ``chh`` wins over ``ch`` and
    ``aa`` over ``a``. Characters that start no symbol are kept as OTHER
    phonemes, one character at a time.

    For Brahmic schemes every consonant gets its vowel resolved from the
    single symbol that follows it: a virama leaves it bare, a dependent mark
    is attached, anything else yields the inherent ``a``.

    Args:
        text: Source text in `scheme`.
        scheme: Scheme object or registered name.

    Returns:
        The phoneme sequence; never raises on malformed text.
    """
    scheme = get_scheme(scheme)
    seq = PhonemeSequence()
    pos = 0
    length = len(text)

    while pos < length:
        if scheme.separator and text.startswith(scheme.separator, pos):
            pos += len(scheme.separator)
            continue

        found = scheme.match(text, pos)
        if found is None:
            seq.append(Phoneme.other(text[pos]))
            pos += 1
            continue

        symbol, kind, pid = found
        pos += len(symbol)

        if kind is PhonemeKind.CONSONANT:
            seq.append(Phoneme.consonant(pid, symbol))
            if not scheme.is_roman:
                pos = _resolve_vowel(text, pos, scheme, seq)
            continue

        if kind is PhonemeKind.INDEPENDENT_VOWEL and scheme.is_roman:
            previous = seq.last
            if previous is not None and previous.is_consonant:
                kind = PhonemeKind.DEPENDENT_VOWEL

        seq.append(Phoneme(kind, pid, symbol))

    return seq


def _resolve_vowel(text: str, pos: int, scheme: Scheme, seq: PhonemeSequence) -> int:
    """Look one symbol past a Brahmic consonant and append its vowel, if any."""
    if scheme.virama and text.startswith(scheme.virama, pos):
        return pos + len(scheme.virama)

    following = scheme.match(text, pos)
    if following is not None and following[1] is PhonemeKind.DEPENDENT_VOWEL:
        symbol, _, pid = following
        seq.append(Phoneme.mark(pid, symbol))
        return pos + len(symbol)

    seq.append(Phoneme.mark(INHERENT_VOWEL))
    return pos
