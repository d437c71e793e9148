"""
Renderer: writes a PhonemeSequence out in a target scheme's orthography.
"""

from itertools import islice
from typing import Union

from .phoneme import PhonemeKind, PhonemeSequence
from .schemes import Scheme, get_scheme


def render(seq: PhonemeSequence, scheme: Union[str, Scheme]) -> str:
    """
    Render a phoneme sequence in `scheme`.

    Rules:
    - A consonant not followed by a vowel gets the scheme's virama, which
      forms conjuncts in Devanagari and is empty for ITRANS.
    - A vowel right after a consonant takes its dependent (matra) form,
      otherwise its independent form.
    - Modifiers have one fixed spelling.
    - OTHER phonemes, and phonemes the scheme cannot spell, are written as
      their source text.

    For schemes with a separator, one is inserted wherever two neighbouring
    pieces would otherwise be read back as a single longer symbol.

    Args:
        seq: Phonemes to render.
        scheme: Target scheme object or registered name.

    Returns:
        The rendered text. Identical input always gives identical output.
    """
    scheme = get_scheme(scheme)
    pieces: list[tuple[str, bool]] = []  # (text, is_literal)

    for index, phoneme in enumerate(seq):
        if phoneme.kind is PhonemeKind.OTHER:
            pieces.append((phoneme.text, True))
            continue

        previous = seq[index - 1] if index > 0 else None
        dependent = phoneme.is_vowel and previous is not None and previous.is_consonant
        symbol = scheme.symbol_for(phoneme, dependent=dependent)

        if symbol is None:
            pieces.append((phoneme.text, True))
            continue

        pieces.append((symbol, False))

        if phoneme.is_consonant and scheme.virama:
            following = seq[index + 1] if index + 1 < len(seq) else None
            if following is None or not following.is_vowel:
                pieces.append((scheme.virama, False))

    return _join(pieces, scheme)


def _join(pieces: list[tuple[str, bool]], scheme: Scheme) -> str:
    pieces = [piece for piece in pieces if piece[0]]
    if not scheme.separator:
        return "".join(text for text, _ in pieces)

    out = []
    for index, (text, literal) in enumerate(pieces):
        if index > 0:
            previous, previous_literal = pieces[index - 1]
            # Runs of passthrough text are never transliterated back
            if not (literal and previous_literal):
                if scheme.extends_match(previous, _lookahead(pieces, index, scheme.longest)):
                    out.append(scheme.separator)
        out.append(text)
    return "".join(out)


def _lookahead(pieces: list[tuple[str, bool]], start: int, size: int) -> str:
    """Concatenate pieces from `start` until at least `size` characters."""
    chunk = ""
    for text, _ in islice(pieces, start, None):
        chunk += text
        if len(chunk) >= size:
            break
    return chunk
