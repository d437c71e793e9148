# Transliteration Engine Module
from .phoneme import Phoneme, PhonemeKind, PhonemeSequence
from .schemes import DEVANAGARI, ITRANS, SCHEMES, Scheme, UnknownSchemeError, get_scheme
from .tokenizer import tokenize
from .renderer import render
from .engine import Direction, convert, transliterate

__all__ = [
    "Phoneme",
    "PhonemeKind",
    "PhonemeSequence",
    "Scheme",
    "SCHEMES",
    "ITRANS",
    "DEVANAGARI",
    "UnknownSchemeError",
    "get_scheme",
    "tokenize",
    "render",
    "Direction",
    "convert",
    "transliterate",
]
