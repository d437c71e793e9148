# Test fixtures
from .sample_texts import (
    WORD_PAIRS,
    SAMPLE_ITRANS_SENTENCE,
    SAMPLE_DEVANAGARI_SENTENCE,
    AMBIGUOUS_DEVANAGARI,
    SAMPLE_NOTE_ITRANS,
    SAMPLE_NOTE_DEVANAGARI,
    PASSTHROUGH_ITRANS,
    PASSTHROUGH_DEVANAGARI,
)

__all__ = [
    "WORD_PAIRS",
    "SAMPLE_ITRANS_SENTENCE",
    "SAMPLE_DEVANAGARI_SENTENCE",
    "AMBIGUOUS_DEVANAGARI",
    "SAMPLE_NOTE_ITRANS",
    "SAMPLE_NOTE_DEVANAGARI",
    "PASSTHROUGH_ITRANS",
    "PASSTHROUGH_DEVANAGARI",
]
