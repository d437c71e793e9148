"""
Transliterator - ITRANS ↔ Devanagari Converter

Converts text, notes and Word documents between the ITRANS romanization
and Devanagari script. Conversion settings (direction, replace or append,
preview before applying) are passed in explicitly; the phonetic work is
done by the ``transliteration_engine`` package.
"""

__version__ = "1.0.0"
