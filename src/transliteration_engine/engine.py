"""
Conversion façade: the single entry point callers use.
"""

import logging
from enum import Enum
from typing import Union

from .renderer import render
from .schemes import DEVANAGARI, ITRANS, Scheme, UnknownSchemeError, get_scheme
from .tokenizer import tokenize

logger = logging.getLogger(__name__)


class Direction(Enum):
    """Supported conversion directions between ITRANS and Devanagari."""
    ITRANS_TO_DEV = "ITRANS_TO_DEV"
    DEV_TO_ITRANS = "DEV_TO_ITRANS"

    @property
    def source(self) -> Scheme:
        return ITRANS if self is Direction.ITRANS_TO_DEV else DEVANAGARI

    @property
    def target(self) -> Scheme:
        return DEVANAGARI if self is Direction.ITRANS_TO_DEV else ITRANS

    @property
    def icon(self) -> str:
        """Compact indicator for status displays."""
        return "🆎→🕉" if self is Direction.ITRANS_TO_DEV else "🕉→🆎"

    @property
    def label(self) -> str:
        return f"{self.icon} {self.source.name.upper()} → {self.target.name.upper()}"

    def toggled(self) -> "Direction":
        """Return the opposite direction."""
        if self is Direction.ITRANS_TO_DEV:
            return Direction.DEV_TO_ITRANS
        return Direction.ITRANS_TO_DEV

    @classmethod
    def parse(cls, value: Union[str, "Direction"]) -> "Direction":
        """
        Parse a direction from its enum value or a short alias.

        Accepts ``ITRANS_TO_DEV``, ``itrans-to-dev``, ``to-dev`` and the
        mirror forms for ``DEV_TO_ITRANS``.

        Raises:
            UnknownSchemeError: If the value names no direction.
        """
        if isinstance(value, cls):
            return value
        key = str(value).strip().upper().replace("-", "_")
        aliases = {
            "ITRANS_TO_DEV": cls.ITRANS_TO_DEV,
            "ITRANS_TO_DEVANAGARI": cls.ITRANS_TO_DEV,
            "TO_DEV": cls.ITRANS_TO_DEV,
            "DEV_TO_ITRANS": cls.DEV_TO_ITRANS,
            "DEVANAGARI_TO_ITRANS": cls.DEV_TO_ITRANS,
            "TO_ITRANS": cls.DEV_TO_ITRANS,
        }
        try:
            return aliases[key]
        except KeyError:
            raise UnknownSchemeError(
                f"Unknown direction: {value!r}. Use one of {[d.value for d in cls]}"
            ) from None


def transliterate(text: str, from_scheme: Union[str, Scheme], to_scheme: Union[str, Scheme]) -> str:
    """
    Convert `text` from one scheme to another.

    Equivalent to ``render(tokenize(text, from_scheme), to_scheme)``.
    Unrecognized characters pass through unchanged; malformed input never
    raises.

    Args:
        text: The text to convert.
        from_scheme: Source scheme object or name (``"itrans"``).
        to_scheme: Target scheme object or name (``"devanagari"``).

    Returns:
        The converted text.

    Raises:
        UnknownSchemeError: If a scheme name is not registered.
    """
    source = get_scheme(from_scheme)
    target = get_scheme(to_scheme)
    logger.debug("Transliterating %d chars %s -> %s", len(text), source.name, target.name)
    return render(tokenize(text, source), target)


def convert(text: str, direction: Union[str, Direction]) -> str:
    """Convert `text` in the given direction."""
    direction = Direction.parse(direction)
    return transliterate(text, direction.source, direction.target)
