"""
Conversion settings passed explicitly to the front end at call time.

Hosts own persistence: they store the plain dict from
:meth:`ConversionSettings.to_dict` and rebuild the value with
:meth:`ConversionSettings.from_dict`.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from transliteration_engine import Direction, UnknownSchemeError


class SettingsError(ValueError):
    """Raised when conversion settings are invalid."""
    pass


class ApplyMode(Enum):
    """How converted text is applied to the original."""
    REPLACE = "replace"
    APPEND = "append"


@dataclass(frozen=True)
class ConversionSettings:
    """
    User-facing conversion options.

    Defaults match a fresh install: ITRANS to Devanagari, appending the
    conversion beside the original, no preview step.
    """
    direction: Direction = Direction.ITRANS_TO_DEV
    apply_mode: ApplyMode = ApplyMode.APPEND
    preview_before_apply: bool = False

    def __post_init__(self):
        if not isinstance(self.direction, Direction):
            raise SettingsError(f"direction must be a Direction, got {self.direction!r}")
        if not isinstance(self.apply_mode, ApplyMode):
            raise SettingsError(f"apply_mode must be an ApplyMode, got {self.apply_mode!r}")
        if not isinstance(self.preview_before_apply, bool):
            raise SettingsError(
                f"preview_before_apply must be a bool, got {self.preview_before_apply!r}"
            )

    @property
    def append(self) -> bool:
        return self.apply_mode is ApplyMode.APPEND

    def toggle_direction(self) -> "ConversionSettings":
        """Return a copy with the opposite direction."""
        return replace(self, direction=self.direction.toggled())

    def to_dict(self) -> dict:
        return {
            "direction": self.direction.value,
            "apply_mode": self.apply_mode.value,
            "preview_before_apply": self.preview_before_apply,
        }

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "ConversionSettings":
        """
        Build settings from stored data, filling missing keys with defaults.

        Also accepts the ``appendMode``/``defaultDirection`` keys of older
        stored settings.

        Raises:
            SettingsError: If a stored value is not recognized.
        """
        data = dict(data or {})
        defaults = cls()

        direction = data.get("direction", data.get("defaultDirection"))
        if "apply_mode" in data:
            mode = data["apply_mode"]
        elif "appendMode" in data:
            mode = ApplyMode.APPEND if data["appendMode"] else ApplyMode.REPLACE
        else:
            mode = None

        try:
            direction = Direction.parse(direction) if direction is not None else defaults.direction
        except UnknownSchemeError as e:
            raise SettingsError(str(e)) from e

        try:
            mode = ApplyMode(mode) if mode is not None else defaults.apply_mode
        except ValueError:
            raise SettingsError(
                f"Unknown apply mode: {mode!r}. Use one of {[m.value for m in ApplyMode]}"
            ) from None

        return cls(
            direction=direction,
            apply_mode=mode,
            preview_before_apply=data.get("preview_before_apply", defaults.preview_before_apply),
        )
