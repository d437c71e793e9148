"""
Transliterator Core Engine

Front end over the transliteration engine. Applies the user's conversion
settings (direction, replace vs. append, preview) to selections, whole
documents, files and directories.

The engine does the ITRANS ↔ Devanagari conversion; this module only
decides where the converted text goes.
"""

import os
import unicodedata
from datetime import datetime, timezone
from typing import Callable, Optional

from transliteration_engine import SCHEMES, Direction, convert as convert_direction

from .converters.office_converter import OfficeConverter
from .settings import ApplyMode, ConversionSettings


class NoTextError(ValueError):
    """Raised when there is no text to convert."""
    pass


DOCUMENT_DIVIDER = "\n\n---\n\n"


class Transliterator:
    """
    Main transliterator front end.

    Accepts text, a text range, a file path or a directory and produces
    converted text according to `settings`.
    """

    TEXT_EXTENSIONS = {".txt", ".md", ".markdown", ".text"}

    def __init__(
        self,
        settings: Optional[ConversionSettings] = None,
        output_dir: str = None,
        confirm: Optional[Callable[[str], bool]] = None,
    ):
        """
        Args:
            settings: Conversion settings; defaults to ConversionSettings().
            output_dir: Where converted files are saved
                (default: ./transliterator_output).
            confirm: Called with the preview text when
                `settings.preview_before_apply` is set. Returning False
                leaves the input unchanged. Defaults to always applying.
        """
        self.settings = settings or ConversionSettings()
        self.output_dir = output_dir or os.path.join(os.getcwd(), "transliterator_output")
        self.confirm = confirm or (lambda preview: True)

    @property
    def status(self) -> str:
        """Indicator for the current default direction."""
        return self.settings.direction.icon

    def toggle_direction(self) -> Direction:
        """Switch the default direction and return the new one."""
        self.settings = self.settings.toggle_direction()
        return self.settings.direction

    def convert_text(self, text: str, direction: Optional[Direction] = None) -> str:
        """Convert text with no apply policy (plain engine output)."""
        return convert_direction(text, direction or self.settings.direction)

    def preview(self, text: str, direction: Optional[Direction] = None) -> str:
        """
        Show the original with its conversion in parentheses.

        Raises:
            NoTextError: If `text` is empty.
        """
        if not text:
            raise NoTextError("No text selected for preview.")
        return f"{text} ({self.convert_text(text, direction)})"

    def convert_selection(
        self,
        document: str,
        start: int,
        end: int,
        direction: Optional[Direction] = None,
    ) -> str:
        """
        Convert the range ``document[start:end]`` in place.

        In replace mode the range becomes the converted text; in append mode
        it becomes ``original (converted)``.

        Returns:
            The whole document after applying the conversion.

        Raises:
            NoTextError: If the range is empty.
        """
        selected = document[start:end]
        if not selected:
            raise NoTextError("No text selected.")

        converted = self.convert_text(selected, direction)
        if not self._confirmed(selected, converted):
            return document

        if self.settings.apply_mode is ApplyMode.APPEND:
            applied = f"{selected} ({converted})"
        else:
            applied = converted
        return document[:start] + applied + document[end:]

    def convert_document(self, text: str, direction: Optional[Direction] = None) -> str:
        """
        Convert a whole document.

        In append mode the conversion follows the original after a
        horizontal rule.

        Raises:
            NoTextError: If the document is empty.
        """
        if not text:
            raise NoTextError("Document is empty.")

        converted = self.convert_text(text, direction)
        if not self._confirmed(text, converted):
            return text

        if self.settings.apply_mode is ApplyMode.APPEND:
            return f"{text}{DOCUMENT_DIVIDER}{converted}"
        return converted

    def convert(self, source: str, save: bool = True) -> str:
        """
        Convert a file or every supported file in a directory.

        Args:
            source: File path or directory path
            save: If True, save the output to the output directory

        Returns:
            The converted document text
        """
        source = source.strip()

        if os.path.isdir(source):
            print(f"[DIR] Converting all supported files in: {source}")
            return self.convert_directory(source, save=save)

        if not os.path.isfile(source):
            raise ValueError(
                f"Cannot handle source: {source}\n"
                f"Provide a valid file or directory path."
            )

        result = self.convert_document(self._read_file(source))
        if save:
            self._save(result, source)
        return result

    def convert_directory(self, dir_path: str, save: bool = True) -> str:
        """Convert all supported files in a directory."""
        results = []
        supported_exts = self.TEXT_EXTENSIONS | OfficeConverter.SUPPORTED_EXTENSIONS

        files = sorted(os.listdir(dir_path))
        converted_count = 0

        for filename in files:
            file_path = os.path.join(dir_path, filename)
            if not os.path.isfile(file_path):
                continue

            _, ext = os.path.splitext(filename.lower())
            if ext not in supported_exts:
                continue

            try:
                text = self._read_file(file_path)
                if not text:
                    print(f"[SKIPPED] Empty file: {filename}")
                    continue
                result = self.convert_document(text)
                if save:
                    self._save(result, file_path)
                results.append(result)
                converted_count += 1
            except Exception as e:
                print(f"[ERROR] Failed to convert {filename}: {e}")

        summary = (
            f"---\n"
            f"batch_conversion: true\n"
            f"direction: {self.settings.direction.value}\n"
            f"source_directory: {dir_path}\n"
            f"files_converted: {converted_count}\n"
            f"timestamp: {datetime.now(timezone.utc).isoformat()}\n"
            f"---\n\n"
        )

        return summary + DOCUMENT_DIVIDER.join(results)

    def _read_file(self, file_path: str) -> str:
        """Route a file to the appropriate reader."""
        if OfficeConverter.can_handle(file_path):
            print(f"[DOCX] Converting: {file_path}")
            return OfficeConverter.extract_text(file_path)

        print(f"[TXT] Converting: {file_path}")
        with open(file_path, "r", encoding="utf-8", errors="replace") as f:
            return f.read()

    def _save(self, text: str, source_path: str) -> str:
        os.makedirs(self.output_dir, exist_ok=True)
        out_path = os.path.join(self.output_dir, _output_name(source_path))
        with open(out_path, "w", encoding="utf-8") as f:
            f.write(text)
        print(f"[SAVED] {out_path}")
        return out_path

    def _confirmed(self, original: str, converted: str) -> bool:
        if not self.settings.preview_before_apply:
            return True
        return bool(self.confirm(f"{original} ({converted})"))

    @staticmethod
    def supported_formats() -> dict:
        """Return a dictionary of all supported input formats."""
        return {
            "Plain Text": sorted(Transliterator.TEXT_EXTENSIONS),
            "Word Documents": sorted(OfficeConverter.SUPPORTED_EXTENSIONS),
        }

    @staticmethod
    def supported_schemes() -> list[str]:
        return sorted(SCHEMES)


def _output_name(file_path: str) -> str:
    """Generate an output filename from the source file."""
    basename = os.path.basename(file_path)
    name, ext = os.path.splitext(basename)
    # Sanitize filename, keeping Devanagari vowel signs
    safe_name = "".join(
        c if c.isalnum() or c in "-_ " or unicodedata.category(c).startswith("M") else "_"
        for c in name
    )
    if ext.lower() in Transliterator.TEXT_EXTENSIONS:
        return f"{safe_name}{ext.lower()}"
    return f"{safe_name}.md"
