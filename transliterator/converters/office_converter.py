"""
Word Document Text Extractor

Reads the text of Word (.docx) notes so it can be transliterated.
Headings and list items keep a light Markdown prefix; table rows are
written one per line with tab-separated cells, since ``|`` is the ITRANS
danda and would not survive conversion.
"""

import os


class OfficeConverter:
    """Extracts text from Word documents (.docx)."""

    SUPPORTED_EXTENSIONS = {".docx"}

    @staticmethod
    def can_handle(file_path: str) -> bool:
        _, ext = os.path.splitext(file_path.lower())
        return ext in OfficeConverter.SUPPORTED_EXTENSIONS

    @staticmethod
    def extract_text(file_path: str) -> str:
        """Return the document body as text, in reading order."""
        if not os.path.isfile(file_path):
            raise FileNotFoundError(f"File not found: {file_path}")

        _, ext = os.path.splitext(file_path.lower())
        if ext != ".docx":
            raise ValueError(f"Unsupported Office format: {ext}")

        try:
            from docx import Document
        except ImportError:
            raise RuntimeError("python-docx is not installed. Run: pip install python-docx")

        doc = Document(file_path)
        paragraphs = {p._element: p for p in doc.paragraphs}
        tables = {t._element: t for t in doc.tables}
        lines = []

        for element in doc.element.body:
            tag = element.tag.split("}")[-1] if "}" in element.tag else element.tag

            if tag == "p":
                para = paragraphs.get(element)
                if para is not None:
                    lines.append(_paragraph_line(para))

            elif tag == "tbl":
                table = tables.get(element)
                if table is not None:
                    lines.extend(_table_lines(table))

        return "\n".join(lines).strip() + "\n"


def _paragraph_line(para) -> str:
    """Render one paragraph, keeping heading and list structure."""
    style_name = para.style.name if para.style else ""
    text = para.text.strip()

    if not text:
        return ""

    # Map Word heading styles to Markdown headings
    if style_name.startswith("Heading"):
        try:
            level = min(int(style_name.replace("Heading", "").strip()), 6)
        except ValueError:
            level = 2
        return f"{'#' * level} {text}"
    if style_name == "Title":
        return f"# {text}"
    if style_name.startswith("List"):
        return f"- {text}"
    return text


def _table_lines(table) -> list[str]:
    lines = []
    for row in table.rows:
        cells = [cell.text.strip().replace("\n", " ") for cell in row.cells]
        lines.append("\t".join(cells))
    return lines
