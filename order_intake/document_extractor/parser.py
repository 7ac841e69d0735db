"""
Document parser that turns order files into ordered text lines.

Supports:
- PDF: text extraction via pdfplumber, page by page
- Anything else: read as plain text
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import aiofiles
import pdfplumber

logger = logging.getLogger("order_intake.parser")


@dataclass
class ParsedDocument:
    """Result of parsing a document file."""

    text: str = ""
    page_count: int = 0
    metadata: dict = field(default_factory=dict)

    @property
    def has_text(self) -> bool:
        return bool(self.text.strip())

    @property
    def lines(self) -> list[str]:
        """Text split into lines, blank lines kept so line distances stay meaningful."""
        return self.text.splitlines()


class DocumentParser:
    """Routes documents to the appropriate parsing strategy."""

    async def parse(self, file_path: str) -> ParsedDocument:
        """Parse a document file into text.

        Raises:
            FileNotFoundError: if the file does not exist.
        """
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"Document not found: {file_path}")

        if path.suffix.lower() == ".pdf":
            return await self._parse_pdf(path)
        return await self._parse_text(path)

    async def parse_lines(self, file_path: str) -> list[str]:
        """Parse a document and return its lines.

        Raises:
            ValueError: if the document has no extractable text (e.g. a scan).
        """
        parsed = await self.parse(file_path)
        if not parsed.has_text:
            raise ValueError(f"Document has no extractable text: {file_path}")
        return parsed.lines

    async def _parse_pdf(self, path: Path) -> ParsedDocument:
        text_parts: list[str] = []
        empty_pages = 0

        with pdfplumber.open(path) as pdf:
            page_count = len(pdf.pages)
            for page in pdf.pages:
                page_text = page.extract_text() or ""
                if not page_text.strip():
                    empty_pages += 1
                text_parts.append(page_text)

        full_text = "\n".join(text_parts).strip()

        logger.info(
            "Parsed PDF %s: %d pages, %d without text, %d chars",
            path.name,
            page_count,
            empty_pages,
            len(full_text),
        )

        return ParsedDocument(
            text=full_text,
            page_count=page_count,
            metadata={"empty_pages": empty_pages, "text_chars": len(full_text)},
        )

    async def _parse_text(self, path: Path) -> ParsedDocument:
        """Fallback: read file as plain text."""
        async with aiofiles.open(path, mode="r", encoding="utf-8", errors="replace") as f:
            content = await f.read()

        return ParsedDocument(
            text=content,
            page_count=1,
            metadata={"parser": "text_fallback"},
        )
