"""
Intel HEX Documents
===================

This module provides HexDocument, the ordered collection of records parsed
from one Intel HEX source, and the operations that move a whole document
between text, binary and files.

Loading
-------
Loading is fail-fast: every line is handed to parse_record() in order, lines
without a start marker are skipped, and the first line that fails to parse
aborts the load with a BadRecordError naming its 1-based line number. The
record error is chained as the cause.

    >>> from ihexkit.hexfile import HexDocument
    >>> doc = HexDocument.load(":0300300002337A1E\\n:00000001FF")
    >>> len(doc.records)
    2
    >>> doc.to_hex_text()
    ':0300300002337A1E\\n:00000001FF'

Saving
------
to_hex_text() joins the canonical record lines with a single newline and no
trailing newline. to_bytes() concatenates the binary form of every record;
this is a structural dump, not a memory image. Address records are kept as
records and no address arithmetic is applied.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Optional, Union

from ihexkit.errors import (
    BadRecordError,
    OpenError,
    RecordError,
    WriteError,
)
from ihexkit.hexfile import fileio
from ihexkit.hexfile.records import Record, RecordKind, parse_record


NO_PATH = "(none)"


def parse_records(raw_text: str) -> list[Record]:
    """
    Parse every record in a block of text.

    Args:
        raw_text: Intel HEX text, records separated by newlines

    Returns:
        Records in order of appearance

    Raises:
        BadRecordError: On the first line that fails to parse
    """
    records = []
    for index, line in enumerate(raw_text.split("\n")):
        try:
            record = parse_record(line)
        except RecordError as err:
            raise BadRecordError(line_number=index + 1) from err
        if record is not None:
            records.append(record)
    return records


@dataclass
class HexDocument:
    """
    A parsed Intel HEX document.

    Attributes:
        records: Records in source order
        byte_size: Size in bytes of the text the document was loaded from
        source_path: Path the document was loaded from, None for in-memory text
    """
    records: list[Record] = field(default_factory=list)
    byte_size: int = 0
    source_path: Optional[str] = None

    # =========================================================================
    # Loading
    # =========================================================================

    @classmethod
    def load(cls, raw_text: str) -> "HexDocument":
        """
        Parse a document from text.

        Raises:
            BadRecordError: If any record line is malformed
        """
        return cls(
            records=parse_records(raw_text),
            byte_size=len(raw_text.encode("utf-8")),
        )

    @classmethod
    def load_file(
        cls, path: Union[str, Path], encoding: str = fileio.DEFAULT_ENCODING
    ) -> "HexDocument":
        """
        Read and parse a document from a file.

        Args:
            path: File to read
            encoding: Text encoding of the file

        Returns:
            The parsed document, with source_path set

        Raises:
            OpenError: If the file cannot be read or decoded
            BadRecordError: If any record line is malformed
        """
        try:
            raw_text = fileio.read_text(path, encoding=encoding)
        except (OSError, UnicodeError) as err:
            raise OpenError(str(path)) from err

        document = cls.load(raw_text)
        document.source_path = str(path)
        return document

    def save_file(
        self, path: Union[str, Path], encoding: str = fileio.DEFAULT_ENCODING
    ) -> None:
        """
        Write the document as Intel HEX text.

        Raises:
            WriteError: If the file cannot be written
        """
        try:
            fileio.write_text(path, self.to_hex_text(), encoding=encoding)
        except (OSError, UnicodeError) as err:
            raise WriteError(str(path)) from err

    def save_binary(self, path: Union[str, Path]) -> None:
        """
        Write the binary record dump (to_bytes()) to a file.

        Raises:
            WriteError: If the file cannot be written
        """
        try:
            fileio.write_bytes(path, self.to_bytes())
        except OSError as err:
            raise WriteError(str(path)) from err

    # =========================================================================
    # Serialization
    # =========================================================================

    def to_bytes(self) -> bytes:
        """Concatenate the binary form of every record."""
        return b"".join(record.to_bytes() for record in self.records)

    def to_hex_text(self) -> str:
        """Join the record lines with newlines (no trailing newline)."""
        return "\n".join(record.to_hex_text() for record in self.records)

    def binary_size(self) -> int:
        """Total size of to_bytes() in bytes."""
        return sum(record.binary_size() for record in self.records)

    # =========================================================================
    # Queries
    # =========================================================================

    def get_path(self) -> str:
        """Source path, or "(none)" for documents loaded from text."""
        return self.source_path if self.source_path is not None else NO_PATH

    def records_of_kind(self, kind: RecordKind) -> list[Record]:
        """All records of the given type, in order."""
        return [record for record in self.records if record.kind == kind]

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)
