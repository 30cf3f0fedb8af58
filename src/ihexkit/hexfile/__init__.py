"""
Intel HEX File Handling
=======================

This package reads, validates and writes Intel HEX documents.

This package provides:
- **Record / RecordKind**: One record line and its type code
- **HexDocument**: An ordered list of records parsed from one source
- **Checksum utilities**: Calculate and verify record checksums
- **Reports**: Human-readable summaries of a document

Quick Start
-----------
Reading a file:

    >>> from ihexkit.hexfile import HexDocument
    >>> doc = HexDocument.load_file("firmware.hex")
    >>> for record in doc:
    ...     print(record.kind.get_description(), hex(record.address))

Parsing a single line:

    >>> from ihexkit.hexfile import Record
    >>> record = Record.parse(":08A455002E2F5F6E6963655F45")
    >>> record.payload
    b'./_nice_'

Reference
---------
- Intel Hexadecimal Object File Format Specification, Rev. A (1988)
"""

# =============================================================================
# Public API Exports
# =============================================================================

from ihexkit.hexfile.checksum import (
    twos_complement,
    calculate_checksum,
    verify_checksum,
)

from ihexkit.hexfile.records import (
    RECORD_START,
    RECORD_OVERHEAD,
    RecordKind,
    Record,
    parse_record,
)

from ihexkit.hexfile.document import (
    HexDocument,
    parse_records,
)

from ihexkit.hexfile.fileio import (
    read_text,
    write_bytes,
    write_text,
)

from ihexkit.hexfile.report import (
    format_document_info,
    format_record_info,
)

__all__ = [
    # Checksum utilities
    "twos_complement",
    "calculate_checksum",
    "verify_checksum",
    # Records
    "RECORD_START",
    "RECORD_OVERHEAD",
    "RecordKind",
    "Record",
    "parse_record",
    # Documents
    "HexDocument",
    "parse_records",
    # File I/O
    "read_text",
    "write_bytes",
    "write_text",
    # Reports
    "format_document_info",
    "format_record_info",
]
