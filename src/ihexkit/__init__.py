"""
ihexkit - Intel HEX Codec
=========================

This package parses Intel HEX documents into records, validates each
record's checksum, and writes the records back out as canonical hex text or
as a raw binary dump.

Intel HEX represents binary firmware images as ASCII lines, one record per
line. Each record carries a length, a 16-bit load offset, a type code, a
payload and a checksum.

Main Components
---------------
- **hexfile**: Record codec, document assembler, checksum utilities
- **errors**: Exception hierarchy with error chaining
- **cli**: The ``ihex`` command-line tool

Quick Start
-----------
Parse text:
    >>> from ihexkit import HexDocument
    >>> doc = HexDocument.load(":08A455002E2F5F6E6963655F45")
    >>> doc.records[0].payload
    b'./_nice_'

Round-trip a file:
    >>> doc = HexDocument.load_file("firmware.hex")
    >>> doc.save_file("firmware.clean.hex")

Or use the command-line tool:
    $ ihex info firmware.hex
    $ ihex validate firmware.hex
    $ ihex tobin firmware.hex -o firmware.bin
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from ihexkit.errors import (
    ErrorKind,
    IntelHexError,
    RecordError,
    InvalidStartError,
    InvalidTypeError,
    InvalidLengthError,
    BadChecksumError,
    BadEncodingError,
    FileError,
    BadRecordError,
    OpenError,
    WriteError,
)

from ihexkit.hexfile import (
    RECORD_START,
    RECORD_OVERHEAD,
    RecordKind,
    Record,
    HexDocument,
    parse_record,
    parse_records,
    calculate_checksum,
    verify_checksum,
    format_document_info,
)

from ihexkit.config import (
    CodecConfig,
    get_default_config,
    set_default_config,
)

__all__ = [
    # Version info
    "__version__",
    # Exception hierarchy
    "ErrorKind",
    "IntelHexError",
    "RecordError",
    "InvalidStartError",
    "InvalidTypeError",
    "InvalidLengthError",
    "BadChecksumError",
    "BadEncodingError",
    "FileError",
    "BadRecordError",
    "OpenError",
    "WriteError",
    # Codec
    "RECORD_START",
    "RECORD_OVERHEAD",
    "RecordKind",
    "Record",
    "HexDocument",
    "parse_record",
    "parse_records",
    "calculate_checksum",
    "verify_checksum",
    "format_document_info",
    # Configuration
    "CodecConfig",
    "get_default_config",
    "set_default_config",
]
