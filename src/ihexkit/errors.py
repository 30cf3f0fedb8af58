"""
ihexkit Error Hierarchy
=======================

This module defines the exception hierarchy for the whole package.
All exceptions inherit from IntelHexError, allowing callers to catch every
codec-related error with a single except clause if desired.

Exception Hierarchy
-------------------
IntelHexError (base)
├── RecordError (one record line)
│   ├── InvalidStartError - line does not start a record (reserved)
│   ├── InvalidTypeError - unknown record type code
│   ├── InvalidLengthError - line shorter than its declared fields
│   ├── BadChecksumError - declared checksum does not match the data
│   └── BadEncodingError - field is not valid hexadecimal
└── FileError (whole document)
    ├── BadRecordError - a record failed to parse, with its line number
    ├── OpenError - the source could not be read
    └── WriteError - the destination could not be written

Error Chaining
--------------
Every error carries an ErrorKind tag and a human-readable message. The
underlying cause is attached with ``raise ... from err`` and is available
as ``error.cause``. format_chain() walks the chain so diagnostics can show
the full path, e.g.:

    BadRecord: error while parsing record on line 3
      caused by BadChecksum: bad checksum: 0x46, calculated: 0x45 (69)
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Tag identifying which failure an IntelHexError represents."""
    INVALID_START = "InvalidStart"
    INVALID_TYPE = "InvalidType"
    INVALID_LENGTH = "InvalidLength"
    BAD_CHECKSUM = "BadChecksum"
    BAD_ENCODING = "BadEncoding"
    FILE_BAD_RECORD = "BadRecord"
    OPEN_ERROR = "OpenError"
    WRITE_ERROR = "WriteError"


# =============================================================================
# Base Exception Class
# =============================================================================

class IntelHexError(Exception):
    """
    Base exception for all ihexkit errors.

    Subclasses set ``kind`` so callers can branch on the tag instead of the
    class when that is more convenient:

        try:
            document = HexDocument.load(text)
        except IntelHexError as e:
            if e.kind is ErrorKind.FILE_BAD_RECORD:
                print(e.format_chain())

    Attributes:
        message: The error description
        kind: ErrorKind tag for this error
    """
    kind: ErrorKind = ErrorKind.INVALID_START

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    @property
    def cause(self) -> Optional[BaseException]:
        """The error this one was raised from, if any."""
        return self.__cause__

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"

    def format_chain(self) -> str:
        """
        Format this error and every chained cause, one per line.

        Causes that are not IntelHexError instances (OSError, binascii.Error,
        ...) are rendered with their class name.
        """
        lines = [str(self)]
        current = self.cause
        while current is not None:
            if isinstance(current, IntelHexError):
                lines.append(f"  caused by {current}")
            else:
                lines.append(f"  caused by {type(current).__name__}: {current}")
            current = current.__cause__
        return "\n".join(lines)


# =============================================================================
# Record Exceptions
# =============================================================================

class RecordError(IntelHexError):
    """Base exception for errors in a single record line."""
    pass


class InvalidStartError(RecordError):
    """
    Line does not begin with the ':' start marker.

    Reserved: the parser treats lines without a marker as "no record"
    and skips them, so this is not raised during normal loading.
    """
    kind = ErrorKind.INVALID_START


class InvalidTypeError(RecordError):
    """Record type code is not one of 00, 01, 02, 04, 05."""
    kind = ErrorKind.INVALID_TYPE

    def __init__(self, code: int, message: str = ""):
        self.code = code
        if not message:
            message = f"invalid record type: {code:02X}"
        super().__init__(message)


class InvalidLengthError(RecordError):
    """
    Record line is too short for the fields it declares.

    Attributes:
        actual: Number of characters after the start marker
        required: Number of characters the declared length needs
    """
    kind = ErrorKind.INVALID_LENGTH

    def __init__(self, actual: int, required: int):
        self.actual = actual
        self.required = required
        super().__init__(f"record length: {actual}, expected: {required}")


class BadChecksumError(RecordError):
    """
    Declared checksum does not match the one calculated from the record.

    Attributes:
        declared: Checksum byte as written in the line
        calculated: Checksum computed from the record bytes
    """
    kind = ErrorKind.BAD_CHECKSUM

    def __init__(self, declared: int, calculated: int):
        self.declared = declared
        self.calculated = calculated
        super().__init__(
            f"bad checksum: 0x{declared:02X}, calculated: 0x{calculated:02X} ({calculated})"
        )


class BadEncodingError(RecordError):
    """A record field is not valid hexadecimal."""
    kind = ErrorKind.BAD_ENCODING

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"error while decoding record {field}")


# =============================================================================
# File Exceptions
# =============================================================================

class FileError(IntelHexError):
    """Base exception for document-level errors."""
    pass


class BadRecordError(FileError):
    """A record in the document failed to parse."""
    kind = ErrorKind.FILE_BAD_RECORD

    def __init__(self, line_number: int):
        self.line_number = line_number
        super().__init__(f"error while parsing record on line {line_number}")


class OpenError(FileError):
    """The source file could not be opened or decoded."""
    kind = ErrorKind.OPEN_ERROR

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"error opening file: {path}")


class WriteError(FileError):
    """The destination file could not be written."""
    kind = ErrorKind.WRITE_ERROR

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"error while writing file: {path}")
