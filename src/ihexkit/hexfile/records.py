"""
Intel HEX Record Definitions
============================

This module defines the record types and the Record data structure, and
implements the conversion between one line of Intel HEX text and a Record.

Record Format
-------------
Each record is one line of ASCII text:

    :LLAAAATT[DD...]CC

    Field   Chars       Description
    -----   -----       -----------
    :       1           Start marker
    LL      2           Payload length in bytes
    AAAA    4           Load offset (big-endian)
    TT      2           Record type
    DD      2 * LL      Payload
    CC      2           Checksum (see checksum.py)

Hex digits are accepted in either case and always written in upper case.

Record Types
------------
- $00: Data
- $01: End Of File
- $02: Extended Segment Address
- $04: Extended Linear Address
- $05: Start Linear Address

No other type codes are valid ($03 Start Segment Address is not supported).

Binary Form
-----------
The binary form of a record is the decoded line without the start marker:

    [length][addr_hi][addr_lo][type][payload...][checksum]

That is 5 bytes of fixed fields plus the payload.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional
import binascii
import struct

from ihexkit.errors import (
    BadChecksumError,
    BadEncodingError,
    InvalidLengthError,
    InvalidTypeError,
)
from ihexkit.hexfile.checksum import calculate_checksum


RECORD_START = ":"

# length(1) + address(2) + type(1) + checksum(1)
RECORD_OVERHEAD = 5

# Hex characters after the start marker for a record with no payload
MIN_RECORD_CHARS = RECORD_OVERHEAD * 2

MAX_PAYLOAD_LENGTH = 0xFF
MAX_ADDRESS = 0xFFFF


# =============================================================================
# Enumeration Types
# =============================================================================

class RecordKind(IntEnum):
    """
    Intel HEX record type codes.

    Each record carries a one-byte type code identifying how its address
    and payload are to be interpreted.
    """
    DATA = 0x00
    END_OF_FILE = 0x01
    EXTENDED_SEGMENT_ADDRESS = 0x02
    EXTENDED_LINEAR_ADDRESS = 0x04
    START_LINEAR_ADDRESS = 0x05

    @classmethod
    def from_code(cls, code: int) -> "RecordKind":
        """
        Convert a type code to a RecordKind.

        Raises:
            InvalidTypeError: If the code is not one of the five standard types
        """
        try:
            return cls(code)
        except ValueError as err:
            raise InvalidTypeError(code) from err

    def get_description(self) -> str:
        """Get a human-readable name for this record type."""
        descriptions = {
            RecordKind.DATA: "Data",
            RecordKind.END_OF_FILE: "End Of File",
            RecordKind.EXTENDED_SEGMENT_ADDRESS: "Extended Segment Address",
            RecordKind.EXTENDED_LINEAR_ADDRESS: "Extended Linear Address",
            RecordKind.START_LINEAR_ADDRESS: "Start Linear Address",
        }
        return descriptions[self]


# =============================================================================
# Record
# =============================================================================

@dataclass(frozen=True)
class Record:
    """
    One Intel HEX record.

    Records are immutable. Construction validates every field, including
    the checksum, so a Record that exists always satisfies:

        checksum == calculate_checksum(to_bytes()[:-1])

    Use Record.parse() to read a line of text, or Record.build() to create
    a new record with its checksum computed.

    Attributes:
        length: Number of payload bytes (0-255)
        address: 16-bit load offset
        kind: Record type
        payload: Payload bytes (len(payload) == length)
        checksum: Checksum byte as declared

    Example:
        >>> record = Record.parse(":0300300002337A1E")
        >>> record.address
        48
        >>> record.payload.hex()
        '02337a'
    """
    length: int
    address: int
    kind: RecordKind
    payload: bytes = field(repr=False)
    checksum: int

    def __post_init__(self) -> None:
        """Validate fields and the checksum."""
        # Frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "payload", bytes(self.payload))
        object.__setattr__(self, "kind", RecordKind.from_code(self.kind))

        if not 0 <= self.length <= MAX_PAYLOAD_LENGTH:
            raise ValueError(f"Record length out of range: {self.length}")
        if len(self.payload) != self.length:
            raise ValueError(
                f"Payload has {len(self.payload)} bytes, length field says {self.length}"
            )
        if not 0 <= self.address <= MAX_ADDRESS:
            raise ValueError(f"Record address out of range: 0x{self.address:X}")
        if not 0 <= self.checksum <= 0xFF:
            raise ValueError(f"Checksum out of range: {self.checksum}")

        calculated = self.calculate_checksum()
        if calculated != self.checksum:
            raise BadChecksumError(declared=self.checksum, calculated=calculated)

    @classmethod
    def build(
        cls, address: int, kind: RecordKind, payload: bytes = b""
    ) -> "Record":
        """
        Create a record from its address, type and payload.

        The length and checksum fields are derived from the other fields.

        Args:
            address: 16-bit load offset
            kind: Record type
            payload: Payload bytes (at most 255)

        Returns:
            A valid Record

        Raises:
            ValueError: If the payload is too long or the address out of range
            InvalidTypeError: If kind is not one of the five standard types
        """
        kind = RecordKind.from_code(kind)
        payload = bytes(payload)
        if len(payload) > MAX_PAYLOAD_LENGTH:
            raise ValueError(
                f"Payload too long: {len(payload)} bytes (max {MAX_PAYLOAD_LENGTH})"
            )
        if not 0 <= address <= MAX_ADDRESS:
            raise ValueError(f"Record address out of range: 0x{address:X}")

        header = struct.pack(">BHB", len(payload), address, kind)
        return cls(
            length=len(payload),
            address=address,
            kind=kind,
            payload=payload,
            checksum=calculate_checksum(header + payload),
        )

    @classmethod
    def parse(cls, line: str) -> Optional["Record"]:
        """Parse one line of text. See parse_record()."""
        return parse_record(line)

    def calculate_checksum(self) -> int:
        """Compute the checksum from the header fields and payload."""
        header = struct.pack(">BHB", self.length, self.address, self.kind)
        return calculate_checksum(header + self.payload)

    def binary_size(self) -> int:
        """Total size of the binary form of this record in bytes."""
        return len(self.payload) + RECORD_OVERHEAD

    def to_bytes(self) -> bytes:
        """Serialize to ``[length][addr_hi][addr_lo][type][payload...][checksum]``."""
        return (
            struct.pack(">BHB", self.length, self.address, self.kind)
            + self.payload
            + bytes([self.checksum])
        )

    def to_hex_text(self) -> str:
        """Serialize to a canonical upper-case Intel HEX line."""
        return RECORD_START + self.to_bytes().hex().upper()


# =============================================================================
# Line Parsing
# =============================================================================

def _decode_field(text: str, name: str) -> bytes:
    """Decode one fixed-width hex field, naming the field on failure."""
    try:
        return binascii.unhexlify(text)
    except ValueError as err:
        # binascii.Error for bad digits or odd length, ValueError for non-ASCII
        raise BadEncodingError(name) from err


def parse_record(line: str) -> Optional[Record]:
    """
    Parse one line of Intel HEX text.

    The start marker may be preceded by other characters; everything up to
    and including the first ':' is skipped. Trailing whitespace is ignored,
    as is anything after the checksum field.

    Args:
        line: One line of text

    Returns:
        The parsed Record, or None if the line contains no start marker
        (blank lines, comments, stray whitespace)

    Raises:
        InvalidLengthError: If the line is shorter than its declared fields
        BadEncodingError: If a field is not valid hexadecimal
        InvalidTypeError: If the type code is unknown
        BadChecksumError: If the checksum does not match

    Example:
        >>> record = parse_record(":08A455002E2F5F6E6963655F45")
        >>> record.payload
        b'./_nice_'
        >>> parse_record("") is None
        True
    """
    start = line.find(RECORD_START)
    if start < 0:
        return None

    body = line[start + 1:].rstrip()

    if len(body) < 2:
        raise InvalidLengthError(actual=len(body), required=MIN_RECORD_CHARS)

    length = _decode_field(body[0:2], "length")[0]

    data_end = 8 + length * 2
    record_end = data_end + 2

    if len(body) < record_end:
        raise InvalidLengthError(actual=len(body), required=record_end)

    address = int.from_bytes(_decode_field(body[2:6], "address"), "big")
    kind = RecordKind.from_code(_decode_field(body[6:8], "type")[0])
    payload = _decode_field(body[8:data_end], "payload")
    checksum = _decode_field(body[data_end:record_end], "checksum")[0]

    return Record(
        length=length,
        address=address,
        kind=kind,
        payload=payload,
        checksum=checksum,
    )
