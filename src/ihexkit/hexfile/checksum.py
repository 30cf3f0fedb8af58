"""
Intel HEX Checksum Calculations
===============================

Every Intel HEX record ends with a one-byte checksum. It is the two's
complement of the low byte of the sum of all preceding record bytes:

    length + address_hi + address_lo + type + payload[0] + ... + payload[n-1]

so that the sum of every byte of the record, checksum included, is
0 modulo 256.

Example
-------
For ``:0300300002337A1E``:

    0x03 + 0x00 + 0x30 + 0x00 + 0x02 + 0x33 + 0x7A = 0xE2
    (0x100 - 0xE2) & 0xFF = 0x1E

Reference
---------
- Intel Hexadecimal Object File Format Specification, Rev. A (1988)
"""

from typing import Iterable


def twos_complement(value: int) -> int:
    """
    Return the 8-bit two's complement of a value.

    Args:
        value: Any non-negative integer (only the low byte matters)

    Returns:
        ``(0 - value) mod 256`` as an unsigned byte

    Example:
        >>> twos_complement(0xBB)
        69
        >>> twos_complement(0)
        0
    """
    return (-value) & 0xFF


def calculate_checksum(data: Iterable[int]) -> int:
    """
    Calculate the Intel HEX checksum of a record's bytes.

    Args:
        data: Record bytes excluding the checksum byte itself
            (length, address hi/lo, type, payload)

    Returns:
        Checksum byte (0x00 - 0xFF)

    Example:
        >>> calculate_checksum(bytes.fromhex("08A455002E2F5F6E6963655F"))
        69
    """
    return twos_complement(sum(data) & 0xFF)


def verify_checksum(record_bytes: bytes) -> bool:
    """
    Verify a complete binary record, checksum byte included.

    Args:
        record_bytes: ``[length][addr_hi][addr_lo][type][payload...][checksum]``

    Returns:
        True if all bytes sum to 0 modulo 256, False otherwise
        (including when fewer than the five fixed bytes are given)
    """
    if len(record_bytes) < 5:
        return False
    return sum(record_bytes) & 0xFF == 0
