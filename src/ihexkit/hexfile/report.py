"""
Text reports for Intel HEX documents.

These functions only build strings; printing is left to the caller.
"""

from ihexkit.hexfile.document import HexDocument
from ihexkit.hexfile.records import Record


def format_record_info(index: int, record: Record) -> str:
    """Format one record as an indented block of ``Label: value`` lines."""
    data = record.payload.hex().upper() or "-"
    lines = [
        f"\tIndex:    {index}",
        f"\tType:     0x{record.kind:02X} ({record.kind.get_description()})",
        f"\tAddr:     0x{record.address:04X} ({record.address})",
        f"\tData:     {data} ({record.length} bytes)",
        f"\tChecksum: 0x{record.checksum:02X} ({record.checksum})",
    ]
    return "\n".join(lines)


def format_document_info(document: HexDocument, max_records: int = 5) -> str:
    """
    Format a summary of a document followed by its first records.

    Args:
        document: The document to describe
        max_records: How many records to list (clamped to the record count)

    Returns:
        Multi-line report text
    """
    count = min(max(max_records, 0), len(document.records))

    blocks = [
        "\n".join([
            f"File:     {document.get_path()}",
            f"Size:     {document.byte_size} bytes",
            f"Bin Size: {document.binary_size()} bytes",
            f"Records:  {len(document.records)}",
        ])
    ]
    for index in range(count):
        blocks.append(format_record_info(index, document.records[index]))

    return "\n\n".join(blocks)
