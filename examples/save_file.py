#!/usr/bin/env python3
"""
Parse a record from text and save it to a file named after its payload.

The record ``:08A455002E2F5F6E6963655F45`` carries the ASCII bytes
``./_nice_``, so the document is written to ``./_nice_.hex``.

Usage:
    python examples/save_file.py
"""

import sys

from ihexkit import HexDocument, IntelHexError, format_document_info


def main():
    try:
        document = HexDocument.load(":08A455002E2F5F6E6963655F45")
    except IntelHexError as e:
        print(e.format_chain())
        return 1

    print(format_document_info(document, max_records=1))

    file_path = f"{document.records[0].payload.decode('ascii')}.hex"
    print(f"Saving file: {file_path} ...")

    try:
        document.save_file(file_path)
    except IntelHexError as e:
        print(e.format_chain())
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
