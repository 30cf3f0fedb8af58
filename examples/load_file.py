#!/usr/bin/env python3
"""
Load an Intel HEX file and print a summary of its first records.

Usage:
    python examples/load_file.py [path]
"""

import sys

from ihexkit import HexDocument, IntelHexError, format_document_info


def main():
    path = sys.argv[1] if len(sys.argv) > 1 else "examples/example.hex"

    try:
        document = HexDocument.load_file(path)
    except IntelHexError as e:
        print(e.format_chain())
        return 1

    print(format_document_info(document, max_records=5))
    return 0


if __name__ == "__main__":
    sys.exit(main())
