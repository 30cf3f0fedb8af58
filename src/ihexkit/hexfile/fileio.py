"""
File I/O for Intel HEX Documents
================================

The document layer only needs two operations from storage: read the whole
text of a source and write the whole text of a destination. They live here
so that HexDocument stays free of filesystem details.

Both functions raise the underlying OSError (or UnicodeError) unchanged;
HexDocument wraps them in OpenError / WriteError.
"""

from pathlib import Path
from typing import Union
import logging

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "ascii"


def read_text(path: Union[str, Path], encoding: str = DEFAULT_ENCODING) -> str:
    """
    Read the full text of a file.

    Line endings are preserved exactly as stored.

    Args:
        path: File to read
        encoding: Text encoding (Intel HEX is plain ASCII)

    Returns:
        The file contents

    Raises:
        OSError: If the file cannot be opened or read
        UnicodeDecodeError: If the contents are not valid in the encoding
    """
    path = Path(path)
    with path.open("r", encoding=encoding, newline="") as f:
        text = f.read()
    logger.debug(f"Read {len(text)} characters from {path}")
    return text


def write_text(
    path: Union[str, Path], text: str, encoding: str = DEFAULT_ENCODING
) -> None:
    """
    Write text to a file, replacing any existing contents.

    No newline translation is applied, so the bytes on disk match ``text``.

    Raises:
        OSError: If the file cannot be written
        UnicodeEncodeError: If ``text`` cannot be encoded
    """
    path = Path(path)
    with path.open("w", encoding=encoding, newline="") as f:
        f.write(text)
    logger.debug(f"Wrote {len(text)} characters to {path}")


def write_bytes(path: Union[str, Path], data: bytes) -> None:
    """
    Write binary data to a file, replacing any existing contents.

    Raises:
        OSError: If the file cannot be written
    """
    path = Path(path)
    path.write_bytes(data)
    logger.debug(f"Wrote {len(data)} bytes to {path}")
