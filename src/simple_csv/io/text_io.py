"""Read and decode CSV text from files and streams."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO

logger = logging.getLogger("simple-csv")

BYTE_ORDER_MARK = "\ufeff"


def strip_byte_order_mark(text: str) -> str:
    """Drop one leading U+FEFF from decoded text."""

    if text.startswith(BYTE_ORDER_MARK):
        return text[len(BYTE_ORDER_MARK) :]
    return text


def decode_text(data: bytes, encoding: str = "utf-8") -> str:
    """Decode raw bytes, dropping a leading byte-order mark.

    Args:
        data: Raw file or stream content.
        encoding: Codec name understood by :func:`codecs.lookup`.

    Returns:
        Decoded text.

    Raises:
        LookupError: If ``encoding`` is unknown.
        UnicodeDecodeError: If ``data`` is not valid in ``encoding``.
    """

    return strip_byte_order_mark(data.decode(encoding))


def read_text(path: Path, encoding: str = "utf-8") -> str:
    """Read a CSV file as text.

    Args:
        path: File to read.
        encoding: Text encoding of the file.

    Returns:
        Decoded file content.

    Raises:
        FileNotFoundError: If ``path`` is not an existing file. Nothing is read.
    """

    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"CSV file not found: {path}")

    data = path.read_bytes()
    logger.debug("Read %d bytes from %s", len(data), path)
    return decode_text(data, encoding)


def read_stream(handle: IO, encoding: str = "utf-8") -> str:
    """Read all remaining content of a text or binary file-like object.

    Args:
        handle: Open stream. Bytes are decoded with ``encoding``. A leading
            byte-order mark is dropped either way.
        encoding: Text encoding used for binary streams.

    Returns:
        Stream content as text.
    """

    content = handle.read()
    if isinstance(content, (bytes, bytearray)):
        return decode_text(bytes(content), encoding)
    return strip_byte_order_mark(content)
