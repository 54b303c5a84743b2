# Copyright (c) 2025 Anush Krishna
# Licensed under the MIT License. See LICENSE file in the project root.

"""Report acquisition helpers.

Reports are usually stored as ``output.json`` next to the analysed project.
Some hosts store file bodies base64-encoded; ``read_report`` can undo that
before the text reaches the normalizer.

Functions
---------
decode_report : Decode raw bytes (optionally base64) into text
read_report : Read and decode a report file
"""
from __future__ import annotations

import base64
import binascii
from pathlib import Path
from typing import Union

from analyzerview.core.exceptions import FileSystemError, ParserError
from analyzerview.core.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_REPORT_NAME = "output.json"


def decode_report(data: bytes, *, base64_encoded: bool = False, encoding: str = "utf-8") -> str:
    """
    Turn stored report bytes into text.

    Raises
    ------
    ParserError
        If the base64 payload is invalid or the bytes are not valid text in
        ``encoding``.
    """
    if base64_encoded:
        try:
            data = base64.b64decode(data.strip(), validate=True)
        except (binascii.Error, ValueError) as exc:
            raise ParserError("base64", str(exc))
    try:
        return data.decode(encoding)
    except (UnicodeDecodeError, LookupError) as exc:
        raise ParserError(encoding, str(exc))


def read_report(
    path: Union[str, Path],
    *,
    base64_encoded: bool = False,
    encoding: str = "utf-8",
) -> str:
    """
    Read a report from ``path``. A directory is searched for ``output.json``.

    Raises
    ------
    FileSystemError
        If the file does not exist or cannot be read.
    ParserError
        If the content cannot be decoded.
    """
    target = Path(path)
    if target.is_dir():
        target = target / DEFAULT_REPORT_NAME
    if not target.is_file():
        raise FileSystemError(str(target), "Report file not found")

    try:
        data = target.read_bytes()
    except OSError as exc:
        raise FileSystemError(str(target), str(exc))

    logger.debug("Read %d bytes from %s", len(data), target)
    try:
        return decode_report(data, base64_encoded=base64_encoded, encoding=encoding)
    except ParserError as exc:
        exc.details["path"] = str(target)
        raise


__all__ = ["DEFAULT_REPORT_NAME", "decode_report", "read_report"]
