"""
Reading names out of uploaded files.

Responsibilities:
- encoding detection + decoding (best effort, never raises)
- newline normalization
- one name per line for .txt, one column for .csv
"""

from __future__ import annotations

import csv
import io
import logging
from typing import Any, Dict, List, Tuple

from charset_normalizer import from_bytes

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".txt", ".csv")


class MissingColumnError(ValueError):
    def __init__(self, column: str, available: List[str]):
        super().__init__(f"Column {column!r} not found; available: {', '.join(available) or 'none'}")
        self.column = column
        self.available = available


def decode_upload(raw: bytes) -> Tuple[str, Dict[str, Any]]:
    """
    Decode uploaded bytes to text.

    Rules:
    - Detect encoding best-effort via charset-normalizer.
    - If decode fails, fall back to UTF-8, then to replacement characters.
    - CRLF/CR are normalized to LF.
    """
    detected = None

    match = from_bytes(raw).best()
    if match is not None:
        detected = match.encoding

    decode_used = detected or "utf-8"
    # Strip a UTF-8 BOM so it doesn't end up in the first name.
    if raw.startswith(b"\xef\xbb\xbf") and (decode_used.lower().replace("-", "_") in ("utf_8", "utf8")):
        decode_used = "utf-8-sig"

    decode_fallback = False

    try:
        text = raw.decode(decode_used)
    except (UnicodeDecodeError, LookupError):
        try:
            text = raw.decode("utf-8")
            decode_used = "utf-8"
        except UnicodeDecodeError:
            text = raw.decode("utf-8", errors="replace")
            decode_used = "utf-8"
        decode_fallback = True

    text = text.replace("\r\n", "\n").replace("\r", "\n")

    report = {
        "detected": detected,
        "decode_used": decode_used,
        "decode_fallback": decode_fallback,
    }
    logger.info("Decoded upload (%d bytes) as %s", len(raw), decode_used)
    return text, report


def names_from_text(text: str) -> List[str]:
    """One name per non-blank line, surrounding whitespace stripped."""
    return [line.strip() for line in text.split("\n") if line.strip()]


def names_from_csv(text: str, column: str = "name") -> List[str]:
    """Values of `column` from a headed CSV; the delimiter is sniffed."""
    delimiter = ","
    try:
        delimiter = csv.Sniffer().sniff(text[:4096], delimiters=[",", ";", "\t", "|"]).delimiter
    except csv.Error:
        pass  # default

    reader = csv.DictReader(io.StringIO(text, newline=""), delimiter=delimiter)
    fieldnames = [name.strip() for name in (reader.fieldnames or [])]
    if column not in fieldnames:
        raise MissingColumnError(column, fieldnames)

    reader.fieldnames = fieldnames
    names = []
    for row in reader:
        value = (row.get(column) or "").strip()
        if value:
            names.append(value)
    return names
