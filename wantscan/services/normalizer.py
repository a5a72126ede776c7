"""Barcode input normalization.

Scanners and clerks deliver barcodes with spacing and hyphens
(``0 602527 34712-2``). Everything that reaches a lookup is reduced to a
plain digit string first; anything else is rejected before a request is made.
"""
import re
from typing import Optional

_SEPARATORS = re.compile(r"[ \t\n\r\f\v-]")
_DIGITS = re.compile(r"[0-9]+")

# Longest barcode accepted from a CSV export (EAN-13).
MAX_CSV_BARCODE_LENGTH = 13


def normalize(raw: str) -> Optional[str]:
    """Reduce scanned or typed input to its digits.

    Args:
        raw: Barcode as scanned or typed

    Returns:
        The digit string, or None if the input holds anything besides
        digits, ASCII whitespace and hyphens (or nothing at all)
    """
    cleaned = _SEPARATORS.sub("", raw)
    if not _DIGITS.fullmatch(cleaned):
        return None
    return cleaned


def sanitize_csv_barcode(cell: str) -> Optional[str]:
    """Clean the barcode column of a want-list export.

    Punctuation and spacing are dropped. A cell that still contains letters
    (a header row, a catalogue number) or is longer than an EAN-13 is
    rejected.
    """
    kept = "".join(ch for ch in cell if ch.isdecimal() or ch.isalpha())
    if any(ch.isalpha() for ch in kept):
        return None
    if len(kept) > MAX_CSV_BARCODE_LENGTH:
        return None
    return kept


def match_fragment(digits: str) -> str:
    """Inner digits used to match a scan against the offline list.

    The first and last digit are dropped so that UPC-A and EAN-13 renderings
    of the same code (leading zero, check digit) still hit. Inputs shorter
    than three digits are used as they are.
    """
    if len(digits) >= 3:
        return digits[1:-1]
    return digits
