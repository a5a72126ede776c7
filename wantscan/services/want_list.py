"""Offline want list loaded from a CSV export."""
import csv
import io
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Sequence, Union

from ..models import Want
from ..utils.logger import logger
from .normalizer import match_fragment, sanitize_csv_barcode

# Column layout of the wants export
BARCODE_COLUMN = 0
ARTIST_COLUMN = 1
ALBUM_COLUMN = 2
WANTS_COLUMN = 5
MIN_COLUMNS = 6


def parse_rows(rows: Iterable[Sequence[str]]) -> List[Want]:
    """Turn CSV rows into wants, skipping rows that do not describe one.

    Args:
        rows: Parsed CSV rows

    Returns:
        Wants in file order
    """
    wants: List[Want] = []
    for row in rows:
        if len(row) < MIN_COLUMNS:
            continue

        barcode = sanitize_csv_barcode(row[BARCODE_COLUMN])
        if barcode is None:
            continue

        wants.append(
            Want(
                barcode=barcode,
                artist=row[ARTIST_COLUMN],
                album=row[ALBUM_COLUMN],
                wants=row[WANTS_COLUMN],
            )
        )
    return wants


def _reader(stream) -> Iterator[List[str]]:
    return csv.reader(stream, delimiter=",", quotechar='"', escapechar="\\")


class WantList:
    """In-memory wants list searched by linear scan."""

    def __init__(self):
        """Initialize an empty, unloaded list."""
        self._wants: List[Want] = []
        self.loaded = False

    def __len__(self) -> int:
        return len(self._wants)

    def __iter__(self) -> Iterator[Want]:
        return iter(self._wants)

    def replace(self, wants: Iterable[Want]) -> int:
        """Replace the whole list.

        Returns:
            Number of wants now held
        """
        self._wants = list(wants)
        self.loaded = True
        return len(self._wants)

    def from_rows(self, rows: Iterable[Sequence[str]]) -> int:
        return self.replace(parse_rows(rows))

    def from_text(self, text: str) -> int:
        """Load wants from CSV text."""
        if text.startswith("\ufeff"):
            text = text[1:]
        count = self.from_rows(_reader(io.StringIO(text, newline="")))
        logger.info(f"Loaded {count} barcodes from uploaded CSV")
        return count

    def load_csv(self, path: Union[str, Path]) -> int:
        """Load wants from a CSV file.

        Args:
            path: Path to the wants export

        Returns:
            Number of wants loaded

        Raises:
            OSError: If the file cannot be read
        """
        path = Path(path)
        with path.open("r", encoding="utf-8-sig", newline="") as f:
            count = self.from_rows(_reader(f))
        logger.info(f"Loaded {count} barcodes from {path}")
        return count

    def find(self, digits: str) -> Optional[Want]:
        """Return the first want whose barcode contains the scan's inner digits.

        Args:
            digits: Normalized barcode

        Raises:
            RuntimeError: If no list has been loaded yet
        """
        if not self.loaded:
            raise RuntimeError("No want list loaded")

        fragment = match_fragment(digits)
        for want in self._wants:
            if fragment in want.barcode:
                return want
        return None
