"""Services for the application."""
from ..config import settings
from .normalizer import match_fragment, normalize, sanitize_csv_barcode
from .scanner import Scanner
from .session_client import WantsClient, parse_lookup_response
from .want_list import WantList, parse_rows

# Shared scanner for the HTTP service; its client is opened on startup
scanner = Scanner(source=settings.source)

__all__ = [
    "match_fragment",
    "normalize",
    "sanitize_csv_barcode",
    "Scanner",
    "scanner",
    "WantsClient",
    "parse_lookup_response",
    "WantList",
    "parse_rows",
]
