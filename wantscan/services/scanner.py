"""Scan orchestration: normalize input, pick a source, remember the result."""
import asyncio
from pathlib import Path
from typing import Optional, Union

from ..models import LoginResult, LookupResult, LookupSource, ScanOutcome, Want
from ..utils.logger import logger
from .normalizer import normalize
from .session_client import WantsClient
from .want_list import WantList


class Scanner:
    """Runs one scan at a time against the online API or an offline list."""

    def __init__(
        self,
        source: LookupSource = LookupSource.ONLINE,
        client: Optional[WantsClient] = None,
        want_list: Optional[WantList] = None,
    ):
        """Initialize the scanner.

        Args:
            source: Where lookups go
            client: Open WantsClient, required for online lookups
            want_list: Offline list. A fresh empty list is created if omitted
        """
        self.source = source
        self.client = client
        self.want_list = want_list if want_list is not None else WantList()
        self.last_match: Optional[Want] = None
        self._lock = asyncio.Lock()

    @property
    def authenticated(self) -> bool:
        return bool(self.client and self.client.authenticated)

    async def login(self, username: str, password: str) -> LoginResult:
        """Log in and switch to online lookups."""
        if self.client is None:
            raise RuntimeError("No wants API client configured")
        result = await self.client.login(username, password)
        if result.ok:
            self.source = LookupSource.ONLINE
        return result

    def load_csv(self, path: Union[str, Path]) -> int:
        """Load a wants export and switch to offline lookups."""
        count = self.want_list.load_csv(path)
        self.source = LookupSource.OFFLINE
        return count

    def load_csv_text(self, text: str) -> int:
        count = self.want_list.from_text(text)
        self.source = LookupSource.OFFLINE
        return count

    async def scan(self, raw: str) -> LookupResult:
        """Check one scanned or typed barcode.

        Args:
            raw: Input as received from the scanner or keyboard

        Returns:
            LookupResult with the scan's feedback class
        """
        async with self._lock:
            raw = raw.strip()
            digits = normalize(raw)

            if digits is None:
                result = LookupResult.invalid(raw)
            elif self.source == LookupSource.OFFLINE:
                result = self._lookup_offline(digits)
            else:
                result = await self._lookup_online(digits)

            self.last_match = result.want if result.outcome == ScanOutcome.MATCH else None
            self._log(result)
            return result

    def _lookup_offline(self, digits: str) -> LookupResult:
        try:
            want = self.want_list.find(digits)
        except RuntimeError as e:
            return LookupResult.failed(digits, str(e))
        if want is None:
            return LookupResult.no_match(digits)
        return LookupResult.matched(want)

    async def _lookup_online(self, digits: str) -> LookupResult:
        if self.client is None:
            return LookupResult.failed(digits, "No wants API client configured")
        return await self.client.lookup(digits)

    @staticmethod
    def _log(result: LookupResult):
        if result.outcome == ScanOutcome.MATCH:
            logger.info(
                f"Match for {result.barcode}: {result.want.album} by {result.want.artist}"
            )
        elif result.outcome == ScanOutcome.NO_MATCH:
            logger.info(f"No match for {result.barcode}")
        else:
            logger.warning(
                f"Scan {result.outcome.value} for {result.barcode!r}: {result.error_message}"
            )
