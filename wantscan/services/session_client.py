"""HTTP client for the remote wants API."""
import asyncio
from typing import Any, Optional

import httpx

from ..config import settings
from ..models import LoginResult, LoginStatus, LookupResult, Want
from ..utils.logger import logger

LOGIN_PATH = "/processlogin.php"
WANTS_PATH = "/API/wants"
LOGIN_FAILED_MARKER = "Login incorrect"

USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/119.0.0.0 Safari/537.36"
)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def parse_lookup_response(barcode: str, payload: Any) -> LookupResult:
    """Interpret the JSON body of a wants lookup.

    The API answers with an array whose first element carries an ``items``
    count and, when non-zero, ``artist``, ``title`` and ``want_count``.

    Args:
        barcode: Digits that were queried
        payload: Decoded JSON body

    Returns:
        A match, a no-match, or an error result for malformed bodies
    """
    if not isinstance(payload, list) or not payload:
        return LookupResult.failed(barcode, "Unexpected response: expected a JSON array")

    first = payload[0]
    if not isinstance(first, dict):
        return LookupResult.failed(barcode, "Unexpected response: expected an object")

    items = first.get("items")
    if not _is_int(items):
        return LookupResult.failed(barcode, "Unexpected response: missing item count")

    if items == 0:
        return LookupResult.no_match(barcode)

    artist = first.get("artist")
    title = first.get("title")
    want_count = first.get("want_count")
    if not isinstance(artist, str) or not isinstance(title, str) or not _is_int(want_count):
        return LookupResult.failed(barcode, "Unexpected response: incomplete want record")

    return LookupResult.matched(
        Want(barcode=barcode, artist=artist, album=title, wants=str(want_count))
    )


class WantsClient:
    """Async client holding one login session against the wants site."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[int] = None,
        lookup_months: Optional[int] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the client.

        Args:
            base_url: Site root. Defaults to settings.base_url
            timeout: Request timeout in seconds. Defaults to settings.default_timeout
            lookup_months: History window sent with lookups. Defaults to settings.lookup_months
            transport: Optional httpx transport, used by tests
        """
        self.base_url = (base_url or settings.base_url).rstrip("/")
        self.timeout = timeout or settings.default_timeout
        self.lookup_months = (
            settings.lookup_months if lookup_months is None else lookup_months
        )
        self.authenticated = False
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None
        self._lock = asyncio.Lock()

    async def __aenter__(self):
        """Async context manager entry."""
        if not self.base_url:
            raise ValueError("No base URL configured for the wants API")
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            follow_redirects=True,
            headers={"User-Agent": USER_AGENT},
            transport=self._transport,
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        if self._client:
            await self._client.aclose()
            self._client = None

    def _require_client(self) -> httpx.AsyncClient:
        if not self._client:
            raise RuntimeError("WantsClient must be used as an async context manager")
        return self._client

    @property
    def cookies(self) -> httpx.Cookies:
        """Cookies captured for the current session."""
        return self._require_client().cookies

    async def login(self, username: str, password: str) -> LoginResult:
        """Start a fresh session.

        Args:
            username: Account name
            password: Account password

        Returns:
            LoginResult; on success the session cookies are kept for lookups
        """
        client = self._require_client()

        async with self._lock:
            client.cookies.clear()
            self.authenticated = False

            try:
                # warm-up for baseline cookies; status not checked
                await client.get("/")

                response = await client.post(
                    LOGIN_PATH,
                    data={
                        "ReturnUrl": "",
                        "PostBackAction": "SignIn",
                        "Username": username,
                        "Password": password,
                    },
                )
                if LOGIN_FAILED_MARKER in response.text:
                    logger.warning(f"Login rejected for user: {username}")
                    return LoginResult(
                        status=LoginStatus.BAD_CREDENTIALS,
                        error_message="Login incorrect",
                    )
                response.raise_for_status()

            except httpx.HTTPStatusError as e:
                error = f"HTTP {e.response.status_code}: {e.response.reason_phrase}"
                logger.error(f"Login failed: {error}")
                return LoginResult(status=LoginStatus.FAILED, error_message=error)

            except httpx.TimeoutException:
                error = f"Request timed out after {self.timeout} seconds"
                logger.error(f"Login failed: {error}")
                return LoginResult(status=LoginStatus.FAILED, error_message=error)

            except httpx.RequestError as e:
                error = f"Request failed: {str(e)}"
                logger.error(f"Login failed: {error}")
                return LoginResult(status=LoginStatus.FAILED, error_message=error)

            self.authenticated = True
            logger.info(f"Logged in as {username} ({len(client.cookies)} cookies held)")
            return LoginResult(status=LoginStatus.AUTHENTICATED)

    async def lookup(self, digits: str) -> LookupResult:
        """Look up one normalized barcode.

        Args:
            digits: Barcode digits

        Returns:
            Match, no-match, or error result
        """
        client = self._require_client()
        # credits is a bare flag, so the query string is built by hand
        url = f"{WANTS_PATH}?upc={digits}&months={self.lookup_months}&credits"

        async with self._lock:
            try:
                response = await client.get(url)
                response.raise_for_status()
                payload = response.json()

            except httpx.HTTPStatusError as e:
                error = f"HTTP {e.response.status_code}: {e.response.reason_phrase}"
                return LookupResult.failed(digits, error)

            except httpx.TimeoutException:
                return LookupResult.failed(
                    digits, f"Request timed out after {self.timeout} seconds"
                )

            except httpx.RequestError as e:
                return LookupResult.failed(digits, f"Request failed: {str(e)}")

            except ValueError:
                return LookupResult.failed(digits, "Response was not valid JSON")

        return parse_lookup_response(digits, payload)
