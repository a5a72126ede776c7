"""Shared fixtures."""
import json
from typing import List

import httpx
import pytest

BASE_URL = "https://wants.example.com"

WANTS_CSV = (
    "UPC,Artist,Album,Format,Label,Wants\n"
    '"0 602527-347122",Bon Iver,"Bon Iver, Bon Iver",LP,Jagjaguwar,4\n'
    '5099902987422,Pink Floyd,"The Wall \\"Deluxe\\"",2LP,EMI,12\n'
    "ABC123,Someone,Something,LP,Label,1\n"
    "12345678901234,Too,Long,LP,Label,1\n"
    "short,row\n"
)


class FakeWantsSite:
    """Stand-in for the remote wants site, served through httpx.MockTransport."""

    def __init__(self, login_body: str = "<html>Welcome back</html>"):
        self.login_body = login_body
        self.requests: List[httpx.Request] = []
        self.wants = {
            "602527347122": {
                "items": 1,
                "artist": "Bon Iver",
                "title": "Bon Iver, Bon Iver",
                "want_count": 4,
            }
        }
        self.warmup_status = 200
        self.login_status = 200
        self.lookup_status = 200
        self.lookup_body = None
        self.fail_with = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail_with is not None:
            raise self.fail_with

        if request.method == "GET" and request.url.path == "/":
            return httpx.Response(
                self.warmup_status, text="<html>home</html>", headers={"set-cookie": "PHPSESSID=warmup; Path=/"}
            )

        if request.method == "POST" and request.url.path == "/processlogin.php":
            return httpx.Response(
                self.login_status, text=self.login_body, headers={"set-cookie": "auth=token123; Path=/"}
            )

        if request.method == "GET" and request.url.path == "/API/wants":
            if self.lookup_body is not None:
                return httpx.Response(self.lookup_status, text=self.lookup_body)
            upc = request.url.params.get("upc")
            record = self.wants.get(upc, {"items": 0})
            return httpx.Response(self.lookup_status, text=json.dumps([record]))

        return httpx.Response(404, text="not found")

    def lookups(self) -> List[httpx.Request]:
        return [r for r in self.requests if r.url.path == "/API/wants"]


@pytest.fixture
def fake_site() -> FakeWantsSite:
    """Create a fake wants site."""
    return FakeWantsSite()


@pytest.fixture
def transport(fake_site) -> httpx.MockTransport:
    """Mock transport routed to the fake site."""
    return httpx.MockTransport(fake_site)


@pytest.fixture
def wants_csv(tmp_path):
    """Write a small wants export to disk."""
    path = tmp_path / "wants.csv"
    path.write_text(WANTS_CSV, encoding="utf-8")
    return path
