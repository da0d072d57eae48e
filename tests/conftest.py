"""Pytest configuration and fixtures."""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import pytest
import requests

from ruckus_smartzone_api import SmartZoneController

HOST = "sz.example.net"
BASE_URL = f"https://{HOST}:8443/wsg/api/public/v8_1"
SCG_URL = f"https://{HOST}:8443/wsg/api/scg"
TICKET = "ST-test-ticket"


def make_response(status_code: int = 200, body: Any = None, text: Optional[str] = None,
                  url: str = BASE_URL) -> requests.Response:
    """Build a real requests.Response without touching the network."""
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    response.encoding = "utf-8"
    if text is not None:
        response._content = text.encode("utf-8")
    elif body is not None:
        response._content = json.dumps(body).encode("utf-8")
    else:
        response._content = b""
    return response


def envelope(items: List[Dict[str, Any]], has_more: bool = False, first_index: int = 0,
             total_count: Optional[int] = None) -> Dict[str, Any]:
    return {
        "totalCount": total_count if total_count is not None else first_index + len(items),
        "hasMore": has_more,
        "firstIndex": first_index,
        "list": items,
    }


@dataclass
class Call:
    method: str
    url: str
    params: Optional[Dict[str, str]]
    json: Any
    kwargs: Dict[str, Any] = field(repr=False)


class FakeSession:
    """Stands in for requests.Session; replays queued responses in order."""

    def __init__(self):
        self.calls: List[Call] = []
        self.responses: List[Any] = []
        self.closed = False

    def queue(self, *items):
        self.responses.extend(items)

    def request(self, method, url, **kwargs):
        self.calls.append(Call(method, url, kwargs.get("params"), kwargs.get("json"), kwargs))
        if not self.responses:
            raise AssertionError(f"Unexpected request: {method} {url}")
        item = self.responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    def close(self):
        self.closed = True


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def controller(session):
    """An unauthenticated client wired to the fake session."""
    client = SmartZoneController(HOST, "admin", "secret", verify_ssl=False, timeout=10)
    client.session = session
    return client


@pytest.fixture
def logged_in(controller, session):
    """A client that has logged in; the login call is removed from the record."""
    session.queue(make_response(body={"controllerVersion": "5.2.1", "serviceTicket": TICKET}))
    controller.login()
    session.calls.clear()
    return controller


@pytest.fixture
def sample_ap():
    return {
        "mac": "AA:BB:CC:00:11:22",
        "zoneId": "zone-1",
        "apGroupId": "group-1",
        "serial": "351802000123",
        "name": "lobby-ap",
    }
