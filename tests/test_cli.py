import json

import pytest

from ruckus_smartzone_api import cli
from ruckus_smartzone_api.config import SmartZoneSettings

from conftest import TICKET, envelope, make_response


@pytest.fixture
def settings(monkeypatch, session):
    settings = SmartZoneSettings(host="sz.example.net", username="admin", password="secret")

    original = SmartZoneSettings.create_client

    def create_client(self):
        client = original(self)
        client.session = session
        return client

    monkeypatch.setattr(SmartZoneSettings, "from_env", classmethod(lambda cls: settings))
    monkeypatch.setattr(SmartZoneSettings, "create_client", create_client)
    return settings


def test_lists_aps_and_logs_out(settings, session, capsys):
    session.queue(
        make_response(body={"serviceTicket": TICKET}),
        make_response(body=envelope([{"mac": "AA:BB:CC:00:00:01", "name": "ap-1"}])),
        make_response(status_code=200),
    )

    assert cli.main(["aps"]) == 0

    assert "ap-1" in capsys.readouterr().out
    assert [c.method for c in session.calls] == ["POST", "GET", "DELETE"]


def test_exports_zones_to_json(settings, session, tmp_path):
    path = tmp_path / "zones.json"
    session.queue(
        make_response(body={"serviceTicket": TICKET}),
        make_response(body=envelope([{"id": "zone-1", "name": "Campus"}])),
        make_response(status_code=200),
    )

    assert cli.main(["zones", "--json", str(path)]) == 0

    assert json.loads(path.read_text()) == [{"id": "zone-1", "name": "Campus"}]


def test_login_failure_exits_nonzero(settings, session):
    session.queue(make_response(status_code=401, body={}))

    assert cli.main(["controller"]) == 1


def test_missing_configuration(monkeypatch):
    def broken(cls):
        raise ValueError("Missing required settings: SZ_HOST")

    monkeypatch.setattr(SmartZoneSettings, "from_env", classmethod(broken))

    assert cli.main([]) == 2
