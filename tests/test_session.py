import logging

import pytest
import requests

from ruckus_smartzone_api import (
    ListOptions,
    SmartZoneAPIError,
    SmartZoneAuthenticationError,
    SmartZoneController,
)

from conftest import BASE_URL, HOST, TICKET, make_response


def test_base_url_from_host_and_version():
    client = SmartZoneController(HOST, "admin", "secret", api_version="v9_1")
    assert client.base_url == f"https://{HOST}:8443/wsg/api/public/v9_1"
    assert client.scg_url == f"https://{HOST}:8443/wsg/api/scg"
    assert client.service_ticket is None
    assert not client.is_authenticated


@pytest.mark.parametrize("timeout", [0, -1, 301])
def test_timeout_must_be_bounded(timeout):
    with pytest.raises(ValueError):
        SmartZoneController(HOST, "admin", "secret", timeout=timeout)


def test_login_stores_ticket(controller, session):
    session.queue(make_response(body={"controllerVersion": "5.2.1", "serviceTicket": TICKET}))

    assert controller.login() == TICKET

    assert controller.service_ticket == TICKET
    assert controller.is_authenticated
    call = session.calls[0]
    assert call.method == "POST"
    assert call.url == f"{BASE_URL}/serviceTicket"
    assert call.json == {"username": "admin", "password": "secret"}
    assert call.kwargs["headers"]["Content-Type"] == "application/json;charset=UTF-8"
    assert call.kwargs["verify"] is False
    assert call.kwargs["timeout"] == 10


@pytest.mark.parametrize("response", [
    make_response(body={"controllerVersion": "5.2.1"}),
    make_response(text="<html>maintenance</html>"),
    make_response(status_code=401, body={"message": "bad credentials"}),
    make_response(status_code=500, body={}),
    requests.exceptions.ConnectTimeout("timed out"),
])
def test_failed_login_clears_stale_ticket(controller, session, response):
    controller.service_ticket = "stale"
    session.queue(response)

    with pytest.raises(SmartZoneAuthenticationError):
        controller.login()

    assert controller.service_ticket is None


@pytest.mark.parametrize("operation", [
    lambda sz: sz.get_zones(),
    lambda sz: sz.get_all_zones(),
    lambda sz: sz.get_zone("zone-1"),
    lambda sz: sz.get_ap_groups("zone-1"),
    lambda sz: sz.get_ap_group("zone-1", "group-1"),
    lambda sz: sz.get_aps(ListOptions(index=0, list_size=10)),
    lambda sz: sz.get_all_aps(),
    lambda sz: sz.query_aps(),
    lambda sz: sz.get_ap("aa:bb:cc:00:11:22"),
    lambda sz: sz.get_ap_interface("aa:bb:cc:00:11:22"),
    lambda sz: sz.get_ap_lldp_neighbor("aa:bb:cc:00:11:22"),
    lambda sz: sz.get_controller_summary(),
    lambda sz: sz.set_ap_name_and_group("aa:bb:cc:00:11:22", "ap", "zone-1", "group-1"),
    lambda sz: sz.reboot_ap("aa:bb:cc:00:11:22"),
])
def test_operations_require_login_and_send_nothing(controller, session, operation):
    with pytest.raises(SmartZoneAuthenticationError, match="must first login"):
        operation(controller)

    assert session.calls == []


def test_logout_invalidates_ticket(logged_in, session):
    session.queue(make_response(status_code=200))

    logged_in.logout()

    call = session.calls[0]
    assert call.method == "DELETE"
    assert call.url == f"{BASE_URL}/serviceTicket"
    assert call.params == {"serviceTicket": TICKET}
    assert logged_in.service_ticket is None


@pytest.mark.parametrize("response", [
    make_response(status_code=500, body={}),
    requests.exceptions.ConnectionError("connection reset"),
])
def test_failed_logout_still_clears_ticket(logged_in, session, response):
    session.queue(response)

    with pytest.raises(SmartZoneAPIError):
        logged_in.logout()

    assert logged_in.service_ticket is None
    session.calls.clear()
    with pytest.raises(SmartZoneAuthenticationError):
        logged_in.get_aps()
    assert session.calls == []


def test_logout_without_session_is_noop(controller, session):
    controller.logout()
    assert session.calls == []


def test_context_manager_logs_in_and_out(controller, session):
    session.queue(
        make_response(body={"serviceTicket": TICKET}),
        make_response(status_code=200),
    )

    with controller as sz:
        assert sz.service_ticket == TICKET

    assert [c.method for c in session.calls] == ["POST", "DELETE"]
    assert controller.service_ticket is None
    assert session.closed


def test_context_manager_tolerates_failed_logout(controller, session):
    session.queue(
        make_response(body={"serviceTicket": TICKET}),
        requests.exceptions.ConnectionError("gone"),
    )

    with controller:
        pass

    assert controller.service_ticket is None


def test_rejected_ticket_raises_authentication_error(logged_in, session):
    session.queue(make_response(status_code=401, body={"message": "ticket expired"}))

    with pytest.raises(SmartZoneAuthenticationError):
        logged_in.get_zone("zone-1")


def test_ticket_and_password_never_logged(controller, session, caplog):
    caplog.set_level(logging.DEBUG, logger="ruckus_smartzone_api")
    session.queue(
        make_response(body={"controllerVersion": "5.2.1", "serviceTicket": TICKET}),
        make_response(body={"totalCount": 0, "hasMore": False, "firstIndex": 0, "list": []}),
    )

    controller.login()
    controller.get_zones()

    assert "Successfully connected" in caplog.text
    assert TICKET not in caplog.text
    assert "secret" not in caplog.text


def test_context_manager_closes_session_when_login_fails(controller, session):
    session.queue(make_response(status_code=401, body={"message": "bad credentials"}))

    with pytest.raises(SmartZoneAuthenticationError):
        with controller:
            pass

    assert session.closed
    assert [c.method for c in session.calls] == ["POST"]
