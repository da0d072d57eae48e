import pytest
import requests

from ruckus_smartzone_api import (
    ApQuery,
    ListOptions,
    QueryFilter,
    SmartZoneAp,
    SmartZoneApSummary,
    SmartZonePaginationError,
)

from conftest import BASE_URL, TICKET, envelope, make_response


def ap_rows(start, count):
    return [{"mac": f"AA:BB:CC:00:{i // 256:02X}:{i % 256:02X}", "name": f"ap-{i}"}
            for i in range(start, start + count)]


def test_follows_has_more_until_exhausted(logged_in, session):
    session.queue(
        make_response(body=envelope(ap_rows(0, 100), has_more=True, first_index=0, total_count=237)),
        make_response(body=envelope(ap_rows(100, 100), has_more=True, first_index=100, total_count=237)),
        make_response(body=envelope(ap_rows(200, 37), has_more=False, first_index=200, total_count=237)),
    )

    aps = logged_in.get_all_aps()

    assert len(aps) == 237
    assert all(isinstance(ap, SmartZoneAp) for ap in aps)
    assert aps[0].name == "ap-0"
    assert aps[-1].name == "ap-236"
    assert len(session.calls) == 3
    assert [c.params.get("index") for c in session.calls] == [None, "100", "200"]
    assert all(c.params["serviceTicket"] == TICKET for c in session.calls)
    assert all(c.url == f"{BASE_URL}/aps" for c in session.calls)


def test_short_page_with_has_more_keeps_paging(logged_in, session):
    session.queue(
        make_response(body=envelope(ap_rows(0, 3), has_more=True, first_index=0, total_count=5)),
        make_response(body=envelope(ap_rows(100, 2), has_more=False, first_index=100, total_count=5)),
    )

    aps = logged_in.get_all_aps()

    assert len(aps) == 5
    assert len(session.calls) == 2


def test_empty_final_page_stops_immediately(logged_in, session):
    session.queue(make_response(body=envelope([], has_more=False, total_count=0)))

    assert logged_in.get_all_zones() == []
    assert len(session.calls) == 1


def test_page_size_from_options_advances_cursor(logged_in, session):
    session.queue(
        make_response(body=envelope(ap_rows(0, 50), has_more=True, first_index=10)),
        make_response(body=envelope(ap_rows(60, 5), has_more=False, first_index=60)),
    )

    aps = logged_in.get_all_aps(ListOptions(index=10, list_size=50, domain_id="dom-1"))

    assert len(aps) == 55
    assert session.calls[0].params == {
        "serviceTicket": TICKET, "index": "10", "listSize": "50", "domainId": "dom-1"}
    assert session.calls[1].params == {
        "serviceTicket": TICKET, "index": "60", "listSize": "50", "domainId": "dom-1"}


def test_decode_failure_keeps_earlier_pages(logged_in, session):
    session.queue(
        make_response(body=envelope(ap_rows(0, 100), has_more=True, first_index=0, total_count=237)),
        make_response(text='{"totalCount": 237, "hasMore": tr'),
        make_response(body=envelope(ap_rows(200, 37), has_more=False, first_index=200)),
    )

    with pytest.raises(SmartZonePaginationError) as excinfo:
        logged_in.get_all_aps()

    assert len(excinfo.value.partial_results) == 100
    assert excinfo.value.partial_results[0].name == "ap-0"
    assert excinfo.value.__cause__ is not None
    assert len(session.calls) == 2


def test_transport_failure_keeps_earlier_pages(logged_in, session):
    session.queue(
        make_response(body=envelope(ap_rows(0, 100), has_more=True)),
        requests.exceptions.ReadTimeout("read timed out"),
    )

    with pytest.raises(SmartZonePaginationError) as excinfo:
        logged_in.get_all_aps()

    assert len(excinfo.value.partial_results) == 100


def test_failure_on_first_page_has_no_partial_results(logged_in, session):
    session.queue(make_response(status_code=503, body={}))

    with pytest.raises(SmartZonePaginationError) as excinfo:
        logged_in.get_all_zones()

    assert excinfo.value.partial_results == []


def test_query_aps_posts_search_body(logged_in, session):
    rows = [{"apMac": "AA:BB:CC:00:11:22", "deviceName": "lobby", "noise24G": -95,
             "numClients5G": 4, "poePortStatus": "802.3at"}]
    session.queue(
        make_response(body=envelope(rows, has_more=True)),
        make_response(body=envelope(rows, has_more=False, first_index=100)),
    )

    aps = logged_in.query_aps()

    assert len(aps) == 2
    ap = aps[0]
    assert isinstance(ap, SmartZoneApSummary)
    assert ap.ap_mac == "AA:BB:CC:00:11:22"
    assert ap.noise_24g == -95
    assert ap.num_clients_5g == 4
    assert ap.poe_port_status == "802.3at"

    call = session.calls[0]
    assert call.method == "POST"
    assert call.url == f"{BASE_URL}/query/ap"
    assert call.json == {
        "filters": [],
        "fullTextSearch": {"type": "AND", "value": ""},
        "attributes": ["*"],
        "sortInfo": {"sortColumn": "apMac", "dir": "ASC"},
        "page": 1,
        "limit": 10000,
    }
    assert session.calls[1].params["index"] == "100"


def test_query_aps_with_filters(logged_in, session):
    session.queue(make_response(body=envelope([])))
    query = ApQuery(filters=[QueryFilter(type="ZONE", value="zone-1")], limit=500)

    logged_in.query_aps(query=query)

    body = session.calls[0].json
    assert body["filters"] == [{"type": "ZONE", "value": "zone-1"}]
    assert body["limit"] == 500
