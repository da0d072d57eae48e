import requests
import urllib3

from typing import List, Dict, Any, Optional, Type, TypeVar

from .models.base import SmartZoneObject
from .models.paging import ListOptions, SmartZonePage
from .models.query import ApChangeRequest, ApQuery
from .models.ap import SmartZoneAp, SmartZoneApSummary, ApInterface, ApLldpNeighbor
from .models.zone import SmartZoneZone, SmartZoneApGroup
from .models.controller import ControllerSummary
from .logging import get_logger, log_api_response
from .utils import build_model, normalize_mac
from .exceptions import (
    SmartZoneControllerError,
    SmartZoneAuthenticationError,
    SmartZoneAPIError,
    SmartZoneDataError,
    SmartZonePaginationError,
)

logger = get_logger(__name__)

T = TypeVar("T")

DEFAULT_PORT = 8443
DEFAULT_API_VERSION = "8_1"
DEFAULT_TIMEOUT = 30

JSON_HEADERS = {"Content-Type": "application/json;charset=UTF-8"}

NOT_LOGGED_IN = "you must first login to perform this action"


class SmartZoneController:
    """
    Client for the Ruckus SmartZone public REST API.

    The client holds one service ticket. ``login()`` obtains it, every resource
    method attaches it as the ``serviceTicket`` query parameter, and ``logout()``
    invalidates it. Calling a resource method without a ticket raises
    :class:`SmartZoneAuthenticationError` before any request is sent.

    Note:
        A client instance is meant to be used from one thread at a time; the
        ticket is plain mutable state on the instance. Use one client per thread
        when you need concurrency.

    Example:
        >>> with SmartZoneController("sz.example.net", "admin", "secret") as sz:
        ...     aps = sz.get_all_aps()
    """

    def __init__(
        self,
        host: str,
        username: str,
        password: str,
        api_version: str = DEFAULT_API_VERSION,
        port: int = DEFAULT_PORT,
        verify_ssl=True,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        """
        Initialize the SmartZone client. No request is made until ``login()``.

        Args:
            host: Hostname or IP address of the SmartZone controller.
            username: Username for authentication.
            password: Password for authentication.
            api_version: Public API version, e.g. ``"8_1"`` or ``"v9_1"``.
                Defaults to ``"8_1"``.
            port: HTTPS port of the API. Defaults to 8443.
            verify_ssl: Whether to verify SSL certificates. Can be:
                       - True: Verify SSL certificates (default, recommended)
                       - False: Disable verification, for controllers with
                         self-signed certificates
                       - str: Path to a CA bundle file or directory with certificates of trusted CAs
            timeout: Timeout in seconds applied to every request (1-300).
                Defaults to 30.
        """
        if timeout <= 0 or timeout > 300:
            raise ValueError("timeout must be between 1 and 300 seconds")

        self.host = host
        self.port = port
        self.api_version = str(api_version).lstrip("vV")
        self.base_url = f"https://{host}:{port}/wsg/api/public/v{self.api_version}"
        self.scg_url = f"https://{host}:{port}/wsg/api/scg"
        self.session = requests.Session()
        self.verify_ssl = verify_ssl
        self.timeout = timeout

        self._username = username
        self._password = password
        self.service_ticket: Optional[str] = None

        logger.debug(
            f"Initializing SmartZoneController with URL: {self.base_url}")

        if not verify_ssl:
            logger.warning(
                "SSL certificate verification is disabled. This is not recommended for production use."
            )
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

    def __repr__(self):
        return f"<SmartZoneController host={self.host}:{self.port} api_version=v{self.api_version}>"

    def __enter__(self):
        try:
            self.login()
        except SmartZoneControllerError:
            self.session.close()
            raise
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        try:
            self.logout()
        except SmartZoneControllerError as e:
            logger.warning(f"Error during SmartZone logout: {e}")
        finally:
            self.session.close()

    @property
    def is_authenticated(self) -> bool:
        """True while the client holds a service ticket."""
        return bool(self.service_ticket)

    def login(self) -> str:
        """
        Authenticate with the SmartZone controller and store the service ticket.

        Returns:
            The service ticket issued by the controller.

        Raises:
            SmartZoneAuthenticationError: If the request fails, the response cannot
                be decoded, or it carries no ticket. Any previous ticket is
                discarded in that case.
        """
        login_uri = f"{self.base_url}/serviceTicket"
        logger.debug(
            f"Attempting authentication with username: {self._username} at {login_uri}")

        try:
            response = self._invoke_api_call(
                method="POST",
                url=login_uri,
                json_payload={"username": self._username, "password": self._password},
            )
            data = self._process_api_response(response, login_uri)
        except SmartZoneControllerError as e:
            self.service_ticket = None
            error_msg = f"Authentication failed: {e}"
            logger.error(error_msg)
            raise SmartZoneAuthenticationError(error_msg) from e

        ticket = data.get("serviceTicket") if isinstance(data, dict) else None
        if not ticket:
            self.service_ticket = None
            error_msg = "Authentication failed: no serviceTicket in response."
            logger.warning(error_msg)
            raise SmartZoneAuthenticationError(error_msg)

        self.service_ticket = ticket
        logger.info(
            f"Successfully connected to SmartZone controller at {self.host} "
            f"(controller version: {data.get('controllerVersion', 'unknown')}).")
        return ticket

    def logout(self) -> None:
        """
        Invalidate the service ticket on the controller.

        The local ticket is cleared whether or not the controller accepted the
        request, so the client never believes it still holds a session.

        Raises:
            SmartZoneAPIError: If the logout request itself failed. The local
                ticket has already been cleared when this is raised.
        """
        if not self.service_ticket:
            logger.debug("Logout requested without an active session.")
            return

        logout_uri = f"{self.base_url}/serviceTicket"
        try:
            self._invoke_api_call(
                method="DELETE",
                url=logout_uri,
                params={"serviceTicket": self.service_ticket},
            )
            logger.info(f"Logged out from SmartZone controller at {self.host}")
        finally:
            self.service_ticket = None

    def _invoke_api_call(
        self,
        method: str,
        url: str,
        params: Optional[Dict[str, str]] = None,
        json_payload: Optional[Dict[str, Any]] = None,
        timeout: Optional[float] = None
    ) -> requests.Response:
        """
        Make an API request with the specified method.

        Args:
            method: HTTP method (e.g., 'GET', 'POST', 'PATCH', 'DELETE').
            url: The full URL for the API endpoint, without query string.
            params: Optional query parameters.
            json_payload: Optional dictionary to send as JSON body.
            timeout: Optional request timeout in seconds. Defaults to the client timeout.

        Returns:
            requests.Response: The response object from the requests library.

        Raises:
            SmartZoneAPIError: For network failures and HTTP error statuses.
            SmartZoneAuthenticationError: If the controller rejects the ticket (401).
            ValueError: If an invalid HTTP method is provided.
        """
        if method.upper() not in ['GET', 'POST', 'PUT', 'DELETE', 'PATCH']:
            raise ValueError(f"Unsupported HTTP method: {method}")

        request_kwargs = {
            'verify': self.verify_ssl,
            'timeout': timeout if timeout is not None else self.timeout,
        }

        if params:
            request_kwargs['params'] = params

        if json_payload is not None:
            request_kwargs['json'] = json_payload
            request_kwargs['headers'] = dict(JSON_HEADERS)

        try:
            response = self.session.request(method, url, **request_kwargs)
        except requests.exceptions.RequestException as e:
            error_msg = f"API {method} request to {url} failed: {e}"
            logger.error(error_msg)
            raise SmartZoneAPIError(error_msg) from e

        if response.status_code == 401:
            error_msg = f"API {method} request to {url} was rejected: session is not authorized"
            logger.error(error_msg)
            raise SmartZoneAuthenticationError(error_msg)

        try:
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            error_msg = f"API {method} request to {url} failed: {e}"
            logger.error(error_msg)
            raise SmartZoneAPIError(error_msg) from e

        logger.debug(
            f"API {method} request to {url} successful (Status: {response.status_code})")
        return response

    def _process_api_response(self, response: requests.Response, uri: str) -> Any:
        """
        Decode the JSON body of a response.

        Args:
            response: Response from API call
            uri: URI that was called

        Returns:
            The decoded JSON value, or None for an empty body.

        Raises:
            SmartZoneDataError: If the body is not valid JSON
        """
        if not response.content:
            return None

        try:
            data = response.json()
        except ValueError as e:
            error_msg = f"Failed to parse API response from {uri}: {e}"
            logger.error(error_msg)
            raise SmartZoneDataError(error_msg) from e

        log_api_response(logger, uri, data, response.status_code)
        return data

    def _require_ticket(self) -> str:
        if not self.service_ticket:
            logger.error(f"Refusing API call without a service ticket: {NOT_LOGGED_IN}")
            raise SmartZoneAuthenticationError(NOT_LOGGED_IN)
        return self.service_ticket

    def _build_params(self, options: Optional[ListOptions] = None) -> Dict[str, str]:
        """Query parameters for a ticketed request: the ticket first, then the options."""
        params = {"serviceTicket": self._require_ticket()}
        if options is not None:
            params.update(options.to_params())
        return params

    def _request(
        self,
        method: str,
        url: str,
        options: Optional[ListOptions] = None,
        json_payload: Optional[Dict[str, Any]] = None,
    ) -> Any:
        params = self._build_params(options)
        response = self._invoke_api_call(
            method=method, url=url, params=params, json_payload=json_payload)
        return self._process_api_response(response, url)

    def _get_object(self, url: str, model: Type[T]) -> T:
        data = self._request("GET", url)
        if data is None:
            raise SmartZoneDataError(f"Empty response body from {url}")
        return build_model(data, model)

    def _get_page(
        self,
        method: str,
        url: str,
        item_model: Type[T],
        options: Optional[ListOptions] = None,
        json_payload: Optional[Dict[str, Any]] = None,
    ) -> SmartZonePage[T]:
        data = self._request(method, url, options=options, json_payload=json_payload)
        return SmartZonePage.from_api(data, item_model)

    def _paginate(
        self,
        method: str,
        url: str,
        item_model: Type[T],
        options: Optional[ListOptions] = None,
        json_payload: Optional[Dict[str, Any]] = None,
    ) -> List[T]:
        """
        Fetch every page of a list endpoint.

        Pages are requested until the controller reports ``hasMore=false``. The
        next page starts at ``firstIndex`` plus the requested page size.

        Raises:
            SmartZoneAuthenticationError: If the client is not logged in. No
                request is made.
            SmartZonePaginationError: If any page fails. Items from the pages
                fetched before the failure are in ``partial_results``.
        """
        self._require_ticket()
        options = options or ListOptions()
        page_size = options.page_size

        results: List[T] = []
        has_more = True
        while has_more:
            try:
                page = self._get_page(
                    method, url, item_model, options=options, json_payload=json_payload)
            except SmartZoneControllerError as e:
                error_msg = (
                    f"Pagination of {url} failed at index {options.index or 0} "
                    f"after {len(results)} items: {e}")
                logger.error(error_msg)
                raise SmartZonePaginationError(error_msg, partial_results=results) from e

            results.extend(page.items)
            has_more = page.has_more
            if has_more:
                options = options.with_index(page.first_index + page_size)
                logger.debug(f"More results at {url}, continuing from index {options.index}")

        logger.debug(f"Collected {len(results)} items from {url}")
        return results

    def normalize_mac(self, mac_address: str) -> str:
        """
        Normalize a MAC address to the colon-separated, upper-case form.

        Args:
            mac_address: MAC address string in any format (with or without separators).

        Returns:
            str: MAC address such as ``AA:BB:CC:DD:EE:FF``.
        """
        return normalize_mac(mac_address)

    def get_zones(self, options: Optional[ListOptions] = None) -> SmartZonePage[SmartZoneObject]:
        """
        Retrieve one page of zones.

        Args:
            options: Optional index, list size and domain for the query.

        Returns:
            SmartZonePage[SmartZoneObject]: The page envelope with ``{id, name}`` entries.

        Raises:
            SmartZoneAuthenticationError: If the client is not logged in.
            SmartZoneAPIError: If the API request fails.
            SmartZoneDataError: If the response cannot be decoded.
        """
        uri = f"{self.base_url}/rkszones"
        logger.info(f"Fetching zones from {uri}")
        return self._get_page("GET", uri, SmartZoneObject, options=options)

    def get_all_zones(self, options: Optional[ListOptions] = None) -> List[SmartZoneObject]:
        """
        Retrieve every zone, following pagination until the controller reports no more.

        Args:
            options: Optional list size and domain. ``index`` sets the starting point.

        Returns:
            List[SmartZoneObject]: All zones.

        Raises:
            SmartZoneAuthenticationError: If the client is not logged in.
            SmartZonePaginationError: If a page fails; partial results are attached.
        """
        uri = f"{self.base_url}/rkszones"
        logger.info(f"Fetching all zones from {uri}")
        return self._paginate("GET", uri, SmartZoneObject, options=options)

    def get_zone(self, zone_id: str) -> SmartZoneZone:
        """
        Retrieve the configuration of one zone.

        Args:
            zone_id: The zone UUID.

        Returns:
            SmartZoneZone: The decoded zone configuration.

        Raises:
            SmartZoneAuthenticationError: If the client is not logged in.
            SmartZoneAPIError: If the API request fails.
            SmartZoneDataError: If the response cannot be decoded.
        """
        uri = f"{self.base_url}/rkszones/{zone_id}"
        logger.info(f"Fetching zone {zone_id} from {uri}")
        return self._get_object(uri, SmartZoneZone)

    def get_ap_groups(
        self, zone_id: str, options: Optional[ListOptions] = None
    ) -> List[SmartZoneObject]:
        """
        List the AP groups of a zone (one page, as selected by ``options``).

        Args:
            zone_id: The zone UUID.
            options: Optional index, list size and domain for the query.

        Returns:
            List[SmartZoneObject]: ``{id, name}`` entries for the groups.
        """
        uri = f"{self.base_url}/rkszones/{zone_id}/apgroups"
        logger.info(f"Fetching AP groups for zone {zone_id} from {uri}")
        return self._get_page("GET", uri, SmartZoneObject, options=options).items

    def get_ap_group(self, zone_id: str, group_id: str) -> SmartZoneApGroup:
        """Retrieve one AP group of a zone."""
        uri = f"{self.base_url}/rkszones/{zone_id}/apgroups/{group_id}"
        logger.info(f"Fetching AP group {group_id} in zone {zone_id} from {uri}")
        return self._get_object(uri, SmartZoneApGroup)

    def get_ap_group_name(self, zone_id: str, group_id: str) -> str:
        """Return the name of an AP group, or an empty string if it has none."""
        return self.get_ap_group(zone_id, group_id).name or ""

    def get_aps(self, options: Optional[ListOptions] = None) -> SmartZonePage[SmartZoneAp]:
        """
        Retrieve one page of access points.

        Args:
            options: Optional index, list size and domain for the query.

        Returns:
            SmartZonePage[SmartZoneAp]: The page envelope. Entries carry the
                identification fields only (mac, zone, group, serial, name).

        Raises:
            SmartZoneAuthenticationError: If the client is not logged in.
            SmartZoneAPIError: If the API request fails.
            SmartZoneDataError: If the response cannot be decoded.
        """
        uri = f"{self.base_url}/aps"
        logger.info(f"Fetching APs from {uri}")
        return self._get_page("GET", uri, SmartZoneAp, options=options)

    def get_all_aps(self, options: Optional[ListOptions] = None) -> List[SmartZoneAp]:
        """
        Retrieve the whole AP inventory by following ``GET /aps`` pagination.

        Args:
            options: Optional list size and domain. ``index`` sets the starting point.

        Returns:
            List[SmartZoneAp]: Every AP, in controller order.

        Raises:
            SmartZoneAuthenticationError: If the client is not logged in.
            SmartZonePaginationError: If a page fails; the APs collected before the
                failure are available in ``partial_results``.
        """
        uri = f"{self.base_url}/aps"
        logger.info(f"Fetching all APs from {uri}")
        return self._paginate("GET", uri, SmartZoneAp, options=options)

    def query_aps(
        self,
        options: Optional[ListOptions] = None,
        query: Optional[ApQuery] = None,
    ) -> List[SmartZoneApSummary]:
        """
        Enumerate APs through the ``POST /query/ap`` search endpoint.

        The search returns inventory together with live status and radio
        telemetry. Newer controllers are usually better served by ``get_all_aps``.

        Args:
            options: Optional list size and domain, sent as query parameters.
            query: Filter/sort body. Defaults to every attribute of every AP,
                sorted by MAC address in ascending order.

        Returns:
            List[SmartZoneApSummary]: Every matching AP.

        Raises:
            SmartZoneAuthenticationError: If the client is not logged in.
            SmartZonePaginationError: If a page fails; partial results are attached.
        """
        uri = f"{self.base_url}/query/ap"
        payload = (query or ApQuery()).to_payload()
        logger.info(f"Querying APs via {uri}")
        return self._paginate(
            "POST", uri, SmartZoneApSummary, options=options, json_payload=payload)

    def get_ap(self, mac: str) -> SmartZoneAp:
        """
        Retrieve the configuration of one AP.

        Args:
            mac: AP MAC address in any common notation.

        Returns:
            SmartZoneAp: The decoded AP.
        """
        mac = self.normalize_mac(mac)
        uri = f"{self.base_url}/aps/{mac}"
        logger.info(f"Fetching AP {mac} from {uri}")
        return self._get_object(uri, SmartZoneAp)

    def get_ap_model(self, mac: str) -> str:
        """Return the model name of an AP, or an empty string if unknown."""
        return self.get_ap(mac).model or ""

    def get_ap_interface(self, mac: str) -> Optional[ApInterface]:
        """
        Report the state of an AP's wired uplink.

        Uses the controller's internal ``/wsg/api/scg`` port-status endpoint. The
        first LAN port that is up wins, with its speed and duplex split out of the
        physical link text. When no port is up, the last port reported is returned
        with its status as the speed.

        Args:
            mac: AP MAC address in any common notation.

        Returns:
            Optional[ApInterface]: The interface, or None if the controller reports
                no ports or ``success: false``.

        Raises:
            SmartZoneAuthenticationError: If the client is not logged in.
            SmartZoneAPIError: If the API request fails.
            SmartZoneDataError: If the response cannot be decoded.
        """
        mac = self.normalize_mac(mac)
        uri = f"{self.scg_url}/aps/{mac}"
        logger.info(f"Fetching port status for AP {mac} from {uri}")
        data = self._request("GET", uri)
        if not isinstance(data, dict):
            raise SmartZoneDataError(f"Unexpected API response format for {uri}")

        if not data.get("success"):
            logger.warning(f"Controller reported failure fetching port status of AP {mac}")
            return None

        port_data_container = data.get("data") or {}
        if not isinstance(port_data_container, dict):
            raise SmartZoneDataError(f"Unexpected port status payload for AP {mac}")
        ports = port_data_container.get("lanPortStatus") or []
        if not isinstance(ports, list):
            raise SmartZoneDataError(f"Unexpected lanPortStatus value for AP {mac}")
        interface = None
        for port_data in ports:
            interface = build_model(port_data, ApInterface).parse_link()
            if interface.is_up:
                break
        return interface

    def get_ap_lldp_neighbor(self, mac: str) -> Optional[ApLldpNeighbor]:
        """
        Return the first LLDP neighbor reported for an AP.

        Args:
            mac: AP MAC address in any common notation.

        Returns:
            Optional[ApLldpNeighbor]: The neighbor, or None if there is none.
        """
        mac = self.normalize_mac(mac)
        uri = f"{self.base_url}/aps/{mac}/apLldpNeighbors"
        logger.info(f"Fetching LLDP neighbors for AP {mac} from {uri}")
        page = self._get_page("GET", uri, ApLldpNeighbor)
        if page.total_count == 0 or not page.items:
            return None
        return page.items[0]

    def get_controller_summary(
        self, options: Optional[ListOptions] = None
    ) -> SmartZonePage[ControllerSummary]:
        """
        Retrieve the system summary: one entry per controller node.

        Args:
            options: Optional index, list size and domain for the query.

        Returns:
            SmartZonePage[ControllerSummary]: The page envelope of controller nodes.
        """
        uri = f"{self.base_url}/controller"
        logger.info(f"Fetching controller summary from {uri}")
        return self._get_page("GET", uri, ControllerSummary, options=options)

    def set_ap_name_and_group(
        self, mac: str, name: str, zone_id: str, group_id: str
    ) -> None:
        """
        Rename an AP and move it to a zone and AP group.

        Args:
            mac: AP MAC address in any common notation.
            name: New AP name.
            zone_id: Target zone UUID.
            group_id: Target AP group UUID within the zone.

        Raises:
            SmartZoneAuthenticationError: If the client is not logged in.
            SmartZoneAPIError: If the controller rejects the change.
        """
        mac = self.normalize_mac(mac)
        uri = f"{self.base_url}/aps/{mac}"
        payload = ApChangeRequest(zone_id=zone_id, ap_group_id=group_id, name=name).to_payload()
        logger.info(
            f"Updating AP {mac}: name={name!r}, zone={zone_id}, group={group_id}")
        self._request("PATCH", uri, json_payload=payload)

    def reboot_ap(self, mac: str) -> bool:
        """
        Ask the controller to reboot an AP.

        Args:
            mac: AP MAC address in any common notation.

        Returns:
            bool: The controller's ``success`` flag. A ``False`` result is not
                raised; check it.
        """
        mac = self.normalize_mac(mac)
        uri = f"{self.scg_url}/aps/{mac}/reboot"
        logger.info(f"Rebooting AP {mac} via {uri}")
        data = self._request("GET", uri)
        success = bool(data.get("success")) if isinstance(data, dict) else False
        if not success:
            logger.warning(f"Controller did not confirm reboot of AP {mac}")
        return success
