"""
Models for SmartZone access points and related objects.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .base import JsonValue, SmartZoneModel


def _api(name: str, default: Any = None) -> Any:
    return field(default=default, metadata={"smartzone_api_field": name})


@dataclass
class SmartZoneAp(SmartZoneModel):
    """
    Represents an access point as returned by ``GET /aps`` and ``GET /aps/{mac}``.

    The list endpoint only carries the identification fields; the single-AP
    endpoint adds configuration details.
    """
    # Identification
    mac: Optional[str] = None
    zone_id: Optional[str] = None
    ap_group_id: Optional[str] = None
    serial: Optional[str] = None
    name: Optional[str] = None

    # Details from GET /aps/{mac}
    model: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    location_additional_info: Optional[str] = None
    administrative_state: Optional[str] = None
    provision_checklist: Optional[str] = None
    gps_info: Optional[JsonValue] = None
    login: Optional[JsonValue] = None
    wifi24: Optional[JsonValue] = None
    wifi50: Optional[JsonValue] = None
    network: Optional[JsonValue] = None
    bonjour_gateway: Optional[JsonValue] = None
    client_admission_control24: Optional[JsonValue] = None
    client_admission_control50: Optional[JsonValue] = None

    _extra_fields: Dict[str, Any] = field(default_factory=dict, repr=False)


@dataclass
class SmartZoneApSummary(SmartZoneModel):
    """
    Represents an access point row returned by the ``POST /query/ap`` search.

    These rows mix inventory with live telemetry; counters that the controller has
    not collected yet come back as ``null``.
    """
    # Identification
    device_name: Optional[str] = None
    ap_mac: Optional[str] = None
    serial: Optional[str] = None
    model: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None

    # Placement
    zone_id: Optional[str] = None
    zone_name: Optional[str] = None
    ap_group_id: Optional[str] = None
    ap_group_name: Optional[str] = None
    domain_id: Optional[str] = None
    domain_name: Optional[JsonValue] = None
    control_blade_id: Optional[str] = None
    control_blade_name: Optional[str] = None

    # Status
    status: Optional[str] = None
    connection_status: Optional[str] = None
    configuration_status: Optional[str] = None
    administrative_state: Optional[str] = None
    registration_state: Optional[str] = None
    provision_method: Optional[str] = None
    provision_stage: Optional[str] = None
    registration_time: Optional[int] = None
    last_seen: Optional[int] = None
    uptime: Optional[JsonValue] = None
    alerts: Optional[int] = None
    is_critical_ap: Optional[bool] = None
    poe_port_status: Optional[str] = None

    # Addressing and firmware
    ip: Optional[str] = None
    ipv6_address: Optional[JsonValue] = None
    ip_type: Optional[str] = None
    ext_ip: Optional[str] = None
    ext_port: Optional[str] = None
    dp_ip: Optional[str] = None
    management_vlan: Optional[JsonValue] = None
    firmware_version: Optional[str] = None
    zone_firmware_version: Optional[str] = None

    # Mesh
    mesh_role: Optional[str] = None
    mesh_mode: Optional[str] = None

    # Radio telemetry
    channel_24g: Optional[str] = _api("channel24G")
    channel_5g: Optional[str] = _api("channel5G")
    channel_24g_value: Optional[int] = _api("channel24gValue")
    channel_50g_value: Optional[int] = _api("channel50gValue")
    noise_24g: Optional[int] = _api("noise24G")
    noise_5g: Optional[int] = _api("noise5G")
    airtime_24g: Optional[int] = _api("airtime24G")
    airtime_5g: Optional[int] = _api("airtime5G")
    latency_24g: Optional[int] = _api("latency24G")
    latency_50g: Optional[int] = _api("latency50G")
    capacity: Optional[int] = None
    capacity_24g: Optional[int] = _api("capacity24G")
    capacity_50g: Optional[int] = _api("capacity50G")
    retry_24g: Optional[int] = _api("retry24G")
    retry_5g: Optional[int] = _api("retry5G")
    eirp_24g: Optional[int] = _api("eirp24G")
    eirp_50g: Optional[int] = _api("eirp50G")
    connection_failure: Optional[int] = None

    # Clients and traffic
    num_clients: Optional[int] = None
    num_clients_24g: Optional[int] = _api("numClients24G")
    num_clients_5g: Optional[int] = _api("numClients5G")
    tx: Optional[JsonValue] = None
    rx: Optional[JsonValue] = None
    tx_rx: Optional[JsonValue] = None

    _extra_fields: Dict[str, Any] = field(default_factory=dict, repr=False)


@dataclass
class ApInterface(SmartZoneModel):
    """
    Status of an AP's wired LAN port.

    As decoded from the controller, ``speed`` holds the raw ``phyLink`` text
    (``"Up 1000Mbps full"``) and ``status`` the ``logicLink`` state;
    ``parse_link`` turns that into speed, duplex and a lower-case status.
    """
    mac: Optional[str] = _api("apMac")
    speed: Optional[str] = _api("phyLink")
    status: Optional[str] = _api("logicLink")
    duplex: str = ""

    _extra_fields: Dict[str, Any] = field(default_factory=dict, repr=False)

    @property
    def is_up(self) -> bool:
        return (self.status or "").lower() == "up"

    def parse_link(self) -> "ApInterface":
        """
        Return a copy with the physical link text split into speed and duplex.

        A port that is not up keeps no duplex, and its speed repeats its status.
        """
        status = (self.status or "").lower()
        if status != "up":
            return ApInterface(mac=self.mac, speed=status, status=status)

        parts = (self.speed or "").replace("Up ", "").split()
        speed = parts[0] if parts else ""
        duplex = parts[1].upper() if len(parts) > 1 else ""
        return ApInterface(mac=self.mac, speed=speed, status=status, duplex=duplex)


@dataclass
class ApLldpNeighbor(SmartZoneModel):
    """LLDP information about the wired device connected to an AP's uplink."""
    remote_hostname: Optional[str] = _api("lldpSysName")
    remote_interface: Optional[str] = _api("lldpPortID")
    remote_ip: Optional[str] = _api("lldpMgmtIP")
    remote_port_description: Optional[str] = _api("lldpPortDesc")
    remote_system_description: Optional[str] = _api("lldpSysDesc")
    local_interface: Optional[str] = _api("lldpInterface")

    _extra_fields: Dict[str, Any] = field(default_factory=dict, repr=False)
