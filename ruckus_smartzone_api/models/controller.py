from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .base import JsonValue, SmartZoneModel


@dataclass
class ControllerSummary(SmartZoneModel):
    """A controller node listed by ``GET /controller``.

    Attributes:
        id: Node identifier.
        model: Hardware or virtual appliance model.
        host_name: Node host name.
        mac: Node MAC address.
        serial_number: Node serial number.
        cluster_role: Role in the cluster, e.g. ``Leader``.
        uptime_in_sec: Node uptime in seconds.
        version: Controller software version.
        ap_version: AP firmware version bundled with the controller.
        control_ip: Control plane address.
        cluster_ip: Cluster interconnect address.
        management_ip: Management interface address.
    """
    id: Optional[str] = None
    model: Optional[str] = None
    description: Optional[str] = None
    host_name: Optional[str] = None
    mac: Optional[str] = None
    serial_number: Optional[str] = None
    cluster_role: Optional[str] = None
    control_nat_ip: Optional[str] = None
    uptime_in_sec: Optional[int] = None
    name: Optional[str] = None
    version: Optional[str] = None
    ap_version: Optional[str] = None
    control_ip: Optional[str] = None
    cluster_ip: Optional[str] = None
    management_ip: Optional[str] = None
    control_ipv6: Optional[JsonValue] = None
    cluster_ipv6: Optional[JsonValue] = None
    management_ipv6: Optional[JsonValue] = None

    _extra_fields: Dict[str, Any] = field(default_factory=dict, repr=False)
