"""
Ruckus SmartZone API client for interacting with the SmartZone public REST API.

This package provides a Python interface to a SmartZone controller: service
ticket sessions, paginated listings of zones, AP groups and access points, and
per-AP operations such as rename, reboot, uplink status and LLDP neighbors.
"""

from .api_client import SmartZoneController
from .models import (
    ListOptions,
    ApQuery,
    QueryFilter,
    SmartZonePage,
    SmartZoneObject,
    SmartZoneAp,
    SmartZoneApSummary,
    SmartZoneZone,
    SmartZoneApGroup,
    ControllerSummary,
    ApInterface,
    ApLldpNeighbor,
)
from .export import export_csv, export_json, to_dict_list
from .exceptions import (
    SmartZoneControllerError,
    SmartZoneAuthenticationError,
    SmartZoneAPIError,
    SmartZoneDataError,
    SmartZonePaginationError,
)

__version__ = "0.1.0"

__all__ = [
    "SmartZoneController",
    "ListOptions",
    "ApQuery",
    "QueryFilter",
    "SmartZonePage",
    "SmartZoneObject",
    "SmartZoneAp",
    "SmartZoneApSummary",
    "SmartZoneZone",
    "SmartZoneApGroup",
    "ControllerSummary",
    "ApInterface",
    "ApLldpNeighbor",
    "export_csv",
    "export_json",
    "to_dict_list",
    "SmartZoneControllerError",
    "SmartZoneAuthenticationError",
    "SmartZoneAPIError",
    "SmartZoneDataError",
    "SmartZonePaginationError",
]
