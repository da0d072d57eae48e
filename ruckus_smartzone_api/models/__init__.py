"""
Data models for SmartZone API requests and responses.

.. warning::
    The dataclasses defined in this module represent commonly observed fields in
    the SmartZone public API responses. The actual data returned varies with:

    *   Controller release and API version
    *   AP model and firmware
    *   Zone configuration

    Fields defined in the models may be missing from an actual response, in which
    case the attribute keeps its default (usually ``None``). Fields the models do
    not declare are captured in the ``_extra_fields`` dictionary on each instance
    and are included by ``to_dict()``.

    Vendor fields whose shape varies between releases are typed ``JsonValue``
    rather than ``Any``.
"""

from .base import JsonValue, SmartZoneModel, SmartZoneObject
from .paging import DEFAULT_LIST_SIZE, ListOptions, SmartZonePage
from .query import ApChangeRequest, ApQuery, QueryFilter, SortInfo
from .ap import SmartZoneAp, SmartZoneApSummary, ApInterface, ApLldpNeighbor
from .zone import SmartZoneZone, SmartZoneApGroup
from .controller import ControllerSummary

__all__ = [
    "JsonValue",
    "SmartZoneModel",
    "SmartZoneObject",
    "DEFAULT_LIST_SIZE",
    "ListOptions",
    "SmartZonePage",
    "ApChangeRequest",
    "ApQuery",
    "QueryFilter",
    "SortInfo",
    "SmartZoneAp",
    "SmartZoneApSummary",
    "ApInterface",
    "ApLldpNeighbor",
    "SmartZoneZone",
    "SmartZoneApGroup",
    "ControllerSummary",
]
