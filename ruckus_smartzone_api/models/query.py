"""
Request bodies sent to the controller.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class QueryFilter:
    """A ``{type, value, operator}`` term of a query body."""
    type: str
    value: str = ""
    operator: Optional[str] = None

    def to_payload(self) -> Dict[str, str]:
        payload = {"type": self.type, "value": self.value}
        if self.operator:
            payload["operator"] = self.operator
        return payload


@dataclass(frozen=True)
class SortInfo:
    sort_column: str = "apMac"
    direction: str = "ASC"

    def to_payload(self) -> Dict[str, str]:
        return {"sortColumn": self.sort_column, "dir": self.direction}


@dataclass(frozen=True)
class ApQuery:
    """
    Body of the ``POST /query/ap`` search endpoint.

    The defaults request every attribute of every AP, sorted by MAC address.
    """
    filters: List[QueryFilter] = field(default_factory=list)
    full_text_search: QueryFilter = field(
        default_factory=lambda: QueryFilter(type="AND", value=""))
    attributes: List[str] = field(default_factory=lambda: ["*"])
    sort_info: SortInfo = field(default_factory=SortInfo)
    page: int = 1
    limit: int = 10000

    def to_payload(self) -> Dict[str, Any]:
        return {
            "filters": [f.to_payload() for f in self.filters],
            "fullTextSearch": self.full_text_search.to_payload(),
            "attributes": list(self.attributes),
            "sortInfo": self.sort_info.to_payload(),
            "page": self.page,
            "limit": self.limit,
        }


@dataclass(frozen=True)
class ApChangeRequest:
    """Body of ``PATCH /aps/{mac}`` that renames an AP and moves it to a zone/group."""
    zone_id: str
    ap_group_id: str
    name: str

    def to_payload(self) -> Dict[str, str]:
        return {"zoneId": self.zone_id, "apGroupId": self.ap_group_id, "name": self.name}

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "ApChangeRequest":
        return cls(
            zone_id=payload["zoneId"],
            ap_group_id=payload["apGroupId"],
            name=payload["name"],
        )
