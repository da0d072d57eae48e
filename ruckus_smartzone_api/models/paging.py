"""
Models for paginated list responses and the options that drive them.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar, Union

from ..exceptions import SmartZoneDataError
from ..utils import build_model

T = TypeVar("T")

DEFAULT_LIST_SIZE = 100


@dataclass(frozen=True)
class ListOptions:
    """
    Common query options for SmartZone list endpoints.

    Attributes:
        index: Index of the first entry to retrieve. The controller defaults to 0.
        list_size: Maximum number of entries per page. The controller defaults to 100.
        domain_id: Domain to scope the query to. The controller defaults to the
            caller's current domain.
    """
    index: Optional[Union[int, str]] = None
    list_size: Optional[Union[int, str]] = None
    domain_id: Optional[str] = None

    def __post_init__(self):
        if self.list_size in (None, ""):
            return
        try:
            size = int(self.list_size)
        except (TypeError, ValueError):
            raise ValueError(f"list_size must be a positive integer, got {self.list_size!r}")
        if size < 1:
            raise ValueError(f"list_size must be a positive integer, got {self.list_size!r}")

    @property
    def page_size(self) -> int:
        """Page size used to advance the pagination cursor."""
        if self.list_size in (None, ""):
            return DEFAULT_LIST_SIZE
        return int(self.list_size)

    def with_index(self, index: int) -> "ListOptions":
        return ListOptions(index=index, list_size=self.list_size, domain_id=self.domain_id)

    def to_params(self) -> Dict[str, str]:
        """
        Render the options as query parameters.

        Keys are always emitted in the order ``index``, ``listSize``, ``domainId``
        and unset values are left out, so equal options give equal query strings.
        """
        params = {}
        if self.index not in (None, ""):
            params["index"] = str(self.index)
        if self.list_size not in (None, ""):
            params["listSize"] = str(self.list_size)
        if self.domain_id:
            params["domainId"] = self.domain_id
        return params


@dataclass
class SmartZonePage(Generic[T]):
    """
    One page of a SmartZone list endpoint.

    ``has_more`` is the only signal that another page exists; a short page does
    not by itself mean the listing is complete.
    """
    total_count: int = 0
    has_more: bool = False
    first_index: int = 0
    items: List[T] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    @classmethod
    def from_api(cls, data: Any, item_model: Type[T]) -> "SmartZonePage[T]":
        """
        Decode a ``{totalCount, hasMore, firstIndex, list}`` envelope.

        Raises:
            SmartZoneDataError: If the body is not an envelope or an item cannot
                be decoded into ``item_model``.
        """
        if not isinstance(data, dict):
            raise SmartZoneDataError(
                f"Expected a list envelope, got {type(data).__name__}")

        raw_items = data.get("list")
        if raw_items is None:
            raw_items = []
        if not isinstance(raw_items, list):
            raise SmartZoneDataError(
                f"Unexpected 'list' value in envelope: {type(raw_items).__name__}")

        has_more = data.get("hasMore", False)
        if not isinstance(has_more, bool):
            raise SmartZoneDataError(f"Unexpected 'hasMore' value in envelope: {has_more!r}")

        try:
            return cls(
                total_count=int(data.get("totalCount") or 0),
                has_more=has_more,
                first_index=int(data.get("firstIndex") or 0),
                items=[build_model(item, item_model) for item in raw_items],
            )
        except (TypeError, ValueError) as e:
            raise SmartZoneDataError(f"Malformed list envelope: {e}") from e
