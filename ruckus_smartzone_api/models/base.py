"""
Shared pieces for SmartZone dataclass models.
"""

import dataclasses
from typing import Any, ClassVar, Dict, List, Optional, Type, Union

from ..utils import build_model, get_api_field_mapping

# Vendor schemas are full of fields whose shape varies between controller
# releases (often ``null``). They are typed with this alias instead of ``Any``.
JsonValue = Union[str, int, float, bool, List[Any], Dict[str, Any]]


class SmartZoneModel:
    """
    Mixin for decoded SmartZone records.

    Subclasses are dataclasses that end with an ``_extra_fields`` field. Nested
    vendor objects listed in ``_nested`` (attribute name to model class) are
    decoded into their own dataclasses after construction; list-valued entries in
    ``_nested_lists`` are decoded item by item.
    """

    _nested: ClassVar[Dict[str, Type]] = {}
    _nested_lists: ClassVar[Dict[str, Type]] = {}

    def __post_init__(self):
        for name, model_class in self._nested.items():
            value = getattr(self, name)
            if isinstance(value, dict):
                setattr(self, name, build_model(value, model_class))
        for name, model_class in self._nested_lists.items():
            value = getattr(self, name)
            if isinstance(value, list):
                setattr(self, name, [
                    build_model(item, model_class) if isinstance(item, dict) else item
                    for item in value
                ])

    def to_dict(self, api_names: bool = False) -> Dict[str, Any]:
        """
        Convert the record to a dictionary.

        Args:
            api_names: If True, keys use the vendor's camelCase field names so the
                result can be sent back to the controller.

        Returns:
            Dictionary representation including any extra fields.
        """
        names = {}
        if api_names:
            names = {v: k for k, v in get_api_field_mapping(type(self)).items()}

        result = {}
        for field in dataclasses.fields(self):
            if field.name.startswith("_"):
                continue
            result[names.get(field.name, field.name)] = _plain(
                getattr(self, field.name), api_names)

        result.update(getattr(self, "_extra_fields", {}) or {})
        return result


def _plain(value: Any, api_names: bool) -> Any:
    if isinstance(value, SmartZoneModel):
        return value.to_dict(api_names)
    if isinstance(value, list):
        return [_plain(v, api_names) for v in value]
    return value


@dataclasses.dataclass
class SmartZoneObject(SmartZoneModel):
    """A bare ``{id, name}`` reference, as listed by zones and AP groups."""

    id: Optional[str] = None
    name: Optional[str] = None

    _extra_fields: Dict[str, Any] = dataclasses.field(default_factory=dict, repr=False)
