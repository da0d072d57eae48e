"""
Utility functions for the SmartZone API package.
"""

import inspect
import dataclasses
from typing import Any, Dict, Type, Tuple, TypeVar

from .logging import get_logger, log_extra_fields
from .exceptions import SmartZoneDataError

logger = get_logger(__name__)

API_FIELD_METADATA = "smartzone_api_field"

M = TypeVar("M")


def snake_to_camel(name: str) -> str:
    """
    Convert a Python attribute name to the vendor's camelCase spelling.

    ``ap_group_id`` becomes ``apGroupId``. Names that do not follow the regular
    pattern (``noise24G``, ``lldpPortID``) are declared explicitly through field
    metadata instead.
    """
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def normalize_mac(mac_address: str) -> str:
    """
    Normalize a MAC address to the upper-case, colon-separated form SmartZone uses.

    Args:
        mac_address: MAC address string in any format (with or without separators).

    Returns:
        str: MAC address such as ``AA:BB:CC:DD:EE:FF``.
    """
    mac_clean = (
        mac_address.replace(":", "").replace(
            "-", "").replace(".", "").upper()
    )

    return ":".join(mac_clean[i: i + 2] for i in range(0, len(mac_clean), 2))


def get_api_field_mapping(model_class: Type) -> Dict[str, str]:
    """
    Create a mapping between API field names and model attribute names.

    Every public dataclass field maps from its camelCase spelling. Fields that
    carry ``smartzone_api_field`` metadata map from that name instead, which covers
    vendor names like ``noise24G`` or ``lldpMgmtIP``.

    Args:
        model_class: The dataclass model to examine for field mappings

    Returns:
        Dictionary mapping SmartZone API field names to Python model attribute names
    """
    if not dataclasses.is_dataclass(model_class):
        return {}

    field_mapping = {}

    for field in dataclasses.fields(model_class):
        if field.name.startswith("_") or not field.init:
            continue
        api_field_name = field.metadata.get(
            API_FIELD_METADATA, snake_to_camel(field.name))
        field_mapping[api_field_name] = field.name

    return field_mapping


def map_api_data_to_model(
    data: Dict[str, Any], model_class: Type
) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    """
    Maps API data to model fields, separating model fields from extra fields.

    Args:
        data: Input dictionary from API response
        model_class: The dataclass model to map data to

    Returns:
        Tuple containing (model_fields, extra_fields) where:
            - model_fields: Dictionary of fields that map to the model's attributes
            - extra_fields: Dictionary of extra fields that don't directly map to the model
    """
    signature = inspect.signature(model_class.__init__)
    valid_params = set(signature.parameters.keys())
    valid_params.discard("self")

    field_map = get_api_field_mapping(model_class)

    model_fields = {}
    extra_fields = {}

    for api_key, value in data.items():
        mapped_key = field_map.get(api_key)

        if mapped_key is not None and mapped_key in valid_params:
            model_fields[mapped_key] = value
        else:
            extra_fields[api_key] = value

    return model_fields, extra_fields


def build_model(data: Any, model_class: Type[M]) -> M:
    """
    Decode one JSON object into ``model_class``.

    Unknown vendor fields are stored on the instance's ``_extra_fields``.

    Raises:
        SmartZoneDataError: If ``data`` is not a JSON object or the model cannot
            be instantiated from it.
    """
    if not isinstance(data, dict):
        raise SmartZoneDataError(
            f"Expected a JSON object for {model_class.__name__}, got {type(data).__name__}"
        )

    model_fields, extra_fields = map_api_data_to_model(data, model_class)
    try:
        instance = model_class(**model_fields)
    except (TypeError, ValueError) as e:
        raise SmartZoneDataError(
            f"Error creating {model_class.__name__} model from data: {e}"
        ) from e

    if hasattr(instance, "_extra_fields"):
        instance._extra_fields = extra_fields
        log_extra_fields(
            logger,
            model_class.__name__,
            str(data.get("id") or data.get("mac") or data.get("apMac") or ""),
            extra_fields,
        )
    return instance
