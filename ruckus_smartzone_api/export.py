"""
Functions for exporting SmartZone records to various formats.

This module provides simple export utilities for decoded SmartZone data such as
APs and zones, allowing export to CSV, JSON, and Python dictionaries.
"""

import csv
import json
from typing import Any, Dict, List, Optional, Sequence

from .models.base import SmartZoneModel
from .logging import get_logger

logger = get_logger(__name__)


class SmartZoneEncoder(json.JSONEncoder):
    def default(self, obj):
        if hasattr(obj, "to_dict") and callable(getattr(obj, "to_dict")):
            return obj.to_dict()
        try:
            return super().default(obj)
        except TypeError:
            return str(obj)


def to_dict_list(items: Sequence[Any]) -> List[Dict[str, Any]]:
    """
    Convert a list of SmartZone model objects to a list of dictionaries.

    Plain dictionaries are passed through unchanged.

    Args:
        items: List of SmartZone model objects (e.g. SmartZoneAp, SmartZoneObject)

    Returns:
        List of dictionaries
    """
    result = []

    for item in items:
        if isinstance(item, SmartZoneModel):
            result.append(item.to_dict())
        elif isinstance(item, dict):
            result.append(item)
        else:
            logger.warning(f"Skipping item that cannot be exported: {type(item).__name__}")

    return result


def _flatten_dict(
    d: Dict[str, Any], parent_key: str = "", sep: str = "_"
) -> Dict[str, Any]:
    """
    Flatten nested dictionaries using a separator.

    Args:
        d: Dictionary to flatten
        parent_key: Key of the parent dictionary (used in recursion)
        sep: Separator to use between keys (default: '_')

    Returns:
        Flattened dictionary with no nested structures
    """
    items = []
    for k, v in d.items():
        new_key = f"{parent_key}{sep}{k}" if parent_key else k
        if isinstance(v, dict):
            items.extend(_flatten_dict(v, new_key, sep=sep).items())
        elif isinstance(v, list):
            if v and all(isinstance(i, dict) for i in v):
                for i, item in enumerate(v):
                    items.extend(_flatten_dict(item, f"{new_key}_{i}", sep=sep).items())
            else:
                items.append((new_key, ", ".join(str(i) for i in v)))
        else:
            items.append((new_key, v))

    return dict(items)


def export_csv(
    items: Sequence[Any],
    path: str,
    fields: Optional[List[str]] = None,
    flatten_nested: bool = False,
) -> None:
    """
    Export SmartZone records to a CSV file.

    Args:
        items: List of SmartZone model objects
        path: Path where the CSV file will be saved
        fields: Optional list of specific fields to include in the export.
                If not provided, the fields of the first record are used.
        flatten_nested: Whether to flatten nested structures (default: False).
                        For example, wifi24.channel becomes wifi24_channel
    """
    item_dicts = to_dict_list(items)
    if flatten_nested:
        item_dicts = [d for d in (_flatten_dict(item) for item in item_dicts) if d]

    with open(path, "w", newline="", encoding="utf-8") as csvfile:
        if not item_dicts:
            return

        final_fields = fields or list(item_dicts[0].keys())
        writer = csv.DictWriter(csvfile, fieldnames=final_fields, extrasaction="ignore")
        writer.writeheader()
        writer.writerows(item_dicts)

    logger.debug(f"Exported {len(item_dicts)} records to {path}")


def export_json(items: Sequence[Any], path: str, indent: int = 2) -> None:
    """
    Export SmartZone records to a JSON file.

    Args:
        items: List of SmartZone model objects
        path: Path where the JSON file will be saved
        indent: Number of spaces for indentation in the JSON file (default: 2)
    """
    item_dicts = to_dict_list(items)

    with open(path, "w", encoding="utf-8") as jsonfile:
        json.dump(item_dicts, jsonfile, indent=indent, cls=SmartZoneEncoder)

    logger.debug(f"Exported {len(item_dicts)} records to {path}")
