"""Shared types and validation helpers for resources.

This module contains:
- Validation mode type (shared across all resources)
- Option items used to populate selectable node parameters
- Normalizers for tag UUIDs and durations
"""

from __future__ import annotations

import logging
from typing import Any, Literal, TypedDict

from ..errors import NoDataReturnedError

_logger = logging.getLogger(__name__)

# --- Shared Validation Mode --- #
ValidationMode = Literal["off", "warn", "strict"]


# --- Option Projection --- #
class OptionItem(TypedDict):
    """Selectable choice shown in a node parameter dropdown."""
    label: str
    value: int | str
    description: str


def _project_options(
    response: Any,
    *,
    node_name: str,
    validation: ValidationMode = "warn",
    logger: logging.Logger = _logger,
) -> list[OptionItem]:
    """Project ``{id, name}`` records to option items.

    Parameters
    ----------
    response
        Decoded response of a collection endpoint.
    node_name
        Step name attached to raised errors.
    validation
        ``"off"`` projects records as-is, ``"warn"`` drops records missing
        ``id``/``name`` with a warning, ``"strict"`` raises on them.
    logger
        Logger used for dropped-record warnings.

    Raises
    ------
    NoDataReturnedError
        If the response is absent or not a list.
    ValueError
        On an invalid record when ``validation`` is ``"strict"``.
    """
    if response is None:
        raise NoDataReturnedError(node_name)
    if not isinstance(response, list):
        raise NoDataReturnedError(node_name, message=f"Expected a list of records, got {type(response).__name__}")

    options: list[OptionItem] = []
    for record in response:
        if validation == "off":
            item = record if isinstance(record, dict) else {}
            options.append({
                "label": item.get("name"),  # type: ignore[typeddict-item]
                "value": item.get("id"),  # type: ignore[typeddict-item]
                "description": item.get("name"),  # type: ignore[typeddict-item]
            })
            continue

        if not isinstance(record, dict):
            problem = f"Invalid option record: {record!r}"
        else:
            missing = {"id", "name"} - record.keys()
            if missing:
                problem = f"Option record missing required keys {sorted(missing)}: {record!r}"
            elif not isinstance(record["id"], (int, str)) or isinstance(record["id"], bool):
                problem = f"Option id must be int or str: {record['id']!r}"
            elif not isinstance(record["name"], str):
                problem = f"Option name must be a string: {record['name']!r}"
            else:
                problem = None

        if problem is not None:
            if validation == "strict":
                raise ValueError(problem)
            logger.warning(problem)
            continue

        options.append({"label": record["name"], "value": record["id"], "description": record["name"]})
    return options


# --- Parameter Normalization --- #
def _normalize_tag_uuid(tag_uuid: object) -> str:
    """Return a stripped tag UUID.

    Raises
    ------
    ValueError
        If the value is not a non-blank string or contains a path separator.
    """
    if not isinstance(tag_uuid, str) or not tag_uuid.strip():
        raise ValueError(f"Invalid tag UUID: {tag_uuid!r}")
    tag_uuid = tag_uuid.strip()
    if "/" in tag_uuid:
        raise ValueError(f"Invalid tag UUID: {tag_uuid!r}")
    return tag_uuid


def _normalize_duration(duration: object) -> int:
    """Return a duration in milliseconds as a non-negative int.

    Integral floats are accepted since workflow number fields may hold them.

    Raises
    ------
    ValueError
        If the value is not a non-negative whole number.
    """
    if isinstance(duration, bool):
        raise ValueError(f"Invalid duration: {duration!r}")
    if isinstance(duration, float) and duration.is_integer():
        duration = int(duration)
    if not isinstance(duration, int) or duration < 0:
        raise ValueError(f"Invalid duration: {duration!r}")
    return duration


__all__ = ["OptionItem", "ValidationMode"]
