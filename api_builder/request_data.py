"""
Request descriptor and the merge rule used to accumulate parameters.

Query parameters, body parameters and headers are built up over several
builder calls. Every incoming value is first turned into an explicit update
plan:

- Replace: the value overwrites whatever was there (lists, strings, scalars)
- MergeKeys: the mapping is merged key by key into the existing mapping

Inside a MergeKeys plan each top-level key follows the same split one level
down: a mapping value is shallow-merged into the existing value for that key,
anything else replaces it.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .enums import HttpMethod, HttpScheme


@dataclass
class ApiRequestData:
    """Mutable descriptor holding everything needed to issue one request"""

    scheme: HttpScheme | None = None
    host: str = ""
    port: int = 0
    method: HttpMethod | None = None
    path: str = ""
    query_parameters: Any = field(default_factory=dict)
    body_parameters: Any = field(default_factory=dict)
    headers: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class Replace:
    value: Any


@dataclass(frozen=True)
class MergeKeys:
    mapping: Mapping[str, Any]


FieldUpdate = Replace | MergeKeys


def plan_update(value: Any) -> FieldUpdate:
    """Decide how an incoming value is applied to an existing one"""
    if isinstance(value, Mapping):
        return MergeKeys(value)
    return Replace(value)


def apply_update(current: Any, update: FieldUpdate) -> Any:
    """
    Apply an update plan to the current value of a field.

    Args:
        current: Existing field value (may be None, a mapping, a list or a string)
        update: Plan returned by plan_update()

    Returns:
        The new field value. An existing dict is updated in place and returned,
        so references obtained earlier keep seeing later merges.
    """
    if isinstance(update, Replace):
        return update.value

    merged = current if isinstance(current, dict) else {}
    for key, value in update.mapping.items():
        if isinstance(plan_update(value), MergeKeys):
            existing = merged.get(key)
            if not isinstance(existing, dict):
                existing = merged[key] = {}
            existing.update(value)
        else:
            merged[key] = value
    return merged


def merge_field(current: Any, incoming: Any) -> Any:
    """Merge incoming into current; empty or None input leaves current untouched"""
    if not incoming:
        return current
    return apply_update(current, plan_update(incoming))
