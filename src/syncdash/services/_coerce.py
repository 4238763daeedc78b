"""Field-level defaulting helpers for weakly-typed agent payloads."""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import BaseModel


def as_mapping(raw: object) -> Mapping[str, Any]:
    """Return ``raw`` as a mapping, or an empty one when it is not a mapping."""
    if isinstance(raw, BaseModel):
        return raw.model_dump()
    if isinstance(raw, Mapping):
        return raw
    return {}


def field_str(data: Mapping[str, Any], key: str, default: str = "") -> str:
    """Extract a text field; only an absent value falls back to ``default``."""
    v = data.get(key)
    if v is None:
        return default
    return v if isinstance(v, str) else str(v)


def field_number(data: Mapping[str, Any], key: str) -> int | float:
    """Extract a numeric field, falling back to 0 for anything unusable."""
    v = data.get(key, 0)
    if isinstance(v, bool):
        return int(v)
    if isinstance(v, int):
        return v
    if isinstance(v, float):
        return v if math.isfinite(v) else 0
    if isinstance(v, str):
        try:
            return int(v)
        except ValueError:
            pass
        try:
            parsed = float(v)
        except ValueError:
            return 0
        return parsed if math.isfinite(parsed) else 0
    return 0


def field_bool(data: Mapping[str, Any], key: str) -> bool:
    v = data.get(key)
    if isinstance(v, str):
        return v.strip().lower() in {"true", "yes", "1"}
    return bool(v)


def field_list(data: Mapping[str, Any], key: str) -> list[Any]:
    """Extract a list field; strings and mappings are not sequences here."""
    v = data.get(key)
    if isinstance(v, Sequence) and not isinstance(v, str | bytes):
        return list(v)
    return []
