"""Utility helpers."""

import random
from typing import Mapping, Optional, TypeVar, Union

T = TypeVar("T")


def match_city(destination: str, table: Mapping[str, T], default: Optional[str] = None) -> Optional[T]:
    """Return the first table entry whose key appears in the destination name.

    Keys are tried in table order. Without a match the ``default`` key is used,
    or ``None`` when no default is given.
    """

    lowered = (destination or "").lower()
    for city, value in table.items():
        if city in lowered:
            return value
    if default is None:
        return None
    return table[default]


def jitter(value: float, spread: float, rng: Optional[random.Random] = None) -> float:
    """Offset ``value`` uniformly within ``spread / 2`` either side."""

    source = rng or random
    return value + (source.random() - 0.5) * spread


def strip_code_fences(text: str) -> str:
    """Remove a surrounding Markdown code fence such as ```json ... ```."""

    cleaned = (text or "").strip()
    if cleaned.startswith("```"):
        parts = cleaned.split("\n", 1)
        cleaned = parts[1] if len(parts) > 1 else ""
        if cleaned.rstrip().endswith("```"):
            cleaned = cleaned.rstrip().rsplit("```", 1)[0]
    return cleaned.strip()


def normalize_number(value: Union[int, float]) -> Union[int, float]:
    """Return integral floats as ints so JSON shows ``50000`` rather than ``50000.0``."""

    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value
