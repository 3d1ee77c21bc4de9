"""
Design (models.py)
- Purpose: Define the Snapshot value type and the persisted-record codec.
- Inputs: Counts mapping, total, timestamp (encode); raw JSON string and known phrases (decode).
- Outputs: Snapshot instances; JSON string; (counts, stored_total) tuples.
- Side effects: None.
- Thread-safety: Pure functions and frozen dataclasses.
"""

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Sequence, Tuple

from .storage import LoadFailure


@dataclass(frozen=True)
class Snapshot:
    """
    Design (Snapshot)
    - Purpose: Read-only copy of the counter state handed to renderers.
    - Fields:
        counts: phrase -> count, in display order (read-only mapping).
        total: sum of counts.
    """
    counts: Mapping[str, int] = field(default_factory=dict)
    total: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "counts", MappingProxyType(dict(self.counts)))


def _is_count(value) -> bool:
    # bool is an int subclass; true/false in JSON are not counts
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def iso_timestamp(now: datetime) -> str:
    """UTC ISO-8601 with milliseconds and a trailing Z."""
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    now = now.astimezone(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def encode_record(counts: Mapping[str, int], total: int, now: datetime) -> str:
    return json.dumps(
        {
            "counts": dict(counts),
            "totalCount": total,
            "lastUpdated": iso_timestamp(now),
        },
        ensure_ascii=False,
    )


def decode_record(raw: str, phrases: Sequence[str]) -> Tuple[Dict[str, int], Optional[int]]:
    """
    Parse a persisted record. Known phrases present with a valid count override 0;
    unknown keys and fields are ignored. Returns (counts, stored_total or None).
    Raises LoadFailure when raw is not a JSON object or its counts is not an object.
    """
    try:
        data = json.loads(raw)
    except (TypeError, ValueError, RecursionError) as e:
        raise LoadFailure(f"record is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise LoadFailure("record is not a JSON object")

    stored_counts = data.get("counts", {})
    if not isinstance(stored_counts, dict):
        raise LoadFailure("record counts is not an object")

    counts = {phrase: 0 for phrase in phrases}
    for phrase in phrases:
        value = stored_counts.get(phrase)
        if _is_count(value):
            counts[phrase] = value

    stored_total = data.get("totalCount")
    if not _is_count(stored_total):
        stored_total = None
    return counts, stored_total
