"""
FlowBoard Backend: Record Base Types
====================================

What:  Shared pieces for every stored record: camelCase JSON, UTC clock, ids.
Who:   Imported by models/lead.py, models/contact.py and the API schemas.

Record ids:
    Derived from the millisecond clock and strictly increasing within the
    process. Two records created in the same millisecond get consecutive ids
    instead of colliding. No uniqueness is promised across processes.
"""

import threading
import time
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model whose JSON field names are camelCase (teamSize, startDate, ...)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RecordModel(CamelModel):
    """Base for stored records. Frozen: fields are set once at creation."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


_id_lock = threading.Lock()
_last_id = 0


def next_record_id() -> int:
    """
    Allocate the next record id.

    Returns the current epoch time in milliseconds, bumped past the previously
    issued id when the clock has not advanced (or has gone backwards).
    """
    global _last_id
    with _id_lock:
        candidate = int(time.time() * 1000)
        if candidate <= _last_id:
            candidate = _last_id + 1
        _last_id = candidate
        return candidate
