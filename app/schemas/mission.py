from pydantic import BaseModel, ConfigDict, Field, StrictInt, TypeAdapter
from typing import Any

# SQLite INTEGER is a signed 64-bit value.
SQL_INT_MIN = -2**63
SQL_INT_MAX = 2**63 - 1


def fits_sql_int(value: int) -> bool:
    return SQL_INT_MIN <= value <= SQL_INT_MAX


class EngineerRef(BaseModel):
    """
    One entry of a mission's engineer snapshot.
    Only `id` is required and authoritative; any other fields the caller sends
    (name, branch, ...) are kept as they were at creation time.
    """
    model_config = ConfigDict(extra="allow")

    id: StrictInt


# Encodes the `missions.engineers` column on write: a JSON array of EngineerRef.
engineer_snapshot = TypeAdapter(list[EngineerRef])

# Decodes the column on read. Any JSON array is accepted; entries are kept as stored.
stored_snapshot = TypeAdapter(list[Any])


def snapshot_ids(entries: list[Any]) -> set[int]:
    """Ids of the entries that are objects with an integer `id`."""
    return {
        e["id"] for e in entries
        if isinstance(e, dict) and isinstance(e.get("id"), int) and not isinstance(e["id"], bool)
    }


class MissionCreateRequest(BaseModel):
    driver_id:  int = Field(..., ge=SQL_INT_MIN, le=SQL_INT_MAX)
    vehicle_id: int = Field(..., ge=SQL_INT_MIN, le=SQL_INT_MAX)
    engineers:  list[EngineerRef] = []
    start_time: str
    end_time:   str


class MissionCreatedOut(BaseModel):
    id: int


class MissionOut(BaseModel):
    id:           int
    driver_id:    int
    vehicle_id:   int
    engineers:    list[Any]
    start_time:   str | None
    end_time:     str | None
    status:       str
    driver_name:  str | None
    plate_number: str | None
