"""Domain entity for maintenance reports."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class ReportStatus(str, Enum):
    """Lifecycle state of a maintenance report."""

    DRAFT = "draft"
    GENERATED = "generated"
    SENT = "sent"
    FAILED = "failed"


MAINTENANCE_REPORT_TYPE = "maintenance"


def coerce_website_ids(raw: Any) -> frozenset[int]:
    """Normalize a stored website id field into a set of integers.

    Older rows store a single scalar instead of a list; both shapes load
    into the same set. Non-integer members are dropped.
    """
    if raw is None:
        return frozenset()
    if isinstance(raw, (str, int)) or not isinstance(raw, Iterable):
        raw = [raw]

    ids: set[int] = set()
    for item in raw:
        if isinstance(item, bool):
            continue
        if isinstance(item, int):
            ids.add(item)
        elif isinstance(item, str) and item.isascii() and item.isdigit():
            ids.add(int(item))
    return frozenset(ids)


@dataclass
class MaintenanceReport:
    """A report covering one or more websites, owned by a single user.

    ``stored_data`` is the partial payload written when the report was
    generated; its shape is not fixed and it is read defensively.
    """

    id: int
    owner_user_id: int
    title: str
    website_ids: frozenset[int]
    status: str = ReportStatus.DRAFT.value
    report_type: str = MAINTENANCE_REPORT_TYPE
    client_id: int | None = None
    date_from: datetime | None = None
    date_to: datetime | None = None
    created_at: datetime | None = None
    generated_at: datetime | None = None
    stored_data: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.website_ids = coerce_website_ids(self.website_ids)
        if not isinstance(self.stored_data, dict):
            self.stored_data = {}

    def covers(self, website_id: int) -> bool:
        """True when the report's website set includes ``website_id``."""
        return website_id in self.website_ids
