"""Named outcomes of article writes.

A write that touches no rows means something different for each statement:
an insert that produced no id, an update whose values were already stored,
or a delete that lost a race with another request.  Each gets its own member.
"""

from dataclasses import dataclass
from enum import Enum


class WriteOutcome(str, Enum):
    CREATED = "created"
    NOT_INSERTED = "not_inserted"
    UPDATED = "updated"
    UNCHANGED = "unchanged"
    DELETED = "deleted"
    ALREADY_DELETED = "already_deleted"


@dataclass(frozen=True)
class WriteResult:
    outcome: WriteOutcome
    article_id: int
    rows_affected: int = 0
