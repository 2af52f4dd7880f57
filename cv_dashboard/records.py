"""Plain CV records handed to the dashboard core.

The search filter and the deletion coordinator never touch ORM rows; the store
converts each row into a frozen ``CVRecord`` when it supplies the collection.
"""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class PersonalInfo:
    full_name: str = ""


@dataclass(frozen=True)
class CVRecord:
    id: int | str
    title: str
    personal_info: PersonalInfo = field(default_factory=PersonalInfo)
    last_modified: datetime | None = None

    @property
    def full_name(self) -> str:
        return self.personal_info.full_name

    @classmethod
    def from_model(cls, cv) -> "CVRecord":
        info = cv.personal_info if isinstance(cv.personal_info, dict) else {}
        full_name = str(info.get("fullName") or "") or cv.full_name or ""
        return cls(
            id=cv.id,
            title=cv.title,
            personal_info=PersonalInfo(full_name=full_name),
            last_modified=cv.last_modified,
        )
