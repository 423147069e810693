# models.py
from __future__ import annotations

import datetime as _dt
from dataclasses import dataclass, field
from typing import Any, Union


def parse_date(value: Any) -> _dt.date:
    # accepts "2025-10-01" and browser-style "2025-10-01T00:00:00.000Z"
    return _dt.date.fromisoformat(str(value)[:10])


@dataclass
class Entry:
    id: int
    title: str
    date: _dt.date

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "title": self.title, "date": self.date.isoformat()}

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "Entry":
        id_, title = raw["id"], raw["title"]
        if not isinstance(id_, int) or isinstance(id_, bool):
            raise TypeError(f"entry id must be an integer, got {id_!r}")
        if not isinstance(title, str):
            raise TypeError(f"entry title must be a string, got {title!r}")
        return cls(id=id_, title=title, date=parse_date(raw["date"]))


@dataclass
class Draft:
    title: str = ""
    date: _dt.date | None = field(default_factory=_dt.date.today)


# -------------------------------
# Delete confirmation state
# -------------------------------

@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class ConfirmPending:
    index: int


DeleteState = Union[Idle, ConfirmPending]
