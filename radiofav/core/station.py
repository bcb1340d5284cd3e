from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class FavoriteStation:
    """
    One saved station.

    Fields are passed through untouched so that anything another client
    wrote into a list file survives a load/save cycle.
    """

    fields: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def create(cls, frequency: int | None, title: str = "", **extra: Any) -> "FavoriteStation":
        data = dict(extra)
        data["frequency"] = frequency
        data["title"] = title
        return cls(data)

    @classmethod
    def from_json(cls, obj: dict[str, Any]) -> "FavoriteStation":
        return cls(dict(obj))

    def to_json(self) -> dict[str, Any]:
        return dict(self.fields)

    @property
    def frequency(self) -> int | None:
        value = self.fields.get("frequency")
        try:
            return int(value) if value is not None else None
        except (TypeError, ValueError):
            return None

    @property
    def title(self) -> str:
        return str(self.fields.get("title") or "")

    def label(self) -> str:
        freq = self.frequency
        if freq is None:
            return self.title or "Unknown"
        mhz = f"{freq / 1000:.1f} MHz"
        return f"{mhz}  {self.title}" if self.title else mhz
