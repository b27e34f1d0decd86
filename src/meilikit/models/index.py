from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from meilikit.models.base import MeiliModel, Timestamp
from meilikit.query import check_non_negative, render_query


class Index(MeiliModel):
    """A named collection of documents, comparable to a table in SQL."""

    uid: str
    primary_key: Optional[str] = None
    created_at: Optional[Timestamp] = None
    updated_at: Optional[Timestamp] = None


class IndexesResults(MeiliModel):
    results: List[Index]
    offset: int
    limit: int
    total: int


@dataclass(slots=True)
class IndexesQuery:
    """Paging for ``GET /indexes``."""

    limit: Optional[int] = None
    offset: Optional[int] = None

    def __post_init__(self) -> None:
        check_non_negative("limit", self.limit)
        check_non_negative("offset", self.offset)

    def to_query(self) -> str:
        return render_query([("limit", self.limit), ("offset", self.offset)])
