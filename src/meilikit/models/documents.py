from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, List, Optional, TypeVar

from meilikit.models.base import MeiliModel
from meilikit.query import as_string_list, check_non_negative, render_query

T = TypeVar("T")


@dataclass(slots=True)
class DocumentsQuery:
    """Paging and projection for ``GET /indexes/{uid}/documents``.

    Attributes
    ----------
    limit: int | None
        Maximum number of documents to return.
    offset: int | None
        Number of documents to skip.
    fields: list[str] | None
        Attributes to include in each returned document. An empty list is sent
        as ``fields=`` rather than omitted.
    """

    limit: Optional[int] = None
    offset: Optional[int] = None
    fields: Optional[List[str]] = None

    def __post_init__(self) -> None:
        check_non_negative("limit", self.limit)
        check_non_negative("offset", self.offset)
        self.fields = as_string_list("fields", self.fields)

    def to_query(self) -> str:
        return render_query(
            [("fields", self.fields), ("limit", self.limit), ("offset", self.offset)]
        )


class DocumentsResults(MeiliModel, Generic[T]):
    """One page of documents."""

    results: List[T]
    offset: int
    limit: int
    total: int
