from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, List, Protocol, TypeVar

from autotagger.domain.entities.media_item import MediaItem
from autotagger.services.schemas.filters import FindFilter, MediaFilter
from autotagger.services.schemas.partials import MediaPartial

ItemT = TypeVar("ItemT", bound=MediaItem)


@dataclass
class QueryResult(Generic[ItemT]):
    items: List[ItemT] = field(default_factory=list)
    count: int = 0


class MediaReaderPort(Protocol):
    # find_filter.per_page == PerPage.ALL must return every matching row in one call
    def query(self, media_filter: MediaFilter, find_filter: FindFilter) -> QueryResult: ...


class MediaWriterPort(Protocol):
    # the read-merge-write of the relation set must be atomic per item
    def update_partial(self, item_id: int, partial: MediaPartial) -> MediaItem: ...


class MediaReaderWriterPort(MediaReaderPort, MediaWriterPort, Protocol):
    pass
