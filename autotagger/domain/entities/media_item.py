# autotagger/domain/entities/media_item.py
from __future__ import annotations

from dataclasses import dataclass, asdict, field
from typing import ClassVar, Optional, Set

from autotagger.domain.enums.entity_kind import EntityKind
from autotagger.domain.enums.media_kind import MediaKind


@dataclass
class MediaItem:
    """
    Core domain shape shared by scenes, images and galleries.

    Invariants that we keep here:
      - path is a string (may be empty for path-less galleries)
      - relation sets hold unique entity IDs; order is irrelevant
    `organized` means a user finalized the metadata by hand, so automated
    tagging must leave the item alone.
    """
    kind: ClassVar[MediaKind]

    id: int
    path: str = ""
    title: Optional[str] = None
    organized: bool = False

    performer_ids: Set[int] = field(default_factory=set)
    tag_ids: Set[int] = field(default_factory=set)
    studio_ids: Set[int] = field(default_factory=set)

    def __post_init__(self):
        if self.path is None:
            self.path = ""
        # normalize any iterable into a set
        self.performer_ids = set(self.performer_ids)
        self.tag_ids = set(self.tag_ids)
        self.studio_ids = set(self.studio_ids)

    def related_ids(self, entity_kind: EntityKind) -> Set[int]:
        return getattr(self, entity_kind.relation_field)

    def as_dict(self):
        return asdict(self)


@dataclass
class Scene(MediaItem):
    kind: ClassVar[MediaKind] = MediaKind.scene


@dataclass
class Image(MediaItem):
    kind: ClassVar[MediaKind] = MediaKind.image


@dataclass
class Gallery(MediaItem):
    kind: ClassVar[MediaKind] = MediaKind.gallery
