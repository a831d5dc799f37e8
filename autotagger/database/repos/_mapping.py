# autotagger/database/repos/_mapping.py
from __future__ import annotations

from typing import Dict, Set, Type

from autotagger.database.models import (
    Performer as DBPerformer,
    Studio as DBStudio,
    Tag as DBTag,
)
from autotagger.domain.entities.media_item import MediaItem as DomainMediaItem
from autotagger.domain.entities.named_entity import (
    Performer as DomainPerformer,
    Studio as DomainStudio,
    Tag as DomainTag,
)
from autotagger.domain.enums import EntityKind


def to_domain_media_item(
    row,
    domain_cls: Type[DomainMediaItem],
    relations: Dict[EntityKind, Set[int]],
) -> DomainMediaItem:
    return domain_cls(
        id=row.id,
        path=row.path or "",
        title=row.title,
        organized=bool(row.organized),
        performer_ids=relations.get(EntityKind.performer, set()),
        tag_ids=relations.get(EntityKind.tag, set()),
        studio_ids=relations.get(EntityKind.studio, set()),
    )


def to_domain_performer(row: DBPerformer) -> DomainPerformer:
    return DomainPerformer(id=row.id, name=row.name, ignore_auto_tag=bool(row.ignore_auto_tag))


def to_domain_studio(row: DBStudio) -> DomainStudio:
    return DomainStudio(id=row.id, name=row.name, ignore_auto_tag=bool(row.ignore_auto_tag))


def to_domain_tag(row: DBTag) -> DomainTag:
    return DomainTag(
        id=row.id,
        name=row.name,
        ignore_auto_tag=bool(row.ignore_auto_tag),
        aliases=tuple(a.alias for a in row.aliases),
    )
