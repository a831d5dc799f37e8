from __future__ import annotations

from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from autotagger.database.models import (
    Performer as DBPerformer,
    Studio as DBStudio,
    Tag as DBTag,
)
from autotagger.database.repos._mapping import to_domain_performer, to_domain_studio, to_domain_tag
from autotagger.domain.entities.named_entity import NamedEntity, Performer, Studio, Tag
from autotagger.domain.enums import EntityKind


class SqlAlchemyEntityRepo:
    """Read-only lookups of performers, tags and studios as domain entities."""

    def __init__(self, session: Session) -> None:
        self.db = session

    def get_performer(self, performer_id: int) -> Optional[Performer]:
        row = self.db.get(DBPerformer, performer_id)
        return to_domain_performer(row) if row else None

    def get_studio(self, studio_id: int) -> Optional[Studio]:
        row = self.db.get(DBStudio, studio_id)
        return to_domain_studio(row) if row else None

    def get_tag(self, tag_id: int) -> Optional[Tag]:
        row = self.db.get(DBTag, tag_id)
        return to_domain_tag(row) if row else None

    def get(self, kind: EntityKind, entity_id: int) -> Optional[NamedEntity]:
        kind = EntityKind(kind)
        if kind == EntityKind.performer:
            return self.get_performer(entity_id)
        if kind == EntityKind.studio:
            return self.get_studio(entity_id)
        return self.get_tag(entity_id)

    def list_auto_taggable(self, kind: EntityKind) -> List[NamedEntity]:
        """Entities of `kind` not flagged ignore_auto_tag, ordered by name."""
        kind = EntityKind(kind)
        model, mapper = {
            EntityKind.performer: (DBPerformer, to_domain_performer),
            EntityKind.studio: (DBStudio, to_domain_studio),
            EntityKind.tag: (DBTag, to_domain_tag),
        }[kind]
        stmt = (
            select(model)
            .where(model.ignore_auto_tag.is_(False))
            .order_by(func.lower(model.name).asc())
        )
        return [mapper(r) for r in self.db.execute(stmt).scalars().all()]
