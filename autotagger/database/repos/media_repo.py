# autotagger/database/repos/media_repo.py
from __future__ import annotations

from typing import ClassVar, Dict, Iterable, List, Optional, Set, Tuple, Type

from sqlalchemy import Table, and_, delete, func, insert, or_, select
from sqlalchemy.orm import Session

from autotagger.common.iter import chunked
from autotagger.common.logging import get_logger
from autotagger.database.core.main import REGEXP_FUNCTION
from autotagger.database.models import (
    Gallery as DBGallery,
    Image as DBImage,
    Scene as DBScene,
    galleries_performers,
    galleries_studios,
    galleries_tags,
    images_performers,
    images_studios,
    images_tags,
    scenes_performers,
    scenes_studios,
    scenes_tags,
)
from autotagger.database.repos._mapping import to_domain_media_item
from autotagger.domain.entities.media_item import (
    Gallery as DomainGallery,
    Image as DomainImage,
    MediaItem as DomainMediaItem,
    Scene as DomainScene,
)
from autotagger.domain.enums import CriterionModifier, EntityKind
from autotagger.domain.ports.media_repo import QueryResult
from autotagger.services.schemas.filters import FindFilter, MediaFilter, StringCriterionInput
from autotagger.services.schemas.partials import MediaPartial

logger = get_logger(__name__)

# keep IN (...) lists under SQLite's bound-parameter limit
_IN_CHUNK = 500

_SORTABLE = ("id", "path", "title")


def string_criterion(column, crit: StringCriterionInput):
    """SQL expression for a string criterion against `column`."""
    m = crit.modifier
    v = crit.value
    if m == CriterionModifier.EQUALS:
        return column == v
    if m == CriterionModifier.NOT_EQUALS:
        return or_(column.is_(None), column != v)
    if m == CriterionModifier.INCLUDES:
        return column.contains(v, autoescape=True)
    if m == CriterionModifier.EXCLUDES:
        return or_(column.is_(None), ~column.contains(v, autoescape=True))
    if m == CriterionModifier.MATCHES_REGEX:
        return getattr(func, REGEXP_FUNCTION)(v, column) == 1
    if m == CriterionModifier.NOT_MATCHES_REGEX:
        return getattr(func, REGEXP_FUNCTION)(v, column) == 0
    if m == CriterionModifier.IS_NULL:
        return or_(column.is_(None), column == "")
    if m == CriterionModifier.NOT_NULL:
        return and_(column.is_not(None), column != "")
    raise ValueError(f"Unsupported criterion modifier: {m}")


class SqlAlchemyMediaRepo:
    """
    Query/update adapter for one media kind. Satisfies MediaReaderPort and
    MediaWriterPort via structural typing; concrete subclasses only pick
    the model, the domain type and the association tables.
    """
    model: ClassVar[type]
    domain_cls: ClassVar[Type[DomainMediaItem]]
    # entity kind -> (association table, item column, entity column)
    links: ClassVar[Dict[EntityKind, Tuple[Table, str, str]]]

    def __init__(self, session: Session) -> None:
        self.db = session

    # -------- Reads --------

    def _where(self, media_filter: Optional[MediaFilter]) -> list:
        clauses: list = []
        if media_filter is None:
            return clauses
        if media_filter.organized is not None:
            clauses.append(self.model.organized == media_filter.organized)
        if media_filter.path is not None:
            clauses.append(string_criterion(self.model.path, media_filter.path))
        if media_filter.title is not None:
            clauses.append(string_criterion(self.model.title, media_filter.title))
        return clauses

    def _order_by(self, find_filter: FindFilter):
        col_name = find_filter.sort if find_filter.sort in _SORTABLE else "id"
        col = getattr(self.model, col_name)
        return col.desc() if find_filter.direction == "desc" else col.asc()

    def query(self, media_filter: Optional[MediaFilter], find_filter: Optional[FindFilter] = None) -> QueryResult:
        """
        Return (items, count) for the filter. PerPage.ALL returns every
        matching row in this single call.
        """
        find_filter = find_filter or FindFilter()
        clauses = self._where(media_filter)

        count_stmt = select(func.count()).select_from(self.model).where(*clauses)
        total = int(self.db.execute(count_stmt).scalar_one())

        stmt = select(self.model).where(*clauses).order_by(self._order_by(find_filter))
        if not find_filter.is_all:
            per_page = int(find_filter.per_page)
            stmt = stmt.offset((find_filter.page - 1) * per_page).limit(per_page)

        rows = self.db.execute(stmt).scalars().all()
        relations = self._relations_for([r.id for r in rows])
        items = [
            to_domain_media_item(r, self.domain_cls, relations.get(r.id, {}))
            for r in rows
        ]
        return QueryResult(items=items, count=total)

    def get(self, item_id: int) -> Optional[DomainMediaItem]:
        row = self.db.get(self.model, item_id)
        if row is None:
            return None
        relations = self._relations_for([row.id])
        return to_domain_media_item(row, self.domain_cls, relations.get(row.id, {}))

    def _linked_ids(self, entity_kind: EntityKind, item_ids: Iterable[int]) -> Dict[int, Set[int]]:
        table, item_col, entity_col = self.links[entity_kind]
        out: Dict[int, Set[int]] = {}
        for chunk in chunked(item_ids, _IN_CHUNK):
            stmt = select(table.c[item_col], table.c[entity_col]).where(table.c[item_col].in_(chunk))
            for item_id, entity_id in self.db.execute(stmt).all():
                out.setdefault(item_id, set()).add(entity_id)
        return out

    def _relations_for(self, item_ids: List[int]) -> Dict[int, Dict[EntityKind, Set[int]]]:
        out: Dict[int, Dict[EntityKind, Set[int]]] = {}
        if not item_ids:
            return out
        for kind in self.links:
            for item_id, ids in self._linked_ids(kind, item_ids).items():
                out.setdefault(item_id, {})[kind] = ids
        return out

    # -------- Writes --------

    def update_partial(self, item_id: int, partial: MediaPartial) -> DomainMediaItem:
        """
        Apply relation directives to one item inside a SAVEPOINT, so the
        read-merge-write of each relation set is all-or-nothing.
        Raises ValueError if the item does not exist.
        """
        with self.db.begin_nested():
            row = self.db.get(self.model, item_id)
            if row is None:
                raise ValueError(f"{self.domain_cls.kind} {item_id} not found")

            for field_name, directive in partial.relation_updates().items():
                entity_kind = EntityKind(field_name.removesuffix("_ids"))
                table, item_col, entity_col = self.links[entity_kind]

                current = self._linked_ids(entity_kind, [item_id]).get(item_id, set())
                target = directive.apply(current)

                to_remove = current - target
                to_add = target - current
                logger.debug(
                    "%s %s %s: +%s -%s",
                    self.domain_cls.kind, item_id, field_name, sorted(to_add), sorted(to_remove),
                )
                if to_remove:
                    self.db.execute(
                        delete(table).where(
                            table.c[item_col] == item_id,
                            table.c[entity_col].in_(sorted(to_remove)),
                        )
                    )
                if to_add:
                    self.db.execute(
                        insert(table),
                        [{item_col: item_id, entity_col: eid} for eid in sorted(to_add)],
                    )

        return self.get(item_id)  # type: ignore[return-value]


class SqlAlchemySceneRepo(SqlAlchemyMediaRepo):
    model = DBScene
    domain_cls = DomainScene
    links = {
        EntityKind.performer: (scenes_performers, "scene_id", "performer_id"),
        EntityKind.tag: (scenes_tags, "scene_id", "tag_id"),
        EntityKind.studio: (scenes_studios, "scene_id", "studio_id"),
    }


class SqlAlchemyImageRepo(SqlAlchemyMediaRepo):
    model = DBImage
    domain_cls = DomainImage
    links = {
        EntityKind.performer: (images_performers, "image_id", "performer_id"),
        EntityKind.tag: (images_tags, "image_id", "tag_id"),
        EntityKind.studio: (images_studios, "image_id", "studio_id"),
    }


class SqlAlchemyGalleryRepo(SqlAlchemyMediaRepo):
    model = DBGallery
    domain_cls = DomainGallery
    links = {
        EntityKind.performer: (galleries_performers, "gallery_id", "performer_id"),
        EntityKind.tag: (galleries_tags, "gallery_id", "tag_id"),
        EntityKind.studio: (galleries_studios, "gallery_id", "studio_id"),
    }
