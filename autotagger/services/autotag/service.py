# autotagger/services/autotag/service.py
from __future__ import annotations

from typing import Dict, Iterable, Optional, Type

from sqlalchemy.orm import Session

from autotagger.common.concurrency.cancel import CancelToken
from autotagger.common.logging import get_logger
from autotagger.common.settings import get_settings
from autotagger.database.repos.entity_repo import SqlAlchemyEntityRepo
from autotagger.database.repos.media_repo import (
    SqlAlchemyGalleryRepo,
    SqlAlchemyImageRepo,
    SqlAlchemyMediaRepo,
    SqlAlchemySceneRepo,
)
from autotagger.domain.dataclasses.reports import AutoTagReport
from autotagger.domain.enums import EntityKind, MediaKind
from autotagger.domain.errors import EntityNotFound
from autotagger.domain.ports.media_repo import MediaReaderWriterPort
from autotagger.services.autotag.tagger import get_tagger
from autotagger.services.schemas.filters import MediaFilter

logger = get_logger(__name__)

REPOS: Dict[MediaKind, Type[SqlAlchemyMediaRepo]] = {
    MediaKind.scene: SqlAlchemySceneRepo,
    MediaKind.image: SqlAlchemyImageRepo,
    MediaKind.gallery: SqlAlchemyGalleryRepo,
}


class AutoTagService:
    """
    On-demand entry point: load one entity from the catalog and auto-tag it
    onto the configured media kinds, in order scene -> image -> gallery.

    Fail-fast like the taggers underneath; the report is only returned when
    every kind succeeded. Commit/rollback is left to whoever owns the session.
    """

    def __init__(self, db: Session):
        self.db = db
        self.cfg = get_settings()
        self.entities = SqlAlchemyEntityRepo(db)

    def _kinds(self, kinds: Optional[Iterable[MediaKind | str]]) -> list[MediaKind]:
        wanted = kinds if kinds is not None else self.cfg.autotag.kind_list
        return [MediaKind(k) for k in wanted]

    def run(
        self,
        entity_kind: EntityKind | str,
        entity_id: int,
        *,
        kinds: Optional[Iterable[MediaKind | str]] = None,
        extra_filter: Optional[MediaFilter] = None,
        ctx: Optional[CancelToken] = None,
    ) -> AutoTagReport:
        entity_kind = EntityKind(entity_kind)
        ctx = ctx or CancelToken()

        entity = self.entities.get(entity_kind, entity_id)
        if entity is None:
            raise EntityNotFound(f"{entity_kind} {entity_id} not found")

        rpt = AutoTagReport(entity_kind=entity_kind.value, entity_id=entity.id, entity_name=entity.name)
        rpt.start()

        if entity.ignore_auto_tag:
            rpt.skipped = True
            rpt.stop()
            return rpt

        for media_kind in self._kinds(kinds):
            repo: MediaReaderWriterPort = REPOS[media_kind](self.db)
            tagger = get_tagger(entity_kind, media_kind)
            rpt.updated[media_kind.value] = tagger.run(ctx, entity, extra_filter, repo, repo)

        rpt.stop()
        logger.info(
            "auto-tag %s %s (%r) finished: %d update(s) %s",
            entity_kind, entity.id, entity.name, rpt.total_updated, rpt.updated,
        )
        return rpt

    def run_performer(self, performer_id: int, **kwargs) -> AutoTagReport:
        return self.run(EntityKind.performer, performer_id, **kwargs)

    def run_tag(self, tag_id: int, **kwargs) -> AutoTagReport:
        return self.run(EntityKind.tag, tag_id, **kwargs)

    def run_studio(self, studio_id: int, **kwargs) -> AutoTagReport:
        return self.run(EntityKind.studio, studio_id, **kwargs)
