# autotagger/services/autotag/tagger.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Type

from autotagger.common.concurrency.cancel import CancelToken
from autotagger.common.logging import get_logger
from autotagger.common.settings import get_settings
from autotagger.domain.entities.named_entity import NamedEntity
from autotagger.domain.enums import EntityKind, MediaKind
from autotagger.domain.policies.path_pattern import build_alias_pattern, build_path_pattern
from autotagger.domain.ports.media_repo import MediaReaderPort, MediaWriterPort
from autotagger.services.autotag.matcher import match_media
from autotagger.services.autotag.updater import apply_association
from autotagger.services.schemas.filters import GalleryFilter, ImageFilter, MediaFilter, SceneFilter
from autotagger.services.schemas.partials import GalleryPartial, ImagePartial, MediaPartial, ScenePartial

logger = get_logger(__name__)

_FILTERS: dict[MediaKind, Type[MediaFilter]] = {
    MediaKind.scene: SceneFilter,
    MediaKind.image: ImageFilter,
    MediaKind.gallery: GalleryFilter,
}

_PARTIALS: dict[MediaKind, Type[MediaPartial]] = {
    MediaKind.scene: ScenePartial,
    MediaKind.image: ImagePartial,
    MediaKind.gallery: GalleryPartial,
}


@dataclass(frozen=True)
class AutoTagger:
    """
    Path-based auto-tagging of one entity kind onto one media kind.

    Stateless; every `run` is a self-contained batch:
    build pattern -> one query -> one ADD update per matched item.
    """
    media_kind: MediaKind
    entity_kind: EntityKind

    @property
    def filter_cls(self) -> Type[MediaFilter]:
        return _FILTERS[self.media_kind]

    @property
    def partial_cls(self) -> Type[MediaPartial]:
        return _PARTIALS[self.media_kind]

    def pattern_for(self, entity: NamedEntity) -> str:
        autotag_cfg = get_settings().autotag
        separator = autotag_cfg.path_separator
        if self.entity_kind == EntityKind.tag and autotag_cfg.include_aliases:
            return build_alias_pattern(entity.match_names(), separator=separator)
        return build_path_pattern(entity.name, separator=separator)

    def run(
        self,
        ctx: CancelToken,
        entity: NamedEntity,
        extra_filter: Optional[MediaFilter],
        reader: MediaReaderPort,
        writer: Optional[MediaWriterPort] = None,
    ) -> int:
        """
        Tag every matching, un-organized item with `entity`.
        Returns the number of items updated; raises QueryError, UpdateError
        or AutoTagCancelled on the first failure.
        """
        if entity.ignore_auto_tag:
            logger.debug("skipping %s %s (%r): ignore_auto_tag", self.entity_kind, entity.id, entity.name)
            return 0

        writer = writer if writer is not None else reader  # type: ignore[assignment]

        pattern = self.pattern_for(entity)
        items = match_media(ctx, pattern, extra_filter, reader, filter_cls=self.filter_cls)
        logger.info(
            "auto-tag %s %s (%r): %d matching %s item(s)",
            self.entity_kind, entity.id, entity.name, len(items), self.media_kind,
        )

        return apply_association(
            ctx,
            items,
            entity.id,
            writer,  # type: ignore[arg-type]
            entity_kind=self.entity_kind,
            partial_cls=self.partial_cls,
        )


TAGGERS: dict[tuple[EntityKind, MediaKind], AutoTagger] = {
    (ek, mk): AutoTagger(media_kind=mk, entity_kind=ek)
    for ek in EntityKind
    for mk in MediaKind
}


def get_tagger(entity_kind: EntityKind, media_kind: MediaKind) -> AutoTagger:
    return TAGGERS[(EntityKind(entity_kind), MediaKind(media_kind))]


# ---- Named entry points -----------------------------------------------------

def performer_scenes(ctx, performer, extra_filter, reader, writer=None) -> int:
    return TAGGERS[(EntityKind.performer, MediaKind.scene)].run(ctx, performer, extra_filter, reader, writer)


def performer_images(ctx, performer, extra_filter, reader, writer=None) -> int:
    return TAGGERS[(EntityKind.performer, MediaKind.image)].run(ctx, performer, extra_filter, reader, writer)


def performer_galleries(ctx, performer, extra_filter, reader, writer=None) -> int:
    return TAGGERS[(EntityKind.performer, MediaKind.gallery)].run(ctx, performer, extra_filter, reader, writer)


def tag_scenes(ctx, tag, extra_filter, reader, writer=None) -> int:
    return TAGGERS[(EntityKind.tag, MediaKind.scene)].run(ctx, tag, extra_filter, reader, writer)


def tag_images(ctx, tag, extra_filter, reader, writer=None) -> int:
    return TAGGERS[(EntityKind.tag, MediaKind.image)].run(ctx, tag, extra_filter, reader, writer)


def tag_galleries(ctx, tag, extra_filter, reader, writer=None) -> int:
    return TAGGERS[(EntityKind.tag, MediaKind.gallery)].run(ctx, tag, extra_filter, reader, writer)


def studio_scenes(ctx, studio, extra_filter, reader, writer=None) -> int:
    return TAGGERS[(EntityKind.studio, MediaKind.scene)].run(ctx, studio, extra_filter, reader, writer)


def studio_images(ctx, studio, extra_filter, reader, writer=None) -> int:
    return TAGGERS[(EntityKind.studio, MediaKind.image)].run(ctx, studio, extra_filter, reader, writer)


def studio_galleries(ctx, studio, extra_filter, reader, writer=None) -> int:
    return TAGGERS[(EntityKind.studio, MediaKind.gallery)].run(ctx, studio, extra_filter, reader, writer)
