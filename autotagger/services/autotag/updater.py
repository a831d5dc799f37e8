# autotagger/services/autotag/updater.py
from __future__ import annotations

from typing import Iterable, Type

from autotagger.common.concurrency.cancel import CancelToken
from autotagger.common.logging import get_logger
from autotagger.domain.entities.media_item import MediaItem
from autotagger.domain.enums import EntityKind, RelationshipUpdateMode
from autotagger.domain.errors import UpdateError
from autotagger.domain.ports.media_repo import MediaWriterPort
from autotagger.services.schemas.partials import MediaPartial, UpdateIDs

logger = get_logger(__name__)


def add_partial(entity_kind: EntityKind, entity_id: int, *, partial_cls: Type[MediaPartial] = MediaPartial) -> MediaPartial:
    """Partial that unions `entity_id` into the relation set for `entity_kind`."""
    directive = UpdateIDs(ids=[entity_id], mode=RelationshipUpdateMode.ADD)
    return partial_cls(**{entity_kind.relation_field: directive})


def apply_association(
    ctx: CancelToken,
    items: Iterable[MediaItem],
    entity_id: int,
    writer: MediaWriterPort,
    *,
    entity_kind: EntityKind,
    partial_cls: Type[MediaPartial] = MediaPartial,
) -> int:
    """
    Add `entity_id` to each item's relation set, one update per item, in order.

    Fail-fast: the first failing update raises UpdateError and the rest are
    skipped. Nothing is rolled back; re-running converges since ADD is a union.
    Returns how many items were updated.
    """
    partial = add_partial(entity_kind, entity_id, partial_cls=partial_cls)

    done = 0
    for item in items:
        ctx.raise_if_cancelled()
        try:
            writer.update_partial(item.id, partial)
        except Exception as ex:
            logger.warning(
                "auto-tag update failed for %s %s (%s %s): %s",
                item.kind, item.id, entity_kind, entity_id, ex,
            )
            raise UpdateError(
                f"error updating {item.kind} {item.id} with {entity_kind} {entity_id}: {ex}",
                item_id=item.id,
            ) from ex
        done += 1
    return done
