# autotagger/services/autotag/matcher.py
from __future__ import annotations

from typing import List, Optional, Type

from autotagger.common.concurrency.cancel import CancelToken
from autotagger.common.logging import get_logger
from autotagger.domain.enums import CriterionModifier
from autotagger.domain.errors import QueryError
from autotagger.domain.policies.path_pattern import path_matches
from autotagger.domain.ports.media_repo import MediaReaderPort
from autotagger.services.schemas.filters import MediaFilter, StringCriterionInput, find_all

logger = get_logger(__name__)


def match_filter(
    pattern: str,
    extra_filter: Optional[MediaFilter] = None,
    *,
    filter_cls: Type[MediaFilter] = MediaFilter,
) -> MediaFilter:
    """
    Filter selecting un-organized items whose path matches `pattern`.
    Fields explicitly set on `extra_filter` override the generated ones.
    """
    generated = filter_cls(
        organized=False,
        path=StringCriterionInput(value=pattern, modifier=CriterionModifier.MATCHES_REGEX),
    )
    return generated.merged_with(extra_filter)


def match_media(
    ctx: CancelToken,
    pattern: str,
    extra_filter: Optional[MediaFilter],
    reader: MediaReaderPort,
    *,
    filter_cls: Type[MediaFilter] = MediaFilter,
) -> List:
    """
    Run exactly one query for every item matching `pattern`.
    The repository materializes the whole result (PerPage.ALL); no paging here.
    Returns only un-organized items whose path really matches, in query order.
    """
    ctx.raise_if_cancelled()

    media_filter = match_filter(pattern, extra_filter, filter_cls=filter_cls)
    try:
        result = reader.query(media_filter, find_all())
    except QueryError:
        raise
    except Exception as ex:
        raise QueryError(f"media query failed for pattern {pattern!r}: {ex}") from ex

    # every returned item must also match locally; organized items never pass
    matched = [it for it in result.items if not it.organized and path_matches(pattern, it.path)]
    if len(matched) != len(result.items):
        logger.debug("dropped %d of %d queried item(s) on local re-check", len(result.items) - len(matched), len(result.items))
    return matched
