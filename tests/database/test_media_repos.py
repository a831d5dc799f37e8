# tests/database/test_media_repos.py
from __future__ import annotations

import pytest
from sqlalchemy import func, select

from autotagger.database.models import (
    Gallery as DBGallery,
    Image as DBImage,
    Performer as DBPerformer,
    Scene as DBScene,
    Studio as DBStudio,
    Tag as DBTag,
    scenes_performers,
)
from autotagger.database.repos.media_repo import (
    SqlAlchemyGalleryRepo,
    SqlAlchemyImageRepo,
    SqlAlchemySceneRepo,
)
from autotagger.domain.entities.media_item import Gallery, Image, Scene
from autotagger.domain.enums import CriterionModifier, PerPage, RelationshipUpdateMode
from autotagger.domain.policies.path_pattern import build_path_pattern
from autotagger.services.schemas.filters import FindFilter, SceneFilter, StringCriterionInput, find_all
from autotagger.services.schemas.partials import ImagePartial, ScenePartial, UpdateIDs


def _seed_entities(db):
    db.add_all([
        DBPerformer(id=2, name="performer name"),
        DBPerformer(id=3, name="other performer"),
        DBTag(id=10, name="beach"),
        DBStudio(id=20, name="studio x"),
    ])
    db.flush()


def _mk_scenes(db, *specs):
    rows = [DBScene(id=i, path=p, organized=o) for (i, p, o) in specs]
    db.add_all(rows)
    db.flush()
    return rows


def _regex(value: str) -> StringCriterionInput:
    return StringCriterionInput(value=value, modifier=CriterionModifier.MATCHES_REGEX)


def test_query_by_regex_and_organized(db):
    _seed_entities(db)
    _mk_scenes(
        db,
        (1, "performer.name.mp4", False),
        (2, "performer_name.mp4", False),
        (3, "unrelated.mp4", False),
        (4, "PERFORMER NAME.mp4", True),
        (5, "surperformer name.mp4", False),
    )
    repo = SqlAlchemySceneRepo(db)

    pattern = build_path_pattern("performer name", separator="/")
    res = repo.query(SceneFilter(organized=False, path=_regex(pattern)), find_all())

    assert res.count == 2
    assert [s.id for s in res.items] == [1, 2]
    assert all(isinstance(s, Scene) for s in res.items)


def test_query_regex_is_unicode_aware(db):
    _mk_scenes(db, (1, "éana.mp4", False), (2, "x-ana.mp4", False))
    repo = SqlAlchemySceneRepo(db)

    res = repo.query(SceneFilter(path=_regex(build_path_pattern("ana", separator="/"))), find_all())

    assert [s.id for s in res.items] == [2]


def test_query_paginates_unless_all(db):
    _mk_scenes(db, *[(i, f"clip {i}.mp4", False) for i in range(1, 8)])
    repo = SqlAlchemySceneRepo(db)

    page2 = repo.query(SceneFilter(), FindFilter(page=2, per_page=3))
    assert [s.id for s in page2.items] == [4, 5, 6]
    assert page2.count == 7

    everything = repo.query(SceneFilter(), FindFilter(per_page=PerPage.ALL))
    assert [s.id for s in everything.items] == list(range(1, 8))


def test_query_sort_desc_by_path(db):
    _mk_scenes(db, (1, "a.mp4", False), (2, "c.mp4", False), (3, "b.mp4", False))
    repo = SqlAlchemySceneRepo(db)

    res = repo.query(None, FindFilter(per_page=PerPage.ALL, sort="path", direction="desc"))

    assert [s.path for s in res.items] == ["c.mp4", "b.mp4", "a.mp4"]


@pytest.mark.parametrize(
    "modifier, value, expected",
    [
        (CriterionModifier.EQUALS, "b/clip.mp4", [2]),
        (CriterionModifier.NOT_EQUALS, "b/clip.mp4", [1, 3]),
        (CriterionModifier.INCLUDES, "100%", [3]),
        (CriterionModifier.EXCLUDES, "clip", [3]),
        (CriterionModifier.NOT_MATCHES_REGEX, r"^a/", [2, 3]),
    ],
)
def test_string_criteria(db, modifier, value, expected):
    _mk_scenes(db, (1, "a/clip.mp4", False), (2, "b/clip.mp4", False), (3, "c/100%.mp4", False))
    repo = SqlAlchemySceneRepo(db)

    res = repo.query(SceneFilter(path=StringCriterionInput(value=value, modifier=modifier)), find_all())

    assert [s.id for s in res.items] == expected


def test_title_is_null_criterion(db):
    db.add_all([DBScene(id=1, path="a.mp4", title=None), DBScene(id=2, path="b.mp4", title="B")])
    db.flush()
    repo = SqlAlchemySceneRepo(db)

    nulls = repo.query(SceneFilter(title=StringCriterionInput(modifier=CriterionModifier.IS_NULL)), find_all())
    not_nulls = repo.query(SceneFilter(title=StringCriterionInput(modifier=CriterionModifier.NOT_NULL)), find_all())

    assert [s.id for s in nulls.items] == [1]
    assert [s.id for s in not_nulls.items] == [2]


def test_update_partial_add_is_idempotent(db):
    _seed_entities(db)
    _mk_scenes(db, (1, "performer name.mp4", False))
    repo = SqlAlchemySceneRepo(db)
    add = ScenePartial(performer_ids=UpdateIDs(ids=[2], mode=RelationshipUpdateMode.ADD))

    first = repo.update_partial(1, add)
    second = repo.update_partial(1, add)

    assert first.performer_ids == {2}
    assert second.performer_ids == {2}
    n_links = db.execute(
        select(func.count()).select_from(scenes_performers).where(scenes_performers.c.scene_id == 1)
    ).scalar_one()
    assert n_links == 1


def test_update_partial_add_keeps_existing_ids(db):
    _seed_entities(db)
    _mk_scenes(db, (1, "x.mp4", False))
    repo = SqlAlchemySceneRepo(db)
    repo.update_partial(1, ScenePartial(performer_ids=UpdateIDs(ids=[3], mode=RelationshipUpdateMode.SET)))

    out = repo.update_partial(1, ScenePartial(performer_ids=UpdateIDs(ids=[2], mode=RelationshipUpdateMode.ADD)))

    assert out.performer_ids == {2, 3}
    assert out.tag_ids == set()


def test_update_partial_remove_and_set(db):
    _seed_entities(db)
    _mk_scenes(db, (1, "x.mp4", False))
    repo = SqlAlchemySceneRepo(db)

    repo.update_partial(1, ScenePartial(performer_ids=UpdateIDs(ids=[2, 3], mode=RelationshipUpdateMode.ADD)))
    out = repo.update_partial(1, ScenePartial(performer_ids=UpdateIDs(ids=[3], mode=RelationshipUpdateMode.REMOVE)))
    assert out.performer_ids == {2}

    out = repo.update_partial(
        1,
        ScenePartial(
            performer_ids=UpdateIDs(ids=[3], mode=RelationshipUpdateMode.SET),
            tag_ids=UpdateIDs(ids=[10], mode=RelationshipUpdateMode.ADD),
        ),
    )
    assert out.performer_ids == {3}
    assert out.tag_ids == {10}


def test_update_partial_unknown_item_raises(db):
    repo = SqlAlchemySceneRepo(db)

    with pytest.raises(ValueError):
        repo.update_partial(999, ScenePartial(tag_ids=UpdateIDs(ids=[1], mode=RelationshipUpdateMode.ADD)))


def test_failed_update_does_not_break_the_session(db):
    _seed_entities(db)
    _mk_scenes(db, (1, "x.mp4", False))
    repo = SqlAlchemySceneRepo(db)

    with pytest.raises(ValueError):
        repo.update_partial(999, ScenePartial(tag_ids=UpdateIDs(ids=[10], mode=RelationshipUpdateMode.ADD)))

    out = repo.update_partial(1, ScenePartial(tag_ids=UpdateIDs(ids=[10], mode=RelationshipUpdateMode.ADD)))
    assert out.tag_ids == {10}


def test_image_and_gallery_repos_return_their_own_types(db):
    _seed_entities(db)
    db.add_all([DBImage(id=1, path="studio x/01.jpg"), DBGallery(id=1, path="studio x/set")])
    db.flush()

    img = SqlAlchemyImageRepo(db).update_partial(
        1, ImagePartial(studio_ids=UpdateIDs(ids=[20], mode=RelationshipUpdateMode.ADD))
    )
    gal = SqlAlchemyGalleryRepo(db).query(None, find_all()).items[0]

    assert isinstance(img, Image) and img.studio_ids == {20}
    assert isinstance(gal, Gallery) and gal.studio_ids == set()
