from autotagger.services.schemas.filters import (
    StringCriterionInput,
    MediaFilter,
    SceneFilter,
    ImageFilter,
    GalleryFilter,
    FindFilter,
    find_all,
)
from autotagger.services.schemas.partials import (
    UpdateIDs,
    MediaPartial,
    ScenePartial,
    ImagePartial,
    GalleryPartial,
)
__all__ = [
    "StringCriterionInput",
    "MediaFilter",
    "SceneFilter",
    "ImageFilter",
    "GalleryFilter",
    "FindFilter",
    "find_all",
    "UpdateIDs",
    "MediaPartial",
    "ScenePartial",
    "ImagePartial",
    "GalleryPartial",
]
