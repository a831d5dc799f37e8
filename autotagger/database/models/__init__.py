# autotagger/database/models/__init__.py

from autotagger.database.models.entities import (
    Performer,
    Studio,
    Tag,
    TagAlias,
)
from autotagger.database.models.media import (
    Base,
    Scene,
    Image,
    Gallery,
    scenes_performers,
    scenes_tags,
    scenes_studios,
    images_performers,
    images_tags,
    images_studios,
    galleries_performers,
    galleries_tags,
    galleries_studios,
)

__all__ = [
    "Base",
    "Performer",
    "Studio",
    "Tag",
    "TagAlias",
    "Scene",
    "Image",
    "Gallery",
    "scenes_performers",
    "scenes_tags",
    "scenes_studios",
    "images_performers",
    "images_tags",
    "images_studios",
    "galleries_performers",
    "galleries_tags",
    "galleries_studios",
]
