# autotagger/database/models/media.py
from __future__ import annotations

from typing import Optional

from sqlalchemy import Boolean, Column, ForeignKey, Integer, Table, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from autotagger.database.core.main import Base


def _link_table(name: str, item_col: str, item_table: str, entity_col: str, entity_table: str) -> Table:
    """Association table (item, entity) with a composite primary key, so a pair is stored once."""
    return Table(
        name,
        Base.metadata,
        Column(item_col, Integer, ForeignKey(f"{item_table}.id", ondelete="CASCADE"), primary_key=True),
        Column(entity_col, Integer, ForeignKey(f"{entity_table}.id", ondelete="CASCADE"), primary_key=True, index=True),
    )


class _MediaColumns:
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    path: Mapped[str] = mapped_column(Text, nullable=False, server_default=text("''"), default="")
    title: Mapped[Optional[str]] = mapped_column(Text)
    # user has finalized metadata by hand; never auto-tagged
    organized: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)


class Scene(_MediaColumns, Base):
    __tablename__ = "scenes"


class Image(_MediaColumns, Base):
    __tablename__ = "images"


class Gallery(_MediaColumns, Base):
    __tablename__ = "galleries"


scenes_performers = _link_table("scenes_performers", "scene_id", "scenes", "performer_id", "performers")
scenes_tags = _link_table("scenes_tags", "scene_id", "scenes", "tag_id", "tags")
scenes_studios = _link_table("scenes_studios", "scene_id", "scenes", "studio_id", "studios")

images_performers = _link_table("images_performers", "image_id", "images", "performer_id", "performers")
images_tags = _link_table("images_tags", "image_id", "images", "tag_id", "tags")
images_studios = _link_table("images_studios", "image_id", "images", "studio_id", "studios")

galleries_performers = _link_table("galleries_performers", "gallery_id", "galleries", "performer_id", "performers")
galleries_tags = _link_table("galleries_tags", "gallery_id", "galleries", "tag_id", "tags")
galleries_studios = _link_table("galleries_studios", "gallery_id", "galleries", "studio_id", "studios")
