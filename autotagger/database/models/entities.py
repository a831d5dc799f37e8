# autotagger/database/models/entities.py
from __future__ import annotations

from typing import List

from sqlalchemy import Boolean, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from autotagger.database.core.main import Base


class Performer(Base):
    __tablename__ = "performers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    ignore_auto_tag: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    def __repr__(self) -> str:
        return f"<Performer id={self.id} name={self.name!r}>"


class Studio(Base):
    __tablename__ = "studios"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    ignore_auto_tag: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    def __repr__(self) -> str:
        return f"<Studio id={self.id} name={self.name!r}>"


class Tag(Base):
    __tablename__ = "tags"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    ignore_auto_tag: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    aliases: Mapped[List["TagAlias"]] = relationship(
        back_populates="tag", cascade="all, delete-orphan", lazy="selectin", order_by="TagAlias.alias"
    )

    def __repr__(self) -> str:
        return f"<Tag id={self.id} name={self.name!r}>"


class TagAlias(Base):
    __tablename__ = "tag_aliases"
    __table_args__ = (UniqueConstraint("tag_id", "alias", name="uq_tag_aliases_tag_alias"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    tag_id: Mapped[int] = mapped_column(ForeignKey("tags.id", ondelete="CASCADE"), nullable=False)
    alias: Mapped[str] = mapped_column(String(255), nullable=False)

    tag: Mapped[Tag] = relationship(back_populates="aliases")
