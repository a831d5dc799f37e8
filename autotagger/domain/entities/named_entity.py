# autotagger/domain/entities/named_entity.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Tuple

from autotagger.domain.enums.entity_kind import EntityKind


@dataclass(frozen=True)
class NamedEntity:
    """
    Anything that can be auto-tagged onto media: it has an ID and a name.
    Kinds differ only in which relation set of a media item they land in.
    """
    kind: ClassVar[EntityKind]

    id: int
    name: str
    # Entities flagged by the user as "never auto-tag"
    ignore_auto_tag: bool = False

    def match_names(self) -> Tuple[str, ...]:
        """Names whose appearance in a path counts as a match."""
        return (self.name,)


@dataclass(frozen=True)
class Performer(NamedEntity):
    kind: ClassVar[EntityKind] = EntityKind.performer


@dataclass(frozen=True)
class Studio(NamedEntity):
    kind: ClassVar[EntityKind] = EntityKind.studio


@dataclass(frozen=True)
class Tag(NamedEntity):
    kind: ClassVar[EntityKind] = EntityKind.tag

    aliases: Tuple[str, ...] = field(default_factory=tuple)

    def match_names(self) -> Tuple[str, ...]:
        return (self.name, *self.aliases)
