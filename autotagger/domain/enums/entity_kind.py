from __future__ import annotations
from enum import StrEnum

class EntityKind(StrEnum):
    performer = "performer"
    tag = "tag"
    studio = "studio"

    @property
    def relation_field(self) -> str:
        """Name of the relation-set attribute on media items / partials."""
        return f"{self.value}_ids"
