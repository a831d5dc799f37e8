from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from autotagger.domain.enums import RelationshipUpdateMode


class UpdateIDs(BaseModel):
    """How to merge a set of entity IDs into one relation field."""
    model_config = ConfigDict(frozen=True)

    ids: List[int] = Field(default_factory=list)
    mode: RelationshipUpdateMode = RelationshipUpdateMode.SET

    @field_validator("ids", mode="after")
    @classmethod
    def _dedup(cls, v: List[int]) -> List[int]:
        # keep first-seen order
        return list(dict.fromkeys(v))

    def apply(self, current: set[int]) -> set[int]:
        """Resulting relation set after applying this directive to `current`."""
        incoming = set(self.ids)
        if self.mode == RelationshipUpdateMode.ADD:
            return set(current) | incoming
        if self.mode == RelationshipUpdateMode.REMOVE:
            return set(current) - incoming
        return incoming

    def as_wire(self) -> Dict[str, Any]:
        return {"IDs": list(self.ids), "Mode": self.mode.value}


class MediaPartial(BaseModel):
    """Partial update of a media item's relation sets; unset fields are untouched."""
    model_config = ConfigDict(frozen=True)

    performer_ids: Optional[UpdateIDs] = None
    tag_ids: Optional[UpdateIDs] = None
    studio_ids: Optional[UpdateIDs] = None

    def relation_updates(self) -> Dict[str, UpdateIDs]:
        return {
            name: getattr(self, name)
            for name in ("performer_ids", "tag_ids", "studio_ids")
            if getattr(self, name) is not None
        }

    def as_wire(self) -> Dict[str, Any]:
        wire_names = {"performer_ids": "PerformerIDs", "tag_ids": "TagIDs", "studio_ids": "StudioIDs"}
        return {wire_names[k]: v.as_wire() for k, v in self.relation_updates().items()}


class ScenePartial(MediaPartial):
    pass


class ImagePartial(MediaPartial):
    pass


class GalleryPartial(MediaPartial):
    pass
