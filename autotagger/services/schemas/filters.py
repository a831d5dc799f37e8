from __future__ import annotations

from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from autotagger.domain.enums import CriterionModifier, PerPage


# ---------- Criteria ----------

class StringCriterionInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: str = ""
    modifier: CriterionModifier = CriterionModifier.EQUALS

    def as_wire(self) -> Dict[str, Any]:
        return {"Value": self.value, "Modifier": self.modifier.value}


# ---------- Media filters ----------

class MediaFilter(BaseModel):
    """
    Filter over one media kind. Unset fields do not constrain the query.

    Only fields that were explicitly set count as caller overrides when
    merged into a generated filter (see `merged_with`).
    """
    model_config = ConfigDict(frozen=True)

    organized: Optional[bool] = None
    path: Optional[StringCriterionInput] = None
    title: Optional[StringCriterionInput] = None

    def merged_with(self, overrides: Optional["MediaFilter"]) -> "MediaFilter":
        """Copy of self where every field explicitly set on `overrides` wins."""
        if overrides is None:
            return self
        update = {name: getattr(overrides, name) for name in overrides.model_fields_set}
        return self.model_copy(update=update)

    def as_wire(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        if self.organized is not None:
            out["Organized"] = self.organized
        if self.path is not None:
            out["Path"] = self.path.as_wire()
        if self.title is not None:
            out["Title"] = self.title.as_wire()
        return out


class SceneFilter(MediaFilter):
    pass


class ImageFilter(MediaFilter):
    pass


class GalleryFilter(MediaFilter):
    pass


# ---------- Pagination ----------

class FindFilter(BaseModel):
    model_config = ConfigDict(frozen=True)

    page: int = Field(1, ge=1)
    per_page: Union[PerPage, int] = Field(25, description="Page size, or PerPage.ALL for everything")
    sort: Optional[str] = None
    direction: str = Field("asc", pattern="^(asc|desc)$")

    @property
    def is_all(self) -> bool:
        return self.per_page == PerPage.ALL

    def as_wire(self) -> Dict[str, Any]:
        per_page = self.per_page.value if isinstance(self.per_page, PerPage) else self.per_page
        return {"PerPage": per_page}


def find_all() -> FindFilter:
    return FindFilter(per_page=PerPage.ALL)
