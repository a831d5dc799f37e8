from autotagger.domain.enums.media_kind import MediaKind
from autotagger.domain.enums.entity_kind import EntityKind
from autotagger.domain.enums.relationship_update_mode import RelationshipUpdateMode
from autotagger.domain.enums.criterion_modifier import CriterionModifier
from autotagger.domain.enums.per_page import PerPage
__all__ = [
    "MediaKind",
    "EntityKind",
    "RelationshipUpdateMode",
    "CriterionModifier",
    "PerPage",
]
