from __future__ import annotations
from enum import StrEnum

class RelationshipUpdateMode(StrEnum):
    ADD = "ADD"
    REMOVE = "REMOVE"
    SET = "SET"
