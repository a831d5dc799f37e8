from __future__ import annotations
from enum import StrEnum

class CriterionModifier(StrEnum):
    EQUALS = "EQUALS"
    NOT_EQUALS = "NOT_EQUALS"
    INCLUDES = "INCLUDES"
    EXCLUDES = "EXCLUDES"
    MATCHES_REGEX = "MATCHES_REGEX"
    NOT_MATCHES_REGEX = "NOT_MATCHES_REGEX"
    IS_NULL = "IS_NULL"
    NOT_NULL = "NOT_NULL"
