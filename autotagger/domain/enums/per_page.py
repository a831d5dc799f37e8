from __future__ import annotations
from enum import StrEnum

class PerPage(StrEnum):
    """Tagged pagination values. ALL asks for the complete result set."""
    ALL = "ALL"
