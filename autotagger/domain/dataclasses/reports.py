# autotagger/domain/dataclasses/reports.py
from __future__ import annotations

from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import Any, Dict, Optional


@dataclass
class BaseReport:
    """Common report base:
    - timing: started_at / finished_at
    - helpers: start(), stop(), as_dict()
    """
    started_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None

    def start(self) -> None:
        if self.started_at is None:
            self.started_at = datetime.now()

    def stop(self) -> None:
        self.finished_at = datetime.now()

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class AutoTagReport(BaseReport):
    """Outcome of a fully successful auto-tag run for one entity."""
    entity_kind: str = ""
    entity_id: Optional[int] = None
    entity_name: str = ""
    skipped: bool = False          # entity flagged ignore_auto_tag
    # media kind -> items updated
    updated: Dict[str, int] = field(default_factory=dict)

    @property
    def total_updated(self) -> int:
        return sum(self.updated.values())
