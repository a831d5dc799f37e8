from typing import List


def csv_to_list(v: str | List[str] | None, *, lower: bool = False) -> List[str]:
    """Split "a, b,,c" (or clean a list) into non-empty trimmed items."""
    if v is None:
        return []
    raw = v if isinstance(v, list) else str(v).split(",")
    out = [str(s).strip() for s in raw if s is not None and str(s).strip()]
    return [s.lower() for s in out] if lower else out
