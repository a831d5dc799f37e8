# autotagger/domain/policies/path_pattern.py
from __future__ import annotations

import os
import re
from functools import lru_cache
from typing import Iterable, Optional

import regex

# Characters commonly used in file names in place of a space
SEPARATOR_CHARS = r".\-_ "
SEPARATOR = f"[{SEPARATOR_CHARS}]*"

# Boundary: start/end, underscore, or anything that is not a
# Unicode letter or digit.
LEFT_BOUNDARY = r"(?:^|_|[^\p{L}\d])"
RIGHT_BOUNDARY = r"(?:$|_|[^\p{L}\d])"

CASE_INSENSITIVE = "(?i)"


def _name_body(name: str, separator: str) -> str:
    """
    Escaped, separator-tolerant body for a single name (no boundaries).

    A trailing backslash is a literal file-name character on hosts whose path
    separator is '/', but a directory delimiter where it is '\\', so it is
    dropped there.
    """
    if separator == "\\" and name.endswith("\\"):
        name = name.rstrip("\\")

    tokens = name.split()
    return SEPARATOR.join(re.escape(t) for t in tokens)


def build_path_pattern(name: str, *, separator: str = os.sep) -> str:
    """
    Turn a human-readable name into a case-insensitive regex that finds the
    name inside a file path.

      "performer name"   -> (?i)(?:^|_|[^\\p{L}\\d])performer[.\\-_ ]*name(?:$|_|[^\\p{L}\\d])
      "performer + name" -> ...performer[.\\-_ ]*\\+[.\\-_ ]*name...

    - tokens are split on whitespace and escaped, so regex metacharacters are literals
    - tokens are joined by any run of '.', '-', '_' or ' '
    - the match may not touch a letter or digit on either side
    - the empty name still yields a syntactically valid pattern

    Uses `\\p{L}`, so it must be evaluated by a Unicode-aware engine
    (the `regex` package in this project).
    """
    body = _name_body(name or "", separator)
    return f"{CASE_INSENSITIVE}{LEFT_BOUNDARY}{body}{RIGHT_BOUNDARY}"


def build_alias_pattern(names: Iterable[str], *, separator: str = os.sep) -> str:
    """
    One pattern matching any of `names` (e.g. a tag and its aliases).
    A single usable name gives exactly build_path_pattern(name).
    """
    bodies: list[str] = []
    for n in names:
        if not n or not n.strip():
            continue
        b = _name_body(n, separator)
        if b and b not in bodies:
            bodies.append(b)

    if not bodies:
        return build_path_pattern("", separator=separator)
    if len(bodies) == 1:
        return f"{CASE_INSENSITIVE}{LEFT_BOUNDARY}{bodies[0]}{RIGHT_BOUNDARY}"

    alternation = "|".join(bodies)
    return f"{CASE_INSENSITIVE}{LEFT_BOUNDARY}(?:{alternation}){RIGHT_BOUNDARY}"


@lru_cache(maxsize=256)
def compile_path_pattern(pattern: str) -> regex.Pattern:
    """Compile a pattern from this module (needs `regex` for \\p{L})."""
    return regex.compile(pattern)


def path_matches(pattern: str, path: Optional[str]) -> bool:
    if path is None:
        return False
    return compile_path_pattern(pattern).search(path) is not None
