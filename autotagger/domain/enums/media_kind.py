from __future__ import annotations
from enum import StrEnum

class MediaKind(StrEnum):
    scene = "scene"
    image = "image"
    gallery = "gallery"
