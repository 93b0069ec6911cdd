# Data models for MIME parts

from .header_field import HeaderField
from .part import Part

__all__ = [
    "HeaderField",
    "Part",
]
