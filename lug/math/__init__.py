"""Math value types for lug."""

from .vec2 import V2

__all__ = [
    "V2",
]
