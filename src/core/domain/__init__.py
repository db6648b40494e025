"""
Domain models and value objects.

Contains the serialized representation of BigInt values.
"""

from src.core.domain.limb_snapshot import UINT32_MAX, LimbSnapshot

__all__ = [
    "UINT32_MAX",
    "LimbSnapshot",
]
