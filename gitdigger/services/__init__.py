"""
Service layer for gitdigger.

Services orchestrate domain objects and infrastructure:
- MirrorService: clone or pull one repository mirror
"""

from .mirror_service import MirrorService, synchronize

__all__ = [
    'MirrorService',
    'synchronize',
]
