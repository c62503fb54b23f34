"""
Domain layer for gitdigger.

Contains pure domain objects with no I/O or side effects:
- RepositoryIdentity: normalized (host, owner, repo) triple
- Forge: known hosting domain and its kind
- SyncResult: outcome of one mirror synchronization
"""

from .identity import (
    ForgeKind,
    Forge,
    RepositoryIdentity,
    MirrorLocation,
    BUILTIN_FORGES,
    GITHUB,
    GITLAB,
    SALSA,
)
from .operation import SyncStatus, SyncAction, SyncResult

__all__ = [
    'ForgeKind',
    'Forge',
    'RepositoryIdentity',
    'MirrorLocation',
    'BUILTIN_FORGES',
    'GITHUB',
    'GITLAB',
    'SALSA',
    'SyncStatus',
    'SyncAction',
    'SyncResult',
]
