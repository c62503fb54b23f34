"""
gitdigger - Keep local mirrors of git repositories found on the web.

gitdigger turns any link into a repository (including links to files or
branches inside it) into a normalized identity, and keeps a mirror of
that repository under ROOT/HOST/OWNER/REPO.

Quick Start:
    import gitdigger

    identity = gitdigger.resolve("https://github.com/Szabgab/Rust-Digger/tree/main")
    identity.url            # https://github.com/szabgab/rust-digger
    identity.path("/tmp")   # /tmp/github.com/szabgab/rust-digger

    result = gitdigger.synchronize(identity, "/srv/mirrors")
    print(result.action)    # cloned, pulled, exists, unreachable, ...

Errors:
    ParseFailure - the URL is not on a known forge
    FilesystemPreparationError - the mirror directory cannot be created

Problems with the remote (unreachable, failed clone/pull) are logged and
reported on the returned SyncResult instead of being raised.
"""

__version__ = "0.1.0"

from .domain import (
    ForgeKind,
    Forge,
    RepositoryIdentity,
    MirrorLocation,
    SyncStatus,
    SyncAction,
    SyncResult,
)
from .resolver import IdentityResolver, resolve, to_canonical_url
from .services import MirrorService, synchronize
from .exit_codes import CommandError, ParseFailure, FilesystemPreparationError
from .config import load_config

__all__ = [
    "__version__",
    # Domain objects
    "ForgeKind",
    "Forge",
    "RepositoryIdentity",
    "MirrorLocation",
    "SyncStatus",
    "SyncAction",
    "SyncResult",
    # Resolution
    "IdentityResolver",
    "resolve",
    "to_canonical_url",
    # Synchronization
    "MirrorService",
    "synchronize",
    # Errors
    "CommandError",
    "ParseFailure",
    "FilesystemPreparationError",
    # Configuration
    "load_config",
]
