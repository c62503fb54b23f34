"""
Synchronization result domain objects for gitdigger.

A SyncResult records what one synchronize call did to one mirror.
Remote-side problems (unreachable host, failed clone or pull) are
reported here instead of being raised.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, Any, Optional

from .identity import RepositoryIdentity


class SyncStatus(Enum):
    """Status of a synchronization attempt."""
    SUCCESS = "success"
    SKIPPED = "skipped"
    FAILED = "failed"


class SyncAction:
    """Action names recorded on SyncResult.action."""
    CLONED = "cloned"
    PULLED = "pulled"
    EXISTS = "exists"
    UNREACHABLE = "unreachable"
    CLONE_FAILED = "clone_failed"
    PULL_FAILED = "pull_failed"


@dataclass
class SyncResult:
    """Outcome of synchronizing one mirror."""
    identity: RepositoryIdentity
    path: Path
    status: SyncStatus
    action: str
    message: Optional[str] = None
    error: Optional[str] = None
    returncode: Optional[int] = None

    @property
    def ok(self) -> bool:
        """True unless the git operation itself failed."""
        return self.status != SyncStatus.FAILED

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result = {
            'url': self.identity.url,
            'host': self.identity.host,
            'owner': self.identity.owner,
            'repo': self.identity.repo,
            'path': str(self.path),
            'status': self.status.value,
            'action': self.action,
        }
        if self.message:
            result['message'] = self.message
        if self.error:
            result['error'] = self.error
        if self.returncode is not None:
            result['returncode'] = self.returncode
        return result
