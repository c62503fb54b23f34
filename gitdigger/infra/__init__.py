"""
Infrastructure layer for gitdigger.

Contains abstractions for external systems:
- GitClient: git clone/pull execution
- ReachabilityProbe: HTTP check of a repository URL

These provide clean interfaces that can be mocked for testing.
"""

from .git_client import GitClient, GitResult
from .http_probe import ReachabilityProbe

__all__ = [
    'GitClient',
    'GitResult',
    'ReachabilityProbe',
]
