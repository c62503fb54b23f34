"""
Repository identity domain objects for gitdigger.

A RepositoryIdentity names a repository independently of how its URL
was written: host, owner and repo are normalized, so that every link
into the same repository maps to the same mirror directory.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, Any, Tuple, Union

PathLike = Union[str, Path]


class ForgeKind(Enum):
    """Kind of hosting service."""
    GITHUB = "github"
    GITLAB = "gitlab"
    GITLAB_FORGE = "gitlab_forge"  # self-hosted GitLab instance


@dataclass(frozen=True)
class Forge:
    """A known hosting domain and the kind of service it runs."""
    kind: ForgeKind
    domain: str

    @property
    def is_github(self) -> bool:
        return self.kind == ForgeKind.GITHUB

    @property
    def is_gitlab(self) -> bool:
        return self.kind in (ForgeKind.GITLAB, ForgeKind.GITLAB_FORGE)

    @classmethod
    def gitlab_forge(cls, domain: str) -> 'Forge':
        """Create a forge entry for a self-hosted GitLab domain."""
        return cls(ForgeKind.GITLAB_FORGE, domain.strip().lower())

    def __str__(self) -> str:
        return self.domain


GITHUB = Forge(ForgeKind.GITHUB, "github.com")
GITLAB = Forge(ForgeKind.GITLAB, "gitlab.com")
SALSA = Forge.gitlab_forge("salsa.debian.org")

# Declared lookup order
BUILTIN_FORGES: Tuple[Forge, ...] = (GITHUB, GITLAB, SALSA)


@dataclass(frozen=True)
class MirrorLocation:
    """Where the mirror of a repository lives below a root directory."""
    owner_path: Path
    repo_path: Path

    def to_dict(self) -> Dict[str, Any]:
        return {
            'owner_path': str(self.owner_path),
            'repo_path': str(self.repo_path),
        }


@dataclass(frozen=True)
class RepositoryIdentity:
    """
    Normalized (host, owner, repo) triple.

    Instances are created by the resolver. All three parts are required;
    owner and repo are stored lowercase.

    Example:
        identity = resolve("https://github.com/Szabgab/Rust-Digger/tree/main")
        identity.url            # https://github.com/szabgab/rust-digger
        identity.path("/tmp")   # /tmp/github.com/szabgab/rust-digger
    """
    forge: Forge
    owner: str
    repo: str

    def __post_init__(self):
        if not self.forge.domain or not self.owner or not self.repo:
            raise ValueError(
                f"Incomplete repository identity: "
                f"host={self.forge.domain!r} owner={self.owner!r} repo={self.repo!r}"
            )
        if self.owner in (".", "..") or self.repo in (".", ".."):
            raise ValueError(f"Invalid repository identity: {self.owner}/{self.repo}")
        object.__setattr__(self, 'owner', self.owner.lower())
        object.__setattr__(self, 'repo', self.repo.lower())

    @property
    def host(self) -> str:
        return self.forge.domain

    @property
    def is_github(self) -> bool:
        return self.forge.is_github

    @property
    def is_gitlab(self) -> bool:
        return self.forge.is_gitlab

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"

    @property
    def url(self) -> str:
        """Canonical https URL, without trailing slash or subpath."""
        return f"https://{self.host}/{self.owner}/{self.repo}"

    def owner_path(self, root: PathLike) -> Path:
        return Path(root) / self.host / self.owner

    def path(self, root: PathLike) -> Path:
        return self.owner_path(root) / self.repo

    def location(self, root: PathLike) -> MirrorLocation:
        return MirrorLocation(owner_path=self.owner_path(root), repo_path=self.path(root))

    def to_dict(self) -> Dict[str, Any]:
        return {
            'host': self.host,
            'forge': self.forge.kind.value,
            'owner': self.owner,
            'repo': self.repo,
            'url': self.url,
        }

    def __str__(self) -> str:
        return f"{self.host}/{self.owner}/{self.repo}"
