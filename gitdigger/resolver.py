"""
Identity resolution for repository URLs.

Turns an arbitrary web link into a RepositoryIdentity. Links to files,
branches or other pages inside a repository resolve to the repository
itself, so they all share one mirror.
"""

import logging
import re
from typing import Iterable, List, Optional, Tuple

from .domain.identity import Forge, RepositoryIdentity, BUILTIN_FORGES
from .exit_codes import ParseFailure

logger = logging.getLogger(__name__)

# scheme, host, owner, repo, then anything (subpath, query, fragment)
URL_PATTERN = r"^https?://({host})/([^/?#]+)/([^/?#]+)(?:[/?#].*)?$"

# Path segments that would escape the {root}/{host}/{owner}/{repo} layout
DOT_SEGMENTS = (".", "..")


def _compile(forge: Forge) -> re.Pattern:
    return re.compile(URL_PATTERN.format(host=re.escape(forge.domain)), re.IGNORECASE)


class IdentityResolver:
    """
    Resolves repository URLs against an ordered list of known forges.

    The built-in forges come first, then any extra GitLab-compatible
    domains in the order given. The first matching pattern wins.

    Example:
        resolver = IdentityResolver(extra_gitlab_domains=["gitlab.gnome.org"])
        identity = resolver.resolve("https://gitlab.gnome.org/GNOME/gtk/-/issues")
        identity.url   # https://gitlab.gnome.org/gnome/gtk
    """

    def __init__(self, extra_gitlab_domains: Iterable[str] = ()):
        forges: List[Forge] = list(BUILTIN_FORGES)
        known = {forge.domain for forge in forges}
        for domain in extra_gitlab_domains:
            forge = Forge.gitlab_forge(domain)
            if forge.domain and forge.domain not in known:
                forges.append(forge)
                known.add(forge.domain)

        self.forges: Tuple[Forge, ...] = tuple(forges)
        self._patterns = [(forge, _compile(forge)) for forge in self.forges]

    @classmethod
    def from_config(cls, config: dict) -> 'IdentityResolver':
        """Build a resolver from the ``forges`` config section."""
        domains = config.get('forges', {}).get('gitlab', []) or []
        if isinstance(domains, str):
            domains = [d.strip() for d in domains.split(',') if d.strip()]
        return cls(extra_gitlab_domains=domains)

    def match(self, url: str) -> Optional[RepositoryIdentity]:
        """Return the identity for url, or None if no forge matches."""
        candidate = url.strip()
        for forge, pattern in self._patterns:
            found = pattern.match(candidate)
            if not found:
                continue

            owner = found.group(2)
            repo = found.group(3)
            if repo.lower().endswith('.git'):
                repo = repo[:-len('.git')]
            if not repo or owner in DOT_SEGMENTS or repo in DOT_SEGMENTS:
                continue

            return RepositoryIdentity(forge=forge, owner=owner, repo=repo)

        return None

    def resolve(self, url: str) -> RepositoryIdentity:
        """
        Resolve url into a RepositoryIdentity.

        Raises:
            ParseFailure: url does not point into a repository on a known forge
        """
        identity = self.match(url) if url else None
        if identity is None:
            logger.warning(f"No match for repo in '{url}'")
            raise ParseFailure(url)
        return identity


_default_resolver = IdentityResolver()


def resolve(url: str, extra_gitlab_domains: Iterable[str] = ()) -> RepositoryIdentity:
    """Resolve url with the built-in forges plus any extra GitLab domains."""
    extra = tuple(extra_gitlab_domains)
    resolver = IdentityResolver(extra) if extra else _default_resolver
    return resolver.resolve(url)


def to_canonical_url(identity: RepositoryIdentity) -> str:
    """Reconstruct https://{host}/{owner}/{repo} for identity."""
    return identity.url
