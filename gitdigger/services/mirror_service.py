"""
Mirror synchronization service for gitdigger.

Keeps {root}/{host}/{owner}/{repo} in step with the remote repository:
clone when the directory is missing, pull when it is present.

Only a root directory that cannot be prepared is an error for the
caller. Everything that depends on the remote (unreachable host,
failed clone or pull, missing git binary) is logged and reported in
the returned SyncResult, so a batch of mirrors keeps going.
"""

import logging
from pathlib import Path
from typing import Dict, Any, Optional

from ..config import load_config
from ..domain.identity import RepositoryIdentity, PathLike
from ..domain.operation import SyncResult, SyncStatus, SyncAction
from ..exit_codes import FilesystemPreparationError
from ..infra.git_client import GitClient, GitResult
from ..infra.http_probe import ReachabilityProbe

logger = logging.getLogger(__name__)


class MirrorService:
    """
    Service for creating and refreshing local repository mirrors.

    Example:
        service = MirrorService()
        identity = resolve("https://github.com/szabgab/rust-digger")
        result = service.synchronize(identity, "/srv/mirrors")
        print(result.action)  # "cloned" on the first run, "pulled" afterwards
    """

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        git_client: Optional[GitClient] = None,
        probe: Optional[ReachabilityProbe] = None
    ):
        """
        Initialize MirrorService.

        Args:
            config: Configuration dict (loads default if None)
            git_client: GitClient instance (created from config if None)
            probe: ReachabilityProbe instance (created from config if None)
        """
        self.config = config if config is not None else load_config()
        git_config = self.config.get('git', {})
        network_config = self.config.get('network', {})

        self.git = git_client or GitClient(timeout=git_config.get('timeout_seconds'))
        self.probe = probe or ReachabilityProbe(timeout=network_config.get('timeout_seconds', 10))
        self.check_reachability = bool(network_config.get('check_reachability', True))
        self.default_depth = git_config.get('clone_depth')

    def prepare(self, identity: RepositoryIdentity, root: PathLike) -> Path:
        """
        Create the owner directory (and any missing parents).

        Returns:
            The owner directory

        Raises:
            FilesystemPreparationError: the directory cannot be created
        """
        owner_path = identity.owner_path(root)
        try:
            owner_path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise FilesystemPreparationError(
                f"Cannot create directory {owner_path}: {e}", path=str(owner_path)
            ) from e
        return owner_path

    def synchronize(
        self,
        identity: RepositoryIdentity,
        root: PathLike,
        clone_only: bool = False,
        depth: Optional[int] = None
    ) -> SyncResult:
        """
        Clone or pull the mirror of identity below root.

        Args:
            identity: Resolved repository identity
            root: Root directory of all mirrors
            clone_only: Never pull; leave existing mirrors untouched
            depth: Shallow clone depth (falls back to git.clone_depth)

        Returns:
            SyncResult describing what happened

        Raises:
            FilesystemPreparationError: the owner directory cannot be created
        """
        owner_path = self.prepare(identity, root)
        repo_path = owner_path / identity.repo
        url = identity.url
        present = repo_path.exists()

        if present and clone_only:
            logger.info(f"{identity} already present at {repo_path}, not updating")
            return SyncResult(
                identity=identity,
                path=repo_path,
                status=SyncStatus.SKIPPED,
                action=SyncAction.EXISTS,
                message="Repository already exists",
            )

        if self.check_reachability and not self.probe.is_reachable(url):
            logger.error(f"Repository {url} is not reachable, skipping")
            return SyncResult(
                identity=identity,
                path=repo_path,
                status=SyncStatus.SKIPPED,
                action=SyncAction.UNREACHABLE,
                error=f"{url} is not reachable",
            )

        if present:
            logger.info(f"Updating {identity} in {repo_path}")
            result = self.git.pull(repo_path)
            return self._result(identity, repo_path, result, SyncAction.PULLED, SyncAction.PULL_FAILED)

        depth = depth if depth is not None else self.default_depth
        logger.info(f"Cloning {url} into {repo_path}")
        result = self.git.clone(url, identity.repo, cwd=owner_path, depth=depth)
        return self._result(identity, repo_path, result, SyncAction.CLONED, SyncAction.CLONE_FAILED)

    def _result(
        self,
        identity: RepositoryIdentity,
        repo_path: Path,
        git_result: GitResult,
        success_action: str,
        failure_action: str
    ) -> SyncResult:
        """Turn a GitResult into a SyncResult, logging failures."""
        if git_result.ok:
            return SyncResult(
                identity=identity,
                path=repo_path,
                status=SyncStatus.SUCCESS,
                action=success_action,
                message=git_result.stdout or None,
                returncode=0,
            )

        operation = "clone" if failure_action == SyncAction.CLONE_FAILED else "pull"
        if not git_result.launched:
            logger.error(
                f"Could not run git {operation} of {identity.url} in {git_result.cwd}"
            )
        logger.warning(
            f"git {operation} of {identity.url} in {git_result.cwd} "
            f"failed with exit status {git_result.returncode}"
        )
        if git_result.stderr:
            logger.warning(git_result.stderr)

        return SyncResult(
            identity=identity,
            path=repo_path,
            status=SyncStatus.FAILED,
            action=failure_action,
            error=git_result.stderr or f"git {operation} failed",
            returncode=git_result.returncode,
        )


def synchronize(
    identity: RepositoryIdentity,
    root: PathLike,
    clone_only: bool = False,
    depth: Optional[int] = None,
    config: Optional[Dict[str, Any]] = None
) -> SyncResult:
    """Synchronize one mirror with a default MirrorService."""
    return MirrorService(config=config).synchronize(identity, root, clone_only=clone_only, depth=depth)
