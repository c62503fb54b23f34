"""
Git client infrastructure for gitdigger.

Provides a clean abstraction over git command execution.
All git operations go through this client, making them:
- Easy to mock for testing
- Consistent in error handling
- Independent of the process working directory
"""

import subprocess
from dataclasses import dataclass
from typing import Optional, List
from pathlib import Path
import logging

logger = logging.getLogger(__name__)


@dataclass
class GitResult:
    """Result of one git invocation."""
    command: List[str]
    cwd: str
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def launched(self) -> bool:
        """False when the process could not be started or timed out."""
        return self.returncode != -1


class GitClient:
    """
    Abstraction over git commands.

    Commands are run as argument lists with an explicit working
    directory; the client never changes the process working directory.

    Example:
        client = GitClient()
        result = client.clone("https://github.com/user/repo", "repo", cwd="/mirrors/github.com/user")
        if not result.ok:
            print(result.stderr)
    """

    def __init__(self, timeout: Optional[int] = None, executable: str = "git"):
        """
        Initialize GitClient.

        Args:
            timeout: Command timeout in seconds (default: no timeout)
            executable: git binary to run
        """
        self.timeout = timeout
        self.executable = executable

    def _run(self, args: List[str], cwd: str) -> GitResult:
        """
        Run a git command.

        Args:
            args: Arguments after the git executable
            cwd: Working directory

        Returns:
            GitResult; returncode is -1 if the process could not be
            launched or timed out
        """
        cmd = [self.executable] + list(args)
        cwd = str(cwd)
        logger.debug(f"Running command in '{cwd}': {' '.join(cmd)}")

        try:
            result = subprocess.run(
                cmd,
                cwd=cwd,
                capture_output=True,
                text=True,
                timeout=self.timeout
            )
        except subprocess.TimeoutExpired:
            logger.warning(f"Git command timed out after {self.timeout}s: {' '.join(cmd)}")
            return GitResult(cmd, cwd, -1, stderr="timed out")
        except OSError as e:
            logger.error(f"Could not run '{' '.join(cmd)}' in '{cwd}': {e}")
            return GitResult(cmd, cwd, -1, stderr=str(e))

        stdout = (result.stdout or "").strip()
        stderr = (result.stderr or "").strip()
        if stdout:
            logger.debug(stdout)
        if result.returncode != 0 and stderr:
            logger.debug(stderr)

        return GitResult(cmd, cwd, result.returncode, stdout, stderr)

    def is_git_repo(self, path) -> bool:
        """Check if path is a git repository."""
        git_dir = Path(path) / ".git"
        return git_dir.exists()

    def clone(self, url: str, name: str, cwd, depth: Optional[int] = None) -> GitResult:
        """
        Clone url into cwd/name.

        Args:
            url: Repository URL
            name: Target directory name, relative to cwd
            cwd: Directory to run the clone in
            depth: Create a shallow clone with this many commits
        """
        args = ["clone"]
        if depth:
            args += ["--depth", str(depth)]
        args += [url, name]
        return self._run(args, cwd=cwd)

    def pull(self, path) -> GitResult:
        """Pull the current branch of the repository at path."""
        return self._run(["pull"], cwd=path)
