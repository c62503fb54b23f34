"""
Standard exit codes and errors for the gitdigger command.

Every failure the caller has to act on exits with 1; soft failures
(unreachable remote, failed clone/pull) still exit with 0.
"""
from typing import Optional

SUCCESS = 0              # Successful termination
GENERAL_ERROR = 1        # Bad URL, unusable root folder
USAGE_ERROR = 1          # Wrong arguments
INTERRUPTED = 130        # Terminated by Ctrl+C (SIGINT)


class CommandError(Exception):
    """
    Exception that commands can raise to indicate specific exit codes.
    """
    def __init__(self, message: str, exit_code: int = GENERAL_ERROR):
        super().__init__(message)
        self.exit_code = exit_code


class ParseFailure(CommandError):
    """Raised when a URL does not match any known repository host."""
    def __init__(self, url: str):
        super().__init__(f"Not a recognized repository URL: '{url}'")
        self.url = url


class FilesystemPreparationError(CommandError):
    """Raised when the mirror directories cannot be prepared."""
    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path
