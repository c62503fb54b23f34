"""
Reachability probe for repository URLs.

Answers one question: does the canonical repository page respond?
Transport details (TLS, redirects) are left to requests.
"""

import logging
from typing import Optional

import requests

logger = logging.getLogger(__name__)

USER_AGENT = "gitdigger"


class ReachabilityProbe:
    """
    HTTP GET check collapsed into a boolean.

    Network errors, timeouts and non-success statuses all count as
    unreachable.
    """

    def __init__(self, timeout: float = 10, session: Optional[requests.Session] = None):
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.setdefault('User-Agent', USER_AGENT)

    def is_reachable(self, url: str) -> bool:
        try:
            response = self.session.get(url, timeout=self.timeout, allow_redirects=True)
        except requests.RequestException as e:
            logger.debug(f"Probe of {url} failed: {e}")
            return False

        try:
            if response.ok:
                return True
            logger.debug(f"Probe of {url} returned status {response.status_code}")
            return False
        finally:
            response.close()

    def __call__(self, url: str) -> bool:
        return self.is_reachable(url)
