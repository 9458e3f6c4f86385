"""HTTP access to the publication sources."""

import logging
from typing import Dict, Optional

import requests

from ..config import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT
from ..exceptions import DocumentNotFoundError, TransportError

logger = logging.getLogger(__name__)


class HttpFetcher:
    """
    Thin wrapper around a requests.Session for the chart providers.

    Failures are reported as two distinct errors: DocumentNotFoundError when
    the source answers 404, TransportError for everything else (connection
    problems, timeouts, other error statuses). No retry is attempted.

    Example:
        fetcher = HttpFetcher()
        html = fetcher.get_text(url)
    """

    def __init__(self, session: Optional[requests.Session] = None,
                 timeout: float = DEFAULT_TIMEOUT, user_agent: str = DEFAULT_USER_AGENT):
        """
        Args:
            session: Optional requests.Session for dependency injection (testing).
            timeout: HTTP request timeout in seconds.
            user_agent: Default User-Agent header.
        """
        self.timeout = timeout
        self.user_agent = user_agent
        if session is None:
            self.session = requests.Session()
            self.session.headers["User-Agent"] = user_agent
        else:
            self.session = session
            self.session.headers.setdefault("User-Agent", user_agent)

    def _request(self, method: str, url: str, **kwargs) -> requests.Response:
        kwargs.setdefault('timeout', self.timeout)
        logger.debug(f"{method} {url}")
        try:
            response = self.session.request(method, url, **kwargs)
        except requests.RequestException as e:
            raise TransportError(f"{method} {url} failed: {e}", url=url) from e
        if response.status_code == 404:
            raise DocumentNotFoundError(f"{url} not found", url=url)
        try:
            response.raise_for_status()
        except requests.HTTPError as e:
            raise TransportError(f"{method} {url} failed: {e}", url=url) from e
        return response

    def get_text(self, url: str, headers: Optional[Dict[str, str]] = None) -> str:
        """GET a page and return its decoded text."""
        return self._request('GET', url, headers=headers).text

    def post_text(self, url: str, data: Dict[str, str], headers: Optional[Dict[str, str]] = None) -> str:
        """POST a form and return the decoded response text."""
        return self._request('POST', url, data=data, headers=headers).text

    def head(self, url: str, follow_redirects: bool = False,
             headers: Optional[Dict[str, str]] = None) -> requests.Response:
        """HEAD a resource, optionally following redirects to its final location."""
        return self._request('HEAD', url, allow_redirects=follow_redirects, headers=headers)

    def set_cookie(self, name: str, value: str, domain: str = '') -> None:
        """Add a cookie to the session."""
        self.session.cookies.set(name, value, domain=domain)

    def has_cookie(self, name: str) -> bool:
        return name in self.session.cookies.keys()

    def cookie_header(self) -> str:
        """Session cookies as a Cookie header value, for requests made from another session."""
        return "; ".join(f"{name}={value}" for name, value in self.session.cookies.items())
