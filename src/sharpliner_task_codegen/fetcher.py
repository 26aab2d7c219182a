"""HTTP client for task documentation pages, built on httpx."""

import logging

import httpx

from sharpliner_task_codegen.config import DEFAULT_TIMEOUT, USER_AGENT

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """The documentation page could not be retrieved."""


class PageFetcher:
    """Fetches raw page markup. Transport failures raise FetchError."""

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = USER_AGENT,
        transport: httpx.BaseTransport | None = None,
    ):
        self.timeout = timeout
        self.user_agent = user_agent
        self.transport = transport

    def fetch(self, url: str) -> str:
        """Return the page body as text."""
        if not url or not url.strip():
            raise ValueError("url cannot be empty")

        logger.debug("GET %s (timeout=%ss)", url, self.timeout)
        try:
            with httpx.Client(
                timeout=self.timeout,
                headers={"User-Agent": self.user_agent},
                follow_redirects=True,
                transport=self.transport,
            ) as client:
                response = client.get(url)
                response.raise_for_status()
                return response.text
        except httpx.HTTPStatusError as e:
            raise FetchError(f"HTTP error {e.response.status_code} fetching {url}") from e
        except httpx.HTTPError as e:
            raise FetchError(f"Network error fetching {url}: {e}") from e
